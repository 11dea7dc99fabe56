from __future__ import annotations

from datetime import date

import pytest

from lease_schedule.contracts.request import ContractRequestError, build_create_contract_request
from lease_schedule.inputs.schema import ScheduleInputs
from lease_schedule.schedule.engine import build_payment_schedule


def _summary():
    return build_payment_schedule(
        ScheduleInputs(
            rental_amount="12,000",
            service_charge="2,400",
            vat_percentage="15",
            security_deposit="1,500",
            payment_frequency="Semi-annually",
            duration="1 year",
            start_date="2025-01-01",
            currency="SAR",
        )
    )


def _request(summary, **overrides):
    kwargs = dict(
        owner="owner-1",
        tenant="tenant-7",
        property_id="prop-3",
        unit="unit-12",
        start_date="2025-01-01",
        end_date=date(2025, 12, 31),
        currency="SAR",
        service_charge="2,400",
    )
    kwargs.update(overrides)
    return build_create_contract_request(summary, **kwargs)


def test_payload_carries_contract_level_figures():
    payload = _request(_summary())

    assert payload["paymentSchedule"] == []
    assert payload["owner"] == "owner-1"
    assert payload["tenant"] == "tenant-7"
    assert payload["property"] == "prop-3"
    assert payload["unit"] == "unit-12"
    assert payload["startDate"] == "2025-01-01T00:00:00.000Z"
    assert payload["endDate"] == "2025-12-31T00:00:00.000Z"
    assert payload["paymentFrequency"] == "semi-annually"
    assert payload["amount"] == {"value": 12_000.0, "currency": "SAR"}
    assert payload["serviceCharge"] == {"paymentType": "fixed-amount", "value": 2_400.0, "currency": "SAR"}
    assert payload["VAT"] == {"value": 2_160.0, "currency": "SAR", "percentage": 15.0}
    assert payload["deposit"] == 1_500.0


def test_explicit_deposit_and_service_charge_currency():
    payload = _request(_summary(), deposit="3,000", service_charge_currency="USD")
    assert payload["deposit"] == 3_000.0
    assert payload["serviceCharge"]["currency"] == "USD"
    assert payload["VAT"]["currency"] == "USD"
    assert payload["amount"]["currency"] == "SAR"


def test_missing_identifier_rejected():
    with pytest.raises(ContractRequestError):
        _request(_summary(), tenant="")
    with pytest.raises(ContractRequestError):
        _request(_summary(), unit=None)


def test_bad_dates_rejected():
    with pytest.raises(ContractRequestError):
        _request(_summary(), start_date="soon")
    with pytest.raises(ContractRequestError):
        _request(_summary(), start_date="2025-06-01", end_date="2025-01-01")
    with pytest.raises(ContractRequestError):
        _request(_summary(), start_date="2025-01-01", end_date=date(2025, 1, 1))
