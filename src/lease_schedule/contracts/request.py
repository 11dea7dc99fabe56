from __future__ import annotations

from datetime import date, datetime, time, timezone
from typing import Any, Optional

from lease_schedule.inputs.normalize import parse_amount, to_start_date
from lease_schedule.schedule.engine import ScheduleSummary

SERVICE_CHARGE_PAYMENT_TYPE = "fixed-amount"


class ContractRequestError(ValueError):
    pass


def _require(name: str, value: Any) -> str:
    if value is None or not str(value).strip():
        raise ContractRequestError(f"{name} is required")
    return str(value)


def _iso_timestamp(value: Any, name: str) -> str:
    d = to_start_date(value)
    if d is None:
        raise ContractRequestError(f"{name} must be a valid date; got {value!r}")
    ts = datetime.combine(d, time(0, 0), tzinfo=timezone.utc)
    return ts.strftime("%Y-%m-%dT%H:%M:%S.000Z")


def build_create_contract_request(
    summary: ScheduleSummary,
    *,
    owner: str,
    tenant: str,
    property_id: str,
    unit: str,
    start_date: date | datetime | str,
    end_date: date | datetime | str,
    currency: str,
    service_charge: Optional[str | float] = None,
    service_charge_currency: Optional[str] = None,
    deposit: Optional[str | float] = None,
) -> dict[str, Any]:
    """
    Map a computed schedule plus the form's identifiers into the backend
    "create contract" payload.

    Only the contract-level figures travel (annual rent, total VAT, VAT %);
    individual payments are not sent.
    """
    start = _iso_timestamp(start_date, "start_date")
    end = _iso_timestamp(end_date, "end_date")
    if end <= start:
        raise ContractRequestError(f"end_date {end} is not after start_date {start}")

    charge_currency = service_charge_currency or currency
    return {
        "paymentSchedule": [],
        "property": _require("property_id", property_id),
        "unit": _require("unit", unit),
        "owner": _require("owner", owner),
        "tenant": _require("tenant", tenant),
        "startDate": start,
        "endDate": end,
        "paymentFrequency": str(summary.payment_frequency).lower(),
        "amount": {
            "value": float(summary.total_contract_value),
            "currency": currency,
        },
        "serviceCharge": {
            "paymentType": SERVICE_CHARGE_PAYMENT_TYPE,
            "value": parse_amount(service_charge),
            "currency": charge_currency,
        },
        "VAT": {
            "value": summary.total_vat_amount,
            "currency": charge_currency,
            "percentage": summary.vat_percentage,
        },
        "deposit": parse_amount(deposit) if deposit is not None else summary.security_deposit,
    }
