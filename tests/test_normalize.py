from __future__ import annotations

from datetime import date, datetime

import pandas as pd

from lease_schedule.inputs.normalize import parse_amount, to_start_date
from lease_schedule.inputs.schema import PaymentFrequency, ScheduleInputs


def test_parse_amount_strips_thousands_separators():
    assert parse_amount("1,200.50") == 1200.50
    assert parse_amount("1,000,000") == 1_000_000.0
    assert parse_amount(" 7.5 ") == 7.5


def test_parse_amount_invalid_is_zero():
    assert parse_amount("") == 0.0
    assert parse_amount("abc") == 0.0
    assert parse_amount(None) == 0.0
    assert parse_amount("nan") == 0.0


def test_parse_amount_reads_leading_number():
    assert parse_amount("12abc") == 12.0
    assert parse_amount("15%") == 15.0
    assert parse_amount(".5") == 0.5


def test_parse_amount_accepts_numbers():
    assert parse_amount(2400) == 2400.0
    assert parse_amount(float("nan")) == 0.0


def test_to_start_date_formats():
    assert to_start_date("2025-01-01") == date(2025, 1, 1)
    assert to_start_date("20250315") == date(2025, 3, 15)
    assert to_start_date("2025-01-01T00:00:00.000Z") == date(2025, 1, 1)
    assert to_start_date(datetime(2025, 6, 30, 14, 5)) == date(2025, 6, 30)
    assert to_start_date(pd.Timestamp("2025-02-10")) == date(2025, 2, 10)


def test_to_start_date_unusable_is_none():
    assert to_start_date(None) is None
    assert to_start_date("") is None
    assert to_start_date("not a date") is None
    assert to_start_date(pd.NaT) is None


def test_inputs_from_wire_dict():
    inputs = ScheduleInputs.from_dict(
        {
            "rentalAmount": "12,000",
            "serviceCharge": "2,400",
            "vatPercentage": "15",
            "paymentFrequency": "Quarterly",
            "duration": "1 year",
            "startDate": "2025-01-01",
        }
    )
    assert inputs.rental_amount == "12,000"
    assert inputs.security_deposit == ""
    assert inputs.currency == ""
    assert inputs.start_date == "2025-01-01"

    wire = ScheduleInputs(payment_frequency=PaymentFrequency.ANNUALLY, start_date=date(2025, 1, 1)).to_dict()
    assert wire["paymentFrequency"] == "Annually"
    assert wire["startDate"] == "2025-01-01"


def test_parse_amount_reads_ascii_digits_only():
    assert parse_amount("١٢٠٠") == 0.0
    assert parse_amount("12٣") == 12.0
