from __future__ import annotations

import logging
import math
import re
from enum import Enum
from typing import Union

from lease_schedule.inputs.schema import PaymentFrequency

logger = logging.getLogger(__name__)

DEFAULT_TOTAL_MONTHS = 12
DEFAULT_MONTHS_PER_PAYMENT = 1

MONTHS_PER_PAYMENT = {
    PaymentFrequency.MONTHLY.value: 1,
    PaymentFrequency.QUARTERLY.value: 3,
    PaymentFrequency.SEMI_ANNUALLY.value: 6,
    PaymentFrequency.ANNUALLY.value: 12,
}

_YEAR_TOKEN = re.compile(r"([0-9]+)\s*year", re.IGNORECASE)
_MONTH_TOKEN = re.compile(r"([0-9]+)\s*month", re.IGNORECASE)

Frequency = Union[PaymentFrequency, str]


def get_total_months(duration: str) -> int:
    """
    Parse a free-text duration to a month count ("1 year 2 months" -> 14).

    Falls back to DEFAULT_TOTAL_MONTHS (one year) when nothing usable is found.
    """
    if not duration:
        return DEFAULT_TOTAL_MONTHS

    text = str(duration)
    total = 0
    year_match = _YEAR_TOKEN.search(text)
    month_match = _MONTH_TOKEN.search(text)
    if year_match:
        total += int(year_match.group(1)) * 12
    if month_match:
        total += int(month_match.group(1))

    if total == 0:
        logger.debug("No duration in %r; defaulting to %s months", duration, DEFAULT_TOTAL_MONTHS)
        return DEFAULT_TOTAL_MONTHS
    return total


def get_months_per_payment(frequency: Frequency) -> int:
    key = frequency.value if isinstance(frequency, Enum) else frequency
    months = MONTHS_PER_PAYMENT.get(key) if isinstance(key, str) else None
    if months is None:
        logger.debug("Unknown payment frequency %r; using %s month(s)", frequency, DEFAULT_MONTHS_PER_PAYMENT)
        return DEFAULT_MONTHS_PER_PAYMENT
    return months


def get_payment_count(total_months: int, frequency: Frequency) -> int:
    # 13 months, quarterly -> 5 payments
    return math.ceil(total_months / get_months_per_payment(frequency))


def calculate_months_for_payment(payment_number: int, total_months: int, frequency: Frequency) -> int:
    """
    Months covered by payment `payment_number` (1-based).

    Every payment covers a full period except the last, which takes whatever
    remains (payment 5 of "1 year 1 month" quarterly -> 1 month).
    """
    months_per_payment = get_months_per_payment(frequency)
    if payment_number == get_payment_count(total_months, frequency):
        return total_months - (payment_number - 1) * months_per_payment
    return months_per_payment
