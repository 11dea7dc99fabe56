from __future__ import annotations

import logging
from datetime import date
from typing import Optional

from dateutil.relativedelta import relativedelta

from lease_schedule.schedule.terms import Frequency, get_months_per_payment

logger = logging.getLogger(__name__)

DISPLAY_DATE_FMT = "%d.%m.%Y"


def create_payment_date(start_date: Optional[date], payment_number: int, frequency: Frequency) -> Optional[date]:
    """
    Due date of payment `payment_number`: the start date moved forward by
    (payment_number - 1) whole periods. Day-of-month is clamped to the end of
    shorter months (31 Jan + 1 month -> 28/29 Feb).
    """
    if start_date is None:
        return None
    months_from_start = (payment_number - 1) * get_months_per_payment(frequency)
    try:
        return start_date + relativedelta(months=months_from_start)
    except ValueError:
        logger.debug("Due date for payment %s falls outside the calendar", payment_number)
        return None


def format_date(d: Optional[date]) -> str:
    if d is None:
        return ""
    return d.strftime(DISPLAY_DATE_FMT)
