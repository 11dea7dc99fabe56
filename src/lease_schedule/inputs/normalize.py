from __future__ import annotations

import logging
import math
import re
from datetime import date, datetime
from typing import Any

import pandas as pd

logger = logging.getLogger(__name__)

# Leading ASCII decimal literal, parsed the way a lenient float reader does ("12abc" -> 12).
_NUMBER_PREFIX = re.compile(r"^\s*[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")

DATE_FMT = "%Y-%m-%d"
COMPACT_FMT = "%Y%m%d"


def parse_amount(text: Any) -> float:
    """
    Convert a money / percentage input to a number.

    Thousands separators are stripped ("1,200.50" -> 1200.5). Empty or
    non-numeric text yields 0.0 instead of an error.
    """
    if text is None:
        return 0.0
    if isinstance(text, (int, float)) and not isinstance(text, bool):
        value = float(text)
        return value if math.isfinite(value) else 0.0

    cleaned = str(text).replace(",", "")
    m = _NUMBER_PREFIX.match(cleaned)
    if m is None:
        if cleaned.strip():
            logger.debug("Unparseable amount %r; using 0", text)
        return 0.0

    value = float(m.group(0))
    return value if math.isfinite(value) else 0.0


def to_start_date(date_like: Any) -> date | None:
    """
    Normalize a contract start date to a plain date.

    Accepts date / datetime / pandas Timestamp, 'YYYY-MM-DD', 'YYYYMMDD' or a
    full ISO datetime string (time and zone are dropped). Returns None for
    empty or unparseable input.
    """
    if date_like is None:
        return None
    if isinstance(date_like, datetime):
        # Also covers pandas Timestamp and NaT.
        return None if pd.isna(date_like) else date_like.date()
    if isinstance(date_like, date):
        return date_like
    if not isinstance(date_like, str) or not date_like.strip():
        logger.debug("No usable start date in %r", date_like)
        return None

    s = date_like.strip()
    for fmt in (DATE_FMT, COMPACT_FMT):
        try:
            return datetime.strptime(s, fmt).date()
        except ValueError:
            continue
    try:
        ts = pd.Timestamp(s)
    except (ValueError, TypeError):
        logger.debug("Unparseable start date %r", date_like)
        return None
    if pd.isna(ts):
        return None
    return ts.date()
