"""
Numeric and date helpers shared by the valuation calculators.

Stored amounts and rates arrive as decimal strings. Dates arrive as
``date``, ``datetime`` or ISO strings and are normalized to naive UTC
datetimes so they can be compared with each other.
"""

import math
from datetime import date, datetime, time, timezone
from decimal import Decimal
from typing import Optional, Union

from dateutil import parser as date_parser

DecimalLike = Union[str, int, float, Decimal, None]
DateLike = Union[str, date, datetime, None]

DAYS_PER_YEAR = 365.25
DAYS_PER_MONTH = 30.44
SECONDS_PER_DAY = 86400


def parse_decimal(value: DecimalLike) -> Optional[float]:
    """
    Parse a stored decimal value.

    Returns None when the value is absent (None or blank string) and NaN
    when it is present but not numeric. NaN is left to propagate through
    the arithmetic rather than being rejected here.
    """
    if value is None:
        return None
    if isinstance(value, (int, float, Decimal)):
        return float(value)

    text = str(value).strip()
    if not text:
        return None
    try:
        return float(text)
    except ValueError:
        return math.nan


def parse_amount(value: DecimalLike) -> float:
    """Parse a required amount; an absent value is treated as NaN."""
    parsed = parse_decimal(value)
    return math.nan if parsed is None else parsed


def is_number(value: Optional[float]) -> bool:
    """True for a parsed value that is present and not NaN."""
    return value is not None and not math.isnan(value)


def to_datetime(value: DateLike) -> Optional[datetime]:
    """Normalize a date-like value to a naive UTC datetime."""
    if value is None:
        return None
    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, date):
        return datetime.combine(value, time.min)
    else:
        parsed = date_parser.isoparse(str(value))

    if parsed.tzinfo is not None:
        parsed = parsed.astimezone(timezone.utc).replace(tzinfo=None)
    return parsed


def days_between(start: datetime, end: datetime) -> float:
    """Fractional days from start to end (negative if end is earlier)."""
    return (end - start).total_seconds() / SECONDS_PER_DAY


def years_between(start: datetime, end: datetime) -> float:
    """Elapsed years on a 365.25-day basis, clamped at zero."""
    return max(0.0, days_between(start, end) / DAYS_PER_YEAR)


def months_between(start: datetime, end: datetime) -> float:
    """Elapsed months on a 30.44-day basis, clamped at zero. Not rounded."""
    return max(0.0, days_between(start, end) / DAYS_PER_MONTH)


def utcnow() -> datetime:
    """Current time as a naive UTC datetime."""
    return datetime.now(timezone.utc).replace(tzinfo=None)


def floor_at_zero(value: float) -> float:
    """Clamp negatives to zero while letting NaN through."""
    if math.isnan(value) or value > 0:
        return value
    return 0.0
