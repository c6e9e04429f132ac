import math
from datetime import date, datetime, time, timedelta, timezone
from typing import Optional, Union

from dateutil import parser

from app.schemas.grading_period import PeriodInterval

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)
ONE_MS = timedelta(milliseconds=1)

DateLike = Union[str, date, datetime, None]


def parse_date(value: DateLike) -> Optional[datetime]:
    """
    Parse a date string (or date/datetime) into an aware datetime.

    Strings go through dateutil, so "2018-09-05", "09/05/2018", "2018-9-5",
    "Sep 5, 2018" and "2018-09-05T00:00:00Z" are all accepted. Naive values
    are treated as UTC. Returns None when the value can't be parsed.
    """
    if isinstance(value, datetime):
        dt = value
    elif isinstance(value, date):
        dt = datetime.combine(value, time.min)
    elif isinstance(value, str) and value.strip():
        try:
            dt = parser.parse(value.strip())
        except (ValueError, OverflowError):
            return None
    else:
        return None

    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return dt


def to_epoch_ms(value: DateLike) -> float:
    """Epoch milliseconds for a date value, NaN when it can't be parsed."""
    dt = parse_date(value)
    if dt is None:
        return math.nan
    return float((dt - EPOCH) // ONE_MS)


def period_interval(start: DateLike, end: DateLike) -> PeriodInterval:
    """
    Inclusive interval covering whole days:
    - start: 00:00:00.000 UTC of the start date
    - end: 23:59:59.999 UTC of the end date
    """
    start_dt = parse_date(start)
    end_dt = parse_date(end)

    start_ms = to_epoch_ms(start_dt.date()) if start_dt else math.nan
    end_ms = to_epoch_ms(end_dt.date() + timedelta(days=1)) - 1 if end_dt else math.nan

    return PeriodInterval(start=start_ms, end=end_ms)
