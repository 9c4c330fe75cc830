"""
Time helpers shared by the record store and the alert client.

Datetimes are stored and compared as naive UTC values.
"""
from datetime import datetime, timedelta, timezone
from typing import Optional, Tuple


def utc_now() -> datetime:
    """Current time as a naive UTC datetime."""
    return datetime.now(timezone.utc).replace(tzinfo=None)


def to_naive_utc(value: Optional[datetime]) -> Optional[datetime]:
    """
    Normalize a datetime to naive UTC.

    Aware values are converted to UTC; naive values are assumed to already
    be UTC and returned unchanged.
    """
    if value is None or value.tzinfo is None:
        return value
    return value.astimezone(timezone.utc).replace(tzinfo=None)


def day_bounds(moment: datetime) -> Tuple[datetime, datetime]:
    """Return the half-open [start, end) range of the calendar day holding ``moment``."""
    start = moment.replace(hour=0, minute=0, second=0, microsecond=0)
    return start, start + timedelta(days=1)
