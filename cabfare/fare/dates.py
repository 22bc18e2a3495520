"""Date helpers shared by the outstation strategy and the cache key."""

from datetime import UTC, date, datetime

_SECONDS_PER_DAY = 86_400


def as_utc_datetime(value: datetime | date) -> datetime:
    """Promote a date or naive datetime to an aware UTC datetime."""
    if not isinstance(value, datetime):
        return datetime(value.year, value.month, value.day, tzinfo=UTC)
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value


def epoch_millis(value: datetime | date | None) -> int:
    """Milliseconds since the epoch, or 0 when the date is absent."""
    if value is None:
        return 0
    return int(as_utc_datetime(value).timestamp() * 1000)


def nights_between(pickup: datetime | date, return_: datetime | date) -> int:
    """Whole days elapsed from pickup to return, never negative."""
    elapsed = as_utc_datetime(return_) - as_utc_datetime(pickup)
    return max(0, int(elapsed.total_seconds() // _SECONDS_PER_DAY))
