from datetime import date, datetime, timezone


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def utc_today() -> date:
    return utcnow().date()


def as_utc(value: datetime | None) -> datetime | None:
    """Normalize a timestamp to aware UTC.

    SQLite drops tzinfo on the way in, so naive values read back from storage
    are treated as UTC.
    """
    if value is None:
        return None
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def hours_between(start: datetime, end: datetime) -> float:
    return (as_utc(end) - as_utc(start)).total_seconds() / 3600


def minutes_between(start: datetime, end: datetime) -> float:
    return (as_utc(end) - as_utc(start)).total_seconds() / 60


def to_date(value: date | datetime) -> date:
    """Calendar date of a date or datetime, in the value's own time zone."""
    if isinstance(value, datetime):
        return value.date()
    return value
