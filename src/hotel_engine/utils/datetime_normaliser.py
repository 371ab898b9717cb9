from datetime import date, datetime


def from_iso_date(value: str) -> date:
    return date.fromisoformat(value)


def to_iso_date(value: date) -> str:
    return value.isoformat()


def from_iso_datetime(value: str) -> datetime:
    dt = datetime.fromisoformat(value)
    if dt.tzinfo is not None:
        raise ValueError("Stored timestamp must be a local date-time")
    return dt


def to_iso_datetime(value: datetime) -> str:
    return value.isoformat(timespec="seconds")


def days_between(start: date, end: date) -> int:
    return (end - start).days


def nights_between(check_in: date, check_out: date) -> int:
    return max(0, days_between(check_in, check_out))
