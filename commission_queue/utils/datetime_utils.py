"""Date and time utilities."""

from datetime import date, datetime, time
from typing import Optional, Union

DateLike = Union[date, datetime]


def as_datetime(value: DateLike) -> datetime:
    """Promote a bare date to midnight of that day.

    Timezone-aware values are converted to local time and made naive so
    they compare against reference dates from the CLI or the clock.
    """
    if isinstance(value, datetime):
        if value.tzinfo is not None:
            return value.astimezone().replace(tzinfo=None)
        return value
    return datetime.combine(value, time.min)


def is_same_day(first: DateLike, second: DateLike) -> bool:
    """Check if two dates fall on the same calendar day."""
    return as_datetime(first).date() == as_datetime(second).date()


def is_mandatory_due(due_date: Optional[DateLike], today: DateLike) -> bool:
    """A task is mandatory when undated, due on the same day, or overdue."""
    if due_date is None:
        return True
    return is_same_day(due_date, today) or as_datetime(due_date) < as_datetime(today)


def is_due_by(due_date: Optional[DateLike], today: DateLike) -> bool:
    """Ordering predicate: undated or due at or before the reference instant."""
    if due_date is None:
        return True
    return as_datetime(due_date) <= as_datetime(today)


def parse_date(value: Union[str, DateLike, None]) -> Optional[datetime]:
    """Parse an ISO date or datetime string; empty values mean no date."""
    if value is None or value == '':
        return None
    if isinstance(value, (date, datetime)):
        return as_datetime(value)
    try:
        return as_datetime(datetime.fromisoformat(str(value)))
    except ValueError:
        raise ValueError(f"Invalid date: {value!r}") from None
