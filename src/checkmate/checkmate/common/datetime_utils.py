from __future__ import annotations

from datetime import date, datetime, time, timedelta


def now_local() -> datetime:
    """Current local time.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now()


def day_bounds(day: date) -> tuple[datetime, datetime]:
    """Inclusive start and end of a calendar day."""
    start = datetime.combine(day, time.min)
    return start, start + timedelta(days=1) - timedelta(microseconds=1)


def weekday_index(day: date) -> int:
    """Weekday with 0=Sunday .. 6=Saturday, as stored on shifts."""
    return day.isoweekday() % 7


def minutes_of_day(value: datetime | time) -> int:
    return value.hour * 60 + value.minute


def parse_clock(value: str) -> int:
    """Parse a zero-padded "HH:MM" clock string into minutes since midnight."""
    parts = value.strip().split(":")
    if len(parts) != 2:
        raise ValueError(f"Invalid clock string: {value!r}")
    hours, minutes = int(parts[0]), int(parts[1])
    if not (0 <= hours < 24 and 0 <= minutes < 60):
        raise ValueError(f"Invalid clock string: {value!r}")
    return hours * 60 + minutes


def format_hours_minutes(minutes: int) -> str:
    """Render a duration as "{hours}h {minutes}m", floored at zero."""
    minutes = max(int(minutes), 0)
    return f"{minutes // 60}h {minutes % 60}m"
