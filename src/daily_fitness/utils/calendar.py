"""Calendar-day helpers.

All day-keyed comparisons go through ``same_day`` so that records created at
different times of the same local day are treated as one slot.
"""

from datetime import datetime, timedelta

DAY_NAMES = ["Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun"]
MONTH_NAMES = [
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
]


def same_day(a: datetime, b: datetime) -> bool:
    """Check whether two instants fall on the same local calendar date."""
    return a.date() == b.date()


def start_of_day(instant: datetime) -> datetime:
    """Get midnight of the instant's calendar date."""
    return instant.replace(hour=0, minute=0, second=0, microsecond=0)


def end_of_day(instant: datetime) -> datetime:
    """Get the last representable moment of the instant's calendar date."""
    return instant.replace(hour=23, minute=59, second=59, microsecond=999999)


def add_days(instant: datetime, days: int) -> datetime:
    """Shift an instant by whole calendar days, keeping the wall-clock time."""
    return instant + timedelta(days=days)


def start_of_week(instant: datetime) -> datetime:
    """Get midnight of the Sunday starting the week that contains ``instant``."""
    # weekday(): Monday=0 .. Sunday=6
    days_since_sunday = (instant.weekday() + 1) % 7
    return start_of_day(add_days(instant, -days_since_sunday))


def end_of_week(instant: datetime) -> datetime:
    """Get the exclusive upper bound of the week containing ``instant``."""
    return add_days(start_of_week(instant), 7)


def day_label(instant: datetime) -> str:
    """Short weekday name, e.g. ``Mon``."""
    return DAY_NAMES[instant.weekday()]


def date_label(instant: datetime) -> str:
    """Short month and day, e.g. ``Oct 19``."""
    return f"{MONTH_NAMES[instant.month - 1]} {instant.day}"


def day_heading(instant: datetime) -> str:
    """Full day heading used for history groups, e.g. ``Mon Oct 19 2026``."""
    return f"{day_label(instant)} {date_label(instant)} {instant.year}"


def parse_day(value: "str | datetime") -> datetime:
    """Parse an ISO date or datetime string into a local, offset-free datetime.

    A value carrying a UTC offset is converted to local wall-clock time so it
    compares with the rest of the tracker's datetimes.

    Raises:
        ValueError: If the value is not an ISO date/datetime
    """
    if isinstance(value, datetime):
        parsed = value
    else:
        try:
            parsed = datetime.fromisoformat(str(value).strip())
        except ValueError:
            raise ValueError(f"Cannot parse date: {value!r} (expected YYYY-MM-DD)")
    if parsed.tzinfo is not None:
        parsed = parsed.astimezone().replace(tzinfo=None)
    return parsed
