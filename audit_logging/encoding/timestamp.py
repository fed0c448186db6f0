"""Human-readable timestamps for plain-text audit lines."""

from datetime import datetime

# strftime's %a/%b follow LC_TIME; audit lines must not.
WEEKDAYS = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")
MONTHS = (
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
)


def format_human_timestamp(when: datetime) -> str:
    """Format ``when`` as ``Mon, 05 Mar 2018 10:12:13.123456 NZDT``.

    The timezone name is omitted when ``when`` is naive.
    """
    text = (
        f"{WEEKDAYS[when.weekday()]}, {when.day:02d} {MONTHS[when.month - 1]} "
        f"{when.year:04d} {when.hour:02d}:{when.minute:02d}:{when.second:02d}"
        f".{when.microsecond:06d}"
    )
    zone = when.tzname()
    if zone:
        text = f"{text} {zone}"
    return text


def audit_get_timestamp() -> str:
    """Return the current local time as a human-readable audit timestamp."""
    return format_human_timestamp(datetime.now().astimezone())
