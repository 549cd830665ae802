"""
Parsing of the timestamps Gandalf returns in repository logs.

Older servers emit git's textual date format, newer ones RFC 3339, so both
are accepted.
"""

import re
from datetime import datetime, timedelta, timezone

# Go layout "Mon Jan _2 15:04:05 2006 -0700"
GIT_TIME_FORMAT = "%a %b %d %H:%M:%S %Y %z"

# Date, "T", time, optional fraction of any precision, then "Z" or a numeric offset
_RFC3339_PATTERN = re.compile(
    r"(\d{4})-(\d{2})-(\d{2})T(\d{2}):(\d{2}):(\d{2})(?:\.(\d+))?"
    r"(?:(Z)|([+-])(\d{2}):(\d{2}))"
)


def _parse_rfc3339(value: str) -> datetime | None:
    match = _RFC3339_PATTERN.fullmatch(value)
    if match is None:
        return None

    year, month, day, hour, minute, second, fraction, utc, sign, off_hours, off_minutes = match.groups()
    if utc:
        tz = timezone.utc
    else:
        offset = timedelta(hours=int(off_hours), minutes=int(off_minutes))
        tz = timezone(-offset if sign == "-" else offset)

    # datetime keeps microseconds, finer digits are dropped
    microsecond = int((fraction or "").ljust(6, "0")[:6])
    return datetime(
        int(year), int(month), int(day),
        int(hour), int(minute), int(second), microsecond,
        tzinfo=tz,
    )


def parse_git_time(value: str | None) -> datetime | None:
    """
    Parse a Gandalf timestamp.

    Args:
        value: Raw timestamp string from the response body

    Returns:
        Timezone-aware datetime, or None for an empty or missing value

    Raises:
        ValueError: If the value matches neither the git nor the RFC 3339 format
    """
    if value is None or value == "":
        return None

    try:
        return datetime.strptime(value, GIT_TIME_FORMAT)
    except ValueError:
        pass

    try:
        parsed = _parse_rfc3339(value)
    except (ValueError, OverflowError):
        parsed = None
    if parsed is None:
        raise ValueError(f"unrecognized git time: {value!r}")
    return parsed


def format_git_time(value: datetime) -> str:
    """Render a datetime the way git prints commit dates."""
    day = f"{value.day:2d}"
    return value.strftime(f"%a %b {day} %H:%M:%S %Y %z")
