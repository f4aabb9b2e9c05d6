"""Metadata value parsing utilities."""

import re
from datetime import datetime, timedelta, timezone


DATE_FORMATS = [
    "%Y:%m:%d %H:%M:%S",
    "%Y:%m:%d %H:%M:%S.%f",
    "%Y-%m-%d %H:%M:%S",
    "%Y-%m-%d %H:%M:%S.%f",
    "%Y-%m-%dT%H:%M:%S",
    "%Y-%m-%dT%H:%M:%S.%f",
]

ZERO_DATE = "0000:00:00 00:00:00"

TZ_PATTERN = re.compile(r"(Z|[+-]\d{2}:?\d{2})$")


def parse_offset(offset: str) -> timezone:
    """Parse a trailing UTC offset such as ``+02:00``, ``-0500`` or ``Z``."""
    if offset == "Z":
        return timezone.utc
    sign = -1 if offset[0] == "-" else 1
    digits = offset[1:].replace(":", "")
    delta = timedelta(hours=int(digits[:2]), minutes=int(digits[2:]))
    return timezone(sign * delta)


def parse_exif_date(date_str: str | None) -> datetime | None:
    """Parse an exiftool date string to a naive local datetime.

    Values carrying a UTC offset are converted to local time. Empty,
    zeroed and otherwise unparseable values yield None.
    """
    if not date_str or not isinstance(date_str, str):
        return None

    date_str = date_str.strip()
    if not date_str or date_str.startswith(ZERO_DATE):
        return None

    tz = None
    match = TZ_PATTERN.search(date_str)
    if match:
        tz = parse_offset(match.group(1))
        date_str = date_str[: match.start()].rstrip()

    for fmt in DATE_FORMATS:
        try:
            dt = datetime.strptime(date_str, fmt)
        except ValueError:
            continue
        if tz is not None:
            dt = dt.replace(tzinfo=tz).astimezone().replace(tzinfo=None)
        return dt

    return None
