# src/trackerbot/tasks/dates.py

"""
Date handling for deadline and event fields.

Three representations meet here:
- user text:   "YYYY-MM-DD" or "YYYY-MM-DD HHMM" (24h)
- storage:     epoch seconds as a decimal integer, UTC
- display:     "Dec 01 2024, 18:00"

Points in time are naive datetimes read as UTC wall time.
"""

from __future__ import annotations

import re
from datetime import UTC, datetime

from ..errors import CorruptDateError, DateFormatError

USER_DATE_FORMATS = ("%Y-%m-%d %H%M", "%Y-%m-%d")
DISPLAY_FORMAT = "%b %d %Y, %H:%M"

# Canonical integers only (no leading zeros, no "-0"), so tokens round-trip.
_EPOCH_RE = re.compile(r"0|-?[1-9]\d*")


def parse_user_date(text: str) -> datetime:
    raw = text.strip()
    for fmt in USER_DATE_FORMATS:
        try:
            return datetime.strptime(raw, fmt)
        except ValueError:
            continue
    raise DateFormatError(f"Unrecognised date '{raw}'. Use YYYY-MM-DD or YYYY-MM-DD HHMM.")


def parse_stored_date(token: str) -> datetime:
    if not _EPOCH_RE.fullmatch(token):
        raise CorruptDateError(f"Stored date is not an integer: {token!r}")
    try:
        return datetime.fromtimestamp(int(token), tz=UTC).replace(tzinfo=None)
    except (OverflowError, OSError, ValueError) as e:
        raise CorruptDateError(f"Stored date is out of range: {token!r}") from e


def format_for_storage(value: datetime) -> str:
    return str(int(value.replace(tzinfo=UTC).timestamp()))


def format_for_display(value: datetime) -> str:
    return value.strftime(DISPLAY_FORMAT)
