"""
Date normalisation helpers.

Every ``date`` the API returns uses one textual form, for example
``"Mon Jan 01 1990"``: abbreviated weekday, abbreviated month,
two‑digit day and four‑digit year.  Names are always English and do
not depend on the process locale.

Input dates are interpreted as calendar dates exactly as written.
No timezone conversion takes place, so ``1990-01-01`` and
``1990-01-01T23:30:00-08:00`` both render as ``Mon Jan 01 1990``.
Input that cannot be parsed renders as ``"Invalid Date"`` instead of
raising.
"""

from __future__ import annotations

import re
from datetime import date, datetime
from typing import Optional, Union

INVALID_DATE = "Invalid Date"

WEEKDAYS = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")
MONTHS = ("Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")

_ISO_RE = re.compile(
    r"^(\d{4})[-/](\d{1,2})[-/](\d{1,2})"
    r"(?:[T ](\d{2}):(\d{2})(?::(\d{2})(?:\.\d{1,6})?)?(?:Z|[+-](\d{2}):?(\d{2}))?)?$"
)

# Fallback formats, tried in order after the ISO pattern.  The first
# one is the display form itself, which makes re-rendering a no-op.
_FORMATS = (
    "%a %b %d %Y",
    "%b %d %Y",
    "%B %d %Y",
    "%b %d, %Y",
    "%B %d, %Y",
    "%d %b %Y",
    "%d %B %Y",
)

DateInput = Union[str, date, None]


def _valid_clock(
    hour: Optional[str],
    minute: Optional[str],
    second: Optional[str],
    off_hour: Optional[str],
    off_minute: Optional[str],
) -> bool:
    """Range-check the optional time and UTC offset of an ISO string."""
    if hour is not None and (int(hour) > 23 or int(minute) > 59):
        return False
    if second is not None and int(second) > 59:
        return False
    if off_hour is not None and (int(off_hour) > 23 or int(off_minute) > 59):
        return False
    return True


def parse_date(value: DateInput) -> Optional[date]:
    """Parse ``value`` into a calendar date, or return ``None``."""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if value is None:
        return None
    text = str(value).strip()
    if not text:
        return None

    match = _ISO_RE.match(text)
    if match:
        year, month, day, hour, minute, second, off_hour, off_minute = match.groups()
        if not _valid_clock(hour, minute, second, off_hour, off_minute):
            return None
        try:
            return date(int(year), int(month), int(day))
        except ValueError:
            return None

    for fmt in _FORMATS:
        try:
            return datetime.strptime(text, fmt).date()
        except ValueError:
            continue
    return None


def format_date(value: date) -> str:
    """Render a calendar date in the display form."""
    return f"{WEEKDAYS[value.weekday()]} {MONTHS[value.month - 1]} {value.day:02d} {value.year:04d}"


def to_date_string(value: DateInput = None, today: Optional[date] = None) -> str:
    """Normalise optional date input into the display form.

    Parameters
    ----------
    value : str | date | None
        Date to render.  ``None`` or a blank string means "today".
    today : date, optional
        Reference date used for missing input.  Defaults to the
        current local date.
    """
    if value is None or (isinstance(value, str) and not value.strip()):
        return format_date(today or date.today())
    parsed = parse_date(value)
    if parsed is None:
        return INVALID_DATE
    return format_date(parsed)
