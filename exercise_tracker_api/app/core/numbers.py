"""Lenient integer coercion for form and query values."""

import math
import re
from typing import Any, Optional

_LEADING_INT_RE = re.compile(r"^\s*([+-]?\d+)")


def parse_int(value: Any) -> Optional[int]:
    """Parse the leading integer of ``value``.

    Mirrors the usual lenient browser behaviour: surrounding
    whitespace and trailing garbage are ignored (``" 15min"`` gives
    ``15``) and floats are truncated.  Returns ``None`` when no digits
    lead the value; callers store that as "not a number".
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value) if math.isfinite(value) else None
    match = _LEADING_INT_RE.match(str(value))
    if not match:
        return None
    return int(match.group(1))


# Range of a SQLite INTEGER; larger Python ints cannot be bound.
INT64_MIN = -(2 ** 63)
INT64_MAX = 2 ** 63 - 1


def fits_int64(value: int) -> bool:
    return INT64_MIN <= value <= INT64_MAX
