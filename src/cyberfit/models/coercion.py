"""Lenient conversion of user- and storage-supplied values.

Form fields and old blobs can hold anything: empty strings, None, "abc",
NaN. Every helper here returns a usable value instead of raising.
"""

from __future__ import annotations

import math
import uuid
from datetime import date, datetime, timezone
from typing import Any

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


def coerce_float(value: Any, default: float = 0.0) -> float:
    """Parse *value* as a finite float, falling back to *default*."""
    if value is None or isinstance(value, bool):
        return default
    try:
        result = float(value)
    except (TypeError, ValueError):
        return default
    if math.isnan(result) or math.isinf(result):
        return default
    return result


def coerce_int(value: Any, default: int = 0) -> int:
    """Parse *value* as an int, truncating fractional input (``"8.7"`` -> 8)."""
    result = coerce_float(value, float(default))
    return int(result)


def coerce_non_negative_float(value: Any) -> float:
    return max(0.0, coerce_float(value))


def coerce_non_negative_int(value: Any) -> int:
    return max(0, coerce_int(value))


def coerce_optional_float(value: Any) -> float | None:
    """Like :func:`coerce_float` but keeps "not given" as None."""
    if value is None or value == "":
        return None
    return coerce_float(value)


def coerce_optional_int(value: Any) -> int | None:
    if value is None or value == "":
        return None
    return coerce_int(value)


# ---------------------------------------------------------------------------
# Timestamps
# ---------------------------------------------------------------------------


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def new_id() -> str:
    return str(uuid.uuid4())


def parse_timestamp(value: Any) -> datetime:
    """Parse an ISO-8601 string (``Z`` suffix allowed) into a datetime.

    Dates become midnight. Unparsable input maps to the Unix epoch so that
    a single bad record never breaks sorting or loading.
    """
    if isinstance(value, datetime):
        return value
    if isinstance(value, date):
        return datetime(value.year, value.month, value.day)
    if isinstance(value, str) and value.strip():
        text = value.strip()
        if text.endswith(("Z", "z")):
            text = text[:-1] + "+00:00"
        try:
            return datetime.fromisoformat(text)
        except ValueError:
            return EPOCH
    return EPOCH


def format_timestamp(value: datetime) -> str:
    return value.isoformat()


def timestamp_key(value: datetime) -> float:
    """Sort key that orders naive (local) and aware datetimes together."""
    try:
        return value.timestamp()
    except (OverflowError, OSError, ValueError):
        return float("-inf")


# ---------------------------------------------------------------------------
# Rounding
# ---------------------------------------------------------------------------


def round_half_up(value: float, digits: int = 0) -> float:
    """Round with halves going up, like JavaScript ``Math.round``.

    The built-in ``round`` sends halves to the even neighbour
    (``round(2.5) == 2``), which would disagree with values logged by the
    web client.
    """
    factor = 10 ** digits
    return math.floor(value * factor + 0.5) / factor
