"""Schema migration for stored blobs.

The first release stored strength training as a flat ``gymHistory`` list of
sets with no session wrapper. Such a blob is upgraded on load into one
completed "legacy" session, so every consumer can assume the session-based
shape. The migration only ever moves forward and is idempotent: a migrated
blob has ``workouts`` and is left alone on the next pass.
"""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Any

from cyberfit.models.coercion import format_timestamp, parse_timestamp, timestamp_key, utc_now
from cyberfit.models.enums import LEGACY_SESSION_ID, LEGACY_SESSION_LABEL

logger = logging.getLogger(__name__)

LEGACY_HISTORY_KEY = "gymHistory"


def needs_migration(blob: dict[str, Any]) -> bool:
    """True if *blob* has the flat legacy list and no session list."""
    return (
        isinstance(blob.get(LEGACY_HISTORY_KEY), list)
        and blob.get("workouts") is None
    )


def migrate_blob(blob: dict[str, Any], now: datetime | None = None) -> dict[str, Any]:
    """Return a copy of *blob* upgraded to the session-based shape.

    Blobs that need no migration are returned as an unchanged shallow copy.
    The synthetic session is dated at its most recent set, or at *now* when
    the legacy list is empty.
    """
    migrated = dict(blob)
    if not needs_migration(blob):
        return migrated

    legacy_sets = [s for s in blob[LEGACY_HISTORY_KEY] if isinstance(s, dict)]
    migrated["workouts"] = [
        {
            "id": LEGACY_SESSION_ID,
            "date": _legacy_session_date(legacy_sets, now),
            "label": LEGACY_SESSION_LABEL,
            "exercises": legacy_sets,
            "isCompleted": True,
        }
    ]
    logger.info(
        "Migrated %d legacy exercise sets into a '%s' session",
        len(legacy_sets),
        LEGACY_SESSION_LABEL,
    )
    return migrated


def _legacy_session_date(legacy_sets: list[dict[str, Any]], now: datetime | None) -> str:
    dated = [parse_timestamp(s.get("date")) for s in legacy_sets if s.get("date")]
    if dated:
        return format_timestamp(max(dated, key=timestamp_key))
    return format_timestamp(now or utc_now())
