"""Pure functions mapping Garmin activity dicts to CardioEntries.

No I/O. Takes the raw list returned by GarminClient.pull_activities and
returns entries ready for the container's synced-activity merge.
"""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Any, Iterable, Optional

from cyberfit.models.cardio import CardioEntry
from cyberfit.models.coercion import coerce_float, coerce_optional_float, round_half_up
from cyberfit.models.enums import CardioSource, CardioType

logger = logging.getLogger(__name__)

SYNC_ID_PREFIX = "garmin-"

# Garmin activityType.typeKey -> cardio type
_TYPE_KEYS: dict[str, CardioType] = {
    "running": CardioType.RUN,
    "trail_running": CardioType.RUN,
    "treadmill_running": CardioType.RUN,
    "track_running": CardioType.RUN,
    "street_running": CardioType.RUN,
    "cycling": CardioType.CYCLE,
    "road_biking": CardioType.CYCLE,
    "mountain_biking": CardioType.CYCLE,
    "gravel_cycling": CardioType.CYCLE,
    "indoor_cycling": CardioType.CYCLE,
    "virtual_ride": CardioType.CYCLE,
    "walking": CardioType.WALK,
    "casual_walking": CardioType.WALK,
    "speed_walking": CardioType.WALK,
    "hiking": CardioType.WALK,
}

_GARMIN_TIME_FORMATS = ("%Y-%m-%d %H:%M:%S", "%Y-%m-%dT%H:%M:%S", "%Y-%m-%dT%H:%M:%S.%f")


def map_activities(raw: Iterable[Any]) -> list[CardioEntry]:
    """Map Garmin activities, dropping anything that is not a run, ride or walk."""
    entries: list[CardioEntry] = []
    for activity in raw or ():
        entry = map_activity(activity)
        if entry is not None:
            entries.append(entry)
    return entries


def map_activity(activity: Any) -> Optional[CardioEntry]:
    """Map one activity dict, or return None when it is unusable."""
    if not isinstance(activity, dict):
        return None

    cardio_type = _extract_type(activity.get("activityType"))
    if cardio_type is None:
        return None

    activity_id = activity.get("activityId")
    if activity_id in (None, ""):
        logger.warning("Skipping activity without activityId")
        return None

    started = _extract_start(activity)
    if started is None:
        logger.warning("Skipping activity %s without a start time", activity_id)
        return None

    distance_m = coerce_float(activity.get("distance"))
    duration_s = coerce_float(
        activity.get("duration")
        if activity.get("duration") is not None
        else activity.get("movingDuration")
    )
    speed = coerce_optional_float(activity.get("averageSpeed"))

    return CardioEntry(
        id=f"{SYNC_ID_PREFIX}{activity_id}",
        type=cardio_type,
        distance=max(round_half_up(distance_m / 1000, 2), 0.0),
        duration=max(int(round_half_up(duration_s / 60)), 0),
        date=started,
        source=CardioSource.EXTERNAL_SYNC,
        avg_speed_kmh=round_half_up(speed * 3.6, 1) if speed is not None else None,
    )


# ---------------------------------------------------------------------------
# Internal extractors
# ---------------------------------------------------------------------------


def _extract_type(data: Any) -> Optional[CardioType]:
    key = data.get("typeKey") if isinstance(data, dict) else data
    if not isinstance(key, str):
        return None
    return _TYPE_KEYS.get(key.lower())


def _extract_start(activity: dict) -> Optional[datetime]:
    """Prefer the GMT start time; fall back to the naive local one."""
    gmt = _parse_garmin_time(activity.get("startTimeGMT"))
    if gmt is not None:
        return gmt.replace(tzinfo=timezone.utc)
    return _parse_garmin_time(activity.get("startTimeLocal"))


def _parse_garmin_time(value: Any) -> Optional[datetime]:
    if not isinstance(value, str) or not value:
        return None
    for fmt in _GARMIN_TIME_FORMATS:
        try:
            return datetime.strptime(value, fmt)
        except ValueError:
            continue
    return None
