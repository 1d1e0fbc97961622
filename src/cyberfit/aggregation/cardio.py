"""Weekly cardio volume rollups."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, timedelta, tzinfo
from typing import Sequence

import pandas as pd

from cyberfit.aggregation.calendar import default_timezone, local_day
from cyberfit.models.cardio import CardioEntry
from cyberfit.models.coercion import round_half_up
from cyberfit.models.enums import CardioType


@dataclass(frozen=True)
class WeeklyCardio:
    """Cardio totals for one Monday-based calendar week."""

    week_start: date
    distance_km: float
    duration_min: int
    sessions: int


def weekly_cardio_summary(
    entries: Sequence[CardioEntry],
    cardio_type: CardioType | None = None,
    tz: tzinfo | None = None,
) -> list[WeeklyCardio]:
    """Distance, duration and session count per week, oldest week first.

    Args:
        entries: Cardio history in any order.
        cardio_type: Only count this activity type (all types when None).
        tz: Zone for day boundaries. Defaults to ``CYBERFIT_TZ`` or local.
    """
    tz = tz or default_timezone()
    selected = [c for c in entries if cardio_type is None or c.type == cardio_type]
    if not selected:
        return []

    days = [local_day(c.date, tz) for c in selected]
    frame = pd.DataFrame(
        {
            "week_start": [d - timedelta(days=d.weekday()) for d in days],
            "distance": [c.distance for c in selected],
            "duration": [c.duration for c in selected],
        }
    )
    weekly = frame.groupby("week_start", sort=True).agg(
        distance_km=("distance", "sum"),
        duration_min=("duration", "sum"),
        sessions=("distance", "size"),
    )
    return [
        WeeklyCardio(
            week_start=week_start,
            distance_km=round_half_up(float(row.distance_km), 2),
            duration_min=int(row.duration_min),
            sessions=int(row.sessions),
        )
        for week_start, row in weekly.iterrows()
    ]
