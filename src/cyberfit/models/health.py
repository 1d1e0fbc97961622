"""Body-metric and goal snapshots.

The health history is append-only: profile and settings edits add a new
snapshot instead of changing an old one. The current values are those of
the snapshot with the latest date.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any

from cyberfit.models.coercion import (
    coerce_float,
    coerce_int,
    coerce_optional_float,
    coerce_optional_int,
    utc_now,
)
from cyberfit.models.enums import (
    SETTINGS_DEFAULT_AGE,
    SETTINGS_DEFAULT_GOAL,
    SETTINGS_DEFAULT_SLEEP_HOURS,
)


@dataclass(frozen=True)
class HealthSnapshot:
    """Point-in-time body metrics and daily nutrition goals."""

    date: datetime
    sleep_hours: float
    calories_goal: int
    protein_goal: int
    weight_kg: float
    carbs_goal: int | None = None
    fats_goal: int | None = None
    height_cm: float | None = None
    age: int | None = None
    goal_label: str | None = None


def new_health_snapshot(
    sleep_hours: Any = None,
    calories_goal: Any = None,
    protein_goal: Any = None,
    weight_kg: Any = None,
    carbs_goal: Any = None,
    fats_goal: Any = None,
    height_cm: Any = None,
    age: Any = None,
    goal_label: str | None = None,
    now: datetime | None = None,
) -> HealthSnapshot:
    """Build a snapshot from raw form input (the biometrics screen)."""
    return HealthSnapshot(
        date=now or utc_now(),
        sleep_hours=coerce_float(sleep_hours),
        calories_goal=coerce_int(calories_goal),
        protein_goal=coerce_int(protein_goal),
        weight_kg=coerce_float(weight_kg),
        carbs_goal=coerce_optional_int(carbs_goal),
        fats_goal=coerce_optional_int(fats_goal),
        height_cm=coerce_optional_float(height_cm),
        age=coerce_optional_int(age),
        goal_label=goal_label or None,
    )


def settings_snapshot(
    latest: HealthSnapshot | None,
    calories_goal: Any,
    protein_goal: Any,
    carbs_goal: Any,
    fats_goal: Any,
    weight_kg: Any,
    height_cm: Any,
    now: datetime | None = None,
) -> HealthSnapshot:
    """Build the snapshot written by the goals/settings screen.

    The settings form only edits goals, weight and height. Sleep, age and
    goal label are carried over from *latest*, or take the form defaults.
    """
    sleep = latest.sleep_hours if latest and latest.sleep_hours else SETTINGS_DEFAULT_SLEEP_HOURS
    age = latest.age if latest and latest.age else SETTINGS_DEFAULT_AGE
    goal = latest.goal_label if latest and latest.goal_label else SETTINGS_DEFAULT_GOAL
    return HealthSnapshot(
        date=now or utc_now(),
        sleep_hours=sleep,
        calories_goal=coerce_int(calories_goal),
        protein_goal=coerce_int(protein_goal),
        carbs_goal=coerce_int(carbs_goal),
        fats_goal=coerce_int(fats_goal),
        weight_kg=coerce_float(weight_kg),
        height_cm=coerce_float(height_cm),
        age=age,
        goal_label=goal,
    )
