"""Read-side aggregates, recomputed from the current state on every call."""

from cyberfit.aggregation.body import (
    bmi,
    classify_bmi,
    latest_health,
    snapshot_bmi,
    weight_change_per_week,
    weight_trend,
)
from cyberfit.aggregation.cardio import WeeklyCardio, weekly_cardio_summary
from cyberfit.aggregation.nutrition import (
    DEFAULT_MACRO_GOALS,
    CalorieBalance,
    calorie_balance,
    daily_meals,
    daily_totals,
    macro_goals,
    progress_pct,
)
from cyberfit.aggregation.training import (
    ExerciseSummary,
    group_sets_by_exercise,
    previous_set_for,
    session_summary,
    session_volume_kg,
)

__all__ = [
    "DEFAULT_MACRO_GOALS",
    "CalorieBalance",
    "ExerciseSummary",
    "WeeklyCardio",
    "bmi",
    "calorie_balance",
    "classify_bmi",
    "daily_meals",
    "daily_totals",
    "group_sets_by_exercise",
    "latest_health",
    "macro_goals",
    "previous_set_for",
    "progress_pct",
    "session_summary",
    "session_volume_kg",
    "snapshot_bmi",
    "weekly_cardio_summary",
    "weight_change_per_week",
    "weight_trend",
]
