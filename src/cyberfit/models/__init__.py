"""Data models for the fitness data store."""

from cyberfit.models.app_state import AppState
from cyberfit.models.cardio import CardioEntry, new_cardio_entry
from cyberfit.models.enums import CardioSource, CardioType, Unit
from cyberfit.models.health import HealthSnapshot, new_health_snapshot, settings_snapshot
from cyberfit.models.meal import MealEntry, new_meal_entry
from cyberfit.models.nutrition import (
    FlatEstimate,
    MacroTotals,
    NutritionBaseline,
    NutritionEstimate,
    Per100Estimate,
)
from cyberfit.models.workout import (
    ExerciseSet,
    WorkoutSession,
    new_exercise_set,
    new_workout_session,
)

__all__ = [
    "AppState",
    "CardioEntry",
    "CardioSource",
    "CardioType",
    "ExerciseSet",
    "FlatEstimate",
    "HealthSnapshot",
    "MacroTotals",
    "MealEntry",
    "NutritionBaseline",
    "NutritionEstimate",
    "Per100Estimate",
    "Unit",
    "WorkoutSession",
    "new_cardio_entry",
    "new_exercise_set",
    "new_health_snapshot",
    "new_meal_entry",
    "new_workout_session",
    "settings_snapshot",
]
