"""Daily nutrition aggregates: today's meals, macro totals, goals, progress.

All functions are pure and total: empty input gives zeros or defaults.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, tzinfo
from typing import Iterable

from cyberfit.aggregation.calendar import default_timezone, local_day, today
from cyberfit.models.coercion import coerce_float
from cyberfit.models.enums import (
    DEFAULT_CALORIES_GOAL,
    DEFAULT_CARBS_GOAL,
    DEFAULT_FATS_GOAL,
    DEFAULT_PROTEIN_GOAL,
)
from cyberfit.models.health import HealthSnapshot
from cyberfit.models.meal import MealEntry
from cyberfit.models.nutrition import MacroTotals

DEFAULT_MACRO_GOALS = MacroTotals(
    calories=DEFAULT_CALORIES_GOAL,
    protein=DEFAULT_PROTEIN_GOAL,
    carbs=DEFAULT_CARBS_GOAL,
    fats=DEFAULT_FATS_GOAL,
)


@dataclass(frozen=True)
class CalorieBalance:
    """Calories left for the day; negative ``remaining`` means over the goal."""

    consumed: float
    goal: float
    remaining: float
    is_over_limit: bool


def daily_meals(
    meals: Iterable[MealEntry],
    reference: date | datetime | None = None,
    tz: tzinfo | None = None,
) -> list[MealEntry]:
    """Meals logged on the reference calendar day, in local time.

    Args:
        meals: Meal history in any order.
        reference: Day to select. Defaults to today in *tz*.
        tz: Zone for day boundaries. Defaults to ``CYBERFIT_TZ`` or the
            system local zone.
    """
    tz = tz or default_timezone()
    if reference is None:
        ref_day = today(tz)
    elif isinstance(reference, datetime):
        ref_day = local_day(reference, tz)
    else:
        ref_day = reference
    return [m for m in meals if local_day(m.date, tz) == ref_day]


def daily_totals(meals: Iterable[MealEntry]) -> MacroTotals:
    """Sum calories and macros. Missing or non-numeric values count as 0."""
    calories = protein = carbs = fats = 0.0
    for meal in meals:
        calories += coerce_float(meal.calories)
        protein += coerce_float(meal.protein_g)
        carbs += coerce_float(meal.carbs_g)
        fats += coerce_float(meal.fats_g)
    return MacroTotals(calories=calories, protein=protein, carbs=carbs, fats=fats)


def macro_goals(
    latest: HealthSnapshot | None,
    defaults: MacroTotals = DEFAULT_MACRO_GOALS,
) -> MacroTotals:
    """Daily goals from the latest snapshot, defaulting each field on its own.

    A goal that is absent or zero falls back to the matching default. The
    other fields keep their own values.
    """
    if latest is None:
        return defaults
    return MacroTotals(
        calories=latest.calories_goal or defaults.calories,
        protein=latest.protein_goal or defaults.protein,
        carbs=latest.carbs_goal or defaults.carbs,
        fats=latest.fats_goal or defaults.fats,
    )


def calorie_balance(totals: MacroTotals, goals: MacroTotals) -> CalorieBalance:
    remaining = goals.calories - totals.calories
    return CalorieBalance(
        consumed=totals.calories,
        goal=goals.calories,
        remaining=remaining,
        is_over_limit=remaining < 0,
    )


def progress_pct(current: float, goal: float) -> float:
    """Percent of *goal* reached, capped at 100. Zero when there is no goal."""
    if goal <= 0:
        return 0.0
    return min(current / goal * 100.0, 100.0)
