"""Logged meals."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any

from cyberfit.models.coercion import coerce_float, new_id, utc_now

DEFAULT_MEAL_NAME = "Maaltijd"


@dataclass(frozen=True)
class MealEntry:
    """A meal as it was logged. Never rewritten after creation."""

    id: str
    name: str
    calories: float
    protein_g: float
    carbs_g: float
    fats_g: float
    fiber_g: float
    date: datetime


def new_meal_entry(
    name: str | None,
    calories: Any,
    protein_g: Any,
    carbs_g: Any,
    fats_g: Any,
    fiber_g: Any = 0,
    now: datetime | None = None,
) -> MealEntry:
    return MealEntry(
        id=new_id(),
        name=(name or "").strip() or DEFAULT_MEAL_NAME,
        calories=coerce_float(calories),
        protein_g=coerce_float(protein_g),
        carbs_g=coerce_float(carbs_g),
        fats_g=coerce_float(fats_g),
        fiber_g=coerce_float(fiber_g),
        date=now or utc_now(),
    )
