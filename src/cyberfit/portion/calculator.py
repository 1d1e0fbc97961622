"""Portion scaling: turn a per-100 baseline and a quantity into a loggable meal.

Rounding is fixed so results are reproducible: calories go to the nearest
integer and macros to one decimal, both rounding halves up.

    52 kcal / 0.3 P / 14 C / 0.2 F per 100 g at 250 g
    -> 130 kcal / 0.8 P / 35 C / 0.5 F
"""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from datetime import datetime
from typing import Any

from cyberfit.models.coercion import coerce_float, round_half_up
from cyberfit.models.enums import DEFAULT_PORTION_QUANTITY
from cyberfit.models.meal import MealEntry, new_meal_entry
from cyberfit.models.nutrition import MacroTotals, NutritionBaseline


def scale_baseline(
    baseline: NutritionBaseline, quantity: float = DEFAULT_PORTION_QUANTITY
) -> MacroTotals:
    """Scale per-100 values to *quantity* grams or millilitres."""
    factor = quantity / 100.0
    return MacroTotals(
        calories=round_half_up(baseline.calories_per_100 * factor),
        protein=round_half_up(baseline.protein_per_100 * factor, 1),
        carbs=round_half_up(baseline.carbs_per_100 * factor, 1),
        fats=round_half_up(baseline.fats_per_100 * factor, 1),
    )


@dataclass(frozen=True)
class PortionDraft:
    """The meal being composed, before it is logged.

    Each edit returns a new draft and the totals are re-derived on every
    access, so there is never a stale or half-updated value. Logged meals
    are separate MealEntry records that a draft never touches.
    """

    baseline: NutritionBaseline
    quantity: float = DEFAULT_PORTION_QUANTITY

    @classmethod
    def start(cls, baseline: NutritionBaseline, quantity: Any = DEFAULT_PORTION_QUANTITY) -> PortionDraft:
        draft = cls(baseline=baseline)
        return draft.with_quantity(quantity)

    @property
    def totals(self) -> MacroTotals:
        return scale_baseline(self.baseline, self.quantity)

    @property
    def quantity_editable(self) -> bool:
        return not self.baseline.fixed_quantity

    def with_quantity(self, quantity: Any) -> PortionDraft:
        """New draft with *quantity*. Bad or negative input becomes 0.

        Fixed-quantity baselines (whole-dish estimates) keep 100.
        """
        if self.baseline.fixed_quantity:
            return dataclasses.replace(self, quantity=DEFAULT_PORTION_QUANTITY)
        return dataclasses.replace(self, quantity=max(0.0, coerce_float(quantity)))

    def with_baseline(self, **changes: Any) -> PortionDraft:
        """New draft with edited baseline fields.

        Numeric fields (``calories_per_100`` and so on) are coerced. The
        name and unit are taken as given.
        """
        coerced = {
            key: coerce_float(value) if key.endswith("_per_100") else value
            for key, value in changes.items()
        }
        return dataclasses.replace(
            self, baseline=dataclasses.replace(self.baseline, **coerced)
        )

    def to_meal_entry(self, now: datetime | None = None) -> MealEntry:
        """Build a fresh MealEntry from the current totals."""
        totals = self.totals
        return new_meal_entry(
            name=self.baseline.name,
            calories=totals.calories,
            protein_g=totals.protein,
            carbs_g=totals.carbs,
            fats_g=totals.fats,
            fiber_g=0,
            now=now,
        )
