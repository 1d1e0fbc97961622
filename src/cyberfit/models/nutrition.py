"""Nutrition value types: macro totals, per-100 baselines, analyzer estimates."""

from __future__ import annotations

from dataclasses import dataclass

from cyberfit.models.enums import Unit


@dataclass(frozen=True)
class MacroTotals:
    """Calories plus the three macros, in kcal and grams."""

    calories: float = 0
    protein: float = 0
    carbs: float = 0
    fats: float = 0


@dataclass(frozen=True)
class NutritionBaseline:
    """Nutrition values per 100 g or 100 ml.

    This is the only nutrition shape the portion calculator works on.
    ``fixed_quantity`` marks a baseline built from a whole-dish estimate,
    where the values already describe the full portion and the quantity
    stays at 100.
    """

    name: str
    unit: Unit
    calories_per_100: float
    protein_per_100: float
    carbs_per_100: float
    fats_per_100: float
    fixed_quantity: bool = False


# ---------------------------------------------------------------------------
# Collaborator results (tagged union, normalized by cyberfit.portion)
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class FlatEstimate:
    """Whole-dish estimate, e.g. a photographed plate of food."""

    name: str
    calories: float
    protein: float
    carbs: float
    fats: float


@dataclass(frozen=True)
class Per100Estimate:
    """Label-style estimate for a packaged product."""

    name: str
    unit: Unit
    calories_per_100: float
    protein_per_100: float
    carbs_per_100: float
    fats_per_100: float


NutritionEstimate = FlatEstimate | Per100Estimate
