"""Normalization of nutrition estimates coming from outside the store.

Analyzer and lookup services answer in several shapes: a whole-dish
estimate (calories plus macros), a per-100 label baseline, and a range of
field spellings (camelCase, snake_case, and the Dutch keys of the first
prompt). :func:`parse_estimate` maps a raw payload onto the
FlatEstimate / Per100Estimate union. :func:`normalize_estimate` reduces the
union to the single NutritionBaseline shape the portion calculator uses.
"""

from __future__ import annotations

from typing import Any

from cyberfit.models.coercion import coerce_float
from cyberfit.models.enums import UNIT_KEYS, Unit
from cyberfit.models.meal import DEFAULT_MEAL_NAME
from cyberfit.models.nutrition import (
    FlatEstimate,
    NutritionBaseline,
    NutritionEstimate,
    Per100Estimate,
)

_NAME_KEYS = ("name", "naam", "product_name", "description", "food", "meal")
_UNIT_KEYS = ("unit", "type", "eenheid")

_PER_100_KEYS = {
    "calories": ("caloriesPer100", "calories_per_100", "kcal_100", "energy_kcal_100"),
    "protein": ("proteinPer100", "protein_per_100", "eiwit_100"),
    "carbs": ("carbsPer100", "carbs_per_100", "koolhydraten_100"),
    "fats": ("fatsPer100", "fats_per_100", "fat_per_100", "vet_100"),
}

_FLAT_KEYS = {
    "calories": ("calories", "kcal", "energy_kcal"),
    "protein": ("protein", "protein_g", "eiwit"),
    "carbs": ("carbs", "carbs_g", "koolhydraten"),
    "fats": ("fats", "fat", "fat_g", "fats_g", "vet"),
}

_UNITS_BY_KEY = {v: k for k, v in UNIT_KEYS.items()}


def parse_unit(value: Any) -> Unit:
    """Map "ml"/"g" style unit strings to Unit. Anything unknown is grams."""
    text = str(value or "").strip().lower()
    if text in ("ml", "milliliter", "millilitre", "l", "cl"):
        return Unit.MILLILITRES
    return _UNITS_BY_KEY.get(text, Unit.GRAMS)


def parse_estimate(payload: Any) -> NutritionEstimate:
    """Classify a raw service payload as a per-100 or a flat estimate.

    Raises:
        ValueError: If *payload* is not an object or carries neither shape.
    """
    if not isinstance(payload, dict):
        raise ValueError(f"Expected a JSON object, got {type(payload).__name__}")

    name = str(_lookup(payload, _NAME_KEYS) or DEFAULT_MEAL_NAME)

    per_100 = {field: _lookup(payload, keys) for field, keys in _PER_100_KEYS.items()}
    if per_100["calories"] is not None:
        return Per100Estimate(
            name=name,
            unit=parse_unit(_lookup(payload, _UNIT_KEYS)),
            calories_per_100=coerce_float(per_100["calories"]),
            protein_per_100=coerce_float(per_100["protein"]),
            carbs_per_100=coerce_float(per_100["carbs"]),
            fats_per_100=coerce_float(per_100["fats"]),
        )

    source = _pull_nested(payload, "macros", "nutrition", "nutrients")
    flat = {field: _lookup(source, keys) for field, keys in _FLAT_KEYS.items()}
    if flat["calories"] is None:
        flat["calories"] = _lookup(payload, _FLAT_KEYS["calories"])
    if flat["calories"] is not None:
        return FlatEstimate(
            name=name,
            calories=coerce_float(flat["calories"]),
            protein=coerce_float(flat["protein"]),
            carbs=coerce_float(flat["carbs"]),
            fats=coerce_float(flat["fats"]),
        )

    raise ValueError("Payload has neither per-100 nor total calorie values")


def normalize_estimate(estimate: NutritionEstimate) -> NutritionBaseline:
    """Reduce either estimate shape to a NutritionBaseline.

    A flat estimate describes the whole dish, so it becomes a baseline with
    its values taken as-is and the quantity fixed at 100.
    """
    if isinstance(estimate, Per100Estimate):
        return NutritionBaseline(
            name=estimate.name,
            unit=estimate.unit,
            calories_per_100=estimate.calories_per_100,
            protein_per_100=estimate.protein_per_100,
            carbs_per_100=estimate.carbs_per_100,
            fats_per_100=estimate.fats_per_100,
        )
    return NutritionBaseline(
        name=estimate.name,
        unit=Unit.GRAMS,
        calories_per_100=estimate.calories,
        protein_per_100=estimate.protein,
        carbs_per_100=estimate.carbs,
        fats_per_100=estimate.fats,
        fixed_quantity=True,
    )


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------


def _lookup(source: dict[str, Any], keys: tuple[str, ...]) -> Any:
    for key in keys:
        value = source.get(key)
        if value is not None and value != "":
            return value
    return None


def _pull_nested(source: dict[str, Any], *names: str) -> dict[str, Any]:
    """First nested macro object under one of *names*, else *source* itself."""
    for name in names:
        nested = source.get(name)
        if isinstance(nested, dict):
            return {**source, **nested}
    return source
