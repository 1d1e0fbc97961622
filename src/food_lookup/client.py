"""Barcode lookup against the Open Food Facts product API.

Products are returned as per-100 baselines, ready for the portion
calculator. Only the fields needed for that are requested.
"""

from __future__ import annotations

import logging
import re
from typing import Any

import requests

from cyberfit import config
from cyberfit.models.coercion import coerce_float
from cyberfit.models.enums import Unit
from cyberfit.models.meal import DEFAULT_MEAL_NAME
from cyberfit.models.nutrition import Per100Estimate
from food_lookup.exceptions import FoodLookupError, ProductNotFoundError

logger = logging.getLogger(__name__)

_FIELDS = "product_name,brands,quantity,nutrition_data_per,nutriments"
_USER_AGENT = "cyberfit/0.1 (barcode lookup)"
_LIQUID_QUANTITY = re.compile(r"\d\s*(ml|cl|dl|l)\b", re.IGNORECASE)
_KJ_PER_KCAL = 4.184


def lookup_barcode(
    code: str,
    base_url: str | None = None,
    timeout: float | None = None,
    session: requests.Session | None = None,
) -> Per100Estimate:
    """Fetch the product for *code* and return its per-100 values.

    Raises:
        ProductNotFoundError: Unknown barcode, or no energy value on file.
        FoodLookupError: The service is unreachable or answered garbage.
    """
    code = str(code).strip()
    if not code.isdigit():
        raise ProductNotFoundError(code, f"Invalid barcode: {code!r}")

    url = f"{(base_url or config.OPENFOODFACTS_URL).rstrip('/')}/{code}.json"
    http = session or requests
    try:
        resp = http.get(
            url,
            params={"fields": _FIELDS},
            headers={"User-Agent": _USER_AGENT},
            timeout=timeout or config.FOOD_LOOKUP_TIMEOUT_S,
        )
    except requests.RequestException as exc:
        raise FoodLookupError(f"Product lookup failed: {exc}") from exc

    if resp.status_code == 404:
        raise ProductNotFoundError(code)
    if resp.status_code != 200:
        raise FoodLookupError(f"Product lookup failed with HTTP {resp.status_code}")

    try:
        payload = resp.json()
    except ValueError as exc:
        raise FoodLookupError(f"Invalid JSON from product database: {exc}") from exc

    if not isinstance(payload, dict):
        raise FoodLookupError("Unexpected response from product database")
    product = payload.get("product")
    if not payload.get("status") or not isinstance(product, dict):
        raise ProductNotFoundError(code)

    estimate = product_to_estimate(product)
    if estimate is None:
        raise ProductNotFoundError(code, f"Product {code} has no nutrition data")
    logger.info("Found product %s: %s", code, estimate.name)
    return estimate


def product_to_estimate(product: dict[str, Any]) -> Per100Estimate | None:
    """Map an Open Food Facts product dict; None when it has no energy value."""
    nutriments = product.get("nutriments") or {}
    calories = nutriments.get("energy-kcal_100g")
    if calories is None and nutriments.get("energy_100g") is not None:
        # energy_100g is in kJ
        calories = coerce_float(nutriments["energy_100g"]) / _KJ_PER_KCAL
    if calories is None:
        return None

    return Per100Estimate(
        name=_product_name(product),
        unit=_product_unit(product),
        calories_per_100=round(coerce_float(calories), 1),
        protein_per_100=coerce_float(nutriments.get("proteins_100g")),
        carbs_per_100=coerce_float(nutriments.get("carbohydrates_100g")),
        fats_per_100=coerce_float(nutriments.get("fat_100g")),
    )


def _product_name(product: dict[str, Any]) -> str:
    name = str(product.get("product_name") or "").strip()
    brand = str(product.get("brands") or "").split(",")[0].strip()
    if name and brand and brand.lower() not in name.lower():
        return f"{brand} {name}"
    return name or brand or DEFAULT_MEAL_NAME


def _product_unit(product: dict[str, Any]) -> Unit:
    per = str(product.get("nutrition_data_per") or "").lower()
    if "ml" in per:
        return Unit.MILLILITRES
    if _LIQUID_QUANTITY.search(str(product.get("quantity") or "")):
        return Unit.MILLILITRES
    return Unit.GRAMS
