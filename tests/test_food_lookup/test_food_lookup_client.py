"""Tests for food_lookup.client: mock-based, no real network calls."""

from __future__ import annotations

from unittest.mock import MagicMock

import pytest
import requests

from cyberfit.models.enums import Unit
from food_lookup.client import lookup_barcode, product_to_estimate
from food_lookup.exceptions import FoodLookupError, ProductNotFoundError

BASE_URL = "https://off.test/api/v2/product"


@pytest.fixture
def off_product() -> dict:
    """Trimmed Open Food Facts v2 product response."""
    return {
        "code": "5449000000996",
        "status": 1,
        "status_verbose": "product found",
        "product": {
            "product_name": "Coca-Cola Original Taste",
            "brands": "Coca-Cola",
            "quantity": "330 ml",
            "nutrition_data_per": "100g",
            "nutriments": {
                "energy-kcal_100g": 42,
                "energy_100g": 180,
                "proteins_100g": 0,
                "carbohydrates_100g": 10.6,
                "fat_100g": 0,
            },
        },
    }


def _session(status_code: int = 200, payload=None, exc: Exception | None = None) -> MagicMock:
    session = MagicMock()
    if exc is not None:
        session.get.side_effect = exc
    else:
        session.get.return_value = MagicMock(status_code=status_code, json=MagicMock(return_value=payload))
    return session


class TestLookupBarcode:
    def test_found(self, off_product):
        session = _session(payload=off_product)
        estimate = lookup_barcode("5449000000996", base_url=BASE_URL, timeout=3, session=session)
        assert estimate.name == "Coca-Cola Original Taste"
        assert estimate.unit == Unit.MILLILITRES
        assert estimate.calories_per_100 == 42
        assert estimate.carbs_per_100 == 10.6
        url = session.get.call_args[0][0]
        assert url == f"{BASE_URL}/5449000000996.json"
        assert session.get.call_args[1]["timeout"] == 3

    def test_http_404(self):
        with pytest.raises(ProductNotFoundError):
            lookup_barcode("123", base_url=BASE_URL, session=_session(status_code=404))

    def test_status_zero(self):
        session = _session(payload={"status": 0, "status_verbose": "product not found"})
        with pytest.raises(ProductNotFoundError):
            lookup_barcode("123", base_url=BASE_URL, session=session)

    def test_no_energy(self, off_product):
        off_product["product"]["nutriments"] = {}
        with pytest.raises(ProductNotFoundError, match="no nutrition data"):
            lookup_barcode("5449000000996", base_url=BASE_URL, session=_session(payload=off_product))

    def test_invalid_barcode(self):
        session = _session()
        with pytest.raises(ProductNotFoundError):
            lookup_barcode("abc", base_url=BASE_URL, session=session)
        session.get.assert_not_called()

    def test_unreachable(self):
        session = _session(exc=requests.ConnectionError("no route"))
        with pytest.raises(FoodLookupError, match="lookup failed"):
            lookup_barcode("123", base_url=BASE_URL, session=session)

    def test_server_error(self):
        with pytest.raises(FoodLookupError) as exc_info:
            lookup_barcode("123", base_url=BASE_URL, session=_session(status_code=503))
        assert not isinstance(exc_info.value, ProductNotFoundError)

    def test_bad_json(self):
        session = _session()
        session.get.return_value.json.side_effect = ValueError("not json")
        with pytest.raises(FoodLookupError):
            lookup_barcode("123", base_url=BASE_URL, session=session)


class TestProductToEstimate:
    def test_brand_prefixed(self):
        estimate = product_to_estimate(
            {"product_name": "Havermout", "brands": "Quaker,PepsiCo",
             "nutriments": {"energy-kcal_100g": 372, "proteins_100g": 13.5}}
        )
        assert estimate.name == "Quaker Havermout"
        assert estimate.unit == Unit.GRAMS
        assert estimate.fats_per_100 == 0.0

    def test_kilojoule_fallback(self):
        estimate = product_to_estimate({"product_name": "X", "nutriments": {"energy_100g": 418.4}})
        assert estimate.calories_per_100 == pytest.approx(100.0)

    def test_ml_from_nutrition_data_per(self):
        estimate = product_to_estimate(
            {"product_name": "Melk", "nutrition_data_per": "100ml",
             "nutriments": {"energy-kcal_100g": 46}}
        )
        assert estimate.unit == Unit.MILLILITRES

    def test_no_energy(self):
        assert product_to_estimate({"product_name": "X", "nutriments": {}}) is None
