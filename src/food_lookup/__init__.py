"""Open Food Facts barcode lookup."""

from food_lookup.client import lookup_barcode, product_to_estimate
from food_lookup.exceptions import FoodLookupError, ProductNotFoundError

__all__ = [
    "FoodLookupError",
    "ProductNotFoundError",
    "lookup_barcode",
    "product_to_estimate",
]
