"""Exception hierarchy for the barcode lookup client."""

from __future__ import annotations


class FoodLookupError(Exception):
    """Base exception: the product database could not be queried."""


class ProductNotFoundError(FoodLookupError):
    """The barcode is unknown, or the product has no calorie data."""

    def __init__(self, code: str, message: str | None = None) -> None:
        super().__init__(message or f"Product {code} not found")
        self.code = code
