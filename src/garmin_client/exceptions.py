"""Exception hierarchy for the Garmin activity-sync client."""

from __future__ import annotations


class GarminClientError(Exception):
    """Base exception for all garmin_client errors."""


class GarminAuthError(GarminClientError):
    """No usable session: missing tokens, bad credentials, or MFA required."""


class GarminAPIError(GarminClientError):
    """An activity request to Garmin Connect failed."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class GarminRateLimitError(GarminAPIError):
    """HTTP 429 persisted through every retry."""

    def __init__(self, message: str = "Rate limited by Garmin Connect") -> None:
        super().__init__(message, status_code=429)
