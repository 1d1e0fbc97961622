"""Garmin Connect activity client. All Garmin network I/O lives here."""

from garmin_client.activity_mapper import map_activities, map_activity
from garmin_client.client import GarminClient
from garmin_client.exceptions import (
    GarminAPIError,
    GarminAuthError,
    GarminClientError,
    GarminRateLimitError,
)

__all__ = [
    "GarminClient",
    "GarminAPIError",
    "GarminAuthError",
    "GarminClientError",
    "GarminRateLimitError",
    "map_activities",
    "map_activity",
]
