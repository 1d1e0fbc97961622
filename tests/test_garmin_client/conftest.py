"""Fixtures with realistic Garmin activity-list responses for testing."""

from __future__ import annotations

import pytest


@pytest.fixture
def garmin_run() -> dict:
    """Realistic entry from Garmin get_activities(): a 10 km road run."""
    return {
        "activityId": 17234567890,
        "activityName": "Amsterdam Running",
        "startTimeLocal": "2025-03-11 07:15:02",
        "startTimeGMT": "2025-03-11 06:15:02",
        "activityType": {"typeId": 1, "typeKey": "running", "parentTypeId": 17},
        "distance": 10016.48,
        "duration": 3125.6,
        "movingDuration": 3098.0,
        "averageSpeed": 3.2049999237060547,
        "averageHR": 151.0,
        "calories": 702.0,
    }


@pytest.fixture
def garmin_ride() -> dict:
    return {
        "activityId": 17234567891,
        "startTimeLocal": "2025-03-09 10:02:11",
        "startTimeGMT": "2025-03-09 09:02:11",
        "activityType": {"typeId": 10, "typeKey": "road_biking", "parentTypeId": 2},
        "distance": 42180.0,
        "duration": 5400.0,
        "averageSpeed": 7.805,
    }


@pytest.fixture
def garmin_strength() -> dict:
    """Non-cardio activity that sync must skip."""
    return {
        "activityId": 17234567892,
        "startTimeLocal": "2025-03-10 18:00:00",
        "startTimeGMT": "2025-03-10 17:00:00",
        "activityType": {"typeId": 13, "typeKey": "strength_training"},
        "distance": 0.0,
        "duration": 3600.0,
    }


@pytest.fixture
def garmin_activity_list(garmin_run, garmin_ride, garmin_strength) -> list:
    """get_activities(0, 10) result, newest first."""
    return [garmin_run, garmin_strength, garmin_ride]
