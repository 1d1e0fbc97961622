"""Body-composition aggregates: latest snapshot, BMI, weight trend.

References:
    WHO (2000). Obesity: preventing and managing the global epidemic.
    Technical Report Series 894 (BMI categories).
"""

from __future__ import annotations

from datetime import datetime
from typing import Sequence

import numpy as np

from cyberfit.models.coercion import round_half_up, timestamp_key
from cyberfit.models.enums import BMI_HEALTHY_LOW, BMI_OBESE_LOW, BMI_OVERWEIGHT_LOW
from cyberfit.models.health import HealthSnapshot

_SECONDS_PER_DAY = 86400.0


def latest_health(history: Sequence[HealthSnapshot]) -> HealthSnapshot | None:
    """Snapshot with the latest date, or None for an empty history.

    Chosen by date, not list position: snapshots can be appended out of
    chronological order. On equal dates the later-appended one wins.
    """
    latest: HealthSnapshot | None = None
    for snapshot in history:
        if latest is None or timestamp_key(snapshot.date) >= timestamp_key(latest.date):
            latest = snapshot
    return latest


def bmi(weight_kg: float | None, height_cm: float | None) -> float | None:
    """Body-mass index rounded to one decimal.

    BMI = weight / height_m². None unless both inputs are strictly positive.
    """
    if not weight_kg or not height_cm or weight_kg <= 0 or height_cm <= 0:
        return None
    height_m = height_cm / 100.0
    return round_half_up(weight_kg / (height_m * height_m), 1)


def classify_bmi(value: float) -> str:
    """Classify a BMI value. Lower bounds are inclusive (18.5 is healthy).

    Returns:
        One of "underweight", "healthy", "overweight", "obese".
    """
    if value < BMI_HEALTHY_LOW:
        return "underweight"
    if value < BMI_OVERWEIGHT_LOW:
        return "healthy"
    if value < BMI_OBESE_LOW:
        return "overweight"
    return "obese"


def snapshot_bmi(snapshot: HealthSnapshot | None) -> tuple[float, str] | None:
    """BMI and category for a snapshot, or None if weight/height are missing."""
    if snapshot is None:
        return None
    value = bmi(snapshot.weight_kg, snapshot.height_cm)
    if value is None:
        return None
    return value, classify_bmi(value)


def weight_trend(
    history: Sequence[HealthSnapshot], points: int = 7
) -> list[tuple[datetime, float]]:
    """The last *points* (date, weight) pairs in date order, for charting."""
    ordered = sorted(history, key=lambda h: timestamp_key(h.date))
    pairs = [(h.date, h.weight_kg) for h in ordered if h.weight_kg > 0]
    return pairs[-points:] if points > 0 else []


def weight_change_per_week(history: Sequence[HealthSnapshot]) -> float | None:
    """Least-squares weight slope in kg per week.

    Fits weight against time over all snapshots with a recorded weight.
    Returns None when fewer than two distinct dates are available.
    """
    samples = [
        (timestamp_key(h.date) / _SECONDS_PER_DAY, h.weight_kg)
        for h in history
        if h.weight_kg > 0 and timestamp_key(h.date) != float("-inf")
    ]
    if len({day for day, _ in samples}) < 2:
        return None

    days = np.array([d for d, _ in samples], dtype=np.float64)
    weights = np.array([w for _, w in samples], dtype=np.float64)
    # numpy.polyfit(x, y, 1) returns [slope, intercept]
    slope_per_day = float(np.polyfit(days - days.min(), weights, 1)[0])
    return round_half_up(slope_per_day * 7.0, 2)
