"""Frozen application state, the aggregate root of all user history."""

from __future__ import annotations

from dataclasses import dataclass, field

from cyberfit.models.cardio import CardioEntry
from cyberfit.models.health import HealthSnapshot
from cyberfit.models.meal import MealEntry
from cyberfit.models.workout import WorkoutSession


@dataclass(frozen=True)
class AppState:
    """Immutable snapshot of everything the user has logged.

    A mutation never edits this object. It builds a new one with
    ``dataclasses.replace`` and swaps it in as the current state.
    """

    workouts: tuple[WorkoutSession, ...] = field(default_factory=tuple)
    cardio_history: tuple[CardioEntry, ...] = field(default_factory=tuple)
    health_history: tuple[HealthSnapshot, ...] = field(default_factory=tuple)
    meal_history: tuple[MealEntry, ...] = field(default_factory=tuple)
    external_sync_linked: bool = False
