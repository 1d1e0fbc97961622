"""Shared test fixtures: fixed clocks, sample sessions, meals, snapshots, stores."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone
from typing import Callable

import pytest

from cyberfit.models.app_state import AppState
from cyberfit.models.cardio import CardioEntry
from cyberfit.models.enums import CardioSource, CardioType, Unit
from cyberfit.models.health import HealthSnapshot
from cyberfit.models.meal import MealEntry
from cyberfit.models.nutrition import NutritionBaseline
from cyberfit.models.workout import ExerciseSet, WorkoutSession
from cyberfit.storage.store import StateStore

UTC = timezone.utc


@pytest.fixture
def now() -> datetime:
    """A fixed 'current time': Wednesday 2025-03-12 18:30 UTC."""
    return datetime(2025, 3, 12, 18, 30, tzinfo=UTC)


@pytest.fixture
def chest_press_sets(now: datetime) -> tuple[ExerciseSet, ...]:
    """Two Chest press sets and one Leg press set, logged a minute apart."""
    return (
        ExerciseSet(id="s1", name="Chest press", weight=60.0, reps=8, date=now),
        ExerciseSet(
            id="s2", name="Chest press", weight=62.5, reps=6, date=now + timedelta(minutes=1)
        ),
        ExerciseSet(
            id="s3", name="Leg press", weight=120.0, reps=10, date=now + timedelta(minutes=2)
        ),
    )


@pytest.fixture
def completed_session(now: datetime, chest_press_sets) -> WorkoutSession:
    return WorkoutSession(
        id="done-1",
        date=now - timedelta(days=2),
        label="Push Day",
        exercises=chest_press_sets,
        is_completed=True,
    )


@pytest.fixture
def active_session(now: datetime) -> WorkoutSession:
    return WorkoutSession(id="active-1", date=now, label="Pull Day")


@pytest.fixture
def snapshot_factory(now: datetime) -> Callable[..., HealthSnapshot]:
    """Factory fixture for HealthSnapshot instances.

    Usage:
        snap = snapshot_factory(days_ago=3, weight_kg=80.0)
    """

    def factory(days_ago: int = 0, **overrides) -> HealthSnapshot:
        values = dict(
            date=now - timedelta(days=days_ago),
            sleep_hours=7.5,
            calories_goal=2400,
            protein_goal=160,
            weight_kg=74.0,
            carbs_goal=None,
            fats_goal=None,
            height_cm=180.0,
            age=30,
            goal_label="Kracht Vergroten",
        )
        values.update(overrides)
        return HealthSnapshot(**values)

    return factory


@pytest.fixture
def meal_factory(now: datetime) -> Callable[..., MealEntry]:
    counter = iter(range(1, 10_000))

    def factory(at: datetime | None = None, **overrides) -> MealEntry:
        values = dict(
            id=f"meal-{next(counter)}",
            name="Havermout",
            calories=350.0,
            protein_g=12.0,
            carbs_g=60.0,
            fats_g=6.0,
            fiber_g=8.0,
            date=at or now,
        )
        values.update(overrides)
        return MealEntry(**values)

    return factory


@pytest.fixture
def synced_run(now: datetime) -> CardioEntry:
    return CardioEntry(
        id="garmin-1001",
        type=CardioType.RUN,
        distance=10.02,
        duration=52,
        date=now - timedelta(days=1),
        source=CardioSource.EXTERNAL_SYNC,
        avg_speed_kmh=11.6,
    )


@pytest.fixture
def apple_baseline() -> NutritionBaseline:
    """52 kcal / 0.3 P / 14 C / 0.2 F per 100 g."""
    return NutritionBaseline(
        name="Appel",
        unit=Unit.GRAMS,
        calories_per_100=52.0,
        protein_per_100=0.3,
        carbs_per_100=14.0,
        fats_per_100=0.2,
    )


@pytest.fixture
def populated_state(completed_session, synced_run, snapshot_factory, meal_factory) -> AppState:
    return AppState(
        workouts=(completed_session,),
        cardio_history=(synced_run,),
        health_history=(snapshot_factory(days_ago=5), snapshot_factory(days_ago=0, weight_kg=73.2)),
        meal_history=(meal_factory(),),
        external_sync_linked=True,
    )


@pytest.fixture
def state_store(tmp_path) -> StateStore:
    """A StateStore writing into the test's temporary directory."""
    return StateStore(data_dir=tmp_path, storage_key="cyberfit_test")
