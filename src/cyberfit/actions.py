"""State-changing actions accepted by :class:`cyberfit.container.AppStore`.

Each action carries everything the reducer needs, including generated ids
and timestamps, so reducing the same action twice gives the same state.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime

from cyberfit.models.cardio import CardioEntry
from cyberfit.models.coercion import new_id, utc_now
from cyberfit.models.health import HealthSnapshot
from cyberfit.models.meal import MealEntry
from cyberfit.models.workout import ExerciseSet


@dataclass(frozen=True)
class StartSession:
    label: str
    session_id: str = field(default_factory=new_id)
    started_at: datetime = field(default_factory=utc_now)


@dataclass(frozen=True)
class AddSet:
    session_id: str
    exercise_set: ExerciseSet


@dataclass(frozen=True)
class FinishSession:
    session_id: str


@dataclass(frozen=True)
class DeleteWorkout:
    session_id: str


@dataclass(frozen=True)
class AddCardio:
    entry: CardioEntry


@dataclass(frozen=True)
class DeleteCardio:
    entry_id: str


@dataclass(frozen=True)
class MergeSyncedActivities:
    entries: tuple[CardioEntry, ...]


@dataclass(frozen=True)
class AddHealthSnapshot:
    snapshot: HealthSnapshot


@dataclass(frozen=True)
class AddMeal:
    meal: MealEntry


@dataclass(frozen=True)
class DeleteMeal:
    meal_id: str


@dataclass(frozen=True)
class SetExternalSyncLinked:
    linked: bool


Action = (
    StartSession
    | AddSet
    | FinishSession
    | DeleteWorkout
    | AddCardio
    | DeleteCardio
    | MergeSyncedActivities
    | AddHealthSnapshot
    | AddMeal
    | DeleteMeal
    | SetExternalSyncLinked
)
