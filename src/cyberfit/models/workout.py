"""Strength-training records: individual sets and the sessions that hold them."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

from cyberfit.models.coercion import (
    coerce_non_negative_float,
    coerce_non_negative_int,
    new_id,
    utc_now,
)


@dataclass(frozen=True)
class ExerciseSet:
    """One logged set. Identity is ``id``."""

    id: str
    name: str
    weight: float  # kg
    reps: int
    date: datetime


@dataclass(frozen=True)
class WorkoutSession:
    """A training session.

    ``is_completed`` flips to True exactly once. Completed sessions are
    never edited again, only deleted as a whole.
    """

    id: str
    date: datetime  # session start
    label: str
    exercises: tuple[ExerciseSet, ...] = field(default_factory=tuple)
    is_completed: bool = False


def new_exercise_set(
    name: str,
    weight: Any,
    reps: Any,
    now: datetime | None = None,
) -> ExerciseSet:
    """Build a set from raw form input. Bad numbers become 0."""
    return ExerciseSet(
        id=new_id(),
        name=(name or "").strip(),
        weight=coerce_non_negative_float(weight),
        reps=coerce_non_negative_int(reps),
        date=now or utc_now(),
    )


def new_workout_session(
    label: str,
    now: datetime | None = None,
    session_id: str | None = None,
) -> WorkoutSession:
    return WorkoutSession(
        id=session_id or new_id(),
        date=now or utc_now(),
        label=label,
    )
