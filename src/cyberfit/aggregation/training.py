"""Strength-training aggregates: previous performance, per-exercise grouping."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from cyberfit.models.coercion import timestamp_key
from cyberfit.models.workout import ExerciseSet, WorkoutSession


@dataclass(frozen=True)
class ExerciseSummary:
    """One exercise within a session summary."""

    name: str
    set_count: int
    lines: tuple[str, ...]  # e.g. ("60kg × 8", "62.5kg × 6")


def all_sets(workouts: Iterable[WorkoutSession]) -> list[ExerciseSet]:
    """Every set from every session, flattened in session order."""
    return [s for w in workouts for s in w.exercises]


def previous_set_for(
    exercise_name: str, workouts: Iterable[WorkoutSession]
) -> ExerciseSet | None:
    """Most recent set of *exercise_name* across the whole history.

    Names match case-insensitively and exactly (no trimming or fuzzy match).
    """
    if not exercise_name:
        return None
    wanted = exercise_name.lower()
    best: ExerciseSet | None = None
    for entry in all_sets(workouts):
        if entry.name.lower() != wanted:
            continue
        if best is None or timestamp_key(entry.date) > timestamp_key(best.date):
            best = entry
    return best


def group_sets_by_exercise(session: WorkoutSession) -> dict[str, list[ExerciseSet]]:
    """Group a session's sets by exercise name.

    Groups appear in the order each exercise was first logged, and sets keep
    their logging order inside a group.
    """
    groups: dict[str, list[ExerciseSet]] = {}
    for entry in session.exercises:
        groups.setdefault(entry.name, []).append(entry)
    return groups


def format_set(entry: ExerciseSet) -> str:
    """Format a set as weight × reps. e.g. 62.5, 6 -> '62.5kg × 6'."""
    weight = f"{entry.weight:g}"
    return f"{weight}kg × {entry.reps}"


def session_summary(session: WorkoutSession) -> list[ExerciseSummary]:
    return [
        ExerciseSummary(
            name=name,
            set_count=len(sets),
            lines=tuple(format_set(s) for s in sets),
        )
        for name, sets in group_sets_by_exercise(session).items()
    ]


def session_volume_kg(session: WorkoutSession) -> float:
    """Total tonnage: sum of weight × reps over all sets."""
    return sum(s.weight * s.reps for s in session.exercises)
