"""Workout session lifecycle: start, log sets, finish, delete.

A session is Active (``is_completed=False``) until it is finished. Finishing
is terminal, and so is deleting. All functions take and return the workout
tuple without mutating it. Operations that name a stale or unknown session
id are no-ops that return the input unchanged.
"""

from __future__ import annotations

import dataclasses
import logging
from datetime import datetime

from cyberfit.models.coercion import timestamp_key, utc_now
from cyberfit.models.workout import ExerciseSet, WorkoutSession, new_workout_session

logger = logging.getLogger(__name__)

Workouts = tuple[WorkoutSession, ...]


def active_session(workouts: Workouts) -> WorkoutSession | None:
    """Return the canonical active session, or None.

    Only one incomplete session should exist. If more than one does, the
    most recently started (last in the sequence) wins.
    """
    for session in reversed(workouts):
        if not session.is_completed:
            return session
    return None


def completed_sessions(workouts: Workouts) -> list[WorkoutSession]:
    """Completed sessions, newest first."""
    done = [w for w in workouts if w.is_completed]
    return sorted(done, key=lambda w: timestamp_key(w.date), reverse=True)


def start_session(
    workouts: Workouts,
    label: str,
    now: datetime | None = None,
    session_id: str | None = None,
) -> Workouts:
    """Append a new active session.

    Callers must check :func:`active_session` first. This function does not
    refuse or auto-complete an existing active session.
    """
    return workouts + (new_workout_session(label, now=now, session_id=session_id),)


def add_set(workouts: Workouts, session_id: str, exercise_set: ExerciseSet) -> Workouts:
    """Append *exercise_set* to the active session identified by *session_id*."""
    current = active_session(workouts)
    if current is None or current.id != session_id:
        logger.debug("add_set ignored: %s is not the active session", session_id)
        return workouts
    updated = dataclasses.replace(current, exercises=current.exercises + (exercise_set,))
    return tuple(updated if w is current else w for w in workouts)


def finish_session(workouts: Workouts, session_id: str) -> Workouts:
    """Mark a session completed. Irreversible; unknown ids are ignored."""
    if not any(w.id == session_id and not w.is_completed for w in workouts):
        logger.debug("finish_session ignored: no active session %s", session_id)
        return workouts
    return tuple(
        dataclasses.replace(w, is_completed=True)
        if w.id == session_id and not w.is_completed
        else w
        for w in workouts
    )


def delete_session(workouts: Workouts, session_id: str) -> Workouts:
    """Remove a session in any state."""
    remaining = tuple(w for w in workouts if w.id != session_id)
    if len(remaining) == len(workouts):
        logger.debug("delete_session ignored: unknown session %s", session_id)
        return workouts
    return remaining


# ---------------------------------------------------------------------------
# Active-session timer
# ---------------------------------------------------------------------------


def elapsed_seconds(session: WorkoutSession, now: datetime | None = None) -> int:
    """Whole seconds since *session* started, never negative."""
    now = now or utc_now()
    return max(0, int(timestamp_key(now) - timestamp_key(session.date)))


def format_elapsed(seconds: int) -> str:
    """Format seconds as ``m:ss``. e.g. 754 -> '12:34'."""
    seconds = max(0, int(seconds))
    return f"{seconds // 60}:{seconds % 60:02d}"
