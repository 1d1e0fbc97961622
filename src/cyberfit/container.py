"""AppStore: the single owner of the current AppState.

Every change goes through :meth:`AppStore.dispatch`:

1. the pure reducer derives a new state from the current one plus the action,
2. the store swaps its state reference,
3. the whole state is saved.

Nothing is ever mutated in place. A failed save leaves the new in-memory
state in place, with no rollback. The failure is logged by the StateStore.
"""

from __future__ import annotations

import dataclasses
import logging
from typing import Callable, Iterable

from cyberfit import sessions
from cyberfit.actions import (
    Action,
    AddCardio,
    AddHealthSnapshot,
    AddMeal,
    AddSet,
    DeleteCardio,
    DeleteMeal,
    DeleteWorkout,
    FinishSession,
    MergeSyncedActivities,
    SetExternalSyncLinked,
    StartSession,
)
from cyberfit.models.app_state import AppState
from cyberfit.models.cardio import CardioEntry
from cyberfit.storage.store import StateStore
from cyberfit.sync import merge_synced_activities

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Reducer
# ---------------------------------------------------------------------------


def _start_session(state: AppState, action: StartSession) -> AppState:
    current = sessions.active_session(state.workouts)
    if current is not None:
        logger.warning(
            "Not starting '%s': session '%s' (%s) is still active",
            action.label,
            current.label,
            current.id,
        )
        return state
    workouts = sessions.start_session(
        state.workouts, action.label, now=action.started_at, session_id=action.session_id
    )
    return dataclasses.replace(state, workouts=workouts)


def _add_set(state: AppState, action: AddSet) -> AppState:
    workouts = sessions.add_set(state.workouts, action.session_id, action.exercise_set)
    return _with_workouts(state, workouts)


def _finish_session(state: AppState, action: FinishSession) -> AppState:
    return _with_workouts(state, sessions.finish_session(state.workouts, action.session_id))


def _delete_workout(state: AppState, action: DeleteWorkout) -> AppState:
    return _with_workouts(state, sessions.delete_session(state.workouts, action.session_id))


def _add_cardio(state: AppState, action: AddCardio) -> AppState:
    return dataclasses.replace(
        state, cardio_history=(action.entry,) + state.cardio_history
    )


def _delete_cardio(state: AppState, action: DeleteCardio) -> AppState:
    return dataclasses.replace(
        state,
        cardio_history=tuple(c for c in state.cardio_history if c.id != action.entry_id),
    )


def _merge_synced(state: AppState, action: MergeSyncedActivities) -> AppState:
    history, added = merge_synced_activities(state.cardio_history, action.entries)
    if not added:
        return state
    return dataclasses.replace(state, cardio_history=history)


def _add_health(state: AppState, action: AddHealthSnapshot) -> AppState:
    return dataclasses.replace(
        state, health_history=state.health_history + (action.snapshot,)
    )


def _add_meal(state: AppState, action: AddMeal) -> AppState:
    return dataclasses.replace(state, meal_history=(action.meal,) + state.meal_history)


def _delete_meal(state: AppState, action: DeleteMeal) -> AppState:
    return dataclasses.replace(
        state,
        meal_history=tuple(m for m in state.meal_history if m.id != action.meal_id),
    )


def _set_linked(state: AppState, action: SetExternalSyncLinked) -> AppState:
    return dataclasses.replace(state, external_sync_linked=action.linked)


def _with_workouts(state: AppState, workouts: sessions.Workouts) -> AppState:
    if workouts is state.workouts:
        return state
    return dataclasses.replace(state, workouts=workouts)


_HANDLERS: dict[type, Callable[[AppState, Action], AppState]] = {
    StartSession: _start_session,
    AddSet: _add_set,
    FinishSession: _finish_session,
    DeleteWorkout: _delete_workout,
    AddCardio: _add_cardio,
    DeleteCardio: _delete_cardio,
    MergeSyncedActivities: _merge_synced,
    AddHealthSnapshot: _add_health,
    AddMeal: _add_meal,
    DeleteMeal: _delete_meal,
    SetExternalSyncLinked: _set_linked,
}


def reduce(state: AppState, action: Action) -> AppState:
    """Pure reducer: return the state that results from applying *action*."""
    handler = _HANDLERS.get(type(action))
    if handler is None:
        raise TypeError(f"Unknown action: {type(action).__name__}")
    return handler(state, action)


# ---------------------------------------------------------------------------
# Store
# ---------------------------------------------------------------------------


class AppStore:
    """Holds the current AppState and persists it after every dispatch.

    Usage:
        app = AppStore.open(StateStore())
        app.dispatch(StartSession("Push Day"))
        current = app.state
    """

    def __init__(self, store: StateStore | None = None, state: AppState | None = None) -> None:
        self._store = store
        self._state = state if state is not None else AppState()

    @classmethod
    def open(cls, store: StateStore) -> "AppStore":
        """Create an AppStore initialised from *store*'s durable state."""
        return cls(store=store, state=store.load())

    @property
    def state(self) -> AppState:
        return self._state

    def dispatch(self, action: Action) -> AppState:
        """Apply *action*, swap in the new state, and save it."""
        self._state = reduce(self._state, action)
        if self._store is not None:
            self._store.save(self._state)
        return self._state

    def sync_activities(self, fetch: Callable[[], Iterable[CardioEntry]]) -> int:
        """Pull activities via *fetch* and merge the ones not seen before.

        Errors raised by *fetch* propagate to the caller unchanged and
        leave the state untouched. Returns the number of entries added.
        """
        entries = tuple(fetch())
        before = len(self._state.cardio_history)
        self.dispatch(MergeSyncedActivities(entries))
        added = len(self._state.cardio_history) - before
        logger.info("Activity sync: %d fetched, %d new", len(entries), added)
        return added
