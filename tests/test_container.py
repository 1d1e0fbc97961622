"""Tests for cyberfit.container: the reducer and AppStore dispatch/persistence."""

from __future__ import annotations

import dataclasses
from datetime import timedelta
from unittest.mock import MagicMock

import pytest

from cyberfit import sessions
from cyberfit.actions import (
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
from cyberfit.aggregation.training import group_sets_by_exercise, previous_set_for
from cyberfit.container import AppStore, reduce
from cyberfit.models.app_state import AppState
from cyberfit.models.cardio import new_cardio_entry
from cyberfit.models.enums import CardioType
from cyberfit.models.workout import new_exercise_set
from garmin_client.exceptions import GarminAPIError


def _active_count(state: AppState) -> int:
    return sum(1 for w in state.workouts if not w.is_completed)


class TestReducer:
    def test_start_session(self, now):
        state = reduce(AppState(), StartSession("Push Day", session_id="s", started_at=now))
        assert state.workouts[0].id == "s"
        assert state.workouts[0].date == now

    def test_start_refused_while_active(self, now, caplog):
        state = reduce(AppState(), StartSession("Push Day", session_id="a", started_at=now))
        again = reduce(state, StartSession("Leg Day", session_id="b", started_at=now))
        assert again is state
        assert "still active" in caplog.text

    def test_reducing_twice_is_deterministic(self, now):
        action = StartSession("Push Day", session_id="s", started_at=now)
        assert reduce(AppState(), action) == reduce(AppState(), action)

    def test_input_state_untouched(self, populated_state, now):
        before = populated_state
        reduce(populated_state, AddMeal(dataclasses.replace(populated_state.meal_history[0], id="n")))
        assert populated_state == before
        assert len(populated_state.meal_history) == 1

    def test_cardio_prepended_and_deleted(self, populated_state, now):
        entry = new_cardio_entry(CardioType.CYCLE, 20, 45, now=now)
        state = reduce(populated_state, AddCardio(entry))
        assert state.cardio_history[0] is entry
        state = reduce(state, DeleteCardio(entry.id))
        assert state.cardio_history == populated_state.cardio_history

    def test_meal_prepended_and_deleted(self, populated_state, meal_factory):
        meal = meal_factory(id="new-meal")
        state = reduce(populated_state, AddMeal(meal))
        assert state.meal_history[0] is meal
        assert reduce(state, DeleteMeal("new-meal")).meal_history == populated_state.meal_history

    def test_health_appended(self, populated_state, snapshot_factory):
        snap = snapshot_factory(days_ago=10)
        state = reduce(populated_state, AddHealthSnapshot(snap))
        assert state.health_history[-1] is snap

    def test_delete_workout(self, populated_state, completed_session):
        state = reduce(populated_state, DeleteWorkout(completed_session.id))
        assert state.workouts == ()

    def test_set_linked(self):
        assert reduce(AppState(), SetExternalSyncLinked(True)).external_sync_linked is True

    def test_unknown_action(self):
        with pytest.raises(TypeError, match="Unknown action"):
            reduce(AppState(), object())


class TestPushDayScenario:
    """Start, log three sets over two exercises, finish, then start again."""

    def test_full_lifecycle(self, now):
        app = AppStore()
        app.dispatch(StartSession("Push Day", session_id="push", started_at=now))
        for name, weight, reps in [("Chest press", 60, 8), ("Chest press", 62.5, 6), ("Shoulder press", 30, 10)]:
            app.dispatch(AddSet("push", new_exercise_set(name, weight, reps, now=now)))
            assert _active_count(app.state) <= 1
        app.dispatch(FinishSession("push"))

        session = app.state.workouts[0]
        assert session.is_completed
        groups = group_sets_by_exercise(session)
        assert list(groups) == ["Chest press", "Shoulder press"]
        assert [s.weight for s in groups["Chest press"]] == [60.0, 62.5]

        app.dispatch(StartSession("Leg Day", session_id="legs", started_at=now + timedelta(days=1)))
        assert sessions.active_session(app.state.workouts).id == "legs"
        assert _active_count(app.state) == 1

    def test_previous_set_after_finish(self, now):
        app = AppStore()
        app.dispatch(StartSession("Push Day", session_id="push", started_at=now))
        bench = new_exercise_set("Bench", 60, 8, now=now)
        app.dispatch(AddSet("push", bench))
        app.dispatch(FinishSession("push"))
        assert len(sessions.completed_sessions(app.state.workouts)) == 1
        assert previous_set_for("bench", app.state.workouts) == bench

    def test_add_set_after_finish_is_ignored(self, now):
        app = AppStore()
        app.dispatch(StartSession("Push Day", session_id="push", started_at=now))
        app.dispatch(FinishSession("push"))
        before = app.state
        app.dispatch(AddSet("push", new_exercise_set("Chest press", 60, 8, now=now)))
        assert app.state is before


class TestAppStorePersistence:
    def test_dispatch_saves_every_action(self, now):
        store = MagicMock()
        app = AppStore(store=store)
        app.dispatch(StartSession("Push Day", started_at=now))
        app.dispatch(SetExternalSyncLinked(True))
        assert store.save.call_count == 2
        store.save.assert_called_with(app.state)

    def test_open_loads_durable_state(self, state_store, populated_state):
        state_store.save(populated_state)
        assert AppStore.open(state_store).state == populated_state

    def test_reload_after_dispatch(self, state_store, now):
        app = AppStore.open(state_store)
        app.dispatch(StartSession("Push Day", session_id="p", started_at=now))
        assert AppStore.open(state_store).state == app.state

    def test_failed_save_keeps_memory_state(self, now):
        store = MagicMock()
        store.save.return_value = None
        store.last_save_failed = True
        app = AppStore(store=store)
        state = app.dispatch(StartSession("Push Day", started_at=now))
        assert app.state is state
        assert len(app.state.workouts) == 1


class TestSyncActivities:
    def test_merges_and_dedups(self, synced_run):
        app = AppStore()
        assert app.sync_activities(lambda: [synced_run]) == 1
        assert app.sync_activities(lambda: [synced_run]) == 0
        assert len(app.state.cardio_history) == 1

    def test_duplicates_within_batch(self, synced_run):
        app = AppStore()
        assert app.sync_activities(lambda: [synced_run, synced_run]) == 1

    def test_new_entries_prepended(self, populated_state, synced_run):
        newer = dataclasses.replace(synced_run, id="garmin-2002", date=synced_run.date + timedelta(days=1))
        app = AppStore(state=populated_state)
        app.sync_activities(lambda: [newer])
        assert app.state.cardio_history[0].id == "garmin-2002"

    def test_fetch_error_leaves_state_unchanged(self, populated_state):
        store = MagicMock()
        app = AppStore(store=store, state=populated_state)

        def failing_fetch():
            raise GarminAPIError("boom", status_code=500)

        with pytest.raises(GarminAPIError):
            app.sync_activities(failing_fetch)
        assert app.state is populated_state
        store.save.assert_not_called()

    def test_merge_action_is_idempotent(self, synced_run):
        action = MergeSyncedActivities((synced_run,))
        once = reduce(AppState(), action)
        assert reduce(once, action) is once
