"""Tests for cyberfit.storage.codec."""

from __future__ import annotations

import json
import logging
from unittest.mock import patch

from cyberfit.models.enums import CardioSource, CardioType
from cyberfit.storage import codec
from cyberfit.storage.codec import state_from_blob, state_to_blob


class TestEncode:
    def test_camel_case_keys(self, populated_state):
        blob = state_to_blob(populated_state)
        assert set(blob) == {
            "workouts",
            "cardioHistory",
            "healthHistory",
            "mealHistory",
            "externalSyncLinked",
        }
        assert blob["workouts"][0]["isCompleted"] is True
        assert blob["cardioHistory"][0]["source"] == "external-sync"
        assert blob["cardioHistory"][0]["avgSpeedKmh"] == 11.6
        assert "proteinG" in blob["mealHistory"][0]

    def test_json_serializable(self, populated_state):
        json.dumps(state_to_blob(populated_state))

    def test_optional_health_fields_omitted(self, snapshot_factory, populated_state):
        import dataclasses

        state = dataclasses.replace(
            populated_state,
            health_history=(snapshot_factory(height_cm=None, age=None, goal_label=None),),
        )
        encoded = state_to_blob(state)["healthHistory"][0]
        assert "heightCm" not in encoded
        assert "age" not in encoded
        assert "carbsGoal" not in encoded


class TestDecode:
    def test_round_trip(self, populated_state):
        assert state_from_blob(state_to_blob(populated_state)) == populated_state

    def test_empty_blob_gives_defaults(self):
        state = state_from_blob({})
        assert state.workouts == ()
        assert state.meal_history == ()
        assert state.external_sync_linked is False

    def test_old_field_names(self):
        state = state_from_blob(
            {
                "healthHistory": [
                    {
                        "date": "2024-06-01T08:00:00Z",
                        "sleep": 7,
                        "calories": 2500,
                        "protein": 180,
                        "weight": 81.5,
                        "height": 183,
                        "goal": "Spieropbouw (Bulk)",
                    }
                ],
                "cardioHistory": [
                    {
                        "id": "strava-9",
                        "type": "run",
                        "distance": 5,
                        "duration": 27,
                        "date": "2024-06-01T07:00:00Z",
                        "source": "strava",
                        "avgSpeed": 11.1,
                    }
                ],
                "stravaLinked": True,
            }
        )
        health = state.health_history[0]
        assert health.sleep_hours == 7.0
        assert health.weight_kg == 81.5
        assert health.height_cm == 183.0
        assert health.goal_label == "Spieropbouw (Bulk)"
        cardio = state.cardio_history[0]
        assert cardio.source == CardioSource.EXTERNAL_SYNC
        assert cardio.type == CardioType.RUN
        assert cardio.avg_speed_kmh == 11.1
        assert state.external_sync_linked is True

    def test_bad_numbers_coerced(self):
        state = state_from_blob(
            {"mealHistory": [{"id": "m", "name": "Soep", "calories": "abc", "proteinG": None}]}
        )
        meal = state.meal_history[0]
        assert meal.calories == 0.0
        assert meal.protein_g == 0.0

    def test_non_object_records_skipped(self):
        state = state_from_blob({"mealHistory": [None, 3, {"id": "ok", "calories": 100}]})
        assert [m.id for m in state.meal_history] == ["ok"]

    def test_non_list_collection_ignored(self):
        assert state_from_blob({"workouts": "nope"}).workouts == ()

    def test_unknown_keys_ignored(self):
        assert state_from_blob({"somethingElse": 1}).cardio_history == ()

    def test_only_real_true_completes_a_session(self):
        state = state_from_blob(
            {
                "workouts": [
                    {"id": "text", "label": "Push Day", "isCompleted": "false"},
                    {"id": "one", "label": "Leg Day", "isCompleted": 1},
                    {"id": "done", "label": "Pull Day", "isCompleted": True},
                ]
            }
        )
        completed = {w.id: w.is_completed for w in state.workouts}
        assert completed == {"text": False, "one": False, "done": True}

    def test_unhashable_cardio_keys_fall_back_to_defaults(self):
        state = state_from_blob(
            {
                "cardioHistory": [
                    {"id": "a", "type": ["cycle"], "source": "external-sync"},
                    {"id": "b", "type": "walk", "source": {"x": 1}},
                ]
            }
        )
        first, second = state.cardio_history
        assert (first.type, first.source) == (CardioType.RUN, CardioSource.EXTERNAL_SYNC)
        assert (second.type, second.source) == (CardioType.WALK, CardioSource.MANUAL)

    def test_undecodable_record_skipped(self, caplog):
        real_decode = codec._decode_meal

        def picky_decode(raw):
            if raw.get("id") == "bad":
                raise ValueError("broken meal")
            return real_decode(raw)

        with patch.object(codec, "_decode_meal", picky_decode), caplog.at_level(logging.WARNING):
            state = state_from_blob(
                {"mealHistory": [{"id": "bad"}, {"id": "ok", "calories": 100}]}
            )
        assert [m.id for m in state.meal_history] == ["ok"]
        assert "Skipping undecodable record #0" in caplog.text
