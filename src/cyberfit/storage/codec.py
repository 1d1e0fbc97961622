"""JSON-compatible encoding of AppState for the durable blob.

Converts frozen models to plain dicts with the camelCase keys of the stored
blob, and back. Decoding is lenient: it accepts the field names of the
first shipped schema, coerces bad numbers to 0, and skips records that are
not objects at all.

All functions are pure (no I/O).
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Iterable, TypeVar

from cyberfit.models.app_state import AppState
from cyberfit.models.cardio import CardioEntry
from cyberfit.models.coercion import (
    coerce_float,
    coerce_int,
    coerce_non_negative_float,
    coerce_non_negative_int,
    coerce_optional_float,
    coerce_optional_int,
    format_timestamp,
    parse_timestamp,
)
from cyberfit.models.enums import (
    CARDIO_SOURCE_KEYS,
    CARDIO_TYPE_KEYS,
    CardioSource,
    CardioType,
)
from cyberfit.models.health import HealthSnapshot
from cyberfit.models.meal import DEFAULT_MEAL_NAME, MealEntry
from cyberfit.models.workout import ExerciseSet, WorkoutSession

logger = logging.getLogger(__name__)

T = TypeVar("T")

_CARDIO_TYPES_BY_KEY = {v: k for k, v in CARDIO_TYPE_KEYS.items()}
_CARDIO_SOURCES_BY_KEY = {v: k for k, v in CARDIO_SOURCE_KEYS.items()}
# The first release tagged synced runs with the provider name.
_CARDIO_SOURCES_BY_KEY["strava"] = CardioSource.EXTERNAL_SYNC


def state_to_blob(state: AppState) -> dict[str, Any]:
    """Convert an AppState to a JSON-serializable dict."""
    return {
        "workouts": [_encode_session(s) for s in state.workouts],
        "cardioHistory": [_encode_cardio(c) for c in state.cardio_history],
        "healthHistory": [_encode_health(h) for h in state.health_history],
        "mealHistory": [_encode_meal(m) for m in state.meal_history],
        "externalSyncLinked": state.external_sync_linked,
    }


def state_from_blob(blob: dict[str, Any]) -> AppState:
    """Build an AppState from an (already migrated) blob.

    Top-level keys missing from *blob* take their defaults and unknown keys
    are ignored.
    """
    linked = _first(blob, "externalSyncLinked", "stravaLinked")
    return AppState(
        workouts=_decode_all(blob.get("workouts"), _decode_session),
        cardio_history=_decode_all(blob.get("cardioHistory"), _decode_cardio),
        health_history=_decode_all(blob.get("healthHistory"), _decode_health),
        meal_history=_decode_all(blob.get("mealHistory"), _decode_meal),
        external_sync_linked=bool(linked) if linked is not None else False,
    )


# ---------------------------------------------------------------------------
# Encoders
# ---------------------------------------------------------------------------


def encode_exercise_set(entry: ExerciseSet) -> dict[str, Any]:
    return {
        "id": entry.id,
        "name": entry.name,
        "weight": entry.weight,
        "reps": entry.reps,
        "date": format_timestamp(entry.date),
    }


def _encode_session(session: WorkoutSession) -> dict[str, Any]:
    return {
        "id": session.id,
        "date": format_timestamp(session.date),
        "label": session.label,
        "exercises": [encode_exercise_set(e) for e in session.exercises],
        "isCompleted": session.is_completed,
    }


def _encode_cardio(entry: CardioEntry) -> dict[str, Any]:
    result = {
        "id": entry.id,
        "type": CARDIO_TYPE_KEYS[entry.type],
        "distance": entry.distance,
        "duration": entry.duration,
        "date": format_timestamp(entry.date),
        "source": CARDIO_SOURCE_KEYS[entry.source],
    }
    if entry.avg_speed_kmh is not None:
        result["avgSpeedKmh"] = entry.avg_speed_kmh
    return result


def _encode_health(snapshot: HealthSnapshot) -> dict[str, Any]:
    result: dict[str, Any] = {
        "date": format_timestamp(snapshot.date),
        "sleepHours": snapshot.sleep_hours,
        "caloriesGoal": snapshot.calories_goal,
        "proteinGoal": snapshot.protein_goal,
        "weightKg": snapshot.weight_kg,
    }
    optional = {
        "carbsGoal": snapshot.carbs_goal,
        "fatsGoal": snapshot.fats_goal,
        "heightCm": snapshot.height_cm,
        "age": snapshot.age,
        "goalLabel": snapshot.goal_label,
    }
    result.update({k: v for k, v in optional.items() if v is not None})
    return result


def _encode_meal(meal: MealEntry) -> dict[str, Any]:
    return {
        "id": meal.id,
        "name": meal.name,
        "calories": meal.calories,
        "proteinG": meal.protein_g,
        "carbsG": meal.carbs_g,
        "fatsG": meal.fats_g,
        "fiberG": meal.fiber_g,
        "date": format_timestamp(meal.date),
    }


# ---------------------------------------------------------------------------
# Decoders
# ---------------------------------------------------------------------------


def decode_exercise_set(raw: dict[str, Any]) -> ExerciseSet:
    return ExerciseSet(
        id=str(raw.get("id") or ""),
        name=str(raw.get("name") or ""),
        weight=coerce_non_negative_float(raw.get("weight")),
        reps=coerce_non_negative_int(raw.get("reps")),
        date=parse_timestamp(raw.get("date")),
    )


def _decode_session(raw: dict[str, Any]) -> WorkoutSession:
    return WorkoutSession(
        id=str(raw.get("id") or ""),
        date=parse_timestamp(raw.get("date")),
        label=str(raw.get("label") or ""),
        exercises=_decode_all(raw.get("exercises"), decode_exercise_set),
        is_completed=raw.get("isCompleted") is True,
    )


def _decode_cardio(raw: dict[str, Any]) -> CardioEntry:
    return CardioEntry(
        id=str(raw.get("id") or ""),
        type=_lookup_key(_CARDIO_TYPES_BY_KEY, raw.get("type"), CardioType.RUN),
        distance=coerce_non_negative_float(raw.get("distance")),
        duration=coerce_non_negative_int(raw.get("duration")),
        date=parse_timestamp(raw.get("date")),
        source=_lookup_key(_CARDIO_SOURCES_BY_KEY, raw.get("source"), CardioSource.MANUAL),
        avg_speed_kmh=coerce_optional_float(_first(raw, "avgSpeedKmh", "avgSpeed")),
    )


def _decode_health(raw: dict[str, Any]) -> HealthSnapshot:
    goal = _first(raw, "goalLabel", "goal")
    return HealthSnapshot(
        date=parse_timestamp(raw.get("date")),
        sleep_hours=coerce_float(_first(raw, "sleepHours", "sleep")),
        calories_goal=coerce_int(_first(raw, "caloriesGoal", "calories")),
        protein_goal=coerce_int(_first(raw, "proteinGoal", "protein")),
        weight_kg=coerce_float(_first(raw, "weightKg", "weight")),
        carbs_goal=coerce_optional_int(_first(raw, "carbsGoal", "carbs_goal")),
        fats_goal=coerce_optional_int(_first(raw, "fatsGoal", "fats_goal")),
        height_cm=coerce_optional_float(_first(raw, "heightCm", "height")),
        age=coerce_optional_int(raw.get("age")),
        goal_label=str(goal) if goal else None,
    )


def _decode_meal(raw: dict[str, Any]) -> MealEntry:
    return MealEntry(
        id=str(raw.get("id") or ""),
        name=str(raw.get("name") or DEFAULT_MEAL_NAME),
        calories=coerce_float(raw.get("calories")),
        protein_g=coerce_float(_first(raw, "proteinG", "protein")),
        carbs_g=coerce_float(_first(raw, "carbsG", "carbs")),
        fats_g=coerce_float(_first(raw, "fatsG", "fats")),
        fiber_g=coerce_float(_first(raw, "fiberG", "fiber")),
        date=parse_timestamp(raw.get("date")),
    )


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------


def _first(raw: dict[str, Any], *keys: str) -> Any:
    """Value of the first key present (current name first, then old names)."""
    for key in keys:
        if key in raw:
            return raw[key]
    return None


def _lookup_key(mapping: dict[str, T], value: Any, default: T) -> T:
    """Map a stored string key to its enum member; anything else gets *default*."""
    if not isinstance(value, str):
        return default
    return mapping.get(value, default)


def _decode_all(
    items: Any, decode: Callable[[dict[str, Any]], T]
) -> tuple[T, ...]:
    if not isinstance(items, list):
        return ()
    return tuple(_decode_each(items, decode))


def _decode_each(
    items: Iterable[Any], decode: Callable[[dict[str, Any]], T]
) -> Iterable[T]:
    for index, item in enumerate(items):
        if not isinstance(item, dict):
            logger.warning(
                "Skipping non-object record #%d (%s)", index, type(item).__name__
            )
            continue
        try:
            record = decode(item)
        except (TypeError, ValueError, AttributeError) as exc:
            logger.warning("Skipping undecodable record #%d: %s", index, exc)
            continue
        yield record
