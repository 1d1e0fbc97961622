"""Enumerations and fixed constants for the fitness data store.

Thresholds cite their published source where one exists.
"""

from enum import IntEnum, auto


class CardioType(IntEnum):
    """Kind of cardio activity."""

    RUN = auto()
    CYCLE = auto()
    WALK = auto()


class CardioSource(IntEnum):
    """Where a cardio entry came from."""

    MANUAL = auto()
    EXTERNAL_SYNC = auto()


class Unit(IntEnum):
    """Reference unit of a per-100 nutrition baseline."""

    GRAMS = auto()
    MILLILITRES = auto()


# ---------------------------------------------------------------------------
# Durable-blob spellings
# ---------------------------------------------------------------------------

CARDIO_TYPE_KEYS = {
    CardioType.RUN: "run",
    CardioType.CYCLE: "cycle",
    CardioType.WALK: "walk",
}

CARDIO_SOURCE_KEYS = {
    CardioSource.MANUAL: "manual",
    CardioSource.EXTERNAL_SYNC: "external-sync",
}

UNIT_KEYS = {
    Unit.GRAMS: "g",
    Unit.MILLILITRES: "ml",
}

# ---------------------------------------------------------------------------
# Nutrition defaults
# ---------------------------------------------------------------------------

# Fallback daily targets when no goal is set on the latest health snapshot
DEFAULT_CALORIES_GOAL = 2500
DEFAULT_PROTEIN_GOAL = 180
DEFAULT_CARBS_GOAL = 250
DEFAULT_FATS_GOAL = 70

# Portion size assumed when the user has not chosen one
DEFAULT_PORTION_QUANTITY = 100.0

# ---------------------------------------------------------------------------
# Body composition
# ---------------------------------------------------------------------------

# BMI cut-offs: WHO (2000), Obesity: preventing and managing the global
# epidemic, Technical Report Series 894. Lower bounds are inclusive.
BMI_HEALTHY_LOW = 18.5
BMI_OVERWEIGHT_LOW = 25.0
BMI_OBESE_LOW = 30.0

# ---------------------------------------------------------------------------
# Legacy migration
# ---------------------------------------------------------------------------

LEGACY_SESSION_ID = "legacy"
LEGACY_SESSION_LABEL = "legacy"

# ---------------------------------------------------------------------------
# Settings-screen defaults for fields the settings form does not edit
# ---------------------------------------------------------------------------

SETTINGS_DEFAULT_SLEEP_HOURS = 8.0
SETTINGS_DEFAULT_AGE = 25
SETTINGS_DEFAULT_GOAL = "Conditie Verbeteren"

# ---------------------------------------------------------------------------
# Presets offered by the input forms
# ---------------------------------------------------------------------------

SESSION_LABEL_PRESETS = (
    "Full Body - Dag 1",
    "Full Body - Dag 2",
    "Push Day",
    "Pull Day",
    "Leg Day",
)

COMMON_EXERCISES = (
    "Chest press",
    "Latt pulldown 1 arm",
    "T-bar row",
    "Shoulder press",
    "Rear delts fly",
    "Preacher curl",
    "Tricep rope pushdown",
    "Leg press",
    "Hamstring curls",
    "Callfs press",
    "Incline smith machine chest",
    "Latt pulldown",
    "T-bar row close",
    "Lateral raises",
    "Over head extensions tricep",
)

GOAL_LABELS = (
    "Spieropbouw (Bulk)",
    "Vetverlies (Cut)",
    "Conditie Verbeteren",
    "Gezond Gewicht Behouden",
    "Kracht Vergroten",
)
