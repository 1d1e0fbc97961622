"""Cardio activity entries, logged by hand or pulled from an activity service."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any

from cyberfit.models.coercion import (
    coerce_non_negative_float,
    coerce_non_negative_int,
    new_id,
    utc_now,
)
from cyberfit.models.enums import CardioSource, CardioType


@dataclass(frozen=True)
class CardioEntry:
    """A single cardio activity.

    Externally synced entries carry a stable id derived from the remote
    activity id, which is what deduplication keys on.
    """

    id: str
    type: CardioType
    distance: float  # km
    duration: int  # minutes
    date: datetime
    source: CardioSource = CardioSource.MANUAL
    avg_speed_kmh: float | None = None


def new_cardio_entry(
    cardio_type: CardioType,
    distance: Any,
    duration: Any,
    now: datetime | None = None,
) -> CardioEntry:
    """Build a manually logged entry from raw form input."""
    return CardioEntry(
        id=new_id(),
        type=cardio_type,
        distance=coerce_non_negative_float(distance),
        duration=coerce_non_negative_int(duration),
        date=now or utc_now(),
        source=CardioSource.MANUAL,
    )
