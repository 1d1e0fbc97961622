"""Merging externally synced activities into the cardio history."""

from __future__ import annotations

import logging
from typing import Iterable

from cyberfit.models.cardio import CardioEntry

logger = logging.getLogger(__name__)


def merge_synced_activities(
    history: tuple[CardioEntry, ...],
    entries: Iterable[CardioEntry],
) -> tuple[tuple[CardioEntry, ...], int]:
    """Add synced *entries* whose id is not already in *history*.

    New entries go first (the history is kept newest-first). Duplicates
    inside *entries* are collapsed too. Returns the new history and the
    number of entries added.
    """
    seen = {c.id for c in history}
    added: list[CardioEntry] = []
    for entry in entries:
        if entry.id in seen:
            continue
        seen.add(entry.id)
        added.append(entry)
    if not added:
        return history, 0
    logger.info("Merged %d synced activities", len(added))
    return tuple(added) + history, len(added)
