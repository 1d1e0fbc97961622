"""Durable storage: JSON codec, legacy migration, and the file-backed store."""

from cyberfit.storage.codec import state_from_blob, state_to_blob
from cyberfit.storage.migration import migrate_blob, needs_migration
from cyberfit.storage.store import StateStore

__all__ = [
    "StateStore",
    "migrate_blob",
    "needs_migration",
    "state_from_blob",
    "state_to_blob",
]
