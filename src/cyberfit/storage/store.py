"""File-backed durable storage for the whole application state.

The state lives in a single JSON file named after a well-known storage key.
Loading never fails: a missing file gives an empty state, and a corrupt one
is logged and replaced by the empty default. Saving is best-effort. Errors
are logged and recorded on ``last_save_failed`` but never raised, so the
in-memory state can drift from the file after a failed write.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from tempfile import NamedTemporaryFile

from cyberfit import config
from cyberfit.models.app_state import AppState
from cyberfit.storage.codec import state_from_blob, state_to_blob
from cyberfit.storage.migration import migrate_blob

logger = logging.getLogger(__name__)


class StateStore:
    """Load/save of the AppState blob.

    Usage:
        store = StateStore()
        state = store.load()
        store.save(state)
    """

    def __init__(
        self,
        data_dir: Path | str | None = None,
        storage_key: str | None = None,
    ) -> None:
        self._data_dir = Path(data_dir) if data_dir is not None else config.DATA_DIR
        self._storage_key = storage_key or config.STORAGE_KEY
        self.last_save_failed = False

    @property
    def path(self) -> Path:
        return self._data_dir / f"{self._storage_key}.json"

    def load(self) -> AppState:
        """Read the stored state, migrating old shapes. Never raises."""
        path = self.path
        if not path.exists():
            return AppState()

        try:
            raw = json.loads(path.read_text(encoding="utf-8"))
        except (OSError, UnicodeDecodeError, json.JSONDecodeError) as exc:
            logger.error("Failed to parse state at %s, using defaults: %s", path, exc)
            return AppState()

        if not isinstance(raw, dict):
            logger.error(
                "State at %s is a %s, not an object; using defaults",
                path,
                type(raw).__name__,
            )
            return AppState()

        try:
            return state_from_blob(migrate_blob(raw))
        except (TypeError, ValueError, AttributeError) as exc:
            logger.error("Failed to decode state at %s, using defaults: %s", path, exc)
            return AppState()

    def save(self, state: AppState) -> None:
        """Overwrite the stored state. Best-effort: failures are only logged."""
        path = self.path
        temp_path: Path | None = None
        try:
            payload = json.dumps(state_to_blob(state), indent=2) + "\n"
            path.parent.mkdir(parents=True, exist_ok=True)
            with NamedTemporaryFile(
                "w", dir=path.parent, delete=False, encoding="utf-8", suffix=".tmp"
            ) as tmp:
                temp_path = Path(tmp.name)
                tmp.write(payload)
            temp_path.replace(path)
        except (OSError, TypeError, ValueError) as exc:
            self.last_save_failed = True
            logger.error("Failed to save state to %s: %s", path, exc)
            self._discard_temp(temp_path)
            return
        self.last_save_failed = False
        logger.debug("Saved state to %s", path)

    @staticmethod
    def _discard_temp(temp_path: Path | None) -> None:
        if temp_path is None:
            return
        try:
            temp_path.unlink(missing_ok=True)
        except OSError as exc:
            logger.warning("Could not remove temp file %s: %s", temp_path, exc)
