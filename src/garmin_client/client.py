"""Garmin Connect activity client used for cardio sync.

All methods wrap raw garminconnect calls with error handling and retry logic.
"""

from __future__ import annotations

import logging
import time
from datetime import date
from pathlib import Path
from typing import Any, Callable

from garminconnect import Garmin

from cyberfit.models.cardio import CardioEntry
from garmin_client.activity_mapper import map_activities
from garmin_client.auth import create_session
from garmin_client.exceptions import GarminAPIError, GarminRateLimitError

logger = logging.getLogger(__name__)

_DEFAULT_TOKEN_DIR = Path("~/.garminconnect").expanduser()
_MAX_RETRIES = 3
_BASE_BACKOFF_S = 2
_DEFAULT_ACTIVITY_LIMIT = 10


class GarminClient:
    """Facade for pulling recent activities from Garmin Connect."""

    def __init__(
        self,
        email: str | None = None,
        password: str | None = None,
        token_dir: Path | str = _DEFAULT_TOKEN_DIR,
    ) -> None:
        self._token_dir = Path(token_dir)
        self._garmin = create_session(
            email=email or "",
            password=password or "",
            token_dir=self._token_dir,
        )

    @classmethod
    def from_garmin(cls, garmin: Garmin, token_dir: Path | str = _DEFAULT_TOKEN_DIR) -> "GarminClient":
        """Construct from an already-authenticated Garmin object."""
        obj = cls.__new__(cls)
        obj._token_dir = Path(token_dir)
        obj._garmin = garmin
        return obj

    # ------------------------------------------------------------------
    # Raw activity pulls
    # ------------------------------------------------------------------

    def pull_activities(self, limit: int = _DEFAULT_ACTIVITY_LIMIT) -> list[dict]:
        """Most recent activities of any type, newest first."""
        return self._safe_call(self._garmin.get_activities, 0, limit) or []

    def pull_activities_between(self, start: date, end: date | None = None) -> list[dict]:
        """Activities whose start date falls in [start, end] (end defaults to today)."""
        end = end or date.today()
        return (
            self._safe_call(
                self._garmin.get_activities_by_date,
                start.isoformat(),
                end.isoformat(),
            )
            or []
        )

    # ------------------------------------------------------------------
    # Mapped cardio entries
    # ------------------------------------------------------------------

    def fetch_cardio(self, limit: int = _DEFAULT_ACTIVITY_LIMIT) -> list[CardioEntry]:
        """Recent run, ride and walk activities as external-sync CardioEntries."""
        raw = self.pull_activities(limit)
        entries = map_activities(raw)
        logger.info("Fetched %d activities, %d cardio entries", len(raw), len(entries))
        return entries

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _safe_call(self, fn: Callable, *args: Any, **kwargs: Any) -> Any:
        """Call *fn* with retry + exponential backoff on 429 / transient errors."""
        last_exc: Exception | None = None
        for attempt in range(_MAX_RETRIES):
            try:
                return fn(*args, **kwargs)
            except Exception as exc:
                last_exc = exc
                status = getattr(exc, "status", None) or getattr(
                    exc, "status_code", None
                )
                if status == 429:
                    wait = _BASE_BACKOFF_S * (2 ** attempt)
                    logger.warning(
                        "Rate limited (attempt %d/%d), retrying in %ds",
                        attempt + 1,
                        _MAX_RETRIES,
                        wait,
                    )
                    time.sleep(wait)
                    continue
                raise GarminAPIError(str(exc), status_code=status) from exc

        raise GarminRateLimitError(
            f"Rate limited after {_MAX_RETRIES} retries: {last_exc}"
        )
