"""Calendar-day bucketing in the viewer's local time zone."""

from __future__ import annotations

import logging
from datetime import date, datetime, tzinfo
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from cyberfit import config

logger = logging.getLogger(__name__)


def default_timezone() -> tzinfo | None:
    """Configured IANA zone, or None for the system local zone."""
    if not config.TIMEZONE:
        return None
    try:
        return ZoneInfo(config.TIMEZONE)
    except (ZoneInfoNotFoundError, ValueError):
        logger.warning("Unknown CYBERFIT_TZ %r, using system local time", config.TIMEZONE)
        return None


def local_day(value: datetime, tz: tzinfo | None = None) -> date:
    """Calendar day of *value* as seen in *tz* (system local when None).

    Naive datetimes are already local wall-clock times.
    """
    if value.tzinfo is None:
        return value.date()
    try:
        return value.astimezone(tz).date()
    except (OverflowError, OSError, ValueError):
        return value.date()


def today(tz: tzinfo | None = None) -> date:
    return datetime.now(tz).date() if tz is not None else datetime.now().date()
