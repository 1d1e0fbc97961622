"""Nightly scheduler: pulls new Garmin activities into the local store.

Usage:
    python -m scheduler.nightly --once      # single run (for cron)
    python -m scheduler.nightly --daemon    # APScheduler loop
"""

from __future__ import annotations

import argparse
import logging
from typing import Callable, Optional

from cyberfit.actions import SetExternalSyncLinked
from cyberfit.container import AppStore
from cyberfit.storage import StateStore
from garmin_client import GarminClient, GarminClientError

from scheduler.config import (
    ACTIVITY_LIMIT,
    GARMIN_EMAIL,
    GARMIN_PASSWORD,
    NIGHTLY_HOUR,
    NIGHTLY_MINUTE,
    TOKEN_DIR,
)

logger = logging.getLogger(__name__)


def _default_client() -> GarminClient:
    return GarminClient(
        email=GARMIN_EMAIL,
        password=GARMIN_PASSWORD,
        token_dir=TOKEN_DIR,
    )


def nightly_sync_job(
    store: Optional[StateStore] = None,
    client_factory: Callable[[], GarminClient] = _default_client,
) -> Optional[int]:
    """Execute one sync cycle. Returns the number of new entries, None on failure."""
    logger.info("Starting nightly activity sync")

    # 1. Connect to Garmin
    try:
        client = client_factory()
    except GarminClientError as exc:
        logger.error("Failed to connect to Garmin: %s", exc)
        return None

    # 2. Load the store and mark the account as linked
    app = AppStore.open(store or StateStore())
    if not app.state.external_sync_linked:
        app.dispatch(SetExternalSyncLinked(True))

    # 3. Pull and merge
    try:
        added = app.sync_activities(lambda: client.fetch_cardio(ACTIVITY_LIMIT))
    except GarminClientError as exc:
        logger.error("Failed to pull activities: %s", exc)
        return None

    logger.info("Nightly sync complete, %d new activities", added)
    return added


def main() -> None:
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
    parser = argparse.ArgumentParser(description="CyberFit nightly activity sync")
    group = parser.add_mutually_exclusive_group(required=True)
    group.add_argument("--once", action="store_true", help="Run once and exit")
    group.add_argument("--daemon", action="store_true", help="Run as APScheduler daemon")
    args = parser.parse_args()

    if args.once:
        nightly_sync_job()
    else:
        from apscheduler.schedulers.blocking import BlockingScheduler

        scheduler = BlockingScheduler()
        scheduler.add_job(
            nightly_sync_job,
            "cron",
            hour=NIGHTLY_HOUR,
            minute=NIGHTLY_MINUTE,
            id="nightly_sync_job",
        )
        logger.info(
            "Scheduler started, nightly sync at %02d:%02d",
            NIGHTLY_HOUR,
            NIGHTLY_MINUTE,
        )
        try:
            scheduler.start()
        except (KeyboardInterrupt, SystemExit):
            logger.info("Scheduler stopped")


if __name__ == "__main__":
    main()
