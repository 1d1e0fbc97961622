"""Garmin Connect session handling for activity sync.

Sessions are resumed from garth tokens saved on disk. Credentials are only
needed the first time, or after the tokens expire. Sync runs unattended,
so an account that demands MFA must first be linked interactively
(e.g. with ``garminconnect``'s own login prompt) to seed the token store.
"""

from __future__ import annotations

import logging
import shutil
from pathlib import Path

from garminconnect import Garmin

from garmin_client.exceptions import GarminAuthError

logger = logging.getLogger(__name__)

_DEFAULT_TOKEN_DIR = Path("~/.garminconnect").expanduser()
_TOKEN_FILE = "oauth1_token.json"


def has_saved_tokens(token_dir: Path | str = _DEFAULT_TOKEN_DIR) -> bool:
    return (Path(token_dir) / _TOKEN_FILE).exists()


def resume_session(token_dir: Path | str = _DEFAULT_TOKEN_DIR) -> Garmin:
    """Resume a session from saved tokens (no credentials needed).

    Raises ``GarminAuthError`` if tokens are missing or no longer valid.
    """
    token_dir = Path(token_dir)
    if not has_saved_tokens(token_dir):
        raise GarminAuthError(f"No saved tokens at {token_dir}")

    try:
        garmin = Garmin()
        garmin.login(tokenstore=str(token_dir))
    except Exception as exc:
        raise GarminAuthError(f"Token resume failed: {exc}") from exc
    logger.debug("Resumed Garmin session from %s", token_dir)
    return garmin


def create_session(
    email: str,
    password: str,
    token_dir: Path | str = _DEFAULT_TOKEN_DIR,
) -> Garmin:
    """Return an authenticated session, preferring saved tokens.

    Falls back to a credential login when no tokens are stored or resuming
    fails, and saves the fresh tokens for next time.

    Raises:
        GarminAuthError: Credentials missing or rejected, or the account
            requires an MFA code.
    """
    token_dir = Path(token_dir)
    if has_saved_tokens(token_dir):
        try:
            return resume_session(token_dir)
        except GarminAuthError:
            logger.info("Token resume failed, logging in with credentials")

    if not email or not password:
        raise GarminAuthError("No saved tokens and no Garmin credentials configured")

    try:
        garmin = Garmin(email=email, password=password)
        garmin.login()
    except Exception as exc:
        msg = str(exc).lower()
        if "mfa" in msg or "verification" in msg:
            raise GarminAuthError(
                "Garmin account requires MFA; link it interactively first"
            ) from exc
        raise GarminAuthError(f"Login failed: {exc}") from exc

    token_dir.mkdir(parents=True, exist_ok=True)
    garmin.garth.dump(str(token_dir))
    logger.info("Logged in to Garmin Connect and saved tokens to %s", token_dir)
    return garmin


def clear_tokens(token_dir: Path | str = _DEFAULT_TOKEN_DIR) -> None:
    """Delete saved tokens, unlinking the account."""
    token_dir = Path(token_dir)
    if token_dir.exists():
        shutil.rmtree(token_dir)
        logger.info("Cleared tokens at %s", token_dir)
