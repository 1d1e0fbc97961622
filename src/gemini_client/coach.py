"""Short coaching tips from recent training and body data.

Never raises: the dashboard always gets a line of text, falling back to a
fixed message when the model is unconfigured, unreachable, or silent.
"""

from __future__ import annotations

import logging

from cyberfit.aggregation.body import latest_health
from cyberfit.models.app_state import AppState
from gemini_client.exceptions import GeminiClientError
from gemini_client.model import get_model, is_configured, response_text

logger = logging.getLogger(__name__)

NOT_CONFIGURED_MESSAGE = "AI-coach configuratie nodig."
OFFLINE_MESSAGE = "De AI coach is tijdelijk offline."
EMPTY_MESSAGE = "Lekker bezig, blijf loggen!"

RECENT_SESSIONS = 3


def build_context(state: AppState) -> tuple[str, str]:
    """Return (bio context, recent-training context) for the coach prompt."""
    latest = latest_health(state.health_history)
    bio = ""
    if latest is not None:
        bio = (
            f"Age: {latest.age if latest.age is not None else 'unknown'}, "
            f"weight: {latest.weight_kg:g}kg, "
            f"height: {f'{latest.height_cm:g}cm' if latest.height_cm else 'unknown'}, "
            f"goal: {latest.goal_label or 'unknown'}."
        )
    recent = state.workouts[-RECENT_SESSIONS:]
    training = ", ".join(f"{w.label}: {len(w.exercises)} sets" for w in recent)
    return bio, training


def coach_insights(
    state: AppState,
    api_key: str | None = None,
    model_name: str | None = None,
) -> str:
    """Three short tips in Dutch, or a fallback message."""
    if not is_configured(api_key):
        return NOT_CONFIGURED_MESSAGE

    bio, training = build_context(state)
    prompt = (
        "You are a high-performance fitness coach. Give 3 very short, punchy "
        f"tips in Dutch based on this data: {bio} "
        f"Recent workouts: {training or 'none'}. "
        "Focus on progressive overload and consistency."
    )
    try:
        model = get_model(api_key=api_key, model_name=model_name)
        response = model.generate_content(prompt)
    except GeminiClientError:
        return NOT_CONFIGURED_MESSAGE
    except Exception as exc:
        logger.warning("Coach insights unavailable: %s", exc)
        return OFFLINE_MESSAGE
    return response_text(response) or EMPTY_MESSAGE
