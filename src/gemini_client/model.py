"""Configured Gemini model handles and response text extraction."""

from __future__ import annotations

import json
import logging
import re
from typing import Any

import google.generativeai as genai

from cyberfit import config
from gemini_client.exceptions import GeminiClientError

logger = logging.getLogger(__name__)

_MIN_KEY_LENGTH = 5


def is_configured(api_key: str | None = None) -> bool:
    key = api_key if api_key is not None else config.GEMINI_API_KEY
    return bool(key) and key != "undefined" and len(key) >= _MIN_KEY_LENGTH


def get_model(api_key: str | None = None, model_name: str | None = None) -> Any:
    """Return a GenerativeModel for *model_name*.

    Raises:
        GeminiClientError: No usable API key is configured.
    """
    key = api_key if api_key is not None else config.GEMINI_API_KEY
    if not is_configured(key):
        raise GeminiClientError("GEMINI_API_KEY is missing")
    genai.configure(api_key=key)
    name = model_name or config.GEMINI_MODEL
    logger.debug("Using Gemini model %s", name)
    return genai.GenerativeModel(name)


def response_text(response: Any) -> str:
    """Text of a generate_content response, "" when it was blocked or empty."""
    try:
        return (response.text or "").strip()
    except ValueError:
        # .text raises when the candidate has no parts (safety block)
        return ""


def parse_json_object(text: str) -> dict[str, Any]:
    """Parse the first JSON object in *text*, tolerating code fences.

    Raises:
        ValueError: No JSON object could be decoded.
    """
    if not text:
        raise ValueError("Empty model response")
    match = re.search(r"\{.*\}", text, flags=re.DOTALL)
    payload = match.group(0) if match else text
    try:
        parsed = json.loads(payload)
    except json.JSONDecodeError as exc:
        raise ValueError(f"Model response is not JSON: {exc}") from exc
    if not isinstance(parsed, dict):
        raise ValueError("Model response is not a JSON object")
    return parsed
