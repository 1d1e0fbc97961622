"""Meal photo analysis.

The model is asked for per-100 g/ml label values (reading any visible
brand or nutrition table first). Whatever shape it answers in goes through
:func:`cyberfit.portion.estimates.parse_estimate`, so a whole-dish answer
with total calories is accepted too.
"""

from __future__ import annotations

import base64
import binascii
import logging

from cyberfit.models.nutrition import NutritionEstimate
from cyberfit.portion.estimates import parse_estimate
from gemini_client.exceptions import GeminiClientError, MealAnalysisError
from gemini_client.model import get_model, parse_json_object, response_text

logger = logging.getLogger(__name__)

DEFAULT_MIME_TYPE = "image/jpeg"

FAILED_MESSAGE = (
    "AI herkenning mislukt. Controleer je internetverbinding "
    "en probeer een duidelijkere foto."
)
MISSING_KEY_MESSAGE = "API_KEY ontbreekt."

MEAL_PROMPT = """Act as an expert dietitian and OCR specialist.

1. Read all text in the image first. If a brand or product name is visible,
   use it as the primary source. Never guess from colour or shape when
   visible text says otherwise.
2. Always report nutrition per 100 g (solids) or per 100 ml (liquids).
   Prefer the printed "per 100 g/ml" table when there is one.
3. Decide whether the product is a liquid ("ml") or a solid ("g").
4. When unsure, give your best guess for the most likely product.

Reply with JSON only, no markdown:
{"name": str, "unit": "g" | "ml", "caloriesPer100": number,
 "proteinPer100": number, "carbsPer100": number, "fatsPer100": number}"""


def decode_data_url(image: str, mime_type: str = DEFAULT_MIME_TYPE) -> tuple[bytes, str]:
    """Split a ``data:<mime>;base64,<data>`` URL (or bare base64) into bytes + mime.

    Raises:
        ValueError: The base64 payload is malformed.
    """
    data = image
    if image.startswith("data:") and "," in image:
        header, data = image.split(",", 1)
        declared = header[len("data:"):].split(";", 1)[0]
        if declared:
            mime_type = declared
    try:
        return base64.b64decode(data, validate=True), mime_type
    except (binascii.Error, ValueError) as exc:
        raise ValueError(f"Invalid base64 image data: {exc}") from exc


def analyze_meal_image(
    image: bytes | str,
    mime_type: str = DEFAULT_MIME_TYPE,
    api_key: str | None = None,
    model_name: str | None = None,
) -> NutritionEstimate:
    """Estimate the nutrition of the food in *image*.

    Args:
        image: Raw image bytes, or a base64 data URL as produced by a
            browser file reader.
        mime_type: Image type for raw bytes. A data URL's own type wins.

    Raises:
        MealAnalysisError: Missing API key, transport failure, or output
            that is not a usable estimate. The message is user-facing.
    """
    if isinstance(image, str):
        try:
            image, mime_type = decode_data_url(image, mime_type)
        except ValueError as exc:
            raise MealAnalysisError(FAILED_MESSAGE) from exc
    if not image:
        raise MealAnalysisError(FAILED_MESSAGE)

    try:
        model = get_model(api_key=api_key, model_name=model_name)
    except GeminiClientError as exc:
        raise MealAnalysisError(MISSING_KEY_MESSAGE) from exc

    try:
        response = model.generate_content(
            [MEAL_PROMPT, {"mime_type": mime_type, "data": image}],
            generation_config={"response_mime_type": "application/json"},
        )
    except Exception as exc:
        logger.error("Gemini meal analysis failed: %s", exc)
        raise MealAnalysisError(FAILED_MESSAGE) from exc

    text = response_text(response)
    try:
        estimate = parse_estimate(parse_json_object(text))
    except ValueError as exc:
        logger.error("Unusable Gemini meal response: %s (%r)", exc, text[:200])
        raise MealAnalysisError(FAILED_MESSAGE) from exc

    logger.info("Analyzed meal image as %s", type(estimate).__name__)
    return estimate
