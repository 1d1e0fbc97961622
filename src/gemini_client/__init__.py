"""Gemini collaborator: meal photo analysis and short coaching tips."""

from gemini_client.analyzer import analyze_meal_image, decode_data_url
from gemini_client.coach import coach_insights
from gemini_client.exceptions import GeminiClientError, MealAnalysisError

__all__ = [
    "GeminiClientError",
    "MealAnalysisError",
    "analyze_meal_image",
    "coach_insights",
    "decode_data_url",
]
