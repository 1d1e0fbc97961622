"""Exception hierarchy for the Gemini meal analyzer."""

from __future__ import annotations


class GeminiClientError(Exception):
    """Base exception for all gemini_client errors."""


class MealAnalysisError(GeminiClientError):
    """A meal photo could not be turned into a nutrition estimate.

    The message is meant to be shown to the user as-is.
    """
