"""Portion calculator and estimate normalization."""

from cyberfit.portion.calculator import PortionDraft, scale_baseline
from cyberfit.portion.estimates import normalize_estimate, parse_estimate, parse_unit

__all__ = [
    "PortionDraft",
    "normalize_estimate",
    "parse_estimate",
    "parse_unit",
    "scale_baseline",
]
