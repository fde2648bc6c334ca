"""Utility functions for time handling and score arithmetic."""

from .scoring import clamp_score, round_half_up
from .timestamps import ensure_utc, format_timestamp, parse_timestamp, utc_now

__all__ = [
    # Scoring
    "clamp_score",
    "round_half_up",
    # Timestamps
    "utc_now",
    "ensure_utc",
    "format_timestamp",
    "parse_timestamp",
]
