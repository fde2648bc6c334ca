"""Numeric helpers shared by the scoring stages."""

import math


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves away from zero for positives.

    Python's built-in round() uses banker's rounding (round(2.5) == 2), which
    would make 62.5 score as 62. Scores round like a percentage would.

    Example:
        >>> round_half_up(62.5)
        63
    """
    return int(math.floor(value + 0.5))


def clamp_score(value: float) -> int:
    """Round a score and clamp it into the closed range [0, 100]."""
    return max(0, min(100, round_half_up(value)))
