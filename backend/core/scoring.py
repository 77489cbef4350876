"""
Score arithmetic shared by every matcher.
"""

import math


def round_half_up(value: float) -> int:
    """Round to the nearest integer with halves rounded up (not to even)."""
    return int(math.floor(value + 0.5))


def clamp_score(value: float, lower: float = 0, upper: float = 100) -> float:
    """Clamp a score into [lower, upper]."""
    return max(lower, min(upper, value))


def to_score(value: float) -> int:
    """Clamp into [0, 100] and round to an integer score."""
    return round_half_up(clamp_score(value))
