"""Numeric helpers shared by the conversion formulas."""

import math
import sys

EPSILON = sys.float_info.epsilon


def round_half_away(value: float) -> int:
    """Round to the nearest integer, halves away from zero (76.5 -> 77)."""
    rounded = math.floor(abs(value) + 0.5)
    return int(math.copysign(rounded, value)) if rounded else 0
