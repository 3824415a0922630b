"""Small numeric helpers shared by the scorers."""
from __future__ import annotations

import math


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves rounding toward +infinity.

    Python's built-in ``round`` uses banker's rounding, which would make
    scores like 72.5 land on 72. All published scores use this instead.
    """
    return int(math.floor(value + 0.5))


def clamp(value: float, low: float = 0.0, high: float = 100.0) -> float:
    return max(low, min(high, value))
