"""Utility helpers for the combo recommender."""

from __future__ import annotations

import math
from decimal import ROUND_HALF_UP, Decimal
from typing import Any


def round_half_up(value: float, places: int = 2) -> float:
    """Round like JavaScript's ``toFixed``: half-up on the float's exact value."""
    quantum = Decimal(1).scaleb(-places)
    return float(Decimal(value).quantize(quantum, rounding=ROUND_HALF_UP))


def is_valid_budget(budget: Any) -> bool:
    """A budget must be a finite number strictly greater than zero."""
    if isinstance(budget, bool) or not isinstance(budget, (int, float)):
        return False
    return math.isfinite(budget) and budget > 0


def walk_minutes(distance_miles: float, speed_mph: float = 3.0) -> int:
    """Approximate walking time, never less than a minute."""
    minutes = distance_miles / speed_mph * 60
    return max(1, int(round_half_up(minutes, 0)))
