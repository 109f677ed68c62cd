from __future__ import annotations

from typing import Callable


class CostScaling:
    """Determines how a purchase cost changes with purchase count."""

    def __init__(self, fn: Callable[[int, int], int]) -> None:
        self._fn = fn

    def compute(self, base_cost: int, current_count: int) -> int:
        return self._fn(base_cost, current_count)

    @classmethod
    def exponential(cls, multiplier: int = 2) -> CostScaling:
        """Cost = base * multiplier^count, in exact integer arithmetic."""
        m = multiplier  # capture

        def _compute(base: int, count: int) -> int:
            return base * m ** count

        return cls(_compute)
