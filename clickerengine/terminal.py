from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

from clickerengine._types import compare

if TYPE_CHECKING:
    from clickerengine.engine import ProgressionEngine


class TerminalCondition(ABC):
    """Base class for session stopping conditions."""

    @abstractmethod
    def is_met(self, engine: ProgressionEngine) -> bool: ...

    @abstractmethod
    def describe(self) -> str: ...


class _TimeTerminal(TerminalCondition):
    def __init__(self, seconds: float) -> None:
        self.seconds = seconds

    def is_met(self, engine: ProgressionEngine) -> bool:
        return engine.get_state().time_elapsed >= self.seconds

    def describe(self) -> str:
        return f"time({self.seconds})"


class _ResourceTerminal(TerminalCondition):
    def __init__(self, op: str, threshold: float) -> None:
        self.op = op
        self.threshold = threshold

    def is_met(self, engine: ProgressionEngine) -> bool:
        return compare(engine.resource_count, self.op, self.threshold)

    def describe(self) -> str:
        return f'resource("{self.op}", {self.threshold})'


class _TierTerminal(TerminalCondition):
    def __init__(self, tier_index: int) -> None:
        self.tier_index = tier_index

    def is_met(self, engine: ProgressionEngine) -> bool:
        return engine.auto_tier_index >= self.tier_index

    def describe(self) -> str:
        return f"tier({self.tier_index})"


class _MaxTierTerminal(TerminalCondition):
    def is_met(self, engine: ProgressionEngine) -> bool:
        return engine.auto_production_maxed()

    def describe(self) -> str:
        return "max_tier()"


class _AnyTerminal(TerminalCondition):
    def __init__(self, conditions: list[TerminalCondition]) -> None:
        self.conditions = conditions

    def is_met(self, engine: ProgressionEngine) -> bool:
        return any(c.is_met(engine) for c in self.conditions)

    def describe(self) -> str:
        return " OR ".join(c.describe() for c in self.conditions)


class _AllTerminal(TerminalCondition):
    def __init__(self, conditions: list[TerminalCondition]) -> None:
        self.conditions = conditions

    def is_met(self, engine: ProgressionEngine) -> bool:
        return all(c.is_met(engine) for c in self.conditions)

    def describe(self) -> str:
        return " AND ".join(c.describe() for c in self.conditions)


class Terminal:
    """Factory for built-in terminal conditions."""

    @staticmethod
    def time(seconds: float) -> TerminalCondition:
        return _TimeTerminal(seconds)

    @staticmethod
    def resource(op: str, threshold: float) -> TerminalCondition:
        return _ResourceTerminal(op, threshold)

    @staticmethod
    def tier(tier_index: int) -> TerminalCondition:
        return _TierTerminal(tier_index)

    @staticmethod
    def max_tier() -> TerminalCondition:
        return _MaxTierTerminal()

    @staticmethod
    def any(*conditions: TerminalCondition) -> TerminalCondition:
        return _AnyTerminal(list(conditions))

    @staticmethod
    def all(*conditions: TerminalCondition) -> TerminalCondition:
        return _AllTerminal(list(conditions))
