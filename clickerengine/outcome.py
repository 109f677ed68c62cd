from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto


@dataclass(frozen=True)
class UpgradeResult:
    """Outcome of a click-power upgrade attempt."""

    accepted: bool
    cost: int = 0

    def __bool__(self) -> bool:
        return self.accepted


class AutoProductionOutcome(Enum):
    REJECTED = auto()
    ADVANCED = auto()
    ALREADY_MAXED = auto()


@dataclass(frozen=True)
class AutoProductionResult:
    """Outcome of an auto-production unlock or advance attempt.

    ``tier_index`` is the newly reached tier for ADVANCED, otherwise the
    tier the engine is still at.
    """

    outcome: AutoProductionOutcome
    tier_index: int
    cost: int = 0

    @property
    def advanced(self) -> bool:
        return self.outcome is AutoProductionOutcome.ADVANCED

    def __bool__(self) -> bool:
        return self.advanced
