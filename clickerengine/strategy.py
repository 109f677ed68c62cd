from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Callable

if TYPE_CHECKING:
    from clickerengine.engine import ProgressionEngine

UPGRADE = "upgrade"
AUTO = "auto"


@dataclass
class ClickProfile:
    """Configures manual clicking for strategies."""

    clicks_per_second: float = 0.0
    active_until: Callable[[ProgressionEngine], bool] | None = None
    _carry: float = field(default=0.0, init=False, repr=False)

    def get_clicks(self, engine: ProgressionEngine, duration: float) -> int:
        """Return the number of clicks for the given duration.

        Fractional clicks carry over to the next call, so 2.5 CPS over
        1-second steps yields 2, 3, 2, 3, ...
        """
        if self.active_until is not None and self.active_until(engine):
            return 0
        if self.clicks_per_second <= 0 or duration <= 0:
            return 0

        exact = self.clicks_per_second * duration + self._carry
        clicks = int(exact)
        self._carry = exact - clicks
        return clicks

    def reset(self) -> None:
        self._carry = 0.0


class Strategy(ABC):
    """Base class for scripted players."""

    def __init__(self, click_profile: ClickProfile | None = None) -> None:
        self.click_profile = click_profile

    @abstractmethod
    def decide_purchases(self, engine: ProgressionEngine) -> list[str]:
        """Return ordered purchase kinds (UPGRADE / AUTO) to attempt now."""
        ...

    def get_clicks(self, engine: ProgressionEngine, duration: float) -> int:
        """Return clicks during this step. Override or use click_profile."""
        if self.click_profile:
            return self.click_profile.get_clicks(engine, duration)
        return 0

    @abstractmethod
    def describe(self) -> str: ...

    def _describe_clicks(self, name: str) -> str:
        if self.click_profile and self.click_profile.clicks_per_second > 0:
            return f"{name} ({self.click_profile.clicks_per_second:g} CPS)"
        return name


def _affordable(engine: ProgressionEngine) -> dict[str, int]:
    """Purchase kinds affordable right now, with their costs."""
    options: dict[str, int] = {}
    if engine.can_afford_upgrade():
        options[UPGRADE] = engine.next_upgrade_cost
    tier = engine.next_auto_tier()
    if tier is not None and engine.can_advance_auto_production():
        options[AUTO] = tier.unlock_cost
    return options


class UpgradeFirst(Strategy):
    """Always prefer click power; unlock auto production with what is left."""

    def decide_purchases(self, engine: ProgressionEngine) -> list[str]:
        options = _affordable(engine)
        return [kind for kind in (UPGRADE, AUTO) if kind in options]

    def describe(self) -> str:
        return self._describe_clicks("UpgradeFirst")


class AutoProductionFirst(Strategy):
    """Climb the auto-production tiers before buying click power."""

    def decide_purchases(self, engine: ProgressionEngine) -> list[str]:
        options = _affordable(engine)
        return [kind for kind in (AUTO, UPGRADE) if kind in options]

    def describe(self) -> str:
        return self._describe_clicks("AutoProductionFirst")


class CheapestFirst(Strategy):
    """Buy whichever affordable purchase costs least."""

    def decide_purchases(self, engine: ProgressionEngine) -> list[str]:
        options = _affordable(engine)
        return sorted(options, key=lambda kind: options[kind])

    def describe(self) -> str:
        return self._describe_clicks("CheapestFirst")


class ClicksOnly(Strategy):
    """Never buys anything. Baseline for comparisons."""

    def decide_purchases(self, engine: ProgressionEngine) -> list[str]:
        return []

    def describe(self) -> str:
        return self._describe_clicks("ClicksOnly")


class CustomStrategy(Strategy):
    """Strategy defined by callables."""

    def __init__(
        self,
        decide_fn: Callable[[ProgressionEngine], list[str]] | None = None,
        clicks_fn: Callable[[ProgressionEngine, float], int] | None = None,
        name: str = "Custom",
    ) -> None:
        super().__init__()
        self._decide_fn = decide_fn
        self._clicks_fn = clicks_fn
        self._name = name

    def decide_purchases(self, engine: ProgressionEngine) -> list[str]:
        if self._decide_fn:
            return self._decide_fn(engine)
        return []

    def get_clicks(self, engine: ProgressionEngine, duration: float) -> int:
        if self._clicks_fn:
            return self._clicks_fn(engine, duration)
        return 0

    def describe(self) -> str:
        return self._name


STRATEGY_REGISTRY: dict[str, type[Strategy]] = {
    "upgrade_first": UpgradeFirst,
    "auto_first": AutoProductionFirst,
    "cheapest": CheapestFirst,
    "clicks_only": ClicksOnly,
}
