from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from clickerengine.config import EngineConfig

NO_TIER = -1


class EngineState:
    """Mutable runtime container holding all progression state."""

    def __init__(self, config: EngineConfig) -> None:
        self.resource_count: int = 0
        self.click_power: int = 1
        self.next_upgrade_cost: int = config.initial_upgrade_cost
        self.auto_tier_index: int = NO_TIER
        self.auto_production_rate: int = 0

        # Click-rate sample window
        self.click_sample_count: int = 0
        self.sample_elapsed: float = 0.0
        self.measured_clicks_per_second: float = 0.0

        # Time since the last automatic payout
        self.auto_elapsed: float = 0.0

        # Bookkeeping for hosts and reports
        self.time_elapsed: float = 0.0
        self.upgrades_purchased: int = 0
        self.total_clicks: int = 0
        self.total_earned: int = 0
        self.total_spent: int = 0

    @property
    def auto_unlocked(self) -> bool:
        return self.auto_tier_index > NO_TIER

    def earn(self, amount: int) -> None:
        self.resource_count += amount
        self.total_earned += amount

    def spend(self, amount: int) -> None:
        self.resource_count -= amount
        self.total_spent += amount
