from __future__ import annotations

from dataclasses import dataclass

import structlog

from clickerengine._types import Seconds
from clickerengine.config import AutoProductionTier, EngineConfig
from clickerengine.outcome import (
    AutoProductionOutcome,
    AutoProductionResult,
    UpgradeResult,
)
from clickerengine.state import EngineState

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class EngineSnapshot:
    """Read-only copy of the query surface at one point in time."""

    time_elapsed: float
    resource_count: int
    click_power: int
    next_upgrade_cost: int
    auto_tier_index: int
    auto_production_rate: int
    measured_clicks_per_second: float
    effective_resource_per_second: float
    upgrades_purchased: int
    total_clicks: int
    total_earned: int


class ProgressionEngine:
    """Authoritative progression logic: clicks, upgrades, auto production."""

    def __init__(self, config: EngineConfig) -> None:
        errors = config.validate()
        if errors:
            raise ValueError(
                "Invalid EngineConfig:\n" + "\n".join(f"  - {e}" for e in errors)
            )

        self.config = config
        self._upgrade_scaling = config.upgrade_cost_scaling()
        self.state = EngineState(config)

    # ── Core loop ────────────────────────────────────────────────────

    def tick(self, delta: Seconds) -> None:
        """Advance the engine by *delta* seconds."""
        if delta < 0:
            logger.warning("negative_delta_clamped", delta=delta)
            delta = 0.0

        state = self.state
        self._update_click_rate(delta)
        self._update_auto_production(delta)
        state.time_elapsed += delta

    # ── Player actions ───────────────────────────────────────────────

    def click(self) -> int:
        """Register one manual click. Returns the amount added."""
        state = self.state
        gained = state.click_power
        state.earn(gained)
        state.click_sample_count += 1
        state.total_clicks += 1
        return gained

    def purchase_upgrade(self) -> UpgradeResult:
        """Buy a click-power upgrade if the next one is affordable."""
        state = self.state
        cost = state.next_upgrade_cost

        if state.resource_count < cost:
            logger.debug(
                "upgrade_rejected", cost=cost, resource_count=state.resource_count
            )
            return UpgradeResult(accepted=False, cost=cost)

        state.spend(cost)
        state.click_power *= self.config.power_multiplier
        state.upgrades_purchased += 1
        state.next_upgrade_cost = self._upgrade_scaling.compute(
            self.config.initial_upgrade_cost, state.upgrades_purchased
        )

        logger.debug(
            "upgrade_purchased",
            cost=cost,
            click_power=state.click_power,
            next_upgrade_cost=state.next_upgrade_cost,
        )
        return UpgradeResult(accepted=True, cost=cost)

    def purchase_or_advance_auto_production(self) -> AutoProductionResult:
        """Unlock the next auto-production tier. Tiers unlock strictly in order."""
        state = self.state
        next_index = state.auto_tier_index + 1
        tier = self.config.get_tier(next_index)

        if tier is None:
            return AutoProductionResult(
                outcome=AutoProductionOutcome.ALREADY_MAXED,
                tier_index=state.auto_tier_index,
            )

        if state.resource_count < tier.unlock_cost:
            logger.info(
                "auto_production_rejected",
                tier=next_index,
                cost=tier.unlock_cost,
                resource_count=state.resource_count,
            )
            return AutoProductionResult(
                outcome=AutoProductionOutcome.REJECTED,
                tier_index=state.auto_tier_index,
                cost=tier.unlock_cost,
            )

        state.spend(tier.unlock_cost)
        state.auto_tier_index = next_index
        state.auto_production_rate = tier.production_rate
        # Payout timer restarts on every tier change
        state.auto_elapsed = 0.0

        logger.info(
            "auto_production_advanced",
            tier=next_index,
            cost=tier.unlock_cost,
            production_rate=tier.production_rate,
        )
        return AutoProductionResult(
            outcome=AutoProductionOutcome.ADVANCED,
            tier_index=next_index,
            cost=tier.unlock_cost,
        )

    def reset(self) -> None:
        """Discard all progress and start from a fresh state."""
        self.state = EngineState(self.config)

    # ── Queries ──────────────────────────────────────────────────────

    def get_state(self) -> EngineState:
        """Return live reference to engine state."""
        return self.state

    @property
    def resource_count(self) -> int:
        return self.state.resource_count

    @property
    def click_power(self) -> int:
        return self.state.click_power

    @property
    def next_upgrade_cost(self) -> int:
        return self.state.next_upgrade_cost

    @property
    def measured_clicks_per_second(self) -> float:
        return self.state.measured_clicks_per_second

    @property
    def auto_tier_index(self) -> int:
        return self.state.auto_tier_index

    @property
    def auto_production_rate(self) -> int:
        return self.state.auto_production_rate

    @property
    def effective_resource_per_second(self) -> float:
        """Measured manual rate plus configured automatic rate. Informational only."""
        state = self.state
        manual = state.measured_clicks_per_second * state.click_power
        if not state.auto_unlocked:
            return manual
        return manual + state.auto_production_rate / self.config.auto_production_interval

    def can_afford_upgrade(self) -> bool:
        return self.state.resource_count >= self.state.next_upgrade_cost

    def next_auto_tier(self) -> AutoProductionTier | None:
        return self.config.get_tier(self.state.auto_tier_index + 1)

    def can_advance_auto_production(self) -> bool:
        tier = self.next_auto_tier()
        return tier is not None and self.state.resource_count >= tier.unlock_cost

    def auto_production_maxed(self) -> bool:
        return self.state.auto_tier_index == self.config.tier_count - 1

    def snapshot(self) -> EngineSnapshot:
        state = self.state
        return EngineSnapshot(
            time_elapsed=state.time_elapsed,
            resource_count=state.resource_count,
            click_power=state.click_power,
            next_upgrade_cost=state.next_upgrade_cost,
            auto_tier_index=state.auto_tier_index,
            auto_production_rate=state.auto_production_rate,
            measured_clicks_per_second=state.measured_clicks_per_second,
            effective_resource_per_second=self.effective_resource_per_second,
            upgrades_purchased=state.upgrades_purchased,
            total_clicks=state.total_clicks,
            total_earned=state.total_earned,
        )

    # ── Private helpers ──────────────────────────────────────────────

    def _update_click_rate(self, delta: Seconds) -> None:
        """Close the sample window once it spans the configured interval."""
        state = self.state
        state.sample_elapsed += delta
        if state.sample_elapsed >= self.config.cps_sample_interval:
            # Divide by the time actually accrued, not the nominal interval
            state.measured_clicks_per_second = (
                state.click_sample_count / state.sample_elapsed
            )
            state.click_sample_count = 0
            state.sample_elapsed = 0.0

    def _update_auto_production(self, delta: Seconds) -> None:
        """Pay out at most once per call, however many intervals *delta* spans."""
        state = self.state
        if not state.auto_unlocked:
            return
        state.auto_elapsed += delta
        if state.auto_elapsed >= self.config.auto_production_interval:
            state.auto_elapsed = 0.0
            state.earn(state.auto_production_rate)
