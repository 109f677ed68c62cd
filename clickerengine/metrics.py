from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from clickerengine.engine import ProgressionEngine

# Accumulated tick times drift by float rounding; gaps this close count as a full interval
_TIME_EPSILON = 1e-9


@dataclass
class ResourceSnapshot:
    time: float
    resource_count: int
    click_power: int
    auto_tier_index: int
    measured_cps: float
    effective_rate: float


@dataclass
class PurchaseEvent:
    time: float
    kind: str
    cost: int
    tier_index: int
    resource_after: int


class MetricsCollector:
    """Collects session metrics at configurable intervals."""

    def __init__(self, snapshot_interval: float = 1.0) -> None:
        self.snapshot_interval = snapshot_interval
        self._last_snapshot_time: float | None = None

        self.snapshots: list[ResourceSnapshot] = []
        self.purchases: list[PurchaseEvent] = []

    def record_tick(self, engine: ProgressionEngine) -> None:
        """Record a snapshot if enough time has passed."""
        now = engine.get_state().time_elapsed
        if (
            self._last_snapshot_time is None
            or now - self._last_snapshot_time >= self.snapshot_interval - _TIME_EPSILON
        ):
            self._take_snapshot(engine)
            self._last_snapshot_time = now

    def record_purchase(self, engine: ProgressionEngine, kind: str, cost: int) -> None:
        state = engine.get_state()
        self.purchases.append(
            PurchaseEvent(
                time=state.time_elapsed,
                kind=kind,
                cost=cost,
                tier_index=state.auto_tier_index,
                resource_after=state.resource_count,
            )
        )

    def _take_snapshot(self, engine: ProgressionEngine) -> None:
        snap = engine.snapshot()
        self.snapshots.append(
            ResourceSnapshot(
                time=snap.time_elapsed,
                resource_count=snap.resource_count,
                click_power=snap.click_power,
                auto_tier_index=snap.auto_tier_index,
                measured_cps=snap.measured_clicks_per_second,
                effective_rate=snap.effective_resource_per_second,
            )
        )
