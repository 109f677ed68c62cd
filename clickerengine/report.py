from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from clickerengine.metrics import MetricsCollector, PurchaseEvent, ResourceSnapshot
from clickerengine.strategy import AUTO, UPGRADE

if TYPE_CHECKING:
    from clickerengine.engine import EngineSnapshot


@dataclass
class SessionReport:
    """Container for session results and derived metrics."""

    strategy_description: str = ""
    terminal_description: str = ""
    outcome: str = ""
    total_time: float = 0.0

    # Raw metrics
    snapshots: list[ResourceSnapshot] = field(default_factory=list)
    purchases: list[PurchaseEvent] = field(default_factory=list)

    # Final state
    final_resource_count: int = 0
    final_click_power: int = 1
    final_tier_index: int = -1
    total_clicks: int = 0
    total_earned: int = 0

    # Derived metrics
    tier_unlock_times: dict[int, float] = field(default_factory=dict)
    upgrade_times: list[float] = field(default_factory=list)
    purchase_gaps: list[float] = field(default_factory=list)
    max_purchase_gap: float = 0.0
    mean_purchase_gap: float = 0.0
    purchases_per_minute: float = 0.0

    def resource_series(self) -> list[tuple[float, int]]:
        """Return (time, resource_count) series."""
        return [(s.time, s.resource_count) for s in self.snapshots]

    def rate_series(self) -> list[tuple[float, float]]:
        """Return (time, effective rate) series."""
        return [(s.time, s.effective_rate) for s in self.snapshots]


def build_report(
    collector: MetricsCollector,
    strategy_description: str,
    terminal_description: str,
    outcome: str,
    total_time: float,
    final: EngineSnapshot | None = None,
) -> SessionReport:
    """Build a SessionReport from collected metrics.

    *final* is the engine snapshot taken when the session ended.
    """
    tier_unlock_times = {
        p.tier_index: p.time for p in collector.purchases if p.kind == AUTO
    }
    upgrade_times = [p.time for p in collector.purchases if p.kind == UPGRADE]

    purchase_gaps: list[float] = []
    purchase_times = sorted(p.time for p in collector.purchases)
    if purchase_times:
        purchase_gaps.append(purchase_times[0])  # gap from t=0 to first purchase
        for i in range(1, len(purchase_times)):
            purchase_gaps.append(purchase_times[i] - purchase_times[i - 1])

    max_gap = max(purchase_gaps) if purchase_gaps else 0.0
    mean_gap = (sum(purchase_gaps) / len(purchase_gaps)) if purchase_gaps else 0.0
    ppm = (len(collector.purchases) / total_time * 60.0) if total_time > 0 else 0.0

    report = SessionReport(
        strategy_description=strategy_description,
        terminal_description=terminal_description,
        outcome=outcome,
        total_time=total_time,
        snapshots=collector.snapshots,
        purchases=collector.purchases,
        tier_unlock_times=tier_unlock_times,
        upgrade_times=upgrade_times,
        purchase_gaps=purchase_gaps,
        max_purchase_gap=max_gap,
        mean_purchase_gap=mean_gap,
        purchases_per_minute=ppm,
    )
    if final is not None:
        report.final_resource_count = final.resource_count
        report.final_click_power = final.click_power
        report.final_tier_index = final.auto_tier_index
        report.total_clicks = final.total_clicks
        report.total_earned = final.total_earned
    return report
