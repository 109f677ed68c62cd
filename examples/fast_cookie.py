"""A quick table for trying strategies: cheap tiers, half-second payouts."""
from __future__ import annotations

from clickerengine.config import AutoProductionTier, EngineConfig


def define_config() -> EngineConfig:
    return EngineConfig(
        name="Fast Cookie",
        initial_upgrade_cost=20,
        cost_multiplier=3,
        power_multiplier=2,
        cps_sample_interval=2.0,
        auto_production_interval=0.5,
        auto_production_tiers=[
            AutoProductionTier(unlock_cost=10, production_rate=1),
            AutoProductionTier(unlock_cost=50, production_rate=3),
            AutoProductionTier(unlock_cost=250, production_rate=10),
        ],
    )
