"""The classic cookie clicker table, spelled out."""
from __future__ import annotations

from clickerengine.config import AutoProductionTier, EngineConfig


def define_config() -> EngineConfig:
    return EngineConfig(
        name="Classic Cookie",
        initial_upgrade_cost=100,
        cost_multiplier=2,
        power_multiplier=2,
        cps_sample_interval=1.0,
        auto_production_interval=1.0,
        auto_production_tiers=(
            AutoProductionTier(unlock_cost=100, production_rate=1),
            AutoProductionTier(unlock_cost=500, production_rate=2),
            AutoProductionTier(unlock_cost=1000, production_rate=5),
            AutoProductionTier(unlock_cost=5000, production_rate=10),
            AutoProductionTier(unlock_cost=20000, production_rate=20),
        ),
    )
