from __future__ import annotations

from dataclasses import dataclass, field

from clickerengine._types import is_int
from clickerengine.cost_scaling import CostScaling


@dataclass(frozen=True)
class AutoProductionTier:
    """One level of automatic production: what it costs and what it pays."""

    unlock_cost: int
    production_rate: int


DEFAULT_TIERS: tuple[AutoProductionTier, ...] = (
    AutoProductionTier(unlock_cost=100, production_rate=1),
    AutoProductionTier(unlock_cost=500, production_rate=2),
    AutoProductionTier(unlock_cost=1000, production_rate=5),
    AutoProductionTier(unlock_cost=5000, production_rate=10),
    AutoProductionTier(unlock_cost=20000, production_rate=20),
)


@dataclass(frozen=True)
class EngineConfig:
    """Complete static configuration of a progression engine."""

    name: str = "Cookie Clicker"
    initial_upgrade_cost: int = 100
    cost_multiplier: int = 2
    power_multiplier: int = 2
    cps_sample_interval: float = 1.0
    auto_production_interval: float = 1.0
    auto_production_tiers: tuple[AutoProductionTier, ...] = field(
        default=DEFAULT_TIERS
    )

    def __post_init__(self) -> None:
        # Accept any sequence but store an immutable tuple
        if not isinstance(self.auto_production_tiers, tuple):
            object.__setattr__(
                self, "auto_production_tiers", tuple(self.auto_production_tiers)
            )

    @property
    def tier_count(self) -> int:
        return len(self.auto_production_tiers)

    def get_tier(self, index: int) -> AutoProductionTier | None:
        if 0 <= index < len(self.auto_production_tiers):
            return self.auto_production_tiers[index]
        return None

    def upgrade_cost_scaling(self) -> CostScaling:
        return CostScaling.exponential(self.cost_multiplier)

    def validate(self) -> list[str]:
        """Check value constraints. Returns list of error messages."""
        errors: list[str] = []

        if not is_int(self.initial_upgrade_cost) or self.initial_upgrade_cost <= 0:
            errors.append(
                f"initial_upgrade_cost must be a positive integer, got {self.initial_upgrade_cost!r}"
            )
        if not is_int(self.cost_multiplier) or self.cost_multiplier < 2:
            errors.append(
                f"cost_multiplier must be an integer >= 2, got {self.cost_multiplier!r}"
            )
        if not is_int(self.power_multiplier) or self.power_multiplier < 2:
            errors.append(
                f"power_multiplier must be an integer >= 2, got {self.power_multiplier!r}"
            )

        for attr in ("cps_sample_interval", "auto_production_interval"):
            value = getattr(self, attr)
            if (
                isinstance(value, bool)
                or not isinstance(value, (int, float))
                or not value > 0
            ):
                errors.append(f"{attr} must be a positive duration, got {value!r}")

        tiers = self.auto_production_tiers
        if not tiers:
            errors.append("auto_production_tiers must contain at least one tier")

        prev_cost: int | None = None
        for i, tier in enumerate(tiers):
            if not isinstance(tier, AutoProductionTier):
                errors.append(f"Tier {i} is not an AutoProductionTier: {tier!r}")
                continue
            if not is_int(tier.unlock_cost) or tier.unlock_cost <= 0:
                errors.append(
                    f"Tier {i} unlock_cost must be a positive integer, got {tier.unlock_cost!r}"
                )
                continue
            if not is_int(tier.production_rate) or tier.production_rate <= 0:
                errors.append(
                    f"Tier {i} production_rate must be a positive integer, got {tier.production_rate!r}"
                )
            if prev_cost is not None and tier.unlock_cost <= prev_cost:
                errors.append(
                    f"Tier {i} unlock_cost {tier.unlock_cost} must exceed "
                    f"previous tier cost {prev_cost}"
                )
            prev_cost = tier.unlock_cost

        return errors


def default_config() -> EngineConfig:
    """The classic cookie table: 100 to start, x2 cost, x2 power, five tiers."""
    return EngineConfig()
