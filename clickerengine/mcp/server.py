"""MCP server wrapping ProgressionEngine for interactive AI playtesting."""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any

from mcp.server.fastmcp import FastMCP

from clickerengine.config import EngineConfig
from clickerengine.engine import ProgressionEngine
from clickerengine.outcome import AutoProductionOutcome
from clickerengine.presentation import build_panel

# Maximum seconds per wait() call (24 hours)
_MAX_WAIT = 86400
# Maximum clicks per click() call
_MAX_CLICKS = 1000
# Leftover wait time below this is float noise
_TIME_EPSILON = 1e-9


@dataclass
class _GameHolder:
    """Holds the active configuration and engine."""

    config: EngineConfig
    engine: ProgressionEngine

    @property
    def tick_step(self) -> float:
        # One payout per tick, so never step past an auto-production interval
        return min(1.0, self.config.auto_production_interval)


# ── Tool logic functions (testable without MCP protocol) ────────────


def _tool_get_game_info(holder: _GameHolder) -> dict[str, Any]:
    cfg = holder.config
    return {
        "name": cfg.name,
        "initial_upgrade_cost": cfg.initial_upgrade_cost,
        "cost_multiplier": cfg.cost_multiplier,
        "power_multiplier": cfg.power_multiplier,
        "cps_sample_interval": cfg.cps_sample_interval,
        "auto_production_interval": cfg.auto_production_interval,
        "auto_production_tiers": [
            {"level": i + 1, "unlock_cost": t.unlock_cost, "production_rate": t.production_rate}
            for i, t in enumerate(cfg.auto_production_tiers)
        ],
    }


def _tool_get_game_state(holder: _GameHolder) -> dict[str, Any]:
    engine = holder.engine
    snap = engine.snapshot()
    nxt = engine.next_auto_tier()
    return {
        "time_elapsed": round(snap.time_elapsed, 2),
        "resource_count": snap.resource_count,
        "click_power": snap.click_power,
        "next_upgrade_cost": snap.next_upgrade_cost,
        "can_afford_upgrade": engine.can_afford_upgrade(),
        "auto_tier_index": snap.auto_tier_index,
        "auto_production_rate": snap.auto_production_rate,
        "next_auto_tier": (
            {"unlock_cost": nxt.unlock_cost, "production_rate": nxt.production_rate}
            if nxt is not None
            else None
        ),
        "measured_clicks_per_second": round(snap.measured_clicks_per_second, 4),
        "effective_resource_per_second": round(snap.effective_resource_per_second, 4),
        "total_clicks": snap.total_clicks,
        "total_earned": snap.total_earned,
        "panel": asdict(build_panel(engine)),
    }


def _tool_click(holder: _GameHolder, count: int = 1) -> dict[str, Any]:
    if count < 1:
        return {"error": "Count must be at least 1"}
    if count > _MAX_CLICKS:
        return {"error": f"Count cannot exceed {_MAX_CLICKS}"}

    total = 0
    for _ in range(count):
        total += holder.engine.click()
    return {
        "clicks": count,
        "total_earned": total,
        "new_balance": holder.engine.resource_count,
    }


def _tool_purchase_upgrade(holder: _GameHolder) -> dict[str, Any]:
    result = holder.engine.purchase_upgrade()
    if result.accepted:
        return {
            "success": True,
            "cost": result.cost,
            "click_power": holder.engine.click_power,
            "next_upgrade_cost": holder.engine.next_upgrade_cost,
        }
    return {
        "success": False,
        "reason": f"Cannot afford: need {result.cost}, have {holder.engine.resource_count}",
    }


def _tool_purchase_auto_production(holder: _GameHolder) -> dict[str, Any]:
    result = holder.engine.purchase_or_advance_auto_production()
    if result.outcome is AutoProductionOutcome.ADVANCED:
        return {
            "success": True,
            "tier_index": result.tier_index,
            "cost": result.cost,
            "production_rate": holder.engine.auto_production_rate,
        }
    if result.outcome is AutoProductionOutcome.ALREADY_MAXED:
        return {"success": False, "reason": "Already at max level"}
    return {
        "success": False,
        "reason": f"Cannot afford: need {result.cost}, have {holder.engine.resource_count}",
    }


def _tool_wait(holder: _GameHolder, seconds: float) -> dict[str, Any]:
    if seconds <= 0:
        return {"error": "Seconds must be positive"}
    if seconds > _MAX_WAIT:
        return {"error": f"Cannot wait more than {_MAX_WAIT} seconds (24h) per call"}

    engine = holder.engine
    before = engine.resource_count

    # Whole steps; repeated float subtraction would shorten the last one
    step = holder.tick_step
    steps = int(round(seconds / step, 9))
    for _ in range(steps):
        engine.tick(step)
    leftover = seconds - steps * step
    if leftover > _TIME_EPSILON:
        engine.tick(leftover)

    return {
        "waited": seconds,
        "time_elapsed": round(engine.get_state().time_elapsed, 2),
        "earned": engine.resource_count - before,
        "resource_count": engine.resource_count,
    }


def _tool_new_game(holder: _GameHolder) -> dict[str, Any]:
    holder.engine.reset()
    return {"success": True, "message": "Game reset to initial state"}


# ── Server factory ──────────────────────────────────────────────────


def create_server(config: EngineConfig) -> FastMCP:
    """Create an MCP server wrapping a ProgressionEngine for the given config."""
    holder = _GameHolder(config=config, engine=ProgressionEngine(config))

    mcp = FastMCP(name=f"clickerengine: {config.name}")

    @mcp.tool()
    def get_game_info() -> dict[str, Any]:
        """Get static configuration: upgrade costs, multipliers, auto-production tiers."""
        return _tool_get_game_info(holder)

    @mcp.tool()
    def get_game_state() -> dict[str, Any]:
        """Get current state: cookies, click power, costs, tier, measured rates and panel texts."""
        return _tool_get_game_state(holder)

    @mcp.tool()
    def click(count: int = 1) -> dict[str, Any]:
        """Click the cookie N times (max 1000). Returns total earned."""
        return _tool_click(holder, count)

    @mcp.tool()
    def purchase_upgrade() -> dict[str, Any]:
        """Buy the next click-power upgrade if affordable."""
        return _tool_purchase_upgrade(holder)

    @mcp.tool()
    def purchase_auto_production() -> dict[str, Any]:
        """Unlock or advance automatic production by one level if affordable."""
        return _tool_purchase_auto_production(holder)

    @mcp.tool()
    def wait(seconds: float) -> dict[str, Any]:
        """Advance game time by the given seconds (max 86400)."""
        return _tool_wait(holder, seconds)

    @mcp.tool()
    def new_game() -> dict[str, Any]:
        """Reset the game to initial state."""
        return _tool_new_game(holder)

    return mcp
