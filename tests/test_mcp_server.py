"""Tests for MCP server tool functions."""

import pytest

from clickerengine.config import AutoProductionTier, EngineConfig
from clickerengine.engine import ProgressionEngine

from clickerengine.mcp.server import (
    _GameHolder,
    _tool_click,
    _tool_get_game_info,
    _tool_get_game_state,
    _tool_new_game,
    _tool_purchase_auto_production,
    _tool_purchase_upgrade,
    _tool_wait,
)


def _make_test_config(interval: float = 0.5) -> EngineConfig:
    return EngineConfig(
        name="Test Game",
        initial_upgrade_cost=10,
        cost_multiplier=2,
        power_multiplier=3,
        auto_production_interval=interval,
        auto_production_tiers=(
            AutoProductionTier(5, 1),
            AutoProductionTier(40, 4),
        ),
    )


def _make_holder(interval: float = 0.5) -> _GameHolder:
    cfg = _make_test_config(interval)
    return _GameHolder(config=cfg, engine=ProgressionEngine(cfg))


# ── get_game_info ────────────────────────────────────────────────────


class TestGetGameInfo:
    def test_returns_expected_structure(self):
        result = _tool_get_game_info(_make_holder())
        assert result["name"] == "Test Game"
        assert result["initial_upgrade_cost"] == 10
        assert result["power_multiplier"] == 3
        assert len(result["auto_production_tiers"]) == 2

    def test_tiers_are_one_based_levels(self):
        result = _tool_get_game_info(_make_holder())
        tiers = result["auto_production_tiers"]
        assert tiers[0] == {"level": 1, "unlock_cost": 5, "production_rate": 1}
        assert tiers[1]["level"] == 2


# ── get_game_state ───────────────────────────────────────────────────


class TestGetGameState:
    def test_initial_values(self):
        result = _tool_get_game_state(_make_holder())
        assert result["time_elapsed"] == 0.0
        assert result["resource_count"] == 0
        assert result["click_power"] == 1
        assert result["next_upgrade_cost"] == 10
        assert result["auto_tier_index"] == -1
        assert result["next_auto_tier"] == {"unlock_cost": 5, "production_rate": 1}
        assert result["can_afford_upgrade"] is False

    def test_includes_panel(self):
        result = _tool_get_game_state(_make_holder())
        assert result["panel"]["cookie_text"] == "Cookies: 0"
        assert result["panel"]["upgrade_enabled"] is False

    def test_after_clicks(self):
        holder = _make_holder()
        _tool_click(holder, 12)
        result = _tool_get_game_state(holder)
        assert result["resource_count"] == 12
        assert result["total_clicks"] == 12
        assert result["can_afford_upgrade"] is True


# ── click ────────────────────────────────────────────────────────────


class TestClick:
    def test_valid_click(self):
        result = _tool_click(_make_holder(), 1)
        assert result["clicks"] == 1
        assert result["total_earned"] == 1
        assert result["new_balance"] == 1

    def test_clicks_use_click_power(self):
        holder = _make_holder()
        _tool_click(holder, 10)
        _tool_purchase_upgrade(holder)
        result = _tool_click(holder, 4)
        assert result["total_earned"] == 12
        assert result["new_balance"] == 12

    def test_count_too_low(self):
        assert "error" in _tool_click(_make_holder(), 0)

    def test_count_too_high(self):
        assert "error" in _tool_click(_make_holder(), 9999)


# ── purchases ────────────────────────────────────────────────────────


class TestPurchaseUpgrade:
    def test_success(self):
        holder = _make_holder()
        _tool_click(holder, 10)
        result = _tool_purchase_upgrade(holder)
        assert result["success"] is True
        assert result["cost"] == 10
        assert result["click_power"] == 3
        assert result["next_upgrade_cost"] == 20

    def test_cannot_afford(self):
        holder = _make_holder()
        _tool_click(holder, 9)
        result = _tool_purchase_upgrade(holder)
        assert result["success"] is False
        assert "afford" in result["reason"].lower()
        assert holder.engine.resource_count == 9


class TestPurchaseAutoProduction:
    def test_advance(self):
        holder = _make_holder()
        _tool_click(holder, 5)
        result = _tool_purchase_auto_production(holder)
        assert result["success"] is True
        assert result["tier_index"] == 0
        assert result["production_rate"] == 1

    def test_cannot_afford(self):
        holder = _make_holder()
        result = _tool_purchase_auto_production(holder)
        assert result["success"] is False
        assert "afford" in result["reason"].lower()

    def test_max_level(self):
        holder = _make_holder()
        _tool_click(holder, 45)
        _tool_purchase_auto_production(holder)
        _tool_purchase_auto_production(holder)
        result = _tool_purchase_auto_production(holder)
        assert result["success"] is False
        assert "max" in result["reason"].lower()


# ── wait ─────────────────────────────────────────────────────────────


class TestWait:
    def test_wait_pays_every_interval(self):
        holder = _make_holder()
        _tool_click(holder, 5)
        _tool_purchase_auto_production(holder)
        result = _tool_wait(holder, 10)
        assert result["waited"] == 10
        assert result["time_elapsed"] == 10.0
        # tick_step is 0.5s, so each of the 20 steps pays once
        assert result["earned"] == 20
        assert result["resource_count"] == 20

    @pytest.mark.parametrize(
        "interval, seconds, payouts",
        [(0.7, 7.0, 10), (0.1, 3.0, 30), (0.01, 0.03, 3), (0.3, 9.0, 30)],
    )
    def test_wait_pays_every_inexact_interval(self, interval, seconds, payouts):
        holder = _make_holder(interval)
        _tool_click(holder, 5)
        _tool_purchase_auto_production(holder)
        result = _tool_wait(holder, seconds)
        assert result["earned"] == payouts
        assert result["time_elapsed"] == pytest.approx(seconds)

    def test_wait_ticks_partial_leftover(self):
        holder = _make_holder(0.7)
        _tool_click(holder, 5)
        _tool_purchase_auto_production(holder)
        result = _tool_wait(holder, 7.35)
        assert result["earned"] == 10
        assert holder.engine.get_state().auto_elapsed == pytest.approx(0.35)

    def test_wait_without_auto_production(self):
        result = _tool_wait(_make_holder(), 3)
        assert result["earned"] == 0

    def test_tick_step_never_exceeds_interval(self):
        assert _make_holder().tick_step == 0.5

    def test_invalid_seconds(self):
        holder = _make_holder()
        assert "error" in _tool_wait(holder, 0)
        assert "error" in _tool_wait(holder, -5)
        assert "error" in _tool_wait(holder, 100_000)


# ── new_game ─────────────────────────────────────────────────────────


class TestNewGame:
    def test_resets_state(self):
        holder = _make_holder()
        _tool_click(holder, 30)
        _tool_purchase_upgrade(holder)
        result = _tool_new_game(holder)
        assert result["success"] is True
        state = _tool_get_game_state(holder)
        assert state["resource_count"] == 0
        assert state["click_power"] == 1

    def test_keeps_same_engine(self):
        holder = _make_holder()
        engine = holder.engine
        _tool_click(holder, 7)
        _tool_new_game(holder)
        assert holder.engine is engine
        assert engine.resource_count == 0
        assert engine.get_state().total_clicks == 0


def test_create_server():
    from clickerengine.mcp.server import create_server

    server = create_server(_make_test_config())
    assert server.name == "clickerengine: Test Game"
