"""Tests for state module."""
from clickerengine.config import EngineConfig
from clickerengine.state import NO_TIER, EngineState


def test_initialization():
    state = EngineState(EngineConfig(initial_upgrade_cost=250))
    assert state.resource_count == 0
    assert state.click_power == 1
    assert state.next_upgrade_cost == 250
    assert state.auto_tier_index == NO_TIER
    assert state.auto_production_rate == 0
    assert state.click_sample_count == 0
    assert state.sample_elapsed == 0.0
    assert state.auto_elapsed == 0.0
    assert state.measured_clicks_per_second == 0.0
    assert state.time_elapsed == 0.0
    assert not state.auto_unlocked


def test_earn_and_spend_track_totals():
    state = EngineState(EngineConfig())
    state.earn(50)
    state.spend(20)
    state.earn(5)
    assert state.resource_count == 35
    assert state.total_earned == 55
    assert state.total_spent == 20
    assert state.total_earned - state.total_spent == state.resource_count
