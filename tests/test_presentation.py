"""Tests for presentation module."""
from clickerengine.config import AutoProductionTier, EngineConfig
from clickerengine.engine import ProgressionEngine
from clickerengine.presentation import MAX_LEVEL_TEXT, build_panel


def _make_engine() -> ProgressionEngine:
    return ProgressionEngine(
        EngineConfig(
            initial_upgrade_cost=100,
            power_multiplier=3,
            auto_production_tiers=(
                AutoProductionTier(100, 1),
                AutoProductionTier(500, 2),
            ),
        )
    )


def test_initial_panel():
    panel = build_panel(_make_engine())
    assert panel.cookie_text == "Cookies: 0"
    assert panel.upgrade_text == "Next upgrade: 100 cookies\nClick power x3!"
    assert not panel.upgrade_enabled
    assert panel.auto_text == "Unlock auto production (100 cookies for +1/s)"
    assert not panel.auto_enabled
    assert panel.cps_text == "Clicks per second: 0.0"
    assert panel.cookies_per_second_text == "Cookies per second: 0.0"


def test_buttons_enable_when_affordable():
    engine = _make_engine()
    for _ in range(100):
        engine.click()
    panel = build_panel(engine)
    assert panel.cookie_text == "Cookies: 100"
    assert panel.upgrade_enabled
    assert panel.auto_enabled


def test_mid_progression_auto_text():
    engine = _make_engine()
    engine.get_state().resource_count = 100
    engine.purchase_or_advance_auto_production()
    panel = build_panel(engine)
    assert panel.auto_text == "Auto production Lv1\nNext Lv (500 cookies for +2/s)"
    assert not panel.auto_enabled


def test_max_level_panel():
    engine = _make_engine()
    engine.get_state().resource_count = 600
    engine.purchase_or_advance_auto_production()
    engine.purchase_or_advance_auto_production()
    panel = build_panel(engine)
    assert panel.auto_text == MAX_LEVEL_TEXT
    assert not panel.auto_enabled


def test_rate_texts_after_window():
    engine = _make_engine()
    engine.get_state().resource_count = 100
    engine.purchase_or_advance_auto_production()
    for _ in range(3):
        engine.click()
    engine.tick(1.0)
    panel = build_panel(engine)
    assert panel.cps_text == "Clicks per second: 3.0"
    assert panel.cookies_per_second_text == "Cookies per second: 4.0"


def test_building_panel_does_not_mutate_engine():
    engine = _make_engine()
    engine.click()
    before = dict(vars(engine.get_state()))
    build_panel(engine)
    assert dict(vars(engine.get_state())) == before
