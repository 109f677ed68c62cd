"""Presentation adapter: turns engine values into panel labels.

The engine never formats text. A host calls :func:`build_panel` after any
operation that may have changed state and pushes the result to its widgets.
"""

from __future__ import annotations

from dataclasses import dataclass

from clickerengine.engine import ProgressionEngine

MAX_LEVEL_TEXT = "Max level!"


@dataclass(frozen=True)
class PanelView:
    """Display model of the classic clicker panel."""

    cookie_text: str
    upgrade_text: str
    upgrade_enabled: bool
    auto_text: str
    auto_enabled: bool
    cps_text: str
    cookies_per_second_text: str


def build_panel(engine: ProgressionEngine) -> PanelView:
    auto_text, auto_enabled = _auto_button(engine)
    return PanelView(
        cookie_text=f"Cookies: {engine.resource_count}",
        upgrade_text=(
            f"Next upgrade: {engine.next_upgrade_cost} cookies\n"
            f"Click power x{engine.config.power_multiplier}!"
        ),
        upgrade_enabled=engine.can_afford_upgrade(),
        auto_text=auto_text,
        auto_enabled=auto_enabled,
        cps_text=f"Clicks per second: {engine.measured_clicks_per_second:.1f}",
        cookies_per_second_text=(
            f"Cookies per second: {engine.effective_resource_per_second:.1f}"
        ),
    )


def _auto_button(engine: ProgressionEngine) -> tuple[str, bool]:
    nxt = engine.next_auto_tier()
    if nxt is None:
        return MAX_LEVEL_TEXT, False

    offer = f"{nxt.unlock_cost} cookies for +{nxt.production_rate}/s"
    if engine.auto_tier_index < 0:
        text = f"Unlock auto production ({offer})"
    else:
        # Levels are shown 1-based
        text = f"Auto production Lv{engine.auto_tier_index + 1}\nNext Lv ({offer})"
    return text, engine.can_advance_auto_production()
