from __future__ import annotations

import structlog

from clickerengine._types import Seconds
from clickerengine.config import EngineConfig
from clickerengine.engine import ProgressionEngine
from clickerengine.metrics import MetricsCollector
from clickerengine.report import SessionReport, build_report
from clickerengine.strategy import AUTO, UPGRADE, Strategy
from clickerengine.terminal import TerminalCondition

logger = structlog.get_logger(__name__)

MAX_TICKS = 10_000_000


class Session:
    """Fixed-step host loop that plays a ProgressionEngine with a strategy."""

    def __init__(
        self,
        config: EngineConfig,
        strategy: Strategy,
        terminal: TerminalCondition,
        tick_resolution: Seconds = 1.0,
    ) -> None:
        if tick_resolution <= 0:
            raise ValueError(f"tick_resolution must be positive, got {tick_resolution!r}")

        self.config = config
        self.strategy = strategy
        self.terminal = terminal
        self.tick_resolution = tick_resolution

        self.engine = ProgressionEngine(config)
        self.collector = MetricsCollector(snapshot_interval=tick_resolution)

    def run(self) -> SessionReport:
        engine = self.engine
        tick_count = 0

        logger.info(
            "session_started",
            config=self.config.name,
            strategy=self.strategy.describe(),
            terminal=self.terminal.describe(),
        )
        if self.strategy.click_profile is not None:
            self.strategy.click_profile.reset()
        self.collector.record_tick(engine)

        while not self.terminal.is_met(engine):
            tick_count += 1
            if tick_count > MAX_TICKS:
                break

            # 1. Advance time
            engine.tick(self.tick_resolution)

            # 2. Process clicks
            for _ in range(self.strategy.get_clicks(engine, self.tick_resolution)):
                engine.click()

            # 3. Attempt purchases
            for kind in self.strategy.decide_purchases(engine):
                self._attempt(kind)

            # 4. Record metrics
            self.collector.record_tick(engine)

        outcome = (
            "Terminal condition met"
            if self.terminal.is_met(engine)
            else "Max ticks reached"
        )
        logger.info(
            "session_finished",
            outcome=outcome,
            time=engine.get_state().time_elapsed,
            purchases=len(self.collector.purchases),
        )
        return self._build_report(outcome)

    def _attempt(self, kind: str) -> None:
        engine = self.engine
        if kind == UPGRADE:
            result = engine.purchase_upgrade()
            if result.accepted:
                self.collector.record_purchase(engine, UPGRADE, result.cost)
        elif kind == AUTO:
            auto = engine.purchase_or_advance_auto_production()
            if auto.advanced:
                self.collector.record_purchase(engine, AUTO, auto.cost)
        else:
            raise ValueError(f"Unknown purchase kind: {kind!r}")

    def _build_report(self, outcome: str) -> SessionReport:
        return build_report(
            collector=self.collector,
            strategy_description=self.strategy.describe(),
            terminal_description=self.terminal.describe(),
            outcome=outcome,
            total_time=self.engine.get_state().time_elapsed,
            final=self.engine.snapshot(),
        )
