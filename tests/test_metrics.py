"""Tests for metrics module."""
from clickerengine.config import default_config
from clickerengine.engine import ProgressionEngine
from clickerengine.metrics import MetricsCollector
from clickerengine.strategy import UPGRADE


def _run_ticks(collector: MetricsCollector, delta: float, count: int) -> ProgressionEngine:
    engine = ProgressionEngine(default_config())
    collector.record_tick(engine)
    for _ in range(count):
        engine.tick(delta)
        collector.record_tick(engine)
    return engine


def test_snapshot_every_tick_at_inexact_resolution():
    collector = MetricsCollector(snapshot_interval=0.1)
    _run_ticks(collector, 0.1, 100)
    assert len(collector.snapshots) == 101


def test_snapshot_interval_spans_several_ticks():
    collector = MetricsCollector(snapshot_interval=1.0)
    _run_ticks(collector, 0.1, 100)
    assert len(collector.snapshots) == 11


def test_no_snapshot_before_interval():
    collector = MetricsCollector(snapshot_interval=1.0)
    _run_ticks(collector, 0.25, 3)
    assert len(collector.snapshots) == 1
    assert collector.snapshots[0].time == 0.0


def test_record_purchase():
    collector = MetricsCollector()
    engine = ProgressionEngine(default_config())
    engine.get_state().resource_count = 150
    engine.purchase_upgrade()
    collector.record_purchase(engine, UPGRADE, 100)

    event = collector.purchases[0]
    assert event.kind == UPGRADE
    assert event.cost == 100
    assert event.tier_index == -1
    assert event.resource_after == 50
