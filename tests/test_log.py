"""Tests for log module."""
import pytest
import structlog

from clickerengine.log import bind_context, clear_context, configure_logging


@pytest.fixture(autouse=True)
def _reset_structlog():
    yield
    clear_context()
    structlog.reset_defaults()


def test_bind_and_clear_context():
    bind_context(config="Cookie Clicker", strategy="upgrade_first")
    assert structlog.contextvars.get_contextvars() == {
        "config": "Cookie Clicker",
        "strategy": "upgrade_first",
    }
    clear_context()
    assert structlog.contextvars.get_contextvars() == {}


def test_configure_logging_filters_below_level():
    configure_logging(level="WARNING")
    wrapper = structlog.get_config()["wrapper_class"]
    logger = wrapper(structlog.PrintLogger(), processors=[], context={})
    assert not logger.is_enabled_for(20)
    assert logger.is_enabled_for(30)


def test_configure_logging_json_renderer():
    configure_logging(json=True)
    processors = structlog.get_config()["processors"]
    assert isinstance(processors[-1], structlog.processors.JSONRenderer)
