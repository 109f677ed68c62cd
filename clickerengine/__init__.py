# clickerengine — Cookie Clicker Progression Engine & Headless Sessions

from clickerengine._types import Seconds, compare
from clickerengine.cost_scaling import CostScaling
from clickerengine.config import AutoProductionTier, EngineConfig, default_config
from clickerengine.state import EngineState
from clickerengine.outcome import (
    AutoProductionOutcome,
    AutoProductionResult,
    UpgradeResult,
)
from clickerengine.engine import EngineSnapshot, ProgressionEngine
from clickerengine.presentation import PanelView, build_panel
from clickerengine.terminal import TerminalCondition, Terminal
from clickerengine.strategy import (
    Strategy,
    ClickProfile,
    UpgradeFirst,
    AutoProductionFirst,
    CheapestFirst,
    ClicksOnly,
    CustomStrategy,
)
from clickerengine.metrics import MetricsCollector
from clickerengine.session import Session
from clickerengine.report import SessionReport, build_report
from clickerengine.formatting import format_text_report

__all__ = [
    # Types
    "Seconds",
    "compare",
    # Cost
    "CostScaling",
    # Configuration
    "AutoProductionTier",
    "EngineConfig",
    "default_config",
    # State
    "EngineState",
    # Outcomes
    "AutoProductionOutcome",
    "AutoProductionResult",
    "UpgradeResult",
    # Engine
    "EngineSnapshot",
    "ProgressionEngine",
    # Presentation
    "PanelView",
    "build_panel",
    # Terminal
    "TerminalCondition",
    "Terminal",
    # Strategy
    "Strategy",
    "ClickProfile",
    "UpgradeFirst",
    "AutoProductionFirst",
    "CheapestFirst",
    "ClicksOnly",
    "CustomStrategy",
    # Sessions
    "MetricsCollector",
    "Session",
    "SessionReport",
    "build_report",
    # Formatting
    "format_text_report",
]
