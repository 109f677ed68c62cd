from __future__ import annotations

import argparse
import importlib
import sys

from clickerengine.config import EngineConfig, default_config
from clickerengine.formatting import format_text_report
from clickerengine.log import bind_context, clear_context, configure_logging
from clickerengine.session import Session
from clickerengine.strategy import STRATEGY_REGISTRY, ClickProfile, Strategy
from clickerengine.terminal import Terminal, TerminalCondition


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="clickerengine",
        description="clickerengine — Cookie clicker progression CLI",
    )
    parser.add_argument("--log-level", default="WARNING", help="Log level (default: WARNING)")
    parser.add_argument("--json-logs", action="store_true", help="Emit JSON log lines")
    sub = parser.add_subparsers(dest="command")

    sim = sub.add_parser("simulate", help="Run a headless session")
    sim.add_argument(
        "config_module",
        help="Python module with define_config(), or 'default'",
    )
    sim.add_argument(
        "--strategy",
        default="upgrade_first",
        choices=sorted(STRATEGY_REGISTRY),
        help="Strategy to use (default: upgrade_first)",
    )
    sim.add_argument("--cps", type=float, default=5.0, help="Clicks per second")
    sim.add_argument(
        "--tick-resolution",
        type=float,
        default=0.25,
        help=(
            "Seconds per tick (default: 0.25). Prefer binary fractions such as "
            "0.5 or 0.25; steps like 0.1 accumulate float error and delay each "
            "auto-production payout by one tick"
        ),
    )
    sim.add_argument(
        "--terminal-time", type=float, default=3600, help="Max session time (s)"
    )
    sim.add_argument(
        "--until-max-tier",
        action="store_true",
        help="Also stop once every auto-production tier is unlocked",
    )
    sim.add_argument("--export-csv", default=None, help="CSV export path prefix")
    sim.add_argument("--export-json", default=None, help="JSON export path")
    sim.add_argument("--plot", default=None, help="Plot output path (PNG)")

    return parser


def load_config(module_path: str) -> EngineConfig:
    """Import module and call define_config()."""
    if module_path == "default":
        return default_config()
    mod = importlib.import_module(module_path)
    if not hasattr(mod, "define_config"):
        print(f"Error: module {module_path!r} has no define_config() function")
        sys.exit(1)
    return mod.define_config()


def build_strategy(name: str, cps: float) -> Strategy:
    click_profile = ClickProfile(clicks_per_second=cps) if cps > 0 else None
    cls = STRATEGY_REGISTRY.get(name)
    if cls is None:
        raise ValueError(f"Unknown strategy: {name!r}")
    return cls(click_profile=click_profile)


def build_terminal(seconds: float, until_max_tier: bool) -> TerminalCondition:
    terminal = Terminal.time(seconds)
    if until_max_tier:
        terminal = Terminal.any(Terminal.max_tier(), terminal)
    return terminal


def main(argv: list[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    configure_logging(level=args.log_level, json=args.json_logs)

    if args.command == "simulate":
        config = load_config(args.config_module)
        session = Session(
            config=config,
            strategy=build_strategy(args.strategy, args.cps),
            terminal=build_terminal(args.terminal_time, args.until_max_tier),
            tick_resolution=args.tick_resolution,
        )
        bind_context(config=config.name, strategy=args.strategy)
        try:
            report = session.run()
        finally:
            clear_context()
        print(format_text_report(report))

        if args.export_csv:
            from clickerengine.export import export_csv
            export_csv(report, args.export_csv)
            print(f"\nCSV exported to {args.export_csv}_*.csv")

        if args.export_json:
            from clickerengine.export import export_json
            export_json(report, args.export_json)
            print(f"\nJSON exported to {args.export_json}")

        if args.plot:
            from clickerengine.visualization import plot_session
            plot_session(report, args.plot)
            print(f"\nPlot saved to {args.plot}")


if __name__ == "__main__":
    main()
