"""CLI entry point: python -m clickerengine.mcp <config_module>"""

from __future__ import annotations

import sys


def main() -> None:
    if len(sys.argv) < 2:
        print("Usage: python -m clickerengine.mcp <config_module>", file=sys.stderr)
        print("Example: python -m clickerengine.mcp examples.classic_cookie", file=sys.stderr)
        sys.exit(1)

    module_path = sys.argv[1]

    # stdout carries the MCP protocol; keep module-load prints off it
    real_stdout = sys.stdout
    sys.stdout = sys.stderr
    try:
        from clickerengine.cli import load_config
        from clickerengine.log import configure_logging

        configure_logging(level="INFO")
        config = load_config(module_path)
    finally:
        sys.stdout = real_stdout

    from clickerengine.mcp.server import create_server

    server = create_server(config)
    server.run(transport="stdio")


if __name__ == "__main__":
    main()
