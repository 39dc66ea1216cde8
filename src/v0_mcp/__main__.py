"""Command-line entry point: ``python -m v0_mcp`` or ``v0-mcp``."""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from typing import Optional, Sequence

from v0_mcp.config import V0Config, load_config
from v0_mcp.errors import ConfigError
from v0_mcp.log import configure_logging
from v0_mcp.server import run_stdio
from v0_mcp.service import V0Service
from v0_mcp.tools import V0Tools

logger = logging.getLogger("v0_mcp")


def _parse_args(argv: Optional[Sequence[str]]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="v0-mcp",
        description="MCP server exposing the v0 UI generation API as tools.",
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Override LOG_LEVEL from the environment.",
    )
    parser.add_argument(
        "--check",
        action="store_true",
        help="Run the setup check once, print the report and exit.",
    )
    return parser.parse_args(argv)


async def _run_check(config: V0Config) -> int:
    async with V0Service(config) as service:
        result = await V0Tools(service).call_tool("v0_setup_check", {})
    print(result.text)
    return 1 if result.is_error else 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = _parse_args(argv)
    try:
        config = load_config()
    except ConfigError as exc:
        print(f"v0-mcp: {exc}", file=sys.stderr)
        return 1

    configure_logging(args.log_level or config.log_level)

    if args.check:
        return asyncio.run(_run_check(config))

    try:
        asyncio.run(run_stdio(config))
    except KeyboardInterrupt:
        logger.info("Interrupted, shutting down")
    return 0


if __name__ == "__main__":
    sys.exit(main())
