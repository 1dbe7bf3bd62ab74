#!/usr/bin/env python3
"""
Command line entry point for chuk-mcp-tailwind.

    chuk-mcp-tailwind                          # stdio
    chuk-mcp-tailwind --transport http --port 8000
    chuk-mcp-tailwind --design-systems-dir ./ds --warm default

The design systems directory has to be known before the server module is
imported, so it is handed over through an environment variable.
"""

import argparse
import asyncio
import logging
import os
from pathlib import Path

from chuk_mcp_tailwind.constants import DESIGN_SYSTEMS_ENV

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Command line options."""
    parser = argparse.ArgumentParser(
        prog="chuk-mcp-tailwind",
        description="MCP server that migrates arbitrary utility classes to named utilities",
    )
    parser.add_argument(
        "--transport",
        choices=["stdio", "http"],
        default="stdio",
        help="Transport mode (default: stdio)",
    )
    parser.add_argument("--port", type=int, default=8000, help="Port for the http transport")
    parser.add_argument(
        "--design-systems-dir",
        type=Path,
        default=None,
        help="Project design systems directory (default: ./design-systems)",
    )
    parser.add_argument(
        "--warm",
        action="append",
        default=[],
        metavar="NAME",
        help="Build migration caches for a design system before serving (repeatable)",
    )
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")
    return parser


def main(argv: list[str] | None = None) -> None:
    args = build_parser().parse_args(argv)

    if args.debug:
        logging.getLogger().setLevel(logging.DEBUG)

    if args.design_systems_dir is not None:
        os.environ[DESIGN_SYSTEMS_ENV] = str(args.design_systems_dir.resolve())

    from chuk_mcp_tailwind.async_server import design_system_loader, mcp
    from chuk_mcp_tailwind.migrate import warm_caches

    for name in args.warm:
        system = design_system_loader.get_design_system(name)
        if system is None:
            logger.warning(f"Cannot warm unknown design system '{name}'")
            continue
        warm_caches(system)
        logger.info(f"Warmed migration caches for '{name}'")

    if args.transport == "stdio":
        logger.info("Serving chuk-mcp-tailwind over stdio")
        asyncio.run(mcp.run_stdio())
    else:
        logger.info(f"Serving chuk-mcp-tailwind over http on port {args.port}")
        asyncio.run(mcp.run_http(port=args.port))


if __name__ == "__main__":
    main()
