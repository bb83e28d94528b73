"""Command-line entry point.

Usage:
  pathnorm                                  # converts the configured default path
  pathnorm "M0 0L10 10H20Z"                 # prints nested integer lists
  pathnorm "M0 0L10 10H20Z" --json          # prints a JSON ConversionResponse
"""

from __future__ import annotations

import argparse
import logging
import sys

from dotenv import load_dotenv

from pathnorm import __version__
from pathnorm.config import settings
from pathnorm.engine.pipeline import convert_path
from pathnorm.models.responses import ConversionResponse

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pathnorm",
        description="Convert SVG path data (M, C, L, V, H, Z) to rounded absolute coordinates",
    )
    parser.add_argument("path", nargs="?", help="Path data, e.g. 'M1 2C3 4 5 6 7 8Z'")
    parser.add_argument("--json", action="store_true", help="Print a JSON document instead of text")
    parser.add_argument("--log-level", default=None, help="Override PATHNORM_LOG_LEVEL")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def _configure_logging(level_name: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level_name.upper(), logging.WARNING),
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )


def main(argv: list[str] | None = None) -> int:
    load_dotenv()
    args = build_parser().parse_args(argv)
    _configure_logging(args.log_level or settings.pathnorm_log_level)

    path = args.path if args.path is not None else settings.pathnorm_default_path
    logger.debug("Converting path (%d chars)", len(path))
    ctx = convert_path(path)

    if args.json:
        print(ConversionResponse.from_context(ctx).model_dump_json(indent=2))

    if ctx.error is not None:
        print(f"error: {ctx.error}", file=sys.stderr)
        return 1

    if not args.json:
        print(ctx.output)
    return 0
