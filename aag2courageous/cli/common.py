from __future__ import annotations

import argparse
import logging
import math
from pathlib import Path

from aag2courageous.courageous.document import Position3d


LOG_LEVELS: dict[str, int] = {
    "critical": logging.CRITICAL,
    "error": logging.ERROR,
    "warning": logging.WARNING,
    "info": logging.INFO,
    "debug": logging.DEBUG,
}


def parse_position3d(value: str) -> Position3d:
    """argparse type for ``lat,lon,height``."""
    parts = [part.strip() for part in value.split(",")]
    if len(parts) != 3:
        raise argparse.ArgumentTypeError(
            f"expected three comma-separated numbers 'lat,lon,height', got '{value}'"
        )
    try:
        lat, lon, height = (float(part) for part in parts)
    except ValueError:
        raise argparse.ArgumentTypeError(
            f"expected three comma-separated numbers 'lat,lon,height', got '{value}'"
        ) from None
    if not all(math.isfinite(number) for number in (lat, lon, height)):
        raise argparse.ArgumentTypeError(f"coordinates must be finite numbers, got '{value}'")
    return Position3d(lat=lat, lon=lon, height=height)


def add_common_cli_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Optional key = value configuration file; command-line arguments win",
    )

    parser.add_argument(
        "--log-level",
        choices=sorted(LOG_LEVELS.keys()),
        default=None,
        help="Logging verbosity (default: info)",
    )

    parser.add_argument(
        "--log-file",
        type=Path,
        default=None,
        help="Optional path to also write logs to",
    )


__all__ = ["LOG_LEVELS", "add_common_cli_arguments", "parse_position3d"]
