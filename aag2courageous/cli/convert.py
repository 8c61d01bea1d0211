"""Command-line entry point: convert an Aaronia GPS log to a COURAGEOUS file."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Optional, Sequence

from aag2courageous import __version__
from aag2courageous.config import ConverterConfig
from aag2courageous.converter import ConversionError, convert_file
from aag2courageous.core.logging_config import configure_logging
from aag2courageous.core.logging_utils import get_module_logger
from aag2courageous.courageous.writer import default_output_path

from .common import add_common_cli_arguments, parse_position3d

logger = get_module_logger("aag2courageous")

EPILOG = """\
The input is an Aaronia GPS log: NMEA $GPRMC and $GPGGA sentences, one per
line, with $PAAG status lines in between. RMC and GGA sentences describing
the same second are paired even when they arrive one cycle apart.

Negative coordinates start with '-', so put them after '--':
  aag2courageous track.log -o track.json -- -33.86,151.21,40
"""


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="aag2courageous",
        description="Convert an Aaronia GPS log into a COURAGEOUS tracking document",
        epilog=EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("input_path", type=Path, help="Path to the file to convert")
    parser.add_argument(
        "static_cuas_location",
        type=parse_position3d,
        metavar="STATIC_CUAS_LOCATION",
        help="Location of the C-UAS surveilling the logged UAS, as lat,lon,height",
    )
    parser.add_argument(
        "-o", "--output-path",
        type=Path,
        default=None,
        help="Path of the resulting file (default: input path with a .json extension)",
    )
    parser.add_argument(
        "--prettyprint",
        action="store_true",
        default=False,
        help="Pretty-print the resulting JSON",
    )
    parser.add_argument(
        "--system-name",
        default=None,
        help="System name written to the COURAGEOUS file (default: Unknown)",
    )
    parser.add_argument(
        "--vendor-name",
        default=None,
        help="Vendor name written to the COURAGEOUS file (default: Unknown)",
    )
    add_common_cli_arguments(parser)
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def parse_args(argv: Optional[Sequence[str]]) -> argparse.Namespace:
    return build_parser().parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = parse_args(sys.argv[1:] if argv is None else list(argv))

    try:
        config = ConverterConfig.from_file(args.config, args)
        configure_logging(config.log_level, log_file=config.log_file)
    except (ValueError, OSError) as e:
        configure_logging()
        logger.error("Invalid configuration: %s", e)
        return 1

    output_path = args.output_path or default_output_path(
        args.input_path, config.output_extension
    )

    try:
        summary = convert_file(
            args.input_path,
            output_path,
            args.static_cuas_location,
            config,
        )
    except ConversionError as e:
        logger.error("%s", e)
        return 1

    logger.debug(
        "Converted %s (%d lines) into %d records",
        summary.input_path, summary.lines, summary.records,
    )
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
