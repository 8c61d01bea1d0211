"""Aaronia GPS log to COURAGEOUS document conversion.

One synchronous pass: read every line, decode (skipping vendor comment
lines), pair RMC with GGA, normalize the pairs into tracking records and
only then write the whole document. Any I/O or decode fault raises
``ConversionError`` before the output file is touched.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Iterator, List, Optional, Sequence

from aag2courageous.config import ConverterConfig
from aag2courageous.core.logging_utils import get_module_logger
from aag2courageous.courageous import (
    Document,
    Position3d,
    Track,
    TrackingRecord,
    write_document,
)
from aag2courageous.gps_core import (
    NMEADecodeError,
    NMEAParser,
    Sentence,
    is_vendor_comment,
    normalize_pairs,
    pair_sentences,
)
from aag2courageous.gps_core.constants import (
    DEFAULT_RESYNC_WINDOW,
    DEFAULT_UAS_ID,
    TRACK_NAME_FALLBACK,
    TRACK_NAME_TEMPLATE,
    VENDOR_COMMENT_PREFIX,
)

logger = get_module_logger("Converter")


class ConversionError(RuntimeError):
    """Fatal conversion fault (unreadable input, undecodable line, unwritable output)."""


@dataclass(frozen=True, slots=True)
class ConversionSummary:
    input_path: Path
    output_path: Path
    lines: int
    records: int


def read_lines(path: Path) -> List[str]:
    """Read the whole input file into memory."""
    try:
        with open(path, "r", encoding="utf-8") as f:
            return [line.rstrip("\r\n") for line in f]
    except (OSError, UnicodeDecodeError) as e:
        raise ConversionError(f"Failed to read input file at {path}: {e}") from e


def decode_lines(
    lines: Iterable[str],
    *,
    comment_prefix: str = VENDOR_COMMENT_PREFIX,
    validate_checksums: bool = True,
) -> Iterator[Sentence]:
    """Decode lines in order, skipping vendor comments.

    Raises:
        ConversionError: On the first line that fails to decode, naming its
            1-based line number.
    """
    parser = NMEAParser(validate_checksums=validate_checksums)
    for line_num, line in enumerate(lines, 1):
        if is_vendor_comment(line, comment_prefix):
            continue
        try:
            yield parser.decode(line)
        except NMEADecodeError as e:
            raise ConversionError(f"Line {line_num}: {e}") from e


def convert_lines(
    lines: Iterable[str],
    *,
    comment_prefix: str = VENDOR_COMMENT_PREFIX,
    validate_checksums: bool = True,
    resync_window: int = DEFAULT_RESYNC_WINDOW,
) -> List[TrackingRecord]:
    """Turn raw log lines into the ordered list of tracking records."""
    sentences = decode_lines(
        lines,
        comment_prefix=comment_prefix,
        validate_checksums=validate_checksums,
    )
    return normalize_pairs(pair_sentences(sentences, resync_window))


def track_name(input_path: Path) -> str:
    name = Path(input_path).name
    return TRACK_NAME_TEMPLATE.format(name or TRACK_NAME_FALLBACK)


def build_document(
    records: Sequence[TrackingRecord],
    *,
    input_path: Path,
    static_cuas_location: Position3d,
    system_name: str,
    vendor_name: str,
) -> Document:
    """Wrap the record list into a single-track document."""
    track = Track(
        name=track_name(input_path),
        uas_id=DEFAULT_UAS_ID,
        records=list(records),
    )
    return Document(
        static_cuas_location=static_cuas_location,
        system_name=system_name,
        vendor_name=vendor_name,
        tracks=[track],
    )


def convert_file(
    input_path: Path,
    output_path: Path,
    static_cuas_location: Position3d,
    config: Optional[ConverterConfig] = None,
) -> ConversionSummary:
    """Convert ``input_path`` and write the document to ``output_path``."""
    config = config or ConverterConfig()
    input_path = Path(input_path)
    output_path = Path(output_path)

    lines = read_lines(input_path)
    logger.info("Read %d lines from %s", len(lines), input_path)

    records = convert_lines(
        lines,
        comment_prefix=config.comment_prefix,
        validate_checksums=config.validate_checksums,
        resync_window=config.resync_window,
    )

    document = build_document(
        records,
        input_path=input_path,
        static_cuas_location=static_cuas_location,
        system_name=config.system_name,
        vendor_name=config.vendor_name,
    )

    try:
        write_document(document, output_path, pretty=config.prettyprint)
    except OSError as e:
        raise ConversionError(f"Failed to write output file at {output_path}: {e}") from e

    logger.info("Wrote %d tracking records to %s", len(records), output_path)
    return ConversionSummary(
        input_path=input_path,
        output_path=output_path,
        lines=len(lines),
        records=len(records),
    )


__all__ = [
    "ConversionError",
    "ConversionSummary",
    "build_document",
    "convert_file",
    "convert_lines",
    "decode_lines",
    "read_lines",
    "track_name",
]
