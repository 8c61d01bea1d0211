"""Test helpers for the converter test suite.

Assertion Helpers:
    assert_document_valid - Load and shape-check an output document
    assert_record_numbers_increasing - Check record numbering order

Data Generators:
    generate_rmc - Build an RMC sentence with a valid checksum
    generate_gga - Build a GGA sentence with a valid checksum
    generate_gsv - Build an unused but well-formed sentence
    frame_sentence - Add '$' and checksum to a sentence body
    write_log - Write lines as an Aaronia log file
"""

from .assertions import (
    DocumentValidationError,
    assert_document_valid,
    assert_record_numbers_increasing,
)
from .generators import (
    PAAG_COMMENT,
    calculate_nmea_checksum,
    frame_sentence,
    generate_gga,
    generate_gsv,
    generate_rmc,
    write_log,
)

__all__ = [
    "DocumentValidationError",
    "PAAG_COMMENT",
    "assert_document_valid",
    "assert_record_numbers_increasing",
    "calculate_nmea_checksum",
    "frame_sentence",
    "generate_gga",
    "generate_gsv",
    "generate_rmc",
    "write_log",
]
