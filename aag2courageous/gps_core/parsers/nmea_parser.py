"""NMEA sentence decoding for Aaronia GPS logs.

Each line decodes to exactly one member of a closed set of sentence kinds:
``PrimaryFix`` (RMC), ``SecondaryFix`` (GGA) or ``IgnoredSentence`` (any
other well-formed sentence). Malformed input raises ``NMEADecodeError``;
empty fields are not malformed and decode to ``None``.
"""

from __future__ import annotations

import datetime as dt
import math
from typing import Callable, Dict, Optional, Tuple

from ..constants import (
    GGA_MIN_FIELDS,
    NMEA_CENTURY,
    PRIMARY_SENTENCE_TYPE,
    RMC_MIN_FIELDS,
    SECONDARY_SENTENCE_TYPE,
    VENDOR_COMMENT_PREFIX,
)
from .nmea_types import (
    IgnoredSentence,
    NMEADecodeError,
    PrimaryFix,
    SecondaryFix,
    Sentence,
)


def parse_float(value: str | None, field: str = "value") -> Optional[float]:
    """Parse string to float, None if empty."""
    if not value:
        return None
    try:
        result = float(value)
    except ValueError:
        raise NMEADecodeError(f"Invalid {field} '{value}'") from None
    if not math.isfinite(result):
        raise NMEADecodeError(f"Invalid {field} '{value}'")
    return result


def parse_latlon(
    value: str | None,
    direction: str | None,
    *,
    is_lat: bool
) -> Optional[float]:
    """Parse NMEA lat/lon format (DDMM.MMMM or DDDMM.MMMM) to decimal degrees."""
    field = "latitude" if is_lat else "longitude"
    if not value and not direction:
        return None
    if not value or not direction:
        raise NMEADecodeError(f"Incomplete {field} '{value or ''},{direction or ''}'")

    hemispheres = ("N", "S") if is_lat else ("E", "W")
    hemisphere = direction.upper()
    if hemisphere not in hemispheres:
        raise NMEADecodeError(f"Invalid {field} direction '{direction}'")

    deg_len = 2 if is_lat else 3
    if len(value) <= deg_len or not value[:deg_len].isdigit():
        raise NMEADecodeError(f"Invalid {field} '{value}'")
    try:
        degrees = int(value[:deg_len])
        minutes = float(value[deg_len:])
    except ValueError:
        raise NMEADecodeError(f"Invalid {field} '{value}'") from None

    decimal = degrees + minutes / 60.0
    if hemisphere in ("S", "W"):
        decimal *= -1.0
    return decimal


def parse_hms(value: str | None) -> Optional[dt.time]:
    """Parse NMEA time format (HHMMSS.sss) to datetime.time."""
    if not value:
        return None
    raw = value.strip()
    if not raw:
        return None
    main, dot, frac = raw.partition(".")
    if len(main) != 6 or not main.isdigit() or (dot and not frac.isdigit()):
        raise NMEADecodeError(f"Invalid time '{value}'")
    hour = int(main[0:2])
    minute = int(main[2:4])
    second = int(main[4:6])
    micro = int((frac[:6] if dot else "0").ljust(6, "0"))
    try:
        return dt.time(hour, minute, second, micro)
    except ValueError:
        raise NMEADecodeError(f"Invalid time '{value}'") from None


def parse_date(value: str | None) -> Optional[dt.date]:
    """Parse NMEA date format (DDMMYY) to datetime.date."""
    if not value:
        return None
    if len(value) != 6 or not value.isdigit():
        raise NMEADecodeError(f"Invalid date '{value}'")
    day = int(value[0:2])
    month = int(value[2:4])
    year = NMEA_CENTURY + int(value[4:6])
    try:
        return dt.date(year, month, day)
    except ValueError:
        raise NMEADecodeError(f"Invalid date '{value}'") from None


def calculate_checksum(payload: str) -> int:
    """XOR of every character between '$' and '*'."""
    checksum = 0
    for char in payload:
        checksum ^= ord(char)
    return checksum


def validate_checksum(sentence: str) -> bool:
    """Validate NMEA checksum."""
    if not sentence.startswith("$") or "*" not in sentence:
        return False
    try:
        payload, checksum_str = sentence[1:].split("*", 1)
        return calculate_checksum(payload) == int(checksum_str[:2], 16)
    except (ValueError, IndexError):
        return False


def is_vendor_comment(line: str, prefix: str = VENDOR_COMMENT_PREFIX) -> bool:
    """Return True for vendor status lines that must never reach the decoder."""
    return bool(prefix) and line.startswith(prefix)


def split_sentence(
    line: str,
    *,
    validate_checksums: bool = True,
) -> Tuple[str, str, list[str]]:
    """Split a raw line into (talker_id, sentence_type, fields).

    Raises:
        NMEADecodeError: On framing, address or checksum faults.
    """
    sentence = line.strip()
    if not sentence:
        raise NMEADecodeError("Empty line")
    if not sentence.startswith("$"):
        raise NMEADecodeError(f"Sentence does not start with '$': {sentence[:20]!r}")
    if "*" not in sentence:
        raise NMEADecodeError("Missing checksum")

    payload, checksum_str = sentence[1:].rsplit("*", 1)
    if len(checksum_str) != 2:
        raise NMEADecodeError(f"Invalid checksum '{checksum_str}'")
    try:
        expected = int(checksum_str, 16)
    except ValueError:
        raise NMEADecodeError(f"Invalid checksum '{checksum_str}'") from None

    if validate_checksums:
        calculated = calculate_checksum(payload)
        if calculated != expected:
            raise NMEADecodeError(
                f"Checksum mismatch: expected {expected:02X}, calculated {calculated:02X}"
            )

    address, *fields = payload.split(",")
    if len(address) < 5 or not address.isalnum() or not address.isupper():
        raise NMEADecodeError(f"Invalid address field '{address}'")

    return address[:-3], address[-3:], fields


class NMEAParser:
    """Stateless decoder mapping each line to one sentence kind.

    Sentence types dispatch to ``_parse_<type>`` methods; any well-formed
    sentence without a handler becomes an ``IgnoredSentence``.
    """

    def __init__(self, validate_checksums: bool = True):
        self._validate_checksums = validate_checksums
        self._handlers: Dict[str, Callable[[str, list[str]], Sentence]] = {
            PRIMARY_SENTENCE_TYPE: self._parse_rmc,
            SECONDARY_SENTENCE_TYPE: self._parse_gga,
        }

    @property
    def validate_checksums(self) -> bool:
        return self._validate_checksums

    def decode(self, line: str) -> Sentence:
        """Decode one line. Raises NMEADecodeError on malformed input."""
        talker_id, sentence_type, fields = split_sentence(
            line, validate_checksums=self._validate_checksums
        )
        handler = self._handlers.get(sentence_type)
        if handler is None:
            return IgnoredSentence(sentence_type=sentence_type, talker_id=talker_id)
        return handler(talker_id, fields)

    # ------------------------------------------------------------------
    # Sentence-specific parsers
    # ------------------------------------------------------------------

    def _parse_rmc(self, talker_id: str, fields: list[str]) -> PrimaryFix:
        """Parse $GPRMC: time, status, position, speed, course, date."""
        if len(fields) < RMC_MIN_FIELDS:
            raise NMEADecodeError(
                f"RMC sentence has {len(fields)} fields, expected at least {RMC_MIN_FIELDS}"
            )

        return PrimaryFix(
            fix_time=parse_hms(fields[0]),
            fix_date=parse_date(fields[8]),
            speed_over_ground=parse_float(fields[6], "speed over ground"),
            true_course=parse_float(fields[7], "true course"),
            talker_id=talker_id,
        )

    def _parse_gga(self, talker_id: str, fields: list[str]) -> SecondaryFix:
        """Parse $GPGGA: time, position, altitude."""
        if len(fields) < GGA_MIN_FIELDS:
            raise NMEADecodeError(
                f"GGA sentence has {len(fields)} fields, expected at least {GGA_MIN_FIELDS}"
            )

        return SecondaryFix(
            fix_time=parse_hms(fields[0]),
            latitude=parse_latlon(fields[1], fields[2], is_lat=True),
            longitude=parse_latlon(fields[3], fields[4], is_lat=False),
            altitude=parse_float(fields[8], "altitude"),
            talker_id=talker_id,
        )


def decode_sentence(line: str, *, validate_checksums: bool = True) -> Sentence:
    """Decode a single line with a throwaway parser."""
    return NMEAParser(validate_checksums=validate_checksums).decode(line)
