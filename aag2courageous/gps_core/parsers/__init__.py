"""NMEA parsing components."""

from .nmea_types import (
    IgnoredSentence,
    MatchedPair,
    NMEADecodeError,
    PrimaryFix,
    SecondaryFix,
    Sentence,
)
from .nmea_parser import NMEAParser, decode_sentence, is_vendor_comment

__all__ = [
    "IgnoredSentence",
    "MatchedPair",
    "NMEADecodeError",
    "NMEAParser",
    "PrimaryFix",
    "SecondaryFix",
    "Sentence",
    "decode_sentence",
    "is_vendor_comment",
]
