"""GPS core package: NMEA decoding, resynchronization and record building."""

from .constants import (
    DEFAULT_RESYNC_WINDOW,
    PRIMARY_SENTENCE_TYPE,
    SECONDARY_SENTENCE_TYPE,
    VENDOR_COMMENT_PREFIX,
)
from .parsers import (
    IgnoredSentence,
    MatchedPair,
    NMEADecodeError,
    NMEAParser,
    PrimaryFix,
    SecondaryFix,
    Sentence,
    decode_sentence,
    is_vendor_comment,
)
from .resync import PairingStats, PendingState, ResyncPairer, pair_sentences
from .records import RecordNormalizer, normalize_pairs, unix_seconds

__all__ = [
    # Constants
    "DEFAULT_RESYNC_WINDOW",
    "PRIMARY_SENTENCE_TYPE",
    "SECONDARY_SENTENCE_TYPE",
    "VENDOR_COMMENT_PREFIX",
    # Types
    "IgnoredSentence",
    "MatchedPair",
    "NMEADecodeError",
    "PrimaryFix",
    "SecondaryFix",
    "Sentence",
    # Parser
    "NMEAParser",
    "decode_sentence",
    "is_vendor_comment",
    # Pairing
    "PairingStats",
    "PendingState",
    "ResyncPairer",
    "pair_sentences",
    # Records
    "RecordNormalizer",
    "normalize_pairs",
    "unix_seconds",
]
