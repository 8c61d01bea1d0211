"""Decoded NMEA sentence types."""

from __future__ import annotations

from dataclasses import dataclass
import datetime as dt
from typing import Optional, Union


class NMEADecodeError(ValueError):
    """Raised when a line is not a well-formed NMEA sentence."""


@dataclass(frozen=True, slots=True)
class PrimaryFix:
    """RMC sentence: date, time, speed over ground and true course."""

    fix_time: Optional[dt.time] = None
    fix_date: Optional[dt.date] = None
    speed_over_ground: Optional[float] = None
    true_course: Optional[float] = None
    talker_id: str = "GP"


@dataclass(frozen=True, slots=True)
class SecondaryFix:
    """GGA sentence: time, position and altitude."""

    fix_time: Optional[dt.time] = None
    latitude: Optional[float] = None
    longitude: Optional[float] = None
    altitude: Optional[float] = None
    talker_id: str = "GP"

    def has_position(self) -> bool:
        """Return True if latitude, longitude and altitude are all present."""
        return (
            self.latitude is not None
            and self.longitude is not None
            and self.altitude is not None
        )


@dataclass(frozen=True, slots=True)
class IgnoredSentence:
    """A well-formed sentence of a type the converter does not use."""

    sentence_type: str
    talker_id: str = ""


Sentence = Union[PrimaryFix, SecondaryFix, IgnoredSentence]


@dataclass(frozen=True, slots=True)
class MatchedPair:
    """A secondary fix and the primary fix sharing its time of day."""

    secondary: SecondaryFix
    primary: PrimaryFix


__all__ = [
    "IgnoredSentence",
    "MatchedPair",
    "NMEADecodeError",
    "PrimaryFix",
    "SecondaryFix",
    "Sentence",
]
