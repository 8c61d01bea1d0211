"""COURAGEOUS tracking document model.

Plain dataclasses mirroring the COURAGEOUS C-UAS exchange format, each with
a ``to_dict()`` producing the JSON mapping. Optional members that the
converter never fills (velocity, identification, home location) are kept
so the emitted keys stay complete and are serialized as ``null``.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional

COURAGEOUS_FORMAT_VERSION = "1.0.0"


class Classification(str, Enum):
    """Target classification of a tracking record."""

    UAV = "UAV"


@dataclass(frozen=True, slots=True)
class Position3d:
    """WGS84 position: decimal degrees and height in metres."""

    lat: float
    lon: float
    height: float

    def to_dict(self) -> Dict[str, float]:
        return {"lat": self.lat, "lon": self.lon, "height": self.height}


@dataclass(frozen=True, slots=True)
class Alarm:
    active: bool = False
    certainty: float = 0.0

    def to_dict(self) -> Dict[str, Any]:
        return {"active": self.active, "certainty": self.certainty}


@dataclass(frozen=True, slots=True)
class TrackingRecord:
    """One timestamped position of the tracked UAS."""

    record_number: int
    time: int
    location: Position3d
    classification: Classification = Classification.UAV
    alarm: Alarm = field(default_factory=Alarm)
    velocity: Optional[Dict[str, float]] = None
    identification: Optional[Dict[str, Any]] = None
    cuas_location: Optional[Position3d] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "alarm": self.alarm.to_dict(),
            "classification": self.classification.value,
            "location": {"Position3d": self.location.to_dict()},
            "record_number": self.record_number,
            "time": self.time,
            "velocity": self.velocity,
            "identification": self.identification,
            "cuas_location": self.cuas_location.to_dict() if self.cuas_location else None,
        }


@dataclass(slots=True)
class Track:
    name: Optional[str]
    uas_id: int
    records: List[TrackingRecord] = field(default_factory=list)
    uav_home_location: Optional[Position3d] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "uas_id": self.uas_id,
            "records": [record.to_dict() for record in self.records],
            "uav_home_location": (
                self.uav_home_location.to_dict() if self.uav_home_location else None
            ),
        }


@dataclass(slots=True)
class Document:
    """Top-level COURAGEOUS document."""

    static_cuas_location: Position3d
    system_name: str
    vendor_name: str
    tracks: List[Track] = field(default_factory=list)
    detection: List[Dict[str, Any]] = field(default_factory=list)
    version: str = COURAGEOUS_FORMAT_VERSION

    def to_dict(self) -> Dict[str, Any]:
        return {
            "detection": list(self.detection),
            "static_cuas_location": self.static_cuas_location.to_dict(),
            "tracks": [track.to_dict() for track in self.tracks],
            "system_name": self.system_name,
            "vendor_name": self.vendor_name,
            "version": self.version,
        }


__all__ = [
    "Alarm",
    "COURAGEOUS_FORMAT_VERSION",
    "Classification",
    "Document",
    "Position3d",
    "Track",
    "TrackingRecord",
]
