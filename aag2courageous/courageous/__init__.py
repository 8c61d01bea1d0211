"""COURAGEOUS document model and writer."""

from .document import (
    COURAGEOUS_FORMAT_VERSION,
    Alarm,
    Classification,
    Document,
    Position3d,
    Track,
    TrackingRecord,
)
from .writer import default_output_path, dumps_document, write_document

__all__ = [
    "Alarm",
    "COURAGEOUS_FORMAT_VERSION",
    "Classification",
    "Document",
    "Position3d",
    "Track",
    "TrackingRecord",
    "default_output_path",
    "dumps_document",
    "write_document",
]
