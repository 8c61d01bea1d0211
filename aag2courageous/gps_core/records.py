"""Conversion of matched RMC/GGA pairs into COURAGEOUS tracking records."""

from __future__ import annotations

import datetime as dt
from typing import Iterable, List, Optional

from aag2courageous.core.logging_utils import get_module_logger
from aag2courageous.courageous.document import Alarm, Classification, Position3d, TrackingRecord
from .parsers.nmea_types import MatchedPair

logger = get_module_logger(__name__)

_EPOCH = dt.datetime(1970, 1, 1, tzinfo=dt.timezone.utc)
_ONE_SECOND = dt.timedelta(seconds=1)


def unix_seconds(fix_date: dt.date, fix_time: dt.time) -> int:
    """UTC date + time of day as whole seconds since the epoch (sub-second truncated)."""
    instant = dt.datetime.combine(fix_date, fix_time.replace(tzinfo=dt.timezone.utc))
    return (instant - _EPOCH) // _ONE_SECOND


class RecordNormalizer:
    """Numbers matched pairs and turns complete ones into tracking records.

    Record numbers are assigned to every pair, including pairs dropped for
    missing fields, so the output numbering can contain gaps.
    """

    def __init__(self) -> None:
        self._next_number = 0
        self.dropped = 0

    @property
    def pairs_seen(self) -> int:
        return self._next_number

    def normalize(self, pair: MatchedPair) -> Optional[TrackingRecord]:
        record_number = self._next_number
        self._next_number += 1

        fix_date = pair.primary.fix_date
        secondary = pair.secondary
        if (
            fix_date is None
            or secondary.fix_time is None
            or not secondary.has_position()
        ):
            self.dropped += 1
            logger.debug("Dropping incomplete fix #%d at %s", record_number, secondary.fix_time)
            return None

        return TrackingRecord(
            record_number=record_number,
            time=unix_seconds(fix_date, secondary.fix_time),
            location=Position3d(
                lat=secondary.latitude,
                lon=secondary.longitude,
                height=float(secondary.altitude),
            ),
            classification=Classification.UAV,
            alarm=Alarm(active=False, certainty=0.0),
        )


def normalize_pairs(pairs: Iterable[MatchedPair]) -> List[TrackingRecord]:
    """Normalize ``pairs`` in order, skipping incomplete ones."""
    normalizer = RecordNormalizer()
    records = []
    for pair in pairs:
        record = normalizer.normalize(pair)
        if record is not None:
            records.append(record)
    if normalizer.dropped:
        logger.debug("Dropped %d of %d matched pairs as incomplete", normalizer.dropped, normalizer.pairs_seen)
    return records


__all__ = ["RecordNormalizer", "normalize_pairs", "unix_seconds"]
