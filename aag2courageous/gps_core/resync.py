"""Resynchronization of RMC and GGA sentences into matched pairs.

Aaronia receivers emit one RMC (primary) and one GGA (secondary) sentence
per cycle, but the two are not always adjacent: an RMC can arrive a full
cycle before the GGA carrying the same time of day. The pairer keeps a
small, fixed-capacity look-back of primaries and matches each incoming
secondary against it, oldest candidate first.

Example:
    pairer = ResyncPairer()
    for sentence in sentences:
        pair = pairer.feed(sentence)
        if pair is not None:
            handle(pair)
"""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from typing import Deque, Iterable, Iterator, Optional

from aag2courageous.core.logging_utils import get_module_logger
from .constants import DEFAULT_RESYNC_WINDOW
from .parsers.nmea_types import MatchedPair, PrimaryFix, SecondaryFix, Sentence

logger = get_module_logger(__name__)


@dataclass(slots=True)
class PairingStats:
    """Running counters for one pairing pass."""

    primaries: int = 0
    secondaries: int = 0
    matched: int = 0
    unmatched_secondaries: int = 0
    untimed: int = 0


class PendingState:
    """Bounded look-back of primary fixes, oldest first.

    With the default capacity of two the slots are ``previous`` and
    ``last``. A slot whose primary has been matched is cleared to ``None``
    but keeps its position, so a consumed ``previous`` is still shifted out
    by the next push.
    """

    def __init__(self, capacity: int = DEFAULT_RESYNC_WINDOW):
        if capacity < 1:
            raise ValueError(f"capacity must be at least 1, got {capacity}")
        self._slots: Deque[Optional[PrimaryFix]] = deque(maxlen=capacity)

    @property
    def capacity(self) -> int:
        return self._slots.maxlen or 0

    @property
    def last(self) -> Optional[PrimaryFix]:
        return self._slots[-1] if self._slots else None

    @property
    def previous(self) -> Optional[PrimaryFix]:
        return self._slots[-2] if len(self._slots) >= 2 else None

    def push(self, primary: PrimaryFix) -> None:
        """Store a primary as ``last``, shifting older slots back by one."""
        self._slots.append(primary)

    def take(self, secondary: SecondaryFix) -> Optional[PrimaryFix]:
        """Remove and return the oldest retained primary sharing the secondary's time."""
        for index, candidate in enumerate(self._slots):
            if candidate is not None and candidate.fix_time == secondary.fix_time:
                self._slots[index] = None
                return candidate
        return None

    def pending(self) -> tuple[PrimaryFix, ...]:
        """Retained, unmatched primaries, oldest first."""
        return tuple(slot for slot in self._slots if slot is not None)

    def clear(self) -> None:
        self._slots.clear()

    def __len__(self) -> int:
        return len(self.pending())


class ResyncPairer:
    """Streaming matcher emitting (secondary, primary) pairs in input order."""

    def __init__(self, window: int = DEFAULT_RESYNC_WINDOW):
        self._state = PendingState(window)
        self.stats = PairingStats()

    @property
    def window(self) -> int:
        return self._state.capacity

    @property
    def state(self) -> PendingState:
        return self._state

    @property
    def pending(self) -> tuple[PrimaryFix, ...]:
        return self._state.pending()

    def reset(self) -> None:
        self._state.clear()
        self.stats = PairingStats()

    def feed(self, sentence: Sentence) -> Optional[MatchedPair]:
        """Consume one sentence; return a matched pair if it completed one."""
        if isinstance(sentence, PrimaryFix):
            self.stats.primaries += 1
            if sentence.fix_time is None:
                self.stats.untimed += 1
                return None
            self._state.push(sentence)
            return None

        if isinstance(sentence, SecondaryFix):
            self.stats.secondaries += 1
            if sentence.fix_time is None:
                self.stats.untimed += 1
                return None
            primary = self._state.take(sentence)
            if primary is None:
                self.stats.unmatched_secondaries += 1
                logger.debug("No primary fix for GGA at %s", sentence.fix_time)
                return None
            self.stats.matched += 1
            return MatchedPair(secondary=sentence, primary=primary)

        return None


def pair_sentences(
    sentences: Iterable[Sentence],
    window: int = DEFAULT_RESYNC_WINDOW,
) -> Iterator[MatchedPair]:
    """Yield every matched pair found in ``sentences``, in input order."""
    pairer = ResyncPairer(window)
    for sentence in sentences:
        pair = pairer.feed(sentence)
        if pair is not None:
            yield pair
    stats = pairer.stats
    logger.debug(
        "Paired %d of %d GGA sentences against %d RMC sentences (%d unmatched, %d without time)",
        stats.matched, stats.secondaries, stats.primaries,
        stats.unmatched_secondaries, stats.untimed,
    )


__all__ = ["PairingStats", "PendingState", "ResyncPairer", "pair_sentences"]
