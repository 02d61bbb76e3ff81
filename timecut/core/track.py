# timecut/core/track.py
from __future__ import annotations

from enum import Enum
from typing import Iterable, Iterator, Optional, Tuple

from timecut.core.cut import Cut
from timecut.utils.errors import OverlappingCutsError
from timecut import logs


class Placement(Enum):
    """Where a cut lies relative to a queried instant."""

    BEFORE = "before"   # cut stops at or before t
    WITHIN = "within"   # start_t <= t < stop_t
    AFTER = "after"     # cut starts after t


def locate(cut: Cut, t) -> Placement:
    """
    Three-way comparison between a cut and an instant.

    Unordered comparisons (NaN) fall through to BEFORE: the search then
    walks right past every cut and nothing is active at such an instant.
    """
    if t < cut.start_t:
        return Placement.AFTER
    if cut.start_t <= t < cut.stop_t:
        return Placement.WITHIN
    return Placement.BEFORE


class Track:
    """
    Track (FINAL / FROZEN)

    Sorted, non-overlapping sequence of cuts.

    Invariants:
      - sorted by (start_t, stop_t)
      - for adjacent cuts a, b: b.start_t >= a.stop_t
      - immutable after construction, no incremental insert

    Lookup:
      - active(t) is a binary search, O(log n)
      - intervals are half-open; a boundary shared by two adjacent cuts
        belongs to the later one
    """

    __slots__ = ("_cuts",)

    def __init__(self, cuts: Iterable[Cut]):
        ordered = sorted(cuts, key=lambda c: (c.start_t, c.stop_t))

        for prev, nxt in zip(ordered, ordered[1:]):
            if nxt.start_t < prev.stop_t:
                raise OverlappingCutsError(prev, nxt)

        self._cuts: Tuple[Cut, ...] = tuple(ordered)
        logs.debug(f"[Track] built with {len(self._cuts)} cuts")

    @classmethod
    def new(cls, cuts: Iterable[Cut]) -> "Track":
        return cls(cuts)

    # --------------------------------------------------
    def active_index(self, t) -> Optional[int]:
        lo, hi = 0, len(self._cuts)

        while lo < hi:
            mid = (lo + hi) // 2
            placement = locate(self._cuts[mid], t)

            if placement is Placement.WITHIN:
                return mid
            if placement is Placement.AFTER:
                hi = mid
            else:
                lo = mid + 1

        return None

    def active(self, t) -> Optional[Cut]:
        ix = self.active_index(t)
        if ix is None:
            return None
        return self._cuts[ix]

    # --------------------------------------------------
    @property
    def cuts(self) -> Tuple[Cut, ...]:
        return self._cuts

    @property
    def start(self):
        return self._cuts[0].start_t if self._cuts else None

    @property
    def end(self):
        return self._cuts[-1].stop_t if self._cuts else None

    def is_empty(self) -> bool:
        return not self._cuts

    def __len__(self) -> int:
        return len(self._cuts)

    def __iter__(self) -> Iterator[Cut]:
        return iter(self._cuts)

    def __getitem__(self, ix: int) -> Cut:
        return self._cuts[ix]

    def __repr__(self) -> str:
        return f"Track({list(self._cuts)!r})"
