"""One-dimensional intervals and a sorted, merge-on-insert interval set."""

from __future__ import annotations

from bisect import bisect_left
from dataclasses import dataclass
from typing import Iterable, Iterator, List, Tuple, Union, overload

from .geometry_utils import intervals_overlap_numba

IntervalLike = Union["Interval", Tuple[float, float]]


@dataclass(frozen=True, slots=True)
class Interval:
    """A closed extent ``[start, end]`` on one axis."""

    start: float
    end: float

    def __post_init__(self) -> None:
        if self.start > self.end:
            raise ValueError(
                f"Interval start must not exceed end (got {self.start} > {self.end})"
            )

    @classmethod
    def coerce(cls, value: IntervalLike) -> Interval:
        """Accept an ``Interval`` or a ``(start, end)`` pair."""
        if isinstance(value, Interval):
            return value
        start, end = value
        return cls(float(start), float(end))

    @property
    def length(self) -> float:
        return self.end - self.start

    def overlaps(
        self,
        other: Interval,
        padding_before: float = 0.0,
        padding_after: float = 0.0,
    ) -> bool:
        """True if ``other`` touches this interval grown by the given padding."""
        return bool(
            intervals_overlap_numba(
                self.start - padding_before,
                self.end + padding_after,
                other.start,
                other.end,
            )
        )

    def union(self, other: Interval) -> Interval:
        return Interval(min(self.start, other.start), max(self.end, other.end))


class IntervalSet:
    """Sorted sequence of pairwise-disjoint intervals.

    Every insertion absorbs the existing intervals that the (padded) new
    interval touches, so the set always holds the minimal partition of
    everything inserted so far, ordered by ascending ``start``.
    """

    __slots__ = ("_intervals",)

    def __init__(self) -> None:
        self._intervals: List[Interval] = []

    @classmethod
    def from_intervals(
        cls,
        intervals: Iterable[IntervalLike],
        padding_before: float = 0.0,
        padding_after: float = 0.0,
    ) -> IntervalSet:
        """Build a set by inserting each interval in turn."""
        result = cls()
        for interval in intervals:
            result.insert(interval, padding_before, padding_after)
        return result

    def insert(
        self,
        interval: IntervalLike,
        padding_before: float = 0.0,
        padding_after: float = 0.0,
    ) -> Interval:
        """Merge ``interval`` into the set and return the interval now holding it.

        Args:
            interval: The new extent.
            padding_before: Extra reach below ``interval.start`` for overlap tests.
            padding_after: Extra reach above ``interval.end`` for overlap tests.
        """
        merged = Interval.coerce(interval)
        new = merged

        kept: List[Interval] = []
        for existing in self._intervals:
            if new.overlaps(existing, padding_before, padding_after):
                merged = merged.union(existing)
            else:
                kept.append(existing)

        position = bisect_left([i.start for i in kept], merged.start)
        kept.insert(position, merged)
        self._intervals = kept
        return merged

    def bounds(self) -> List[Tuple[float, float]]:
        """Return the intervals as ``(start, end)`` tuples."""
        return [(i.start, i.end) for i in self._intervals]

    def __len__(self) -> int:
        return len(self._intervals)

    def __iter__(self) -> Iterator[Interval]:
        return iter(list(self._intervals))

    @overload
    def __getitem__(self, index: int) -> Interval: ...

    @overload
    def __getitem__(self, index: slice) -> List[Interval]: ...

    def __getitem__(self, index):
        return self._intervals[index]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, IntervalSet):
            return NotImplemented
        return self._intervals == other._intervals

    def __repr__(self) -> str:
        return f"IntervalSet({self.bounds()!r})"
