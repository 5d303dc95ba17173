"""Incremental clustering of glyph bounding boxes."""

from __future__ import annotations

from typing import Iterable, Iterator, List

import pymupdf  # type: ignore

from .geometry_utils import (
    RectLike,
    RectTuple,
    pad_rect,
    rect_to_tuple,
    rects_intersect,
    tuple_to_pymupdf_rect,
    union_rects,
)


class BoxCluster:
    """A mutable set of rectangles that merges anything within padding reach.

    Each new box is grown by ``dx`` horizontally and ``dy`` vertically into a
    hitbox. Every stored box whose unpadded bounds intersect that hitbox is
    removed and folded into a single union box, which is stored instead.

    By default the union keeps searching with its own hitbox until nothing
    else is hit, so stored boxes stay pairwise apart and the final set does
    not depend on arrival order. ``until_stable=False`` makes one pass per
    insertion instead: a union that grows into a box it did not originally
    hit can then leave the two overlapping, or within padding reach.
    """

    def __init__(
        self, dx: float = 1.0, dy: float = 0.0, until_stable: bool = True
    ) -> None:
        if dx < 0 or dy < 0:
            raise ValueError(f"padding must be non-negative (dx={dx}, dy={dy})")
        self.dx = dx
        self.dy = dy
        self.until_stable = until_stable
        self._boxes: List[RectTuple] = []

    def _hits(self, bounds: RectTuple) -> List[RectTuple]:
        hitbox = pad_rect(bounds, self.dx, self.dy)
        return [box for box in self._boxes if rects_intersect(box, hitbox)]

    def add_box(self, rect: RectLike) -> "pymupdf.Rect":
        """Insert one glyph rectangle and return the box that now contains it."""
        bounds = rect_to_tuple(rect)

        hits = self._hits(bounds)
        while hits:
            for box in hits:
                bounds = union_rects(bounds, box)
                self._boxes.remove(box)
            hits = self._hits(bounds) if self.until_stable else []

        self._boxes.append(bounds)
        return tuple_to_pymupdf_rect(bounds)

    def add_boxes(self, rects: Iterable[RectLike]) -> None:
        for rect in rects:
            self.add_box(rect)

    @property
    def boxes(self) -> List["pymupdf.Rect"]:
        """Snapshot of the stored rectangles."""
        return [tuple_to_pymupdf_rect(box) for box in self._boxes]

    def bounds(self) -> List[RectTuple]:
        return list(self._boxes)

    def __len__(self) -> int:
        return len(self._boxes)

    def __iter__(self) -> Iterator["pymupdf.Rect"]:
        return iter(self.boxes)
