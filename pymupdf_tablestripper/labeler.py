"""Mapping between ascending coordinate order and visual table order."""

from __future__ import annotations

import enum
from typing import Any, Tuple

import numpy as np


class Origin(enum.Enum):
    """Where the coordinate origin sits relative to the visible page.

    ``TOP_LEFT`` is PyMuPDF's text extraction space (y grows downwards) and
    is what :func:`pymupdf_tablestripper.glyphs.iter_glyph_rects` produces.
    ``BOTTOM_LEFT`` is raw PDF user space (y grows upwards).
    """

    TOP_LEFT = "top-left"
    BOTTOM_LEFT = "bottom-left"
    TOP_RIGHT = "top-right"
    BOTTOM_RIGHT = "bottom-right"

    @property
    def reverse_rows(self) -> bool:
        return self in (Origin.BOTTOM_LEFT, Origin.BOTTOM_RIGHT)

    @property
    def reverse_columns(self) -> bool:
        return self in (Origin.TOP_RIGHT, Origin.BOTTOM_RIGHT)


class Labeler:
    """Translate logical ``(row, col)`` so that ``(0, 0)`` is the visual top-left."""

    def __init__(self, origin: Origin = Origin.TOP_LEFT) -> None:
        self.origin = Origin(origin)

    def to_internal(
        self, row: int, col: int, row_count: int, column_count: int
    ) -> Tuple[int, int]:
        """Return the ascending-order indices behind logical cell ``(row, col)``."""
        if self.origin.reverse_rows:
            row = row_count - row - 1
        if self.origin.reverse_columns:
            col = column_count - col - 1
        return row, col

    def orient(self, grid: np.ndarray[Any, Any]) -> np.ndarray[Any, Any]:
        """Reorder a ``[col][row]`` grid from ascending order into logical order."""
        if self.origin.reverse_columns:
            grid = np.flip(grid, axis=0)
        if self.origin.reverse_rows:
            grid = np.flip(grid, axis=1)
        return np.ascontiguousarray(grid)
