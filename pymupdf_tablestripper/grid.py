"""Infer a dense table grid from clustered text boxes."""

from __future__ import annotations

from typing import Any, Iterable, Iterator, Tuple, Union

import numpy as np
import pymupdf  # type: ignore

from .clustering import BoxCluster
from .geometry_utils import RectLike, rect_to_tuple
from .intervals import IntervalSet
from .labeler import Labeler, Origin
from .logging_config import get_logger

logger = get_logger(__name__)


def cell_label(row: int, col: int) -> str:
    """Label under which a cell is registered with the region extractor."""
    return f"el{col}x{row}"


class TableGrid:
    """Rows, columns and the cell rectangle at every intersection.

    Attributes:
        column_intervals: Disjoint x-extents, ascending.
        row_intervals: Disjoint y-extents, ascending.
        regions: Array of shape ``(column_count, row_count, 4)`` holding
            ``x0, y0, x1, y1`` per cell, indexed ``[col][row]`` in logical
            (visual top-left first) order.
    """

    def __init__(
        self,
        column_intervals: IntervalSet,
        row_intervals: IntervalSet,
        labeler: Labeler,
    ) -> None:
        self.column_intervals = column_intervals
        self.row_intervals = row_intervals
        self.labeler = labeler

        xs = np.array(column_intervals.bounds(), dtype=np.float64).reshape(-1, 2)
        ys = np.array(row_intervals.bounds(), dtype=np.float64).reshape(-1, 2)
        grid = np.empty((len(xs), len(ys), 4), dtype=np.float64)
        grid[:, :, 0] = xs[:, 0][:, None]
        grid[:, :, 1] = ys[:, 0][None, :]
        grid[:, :, 2] = xs[:, 1][:, None]
        grid[:, :, 3] = ys[:, 1][None, :]
        self._ascending = grid
        self.regions = labeler.orient(grid)

    @property
    def row_count(self) -> int:
        return len(self.row_intervals)

    @property
    def column_count(self) -> int:
        return len(self.column_intervals)

    # Short aliases matching the stripper's attribute names
    rows = row_count
    columns = column_count

    def _check(self, row: int, col: int) -> None:
        if not (0 <= row < self.row_count and 0 <= col < self.column_count):
            raise IndexError(
                f"cell ({row}, {col}) outside {self.row_count}x{self.column_count} grid"
            )

    def cell_region(self, row: int, col: int) -> "pymupdf.Rect":
        """Rectangle of logical cell ``(row, col)``; ``(0, 0)`` is top-left."""
        self._check(row, col)
        i_row, i_col = self.labeler.to_internal(
            row, col, self.row_count, self.column_count
        )
        x0, y0, x1, y1 = (float(v) for v in self._ascending[i_col, i_row])
        return pymupdf.Rect(x0, y0, x1, y1)

    def cell_label(self, row: int, col: int) -> str:
        self._check(row, col)
        return cell_label(row, col)

    def cells(self) -> Iterator[Tuple[int, int, "pymupdf.Rect"]]:
        """Yield ``(row, col, rect)`` for every cell, row by row."""
        for row in range(self.row_count):
            for col in range(self.column_count):
                yield row, col, self.cell_region(row, col)

    def __len__(self) -> int:
        return self.row_count * self.column_count

    def __repr__(self) -> str:
        return f"TableGrid(rows={self.row_count}, columns={self.column_count})"


class GridBuilder:
    """Project clustered boxes onto both axes and build the cell grid."""

    def __init__(self, origin: Union[Origin, str] = Origin.TOP_LEFT) -> None:
        self.labeler = Labeler(Origin(origin))

    def build(self, boxes: Union[BoxCluster, Iterable[RectLike]]) -> TableGrid:
        """Build a :class:`TableGrid` from a cluster or any iterable of rects.

        Padding was already spent while clustering, so the projection merges
        with zero padding; touching extents still join.
        """
        columns = IntervalSet()
        rows = IntervalSet()
        source: Iterable[Any] = boxes.bounds() if isinstance(boxes, BoxCluster) else boxes
        for box in source:
            x0, y0, x1, y1 = rect_to_tuple(box)
            columns.insert((x0, x1))
            rows.insert((y0, y1))

        grid = TableGrid(columns, rows, self.labeler)
        logger.debug(
            "Inferred %d columns x %d rows", grid.column_count, grid.row_count
        )
        return grid
