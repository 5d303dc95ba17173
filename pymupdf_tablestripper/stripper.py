"""Extract tabular text from a page by clustering its glyphs.

A first pass groups nearby glyphs into boxes, a 2D grid is inferred from
the extents of those boxes, and the text of each grid cell is then read
back with a :class:`~pymupdf_tablestripper.regions.RegionTextExtractor`.

Works best when headers are inside the detected region, so that every
column has representative text.
"""

from __future__ import annotations

from typing import List, Optional

import pymupdf  # type: ignore

from .clustering import BoxCluster
from .config import StripperConfig
from .exceptions import ExtractionError
from .geometry_utils import RectLike, ensure_rect
from .glyphs import iter_glyph_rects
from .grid import GridBuilder, TableGrid
from .logging_config import get_logger, set_verbose
from .regions import RegionTextExtractor

logger = get_logger(__name__)


class TableStripper:
    """Infer a table on a page and expose the text of each cell."""

    def __init__(self, config: Optional[StripperConfig] = None) -> None:
        self.config = config or StripperConfig()
        self.region: Optional["pymupdf.Rect"] = self.config.clip_rect()
        self.grid: Optional[TableGrid] = None
        self._region_extractor = RegionTextExtractor()
        set_verbose(self.config.verbose)

    def set_region(self, rect: Optional[RectLike]) -> None:
        """Restrict glyph clustering to ``rect``; ``None`` uses the whole page."""
        self.region = ensure_rect(rect) if rect is not None else None

    @property
    def rows(self) -> int:
        """Number of rows in the last inferred table."""
        return self.grid.row_count if self.grid is not None else 0

    @property
    def columns(self) -> int:
        """Number of columns in the last inferred table."""
        return self.grid.column_count if self.grid is not None else 0

    def cluster_page(self, page: "pymupdf.Page") -> BoxCluster:
        """Group the page's glyphs into boxes."""
        cluster = BoxCluster(
            dx=self.config.dx,
            dy=self.config.dy,
            until_stable=self.config.until_stable,
        )
        cluster.add_boxes(
            iter_glyph_rects(
                page,
                clip=self.region,
                skip_whitespace=self.config.skip_whitespace,
            )
        )
        return cluster

    def extract_table(self, page: "pymupdf.Page") -> TableGrid:
        """Infer the table grid of ``page`` and read the text of every cell."""
        self.grid = None
        try:
            cluster = self.cluster_page(page)
            logger.debug("Page %s: %d glyph boxes", page.number, len(cluster))

            grid = GridBuilder(self.config.origin).build(cluster)

            self._region_extractor.clear()
            for row, col, rect in grid.cells():
                self._region_extractor.add_region(grid.cell_label(row, col), rect)
            self._region_extractor.extract_regions(page)
        except RuntimeError as exc:
            raise ExtractionError(
                f"failed to extract table from page {page.number}: {exc}"
            ) from exc

        self.grid = grid
        return grid

    def get_text(self, row: int, col: int) -> str:
        """Return the text of cell ``(row, col)``; call after :meth:`extract_table`."""
        if self.grid is None:
            raise ExtractionError("extract_table() must be called before get_text()")
        label = self.grid.cell_label(row, col)
        return self._region_extractor.get_text_for_region(label)

    def to_rows(self) -> List[List[str]]:
        """Return the text of the last table as a list of rows."""
        return [
            [self.get_text(row, col).strip() for col in range(self.columns)]
            for row in range(self.rows)
        ]
