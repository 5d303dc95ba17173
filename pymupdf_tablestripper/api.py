"""Public facing API helpers for the table stripper."""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, List, Optional, TypedDict

import pymupdf  # type: ignore

from .config import StripperConfig
from .exceptions import ExtractionError
from .logging_config import get_logger
from .stripper import TableStripper

logger = get_logger(__name__)


class PageTable(TypedDict):
    """Type definition for the table inferred on one page."""

    page: int
    row_count: int
    column_count: int
    cells: List[List[str]]


def _select_pages(page_count: int, pages: Optional[Iterable[int]]) -> List[int]:
    if pages is None:
        return list(range(page_count))
    selected = list(pages)
    for pno in selected:
        if not 0 <= pno < page_count:
            raise ValueError(
                f"page {pno} out of range for document with {page_count} pages"
            )
    return selected


def extract_tables(
    pdf_path: str | Path,
    *,
    pages: Optional[Iterable[int]] = None,
    config: StripperConfig | None = None,
) -> List[PageTable]:
    """Infer one table per selected page of ``pdf_path``.

    Args:
        pdf_path: The PDF to read.
        pages: 0-based page numbers; all pages when omitted.
        config: Padding, clip region and orientation settings.

    Returns:
        One :class:`PageTable` per selected page, cells listed row by row.
    """
    pdf_path = Path(pdf_path).resolve()
    if not pdf_path.exists():
        raise FileNotFoundError(f"Input PDF not found: {pdf_path}")

    try:
        doc = pymupdf.open(str(pdf_path))
    except RuntimeError as exc:
        raise ExtractionError(f"cannot open {pdf_path}: {exc}") from exc

    stripper = TableStripper(config)
    results: List[PageTable] = []
    with doc:
        for pno in _select_pages(doc.page_count, pages):
            grid = stripper.extract_table(doc[pno])
            results.append(
                {
                    "page": pno,
                    "row_count": grid.row_count,
                    "column_count": grid.column_count,
                    "cells": stripper.to_rows(),
                }
            )
            logger.debug(
                "Page %d: %dx%d table", pno, grid.row_count, grid.column_count
            )
    return results


__all__ = ["ExtractionError", "PageTable", "extract_tables"]
