"""Glyph bounding boxes from a PyMuPDF page."""

from __future__ import annotations

from typing import Any, Dict, Iterator, Optional

import pymupdf  # type: ignore

from .geometry_utils import RectLike, contains_point, rect_to_tuple

TEXT_BLOCK = 0


def iter_chars(page: "pymupdf.Page") -> Iterator[Dict[str, Any]]:
    """Yield every character dict of ``page`` in content-stream order."""
    raw = page.get_text("rawdict")
    for block in raw["blocks"]:
        if block.get("type", TEXT_BLOCK) != TEXT_BLOCK:
            continue
        for line in block.get("lines", []):
            for span in line.get("spans", []):
                yield from span.get("chars", [])


def iter_glyph_rects(
    page: "pymupdf.Page",
    clip: Optional[RectLike] = None,
    skip_whitespace: bool = False,
) -> Iterator["pymupdf.Rect"]:
    """Yield one rectangle per glyph on ``page``.

    PyMuPDF has already applied the text, font and page transforms, so all
    boxes share the page's top-left based coordinate space.

    Args:
        page: The page to read.
        clip: Only glyphs whose anchor (baseline origin) lies inside this
            rectangle are yielded.
        skip_whitespace: Leave out glyphs that render as whitespace.
    """
    bounds = rect_to_tuple(clip) if clip is not None else None
    for char in iter_chars(page):
        if skip_whitespace and not char.get("c", "").strip():
            continue
        if bounds is not None:
            x, y = char["origin"]
            if not contains_point(bounds, x, y):
                continue
        yield pymupdf.Rect(char["bbox"])
