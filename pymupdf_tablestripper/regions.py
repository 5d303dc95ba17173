"""Text extraction keyed by named page regions."""

from __future__ import annotations

from typing import Dict, List

import pymupdf  # type: ignore

from .geometry_utils import RectLike, ensure_rect


class RegionTextExtractor:
    """Collect named rectangles, then read the text inside each in one pass.

    Regions are registered with :meth:`add_region` and read back with
    :meth:`get_text_for_region` once :meth:`extract_regions` has run.
    """

    def __init__(self) -> None:
        self._regions: Dict[str, "pymupdf.Rect"] = {}
        self._text: Dict[str, str] = {}

    @property
    def labels(self) -> List[str]:
        return list(self._regions)

    def add_region(self, label: str, rect: RectLike) -> None:
        self._regions[label] = ensure_rect(rect)

    def clear(self) -> None:
        self._regions.clear()
        self._text.clear()

    def extract_regions(self, page: "pymupdf.Page") -> None:
        """Read the text of every registered region from ``page``."""
        textpage = page.get_textpage()
        self._text = {
            label: page.get_textbox(rect, textpage=textpage)
            for label, rect in self._regions.items()
        }

    def get_text_for_region(self, label: str) -> str:
        """Return the text found in region ``label``.

        Raises:
            KeyError: If no region was registered and extracted under ``label``.
        """
        try:
            return self._text[label]
        except KeyError:
            raise KeyError(f"No extracted text for region {label!r}") from None
