"""Top-level package for inferring text tables from PyMuPDF pages."""

from __future__ import annotations

from importlib import metadata

from .api import PageTable, extract_tables
from .clustering import BoxCluster
from .config import StripperConfig
from .exceptions import ExtractionError
from .grid import GridBuilder, TableGrid
from .intervals import Interval, IntervalSet
from .labeler import Labeler, Origin
from .stripper import TableStripper

__all__ = [
    "BoxCluster",
    "ExtractionError",
    "GridBuilder",
    "Interval",
    "IntervalSet",
    "Labeler",
    "Origin",
    "PageTable",
    "StripperConfig",
    "TableGrid",
    "TableStripper",
    "extract_tables",
    "__version__",
]

try:  # pragma: no cover - metadata only available when installed
    __version__ = metadata.version("pymupdf-tablestripper")
except metadata.PackageNotFoundError:  # pragma: no cover - fallback for local dev
    __version__ = "1.0.0"
