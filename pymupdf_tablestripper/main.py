#!/usr/bin/env python3
"""Print the text of every inferred table cell of a PDF."""

# ruff: noqa: T201 -- table contents go to stdout

from __future__ import annotations

import sys
from pathlib import Path

from pymupdf_tablestripper.api import extract_tables
from pymupdf_tablestripper.config import StripperConfig
from pymupdf_tablestripper.exceptions import ExtractionError
from pymupdf_tablestripper.logging_config import get_logger

logger = get_logger(__name__)


def main(argv: list[str] | None = None) -> int:
    """CLI entry point: ``<input.pdf> [x0 y0 x1 y1]``."""
    argv = list(sys.argv[1:] if argv is None else argv)

    if len(argv) not in (1, 5):
        script = Path(sys.argv[0]).name
        logger.error(f"Usage: {script} <input.pdf> [x0 y0 x1 y1]")
        return 1

    region = None
    if len(argv) == 5:
        try:
            region = tuple(float(v) for v in argv[1:])
        except ValueError:
            logger.error(f"error: region must be four numbers, got {argv[1:]}")
            return 1

    try:
        config = StripperConfig.from_env(region=region)
        tables = extract_tables(argv[0], config=config)
    except (FileNotFoundError, ValueError, ExtractionError) as exc:
        logger.error(f"error: {exc}")
        return 1

    for table in tables:
        print(f"Page {table['page']}")
        for col in range(table["column_count"]):
            print(f"Column {col}")
            for row in range(table["row_count"]):
                print(f"Row {row}")
                print(table["cells"][row][col])
    return 0


if __name__ == "__main__":  # pragma: no cover - manual usage
    raise SystemExit(main())
