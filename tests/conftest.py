"""Shared pytest configuration and fixtures."""

from __future__ import annotations

from pathlib import Path
from typing import Iterator

import pytest

from tests.pdf_fixtures import PDFTestFixtures, get_fixtures


def pytest_configure(config: pytest.Config) -> None:
    config.addinivalue_line("markers", "smoke: fast checks of basic behaviour")
    config.addinivalue_line("markers", "integration: runs against generated PDFs")


@pytest.fixture
def pdf_fixtures(tmp_path: Path) -> Iterator[PDFTestFixtures]:
    """PDF builder writing into a per-test directory."""
    fixtures = get_fixtures(tmp_path / "pdfs")
    yield fixtures
    fixtures.cleanup_all()


@pytest.fixture
def table_pdf(pdf_fixtures: PDFTestFixtures) -> Path:
    """Path to the sample 3x3 table PDF."""
    return pdf_fixtures.create_pdf_with_table()
