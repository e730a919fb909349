"""Shared pytest fixtures."""

from __future__ import annotations

import logging
import os
import tempfile
from collections.abc import Sequence
from typing import Any

import pytest
from fakes import FakeDocument

from pdfqa.document.base import OutlineItem


@pytest.fixture(autouse=True)
def restore_pdfqa_logger():
    """Undo handler changes the CLI makes to the package logger."""
    logger = logging.getLogger("pdfqa")
    saved = (logger.handlers[:], logger.level, logger.propagate)
    yield
    handlers, level, propagate = saved
    logger.handlers[:] = handlers
    logger.setLevel(level)
    logger.propagate = propagate


@pytest.fixture
def temp_dir():
    """Create a temporary directory."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield tmpdir


@pytest.fixture
def sectioned_document():
    """Twelve-page document with an outline: Intro@1, Setup@5, Wiring@5, Appendix@12."""
    outline = [
        OutlineItem(title="Intro", dest=[0, "/Fit"]),
        OutlineItem(
            title="Setup",
            dest=[4, "/Fit"],
            items=[OutlineItem(title="Wiring", dest=[4, "/XYZ"])],
        ),
        OutlineItem(title="Appendix", dest=[11, "/Fit"]),
    ]
    pages = [f"Page {n} text" for n in range(1, 13)]
    return FakeDocument(pages, outline=outline)


@pytest.fixture
def make_pdf(temp_dir):
    """Build a real PDF of blank pages, optionally with an outline.

    ``outline`` is a list of (title, 0-based page, parent title or None).
    """
    from pypdf import PdfWriter

    def _make(
        page_count: int,
        outline: Sequence[tuple[str, int, str | None]] = (),
        filename: str = "sample.pdf",
    ) -> str:
        writer = PdfWriter()
        for _ in range(page_count):
            writer.add_blank_page(width=612, height=792)
        parents: dict[str, Any] = {}
        for title, page_index, parent in outline:
            parents[title] = writer.add_outline_item(
                title, page_index, parent=parents.get(parent) if parent else None
            )
        path = os.path.join(temp_dir, filename)
        with open(path, "wb") as f:
            writer.write(f)
        return path

    return _make
