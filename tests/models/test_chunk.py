# tests/models/test_chunk.py
"""Tests for ChunkRange and Chunk models."""

import pytest
from pydantic import ValidationError

from pdfqa.models import Chunk, ChunkRange


class TestChunkRange:
    def test_single_page_range(self):
        chunk_range = ChunkRange(start_page=3, end_page=3)
        assert chunk_range.page_span == 1
        assert chunk_range.context_title is None

    def test_page_span_is_inclusive(self):
        assert ChunkRange(start_page=5, end_page=8).page_span == 4

    def test_end_before_start_rejected(self):
        with pytest.raises(ValidationError):
            ChunkRange(start_page=6, end_page=5)

    def test_pages_are_one_based(self):
        with pytest.raises(ValidationError):
            ChunkRange(start_page=0, end_page=2)


class TestChunk:
    def test_chunk_carries_id_and_title(self):
        chunk = Chunk(id=2, start_page=1, end_page=4, context_title="Intro")
        assert chunk.id == 2
        assert chunk.context_title == "Intro"
        assert isinstance(chunk, ChunkRange)

    def test_id_must_be_positive(self):
        with pytest.raises(ValidationError):
            Chunk(id=0, start_page=1, end_page=1)
