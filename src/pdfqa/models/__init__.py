# src/pdfqa/models/__init__.py
"""Data models for pdfqa."""

from pdfqa.models.attachment import Attachment
from pdfqa.models.bookmark import Bookmark
from pdfqa.models.chunk import Chunk, ChunkRange
from pdfqa.models.qa import QAPair, RawPair

__all__ = ["Attachment", "Bookmark", "Chunk", "ChunkRange", "QAPair", "RawPair"]
