# src/pdfqa/models/chunk.py
"""Chunk data models."""

from pydantic import BaseModel, Field, model_validator


class ChunkRange(BaseModel):
    """A contiguous, inclusive page range of a document (1-indexed)."""

    start_page: int = Field(ge=1)
    end_page: int = Field(ge=1)
    context_title: str | None = None  # Outline section the range came from

    @model_validator(mode="after")
    def _check_order(self) -> "ChunkRange":
        if self.end_page < self.start_page:
            raise ValueError(
                f"end_page ({self.end_page}) must not be before start_page ({self.start_page})"
            )
        return self

    @property
    def page_span(self) -> int:
        """Number of pages covered by the range."""
        return self.end_page - self.start_page + 1


class Chunk(ChunkRange):
    """A page range treated as one unit for Q&A generation."""

    id: int = Field(ge=1)
