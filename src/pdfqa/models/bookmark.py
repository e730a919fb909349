# src/pdfqa/models/bookmark.py
"""Bookmark data model."""

from pydantic import BaseModel, Field


class Bookmark(BaseModel):
    """An outline entry resolved to a concrete 1-based page number."""

    title: str
    page: int = Field(ge=1)
