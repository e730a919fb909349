# src/pdfqa/settings.py
"""Configuration management for pdfqa.

This module contains behavioral settings for chunking, generation and export.
Settings are passed programmatically - the library does not read from
environment variables. The CLI layer reads ``pdfqa.yaml`` and ``PDFQA_*``
variables (see :mod:`pdfqa.config`) and passes values explicitly.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from pdfqa.generator.retry import RetryPolicy
from pdfqa.providers.litellm.models import ChatModels


class Settings(BaseModel):
    """Behavioral settings for pdfqa.

    Example:
        settings = Settings(llm_model="gemini/gemini-2.5-pro", pacing_seconds=10)
    """

    # Generation
    llm_model: str = ChatModels.GEMINI_25_FLASH
    temperature: float | None = 0.0
    prompt_template: str | None = None
    attach_pages: bool = True  # Send the chunk's own pages so diagrams and tables are seen

    # Chunking
    max_pages_per_chunk: int = Field(default=4, ge=1)

    # Retries (per chunk) and pacing (between chunks)
    max_attempts: int = Field(default=3, ge=1)
    base_delay_seconds: float = Field(default=1.5, ge=0)
    pacing_seconds: float = Field(default=5.0, ge=0)

    # Export
    output_file: str = "qa_dataset.json"

    def build_retry_policy(self) -> RetryPolicy:
        """Build the RetryPolicy used by the generator."""
        return RetryPolicy(max_attempts=self.max_attempts, base_delay=self.base_delay_seconds)
