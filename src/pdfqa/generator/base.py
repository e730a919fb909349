# src/pdfqa/generator/base.py
"""QAGenerator abstract base class."""

import asyncio
from abc import ABC, abstractmethod
from collections.abc import Sequence

from pdfqa.models import Attachment, RawPair


class QAGenerator(ABC):
    """Abstract base class for question/answer generation."""

    @abstractmethod
    async def agenerate(
        self, text: str, attachments: Sequence[Attachment] = ()
    ) -> list[RawPair]:
        """Generate raw question/answer pairs for a piece of content (async).

        Returns an empty list when there is nothing to generate from. Either
        succeeds with the full result or raises; never returns partial output.
        """
        ...

    def generate(self, text: str, attachments: Sequence[Attachment] = ()) -> list[RawPair]:
        """Generate raw question/answer pairs (sync wrapper around agenerate)."""
        return asyncio.run(self.agenerate(text, attachments))
