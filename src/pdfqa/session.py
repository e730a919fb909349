# src/pdfqa/session.py
"""Session state: the chunk list and the Q&A cache for one document."""

from __future__ import annotations

import logging
from pathlib import Path

from pdfqa.dataset import write_dataset
from pdfqa.document.base import Document
from pdfqa.exceptions import InvalidChunkError
from pdfqa.models import Chunk, QAPair
from pdfqa.settings import Settings
from pdfqa.splitter import auto_split

logger = logging.getLogger(__name__)


class Session:
    """Chunks and generated pairs for a single loaded document.

    The session is the only owner of this state. Auto-split replaces every
    chunk and clears the cache; manual chunks are appended with increasing
    ids; deleting a chunk evicts its cached pairs.

    Example:
        session = Session(PyPDFDocument.open("manual.pdf"))
        session.auto_split()
        await agenerate_all(session, generator)
        session.export("qa_dataset.json")
    """

    def __init__(self, document: Document, settings: Settings | None = None) -> None:
        self.document = document
        self.settings = settings if settings is not None else Settings()
        self._chunks: list[Chunk] = []
        self._next_chunk_id = 1
        self.qa_cache: dict[int, list[QAPair]] = {}
        self.generating_all = False

    @property
    def document_name(self) -> str:
        return self.document.name or "this document"

    @property
    def chunks(self) -> list[Chunk]:
        """Chunks in display order (a copy)."""
        return list(self._chunks)

    @property
    def next_chunk_id(self) -> int:
        return self._next_chunk_id

    def get_chunk(self, chunk_id: int) -> Chunk | None:
        for chunk in self._chunks:
            if chunk.id == chunk_id:
                return chunk
        return None

    def auto_split(self) -> list[Chunk]:
        """Replace all chunks with chunks derived from the document outline.

        On failure the chunk list and the cache are left empty and the error
        is re-raised.

        Raises:
            NoOutlineError: If the document has no outline
            OutlineUnusableError: If no outline entry could be resolved
        """
        try:
            chunks = auto_split(self.document, self.settings.max_pages_per_chunk)
        except Exception:
            self._reset_chunks()
            raise

        self._chunks = chunks
        self._next_chunk_id = len(chunks) + 1
        self.qa_cache = {}
        logger.info("Auto-split %s into %d chunks", self.document_name, len(chunks))
        return self.chunks

    def add_chunk(self, start_page: int, end_page: int) -> Chunk:
        """Add a manual chunk covering ``start_page..end_page``.

        Raises:
            InvalidChunkError: If the range is out of bounds or too long
        """
        page_count = self.document.page_count
        max_pages = self.settings.max_pages_per_chunk

        if start_page <= 0 or end_page <= 0:
            raise InvalidChunkError("Page numbers must be greater than 0.")
        if start_page > end_page:
            raise InvalidChunkError("Start page cannot be greater than end page.")
        if start_page > page_count or end_page > page_count:
            raise InvalidChunkError(f"Page number cannot be greater than {page_count}.")
        if end_page - start_page + 1 > max_pages:
            raise InvalidChunkError(f"Chunk cannot exceed {max_pages} pages.")

        chunk = Chunk(id=self._next_chunk_id, start_page=start_page, end_page=end_page)
        self._next_chunk_id += 1
        self._chunks.append(chunk)
        self._chunks.sort(key=lambda c: c.start_page)
        return chunk

    def delete_chunk(self, chunk_id: int) -> bool:
        """Delete a chunk and its cached pairs. Returns False if it did not exist."""
        before = len(self._chunks)
        self._chunks = [chunk for chunk in self._chunks if chunk.id != chunk_id]
        self.qa_cache.pop(chunk_id, None)
        return len(self._chunks) != before

    def store_pairs(self, chunk_id: int, pairs: list[QAPair]) -> None:
        """Record the generated pairs for a chunk, replacing earlier ones.

        Raises:
            InvalidChunkError: If the chunk is not in the chunk list
        """
        if self.get_chunk(chunk_id) is None:
            raise InvalidChunkError(f"Chunk #{chunk_id} does not exist.")
        self.qa_cache[chunk_id] = list(pairs)

    def pairs_for(self, chunk_id: int) -> list[QAPair]:
        return list(self.qa_cache.get(chunk_id, []))

    @property
    def total_pairs(self) -> int:
        return sum(len(self.qa_cache.get(chunk.id, ())) for chunk in self._chunks)

    def output_path(self, path: str | Path | None = None) -> Path:
        """Dataset file for an export: ``path``, or the configured output file."""
        return Path(path) if path is not None else Path(self.settings.output_file)

    def export(self, path: str | Path | None = None) -> int:
        """Write every cached pair to a JSONL dataset file.

        Returns:
            Number of pairs written

        Raises:
            EmptyDatasetError: If nothing has been generated yet
        """
        return write_dataset(
            self.output_path(path), self.qa_cache, [chunk.id for chunk in self._chunks]
        )

    def _reset_chunks(self) -> None:
        self._chunks = []
        self._next_chunk_id = 1
        self.qa_cache = {}
