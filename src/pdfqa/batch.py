# src/pdfqa/batch.py
"""Per-chunk generation and the sequential batch run over all chunks."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable

from pdfqa.exceptions import (
    BatchHaltedError,
    ChunkContentError,
    InvalidChunkError,
    SessionBusyError,
)
from pdfqa.extraction import extract_chunk_attachment, extract_chunk_text
from pdfqa.generator.base import QAGenerator
from pdfqa.generator.retry import SleepFunc
from pdfqa.models import Attachment, Chunk, QAPair
from pdfqa.normalizer import normalize_pairs
from pdfqa.session import Session

logger = logging.getLogger(__name__)

# Progress callback type: (completed, total)
BatchProgressCallback = Callable[[int, int], None]


async def _agenerate_chunk(
    session: Session,
    chunk: Chunk,
    generator: QAGenerator,
    attach_pages: bool,
) -> list[QAPair]:
    text = extract_chunk_text(session.document, chunk)
    attachments: list[Attachment] = []
    if attach_pages:
        attachment = extract_chunk_attachment(session.document, chunk)
        if attachment is not None:
            attachments.append(attachment)

    if not text.strip() and not attachments:
        raise ChunkContentError("Could not extract any content from this chunk.")

    raw_pairs = await generator.agenerate(text, attachments)
    pairs = normalize_pairs(raw_pairs, chunk.context_title, session.document_name)
    session.store_pairs(chunk.id, pairs)
    logger.debug("Chunk #%d produced %d pairs", chunk.id, len(pairs))
    return pairs


async def agenerate_chunk(
    session: Session,
    chunk: Chunk,
    generator: QAGenerator,
    attach_pages: bool | None = None,
) -> list[QAPair]:
    """Generate and cache Q&A pairs for a single chunk.

    Args:
        session: Session owning the document and cache
        chunk: Chunk to generate for
        generator: Q&A generator
        attach_pages: Send the chunk's pages inline. Default: session settings.

    Returns:
        The normalized pairs now cached for the chunk

    Raises:
        SessionBusyError: If a batch run is in progress
        InvalidChunkError: If the chunk is no longer in the session
        ChunkContentError: If no content could be extracted
        GenerationError: If generation failed
    """
    if session.generating_all:
        raise SessionBusyError("Cannot generate a single chunk while a batch is running.")
    if session.get_chunk(chunk.id) is None:
        raise InvalidChunkError(f"Chunk #{chunk.id} does not exist.")
    if attach_pages is None:
        attach_pages = session.settings.attach_pages
    return await _agenerate_chunk(session, chunk, generator, attach_pages)


async def agenerate_all(
    session: Session,
    generator: QAGenerator,
    on_progress: BatchProgressCallback | None = None,
    pacing_seconds: float | None = None,
    attach_pages: bool | None = None,
    sleep: SleepFunc = asyncio.sleep,
) -> int:
    """Generate pairs for every chunk, one at a time, in list order.

    After each successful chunk (except the last) the run waits
    ``pacing_seconds`` to stay within API rate limits. The first failure
    stops the run; pairs cached for earlier chunks are kept.

    Args:
        session: Session owning the chunks and cache
        generator: Q&A generator (does its own retrying)
        on_progress: Called with (completed, total) at the start and after each chunk
        pacing_seconds: Pause between chunks. Default: session settings.
        attach_pages: Send each chunk's pages inline. Default: session settings.
        sleep: Awaitable sleep used for pacing

    Returns:
        Number of chunks completed

    Raises:
        SessionBusyError: If another batch run is in progress
        BatchHaltedError: On the first chunk that fails
    """
    if session.generating_all:
        raise SessionBusyError("A batch run is already in progress.")

    chunks = session.chunks
    if not chunks:
        return 0

    if pacing_seconds is None:
        pacing_seconds = session.settings.pacing_seconds
    if attach_pages is None:
        attach_pages = session.settings.attach_pages

    total = len(chunks)
    completed = 0
    session.generating_all = True
    try:
        if on_progress:
            on_progress(completed, total)

        for chunk in chunks:
            try:
                await _agenerate_chunk(session, chunk, generator, attach_pages)
            except Exception as e:
                logger.error("Failed to generate Q&A for chunk %d: %s", chunk.id, e)
                raise BatchHaltedError(chunk.id, e, completed, total) from e

            completed += 1
            if on_progress:
                on_progress(completed, total)

            if completed < total and pacing_seconds > 0:
                logger.info("Waiting %.1fs before the next chunk", pacing_seconds)
                await sleep(pacing_seconds)
    finally:
        session.generating_all = False

    return completed
