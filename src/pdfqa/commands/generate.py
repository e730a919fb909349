# src/pdfqa/commands/generate.py
"""Generate command - build a Q&A dataset from a PDF.

This module provides the core generate logic used by the CLI.
"""

from __future__ import annotations

import asyncio
import re
from collections.abc import Sequence
from pathlib import Path
from typing import TYPE_CHECKING

from pdfqa.commands.base import (
    CommandStage,
    GenerateResult,
    ProgressCallback,
    ProgressUpdate,
)
from pdfqa.commands.split import chunk_info
from pdfqa.config import ConfigError, create_generator, get_pdfqa_config
from pdfqa.exceptions import BatchHaltedError, PdfQAError

if TYPE_CHECKING:
    from pdfqa.batch import BatchProgressCallback
    from pdfqa.generator import QAGenerator
    from pdfqa.session import Session

_RANGE_PATTERN = re.compile(r"^\s*(\d+)\s*(?:-\s*(\d+)\s*)?$")


def parse_page_range(value: str) -> tuple[int, int]:
    """Parse "3" or "3-6" into an inclusive (start, end) page pair.

    Raises:
        ValueError: If the value is not a page or page range
    """
    match = _RANGE_PATTERN.match(value)
    if not match:
        raise ValueError(f"Invalid page range: {value!r} (expected e.g. 3 or 3-6)")
    start = int(match.group(1))
    end = int(match.group(2)) if match.group(2) else start
    return start, end


def generate(
    path: str | Path,
    page_ranges: Sequence[tuple[int, int]] | None = None,
    output: str | Path | None = None,
    config_path: str | Path | None = None,
    on_progress: ProgressCallback | None = None,
    generator: QAGenerator | None = None,
) -> GenerateResult:
    """Split a PDF, generate Q&A pairs for every chunk and export the dataset.

    Args:
        path: Path to the PDF file
        page_ranges: Manual chunks as (start, end) pairs. If None or empty,
                     chunks are derived from the document outline.
        output: Dataset file path. Default: settings.output_file
        config_path: Override config file path
        on_progress: Callback for progress updates
        generator: Q&A generator to use instead of the configured one

    Returns:
        GenerateResult with counts and the output path
    """
    from pdfqa.document.pypdf_document import PyPDFDocument
    from pdfqa.session import Session

    config = get_pdfqa_config(config_path)
    if isinstance(config, ConfigError):
        return GenerateResult(success=False, error=config.message)

    def report(stage: CommandStage, current: int = 0, total: int = 0, message: str = "") -> None:
        if on_progress:
            on_progress(ProgressUpdate(stage=stage, current=current, total=total, message=message))

    report(CommandStage.LOADING, message=str(path))
    try:
        document = PyPDFDocument.open(path)
    except (OSError, PdfQAError) as e:
        return GenerateResult(success=False, error=str(e))

    session = Session(document, config.settings)

    report(CommandStage.SPLITTING)
    try:
        if page_ranges:
            for start, end in page_ranges:
                session.add_chunk(start, end)
        else:
            session.auto_split()
    except PdfQAError as e:
        prefix = "Invalid chunk" if page_ranges else "Auto-split error"
        return GenerateResult(success=False, error=f"{prefix}: {e}")

    if not session.chunks:
        return GenerateResult(success=False, error="No chunks to generate Q&A for.")

    if generator is None:
        generator = create_generator(config)

    result = GenerateResult(success=True, chunks_total=len(session.chunks))

    def on_batch_progress(completed: int, total: int) -> None:
        report(CommandStage.GENERATING, completed, total, f"chunk {completed}/{total}")

    result.chunks_completed = _run_batch(session, generator, on_batch_progress, result)

    report(CommandStage.EXPORTING)
    _export(session, output, result)

    result.chunks = [chunk_info(c, len(session.pairs_for(c.id))) for c in session.chunks]
    report(CommandStage.COMPLETE)
    return result


def _run_batch(
    session: Session,
    generator: QAGenerator,
    on_batch_progress: BatchProgressCallback,
    result: GenerateResult,
) -> int:
    """Run the batch and record a halt on ``result``. Returns chunks completed."""
    from pdfqa.batch import agenerate_all

    try:
        return asyncio.run(agenerate_all(session, generator, on_progress=on_batch_progress))
    except BatchHaltedError as e:
        result.success = False
        result.error = str(e)
        result.failed_chunk_id = e.chunk_id
        return e.completed


def _export(session: Session, output: str | Path | None, result: GenerateResult) -> None:
    """Export cached pairs; a halted run still keeps what it produced."""
    if session.total_pairs == 0:
        if result.success:
            result.success = False
            result.error = "No Q&A pairs have been generated to save."
        return

    target = session.output_path(output)
    try:
        written = session.export(target)
    except (OSError, PdfQAError) as e:
        result.success = False
        result.error = f"Failed to write dataset: {e}"
        return

    result.output_path = str(target)
    result.pairs_written = written
