# src/pdfqa/__init__.py
"""pdfqa - Q&A fine-tuning datasets from PDF documents.

Split a PDF into page-range chunks (by hand or from its outline), generate
question/answer pairs per chunk with an LLM, and export them as JSONL.

Quick Start:
    import asyncio

    from pdfqa import ClientQAGenerator, PyPDFDocument, Session, agenerate_all
    from pdfqa.providers.litellm import LiteLLMClient

    session = Session(PyPDFDocument.open("manual.pdf"))
    session.auto_split()

    generator = ClientQAGenerator(llm_client=LiteLLMClient())
    asyncio.run(agenerate_all(session, generator))
    session.export("qa_dataset.json")
"""

try:
    from importlib.metadata import PackageNotFoundError, version

    __version__ = version("pdfqa")
except PackageNotFoundError:
    # Source tree without an installed distribution
    try:
        import tomllib
        from pathlib import Path

        def _read_version_from_pyproject() -> str | None:
            for parent in Path(__file__).resolve().parents:
                pyproject = parent / "pyproject.toml"
                if pyproject.exists():
                    data = tomllib.loads(pyproject.read_text(encoding="utf-8"))
                    found = data.get("project", {}).get("version")
                    return str(found) if found is not None else None
            return None

        __version__ = _read_version_from_pyproject() or "unknown"
    except (OSError, ValueError):
        __version__ = "unknown"

from pdfqa.batch import agenerate_all, agenerate_chunk
from pdfqa.dataset import serialize_dataset, write_dataset
from pdfqa.document import Document, OutlineItem
from pdfqa.document.pypdf_document import PyPDFDocument
from pdfqa.exceptions import (
    BatchHaltedError,
    ChunkContentError,
    EmptyDatasetError,
    InvalidChunkError,
    InvalidDocumentError,
    NoOutlineError,
    OutlineUnusableError,
    PdfQAError,
    SessionBusyError,
)
from pdfqa.generator import ClientQAGenerator, QAGenerator, RetryPolicy
from pdfqa.models import Attachment, Bookmark, Chunk, ChunkRange, QAPair, RawPair
from pdfqa.normalizer import normalize_pairs
from pdfqa.outline import resolve_bookmarks
from pdfqa.session import Session
from pdfqa.settings import Settings
from pdfqa.splitter import auto_split, split_sections

__all__ = [
    "__version__",
    # Core
    "Session",
    "Settings",
    "agenerate_all",
    "agenerate_chunk",
    "auto_split",
    "split_sections",
    "resolve_bookmarks",
    "normalize_pairs",
    "serialize_dataset",
    "write_dataset",
    # Documents
    "Document",
    "OutlineItem",
    "PyPDFDocument",
    # Generation
    "QAGenerator",
    "ClientQAGenerator",
    "RetryPolicy",
    # Models
    "Attachment",
    "Bookmark",
    "Chunk",
    "ChunkRange",
    "QAPair",
    "RawPair",
    # Errors
    "PdfQAError",
    "InvalidDocumentError",
    "NoOutlineError",
    "OutlineUnusableError",
    "InvalidChunkError",
    "ChunkContentError",
    "SessionBusyError",
    "EmptyDatasetError",
    "BatchHaltedError",
]
