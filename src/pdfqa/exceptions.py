# src/pdfqa/exceptions.py
"""Exceptions raised by the chunking and dataset pipeline.

Generation-specific errors live in :mod:`pdfqa.generator.exceptions`.
"""


class PdfQAError(Exception):
    """Base class for all pdfqa errors. The message is meant for end users."""


class InvalidDocumentError(PdfQAError):
    """Raised when a file is not a PDF or cannot be parsed."""


class NoOutlineError(PdfQAError):
    """Raised when auto-split is requested for a document without an outline."""

    def __init__(self, message: str = "No outline found in the document.") -> None:
        super().__init__(message)


class OutlineUnusableError(PdfQAError):
    """Raised when an outline exists but none of its entries resolve to a page."""

    def __init__(
        self,
        message: str = "Failed to extract structure from outline. Please use manual splitting.",
    ) -> None:
        super().__init__(message)


class InvalidChunkError(PdfQAError):
    """Raised when a manually requested page range is not acceptable."""


class ChunkContentError(PdfQAError):
    """Raised when neither text nor pages could be extracted for a chunk."""


class SessionBusyError(PdfQAError):
    """Raised when single-chunk generation is attempted while a batch is running."""


class EmptyDatasetError(PdfQAError):
    """Raised when exporting a dataset before any pairs were generated."""

    def __init__(self, message: str = "No Q&A pairs have been generated to save.") -> None:
        super().__init__(message)


class BatchHaltedError(PdfQAError):
    """Raised when a batch run stops at the first failing chunk.

    Attributes:
        chunk_id: Id of the chunk that failed.
        completed: Number of chunks that completed before the failure.
        total: Number of chunks in the run.
    """

    def __init__(self, chunk_id: int, cause: BaseException, completed: int, total: int) -> None:
        super().__init__(f"Error on chunk #{chunk_id}: {cause}. Halting process.")
        self.chunk_id = chunk_id
        self.cause = cause
        self.completed = completed
        self.total = total
