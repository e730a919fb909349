# src/pdfqa/generator/exceptions.py
"""Exceptions for Q&A generation."""

from pdfqa.exceptions import PdfQAError


class GenerationError(PdfQAError):
    """Base class for errors raised by a Q&A generator."""


class AccessDeniedError(GenerationError):
    """Raised when the API rejects the credentials or the caller's region. Not retried."""

    def __init__(
        self,
        message: str = (
            "API access denied. This may be due to regional restrictions or an "
            "invalid/disabled API key. Please check your API key and that you are "
            "in a supported region."
        ),
    ) -> None:
        super().__init__(message)


class LocationUnsupportedError(GenerationError):
    """Raised when the API refuses the caller's location for this model. Not retried."""

    def __init__(
        self,
        message: str = "API access denied: User location is not supported for this model.",
    ) -> None:
        super().__init__(message)


class RateLimitedError(GenerationError):
    """Raised when every attempt failed and the last failure was a rate limit."""

    def __init__(
        self,
        message: str = (
            "Rate limit exceeded. The API is receiving too many requests. Please wait "
            "a moment before trying again or reduce the request frequency."
        ),
    ) -> None:
        super().__init__(message)


class GenerationFailedError(GenerationError):
    """Raised when every attempt failed for any other reason.

    Attributes:
        attempts: Number of attempts that were made.
    """

    def __init__(self, attempts: int) -> None:
        super().__init__(
            f"Failed to generate Q&A pairs after {attempts} attempts. The model may be "
            "unavailable or the content could not be processed."
        )
        self.attempts = attempts


class ResponseFormatError(GenerationError):
    """Raised when a response is not a JSON array of {question, answer} objects."""
