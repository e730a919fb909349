# src/pdfqa/generator/__init__.py
"""Question/answer generation for pdfqa."""

from pdfqa.generator.base import QAGenerator
from pdfqa.generator.client import ClientQAGenerator
from pdfqa.generator.exceptions import (
    AccessDeniedError,
    GenerationError,
    GenerationFailedError,
    LocationUnsupportedError,
    RateLimitedError,
    ResponseFormatError,
)
from pdfqa.generator.retry import ErrorClassification, ErrorKind, RetryPolicy, classify_error

__all__ = [
    "QAGenerator",
    "ClientQAGenerator",
    "RetryPolicy",
    "ErrorKind",
    "ErrorClassification",
    "classify_error",
    "GenerationError",
    "AccessDeniedError",
    "LocationUnsupportedError",
    "RateLimitedError",
    "GenerationFailedError",
    "ResponseFormatError",
]
