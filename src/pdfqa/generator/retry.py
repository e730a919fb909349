# src/pdfqa/generator/retry.py
"""Retry policy for generation calls.

Failures are classified by a pure function so the policy can be tested
without a network: permission and location refusals abort immediately,
everything else is retried with exponential backoff. Once attempts run out
the last failure decides between a rate-limit error and a generic one.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from enum import Enum
from typing import TypeVar

from pdfqa.generator.exceptions import (
    AccessDeniedError,
    GenerationError,
    GenerationFailedError,
    LocationUnsupportedError,
    RateLimitedError,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")

SleepFunc = Callable[[float], Awaitable[None]]

# Substrings (lower-case) that mark an error message as a permission refusal
ACCESS_DENIED_MARKERS = ("permission_denied", "region not supported", "api key not valid")
LOCATION_MARKER = "user location is not supported"
RATE_LIMIT_MARKER = "resource_exhausted"


class ErrorKind(Enum):
    """Classes of generation failure."""

    ACCESS_DENIED = "access_denied"
    LOCATION_UNSUPPORTED = "location_unsupported"
    RATE_LIMITED = "rate_limited"
    GENERIC = "generic"


@dataclass(frozen=True)
class ErrorClassification:
    """Outcome of classifying a failed attempt."""

    kind: ErrorKind
    retriable: bool
    message: str


@dataclass(frozen=True)
class RetryPolicy:
    """Attempt budget and backoff schedule.

    The delay before attempt ``n + 1`` is ``base_delay * 2 ** (n - 1)``,
    so the defaults wait 1.5s and then 3s.
    """

    max_attempts: int = 3
    base_delay: float = 1.5

    def __post_init__(self) -> None:
        if self.max_attempts < 1:
            raise ValueError("max_attempts must be at least 1")
        if self.base_delay < 0:
            raise ValueError("base_delay must not be negative")

    def delay_after(self, attempt: int) -> float:
        """Seconds to wait after failed attempt ``attempt`` (1-based)."""
        return self.base_delay * 2 ** (attempt - 1)


def _status_code(error: BaseException) -> int | None:
    for attr in ("status_code", "code", "status"):
        value = getattr(error, attr, None)
        if isinstance(value, int) and not isinstance(value, bool):
            return value
    return None


def _status_text(error: BaseException) -> str:
    value = getattr(error, "status", None)
    return value.upper() if isinstance(value, str) else ""


def classify_error(error: BaseException) -> ErrorClassification:
    """Classify a failed generation attempt.

    Args:
        error: Exception raised by the transport or by response parsing

    Returns:
        The error kind, whether another attempt is worthwhile, and a
        user-facing message
    """
    message = str(error).lower()
    status = _status_code(error)
    status_text = _status_text(error)

    if status == 403 and LOCATION_MARKER in message:
        return ErrorClassification(
            ErrorKind.LOCATION_UNSUPPORTED, False, str(LocationUnsupportedError())
        )

    if (
        status in (401, 403)
        or status_text == "PERMISSION_DENIED"
        or any(marker in message for marker in ACCESS_DENIED_MARKERS)
    ):
        return ErrorClassification(ErrorKind.ACCESS_DENIED, False, str(AccessDeniedError()))

    if status == 429 or status_text == "RESOURCE_EXHAUSTED" or RATE_LIMIT_MARKER in message:
        return ErrorClassification(ErrorKind.RATE_LIMITED, True, str(RateLimitedError()))

    return ErrorClassification(ErrorKind.GENERIC, True, str(error))


def _terminal_error(classification: ErrorClassification, attempts: int) -> GenerationError:
    if classification.kind is ErrorKind.ACCESS_DENIED:
        return AccessDeniedError()
    if classification.kind is ErrorKind.LOCATION_UNSUPPORTED:
        return LocationUnsupportedError()
    if classification.kind is ErrorKind.RATE_LIMITED:
        return RateLimitedError()
    return GenerationFailedError(attempts)


async def aretry(
    call: Callable[[], Awaitable[T]],
    policy: RetryPolicy | None = None,
    sleep: SleepFunc = asyncio.sleep,
) -> T:
    """Run ``call`` under the retry policy.

    Args:
        call: Zero-argument coroutine factory performing one attempt
        policy: Retry policy. Default: RetryPolicy()
        sleep: Awaitable sleep used for backoff (injectable for tests)

    Returns:
        The first successful result.

    Raises:
        AccessDeniedError: On a permission refusal (no retry)
        LocationUnsupportedError: On a location refusal (no retry)
        RateLimitedError: If all attempts failed and the last was rate-limited
        GenerationFailedError: If all attempts failed otherwise
    """
    policy = policy or RetryPolicy()
    last_error: Exception | None = None

    for attempt in range(1, policy.max_attempts + 1):
        try:
            return await call()
        except Exception as e:
            last_error = e
            classification = classify_error(e)
            logger.warning(
                "Attempt %d of %d failed to generate Q&A: %s",
                attempt,
                policy.max_attempts,
                e,
            )
            if not classification.retriable:
                raise _terminal_error(classification, attempt) from e
            if attempt < policy.max_attempts:
                delay = policy.delay_after(attempt)
                logger.info("Retrying in %.1fs...", delay)
                await sleep(delay)

    assert last_error is not None
    logger.error("All retries failed to generate Q&A pairs: %s", last_error)
    raise _terminal_error(classify_error(last_error), policy.max_attempts) from last_error
