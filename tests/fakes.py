"""Test doubles shared across the suite."""

from __future__ import annotations

import json
from collections.abc import Sequence
from typing import Any

from pdfqa.document.base import Document, OutlineItem
from pdfqa.providers.base import LLMClient


class FakeDocument(Document):
    """In-memory Document for tests.

    Pages are given as text; page references are plain 0-based ints.
    Pages listed in ``broken_pages`` raise when their text is read.
    """

    def __init__(
        self,
        pages: Sequence[str],
        outline: list[OutlineItem] | None = None,
        named_destinations: dict[str, list[Any]] | None = None,
        name: str = "manual.pdf",
        broken_pages: Sequence[int] = (),
        extract_error: Exception | None = None,
    ) -> None:
        self.pages = list(pages)
        self.outline = outline
        self.named_destinations = named_destinations or {}
        self.name = name
        self.broken_pages = set(broken_pages)
        self.extract_error = extract_error
        self.extracted: list[tuple[int, int]] = []

    @property
    def page_count(self) -> int:
        return len(self.pages)

    def page_text_fragments(self, page_number: int) -> list[str]:
        if page_number in self.broken_pages:
            raise RuntimeError(f"corrupt content stream on page {page_number}")
        return self.pages[page_number - 1].split()

    def get_outline(self) -> list[OutlineItem] | None:
        return self.outline

    def resolve_destination(self, name: str) -> list[Any] | None:
        return self.named_destinations.get(name)

    def page_index(self, ref: Any) -> int:
        if isinstance(ref, int) and 0 <= ref < self.page_count:
            return ref
        raise ValueError(f"Unsupported page reference: {ref!r}")

    def extract_pages(self, start_page: int, end_page: int) -> bytes:
        if self.extract_error is not None:
            raise self.extract_error
        self.extracted.append((start_page, end_page))
        return f"%PDF-fake {start_page}-{end_page}".encode()


class StatusError(Exception):
    """Transport error carrying an HTTP-like status code."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class FakeLLMClient(LLMClient):
    """LLMClient that replays scripted outcomes.

    Each outcome is either a response string or an exception to raise.
    The last outcome repeats once the script runs out.
    """

    def __init__(self, outcomes: Sequence[str | BaseException]) -> None:
        self.outcomes = list(outcomes)
        self.calls: list[dict[str, Any]] = []

    def complete(
        self,
        messages: list[dict],
        temperature: float | None = None,
        response_format: dict[str, Any] | None = None,
    ) -> str:
        self.calls.append(
            {"messages": messages, "temperature": temperature, "response_format": response_format}
        )
        index = min(len(self.calls) - 1, len(self.outcomes) - 1)
        outcome = self.outcomes[index]
        if isinstance(outcome, BaseException):
            raise outcome
        return outcome


def qa_json(*pairs: tuple[str, str]) -> str:
    """Serialize (question, answer) tuples the way the model responds."""
    return json.dumps([{"question": q, "answer": a} for q, a in pairs])


class SleepRecorder:
    """Awaitable stand-in for asyncio.sleep that records requested delays."""

    def __init__(self) -> None:
        self.delays: list[float] = []

    async def __call__(self, seconds: float) -> None:
        self.delays.append(seconds)
