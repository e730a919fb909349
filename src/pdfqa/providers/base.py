# src/pdfqa/providers/base.py
"""Abstract base class for LLM completion providers."""

from abc import ABC, abstractmethod
from typing import Any


class LLMClient(ABC):
    """Abstract base class for LLM completion providers.

    Implementations of this class provide text generation/completion
    capabilities. The interface is intentionally minimal so that a fake
    transport can stand in for a live API in tests.

    Errors raised by implementations should carry an HTTP-like
    ``status_code`` attribute where one is available; the retry policy in
    :mod:`pdfqa.generator.retry` uses it to classify failures.

    Example:
        class MyLLMClient(LLMClient):
            def complete(self, messages, temperature=None, response_format=None):
                return my_api.chat(messages, temp=temperature)
    """

    @abstractmethod
    def complete(
        self,
        messages: list[dict],
        temperature: float | None = None,
        response_format: dict[str, Any] | None = None,
    ) -> str:
        """Generate a completion for the given messages.

        Args:
            messages: List of message dicts with 'role' and 'content' keys.
                      Content may be a string or a list of typed parts
                      (text, image_url, file).
            temperature: Optional temperature for generation (0.0-1.0).
                         If None, use provider default.
            response_format: Optional structured-output specification
                             (a JSON schema wrapper).

        Returns:
            The generated text response.
        """
        ...

    async def acomplete(
        self,
        messages: list[dict],
        temperature: float | None = None,
        response_format: dict[str, Any] | None = None,
    ) -> str:
        """Generate a completion for the given messages (async).

        Default implementation calls sync complete().
        Override in subclasses for true async behavior.
        """
        return self.complete(messages, temperature, response_format)
