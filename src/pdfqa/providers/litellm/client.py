# src/pdfqa/providers/litellm/client.py
"""LiteLLM client implementation for completion APIs."""

from typing import Any

import litellm

from pdfqa.providers.base import LLMClient
from pdfqa.providers.litellm.models import ChatModels


class LiteLLMClient(LLMClient):
    """LiteLLM-based LLM client for text generation.

    Supports any model available through LiteLLM (Gemini, OpenAI, Anthropic,
    Bedrock, etc.). Multimodal parts (images, PDF pages) are passed through
    as OpenAI-style content parts, which LiteLLM translates per provider.

    Example:
        from pdfqa.providers.litellm import LiteLLMClient, ChatModels

        client = LiteLLMClient(model=ChatModels.GEMINI_25_FLASH)
        response = client.complete([{"role": "user", "content": "Hello"}])
    """

    def __init__(
        self,
        model: str = ChatModels.GEMINI_25_FLASH,
        num_retries: int = 0,
        api_key: str | None = None,
    ) -> None:
        """Initialize the LiteLLM client.

        Args:
            model: LiteLLM model identifier.
                   Examples: "gemini/gemini-2.5-flash", "openai/gpt-5-mini"
            num_retries: Retries performed inside LiteLLM. Default 0, because
                         ClientQAGenerator applies its own retry policy.
            api_key: Optional API key. If None, LiteLLM reads the provider's
                     usual environment variable (e.g. GEMINI_API_KEY).
        """
        self.model = model
        self.num_retries = num_retries
        self.api_key = api_key

    def _completion_kwargs(
        self,
        messages: list[dict],
        temperature: float | None,
        response_format: dict[str, Any] | None,
    ) -> dict[str, Any]:
        completion_kwargs: dict[str, Any] = {
            "model": self.model,
            "messages": messages,
            "drop_params": True,
            "num_retries": self.num_retries,
        }
        if temperature is not None:
            completion_kwargs["temperature"] = temperature
        if response_format is not None:
            completion_kwargs["response_format"] = response_format
        if self.api_key:
            completion_kwargs["api_key"] = self.api_key
        return completion_kwargs

    def _extract_content(self, response: Any) -> str:
        if not response.choices:
            raise ValueError(f"LLM returned no choices for model {self.model}")
        content = response.choices[0].message.content
        if content is None:
            raise ValueError(f"LLM returned None content for model {self.model}")
        return str(content)

    def complete(
        self,
        messages: list[dict],
        temperature: float | None = None,
        response_format: dict[str, Any] | None = None,
    ) -> str:
        """Generate a completion using LiteLLM."""
        response = litellm.completion(
            **self._completion_kwargs(messages, temperature, response_format)
        )
        return self._extract_content(response)

    async def acomplete(
        self,
        messages: list[dict],
        temperature: float | None = None,
        response_format: dict[str, Any] | None = None,
    ) -> str:
        """Generate a completion using LiteLLM (async)."""
        response = await litellm.acompletion(
            **self._completion_kwargs(messages, temperature, response_format)
        )
        return self._extract_content(response)


def has_provider_credentials(model: str) -> bool:
    """True if the provider's own key variables (e.g. GEMINI_API_KEY) are set for ``model``."""
    report = litellm.validate_environment(model=model)
    return bool(report.get("keys_in_environment"))
