# src/pdfqa/providers/litellm/__init__.py
"""LiteLLM provider client for pdfqa.

Usage:
    from pdfqa.providers.litellm import LiteLLMClient, ChatModels

    client = LiteLLMClient(model=ChatModels.GEMINI_25_FLASH)
"""

from pdfqa.providers.litellm.client import LiteLLMClient, has_provider_credentials
from pdfqa.providers.litellm.models import ChatModels

__all__ = ["ChatModels", "LiteLLMClient", "has_provider_credentials"]
