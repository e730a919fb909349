# src/pdfqa/providers/__init__.py
"""Provider implementations for pdfqa.

This module contains the LLM provider abstraction:
- LLMClient: Abstract base class for LLM completion providers
- LiteLLMClient: LiteLLM implementation

Usage:
    from pdfqa.providers import LLMClient
    from pdfqa.providers.litellm import LiteLLMClient, ChatModels
"""

from pdfqa.providers.base import LLMClient
from pdfqa.providers.litellm import ChatModels, LiteLLMClient

__all__ = ["LLMClient", "ChatModels", "LiteLLMClient"]
