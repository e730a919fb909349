# src/pdfqa/providers/litellm/models.py
"""Curated LLM model constants for LiteLLM provider.

These are convenience constants for IDE autocomplete when using LiteLLM.
You can always pass any valid LiteLLM model string directly. The generator
sends PDF pages inline, so pick a model that accepts document input.
"""


class ChatModels:
    """Chat/completion models for ClientQAGenerator (via LiteLLMClient)."""

    # Google Gemini
    GEMINI_25_FLASH = "gemini/gemini-2.5-flash"
    GEMINI_25_PRO = "gemini/gemini-2.5-pro"
    GEMINI_3_FLASH = "gemini/gemini-3-flash-preview"

    # OpenAI - GPT 5 Series
    GPT_5_MINI = "openai/gpt-5-mini"

    # Anthropic - Claude 4.5 Series
    CLAUDE_SONNET_45 = "anthropic/claude-sonnet-4-5-20250929"
    CLAUDE_HAIKU_45 = "anthropic/claude-haiku-4-5-20251001"
