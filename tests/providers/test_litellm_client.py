# tests/providers/test_litellm_client.py
"""Tests for LiteLLMClient."""

from unittest.mock import MagicMock, patch

import pytest

from pdfqa.providers import LLMClient
from pdfqa.providers.litellm import ChatModels, LiteLLMClient, has_provider_credentials


def mock_completion_response(content):
    """Create a mock LiteLLM completion response."""
    mock_response = MagicMock()
    mock_response.choices = [MagicMock()]
    mock_response.choices[0].message.content = content
    return mock_response


class TestLiteLLMClient:
    def test_is_llm_client(self):
        assert isinstance(LiteLLMClient(), LLMClient)

    def test_defaults(self):
        client = LiteLLMClient()
        assert client.model == ChatModels.GEMINI_25_FLASH
        assert client.num_retries == 0

    @patch("pdfqa.providers.litellm.client.litellm.completion")
    def test_complete_passes_structured_output(self, mock_completion):
        mock_completion.return_value = mock_completion_response("[]")
        client = LiteLLMClient(model="gemini/gemini-2.5-pro", api_key="secret")
        response_format = {"type": "json_schema", "json_schema": {"name": "x", "schema": {}}}

        result = client.complete(
            [{"role": "user", "content": "hi"}], temperature=0.0, response_format=response_format
        )

        assert result == "[]"
        kwargs = mock_completion.call_args.kwargs
        assert kwargs["model"] == "gemini/gemini-2.5-pro"
        assert kwargs["temperature"] == 0.0
        assert kwargs["response_format"] == response_format
        assert kwargs["api_key"] == "secret"
        assert kwargs["num_retries"] == 0

    @patch("pdfqa.providers.litellm.client.litellm.completion")
    def test_optional_params_omitted(self, mock_completion):
        mock_completion.return_value = mock_completion_response("ok")

        LiteLLMClient().complete([{"role": "user", "content": "hi"}])

        kwargs = mock_completion.call_args.kwargs
        assert "temperature" not in kwargs
        assert "response_format" not in kwargs
        assert "api_key" not in kwargs

    @patch("pdfqa.providers.litellm.client.litellm.completion")
    def test_none_content_raises(self, mock_completion):
        mock_completion.return_value = mock_completion_response(None)

        with pytest.raises(ValueError, match="None content"):
            LiteLLMClient().complete([{"role": "user", "content": "hi"}])

    @pytest.mark.asyncio
    @patch("pdfqa.providers.litellm.client.litellm.acompletion")
    async def test_acomplete(self, mock_acompletion):
        mock_acompletion.return_value = mock_completion_response('[{"question":"Q","answer":"A"}]')

        result = await LiteLLMClient().acomplete([{"role": "user", "content": "hi"}])

        assert result == '[{"question":"Q","answer":"A"}]'
        mock_acompletion.assert_called_once()


class TestHasProviderCredentials:
    @patch("pdfqa.providers.litellm.client.litellm.validate_environment")
    def test_keys_present(self, mock_validate):
        mock_validate.return_value = {"keys_in_environment": True, "missing_keys": []}

        assert has_provider_credentials("gemini/gemini-2.5-flash") is True
        mock_validate.assert_called_once_with(model="gemini/gemini-2.5-flash")

    @patch("pdfqa.providers.litellm.client.litellm.validate_environment")
    def test_keys_missing(self, mock_validate):
        mock_validate.return_value = {
            "keys_in_environment": False,
            "missing_keys": ["GEMINI_API_KEY"],
        }

        assert has_provider_credentials("gemini/gemini-2.5-flash") is False
