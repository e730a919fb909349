# tests/test_settings.py
"""Tests for Settings.

Settings is a plain BaseModel (no env var reading).
The library is programmatic-first - env vars are read by the CLI application layer.
"""

import pytest
from pydantic import ValidationError

from pdfqa.generator import RetryPolicy
from pdfqa.settings import Settings


class TestSettings:
    def test_default_settings(self):
        """Test Settings has correct defaults."""
        settings = Settings()
        assert settings.llm_model == "gemini/gemini-2.5-flash"
        assert settings.temperature == 0.0
        assert settings.prompt_template is None
        assert settings.attach_pages is True
        assert settings.max_pages_per_chunk == 4
        assert settings.max_attempts == 3
        assert settings.base_delay_seconds == 1.5
        assert settings.pacing_seconds == 5.0
        assert settings.output_file == "qa_dataset.json"

    def test_settings_with_custom_values(self):
        settings = Settings(max_pages_per_chunk=8, pacing_seconds=0, attach_pages=False)
        assert settings.max_pages_per_chunk == 8
        assert settings.pacing_seconds == 0
        assert settings.attach_pages is False

    @pytest.mark.parametrize(
        "field", ["max_pages_per_chunk", "max_attempts", "base_delay_seconds", "pacing_seconds"]
    )
    def test_rejects_out_of_range(self, field):
        with pytest.raises(ValidationError):
            Settings(**{field: -1})

    def test_build_retry_policy(self):
        policy = Settings(max_attempts=5, base_delay_seconds=0.5).build_retry_policy()
        assert policy == RetryPolicy(max_attempts=5, base_delay=0.5)
