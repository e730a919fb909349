# tests/test_config.py
"""Tests for config file and environment loading."""

import os
from pathlib import Path

import pytest

from pdfqa.config import (
    ConfigError,
    PdfQAConfig,
    build_settings,
    create_generator,
    find_config_file,
    get_pdfqa_config,
    get_settings_from_env,
    load_env_file,
    setting_sources,
    validate_config,
)
from pdfqa.generator import ClientQAGenerator
from pdfqa.settings import Settings


@pytest.fixture
def clean_env(monkeypatch, temp_dir):
    """Run in an empty directory with no PDFQA_* variables set."""
    for key in list(os.environ):
        if key.startswith("PDFQA_"):
            monkeypatch.delenv(key)
    monkeypatch.chdir(temp_dir)
    return temp_dir


def _write(directory, name, content):
    path = os.path.join(directory, name)
    with open(path, "w", encoding="utf-8") as f:
        f.write(content)
    return path


class TestEnvFile:
    def test_loads_values(self, clean_env, monkeypatch):
        monkeypatch.setenv("PDFQA_TEST_TOKEN", "placeholder")
        monkeypatch.delenv("PDFQA_TEST_TOKEN")
        path = _write(clean_env, ".env", '# comment\nPDFQA_TEST_TOKEN="abc"\n\nNOT A PAIR\n')

        load_env_file(path)

        assert os.environ["PDFQA_TEST_TOKEN"] == "abc"

    def test_does_not_override(self, clean_env, monkeypatch):
        monkeypatch.setenv("PDFQA_TEST_TOKEN", "from-shell")
        path = _write(clean_env, ".env", "PDFQA_TEST_TOKEN=from-file\n")

        load_env_file(path)

        assert os.environ["PDFQA_TEST_TOKEN"] == "from-shell"

    def test_missing_file_is_ignored(self, clean_env):
        load_env_file(os.path.join(clean_env, "nope.env"))


class TestFindConfigFile:
    def test_finds_in_parent(self, clean_env):
        _write(clean_env, "pdfqa.yaml", "settings: {}\n")
        child = os.path.join(clean_env, "a", "b")
        os.makedirs(child)

        found = find_config_file(Path(child))

        assert found is not None
        assert found.name == "pdfqa.yaml"

    def test_none_when_absent(self, clean_env):
        assert find_config_file() is None


class TestBuildSettings:
    def test_defaults(self, clean_env):
        assert build_settings() == Settings()

    def test_yaml_settings(self, clean_env):
        config = {"llm_model": "openai/gpt-5-mini", "settings": {"pacing_seconds": 1}}
        settings = build_settings(config)
        assert settings.llm_model == "openai/gpt-5-mini"
        assert settings.pacing_seconds == 1

    def test_env_overrides_yaml(self, clean_env, monkeypatch):
        monkeypatch.setenv("PDFQA_MAX_PAGES_PER_CHUNK", "6")
        monkeypatch.setenv("PDFQA_ATTACH_PAGES", "false")

        settings = build_settings({"settings": {"max_pages_per_chunk": 2}})

        assert settings.max_pages_per_chunk == 6
        assert settings.attach_pages is False

    def test_invalid_env_numbers_are_ignored(self, clean_env, monkeypatch):
        monkeypatch.setenv("PDFQA_MAX_ATTEMPTS", "lots")
        assert "max_attempts" not in get_settings_from_env()

    def test_setting_sources(self, clean_env, monkeypatch):
        monkeypatch.setenv("PDFQA_PACING_SECONDS", "2.5")
        sources = setting_sources({"settings": {"max_attempts": 4}})
        assert sources["pacing_seconds"] == "env var"
        assert sources["max_attempts"] == "yaml"
        assert sources["output_file"] == "default"


class TestValidateConfig:
    def test_unknown_keys_warn(self):
        warnings = validate_config({"provider": "x", "settings": {"bogus": 1, "max_attempts": 2}})
        assert len(warnings) == 2
        assert "provider" in warnings[0]
        assert "bogus" in warnings[1]

    def test_clean_config(self):
        assert validate_config({"settings": {"pacing_seconds": 3}}) == []


class TestGetPdfQAConfig:
    def test_defaults_without_file(self, clean_env):
        config = get_pdfqa_config()
        assert isinstance(config, PdfQAConfig)
        assert config.config_path is None
        assert config.llm_api_key is None

    def test_reads_discovered_file(self, clean_env):
        _write(clean_env, "pdfqa.yaml", "settings:\n  max_pages_per_chunk: 3\n")
        config = get_pdfqa_config()
        assert config.settings.max_pages_per_chunk == 3

    def test_api_key_from_env(self, clean_env, monkeypatch):
        monkeypatch.setenv("PDFQA_API_KEY", "k-123")
        assert get_pdfqa_config().llm_api_key == "k-123"

    def test_missing_explicit_file(self, clean_env):
        result = get_pdfqa_config(os.path.join(clean_env, "missing.yaml"))
        assert isinstance(result, ConfigError)
        assert "not found" in result.message

    def test_invalid_yaml(self, clean_env):
        path = _write(clean_env, "bad.yaml", "settings: [unclosed\n")
        result = get_pdfqa_config(path)
        assert isinstance(result, ConfigError)
        assert "Invalid YAML" in result.message

    def test_non_mapping(self, clean_env):
        path = _write(clean_env, "list.yaml", "- a\n- b\n")
        assert isinstance(get_pdfqa_config(path), ConfigError)

    def test_out_of_range_setting(self, clean_env):
        path = _write(clean_env, "pdfqa.yaml", "settings:\n  max_pages_per_chunk: 0\n")
        result = get_pdfqa_config(path)
        assert isinstance(result, ConfigError)
        assert result.message.startswith("Invalid settings")


class TestCreateGenerator:
    def test_wires_settings(self, clean_env):
        settings = Settings(llm_model="openai/gpt-5-mini", max_attempts=2, temperature=0.3)
        generator = create_generator(PdfQAConfig(settings=settings, llm_api_key="k"))

        assert isinstance(generator, ClientQAGenerator)
        assert generator.temperature == 0.3
        assert generator.retry_policy.max_attempts == 2
        assert generator._client.model == "openai/gpt-5-mini"
        assert generator._client.api_key == "k"
