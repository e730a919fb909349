# src/pdfqa/config.py
"""Configuration loading utilities for pdfqa.

This module provides configuration loading for the CLI and for external
applications using pdfqa as a library. It handles:
- Finding and loading pdfqa.yaml config files
- Loading .env files for API keys
- Building Settings objects from YAML and PDFQA_* environment variables
- Creating the Q&A generator from configuration
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING, Any

import yaml  # type: ignore[import-untyped]
from pydantic import ValidationError

if TYPE_CHECKING:
    from pdfqa.generator import ClientQAGenerator
    from pdfqa.settings import Settings

CONFIG_FILES = ["pdfqa.yaml", "pdfqa.yml", ".pdfqarc"]
ENV_FILE = ".env"
API_KEY_ENV = "PDFQA_API_KEY"


@dataclass
class ConfigError:
    """Error during configuration loading."""

    message: str
    suggestion: str | None = None


def load_env_file(env_path: str | Path = ENV_FILE) -> None:
    """Load environment variables from .env file if it exists.

    Existing environment variables are never overridden.

    Args:
        env_path: Path to .env file (default: .env in current directory)
    """
    path = Path(env_path)
    if not path.exists():
        return

    with open(path, encoding="utf-8") as f:
        for line in f:
            line = line.strip()
            if not line or line.startswith("#"):
                continue
            if "=" in line:
                key, _, value = line.partition("=")
                key = key.strip()
                value = value.strip().strip('"').strip("'")
                if key not in os.environ:
                    os.environ[key] = value


def find_config_file(start_dir: Path | None = None) -> Path | None:
    """Find configuration file in current directory or parent directories.

    Args:
        start_dir: Directory to start searching from (default: cwd)

    Returns:
        Path to config file if found, None otherwise
    """
    current = start_dir or Path.cwd()
    for _ in range(10):  # Limit search depth
        for config_name in CONFIG_FILES:
            config_path = current / config_name
            if config_path.exists():
                return config_path
        parent = current.parent
        if parent == current:
            break
        current = parent
    return None


VALID_ROOT_KEYS = {"llm_model", "settings"}

VALID_SETTINGS_KEYS = {
    "llm_model",
    "temperature",
    "prompt_template",
    "attach_pages",
    "max_pages_per_chunk",
    "max_attempts",
    "base_delay_seconds",
    "pacing_seconds",
    "output_file",
}


def validate_config(config: dict[str, Any], config_path: Path | None = None) -> list[str]:
    """Validate config and return warnings about unknown keys.

    Args:
        config: The loaded configuration dictionary
        config_path: Path to config file (for error messages)

    Returns:
        List of warning messages (empty if no issues)
    """
    warnings = []

    unknown_root = set(config.keys()) - VALID_ROOT_KEYS
    if unknown_root:
        path_str = str(config_path) if config_path else "config"
        warnings.append(f"Unknown config keys in {path_str}: {', '.join(sorted(unknown_root))}")

    settings = config.get("settings", {})
    if isinstance(settings, dict):
        unknown_settings = set(settings.keys()) - VALID_SETTINGS_KEYS
        if unknown_settings:
            warnings.append(f"Unknown settings keys: {', '.join(sorted(unknown_settings))}")

    return warnings


def load_config(config_path: Path | str | None = None) -> dict[str, Any]:
    """Load configuration from YAML file.

    Args:
        config_path: Explicit path to config file, or None to search

    Returns:
        Configuration dictionary (empty if no config found)
    """
    config_path = Path(config_path) if config_path is not None else find_config_file()

    if config_path is None:
        return {}

    with open(config_path, encoding="utf-8") as f:
        config = yaml.safe_load(f) or {}

    return config


def _safe_int(value: str | None) -> int | None:
    """Parse int from string, returning None on invalid value."""
    if value is None:
        return None
    try:
        return int(value)
    except ValueError:
        return None


def _safe_float(value: str | None) -> float | None:
    """Parse float from string, returning None on invalid value."""
    if value is None:
        return None
    try:
        return float(value)
    except ValueError:
        return None


def get_settings_from_env() -> dict[str, Any]:
    """Read behavioral settings from PDFQA_* environment variables.

    Returns values that were explicitly set (not defaults), so that env vars
    override YAML settings only where present.
    """
    result: dict[str, Any] = {}

    if os.environ.get("PDFQA_LLM_MODEL"):
        result["llm_model"] = os.environ["PDFQA_LLM_MODEL"]
    if (val := _safe_float(os.environ.get("PDFQA_TEMPERATURE"))) is not None:
        result["temperature"] = val
    if "PDFQA_PROMPT_TEMPLATE" in os.environ:
        result["prompt_template"] = os.environ["PDFQA_PROMPT_TEMPLATE"] or None
    if "PDFQA_ATTACH_PAGES" in os.environ:
        result["attach_pages"] = os.environ["PDFQA_ATTACH_PAGES"].lower() in ("true", "1", "yes")
    if (val := _safe_int(os.environ.get("PDFQA_MAX_PAGES_PER_CHUNK"))) is not None:
        result["max_pages_per_chunk"] = val
    if (val := _safe_int(os.environ.get("PDFQA_MAX_ATTEMPTS"))) is not None:
        result["max_attempts"] = val
    if (val := _safe_float(os.environ.get("PDFQA_BASE_DELAY_SECONDS"))) is not None:
        result["base_delay_seconds"] = val
    if (val := _safe_float(os.environ.get("PDFQA_PACING_SECONDS"))) is not None:
        result["pacing_seconds"] = val
    if os.environ.get("PDFQA_OUTPUT_FILE"):
        result["output_file"] = os.environ["PDFQA_OUTPUT_FILE"]

    return result


def get_settings_from_yaml(config: dict[str, Any]) -> dict[str, Any]:
    """Extract settings from YAML config.

    ``llm_model`` may sit at the root or in the ``settings:`` section; the
    section wins when both are present.
    """
    result: dict[str, Any] = {}
    if "llm_model" in config:
        result["llm_model"] = config["llm_model"]

    yaml_settings = config.get("settings", {}) or {}
    for key in VALID_SETTINGS_KEYS:
        if key in yaml_settings:
            result[key] = yaml_settings[key]

    return result


def build_settings(
    config: dict[str, Any] | None = None,
    env_settings: dict[str, Any] | None = None,
) -> Settings:
    """Build Settings object from YAML config and env vars.

    Precedence (highest to lowest):
    1. Environment variables (for CI/CD override)
    2. YAML settings
    3. Settings class defaults

    Raises:
        pydantic.ValidationError: If a value is out of range
    """
    from pdfqa.settings import Settings

    config = config or {}
    yaml_settings = get_settings_from_yaml(config)
    env_settings = env_settings if env_settings is not None else get_settings_from_env()

    return Settings(**{**yaml_settings, **env_settings})


def setting_sources(
    config: dict[str, Any] | None = None,
    env_settings: dict[str, Any] | None = None,
) -> dict[str, str]:
    """Report where each setting's effective value comes from."""
    from pdfqa.settings import Settings

    yaml_settings = get_settings_from_yaml(config or {})
    env_settings = env_settings if env_settings is not None else get_settings_from_env()

    sources = {}
    for name in Settings.model_fields:
        if name in env_settings:
            sources[name] = "env var"
        elif name in yaml_settings:
            sources[name] = "yaml"
        else:
            sources[name] = "default"
    return sources


@dataclass
class PdfQAConfig:
    """Resolved configuration for a pdfqa run."""

    settings: Settings
    llm_api_key: str | None = None
    config_path: Path | None = None


def get_pdfqa_config(config_path: str | Path | None = None) -> PdfQAConfig | ConfigError:
    """Resolve settings and API key without creating any client.

    Args:
        config_path: Override config file path

    Returns:
        PdfQAConfig, or ConfigError if the configuration is invalid
    """
    resolved_path = Path(config_path) if config_path is not None else find_config_file()
    if resolved_path is not None and not resolved_path.exists():
        return ConfigError(
            message=f"Config file not found: {resolved_path}",
            suggestion="Check the --config path",
        )

    try:
        config = load_config(resolved_path) if resolved_path is not None else {}
    except yaml.YAMLError as e:
        return ConfigError(message=f"Invalid YAML in {resolved_path}: {e}")

    if not isinstance(config, dict):
        return ConfigError(message=f"Config file {resolved_path} must contain a mapping")

    try:
        settings = build_settings(config)
    except ValidationError as e:
        return ConfigError(
            message=f"Invalid settings: {e.errors()[0]['msg']}",
            suggestion="Check pdfqa.yaml and PDFQA_* environment variables",
        )

    return PdfQAConfig(
        settings=settings,
        llm_api_key=os.environ.get(API_KEY_ENV),
        config_path=resolved_path,
    )


def create_generator(config: PdfQAConfig) -> ClientQAGenerator:
    """Create the LiteLLM-backed Q&A generator for a configuration."""
    from pdfqa.generator import ClientQAGenerator
    from pdfqa.providers.litellm import LiteLLMClient

    settings = config.settings
    return ClientQAGenerator(
        llm_client=LiteLLMClient(model=settings.llm_model, api_key=config.llm_api_key),
        prompt_template=settings.prompt_template,
        temperature=settings.temperature,
        retry_policy=settings.build_retry_policy(),
    )
