# src/pdfqa/commands/config_cmd.py
"""Config command - show the effective settings and where they come from."""

from __future__ import annotations

from pathlib import Path

from pdfqa.commands.base import ConfigResult, SettingInfo
from pdfqa.config import (
    API_KEY_ENV,
    ConfigError,
    get_pdfqa_config,
    get_settings_from_env,
    load_config,
    setting_sources,
    validate_config,
)
from pdfqa.providers.litellm import has_provider_credentials


def config(config_path: str | Path | None = None) -> ConfigResult:
    """Resolve configuration and describe every setting.

    Args:
        config_path: Override config file path

    Returns:
        ConfigResult listing settings with their sources
    """
    resolved = get_pdfqa_config(config_path)
    if isinstance(resolved, ConfigError):
        return ConfigResult(success=False, error=resolved.message)

    raw = load_config(resolved.config_path) if resolved.config_path else {}
    sources = setting_sources(raw, get_settings_from_env())

    if resolved.llm_api_key is not None:
        api_key_source = API_KEY_ENV
    elif has_provider_credentials(resolved.settings.llm_model):
        api_key_source = "provider env var"
    else:
        api_key_source = None

    settings = [
        SettingInfo(name=name, value=str(value), source=sources[name])
        for name, value in resolved.settings.model_dump().items()
    ]

    return ConfigResult(
        success=True,
        settings=settings,
        config_path=str(resolved.config_path) if resolved.config_path else None,
        api_key_set=api_key_source is not None,
        api_key_source=api_key_source,
        warnings=validate_config(raw, resolved.config_path),
    )
