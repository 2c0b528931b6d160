# src/prepdeck/commands/config_cmd.py
"""Config command - display current configuration."""

from __future__ import annotations

import os
from pathlib import Path

import yaml

from prepdeck.commands.base import ConfigResult, SettingInfo
from prepdeck.config import (
    DEFAULT_DATA_DIR,
    build_settings,
    find_config_file,
    get_settings_from_env,
    get_settings_from_yaml,
    is_local_model,
    load_config,
    validate_config,
)
from prepdeck.seed import DEFAULT_SEED_PATH


def _get_setting_source(
    key: str,
    yaml_settings: dict,
    env_settings: dict,
) -> str:
    """Determine the source of a setting value."""
    if key in env_settings:
        return "env var"
    if key in yaml_settings:
        return "yaml"
    return "default"


def _describe_api_key(llm_model: str | None) -> str:
    """Where the API key for llm_model will come from."""
    if not llm_model:
        return "(no model)"
    if is_local_model(llm_model):
        return "not needed (local model)"
    if os.environ.get("PREPDECK_LLM_API_KEY"):
        return "PREPDECK_LLM_API_KEY"
    return "provider env var (e.g. GEMINI_API_KEY)"


def config(
    config_path: str | Path | None = None,
) -> ConfigResult:
    """Get current configuration settings.

    Args:
        config_path: Override config file path

    Returns:
        ConfigResult with all settings and their sources
    """
    try:
        cli_config = load_config(config_path)
        if not isinstance(cli_config, dict):
            return ConfigResult(success=False, error="Config file must contain a mapping")
        env_settings = get_settings_from_env()
        yaml_settings = get_settings_from_yaml(cli_config)
        settings = build_settings(cli_config, env_settings)
    except (OSError, ValueError, yaml.YAMLError) as e:
        return ConfigResult(success=False, error=f"Could not load configuration: {e}")

    found_config_path = Path(config_path) if config_path is not None else find_config_file()

    result = ConfigResult(success=True)
    result.config_path = str(found_config_path) if found_config_path else None
    result.warnings = validate_config(cli_config, found_config_path)
    result.llm_model = os.environ.get("PREPDECK_LLM_MODEL") or cli_config.get("llm_model")
    result.api_key = _describe_api_key(result.llm_model)
    result.data_dir = (
        os.environ.get("PREPDECK_DATA_DIR") or cli_config.get("data_dir") or DEFAULT_DATA_DIR
    )
    result.seed_path = (
        os.environ.get("PREPDECK_SEED_PATH") or cli_config.get("seed_path") or DEFAULT_SEED_PATH
    )
    result.sync_dir = os.environ.get("PREPDECK_SYNC_DIR") or cli_config.get("sync_dir")

    setting_keys = [
        ("default_categories", ", ".join(settings.default_categories)),
        ("seed_policy", settings.seed_policy),
        ("auto_categorize", str(settings.auto_categorize)),
        ("coerce_unknown_categories", str(settings.coerce_unknown_categories)),
        ("web_search", str(settings.web_search)),
        (
            "answer_temperature",
            str(settings.answer_temperature)
            if settings.answer_temperature is not None
            else "model default",
        ),
        (
            "chat_temperature",
            str(settings.chat_temperature)
            if settings.chat_temperature is not None
            else "model default",
        ),
        ("answer_prompt", "custom" if settings.answer_prompt else "built-in"),
        ("chat_prompt", "custom" if settings.chat_prompt else "built-in"),
        ("num_retries", str(settings.num_retries)),
    ]

    for key, value in setting_keys:
        result.settings.append(
            SettingInfo(
                name=key,
                value=value,
                source=_get_setting_source(key, yaml_settings, env_settings),
            )
        )

    return result
