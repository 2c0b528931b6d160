# src/prepdeck/config.py
"""Configuration loading utilities for prepdeck.

This module provides configuration loading that can be used by:
- CLI commands
- External applications using prepdeck as a library

It handles:
- Finding and loading prepdeck.yaml config files
- Loading .env files for API keys
- Building Settings objects from multiple sources
- Creating Tracker instances from configuration
"""

from __future__ import annotations

import json
import os
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING, Any

import yaml

if TYPE_CHECKING:
    from prepdeck.settings import Settings
    from prepdeck.tracker import Tracker

# Default paths
DEFAULT_DATA_DIR = "./prepdeck_data"
CONFIG_FILES = ["prepdeck.yaml", "prepdeck.yml", ".prepdeckrc"]
ENV_FILE = ".env"


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


# Valid configuration keys for validation
VALID_ROOT_KEYS = {
    "llm_model",
    "data_dir",
    "seed_path",
    "sync_dir",
    "settings",
}

VALID_SETTINGS_KEYS = {
    "default_categories",
    "seed_policy",
    "auto_categorize",
    "coerce_unknown_categories",
    "web_search",
    "answer_temperature",
    "chat_temperature",
    "answer_prompt",
    "chat_prompt",
    "num_retries",
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
    """Parse float from string, returning None on empty or invalid value."""
    if value is None or value == "":
        return None
    try:
        return float(value)
    except ValueError:
        return None


def _parse_bool(value: str) -> bool:
    return value.lower() in ("true", "1", "yes")


def _parse_categories(value: str) -> list[str]:
    """Parse a category list given as a JSON array or comma-separated text."""
    value = value.strip()
    if value.startswith("["):
        try:
            parsed = json.loads(value)
        except json.JSONDecodeError:
            parsed = None
        if isinstance(parsed, list):
            return [str(item) for item in parsed]
    return [part.strip() for part in value.split(",") if part.strip()]


def get_settings_from_env() -> dict[str, Any]:
    """Read behavioral settings from PREPDECK_* environment variables.

    Returns values that were explicitly set (not defaults), to allow proper
    precedence: YAML settings are used unless overridden by env vars.

    Returns:
        Dictionary of setting name -> value for explicitly set env vars
    """
    result: dict[str, Any] = {}

    if "PREPDECK_DEFAULT_CATEGORIES" in os.environ:
        result["default_categories"] = _parse_categories(os.environ["PREPDECK_DEFAULT_CATEGORIES"])
    if "PREPDECK_SEED_POLICY" in os.environ:
        policy = os.environ["PREPDECK_SEED_POLICY"].lower()
        if policy in ("if_empty", "always", "never"):
            result["seed_policy"] = policy
    for name in ("auto_categorize", "coerce_unknown_categories", "web_search"):
        env_name = f"PREPDECK_{name.upper()}"
        if env_name in os.environ:
            result[name] = _parse_bool(os.environ[env_name])
    for name in ("answer_temperature", "chat_temperature"):
        env_name = f"PREPDECK_{name.upper()}"
        if env_name in os.environ:
            result[name] = _safe_float(os.environ[env_name])
    if "PREPDECK_ANSWER_PROMPT" in os.environ:
        result["answer_prompt"] = os.environ["PREPDECK_ANSWER_PROMPT"] or None
    if "PREPDECK_CHAT_PROMPT" in os.environ:
        result["chat_prompt"] = os.environ["PREPDECK_CHAT_PROMPT"] or None
    if (val := _safe_int(os.environ.get("PREPDECK_NUM_RETRIES"))) is not None:
        result["num_retries"] = val

    return result


def get_settings_from_yaml(config: dict[str, Any]) -> dict[str, Any]:
    """Extract settings from the 'settings:' section of a YAML config.

    Args:
        config: The loaded YAML configuration

    Returns:
        Dictionary of setting name -> value
    """
    yaml_settings = config.get("settings", {}) or {}
    return {key: yaml_settings[key] for key in VALID_SETTINGS_KEYS if key in yaml_settings}


def build_settings(
    config: dict[str, Any] | None = None,
    env_settings: dict[str, Any] | None = None,
) -> Settings:
    """Build Settings object from YAML config and env vars.

    Precedence (highest to lowest):
    1. Environment variables (for CI/CD override)
    2. YAML settings: section
    3. Settings class defaults

    Args:
        config: YAML configuration dictionary
        env_settings: Environment variable overrides (if None, reads from env)

    Returns:
        Configured Settings instance
    """
    from prepdeck.settings import Settings

    config = config or {}
    yaml_settings = get_settings_from_yaml(config)
    env_settings = env_settings if env_settings is not None else get_settings_from_env()

    merged = {**yaml_settings, **env_settings}
    return Settings(**merged)


def is_local_model(model: str) -> bool:
    """Check if a model is a local model (doesn't need API key).

    Args:
        model: Model name (e.g., "ollama/llama3", "gemini/gemini-3-flash-preview")

    Returns:
        True if the model runs locally
    """
    model_lower = model.lower()
    return any(
        pattern in model_lower
        for pattern in [
            "ollama",
            "local",
            "llama.cpp",
            "llamacpp",
            "gguf",
            "ggml",
        ]
    )


@dataclass
class TrackerConfig:
    """Configuration for creating a Tracker instance."""

    data_dir: str
    settings: Settings
    llm_model: str | None = None
    llm_api_key: str | None = None
    seed_path: str | None = None
    sync_dir: str | None = None


def get_tracker_config(
    data_dir: str | None = None,
    config_path: str | Path | None = None,
) -> TrackerConfig | ConfigError:
    """Get configuration for creating a Tracker instance.

    This extracts configuration without creating the instance, allowing
    the caller to handle errors and missing values appropriately. The LLM
    is optional: without it the tracker still stores and filters questions.

    Args:
        data_dir: Override data directory
        config_path: Override config file path

    Returns:
        TrackerConfig with all settings, or ConfigError if invalid
    """
    try:
        config = load_config(config_path)
    except FileNotFoundError:
        return ConfigError(
            message=f"Config file not found: {config_path}",
            suggestion="Check the --config path",
        )
    except yaml.YAMLError as e:
        return ConfigError(
            message=f"Could not parse config file: {e}",
            suggestion="Fix the YAML syntax in prepdeck.yaml",
        )
    if not isinstance(config, dict):
        return ConfigError(
            message="Config file must contain a mapping",
            suggestion="See 'prepdeck config' for the expected keys",
        )

    effective_data_dir = (
        data_dir
        or os.environ.get("PREPDECK_DATA_DIR")
        or config.get("data_dir")
        or DEFAULT_DATA_DIR
    )

    try:
        settings = build_settings(config, get_settings_from_env())
    except ValueError as e:
        return ConfigError(
            message=f"Invalid settings: {e}",
            suggestion="Check the settings: section of prepdeck.yaml",
        )

    llm_model = os.environ.get("PREPDECK_LLM_MODEL") or config.get("llm_model")

    return TrackerConfig(
        data_dir=str(effective_data_dir),
        settings=settings,
        llm_model=llm_model or None,
        llm_api_key=os.environ.get("PREPDECK_LLM_API_KEY") or None,
        seed_path=os.environ.get("PREPDECK_SEED_PATH") or config.get("seed_path"),
        sync_dir=os.environ.get("PREPDECK_SYNC_DIR") or config.get("sync_dir"),
    )


def create_tracker(config: TrackerConfig) -> Tracker:
    """Create a Tracker instance from configuration.

    Args:
        config: Configuration for the Tracker instance

    Returns:
        Configured Tracker instance
    """
    from prepdeck.configuration import LiteLLMProvider, LocalStorage
    from prepdeck.tracker import Tracker

    provider = None
    if config.llm_model:
        provider = LiteLLMProvider(llm=config.llm_model, api_key=config.llm_api_key)

    return Tracker(
        storage=LocalStorage(config.data_dir),
        provider=provider,
        settings=config.settings,
        sync_dir=config.sync_dir,
        seed_path=config.seed_path,
    )


def get_tracker(
    data_dir: str | None = None,
    config_path: str | Path | None = None,
) -> Tracker | ConfigError:
    """Create a Tracker instance based on configuration.

    This is a convenience function that combines get_tracker_config and
    create_tracker. For more control, use those functions separately.

    Args:
        data_dir: Override data directory
        config_path: Override config file path

    Returns:
        Configured Tracker instance, or ConfigError if configuration is invalid
    """
    config = get_tracker_config(data_dir, config_path)
    if isinstance(config, ConfigError):
        return config
    return create_tracker(config)
