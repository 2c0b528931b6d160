# tests/test_prepdeck_config.py
"""Tests for prepdeck.config (YAML, .env and env var loading)."""

import os
from pathlib import Path

import pytest

from prepdeck.config import (
    DEFAULT_DATA_DIR,
    ConfigError,
    TrackerConfig,
    build_settings,
    create_tracker,
    find_config_file,
    get_settings_from_env,
    get_settings_from_yaml,
    get_tracker,
    get_tracker_config,
    is_local_model,
    load_config,
    load_env_file,
    validate_config,
)
from prepdeck.settings import Settings
from prepdeck.tracker import Tracker


def _write(path, content):
    Path(path).write_text(content, encoding="utf-8")
    return Path(path)


class TestLoadEnvFile:
    def test_missing_file_is_ignored(self, isolated_env):
        load_env_file(os.path.join(isolated_env, ".env"))

    def test_loads_values(self, isolated_env, monkeypatch):
        monkeypatch.delenv("PREPDECK_TEST_KEY", raising=False)
        monkeypatch.delenv("PREPDECK_TEST_QUOTED", raising=False)
        env_path = _write(
            os.path.join(isolated_env, ".env"),
            "# comment\nPREPDECK_TEST_KEY=plain\nPREPDECK_TEST_QUOTED=\"quoted value\"\n\n",
        )
        try:
            load_env_file(env_path)
            assert os.environ["PREPDECK_TEST_KEY"] == "plain"
            assert os.environ["PREPDECK_TEST_QUOTED"] == "quoted value"
        finally:
            os.environ.pop("PREPDECK_TEST_KEY", None)
            os.environ.pop("PREPDECK_TEST_QUOTED", None)

    def test_does_not_override_existing(self, isolated_env, monkeypatch):
        monkeypatch.setenv("PREPDECK_TEST_KEY", "from-env")
        env_path = _write(os.path.join(isolated_env, ".env"), "PREPDECK_TEST_KEY=from-file\n")
        load_env_file(env_path)
        assert os.environ["PREPDECK_TEST_KEY"] == "from-env"


class TestFindConfigFile:
    def test_not_found(self, isolated_env):
        assert find_config_file(Path(isolated_env)) is None

    def test_found_in_parent(self, isolated_env):
        config = _write(os.path.join(isolated_env, "prepdeck.yaml"), "llm_model: x\n")
        nested = Path(isolated_env) / "a" / "b"
        nested.mkdir(parents=True)
        assert find_config_file(nested) == config

    def test_name_precedence(self, isolated_env):
        _write(os.path.join(isolated_env, ".prepdeckrc"), "{}\n")
        yaml_path = _write(os.path.join(isolated_env, "prepdeck.yaml"), "{}\n")
        assert find_config_file(Path(isolated_env)) == yaml_path


class TestLoadConfig:
    def test_no_config(self, isolated_env):
        assert load_config() == {}

    def test_discovers_from_cwd(self, isolated_env):
        _write(os.path.join(isolated_env, "prepdeck.yml"), "data_dir: ./elsewhere\n")
        assert load_config() == {"data_dir": "./elsewhere"}

    def test_empty_file(self, isolated_env):
        path = _write(os.path.join(isolated_env, "prepdeck.yaml"), "")
        assert load_config(path) == {}


class TestValidateConfig:
    def test_valid(self):
        config = {"llm_model": "m", "settings": {"seed_policy": "never"}}
        assert validate_config(config) == []

    def test_unknown_root_key(self):
        warnings = validate_config({"llm": "m"}, Path("prepdeck.yaml"))
        assert warnings == ["Unknown config keys in prepdeck.yaml: llm"]

    def test_unknown_settings_key(self):
        warnings = validate_config({"settings": {"temperature": 1}})
        assert warnings == ["Unknown settings keys: temperature"]


class TestSettingsFromEnv:
    def test_nothing_set(self, isolated_env):
        assert get_settings_from_env() == {}

    def test_reads_values(self, isolated_env, monkeypatch):
        monkeypatch.setenv("PREPDECK_DEFAULT_CATEGORIES", "Algorithm, NLP")
        monkeypatch.setenv("PREPDECK_SEED_POLICY", "NEVER")
        monkeypatch.setenv("PREPDECK_AUTO_CATEGORIZE", "false")
        monkeypatch.setenv("PREPDECK_WEB_SEARCH", "yes")
        monkeypatch.setenv("PREPDECK_ANSWER_TEMPERATURE", "0.3")
        monkeypatch.setenv("PREPDECK_NUM_RETRIES", "7")

        result = get_settings_from_env()

        assert result == {
            "default_categories": ["Algorithm", "NLP"],
            "seed_policy": "never",
            "auto_categorize": False,
            "web_search": True,
            "answer_temperature": 0.3,
            "num_retries": 7,
        }

    def test_categories_json_list(self, isolated_env, monkeypatch):
        monkeypatch.setenv("PREPDECK_DEFAULT_CATEGORIES", '["A, B", "C"]')
        assert get_settings_from_env()["default_categories"] == ["A, B", "C"]

    def test_invalid_values_ignored(self, isolated_env, monkeypatch):
        monkeypatch.setenv("PREPDECK_SEED_POLICY", "sometimes")
        monkeypatch.setenv("PREPDECK_NUM_RETRIES", "many")
        assert get_settings_from_env() == {}

    def test_empty_temperature_is_none(self, isolated_env, monkeypatch):
        monkeypatch.setenv("PREPDECK_CHAT_TEMPERATURE", "")
        assert get_settings_from_env() == {"chat_temperature": None}


class TestBuildSettings:
    def test_defaults(self):
        assert build_settings({}, {}) == Settings()

    def test_yaml_settings(self):
        config = {"settings": {"seed_policy": "always", "unknown": 1}}
        assert get_settings_from_yaml(config) == {"seed_policy": "always"}
        assert build_settings(config, {}).seed_policy == "always"

    def test_env_overrides_yaml(self):
        config = {"settings": {"seed_policy": "always", "num_retries": 1}}
        settings = build_settings(config, {"seed_policy": "never"})
        assert settings.seed_policy == "never"
        assert settings.num_retries == 1

    def test_null_settings_section(self):
        assert build_settings({"settings": None}, {}) == Settings()


class TestIsLocalModel:
    def test_local(self):
        assert is_local_model("ollama/llama3")
        assert is_local_model("OLLAMA/mistral")

    def test_remote(self):
        assert not is_local_model("gemini/gemini-3-flash-preview")
        assert not is_local_model("gpt-4o-mini")


class TestGetTrackerConfig:
    def test_defaults(self, isolated_env):
        config = get_tracker_config()
        assert isinstance(config, TrackerConfig)
        assert config.data_dir == DEFAULT_DATA_DIR
        assert config.llm_model is None
        assert config.sync_dir is None
        assert config.settings == Settings()

    def test_data_dir_precedence(self, isolated_env, monkeypatch):
        _write(os.path.join(isolated_env, "prepdeck.yaml"), "data_dir: ./from_yaml\n")
        assert get_tracker_config().data_dir == "./from_yaml"

        monkeypatch.setenv("PREPDECK_DATA_DIR", "./from_env")
        assert get_tracker_config().data_dir == "./from_env"
        assert get_tracker_config(data_dir="./from_arg").data_dir == "./from_arg"

    def test_llm_model_from_yaml_and_env(self, isolated_env, monkeypatch):
        _write(os.path.join(isolated_env, "prepdeck.yaml"), "llm_model: yaml/model\n")
        assert get_tracker_config().llm_model == "yaml/model"

        monkeypatch.setenv("PREPDECK_LLM_MODEL", "env/model")
        monkeypatch.setenv("PREPDECK_LLM_API_KEY", "secret")
        config = get_tracker_config()
        assert config.llm_model == "env/model"
        assert config.llm_api_key == "secret"

    def test_paths_from_yaml(self, isolated_env):
        _write(
            os.path.join(isolated_env, "prepdeck.yaml"),
            "seed_path: seed.json\nsync_dir: ./mirror\nsettings:\n  seed_policy: never\n",
        )
        config = get_tracker_config()
        assert config.seed_path == "seed.json"
        assert config.sync_dir == "./mirror"
        assert config.settings.seed_policy == "never"

    def test_explicit_config_missing(self, isolated_env):
        error = get_tracker_config(config_path=os.path.join(isolated_env, "missing.yaml"))
        assert isinstance(error, ConfigError)
        assert "Config file not found" in error.message

    def test_invalid_yaml(self, isolated_env):
        path = _write(os.path.join(isolated_env, "bad.yaml"), "settings: [unclosed\n")
        error = get_tracker_config(config_path=path)
        assert isinstance(error, ConfigError)
        assert "Could not parse" in error.message

    def test_non_mapping(self, isolated_env):
        path = _write(os.path.join(isolated_env, "list.yaml"), "- a\n- b\n")
        error = get_tracker_config(config_path=path)
        assert isinstance(error, ConfigError)
        assert "mapping" in error.message

    def test_invalid_settings(self, isolated_env):
        path = _write(
            os.path.join(isolated_env, "prepdeck.yaml"), "settings:\n  seed_policy: sometimes\n"
        )
        error = get_tracker_config(config_path=path)
        assert isinstance(error, ConfigError)
        assert "Invalid settings" in error.message


class TestCreateTracker:
    def test_without_model(self, isolated_env):
        config = TrackerConfig(
            data_dir=os.path.join(isolated_env, "data"), settings=Settings(seed_policy="never")
        )
        tracker = create_tracker(config)
        assert isinstance(tracker, Tracker)
        assert tracker.answer_generator is None

    def test_with_model(self, isolated_env):
        config = TrackerConfig(
            data_dir=os.path.join(isolated_env, "data"),
            settings=Settings(),
            llm_model="gemini/gemini-3-flash-preview",
        )
        assert create_tracker(config).answer_generator is not None

    def test_sync_dir_attached(self, isolated_env):
        mirror = os.path.join(isolated_env, "mirror")
        os.makedirs(mirror)
        config = TrackerConfig(
            data_dir=os.path.join(isolated_env, "data"), settings=Settings(), sync_dir=mirror
        )
        assert create_tracker(config).sync.is_attached

    def test_get_tracker_error_passthrough(self, isolated_env):
        result = get_tracker(config_path=os.path.join(isolated_env, "missing.yaml"))
        assert isinstance(result, ConfigError)

    def test_get_tracker(self, isolated_env):
        result = get_tracker(data_dir=os.path.join(isolated_env, "data"))
        assert isinstance(result, Tracker)
