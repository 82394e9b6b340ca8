"""
Unit tests for the global configuration helpers.
"""

import json

import pytest
from pydantic import ValidationError
from dietbuddy.core import config as config_module
from dietbuddy.core.config import (
    CONFIG_PATH_ENV,
    DietBuddyConfig,
    get_config,
    load_config_from_env,
    load_config_from_file,
    save_config_to_file,
    update_config,
)


class TestConfig:
    """Test update, file round trip and environment loading."""

    @pytest.fixture(autouse=True)
    def fresh_config(self, monkeypatch):
        """Give each test its own global configuration."""
        monkeypatch.setattr(config_module, "_config", DietBuddyConfig())

    def test_update_dotted_key(self):
        updated = update_config(**{"chat.max_tries": 3, "log_level": "DEBUG"})

        assert updated.chat.max_tries == 3
        assert updated.log_level == "DEBUG"
        assert get_config() is updated

    @pytest.mark.parametrize("key", ["chat.retries", "cache.size", "verbose"])
    def test_unknown_key_rejected(self, key):
        before = get_config()
        with pytest.raises(KeyError):
            update_config(**{key: 1})
        assert get_config() is before

    def test_invalid_value_leaves_config_unchanged(self):
        before = get_config()
        with pytest.raises(ValidationError):
            update_config(**{"chat.max_tries": 0})

        assert get_config() is before
        assert get_config().chat.max_tries == before.chat.max_tries

    def test_save_omits_api_key(self, tmp_path, monkeypatch):
        monkeypatch.setattr(
            config_module, "_config",
            DietBuddyConfig.model_validate({"chat": {"api_key": "sk-secret"}}),
        )
        path = tmp_path / "dietbuddy.json"
        save_config_to_file(path)

        saved = json.loads(path.read_text(encoding="utf-8"))
        assert "api_key" not in saved["chat"]
        assert "sk-secret" not in path.read_text(encoding="utf-8")

    def test_save_then_load(self, tmp_path):
        update_config(**{"chat.model": "local-model", "storage.data_dir": str(tmp_path)})
        path = tmp_path / "dietbuddy.json"
        save_config_to_file(path)

        update_config(**{"chat.model": "other"})
        loaded = load_config_from_file(path)

        assert loaded.chat.model == "local-model"
        assert loaded.storage.data_dir == str(tmp_path)
        assert get_config() is loaded

    def test_load_rejects_invalid_file(self, tmp_path):
        path = tmp_path / "bad.json"
        path.write_text(json.dumps({"chat": {"temperature": 5}}), encoding="utf-8")

        with pytest.raises(ValidationError):
            load_config_from_file(path)

    def test_env_unset_loads_nothing(self, monkeypatch):
        monkeypatch.delenv(CONFIG_PATH_ENV, raising=False)
        before = get_config()

        assert load_config_from_env() is None
        assert get_config() is before

    def test_env_names_config_file(self, tmp_path, monkeypatch):
        path = tmp_path / "dietbuddy.json"
        path.write_text(json.dumps({"log_level": "WARNING"}), encoding="utf-8")
        monkeypatch.setenv(CONFIG_PATH_ENV, str(path))

        loaded = load_config_from_env()

        assert loaded.log_level == "WARNING"
        assert get_config() is loaded
