"""Tests for the config module."""
import json

import pytest

from shieldsvg.config import (
    get_defaults,
    load_config,
    save_config,
    set_default,
    unset_default,
)


class TestLoadConfig:
    def test_missing_file_returns_empty(self, tmp_path):
        assert load_config(tmp_path / "nonexistent.json") == {}

    def test_invalid_json_returns_empty(self, tmp_path):
        path = tmp_path / "bad.json"
        path.write_text("not json", encoding="utf-8")
        assert load_config(path) == {}

    def test_non_object_returns_empty(self, tmp_path):
        path = tmp_path / "list.json"
        path.write_text("[1, 2]", encoding="utf-8")
        assert load_config(path) == {}

    def test_loads_valid_json(self, tmp_path):
        path = tmp_path / "config.json"
        path.write_text('{"key": "value"}', encoding="utf-8")
        assert load_config(path) == {"key": "value"}


class TestSaveConfig:
    def test_creates_file(self, tmp_path):
        path = tmp_path / "config.json"
        save_config({"hello": "world"}, path)
        assert json.loads(path.read_text()) == {"hello": "world"}

    def test_creates_parent_dirs(self, tmp_path):
        path = tmp_path / "sub" / "dir" / "config.json"
        save_config({"nested": True}, path)
        assert path.exists()


class TestDefaults:
    def test_not_set_returns_empty(self, tmp_path):
        assert get_defaults(tmp_path / "config.json") == {}

    def test_set_and_get(self, tmp_path):
        path = tmp_path / "config.json"
        set_default("message_color", "green", path)
        set_default("label-color", "#333", path)
        assert get_defaults(path) == {"message_color": "green", "label_color": "#333"}

    def test_style_is_normalized(self, tmp_path):
        path = tmp_path / "config.json"
        set_default("style", "FOR_THE_BADGE", path)
        assert get_defaults(path) == {"style": "for-the-badge"}

    def test_invalid_style_rejected(self, tmp_path):
        path = tmp_path / "config.json"
        with pytest.raises(ValueError):
            set_default("style", "rounded", path)
        assert not path.exists()

    def test_unknown_key_rejected(self, tmp_path):
        with pytest.raises(ValueError, match="Unknown config key"):
            set_default("label", "x", tmp_path / "config.json")

    def test_preserves_other_config_keys(self, tmp_path):
        path = tmp_path / "config.json"
        save_config({"other": 1}, path)
        set_default("logo_color", "white", path)
        assert load_config(path)["other"] == 1

    def test_ignores_junk_entries(self, tmp_path):
        path = tmp_path / "config.json"
        save_config({"defaults": {"style": "flat", "bogus": "x", "logo_color": 3}}, path)
        assert get_defaults(path) == {"style": "flat"}

    def test_unset(self, tmp_path):
        path = tmp_path / "config.json"
        set_default("style", "social", path)
        assert unset_default("style", path) is True
        assert get_defaults(path) == {}
        assert unset_default("style", path) is False
