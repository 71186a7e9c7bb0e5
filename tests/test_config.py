"""Tests for configuration loading."""

import json

import pytest

from scripture_ref import config as config_module
from scripture_ref.config import Config


@pytest.fixture
def config_file(tmp_path, monkeypatch):
    path = tmp_path / "scripture-ref" / "config.json"
    monkeypatch.setattr(config_module, "CONFIG_FILE", path)
    return path


class TestConfig:
    """Test Config load/save."""

    def test_defaults_without_file(self, config_file):
        """A missing file gives defaults."""
        assert Config.load() == Config()

    def test_save_and_load(self, config_file):
        """Saved values are read back."""
        Config(default_reference="John 3:16", log_level="debug", json_indent=4).save()
        assert config_file.exists()

        loaded = Config.load()
        assert loaded.default_reference == "John 3:16"
        assert loaded.log_level == "DEBUG"
        assert loaded.json_indent == 4

    def test_partial_file(self, config_file):
        """Missing keys fall back to defaults."""
        config_file.parent.mkdir(parents=True)
        config_file.write_text(json.dumps({"json_indent": 0}))
        loaded = Config.load()
        assert loaded.json_indent == 0
        assert loaded.default_reference == "Gen 1:1"

    @pytest.mark.parametrize("content", ["{not json", "[1, 2]", '{"json_indent": "wide"}'])
    def test_bad_file(self, config_file, content):
        """Unreadable files give defaults."""
        config_file.parent.mkdir(parents=True)
        config_file.write_text(content)
        assert Config.load() == Config()
