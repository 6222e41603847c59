"""Tests for the global configuration module."""

import pytest
import yaml

from prfect import global_config
from prfect.global_config import GlobalConfigError


@pytest.fixture
def config_dir(temp_dir, mocker):
    """Point the global config directory at a temporary location."""
    directory = temp_dir / ".prfect"
    mocker.patch("prfect.global_config._CONFIG_DIR", directory)
    return directory


class TestPaths:
    """Tests for config path helpers."""

    def test_config_file_path(self, config_dir):
        """Test config.yaml lives in the config directory."""
        assert global_config.get_config_file_path() == config_dir / "config.yaml"

    def test_ensure_creates_directory(self, config_dir):
        """Test the directory is created on demand."""
        assert not config_dir.exists()
        global_config.ensure_global_config_dir()
        assert config_dir.is_dir()


class TestLoadSave:
    """Tests for load_global_config and save_global_config."""

    def test_missing_file(self, config_dir):
        """Test a missing file yields an empty mapping."""
        assert global_config.load_global_config() == {}
        assert global_config.is_configured() is False

    def test_save_then_load(self, config_dir):
        """Test saved values are read back."""
        global_config.save_global_config({"model": "llama3:8b", "no_emojis": True})

        assert global_config.is_configured() is True
        assert global_config.load_global_config() == {"model": "llama3:8b", "no_emojis": True}

    def test_empty_file(self, config_dir):
        """Test an empty file is treated as no settings."""
        config_dir.mkdir()
        (config_dir / "config.yaml").write_text("")

        assert global_config.load_global_config() == {}

    def test_invalid_yaml(self, config_dir):
        """Test unparsable YAML raises GlobalConfigError."""
        config_dir.mkdir()
        (config_dir / "config.yaml").write_text("model: [unclosed")

        with pytest.raises(GlobalConfigError, match="Failed to load config"):
            global_config.load_global_config()

    def test_non_mapping(self, config_dir):
        """Test a YAML list is rejected."""
        config_dir.mkdir()
        (config_dir / "config.yaml").write_text("- a\n- b\n")

        with pytest.raises(GlobalConfigError, match="expected a mapping"):
            global_config.load_global_config()


class TestAccessors:
    """Tests for the per-setting getters and setters."""

    def test_unset_values(self, config_dir):
        """Test defaults when nothing is stored."""
        assert global_config.get_model() is None
        assert global_config.get_ollama_host() is None
        assert global_config.get_no_emojis() is False
        assert global_config.get_template_path() is None

    def test_set_model_preserves_other_keys(self, config_dir):
        """Test setters only touch their own key."""
        global_config.set_ollama_host("http://gpu-box:11434")
        global_config.set_model("llama3:8b")

        assert global_config.get_model() == "llama3:8b"
        assert global_config.get_ollama_host() == "http://gpu-box:11434"

    def test_set_no_emojis(self, config_dir):
        """Test the emoji preference round trip."""
        global_config.set_no_emojis(True)
        assert global_config.get_no_emojis() is True

    def test_template_path_set_and_clear(self, config_dir):
        """Test the template path can be cleared."""
        global_config.set_template_path(".github/pr.md")
        assert global_config.get_template_path() == ".github/pr.md"

        global_config.set_template_path(None)
        assert global_config.get_template_path() is None
        stored = yaml.safe_load((config_dir / "config.yaml").read_text())
        assert "template" not in stored

    def test_temperature(self, config_dir):
        """Test the temperature getter converts numbers."""
        global_config.save_global_config({"temperature": 0.7})
        assert global_config.get_temperature() == 0.7

    def test_temperature_not_a_number(self, config_dir):
        """Test a non-numeric temperature raises GlobalConfigError."""
        global_config.save_global_config({"temperature": "hot"})

        with pytest.raises(GlobalConfigError, match="Invalid temperature"):
            global_config.get_temperature()

    def test_model_must_be_string(self, config_dir):
        """Test a non-string model raises GlobalConfigError."""
        global_config.save_global_config({"model": 42})

        with pytest.raises(GlobalConfigError, match="Invalid model"):
            global_config.get_model()
