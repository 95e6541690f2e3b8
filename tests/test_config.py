"""Unit tests for configuration management."""

import os
from unittest.mock import patch

import pytest

from fastaf.config import FastafConfig

_ENV_KEYS = (
    "AI_MODEL", "AI_TEMPERATURE", "AI_MAX_TOKENS", "AI_BASE_URL",
    "FASTAF_MAX_KEY_ATTEMPTS", "LOG_LEVEL", "LOG_FORMAT", "LOG_FILE",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch, tmp_path):
    """Run every test without fastaf variables and away from any .env file.

    load_dotenv writes straight into os.environ, so the whole mapping is
    restored afterwards.
    """
    monkeypatch.chdir(tmp_path)
    with patch.dict(os.environ):
        for key in _ENV_KEYS:
            os.environ.pop(key, None)
        yield


class TestFastafConfigDefaults:
    """Tests for FastafConfig default values."""

    def test_default_values(self):
        """Test that default configuration values are set correctly."""
        config = FastafConfig()

        assert config.ai_model == "gpt-4o-mini"
        assert config.ai_temperature == 0.7
        assert config.ai_max_tokens == 100
        assert config.ai_base_url is None
        assert config.max_key_attempts == 3
        assert config.log_level == "ERROR"
        assert config.log_format == "text"
        assert config.log_file is None

    def test_has_no_api_key_setting(self):
        """The API key is always prompted for, never configured."""
        config = FastafConfig()

        assert not any("key" in name and name != "max_key_attempts"
                       for name in vars(config))


class TestFastafConfigFromEnv:
    """Tests for loading configuration from environment variables."""

    def test_from_env_with_defaults(self):
        """Test loading config from environment with no variables set."""
        config = FastafConfig.from_env()

        assert config == FastafConfig()

    def test_from_env_with_custom_values(self, monkeypatch):
        """Test loading config from environment with custom values."""
        monkeypatch.setenv("AI_MODEL", "gpt-4o")
        monkeypatch.setenv("AI_TEMPERATURE", "0.2")
        monkeypatch.setenv("AI_MAX_TOKENS", "250")
        monkeypatch.setenv("AI_BASE_URL", "http://localhost:11434/v1")
        monkeypatch.setenv("FASTAF_MAX_KEY_ATTEMPTS", "5")
        monkeypatch.setenv("LOG_LEVEL", "debug")
        monkeypatch.setenv("LOG_FORMAT", "JSON")
        monkeypatch.setenv("LOG_FILE", "/tmp/fastaf.log")

        config = FastafConfig.from_env()

        assert config.ai_model == "gpt-4o"
        assert config.ai_temperature == 0.2
        assert config.ai_max_tokens == 250
        assert config.ai_base_url == "http://localhost:11434/v1"
        assert config.max_key_attempts == 5
        assert config.log_level == "DEBUG"
        assert config.log_format == "json"
        assert config.log_file == "/tmp/fastaf.log"

    def test_from_env_empty_base_url_is_none(self, monkeypatch):
        """Test that an empty AI_BASE_URL is treated as unset."""
        monkeypatch.setenv("AI_BASE_URL", "")

        config = FastafConfig.from_env()

        assert config.ai_base_url is None

    def test_from_env_loads_dotenv_file(self, tmp_path):
        """Test that values from an explicit .env file are picked up."""
        env_file = tmp_path / "custom.env"
        env_file.write_text("AI_MODEL=gpt-4.1-mini\nLOG_LEVEL=INFO\n")

        config = FastafConfig.from_env(str(env_file))

        assert config.ai_model == "gpt-4.1-mini"
        assert config.log_level == "INFO"

    def test_from_env_finds_dotenv_in_working_directory(self, tmp_path):
        """Test that a .env in the working directory is loaded automatically."""
        (tmp_path / ".env").write_text("AI_MAX_TOKENS=64\n")

        config = FastafConfig.from_env()

        assert config.ai_max_tokens == 64

    def test_environment_wins_over_dotenv(self, tmp_path, monkeypatch):
        """Test that variables already in the environment are not overridden."""
        (tmp_path / ".env").write_text("AI_MODEL=from-dotenv\n")
        monkeypatch.setenv("AI_MODEL", "from-env")

        config = FastafConfig.from_env()

        assert config.ai_model == "from-env"

    def test_from_env_invalid_number_raises(self, monkeypatch):
        """Test that unparsable numbers raise ValueError."""
        monkeypatch.setenv("AI_MAX_TOKENS", "lots")

        with pytest.raises(ValueError):
            FastafConfig.from_env()

    def test_from_env_validates(self, monkeypatch):
        """Test that from_env runs validation."""
        monkeypatch.setenv("LOG_LEVEL", "LOUD")

        with pytest.raises(ValueError, match="Invalid log_level"):
            FastafConfig.from_env()


class TestFastafConfigValidation:
    """Tests for configuration validation."""

    def test_validate_valid_config(self):
        """Test that validation passes for valid configuration."""
        FastafConfig().validate()

    def test_validate_empty_model(self):
        config = FastafConfig(ai_model="")

        with pytest.raises(ValueError, match="AI model must be specified"):
            config.validate()

    @pytest.mark.parametrize("temperature", [-0.1, 2.5])
    def test_validate_temperature_out_of_range(self, temperature):
        config = FastafConfig(ai_temperature=temperature)

        with pytest.raises(ValueError, match="Invalid ai_temperature"):
            config.validate()

    def test_validate_invalid_max_tokens(self):
        config = FastafConfig(ai_max_tokens=0)

        with pytest.raises(ValueError, match="Invalid ai_max_tokens"):
            config.validate()

    def test_validate_invalid_max_key_attempts(self):
        config = FastafConfig(max_key_attempts=0)

        with pytest.raises(ValueError, match="Invalid max_key_attempts"):
            config.validate()

    def test_validate_invalid_log_level(self):
        config = FastafConfig(log_level="INVALID")

        with pytest.raises(ValueError, match="Invalid log_level"):
            config.validate()

    def test_validate_invalid_log_format(self):
        config = FastafConfig(log_format="xml")

        with pytest.raises(ValueError, match="Invalid log_format"):
            config.validate()

    def test_validate_valid_log_levels(self):
        """Test that all valid log levels pass validation."""
        for level in ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]:
            FastafConfig(log_level=level).validate()
