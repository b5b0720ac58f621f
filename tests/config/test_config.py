"""
Tests for configuration management.

Tests config loading from:
1. Environment variables
2. YAML files
3. Combined (env overrides YAML)
"""

import pydantic
import pytest
import yaml

from codenote.config import Config, DerivationConfig, LLMConfig


class TestConfigDefaults:
    """Test default configuration values."""

    def test_default_config_creation(self):
        """Test creating config with defaults."""
        config = Config()

        # LLM defaults
        assert config.llm.provider == "ollama"
        assert config.llm.model == "llama3.2:3b"
        assert config.llm.base_url == "http://localhost:11434"
        assert config.llm.api_key is None
        assert config.llm.temperature == 0.0
        assert config.llm.max_tokens == 256

        # Derivation defaults
        assert config.derivation.locale == "en"
        assert config.derivation.timeout == 10.0
        assert config.derivation.summary_threshold is None
        assert config.derivation.summary_hard_cap == 180
        assert config.derivation.band_min == 120
        assert config.derivation.band_max == 210
        assert config.derivation.title_max_words == 3
        assert config.derivation.title_mode == "sentence"
        assert config.derivation.summary_mode == "keyword"

        # Logging defaults
        assert config.logging.level == "INFO"
        assert config.logging.log_to_file is False

    def test_llm_config_creation(self):
        """Test creating LLM config."""
        llm_config = LLMConfig(
            provider="openai",
            model="gpt-4o-mini",
            api_key="sk-test",
            temperature=0.7,
        )

        assert llm_config.provider == "openai"
        assert llm_config.model == "gpt-4o-mini"
        assert llm_config.api_key == "sk-test"
        assert llm_config.temperature == 0.7

    def test_title_word_limits(self):
        """Titles are 2-5 words."""
        assert DerivationConfig(title_max_words=5).title_max_words == 5
        with pytest.raises(pydantic.ValidationError):
            DerivationConfig(title_max_words=6)
        with pytest.raises(pydantic.ValidationError):
            DerivationConfig(title_max_words=1)

    def test_invalid_modes_rejected(self):
        with pytest.raises(pydantic.ValidationError):
            DerivationConfig(summary_mode="abstractive")
        with pytest.raises(pydantic.ValidationError):
            DerivationConfig(title_mode="paragraph")

    def test_timeout_must_be_positive(self):
        with pytest.raises(pydantic.ValidationError):
            DerivationConfig(timeout=0)


class TestConfigFromEnv:
    """Test loading configuration from environment variables."""

    def test_from_env_basic(self, monkeypatch):
        """Test loading basic config from environment."""
        monkeypatch.setenv("CODENOTE_LLM_PROVIDER", "openai")
        monkeypatch.setenv("CODENOTE_LLM_MODEL", "gpt-4o-mini")
        monkeypatch.setenv("CODENOTE_LLM_API_KEY", "sk-test-key")
        monkeypatch.setenv("CODENOTE_LOCALE", "pl")

        config = Config.from_env()

        assert config.llm.provider == "openai"
        assert config.llm.model == "gpt-4o-mini"
        assert config.llm.api_key == "sk-test-key"
        assert config.derivation.locale == "pl"

    def test_from_env_with_numbers(self, monkeypatch):
        """Test loading numeric values from environment."""
        monkeypatch.setenv("CODENOTE_LLM_TEMPERATURE", "0.7")
        monkeypatch.setenv("CODENOTE_LLM_MAX_TOKENS", "512")
        monkeypatch.setenv("CODENOTE_DERIVATION_TIMEOUT", "2.5")
        monkeypatch.setenv("CODENOTE_SUMMARY_THRESHOLD", "50")
        monkeypatch.setenv("CODENOTE_SUMMARY_HARD_CAP", "150")

        config = Config.from_env()

        assert config.llm.temperature == 0.7
        assert config.llm.max_tokens == 512
        assert config.derivation.timeout == 2.5
        assert config.derivation.summary_threshold == 50
        assert config.derivation.summary_hard_cap == 150

    def test_from_env_with_booleans(self, monkeypatch):
        """Test loading boolean values from environment."""
        monkeypatch.setenv("CODENOTE_LOG_TO_FILE", "true")
        monkeypatch.setenv("CODENOTE_LOG_SERIALIZE", "0")

        config = Config.from_env()

        assert config.logging.log_to_file is True
        assert config.logging.serialize is False

    def test_from_env_modes(self, monkeypatch):
        monkeypatch.setenv("CODENOTE_TITLE_MODE", "word")
        monkeypatch.setenv("CODENOTE_SUMMARY_MODE", "sentence")

        config = Config.from_env()

        assert config.derivation.title_mode == "word"
        assert config.derivation.summary_mode == "sentence"

    def test_from_env_with_dotenv_file(self, monkeypatch, tmp_path):
        """Test loading from .env file."""
        # setenv then delenv so teardown removes what load_dotenv writes
        for key in ("CODENOTE_LLM_PROVIDER", "CODENOTE_LLM_MODEL", "CODENOTE_DERIVATION_TIMEOUT"):
            monkeypatch.setenv(key, "unset")
            monkeypatch.delenv(key)
        env_file = tmp_path / ".env.test"
        env_file.write_text(
            """
CODENOTE_LLM_PROVIDER=disabled
CODENOTE_LLM_MODEL=none
CODENOTE_DERIVATION_TIMEOUT=3
"""
        )

        config = Config.from_env(env_file=str(env_file))

        assert config.llm.provider == "disabled"
        assert config.llm.model == "none"
        assert config.derivation.timeout == 3.0

    def test_from_env_missing_optional_values(self, monkeypatch):
        """Test that missing optional values use defaults."""
        monkeypatch.delenv("CODENOTE_LLM_MODEL", raising=False)
        monkeypatch.delenv("CODENOTE_SUMMARY_THRESHOLD", raising=False)
        monkeypatch.setenv("CODENOTE_LLM_PROVIDER", "ollama")

        config = Config.from_env()

        assert config.llm.model == "llama3.2:3b"
        assert config.derivation.summary_threshold is None

    def test_empty_value_uses_default(self, monkeypatch):
        monkeypatch.setenv("CODENOTE_LOCALE", "")

        config = Config.from_env()

        assert config.derivation.locale == "en"


class TestConfigFromYAML:
    """Test loading configuration from YAML files."""

    def test_from_yaml_basic(self, tmp_path):
        """Test loading config from YAML file."""
        yaml_file = tmp_path / "config.yaml"
        config_data = {
            "llm": {"provider": "openai", "model": "gpt-4o", "api_key": "sk-yaml-key"},
            "derivation": {"locale": "pl", "summary_threshold": 50, "timeout": 5.0},
        }
        yaml_file.write_text(yaml.safe_dump(config_data))

        config = Config.from_yaml(yaml_file)

        assert config.llm.provider == "openai"
        assert config.llm.api_key == "sk-yaml-key"
        assert config.derivation.locale == "pl"
        assert config.derivation.summary_threshold == 50
        assert config.derivation.timeout == 5.0
        # Untouched sections keep defaults
        assert config.logging.level == "INFO"

    def test_from_yaml_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            Config.from_yaml(tmp_path / "missing.yaml")

    def test_from_yaml_empty_file(self, tmp_path):
        yaml_file = tmp_path / "empty.yaml"
        yaml_file.write_text("")

        config = Config.from_yaml(yaml_file)

        assert config == Config()


class TestConfigFromEnvOrYAML:
    """Test combined loading."""

    def test_env_overrides_yaml(self, monkeypatch, tmp_path):
        yaml_file = tmp_path / "config.yaml"
        yaml_file.write_text(
            yaml.safe_dump(
                {
                    "llm": {"provider": "openai", "api_key": "sk-yaml"},
                    "logging": {"level": "DEBUG"},
                }
            )
        )
        monkeypatch.setenv("CODENOTE_LLM_PROVIDER", "disabled")

        config = Config.from_env_or_yaml(yaml_path=yaml_file)

        assert config.llm.provider == "disabled"
        assert config.logging.level == "DEBUG"

    def test_yaml_only(self, monkeypatch, tmp_path):
        for key in ("CODENOTE_LLM_PROVIDER", "CODENOTE_LOCALE", "CODENOTE_LOG_LEVEL"):
            monkeypatch.delenv(key, raising=False)
        yaml_file = tmp_path / "config.yaml"
        yaml_file.write_text(yaml.safe_dump({"derivation": {"locale": "pl"}}))

        config = Config.from_env_or_yaml(yaml_path=yaml_file)

        assert config.derivation.locale == "pl"

    def test_no_yaml(self, monkeypatch):
        monkeypatch.setenv("CODENOTE_LOCALE", "pl")

        config = Config.from_env_or_yaml(yaml_path=None)

        assert config.derivation.locale == "pl"
