"""
Configuration for CodeNote.

Supports loading from:
1. Environment variables (highest priority)
2. YAML config file
3. Default values (fallback)
"""

import os
from pathlib import Path
from typing import Any, Literal

import yaml
from dotenv import load_dotenv
from pydantic import BaseModel, Field


class LLMConfig(BaseModel):
    """LLM provider configuration."""

    provider: str = "ollama"  # ollama, openai, disabled
    model: str = "llama3.2:3b"
    base_url: str = "http://localhost:11434"
    api_key: str | None = None
    temperature: float = 0.0
    max_tokens: int = 256
    timeout: float = 120.0


class DerivationConfig(BaseModel):
    """Title/summary derivation configuration."""

    locale: str = "en"  # en, pl
    timeout: float = Field(default=10.0, gt=0.0, description="Budget for one model attempt")
    summary_threshold: int | None = Field(
        default=None,
        ge=0,
        description="Content length at or below which no summary is made (None = locale default)",
    )
    summary_hard_cap: int = Field(default=180, gt=0)
    band_min: int = Field(default=120, ge=0)
    band_max: int = Field(default=210, gt=0)
    title_max_words: int = Field(default=3, ge=2, le=5)
    title_mode: Literal["sentence", "word"] = "sentence"
    summary_mode: Literal["keyword", "sentence"] = "keyword"
    keyword_count: int = Field(default=18, ge=1)
    keyword_ellipsis_after: int = Field(default=20, ge=0)


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = "INFO"
    log_to_file: bool = False
    log_dir: str = "logs"
    file_rotation: str = "10 MB"
    file_retention: str = "7 days"
    compression: str = "zip"
    serialize: bool = True


class Config(BaseModel):
    """Main configuration."""

    llm: LLMConfig = Field(default_factory=LLMConfig)
    derivation: DerivationConfig = Field(default_factory=DerivationConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    @classmethod
    def from_env(cls, env_file: str | Path | None = None) -> "Config":
        """
        Load configuration from environment variables.

        Priority: .env file -> system environment variables -> defaults

        Args:
            env_file: Optional path to .env file (default: .env in project root)

        Returns:
            Config instance

        Environment variables:
            CODENOTE_LLM_PROVIDER: LLM provider (ollama, openai, disabled)
            CODENOTE_LLM_MODEL: LLM model name
            CODENOTE_LLM_BASE_URL: LLM base URL
            CODENOTE_LLM_API_KEY: LLM API key (for OpenAI)
            CODENOTE_LOCALE: Stop-word/placeholder profile (en, pl)
            CODENOTE_DERIVATION_TIMEOUT: Seconds allowed for one model attempt
            CODENOTE_SUMMARY_THRESHOLD: Minimum content length for a summary
            CODENOTE_SUMMARY_HARD_CAP: Maximum summary length before truncation
            CODENOTE_TITLE_MODE: Fallback title mode (sentence, word)
            CODENOTE_SUMMARY_MODE: Fallback summary mode (keyword, sentence)
            CODENOTE_LOG_LEVEL: Log level
        """
        if env_file:
            load_dotenv(env_file)
        elif Path(".env").exists():
            load_dotenv()

        def get_env(key: str, default: Any = None) -> Any:
            """Get environment variable with type conversion."""
            value = os.getenv(key)
            if value is None or value == "":
                return default
            if isinstance(default, bool):
                return str(value).lower() in ("true", "1", "yes")
            if isinstance(default, int):
                return int(value)
            if isinstance(default, float):
                return float(value)
            return value

        threshold = get_env("CODENOTE_SUMMARY_THRESHOLD")

        return cls(
            llm=LLMConfig(
                provider=get_env("CODENOTE_LLM_PROVIDER", "ollama"),
                model=get_env("CODENOTE_LLM_MODEL", "llama3.2:3b"),
                base_url=get_env("CODENOTE_LLM_BASE_URL", "http://localhost:11434"),
                api_key=get_env("CODENOTE_LLM_API_KEY"),
                temperature=get_env("CODENOTE_LLM_TEMPERATURE", 0.0),
                max_tokens=get_env("CODENOTE_LLM_MAX_TOKENS", 256),
                timeout=get_env("CODENOTE_LLM_TIMEOUT", 120.0),
            ),
            derivation=DerivationConfig(
                locale=get_env("CODENOTE_LOCALE", "en"),
                timeout=get_env("CODENOTE_DERIVATION_TIMEOUT", 10.0),
                summary_threshold=int(threshold) if threshold is not None else None,
                summary_hard_cap=get_env("CODENOTE_SUMMARY_HARD_CAP", 180),
                band_min=get_env("CODENOTE_SUMMARY_BAND_MIN", 120),
                band_max=get_env("CODENOTE_SUMMARY_BAND_MAX", 210),
                title_max_words=get_env("CODENOTE_TITLE_MAX_WORDS", 3),
                title_mode=get_env("CODENOTE_TITLE_MODE", "sentence"),
                summary_mode=get_env("CODENOTE_SUMMARY_MODE", "keyword"),
                keyword_count=get_env("CODENOTE_KEYWORD_COUNT", 18),
            ),
            logging=LoggingConfig(
                level=get_env("CODENOTE_LOG_LEVEL", "INFO"),
                log_to_file=get_env("CODENOTE_LOG_TO_FILE", False),
                log_dir=get_env("CODENOTE_LOG_DIR", "logs"),
                file_rotation=get_env("CODENOTE_LOG_FILE_ROTATION", "10 MB"),
                file_retention=get_env("CODENOTE_LOG_FILE_RETENTION", "7 days"),
                compression=get_env("CODENOTE_LOG_COMPRESSION", "zip"),
                serialize=get_env("CODENOTE_LOG_SERIALIZE", True),
            ),
        )

    @classmethod
    def from_yaml(cls, yaml_path: str | Path) -> "Config":
        """
        Load configuration from YAML file.

        Args:
            yaml_path: Path to YAML configuration file

        Returns:
            Config instance

        Raises:
            FileNotFoundError: If YAML file doesn't exist
            yaml.YAMLError: If YAML is invalid
        """
        yaml_path = Path(yaml_path)
        if not yaml_path.exists():
            raise FileNotFoundError(f"Config file not found: {yaml_path}")

        with open(yaml_path) as f:
            data = yaml.safe_load(f) or {}

        return cls(**data)

    @classmethod
    def from_env_or_yaml(
        cls, yaml_path: str | Path | None = None, env_file: str | Path | None = None
    ) -> "Config":
        """
        Load configuration with priority: env vars > YAML > defaults.

        Args:
            yaml_path: Optional path to YAML config
            env_file: Optional path to .env file

        Returns:
            Config instance
        """
        if yaml_path and Path(yaml_path).exists():
            with open(yaml_path) as f:
                config_dict = yaml.safe_load(f) or {}
        else:
            config_dict = {}

        env_config = cls.from_env(env_file=env_file)

        # Env sections that differ from defaults replace the YAML sections
        final_dict = {**config_dict}
        default = cls()
        if env_config.llm != default.llm:
            final_dict["llm"] = env_config.llm.model_dump()
        if env_config.derivation != default.derivation:
            final_dict["derivation"] = env_config.derivation.model_dump()
        if env_config.logging != default.logging:
            final_dict["logging"] = env_config.logging.model_dump()

        return cls(**final_dict) if final_dict else env_config


# Default config instance
default_config = Config()
