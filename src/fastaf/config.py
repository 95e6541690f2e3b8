"""Configuration management for fastaf."""

import os
from dataclasses import dataclass
from typing import Optional

from dotenv import find_dotenv, load_dotenv


VALID_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
VALID_LOG_FORMATS = ("text", "json")


@dataclass
class FastafConfig:
    """Settings for one fastaf run.

    The OpenAI API key is intentionally absent: it is prompted for on every
    run and never read from the environment.

    Attributes:
        ai_model: Chat completion model identifier
        ai_temperature: Sampling temperature for the completion
        ai_max_tokens: Upper bound on the completion length
        ai_base_url: Optional base URL for OpenAI-compatible endpoints
        max_key_attempts: How many times the API key prompt is shown before giving up
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_format: "text" or "json"
        log_file: Optional file that receives a copy of the log
    """
    # AI settings
    ai_model: str = "gpt-4o-mini"
    ai_temperature: float = 0.7
    ai_max_tokens: int = 100
    ai_base_url: Optional[str] = None

    # Credential prompt
    max_key_attempts: int = 3

    # Logging settings
    log_level: str = "ERROR"
    log_format: str = "text"
    log_file: Optional[str] = None

    @classmethod
    def from_env(cls, env_file: Optional[str] = None) -> "FastafConfig":
        """Load configuration from environment variables.

        Variables from a ``.env`` file are loaded first (``env_file`` when
        given, otherwise the nearest ``.env`` above the working directory);
        variables that are already set in the environment win.

        Args:
            env_file: Optional path to .env file to load

        Returns:
            FastafConfig populated from environment variables

        Raises:
            ValueError: If a value cannot be parsed or fails validation
        """
        load_dotenv(env_file or find_dotenv(usecwd=True))

        config = cls(
            ai_model=os.getenv("AI_MODEL", "gpt-4o-mini"),
            ai_temperature=float(os.getenv("AI_TEMPERATURE", "0.7")),
            ai_max_tokens=int(os.getenv("AI_MAX_TOKENS", "100")),
            ai_base_url=os.getenv("AI_BASE_URL") or None,
            max_key_attempts=int(os.getenv("FASTAF_MAX_KEY_ATTEMPTS", "3")),
            log_level=os.getenv("LOG_LEVEL", "ERROR").upper(),
            log_format=os.getenv("LOG_FORMAT", "text").lower(),
            log_file=os.getenv("LOG_FILE") or None,
        )

        config.validate()

        return config

    def validate(self) -> None:
        """Validate configuration values.

        Raises:
            ValueError: If any configuration value is invalid
        """
        if not self.ai_model:
            raise ValueError("AI model must be specified")

        if not 0.0 <= self.ai_temperature <= 2.0:
            raise ValueError(
                f"Invalid ai_temperature: {self.ai_temperature}. "
                "Must be between 0 and 2"
            )

        if self.ai_max_tokens < 1:
            raise ValueError(
                f"Invalid ai_max_tokens: {self.ai_max_tokens}. "
                "Must be at least 1"
            )

        if self.max_key_attempts < 1:
            raise ValueError(
                f"Invalid max_key_attempts: {self.max_key_attempts}. "
                "Must be at least 1"
            )

        if self.log_level not in VALID_LOG_LEVELS:
            raise ValueError(
                f"Invalid log_level: {self.log_level}. "
                f"Must be one of {VALID_LOG_LEVELS}"
            )

        if self.log_format not in VALID_LOG_FORMATS:
            raise ValueError(
                f"Invalid log_format: {self.log_format}. "
                f"Must be one of {VALID_LOG_FORMATS}"
            )
