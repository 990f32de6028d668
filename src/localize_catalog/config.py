"""Configuration management for the localize-catalog CLI."""

import logging
import os
from dataclasses import dataclass, field
from typing import List
from dotenv import load_dotenv

load_dotenv()


def _env_flag(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes", "on")


@dataclass
class Config:
    """Application configuration."""

    # Language assigned to single-language files whose language cannot be inferred
    source_language: str = field(
        default_factory=lambda: os.getenv("LOCALIZE_SOURCE_LANGUAGE", "en")
    )

    log_level: str = field(
        default_factory=lambda: os.getenv("LOCALIZE_LOG_LEVEL", "WARNING").upper()
    )

    # Emit nested objects instead of dotted keys when writing JSON
    json_nested: bool = field(default_factory=lambda: _env_flag("LOCALIZE_JSON_NESTED"))

    def validate(self) -> List[str]:
        """Validate configuration and return list of errors."""
        errors = []
        if not self.source_language.strip():
            errors.append("LOCALIZE_SOURCE_LANGUAGE is empty")
        if not isinstance(logging.getLevelName(self.log_level), int):
            errors.append(f"LOCALIZE_LOG_LEVEL '{self.log_level}' is not a valid log level")
        return errors


# Global config instance
config = Config()
