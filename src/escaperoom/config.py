"""Configuration for the escape room."""

import os
from dataclasses import dataclass
from pathlib import Path


@dataclass
class Config:
    """Application configuration."""

    log_level: str = "WARNING"
    log_file: Path | None = None
    json_logs: bool = False
    data_file: Path | None = None
    clear_screen: bool = True

    @classmethod
    def from_env(cls) -> "Config":
        """Load configuration from environment variables."""
        log_file = os.getenv("ESCAPEROOM_LOG_FILE")
        data_file = os.getenv("ESCAPEROOM_DATA_FILE")

        return cls(
            log_level=os.getenv("ESCAPEROOM_LOG_LEVEL", cls.log_level),
            log_file=Path(log_file) if log_file else None,
            json_logs=os.getenv("ESCAPEROOM_JSON_LOGS", "").lower()
            in ("true", "1", "yes"),
            data_file=Path(data_file) if data_file else None,
            clear_screen=os.getenv("ESCAPEROOM_CLEAR_SCREEN", "true").lower()
            not in ("false", "0", "no"),
        )
