"""
Configuration management for streamta.
Loads settings from environment variables with sensible defaults.
"""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv


VALID_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class LogConfig:
    """
    Logging configuration.

    log_dir is optional: a library should not write files unless asked to,
    so file output is only enabled when STREAMTA_LOG_DIR is set.
    """
    level: str = "WARNING"
    log_dir: Optional[str] = None

    def __post_init__(self):
        self.level = self.level.upper()
        if self.level not in VALID_LOG_LEVELS:
            raise ValueError(
                f"STREAMTA_LOG_LEVEL must be one of {list(VALID_LOG_LEVELS)}, got '{self.level}'"
            )


class StreamTAConfig:
    """
    Central configuration manager.

    Loads configuration from environment variables (optionally seeded from
    a .env file) and provides typed access to all settings.
    """

    _instance: Optional['StreamTAConfig'] = None

    def __new__(cls, *args, **kwargs):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance._initialized = False
        return cls._instance

    def __init__(self, env_file: str = ".env"):
        if self._initialized:
            return

        env_path = Path(env_file)
        if env_path.exists():
            load_dotenv(env_path, override=False)

        self.log = self._load_log_config()

        self._initialized = True

    def _load_log_config(self) -> LogConfig:
        """Load logging configuration from environment."""
        return LogConfig(
            level=os.getenv("STREAMTA_LOG_LEVEL", "WARNING"),
            log_dir=os.getenv("STREAMTA_LOG_DIR") or None,
        )

    def reload(self, env_file: str = ".env"):
        """Reload configuration from environment."""
        self._initialized = False
        self.__init__(env_file)


def get_config() -> StreamTAConfig:
    """Get the global configuration instance."""
    return StreamTAConfig()
