"""
Configuration settings for toolbelt.

**Conceptual**: The helpers in this package are pure functions and need no
configuration. Two ambient concerns do: how chatty the package logger is, and
which timer backend ``debounce``/``throttle`` use when the caller does not pass
a scheduler explicitly. Both are read from environment variables (optionally
via a ``.env`` file) into a frozen, validated dataclass.

**Environment variables**:
  - TOOLBELT_LOG_LEVEL (optional): DEBUG, INFO, WARNING, ERROR or CRITICAL.
    Defaults to WARNING.
  - TOOLBELT_SCHEDULER (optional): "thread" or "asyncio". Defaults to "thread".

This module uses python-dotenv to load .env files and dataclasses for type safety.
"""

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

# Load .env from the project root if present; real environment variables win.
load_dotenv(dotenv_path=Path(__file__).parent.parent.parent / ".env", override=False)

logger = logging.getLogger(__name__)

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
SCHEDULER_BACKENDS = ("thread", "asyncio")


@dataclass(frozen=True)
class Settings:
    """
    Global settings for toolbelt.

    **Usage pattern**:
      ```python
      from toolbelt.config.settings import get_settings

      settings = get_settings()
      settings.scheduler  # "thread"
      ```

    Tests construct ``Settings(...)`` directly instead of touching the
    environment.

    Attributes:
        log_level: Level applied to the "toolbelt" logger on first setup.
        scheduler: Default timer backend for debounce/throttle wrappers.
    """
    log_level: str = "WARNING"
    scheduler: str = "thread"

    def __post_init__(self):
        """Validate settings after initialization."""
        if self.log_level not in LOG_LEVELS:
            raise ValueError(
                f"TOOLBELT_LOG_LEVEL must be one of {', '.join(LOG_LEVELS)}, "
                f"got: {self.log_level}"
            )
        if self.scheduler not in SCHEDULER_BACKENDS:
            raise ValueError(
                f"TOOLBELT_SCHEDULER must be one of {', '.join(SCHEDULER_BACKENDS)}, "
                f"got: {self.scheduler}"
            )

    @classmethod
    def from_env(cls) -> "Settings":
        """
        Load settings from environment variables.

        Values are normalised before validation: the log level is upper-cased
        and the scheduler name lower-cased, so ``TOOLBELT_LOG_LEVEL=debug``
        works.

        Returns:
            Settings object with values loaded from environment.

        Raises:
            ValueError: If either variable holds an unsupported value.
        """
        log_level = os.getenv("TOOLBELT_LOG_LEVEL", "WARNING").strip().upper()
        scheduler = os.getenv("TOOLBELT_SCHEDULER", "thread").strip().lower()

        settings = cls(log_level=log_level, scheduler=scheduler)
        logger.debug(
            "Loaded settings: log_level=%s scheduler=%s",
            settings.log_level,
            settings.scheduler,
        )
        return settings


_default_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """
    Get the global settings singleton.

    Settings are loaded from the environment on first call, then cached.
    Tests can bypass this by building their own ``Settings`` objects, or call
    ``reset_settings()`` after changing environment variables.

    Returns:
        Global Settings singleton.

    Raises:
        ValueError: If the environment holds unsupported values.
    """
    global _default_settings

    if _default_settings is None:
        _default_settings = Settings.from_env()

    return _default_settings


def reset_settings() -> None:
    """
    Reset the global settings singleton (for testing).

    Forces the next ``get_settings()`` call to re-read the environment.
    """
    global _default_settings
    _default_settings = None
