"""
Configuration settings for the collection utilities.

**Conceptual**: The utility functions are pure and need almost no configuration.
The one knob is the seed for the shared random number generator used by
`random_num`, which makes sampling reproducible across runs when set.

Settings are loaded from environment variables (via a project-root .env file
when present) into a frozen dataclass and validated at load time, so a bad
value fails fast with a clear message instead of surfacing mid-computation.

This module uses python-dotenv to load .env files and dataclasses for type safety.
"""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

# Load .env from project root (no-op if the file does not exist)
env_path = Path(__file__).parent.parent.parent / ".env"
load_dotenv(dotenv_path=env_path)


RANDOM_SEED_ENV_VAR = "UTILS_RANDOM_SEED"


@dataclass(frozen=True)
class Settings:
    """
    Global settings for the utilities.

    **Usage pattern**:
      ```python
      from src.config.settings import get_settings

      settings = get_settings()
      print(settings.random_seed)
      ```

    Attributes:
        random_seed: Seed for the shared random generator used by
                     `src.utils.number.random_num`. None (default) means the
                     generator is seeded from OS entropy.
    """
    random_seed: Optional[int] = None

    def __post_init__(self):
        """Validate settings after initialization."""
        if self.random_seed is not None and self.random_seed < 0:
            raise ValueError(
                f"{RANDOM_SEED_ENV_VAR} must be a non-negative integer, "
                f"got {self.random_seed}."
            )

    @classmethod
    def from_env(cls) -> "Settings":
        """
        Load settings from environment variables.

        **Environment variables**:
          - UTILS_RANDOM_SEED (optional): integer seed for the shared random
            generator. Unset or empty means unseeded.

        Returns:
            Settings object with values loaded from environment.

        Raises:
            ValueError: If UTILS_RANDOM_SEED is set but is not a non-negative integer.
        """
        seed_str = os.getenv(RANDOM_SEED_ENV_VAR, "").strip()

        if not seed_str:
            return cls()

        try:
            random_seed = int(seed_str)
        except ValueError:
            raise ValueError(
                f"{RANDOM_SEED_ENV_VAR} must be an integer, got '{seed_str}'. "
                "Please fix it in your .env file or environment variables."
            )

        return cls(random_seed=random_seed)


# Lazily loaded singleton; tests call reset_settings() to force a reload
_default_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """
    Get the global settings singleton.

    Settings are loaded from the environment on first call, then cached.

    Returns:
        Global Settings singleton.

    Raises:
        ValueError: If the environment holds an invalid value.
    """
    global _default_settings

    if _default_settings is None:
        _default_settings = Settings.from_env()

    return _default_settings


def reset_settings():
    """
    Reset the global settings singleton (for testing).

    The next call to get_settings() reloads from the environment.
    """
    global _default_settings
    _default_settings = None
