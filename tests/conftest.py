"""
Pytest configuration file.

Ensures the repo root is on sys.path so that 'import src...' works, and
clears the cached settings and random generator around every test so that
environment changes made with monkeypatch take effect.
"""
import sys
from pathlib import Path

import pytest

# Add the repo root to sys.path
repo_root = Path(__file__).parent.parent
if str(repo_root) not in sys.path:
    sys.path.insert(0, str(repo_root))

from src.config.settings import RANDOM_SEED_ENV_VAR, reset_settings  # noqa: E402
from src.utils.number import reset_random_state  # noqa: E402


@pytest.fixture(autouse=True)
def fresh_singletons(monkeypatch):
    """Start each test with no cached settings, no shared generator, and no seed set."""
    monkeypatch.delenv(RANDOM_SEED_ENV_VAR, raising=False)
    reset_settings()
    reset_random_state()
    yield
    reset_settings()
    reset_random_state()
