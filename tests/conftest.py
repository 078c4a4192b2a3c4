"""
Pytest configuration file.

Ensures the repo root is on sys.path so that 'import toolbelt...' works, and
provides the shared fixtures:
  - manual_scheduler: a virtual clock for deterministic debounce/throttle tests.
  - clean_settings: isolates tests from TOOLBELT_* variables in the environment.
"""
import sys
from pathlib import Path

import pytest

# Add the repo root to sys.path
repo_root = Path(__file__).parent.parent
if str(repo_root) not in sys.path:
    sys.path.insert(0, str(repo_root))

from toolbelt.config.settings import reset_settings  # noqa: E402
from toolbelt.utils.time import ManualScheduler  # noqa: E402


@pytest.fixture
def manual_scheduler():
    """Virtual clock starting at t=0 ms."""
    return ManualScheduler()


@pytest.fixture
def clean_settings(monkeypatch):
    """Remove TOOLBELT_* variables and drop the cached settings around the test."""
    monkeypatch.delenv("TOOLBELT_LOG_LEVEL", raising=False)
    monkeypatch.delenv("TOOLBELT_SCHEDULER", raising=False)
    reset_settings()
    yield
    reset_settings()
