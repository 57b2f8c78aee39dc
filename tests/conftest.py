"""
Pytest configuration file.

Ensures the repo root is on sys.path so that 'import pathenvconfig...' works,
and clears the cached binder settings around every test.
"""
import sys
from pathlib import Path

import pytest

# Add the repo root to sys.path
repo_root = Path(__file__).parent.parent
if str(repo_root) not in sys.path:
    sys.path.insert(0, str(repo_root))

from pathenvconfig.config.settings import reset_settings


@pytest.fixture(autouse=True)
def fresh_settings():
    """Reload BinderSettings from the (monkeypatched) environment per test."""
    reset_settings()
    yield
    reset_settings()
