"""
Settings that control how the binder itself behaves.

**Conceptual**: The binder is configured the same way the applications using
it are: through environment variables, read once into a frozen dataclass and
cached. Only policy lives here (what to do when an indirection file is
unreadable); the values being bound never touch this module. The naming
convention itself, including the `_FILE` suffix, is fixed and not
configurable.

**Environment variables**:
  - PATHENVCONFIG_FATAL_FILE_ERRORS (optional): When true, an unreadable
    indirection file terminates the process instead of raising
    FileIndirectionError. Defaults to "false".

**Usage pattern**:
  ```python
  from pathenvconfig.config.settings import get_settings

  settings = get_settings()
  settings.fatal_file_errors  # False
  ```

Tests and callers that need a different policy should build a BinderSettings
directly and pass it to process() rather than mutating the environment.
"""

import os
from dataclasses import dataclass
from typing import Optional


ENVIRONMENT_VARIABLE_FILE_SUFFIX = "_FILE"


@dataclass(frozen=True)
class BinderSettings:
    """
    Policy knobs for the binder.

    Attributes:
        fatal_file_errors: If True, an unreadable indirection file is logged
                           at CRITICAL and the process exits with status 1.
                           If False (default), FileIndirectionError is raised
                           to the caller.
    """
    fatal_file_errors: bool = False

    @classmethod
    def from_env(cls) -> "BinderSettings":
        """
        Load binder settings from environment variables.

        Returns:
            BinderSettings with values loaded from the environment.
        """
        fatal_file_errors = os.getenv(
            "PATHENVCONFIG_FATAL_FILE_ERRORS", "false"
        ).lower() in ("true", "1", "yes")

        return cls(fatal_file_errors=fatal_file_errors)


_default_settings: Optional[BinderSettings] = None


def get_settings() -> BinderSettings:
    """
    Get the cached binder settings, loading them from the environment on
    first access.

    Returns:
        Global BinderSettings singleton.
    """
    global _default_settings

    if _default_settings is None:
        _default_settings = BinderSettings.from_env()

    return _default_settings


def reset_settings():
    """
    Reset the cached settings so the next get_settings() re-reads the
    environment (used by tests).
    """
    global _default_settings
    _default_settings = None
