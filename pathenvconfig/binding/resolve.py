"""
Resolve the raw string value for one variable name.

**Lookup order**:
  1. `NAME` in the environment: used verbatim, whitespace and newlines kept.
  2. `NAME_FILE` in the environment: its value is a path; the file's content
     is used with exactly one trailing "\\n" or "\\r\\n" removed.
  3. The field's declared default, verbatim.
  4. Nothing: an error for required fields, "not found" otherwise.

**Unreadable files**: By default a file that cannot be read raises
FileIndirectionError. With BinderSettings.fatal_file_errors enabled the
failure is logged at CRITICAL and the process exits with status 1, since a
missing secret file means the deployment itself is broken.
"""

import logging
import sys
from typing import Mapping, Optional

from pathenvconfig.config.settings import (
    ENVIRONMENT_VARIABLE_FILE_SUFFIX,
    BinderSettings,
)
from pathenvconfig.utils.errors import (
    FileIndirectionError,
    MissingRequiredVariableError,
)


logger = logging.getLogger(__name__)


def strip_trailing_newline(content: str) -> str:
    """Remove one trailing "\\r\\n" or "\\n", if present."""
    if content.endswith("\r\n"):
        return content[:-2]
    if content.endswith("\n"):
        return content[:-1]
    return content


def read_indirection_file(path: str, variable_name: str, settings: BinderSettings) -> str:
    """
    Read the value stored in the file a `_FILE` variable points to.

    The file is read as UTF-8 text with newline translation disabled, so a
    "\\r\\n" terminator reaches strip_trailing_newline intact. Bytes that are
    not valid UTF-8 are carried through as surrogate escapes, the same way
    os.environ exposes undecodable variable values.

    Raises:
        FileIndirectionError: If the file cannot be read and the fatal
            policy is off.
    """
    try:
        with open(path, "r", encoding="utf-8", errors="surrogateescape", newline="") as fh:
            content = fh.read()
    except OSError as e:
        if settings.fatal_file_errors:
            logger.critical(
                "Unable to read file %s for environment variable %s: %s",
                path, variable_name, e,
            )
            sys.exit(1)
        raise FileIndirectionError(variable_name, path) from e

    return strip_trailing_newline(content)


def resolve_value(
    variable_name: str,
    required: bool,
    default: Optional[str],
    environ: Mapping[str, str],
    settings: BinderSettings,
) -> tuple[str, bool]:
    """
    Resolve the value for variable_name.

    Args:
        variable_name: Fully prefixed variable name, e.g. "APP_DB_USER".
        required: Raise instead of reporting "not found".
        default: Declared default string, or None.
        environ: Mapping to read variables from.
        settings: Binder settings (fatal file-error policy).

    Returns:
        (value, found). When found is False the value is "" and the field
        must be left untouched.

    Raises:
        MissingRequiredVariableError: If required and nothing resolves.
        FileIndirectionError: If the indirection file is unreadable.
    """
    value = environ.get(variable_name)
    if value is not None:
        logger.debug("Resolved %s from the environment", variable_name)
        return value, True

    file_variable_name = variable_name + ENVIRONMENT_VARIABLE_FILE_SUFFIX
    path = environ.get(file_variable_name)
    if path is not None:
        value = read_indirection_file(path, file_variable_name, settings)
        logger.debug("Resolved %s from file %s", variable_name, path)
        return value, True

    if default is not None:
        logger.debug("Resolved %s from its declared default", variable_name)
        return default, True

    if required:
        raise MissingRequiredVariableError(variable_name, file_variable_name)

    return "", False
