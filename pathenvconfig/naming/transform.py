"""
Turn a field identifier into a SCREAMING_SNAKE_CASE environment variable name.

**Conceptual**: A configuration field such as `database_name`, `DatabaseName`
or `SSLCert` is split into words, the words are upper-cased and joined with
underscores, and the prefix is prepended:

    field_name_to_env_var("APP_", "SSLCert")        -> "APP_SSL_CERT"
    field_name_to_env_var("APP_", "database_cert")  -> "APP_DATABASE_CERT"
    field_name_to_env_var("APP_", "IOS10")          -> "APP_IOS_10"

**Tokenizing rule** (tried in order at each position):
  1. A run of capitals not followed by a lower-case letter (an acronym such
     as "SSL" in "SSLCert"; the "C" of "Cert" is left for the next word).
  2. An optional capital followed by lower-case letters or digits ("Cert",
     "database", "10").

Anything the pattern does not match, underscores included, is skipped, and a
single underscore is put back between every pair of words.
"""

import re

from pathenvconfig.utils.errors import FieldNameError


WORD_PATTERN = re.compile(r"([A-Z]+(?![a-z]))|([A-Z]?[a-z0-9]+)")


def split_field_name(field_name: str) -> list[str]:
    """
    Split a field identifier into its words, preserving their original case.

    Args:
        field_name: Identifier as declared on the dataclass.

    Returns:
        List of words, e.g. ["Database", "Connection", "String"].
    """
    return [match.group(0) for match in WORD_PATTERN.finditer(field_name)]


def field_name_to_env_var(prefix: str, field_name: str) -> str:
    """
    Build the environment variable name for a field.

    The prefix is used as given; callers normalize a non-empty prefix to end
    with "_" beforehand.

    Args:
        prefix: Namespace prefix ("" or ending with "_").
        field_name: Identifier as declared on the dataclass.

    Returns:
        Prefix followed by the upper-cased words joined with "_".

    Raises:
        FieldNameError: If the identifier contains no words at all.
    """
    words = split_field_name(field_name)
    if not words:
        raise FieldNameError(field_name)

    return prefix + "_".join(words).upper()
