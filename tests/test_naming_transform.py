"""
Tests for pathenvconfig/naming/transform.py

These tests pin down the exact variable names produced for field identifiers
in every casing style: acronyms, digits, camelCase, PascalCase, snake_case.
"""

import pytest

from pathenvconfig.naming.transform import field_name_to_env_var, split_field_name
from pathenvconfig.utils.errors import FieldNameError, InvalidSpecificationError


@pytest.mark.parametrize(
    "field_name, expected",
    [
        ("D", "PREFIX_D"),
        ("DB", "PREFIX_DB"),
        ("IOS", "PREFIX_IOS"),
        ("IOS1", "PREFIX_IOS_1"),
        ("IOS10", "PREFIX_IOS_10"),
        ("IAm", "PREFIX_I_AM"),
        ("Database", "PREFIX_DATABASE"),
        ("Database1", "PREFIX_DATABASE1"),
        ("Database10", "PREFIX_DATABASE10"),
        ("Database_10", "PREFIX_DATABASE_10"),
        ("DatabaseName", "PREFIX_DATABASE_NAME"),
        ("DatabaseConnectionString", "PREFIX_DATABASE_CONNECTION_STRING"),
        ("SSLCert", "PREFIX_SSL_CERT"),
        ("d", "PREFIX_D"),
        ("database", "PREFIX_DATABASE"),
        ("databaseCert", "PREFIX_DATABASE_CERT"),
        ("database_cert", "PREFIX_DATABASE_CERT"),
        ("database_10", "PREFIX_DATABASE_10"),
    ],
)
def test_field_name_to_env_var(field_name, expected):
    assert field_name_to_env_var("PREFIX_", field_name) == expected


def test_snake_case_python_fields():
    """Typical dataclass attribute names map the obvious way."""
    assert field_name_to_env_var("APP_", "is_dog") == "APP_IS_DOG"
    assert field_name_to_env_var("APP_", "db_ptr") == "APP_DB_PTR"
    assert field_name_to_env_var("APP_", "ssl_cert_path") == "APP_SSL_CERT_PATH"


def test_repeated_underscores_collapse():
    """Original punctuation is ignored; exactly one underscore between words."""
    assert field_name_to_env_var("", "database__cert") == "DATABASE_CERT"
    assert field_name_to_env_var("", "database_cert_") == "DATABASE_CERT"


def test_empty_prefix():
    assert field_name_to_env_var("", "DatabaseName") == "DATABASE_NAME"


def test_prefix_used_verbatim():
    """The transformer never upper-cases or normalizes the prefix."""
    assert field_name_to_env_var("test_", "name") == "test_NAME"


def test_deterministic():
    first = field_name_to_env_var("PREFIX_", "DatabaseConnectionString")
    second = field_name_to_env_var("PREFIX_", "DatabaseConnectionString")
    assert first == second


def test_split_field_name_keeps_case():
    assert split_field_name("SSLCert") == ["SSL", "Cert"]
    assert split_field_name("IOS10") == ["IOS", "10"]
    assert split_field_name("databaseCert") == ["database", "Cert"]


def test_field_name_without_words_raises():
    with pytest.raises(FieldNameError) as exc_info:
        field_name_to_env_var("PREFIX_", "__")

    assert exc_info.value.field_name == "__"
    # Reported as a specification problem, not a value problem
    assert isinstance(exc_info.value, InvalidSpecificationError)
