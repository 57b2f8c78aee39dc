"""
Tests for pathenvconfig/binding/convert.py
"""

import pytest

from pathenvconfig.binding.convert import convert_value, parse_bool
from pathenvconfig.utils.errors import TypeConversionError


@pytest.mark.parametrize("raw", ["1", "t", "T", "TRUE", "true", "True"])
def test_parse_bool_true(raw):
    assert parse_bool(raw) is True


@pytest.mark.parametrize("raw", ["0", "f", "F", "FALSE", "false", "False"])
def test_parse_bool_false(raw):
    assert parse_bool(raw) is False


@pytest.mark.parametrize("raw", ["yes", "no", "", "tRuE", " true", "2"])
def test_parse_bool_rejects_other_spellings(raw):
    with pytest.raises(ValueError):
        parse_bool(raw)


def test_convert_string_is_verbatim():
    assert convert_value("X", "  padded \n", str) == "  padded \n"


def test_convert_int():
    assert convert_value("X", "42", int) == 42
    assert convert_value("X", "-7", int) == -7


def test_convert_float():
    assert convert_value("X", "2.5", float) == 2.5


def test_convert_failure_chains_original_error():
    with pytest.raises(TypeConversionError) as exc_info:
        convert_value("APP_PORT", "eighty", int)

    assert exc_info.value.value == "eighty"
    assert isinstance(exc_info.value.__cause__, ValueError)
    # Still catchable as a plain ValueError
    assert isinstance(exc_info.value, ValueError)


def test_convert_unsupported_type():
    with pytest.raises(TypeConversionError) as exc_info:
        convert_value("APP_HOSTS", "a,b", dict)

    assert exc_info.value.target_type is dict
    assert "dict" in str(exc_info.value)


@pytest.mark.parametrize(
    "raw, expected",
    [("0x1F", 31), ("-0x1f", -31), ("0o17", 15), ("0b101", 5), ("010", 10), ("+3", 3)],
)
def test_convert_int_accepted_forms(raw, expected):
    assert convert_value("X", raw, int) == expected


@pytest.mark.parametrize("raw", [" 3 ", "1_000", "３", "0x", "3.0", ""])
def test_convert_int_rejected_forms(raw):
    with pytest.raises(TypeConversionError):
        convert_value("X", raw, int)


@pytest.mark.parametrize("raw, expected", [(".5", 0.5), ("1e-3", 0.001), ("-2.", -2.0), ("Infinity", float("inf"))])
def test_convert_float_accepted_forms(raw, expected):
    assert convert_value("X", raw, float) == expected


def test_convert_float_nan():
    value = convert_value("X", "nan", float)
    assert value != value


@pytest.mark.parametrize("raw", [" 2.5", "1_0.5", "２.5", "e3", "."])
def test_convert_float_rejected_forms(raw):
    with pytest.raises(TypeConversionError):
        convert_value("X", raw, float)
