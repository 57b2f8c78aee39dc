"""
Conversion of resolved strings into a field's declared scalar type.

**Accepted forms** (ASCII only, no surrounding whitespace, no "_" digit
separators):
  - str: anything, verbatim.
  - bool: 1 t T TRUE true True / 0 f F FALSE false False.
  - int: optional sign, then decimal digits ("42", "-7", "010" is ten), or a
    0x / 0o / 0b prefixed hexadecimal, octal or binary literal ("0x1F").
  - float: optional sign, then decimal digits with an optional fraction and
    exponent ("2.5", ".5", "1e-3"), or inf / infinity / nan in any case.
"""

import re

from pathenvconfig.utils.errors import TypeConversionError


TRUE_STRINGS = frozenset({"1", "t", "T", "TRUE", "true", "True"})
FALSE_STRINGS = frozenset({"0", "f", "F", "FALSE", "false", "False"})

DECIMAL_INT_PATTERN = re.compile(r"[+-]?[0-9]+", re.ASCII)
PREFIXED_INT_PATTERN = re.compile(
    r"[+-]?0(?:[xX][0-9a-fA-F]+|[oO][0-7]+|[bB][01]+)", re.ASCII
)
FLOAT_PATTERN = re.compile(
    r"[+-]?(?:(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?|inf|infinity|nan)",
    re.ASCII | re.IGNORECASE,
)


def parse_bool(raw: str) -> bool:
    """
    Parse a boolean the strict way: 1/t/true and 0/f/false in their usual
    spellings. Anything else (including "yes" or " true") is rejected.

    Raises:
        ValueError: If raw is not a recognized boolean spelling.
    """
    if raw in TRUE_STRINGS:
        return True
    if raw in FALSE_STRINGS:
        return False
    raise ValueError(f"invalid boolean: {raw!r}")


def parse_int(raw: str) -> int:
    """
    Parse a decimal or 0x/0o/0b prefixed integer.

    Raises:
        ValueError: If raw is not one of the accepted forms.
    """
    if DECIMAL_INT_PATTERN.fullmatch(raw):
        return int(raw, 10)
    if PREFIXED_INT_PATTERN.fullmatch(raw):
        return int(raw, 0)
    raise ValueError(f"invalid integer: {raw!r}")


def parse_float(raw: str) -> float:
    """
    Parse a decimal float, inf/infinity or nan.

    Raises:
        ValueError: If raw is not one of the accepted forms.
    """
    if not FLOAT_PATTERN.fullmatch(raw):
        raise ValueError(f"invalid float: {raw!r}")
    return float(raw)


CONVERTERS = {
    str: str,
    bool: parse_bool,
    int: parse_int,
    float: parse_float,
}


def convert_value(variable_name: str, raw: str, target_type):
    """
    Convert a resolved string into target_type.

    Strings are returned verbatim. Other scalars must match the forms listed
    in the module docstring exactly. Types without a converter (lists, dicts,
    arbitrary classes) always fail, since only scalars can be bound.

    Args:
        variable_name: Variable the value came from (for the error message).
        raw: Resolved string value.
        target_type: One of str, bool, int, float.

    Returns:
        The converted value.

    Raises:
        TypeConversionError: If there is no converter or conversion fails.
    """
    converter = CONVERTERS.get(target_type)
    if converter is None:
        raise TypeConversionError(variable_name, target_type, raw)

    try:
        return converter(raw)
    except ValueError as e:
        raise TypeConversionError(variable_name, target_type, raw) from e
