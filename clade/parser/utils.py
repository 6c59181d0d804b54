# Clade CLI Framework — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Contains value coercion utilities for Clade option parsing.

Every function converts the raw string given on the command line to the Python
value stored in the option, and raises `ValueError` when the string does not
represent a value of the expected kind. The parser turns that `ValueError` into the
matching `CommandError`.

Functions:
- coerce_integer: Convert a string to an int (optional sign, decimal digits).
- coerce_float: Convert a string to a float (`.` or `,` as decimal mark).
- coerce_array: Split a comma-separated string into a list of strings.
"""
import re

_INTEGER = re.compile(r"^[+-]?\d+$")
_FLOAT = re.compile(r"^[+-]?(\d+([.,]\d*)?|[.,]\d+)([eE][+-]?\d+)?$")


def coerce_integer(value: str) -> int:
    """
    Convert a string to an integer.

    Only an optional sign followed by decimal digits is accepted, so values like
    `"1_000"` or `" 4"` that `int()` would take are rejected.

    Raises:
        ValueError: If the string is not an integer.
    """
    text = str(value)
    if not _INTEGER.match(text):
        raise ValueError(f"Value '{value}' is not a valid integer")
    return int(text)


def coerce_float(value: str) -> float:
    """
    Convert a string to a float.

    Accepts an optional sign, a `.` or `,` decimal mark and an exponent.

    Raises:
        ValueError: If the string is not a number.
    """
    text = str(value)
    if not _FLOAT.match(text):
        raise ValueError(f"Value '{value}' is not a valid number")
    return float(text.replace(",", "."))


def coerce_array(value: str) -> list[str]:
    """Split a comma-separated string; an empty string gives an empty list."""
    if isinstance(value, (list, tuple)):
        return [str(item) for item in value]
    if value == "":
        return []
    return value.split(",")
