"""
Clade CLI Framework

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

from .parser import CommandMatch, Parser, find_command, parse
from .scanner import OptionScanner, ScanError
from .utils import coerce_array, coerce_float, coerce_integer

__all__ = [
    "CommandMatch",
    "Parser",
    "OptionScanner",
    "ScanError",
    "parse",
    "find_command",
    "coerce_array",
    "coerce_float",
    "coerce_integer",
]
