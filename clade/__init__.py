"""
Clade CLI Framework

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

import logging

from .application import Application
from .command import Command
from .configuration import Configuration
from .exceptions import CladeError, CommandError, ConfigurationError, ErrorReason
from .messages import Messages
from .option import Option, OptionType
from .parser import CommandMatch, Parser
from .version import __version__

logger = logging.getLogger("clade")


__all__ = [
    "Application",
    "Command",
    "CommandMatch",
    "Configuration",
    "CladeError",
    "CommandError",
    "ConfigurationError",
    "ErrorReason",
    "Messages",
    "Option",
    "OptionType",
    "Parser",
    "__version__",
]
