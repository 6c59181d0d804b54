# Clade CLI Framework — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines all custom exception classes used in the Clade CLI framework.

Parse failures carry the object they are about (`target`, an `Option` or a
`Command`), a machine-readable `reason` and the human-readable `message` produced
by the messages provider. They are raised at the point of detection and are never
retried or recovered from inside the parser.

Exception Hierarchy:
- CladeError
    ├── ConfigurationError
    └── CommandError
        ├── AmbiguousFormError
        ├── AmbiguousCommandError
        ├── MissingOptionError
        ├── InvalidArgumentError
        │   ├── InvalidIntegerError
        │   └── InvalidFloatError
        ├── NeedlessArgumentError
        ├── MissingArgumentError
        └── InvalidOptionError

`build_error()` is the default error factory used by `Parser`.
"""
from __future__ import annotations

from enum import Enum
from typing import Any


class ErrorReason(Enum):
    """Kinds of parse failures reported by the parser."""

    AMBIGUOUS_FORM = "ambiguous_form"
    AMBIGUOUS_COMMAND = "ambiguous_command"
    MISSING_OPTION = "missing_option"
    INVALID_ARGUMENT = "invalid_argument"
    INVALID_INTEGER = "invalid_integer"
    INVALID_FLOAT = "invalid_float"
    NEEDLESS_ARGUMENT = "needless_argument"
    MISSING_ARGUMENT = "missing_argument"
    INVALID_OPTION = "invalid_option"

    def __str__(self) -> str:
        return self.value


class CladeError(Exception):
    """Base exception for the Clade framework."""


class ConfigurationError(CladeError):
    """Exception raised when a configuration file is missing or invalid."""


class CommandError(CladeError):
    """Exception raised when an argument list cannot be parsed for a command."""

    def __init__(self, target: Any, reason: ErrorReason, message: str) -> None:
        super().__init__(message)
        self.target = target
        self.reason = reason
        self.message = message

    def __repr__(self) -> str:
        return f"{type(self).__name__}(reason={self.reason}, message={self.message!r})"


class AmbiguousFormError(CommandError):
    """Two options of the same command claim the same short or long form."""


class AmbiguousCommandError(CommandError):
    """A token is a prefix of more than one subcommand name."""


class MissingOptionError(CommandError):
    """A required option was not supplied."""


class InvalidArgumentError(CommandError):
    """A supplied value cannot be coerced to the option's type."""


class InvalidIntegerError(InvalidArgumentError):
    """A supplied value is not an integer."""


class InvalidFloatError(InvalidArgumentError):
    """A supplied value is not a number."""


class NeedlessArgumentError(CommandError):
    """A value was attached to a flag that does not accept one."""


class MissingArgumentError(CommandError):
    """An option that requires a value was given none."""


class InvalidOptionError(CommandError):
    """An unknown flag, or a value rejected by the option's validator."""


_ERROR_CLASSES: dict[ErrorReason, type[CommandError]] = {
    ErrorReason.AMBIGUOUS_FORM: AmbiguousFormError,
    ErrorReason.AMBIGUOUS_COMMAND: AmbiguousCommandError,
    ErrorReason.MISSING_OPTION: MissingOptionError,
    ErrorReason.INVALID_ARGUMENT: InvalidArgumentError,
    ErrorReason.INVALID_INTEGER: InvalidIntegerError,
    ErrorReason.INVALID_FLOAT: InvalidFloatError,
    ErrorReason.NEEDLESS_ARGUMENT: NeedlessArgumentError,
    ErrorReason.MISSING_ARGUMENT: MissingArgumentError,
    ErrorReason.INVALID_OPTION: InvalidOptionError,
}


def build_error(target: Any, reason: ErrorReason, message: str) -> CommandError:
    """Return the `CommandError` subclass instance matching `reason`."""
    return _ERROR_CLASSES[reason](target, reason, message)
