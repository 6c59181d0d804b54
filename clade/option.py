# Clade CLI Framework — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines `OptionType` and the `Option` dataclass used by `Command` and `Parser`.

An `Option` describes one command-line flag: its short and long forms, the type its
value is coerced to, a default, an optional validator, help metadata, and an
optional action callback. It also holds the value supplied on the command line, so
the same instance is read by the command's action once parsing is done.

Key Attributes:
- `short` / `long`: Bare forms (`"v"`, `"verbose"`); empty strings disable an axis.
- `type`: `OptionType` member deciding how the parser consumes and coerces values.
- `validator`: Allowed values (any collection) or a regular expression.
- `action`: Callback run when the flag is present (e.g. `--help`).

Options are usually created through `Command.option()`, which derives the forms.
"""
from __future__ import annotations

import re
from collections.abc import Callable, Collection, Sequence
from dataclasses import dataclass, field
from enum import Enum
from re import Pattern
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from clade.command import Command


class OptionType(Enum):
    """
    Closed set of option kinds understood by the parser.

    Members:
        STRING: Takes one value, stored verbatim.
        INTEGER: Takes one value, coerced to `int`.
        FLOAT: Takes one value, coerced to `float`.
        ARRAY: Takes one value, split on commas into a list of strings.
        BOOLEAN: Bare flag, stores `True` (`--no-<long>` stores `False`).
        ACTION: Bare flag, runs the option's callback.

    Python types and a few names are accepted as aliases:
        OptionType(int) → OptionType.INTEGER
        OptionType("list") → OptionType.ARRAY
    """

    STRING = "string"
    INTEGER = "integer"
    FLOAT = "float"
    ARRAY = "array"
    BOOLEAN = "boolean"
    ACTION = "action"

    @classmethod
    def _get_alias(cls, value: str) -> str:
        aliases = {
            "str": "string",
            "int": "integer",
            "list": "array",
            "bool": "boolean",
        }
        return aliases.get(value, value)

    @classmethod
    def _missing_(cls, value: object) -> OptionType:
        types = {
            str: cls.STRING,
            int: cls.INTEGER,
            float: cls.FLOAT,
            list: cls.ARRAY,
            tuple: cls.ARRAY,
            bool: cls.BOOLEAN,
        }
        if isinstance(value, type) and value in types:
            return types[value]
        if not isinstance(value, str):
            raise ValueError(f"Invalid {cls.__name__}: {value!r}")
        normalized = cls._get_alias(value.strip().lower())
        for member in cls:
            if member.value == normalized:
                return member
        valid = ", ".join(member.value for member in cls)
        raise ValueError(f"Invalid {cls.__name__}: '{value}'. Must be one of: {valid}")

    @property
    def takes_value(self) -> bool:
        """True if the option consumes a value from the command line."""
        return self in (
            OptionType.STRING,
            OptionType.INTEGER,
            OptionType.FLOAT,
            OptionType.ARRAY,
        )

    def __str__(self) -> str:
        return self.value


def resolve_forms(name: str, forms: Sequence[str | None] | None) -> tuple[str, str]:
    """
    Derive the bare short and long forms of an option.

    `None` (or a missing entry) derives the form from `name`: the first character for
    the short form, the whole name for the long one. An empty string disables the
    form. Leading dashes are stripped and short forms keep a single character.
    """
    forms = list(forms or [])
    forms += [None] * (2 - len(forms))
    short, long = forms[0], forms[1]

    short = name if short is None else str(short)
    long = name if long is None else str(long)

    short = short.lstrip("-")[:1]
    long = long.lstrip("-")
    return short, long


@dataclass(eq=False)
class Option:
    """
    Represents a command-line option.

    Attributes:
        name (str): Key of the option inside its command.
        short (str): Bare short form, one character or empty.
        long (str): Bare long form, or empty.
        type (OptionType): How the value is consumed and coerced.
        default (Any): Value reported until the option is supplied.
        required (bool): True if parsing must fail when the option is missing.
        validator (Collection | Pattern | None): Allowed values or a pattern.
        help (str): Help text.
        meta (str | None): Placeholder shown in help for the value.
        action (Callable | None): Callback run when the flag is present.
        parent (Command | None): Command declaring the option.
    """

    name: str
    short: str = ""
    long: str = ""
    type: OptionType = OptionType.BOOLEAN
    default: Any = None
    required: bool = False
    validator: Collection[Any] | Pattern[str] | None = None
    help: str = ""
    meta: str | None = None
    action: Callable[[Command], Any] | None = None
    parent: Command | None = field(default=None, repr=False)
    provided: bool = field(default=False, init=False)
    _value: Any = field(default=None, init=False, repr=False)

    def __post_init__(self) -> None:
        self.name = str(self.name)
        self.short = (self.short or "").lstrip("-")[:1]
        self.long = (self.long or "").lstrip("-")
        if not isinstance(self.type, OptionType):
            self.type = OptionType(self.type)
        if self.action is not None:
            self.type = OptionType.ACTION
        if isinstance(self.validator, str):
            self.validator = re.compile(self.validator)
        if self.default is None:
            if self.type == OptionType.BOOLEAN:
                self.default = False
            elif self.type == OptionType.ARRAY:
                self.default = []

    @property
    def complete_short(self) -> str:
        return f"-{self.short}" if self.short else ""

    @property
    def complete_long(self) -> str:
        return f"--{self.long}" if self.long else ""

    @property
    def forms(self) -> list[str]:
        """Complete forms of the option, empty ones excluded."""
        return [form for form in (self.complete_short, self.complete_long) if form]

    @property
    def label(self) -> str:
        """Human-readable identity used in messages (e.g. `-v/--verbose`)."""
        return "/".join(self.forms) or self.name

    @property
    def value(self) -> Any:
        """The supplied value, or the default if the option was not supplied."""
        return self._value if self.provided else self.default

    def set(self, value: Any) -> None:
        """Store a supplied value. Validation is the parser's job."""
        self._value = value
        self.provided = True

    def accepts(self, value: Any) -> bool:
        """Check a value against the validator, if any."""
        if self.validator is None:
            return True
        if isinstance(self.validator, re.Pattern):
            return self.validator.search(str(value)) is not None
        return value in self.validator

    def execute_action(self) -> Any:
        """Run the option's callback with its command, if the option has one."""
        if self.action is None:
            return None
        return self.action(self.parent)

    def __str__(self) -> str:
        return f"Option(name='{self.name}', label='{self.label}', type={self.type})"
