# Clade CLI Framework — (c) 2025 rtj.dev LLC — MIT Licensed
"""
This module implements `Parser`, which resolves one level of a Clade command tree.

Given a `Command` and an argument list, `Parser.parse()`:

1. Builds the table of complete option forms, failing on collisions before any
   token is consumed.
2. Scans the arguments in order with `OptionScanner`, coercing and storing option
   values on the command's `Option` instances.
3. Hands every positional token to `find_command()`, which matches it as a prefix
   of the command's children (with `head:tail` join syntax). The first match stops
   the scan; unmatched tokens become the command's arguments.
4. Checks required options when no subcommand was matched.

It returns a `CommandMatch(name, args)` telling the caller which child to parse
next with which arguments, or None when the given command itself should run.

Example Usage:
    parser = Parser()
    match = parser.parse(application, ["-v", "m:a", "file.txt"])
    # match == CommandMatch(name="manage", args=["a", "file.txt"])

    match = parser.parse(application.commands["manage"], match.args)
    # match == CommandMatch(name="add", args=["file.txt"])

The parser mutates the tree it is given and keeps no state between calls.
"""
from __future__ import annotations

import copy
from dataclasses import dataclass, field
from typing import Any, Callable, Sequence

from clade.command import Command
from clade.exceptions import CommandError, ErrorReason, build_error
from clade.logger import logger
from clade.messages import Messages
from clade.option import Option, OptionType
from clade.parser.scanner import OptionScanner, ScanError
from clade.parser.utils import coerce_array, coerce_float, coerce_integer
from clade.utils import smart_join

ErrorFactory = Callable[[Any, ErrorReason, str], CommandError]


@dataclass(frozen=True)
class CommandMatch:
    """A resolved subcommand and the arguments to parse it with."""

    name: str
    args: list[str] = field(default_factory=list)


class Parser:
    """
    Resolves option values and the next subcommand for one command.

    Args:
        messages (Messages | None): Provider of error texts.
        error_factory (ErrorFactory | None): Builds the exception for a failure from
            `(target, reason, message)`. Defaults to `build_error`.
        separator (str): Separator of the `command:subcommand` join syntax.
    """

    def __init__(
        self,
        messages: Messages | None = None,
        error_factory: ErrorFactory | None = None,
        separator: str = ":",
    ) -> None:
        self.messages: Messages = messages or Messages()
        self.error_factory: ErrorFactory = error_factory or build_error
        self.separator: str = separator

    def _fail(self, target: Any, reason: ErrorReason, message: str) -> CommandError:
        return self.error_factory(target, reason, message)

    def find_command(
        self,
        token: str,
        command: Command,
        args: Sequence[str] | None = None,
        separator: str | None = None,
    ) -> CommandMatch | None:
        """
        Match a token against the names of a command's children.

        Args:
            token (str): The token to match, possibly `head<separator>tail`.
            command (Command): The command whose children are searched.
            args (Sequence[str] | None): The tokens following `token`.
            separator (str | None): Join syntax separator, defaults to the parser's.

        Returns:
            CommandMatch | None: The single child whose name starts with the token,
            with the forwarded arguments, or None if no child matches.

        Raises:
            AmbiguousCommandError: If more than one child matches.
        """
        if not command.commands:
            return None

        separator = self.separator if separator is None else separator
        forwarded = list(args or [])
        if separator and separator in token:
            token, tail = token.split(separator, 1)
            forwarded.insert(0, tail)

        matching = [name for name in command.commands if name.startswith(token)]
        if len(matching) == 1:
            logger.debug(
                "[Command:%s] Resolved '%s' to subcommand '%s'.",
                command.name,
                token,
                matching[0],
            )
            return CommandMatch(name=matching[0], args=forwarded)
        if len(matching) > 1:
            alternatives = smart_join(
                matching, ", ", self.messages.join_separator, quote='"'
            )
            raise self._fail(
                command,
                ErrorReason.AMBIGUOUS_COMMAND,
                self.messages.ambiguous_command(token, alternatives),
            )
        return None

    def parse(self, command: Command, args: Sequence[str] | None) -> CommandMatch | None:
        """
        Parse the arguments of one command.

        Args:
            command (Command): The command being invoked.
            args (Sequence[str] | None): Its arguments.

        Returns:
            CommandMatch | None: The subcommand to descend into, or None if
            `command` itself should run with `command.arguments`.

        Raises:
            CommandError: On conflicting forms, malformed flags, invalid values,
                ambiguous subcommands or missing required options.
        """
        args = list(args or [])
        command.clear_arguments()
        forms = self._build_forms(command)

        if command.options:
            match = self._parse_options(command, args, forms)
            if match is None:
                self._check_required_options(command)
            return match

        if args:
            return self._find_command_to_execute(command, args)
        return None

    def _build_forms(self, command: Command) -> dict[str, Option]:
        forms: dict[str, Option] = {}
        for option in command.options.values():
            for form in option.forms:
                if form in forms:
                    raise self._fail(
                        command,
                        ErrorReason.AMBIGUOUS_FORM,
                        self.messages.conflicting_options(option.label, forms[form].label),
                    )
            duplicate = copy.copy(option)
            for form in option.forms:
                forms[form] = duplicate
        return forms

    def _build_scanner(self, command: Command) -> OptionScanner:
        scanner = OptionScanner()
        for option in command.options.values():
            handler = self._get_handler(option)
            for form in option.forms:
                scanner.on(form, option.type.takes_value, handler)

        for option in command.options.values():
            if option.type == OptionType.BOOLEAN and option.long:
                negated = f"--no-{option.long}"
                if not scanner.has(negated):
                    scanner.on(negated, False, self._get_negated_handler(option))
        return scanner

    def _get_handler(self, option: Option) -> Callable[[str | None], None]:
        if option.type == OptionType.ACTION:

            def handler(_: str | None) -> None:
                option.execute_action()

        elif option.type == OptionType.BOOLEAN:

            def handler(_: str | None) -> None:
                option.set(True)

        elif option.type == OptionType.STRING:

            def handler(value: str | None) -> None:
                self._store(option, value, value)

        elif option.type == OptionType.INTEGER:

            def handler(value: str | None) -> None:
                try:
                    coerced = coerce_integer(value)
                except ValueError as error:
                    raise self._fail(
                        option,
                        ErrorReason.INVALID_INTEGER,
                        self.messages.invalid_integer(option.label),
                    ) from error
                self._store(option, coerced, value)

        elif option.type == OptionType.FLOAT:

            def handler(value: str | None) -> None:
                try:
                    coerced = coerce_float(value)
                except ValueError as error:
                    raise self._fail(
                        option,
                        ErrorReason.INVALID_FLOAT,
                        self.messages.invalid_float(option.label),
                    ) from error
                self._store(option, coerced, value)

        elif option.type == OptionType.ARRAY:

            def handler(value: str | None) -> None:
                self._store(option, coerce_array(value), value)

        else:
            raise ValueError(f"Unhandled option type: {option.type}")

        return handler

    def _get_negated_handler(self, option: Option) -> Callable[[str | None], None]:
        def handler(_: str | None) -> None:
            option.set(False)

        return handler

    def _store(self, option: Option, value: Any, raw: str | None) -> None:
        values = value if option.type == OptionType.ARRAY else [value]
        for item in values:
            if not option.accepts(item):
                raise self._fail(
                    option,
                    ErrorReason.INVALID_OPTION,
                    self.messages.invalid_value(option.label, raw),
                )
        option.set(value)

    def _get_scan_message(self, error: ScanError) -> str:
        if error.reason == ErrorReason.MISSING_ARGUMENT:
            return self.messages.missing_argument(error.flag)
        if error.reason == ErrorReason.NEEDLESS_ARGUMENT:
            return self.messages.needless_argument(error.flag)
        if error.alternatives:
            return self.messages.ambiguous_option(
                error.flag,
                smart_join(error.alternatives, ", ", self.messages.join_separator),
            )
        return self.messages.invalid_option(error.flag)

    def _parse_options(
        self, command: Command, args: list[str], forms: dict[str, Option]
    ) -> CommandMatch | None:
        scanner = self._build_scanner(command)
        match: CommandMatch | None = None

        def on_positional(token: str, remaining: list[str]) -> bool:
            nonlocal match
            match = self.find_command(token, command, remaining)
            if match is not None:
                return True
            command.argument(token)
            return False

        try:
            trailing = scanner.scan(args, on_positional)
        except ScanError as error:
            raise self._fail(
                forms.get(error.flag, command),
                error.reason,
                self._get_scan_message(error),
            ) from error

        for token in trailing:
            command.argument(token)
        return match

    def _check_required_options(self, command: Command) -> None:
        for option in command.options.values():
            if option.required and not option.provided:
                raise self._fail(
                    option,
                    ErrorReason.MISSING_OPTION,
                    self.messages.missing_option(option.label),
                )

    def _find_command_to_execute(
        self, command: Command, args: list[str]
    ) -> CommandMatch | None:
        match = self.find_command(args[0], command, args[1:])
        if match is not None:
            return match
        for arg in args:
            command.argument(arg)
        return None


def parse(command: Command, args: Sequence[str] | None) -> CommandMatch | None:
    """Parse one command level with a default `Parser`."""
    return Parser().parse(command, args)


def find_command(
    token: str,
    command: Command,
    args: Sequence[str] | None = None,
    separator: str = ":",
) -> CommandMatch | None:
    """Match a subcommand with a default `Parser`."""
    return Parser(separator=separator).find_command(token, command, args)
