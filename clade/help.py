# Clade CLI Framework — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Help structure and rich-based help rendering for Clade commands.

`Command.option_entries()` and `Command.command_entries()` return the stable,
plain-data description of a command that any help renderer can consume:

- `OptionEntry`: one row per option, in declaration order.
- `CommandEntry`: one row per subcommand, sorted by name.

`HelpRenderer` is the default consumer. It prints a usage line, the banner and
description, then aligned `options:` and `commands:` sections on a rich console.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from rich.console import Console
from rich.markup import escape

from clade.console import console as default_console
from clade.messages import Messages
from clade.utils import get_program_invocation

if TYPE_CHECKING:
    from clade.command import Command


@dataclass(frozen=True)
class OptionEntry:
    """Help row for an option."""

    name: str
    complete_short: str
    complete_long: str
    help: str
    meta: str | None
    takes_value: bool = False
    required: bool = False
    default: Any = None

    def get_flags_text(self, default_meta: str) -> str:
        """Render the flags column, e.g. `-s, --string STRING`."""
        flags = ", ".join(form for form in (self.complete_short, self.complete_long) if form)
        if self.takes_value:
            flags = f"{flags} {self.meta or default_meta}"
        return flags


@dataclass(frozen=True)
class CommandEntry:
    """Help row for a subcommand."""

    name: str
    description: str


class HelpRenderer:
    """Prints the help of a command on a rich console."""

    def __init__(
        self,
        console: Console | None = None,
        messages: Messages | None = None,
        column_width: int = 30,
    ) -> None:
        self.console: Console = console or default_console
        self.messages: Messages = messages or Messages()
        self.column_width: int = column_width

    def get_usage(self, command: Command) -> str:
        """Return the plain usage line for a command."""
        application = command.application
        program = getattr(application, "executable_name", None) or get_program_invocation()
        parts = [program]
        if command.full_name():
            parts.append(command.full_name())
        if command.options:
            parts.append(self.messages.usage_options)
        if command.commands:
            parts.append(self.messages.usage_command)
        else:
            parts.append(self.messages.usage_arguments)
        return " ".join(parts)

    def _print_row(self, left: str, right: str, style: str) -> None:
        line = f"  [{style}]{escape(left):<{self.column_width}}[/] "
        if right and len(left) > self.column_width:
            right = f"\n{'':<{self.column_width + 3}}{right}"
        self.console.print(f"{line}{escape(right)}" if right else line)

    def render(self, command: Command) -> None:
        """Print usage, banner, description, options and subcommands."""
        if command.is_application and command.banner:
            self.console.print(escape(command.banner), style="clade.banner")
            self.console.print()

        self.console.print(f"[clade.heading]usage: {escape(self.get_usage(command))}[/]\n")

        if command.description:
            self.console.print(escape(command.description))
        if command.synopsis:
            self.console.print(escape(command.synopsis), style="clade.dim")
        if command.description or command.synopsis:
            self.console.print()

        options = command.option_entries()
        if options:
            self.console.print(f"[clade.heading]{self.messages.options_heading}[/]")
            for entry in options:
                help_text = entry.help
                if entry.required:
                    help_text = f"{help_text} {self.messages.required_marker}".strip()
                self._print_row(
                    entry.get_flags_text(self.messages.help_arg), help_text, "clade.option"
                )

        subcommands = command.command_entries()
        if subcommands:
            if options:
                self.console.print()
            self.console.print(f"[clade.heading]{self.messages.commands_heading}[/]")
            for entry in subcommands:
                self._print_row(entry.name, entry.description, "clade.command")
