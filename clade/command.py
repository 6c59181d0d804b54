# Clade CLI Framework — (c) 2025 rtj.dev LLC — MIT Licensed
"""command.py

Defines the Command class for Clade CLI.

A Command is a named node of the command tree. It owns:

- Options (`option()`), kept in declaration order
- Child commands (`command()`), declared idempotently
- The positional arguments collected while parsing its own invocation
- An optional action, run once argument resolution stops at this command

Commands are mutable: `Parser` fills option values and arguments in place, and
the action reads them back from the same instances. A tree must not be parsed by
two callers at the same time.

Example:
    app = Application(name="tool")
    manage = app.command("manage", description="Manage files.")
    manage.command("add", action=lambda command: print(command.arguments))
    manage.option("force", ["f", "force"], help="Overwrite existing files.")
"""
from __future__ import annotations

from typing import Any, Callable, Iterable, Sequence

from clade.help import CommandEntry, HelpRenderer, OptionEntry
from clade.logger import logger
from clade.option import Option, OptionType, resolve_forms


class Command:
    """
    A node of the command tree.

    Attributes:
        name (str): Name of the command, unique among its siblings.
        description (str | None): One-line description shown in help.
        banner (str | None): Text shown above the help of an application.
        synopsis (str | None): Longer text shown under the description.
        action (Callable[[Command], Any] | None): Callback run with the command.
        parent (Command | None): The command declaring this one.
        options (dict[str, Option]): Declared options, by name.
        commands (dict[str, Command]): Child commands, by name.
        arguments (list[str]): Positional arguments of the last parse.
    """

    def __init__(
        self,
        name: str = "",
        description: str | None = None,
        banner: str | None = None,
        synopsis: str | None = None,
        action: Callable[[Command], Any] | None = None,
        parent: Command | None = None,
    ) -> None:
        self.name: str = str(name)
        self.description: str | None = description
        self.banner: str | None = banner
        self.synopsis: str | None = synopsis
        self.action: Callable[[Command], Any] | None = action
        self.parent: Command | None = parent
        self.options: dict[str, Option] = {}
        self.commands: dict[str, Command] = {}
        self.arguments: list[str] = []

    @property
    def application(self) -> Command:
        """The root of the tree this command belongs to."""
        command = self
        while command.parent is not None:
            command = command.parent
        return command

    @property
    def is_application(self) -> bool:
        return self.parent is None

    def update(self, **attributes: Any) -> Command:
        """Overwrite attributes with every value that is not None."""
        for key, value in attributes.items():
            if value is not None:
                setattr(self, key, value)
        return self

    def command(
        self,
        name: str,
        description: str | None = None,
        banner: str | None = None,
        synopsis: str | None = None,
        action: Callable[[Command], Any] | None = None,
        configure: Callable[[Command], None] | None = None,
    ) -> Command:
        """
        Declare a child command, or extend it if it already exists.

        Re-declaring a name returns the existing child with the non-None attributes
        merged in, so the same path can be declared from several places.

        Args:
            name (str): Name of the child command.
            description (str | None): One-line description.
            banner (str | None): Banner text.
            synopsis (str | None): Longer help text.
            action (Callable | None): Callback run with the child command.
            configure (Callable | None): Called with the child to declare its own
                options and subcommands.

        Returns:
            Command: The child command.
        """
        name = str(name)
        child = self.commands.get(name)
        if child is None:
            child = Command(name, parent=self)
            self.commands[name] = child
            logger.debug("[Command:%s] Declared subcommand '%s'.", self.name, name)
        child.update(
            description=description, banner=banner, synopsis=synopsis, action=action
        )
        if configure is not None:
            configure(child)
        return child

    def option(
        self,
        name: str,
        forms: Sequence[str | None] | None = None,
        type: OptionType | type | str = OptionType.BOOLEAN,
        default: Any = None,
        required: bool = False,
        validator: Iterable[Any] | str | None = None,
        help: str = "",
        meta: str | None = None,
        action: Callable[[Command], Any] | None = None,
    ) -> Option:
        """
        Declare an option of this command.

        `forms` is `[short, long]`. A missing or `None` entry is derived from `name`
        (first character for the short form, the whole name for the long form); an
        empty string disables that form. Colliding forms are only reported when the
        command is parsed.

        Returns:
            Option: The declared option.
        """
        short, long = resolve_forms(str(name), forms)
        if validator is not None and not isinstance(validator, str):
            if not hasattr(validator, "search"):
                validator = list(validator)
        option = Option(
            name=str(name),
            short=short,
            long=long,
            type=type,
            default=default,
            required=required,
            validator=validator,
            help=help,
            meta=meta,
            action=action,
            parent=self,
        )
        self.options[option.name] = option
        return option

    def argument(self, value: str) -> None:
        """Record a positional argument."""
        logger.debug("[Command:%s] Recorded argument '%s'.", self.name, value)
        self.arguments.append(value)

    def clear_options(self) -> None:
        self.options.clear()

    def clear_arguments(self) -> None:
        self.arguments = []

    def has_options(self) -> bool:
        return bool(self.options)

    def has_commands(self) -> bool:
        return bool(self.commands)

    def full_name(self, separator: str = " ") -> str:
        """Names from the application's first child down to this command."""
        names = []
        command: Command | None = self
        while command is not None and command.parent is not None:
            names.append(command.name)
            command = command.parent
        return separator.join(reversed(names))

    def get_options(
        self,
        unprovided: bool = False,
        application_prefix: str | None = "application_",
        prefix: str = "",
        whitelist: Iterable[str] | None = None,
    ) -> dict[str, Any]:
        """
        Return option values by name.

        Args:
            unprovided (bool): Include options that were not supplied.
            application_prefix (str | None): For non-root commands, also include the
                application's options with this prefix. None skips them.
            prefix (str): Prefix for this command's option names.
            whitelist (Iterable[str] | None): Only include these option names.
        """
        values: dict[str, Any] = {}
        if application_prefix is not None and not self.is_application:
            values.update(
                self.application.get_options(
                    unprovided=unprovided,
                    application_prefix=None,
                    prefix=application_prefix,
                    whitelist=whitelist,
                )
            )
        allowed = set(whitelist) if whitelist is not None else None
        for name, option in self.options.items():
            if allowed is not None and name not in allowed:
                continue
            if option.provided or unprovided:
                values[f"{prefix}{name}"] = option.value
        return values

    def option_entries(self) -> list[OptionEntry]:
        """Help rows for the options, in declaration order."""
        return [
            OptionEntry(
                name=option.name,
                complete_short=option.complete_short,
                complete_long=option.complete_long,
                help=option.help,
                meta=option.meta,
                takes_value=option.type.takes_value,
                required=option.required,
                default=option.default,
            )
            for option in self.options.values()
        ]

    def command_entries(self) -> list[CommandEntry]:
        """Help rows for the subcommands, sorted by name."""
        return [
            CommandEntry(name=name, description=command.description or "")
            for name, command in sorted(self.commands.items())
        ]

    def show_help(self) -> None:
        """Display the help of this command with the application's renderer."""
        renderer = getattr(self.application, "renderer", None) or HelpRenderer()
        renderer.render(self)

    def __str__(self) -> str:
        return (
            f"Command(name='{self.name}', options={len(self.options)}, "
            f"commands={len(self.commands)})"
        )

    def __repr__(self) -> str:
        return str(self)
