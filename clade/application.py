# Clade CLI Framework — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Main class for declaring and running Clade command-line applications.

An `Application` is the root `Command` of a tree. It owns the collaborators shared by
the whole tree (console, messages provider, parser and help renderer) and drives the
caller loop:

1. `Parser.parse()` the current command with the remaining arguments.
2. If a subcommand was matched, descend into it with the forwarded arguments.
3. Otherwise run the current command's action with its collected arguments.

It also provides:

- `help_option()`: a `help` command and `-h/--help` option
- `version_option()`: a `--version` option printing `<name> v<version>`
- `run()`: execution with `❌` error reporting and process exit status
- `create()`: one-call declaration and execution

Example:
    def configure(app: Application) -> None:
        app.option("verbose", help="Print more output.")
        manage = app.command("manage", description="Manage files.")
        manage.command("add", action=lambda command: print(command.arguments))

    Application.create(configure, name="tool", version="1.0.0")
"""
from __future__ import annotations

import shlex
import sys
from typing import Any, Callable, Sequence

from rich.console import Console
from rich.markup import escape

from clade.command import Command
from clade.console import console as default_console
from clade.exceptions import CommandError
from clade.help import HelpRenderer
from clade.logger import logger
from clade.messages import Messages
from clade.parser import Parser
from clade.signals import HelpSignal, VersionSignal
from clade.utils import get_program_invocation


class Application(Command):
    """
    Root command of a Clade command tree.

    Args:
        name (str): Name of the application, used in the version line.
        description (str | None): One-line description shown in help.
        banner (str | None): Text shown above the help.
        synopsis (str | None): Longer text shown under the description.
        version (str | None): Version shown by `--version`.
        console (Console | None): Rich console for help, version and errors.
        messages (Messages | None): Provider of user-facing strings.
        parser (Parser | None): Parser used for every level of the tree.
        renderer (HelpRenderer | None): Help renderer used by `show_help()`.
        action (Callable | None): Action run when no subcommand is given.
        executable_name (str | None): Program name shown in usage lines. Defaults to
            the invocation of the running program.
    """

    def __init__(
        self,
        name: str = "",
        description: str | None = None,
        banner: str | None = None,
        synopsis: str | None = None,
        version: str | None = None,
        console: Console | None = None,
        messages: Messages | None = None,
        parser: Parser | None = None,
        renderer: HelpRenderer | None = None,
        action: Callable[[Command], Any] | None = None,
        executable_name: str | None = None,
    ) -> None:
        super().__init__(
            name=name,
            description=description,
            banner=banner,
            synopsis=synopsis,
            action=action,
        )
        self.version: str | None = version
        self.console: Console = console or default_console
        self.messages: Messages = messages or Messages()
        self.parser: Parser = parser or Parser(messages=self.messages)
        self.renderer: HelpRenderer = renderer or HelpRenderer(
            console=self.console, messages=self.messages
        )
        self._executable_name: str | None = executable_name

    @property
    def executable_name(self) -> str:
        return self._executable_name or get_program_invocation()

    def help_option(self) -> None:
        """Declare the `help` command and the `-h/--help` option."""
        self.command(
            "help",
            description=self.messages.help_command,
            action=self.command_help,
        )
        self.option(
            "help",
            ["h", "help"],
            help=self.messages.help_option,
            action=self._show_help,
        )

    def version_option(self) -> None:
        """Declare the `--version` option."""
        self.option(
            "version",
            ["", "version"],
            help=self.messages.version_option,
            action=self._show_version,
        )

    def _show_help(self, command: Command) -> None:
        command.show_help()
        raise HelpSignal()

    def _show_version(self, _: Command) -> None:
        version = escape(f"{self.name} v{self.version}")
        self.console.print(f"[clade.version]{version}[/]")
        raise VersionSignal()

    def command_help(self, command: Command) -> int:
        """
        Show the help of the command named by `command.arguments`.

        The names are resolved from the application down, with the same prefix
        matching as the parser. Resolution stops at the first name that matches no
        subcommand, and the help of the deepest resolved command is shown.
        """
        target: Command = self
        names = list(command.arguments)
        while names:
            match = self.parser.find_command(names[0], target, names[1:])
            if match is None:
                break
            target = target.commands[match.name]
            names = match.args
        target.show_help()
        return 0

    def resolve(self, args: Sequence[str]) -> Command:
        """Parse the tree level by level and return the command to execute."""
        command: Command = self
        args = list(args)
        while True:
            match = self.parser.parse(command, args)
            if match is None:
                return command
            command = command.commands[match.name]
            args = match.args
            logger.debug(
                "[Application:%s] Descending into '%s' with %s.",
                self.name,
                command.full_name(),
                args,
            )

    def execute(self, args: Sequence[str] | str | None = None) -> int:
        """
        Resolve and run a command.

        Args:
            args (Sequence[str] | str | None): Arguments to parse. A string is split
                like a shell would, None reads `sys.argv[1:]`.

        Returns:
            int: Status returned by the action, 0 when it returns anything else.

        Raises:
            CommandError: If the arguments cannot be parsed.
        """
        if args is None:
            args = sys.argv[1:]
        elif isinstance(args, str):
            args = shlex.split(args)

        try:
            command = self.resolve(args)
            if command.action is None:
                if command.has_commands():
                    command.show_help()
                else:
                    logger.debug("[Command:%s] Nothing to execute.", command.name)
                return 0
            logger.debug(
                "[Command:%s] Executing with arguments %s.", command.name, command.arguments
            )
            status = command.action(command)
        except (HelpSignal, VersionSignal) as signal:
            logger.debug("[%s] <- Stopping execution.", type(signal).__name__)
            return 0

        if isinstance(status, bool) or not isinstance(status, int):
            return 0
        return status

    def dispatch(self, args: Sequence[str] | str | None = None) -> int:
        """Execute and report parse errors on the console instead of raising them."""
        try:
            return self.execute(args)
        except CommandError as error:
            logger.debug("[%s] %s", type(error).__name__, error.message)
            self.console.print(f"[clade.error]❌ {escape(error.message)}[/]")
            return 1
        except KeyboardInterrupt:
            logger.info("[KeyboardInterrupt]. <- Exiting run.")
            return 130

    def run(self, args: Sequence[str] | str | None = None) -> None:
        """Execute and exit the process with the resulting status."""
        sys.exit(self.dispatch(args))

    @classmethod
    def create(
        cls,
        configure: Callable[[Application], None] | None = None,
        args: Sequence[str] | str | None = None,
        run: bool = True,
        **kwargs: Any,
    ) -> Application:
        """
        Declare an application and execute it.

        The application gets the help options (and the version option when a
        `version` is given), then `configure(application)` declares the rest of the
        tree. Unless `run` is False, the arguments are executed right away; a
        non-zero status exits the process.

        Returns:
            Application: The declared application.
        """
        application = cls(**kwargs)
        application.help_option()
        if application.version is not None:
            application.version_option()
        if configure is not None:
            configure(application)

        if run:
            status = application.dispatch(args)
            if status:
                sys.exit(status)
        return application

    def __str__(self) -> str:
        return (
            f"Application(name='{self.name}', version={self.version!r}, "
            f"options={len(self.options)}, commands={len(self.commands)})"
        )

