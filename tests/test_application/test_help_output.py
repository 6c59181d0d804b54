import pytest
from rich.console import Console

from clade.application import Application
from clade.help import HelpRenderer
from clade.themes import get_theme


# --- Fixtures ---
@pytest.fixture
def console():
    return Console(theme=get_theme(), width=200, color_system=None)


@pytest.fixture
def app(console):
    application = Application(
        name="tool",
        description="Manage a workspace.",
        banner="Tool 1.0",
        console=console,
        executable_name="tool",
    )
    application.help_option()
    application.option("verbose", help="Print more output.")
    application.option("output", ["o", "output"], type=str, meta="FILE", help="Write here.")
    application.option("name", ["", "name"], type=str, required=True, help="Your name.")

    manage = application.command("manage", description="Manage files.")
    manage.command("add", description="Add files.", synopsis="Adds files to the index.")
    manage.command("remove", description="Remove files.")
    return application


# --- Tests ---
def test_help_flag(app, capsys):
    assert app.execute(["-h"]) == 0
    out = capsys.readouterr().out
    assert "Tool 1.0" in out
    assert "usage: tool [OPTIONS] [COMMAND]" in out
    assert "Manage a workspace." in out
    assert "options:" in out
    assert "commands:" in out


def test_help_flag_skips_required_check(app, capsys):
    assert app.execute(["--help"]) == 0
    assert "usage: tool" in capsys.readouterr().out


def test_help_options_section(app, capsys):
    app.execute(["-h"])
    lines = capsys.readouterr().out.splitlines()

    verbose = next(line for line in lines if "--verbose" in line)
    assert verbose.startswith("  -v, --verbose")
    assert verbose.endswith("Print more output.")
    assert verbose.index("Print more output.") == 33

    output = next(line for line in lines if "--output" in line)
    assert "-o, --output FILE" in output

    name = next(line for line in lines if "--name" in line)
    assert "--name ARG" in name
    assert name.endswith("Your name. (required)")


def test_help_commands_section_sorted(app, capsys):
    app.execute(["-h"])
    out = capsys.readouterr().out
    commands = out[out.index("commands:") :]
    assert commands.index("help") < commands.index("manage")
    assert "Shows a help about a command." in commands
    assert "Manage files." in commands


def test_help_command(app, capsys):
    assert app.execute(["help", "manage"]) == 0
    out = capsys.readouterr().out
    assert "usage: tool manage [COMMAND]" in out
    assert "Manage files." in out
    assert "Tool 1.0" not in out


def test_help_command_nested_and_prefixed(app, capsys):
    assert app.execute(["help", "m", "a"]) == 0
    out = capsys.readouterr().out
    assert "usage: tool manage add [ARGUMENTS]" in out
    assert "Adds files to the index." in out


def test_help_command_join_syntax(app, capsys):
    assert app.execute(["help", "manage:add"]) == 0
    out = capsys.readouterr().out
    assert "usage: tool manage add [ARGUMENTS]" in out
    assert "Adds files to the index." in out

    app.execute(["help", "m:r"])
    assert "usage: tool manage remove [ARGUMENTS]" in capsys.readouterr().out


def test_help_command_stops_at_unknown_name(app, capsys):
    app.execute(["help", "manage", "nope", "add"])
    assert "usage: tool manage [COMMAND]" in capsys.readouterr().out


def test_command_help_walks_arguments(app, capsys):
    app.arguments = []
    app.command_help(app)
    assert "usage: tool [OPTIONS] [COMMAND]" in capsys.readouterr().out

    app.argument("manage")
    app.command_help(app)
    assert "usage: tool manage [COMMAND]" in capsys.readouterr().out

    app.argument("remove")
    app.command_help(app)
    assert "usage: tool manage remove" in capsys.readouterr().out

    app.argument("foo")
    app.command_help(app)
    assert "usage: tool manage remove" in capsys.readouterr().out


def test_show_help_uses_application_renderer(app):
    rendered = []

    class RecordingRenderer(HelpRenderer):
        def render(self, command):
            rendered.append(command)

    app.renderer = RecordingRenderer()
    app.commands["manage"].show_help()
    assert rendered == [app.commands["manage"]]


def test_long_flags_move_help_to_next_line(console, capsys):
    app = Application(name="tool", console=console, executable_name="tool")
    app.option("a-very-long-option-name-indeed", ["x", None], type=str, help="Long.")
    app.renderer.render(app)

    lines = capsys.readouterr().out.splitlines()
    index = next(i for i, line in enumerate(lines) if "--a-very-long" in line)
    assert lines[index + 1].strip() == "Long."


def test_get_usage(app):
    renderer = HelpRenderer()
    assert renderer.get_usage(app) == "tool [OPTIONS] [COMMAND]"
    add = app.commands["manage"].commands["add"]
    assert renderer.get_usage(add) == "tool manage add [ARGUMENTS]"
