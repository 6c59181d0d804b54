import logging

import pytest

from clade.command import Command
from clade.exceptions import (
    AmbiguousCommandError,
    AmbiguousFormError,
    ErrorReason,
    InvalidOptionError,
    MissingOptionError,
)
from clade.parser import CommandMatch, Parser, parse


# --- Fixtures ---
@pytest.fixture
def parser():
    return Parser()


@pytest.fixture
def root():
    command = Command("root")
    command.option("verbose", help="Print more output.")
    manage = command.command("manage")
    manage.option("force", ["f", "force"])
    manage.command("add")
    manage.command("remove")
    return command


# --- Tests ---
def test_options_before_subcommand(parser, root):
    match = parser.parse(root, ["-v", "manage", "-x"])
    assert match == CommandMatch("manage", ["-x"])
    assert root.options["verbose"].value is True
    assert root.arguments == []


def test_tokens_after_match_are_not_scanned(parser, root):
    match = parser.parse(root, ["manage", "-v"])
    assert match == CommandMatch("manage", ["-v"])
    assert root.options["verbose"].provided is False


def test_unmatched_tokens_become_arguments(parser, root):
    match = parser.parse(root, ["file", "-v", "other", "manage"])
    assert match == CommandMatch("manage", [])
    assert root.arguments == ["file", "other"]
    assert root.options["verbose"].value is True


def test_no_subcommand_returns_none(parser):
    command = Command("leaf")
    command.option("verbose")
    assert parser.parse(command, ["a", "-v", "b"]) is None
    assert command.arguments == ["a", "b"]


def test_arguments_reset_on_every_parse(parser):
    command = Command("leaf")
    parser.parse(command, ["a"])
    parser.parse(command, ["b"])
    assert command.arguments == ["b"]


def test_without_options_only_first_arg_is_resolved(parser):
    command = Command("root")
    command.command("add")

    assert parser.parse(command, ["a", "x"]) == CommandMatch("add", ["x"])
    assert parser.parse(command, ["x", "add"]) is None
    assert command.arguments == ["x", "add"]


def test_with_options_every_positional_is_resolved(parser):
    command = Command("root")
    command.option("verbose")
    command.command("add")

    assert parser.parse(command, ["x", "add"]) == CommandMatch("add", [])
    assert command.arguments == ["x"]


def test_empty_args(parser, root):
    assert parser.parse(root, []) is None
    assert parser.parse(root, None) is None
    assert root.arguments == []


def test_form_collision_raises_before_scanning(parser):
    command = Command("root")
    command.option("foo", ["f", "foo"])
    command.option("fun", ["f", "fun"])

    with pytest.raises(AmbiguousFormError) as excinfo:
        parser.parse(command, ["--foo"])

    error = excinfo.value
    assert error.reason is ErrorReason.AMBIGUOUS_FORM
    assert error.target is command
    assert error.message == "Options -f/--fun and -f/--foo have conflicting forms."
    assert command.options["foo"].provided is False


def test_form_collision_on_long_form(parser):
    command = Command("root")
    command.option("first", ["a", "same"])
    command.option("second", ["b", "same"])

    with pytest.raises(AmbiguousFormError):
        parser.parse(command, [])


def test_required_option_missing(parser):
    command = Command("root")
    command.option("name", type=str, required=True)

    with pytest.raises(MissingOptionError) as excinfo:
        parser.parse(command, ["file"])

    error = excinfo.value
    assert error.reason is ErrorReason.MISSING_OPTION
    assert error.target is command.options["name"]
    assert error.message == "Required option -n/--name is missing."


def test_required_checked_after_full_scan(parser):
    command = Command("root")
    command.option("name", type=str, required=True)
    assert parser.parse(command, ["file", "--name", "x"]) is None
    assert command.options["name"].value == "x"
    assert command.arguments == ["file"]


def test_first_missing_required_option_is_reported(parser):
    command = Command("root")
    command.option("alpha", type=str, required=True)
    command.option("beta", type=str, required=True)

    with pytest.raises(MissingOptionError) as excinfo:
        parser.parse(command, [])
    assert excinfo.value.target.name == "alpha"

    with pytest.raises(MissingOptionError) as excinfo:
        parser.parse(command, ["--alpha", "x"])
    assert excinfo.value.target.name == "beta"


def test_required_skipped_when_subcommand_matches(parser):
    command = Command("root")
    command.option("token", type=str, required=True)
    command.command("sub")
    assert parser.parse(command, ["sub"]) == CommandMatch("sub", [])


def test_ambiguous_subcommand_during_scan(parser):
    command = Command("root")
    command.option("verbose")
    command.command("add")
    command.command("addendum")

    with pytest.raises(AmbiguousCommandError):
        parser.parse(command, ["-v", "add"])
    assert command.options["verbose"].value is True


def test_double_dash_stops_resolution(parser):
    command = Command("root")
    command.option("verbose")
    command.command("add")

    assert parser.parse(command, ["-v", "--", "-x", "add"]) is None
    assert command.arguments == ["-x", "add"]


def test_single_dash_is_an_argument(parser):
    command = Command("root")
    command.option("verbose")
    assert parser.parse(command, ["-", "-v"]) is None
    assert command.arguments == ["-"]


def test_unknown_option(parser, root):
    with pytest.raises(InvalidOptionError) as excinfo:
        parser.parse(root, ["--nope"])
    assert excinfo.value.reason is ErrorReason.INVALID_OPTION
    assert excinfo.value.target is root
    assert excinfo.value.message == "Option --nope is not valid."

    with pytest.raises(InvalidOptionError) as excinfo:
        parser.parse(root, ["-z"])
    assert excinfo.value.message == "Option -z is not valid."


def test_action_option(parser):
    calls = []
    command = Command("root")
    command.option("run", action=calls.append)

    assert parser.parse(command, ["-r", "file"]) is None
    assert calls == [command]
    assert command.options["run"].provided is False
    assert command.arguments == ["file"]


def test_parser_borrows_the_tree(parser, root):
    verbose = root.options["verbose"]
    parser.parse(root, ["--verbose"])
    assert root.options["verbose"] is verbose
    assert verbose.provided is True


def test_deterministic(root):
    first = parse(root, ["-v", "m:a", "file.txt"])
    second = parse(root, ["-v", "m:a", "file.txt"])
    assert first == second == CommandMatch("manage", ["a", "file.txt"])


def test_end_to_end_descent(parser, root):
    match = parser.parse(root, ["-v", "m:a", "file.txt"])
    assert match == CommandMatch("manage", ["a", "file.txt"])

    manage = root.commands[match.name]
    match = parser.parse(manage, match.args)
    assert match == CommandMatch("add", ["file.txt"])

    add = manage.commands[match.name]
    assert parser.parse(add, match.args) is None
    assert add.arguments == ["file.txt"]
    assert root.options["verbose"].value is True
    assert manage.options["force"].value is False


def test_debug_logging(parser, root, caplog):
    caplog.set_level(logging.DEBUG, logger="clade")
    parser.parse(root, ["file", "manage"])
    assert "Recorded argument 'file'" in caplog.text
    assert "Resolved 'manage' to subcommand 'manage'" in caplog.text
