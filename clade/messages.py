# Clade CLI Framework — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines `Messages`, the provider of every user-facing string the framework emits.

The parser never formats error text itself: it asks its `Messages` instance for the
sentence matching an error kind and hands it to the error factory. Applications that
want different wording subclass `Messages` (or pass any object with the same
methods) to `Parser`, `HelpRenderer` and `Application`.

Only English strings are shipped; translation catalogues are out of scope.
"""
from __future__ import annotations


class Messages:
    """English message provider."""

    join_separator: str = " and "
    help_arg: str = "ARG"
    help_option: str = "Shows this message."
    help_command: str = "Shows a help about a command."
    version_option: str = "Shows the version and exits."
    usage_options: str = "[OPTIONS]"
    usage_command: str = "[COMMAND]"
    usage_arguments: str = "[ARGUMENTS]"
    options_heading: str = "options:"
    commands_heading: str = "commands:"
    required_marker: str = "(required)"

    def ambiguous_command(self, token: str, alternatives: str) -> str:
        return f"Command shortcut '{token}' is ambiguous across commands {alternatives}."

    def conflicting_options(self, label: str, other_label: str) -> str:
        return f"Options {label} and {other_label} have conflicting forms."

    def missing_option(self, label: str) -> str:
        return f"Required option {label} is missing."

    def invalid_integer(self, label: str) -> str:
        return f"Option {label} expects a valid integer as argument."

    def invalid_float(self, label: str) -> str:
        return f"Option {label} expects a valid floating number as argument."

    def invalid_value(self, label: str, value: str) -> str:
        return f"Option {label} does not accept the value '{value}'."

    def invalid_option(self, flag: str) -> str:
        return f"Option {flag} is not valid."

    def ambiguous_option(self, flag: str, alternatives: str) -> str:
        return f"Option {flag} is ambiguous across options {alternatives}."

    def missing_argument(self, flag: str) -> str:
        return f"Option {flag} requires an argument."

    def needless_argument(self, flag: str) -> str:
        return f"Option {flag} does not expect an argument."

    def configuration_not_found(self, path: str) -> str:
        return f"Configuration file {path} does not exist or is not readable."

    def configuration_invalid(self, path: str) -> str:
        return f"Configuration file {path} is not valid."

    def using_configuration(self, path: str) -> str:
        return f"Using configuration file {path}."
