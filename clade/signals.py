# Clade CLI Framework — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines flow control signals used internally by the Clade CLI framework.

These signals are raised by built-in action options (`--help`, `--version`) to stop
the current invocation once their output has been shown, without being treated as
traditional exceptions.

All signals inherit from `FlowSignal`, which is a subclass of `BaseException`
to ensure they bypass standard `except Exception` blocks.

Signals:
- HelpSignal: Help was displayed, nothing else should run.
- VersionSignal: The version was displayed, nothing else should run.
"""


class FlowSignal(BaseException):
    """Base class for all flow control signals in Clade.

    These are not errors. `Application.execute` turns them into a zero exit status.
    """


class HelpSignal(FlowSignal):
    """Raised after help information has been displayed."""

    def __init__(self, message: str = "Help signal received."):
        super().__init__(message)


class VersionSignal(FlowSignal):
    """Raised after the application version has been displayed."""

    def __init__(self, message: str = "Version signal received."):
        super().__init__(message)
