# Clade CLI Framework — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Implements `OptionScanner`, the getopt-style primitive driven by `Parser`.

The scanner knows nothing about options or commands. It is configured with
switches (a complete form, whether it takes a value, and a handler) and walks an
argument list in order:

- `--name`, `--name=value`, `--name value`; unique prefixes of long names are
  accepted (`--verb` for `--verbose`).
- `-x`, `-xvalue`, `-x value`, and clusters of bare flags (`-abc`).
- A required value is taken from the next token even if it starts with `-`.
- `-` is a positional token; `--` ends scanning and the rest is returned as-is.
- Every positional token is handed to a callback, which may stop the scan.

Malformed input raises `ScanError` with the offending flag, which the parser
turns into a `CommandError`.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

from clade.exceptions import ErrorReason


class ScanError(Exception):
    """Raised when a token cannot be matched to a registered switch."""

    def __init__(
        self, reason: ErrorReason, flag: str, alternatives: list[str] | None = None
    ) -> None:
        super().__init__(f"{reason}: {flag}")
        self.reason = reason
        self.flag = flag
        self.alternatives = alternatives or []


@dataclass
class Switch:
    """A registered form and what to do when it is found."""

    form: str
    takes_value: bool
    handler: Callable[[str | None], None]


class OptionScanner:
    """Order-preserving, handler-driven option scanner."""

    def __init__(self) -> None:
        self._short: dict[str, Switch] = {}
        self._long: dict[str, Switch] = {}

    def on(
        self, form: str, takes_value: bool, handler: Callable[[str | None], None]
    ) -> None:
        """Register a complete form (`-x` or `--name`)."""
        switch = Switch(form=form, takes_value=takes_value, handler=handler)
        if form.startswith("--"):
            self._long[form[2:]] = switch
        elif form.startswith("-") and len(form) == 2:
            self._short[form[1]] = switch
        else:
            raise ValueError(f"Invalid switch form: '{form}'")

    def has(self, form: str) -> bool:
        if form.startswith("--"):
            return form[2:] in self._long
        return form[1:] in self._short

    def _match_long(self, name: str) -> Switch:
        if name in self._long:
            return self._long[name]
        candidates = [long for long in self._long if long.startswith(name)]
        if len(candidates) == 1:
            return self._long[candidates[0]]
        if len(candidates) > 1:
            raise ScanError(
                ErrorReason.INVALID_OPTION,
                f"--{name}",
                [f"--{candidate}" for candidate in sorted(candidates)],
            )
        raise ScanError(ErrorReason.INVALID_OPTION, f"--{name}")

    def _scan_long(self, args: list[str], i: int) -> int:
        name, separator, inline = args[i][2:].partition("=")
        if not name:
            raise ScanError(ErrorReason.INVALID_OPTION, args[i])
        switch = self._match_long(name)

        if not switch.takes_value:
            if separator:
                raise ScanError(ErrorReason.NEEDLESS_ARGUMENT, switch.form)
            switch.handler(None)
            return i + 1

        if separator:
            switch.handler(inline)
            return i + 1
        if i + 1 < len(args):
            switch.handler(args[i + 1])
            return i + 2
        raise ScanError(ErrorReason.MISSING_ARGUMENT, switch.form)

    def _scan_short(self, args: list[str], i: int) -> int:
        token = args[i]
        for j in range(1, len(token)):
            flag = f"-{token[j]}"
            switch = self._short.get(token[j])
            if switch is None:
                raise ScanError(ErrorReason.INVALID_OPTION, flag)
            if not switch.takes_value:
                if token[j + 1 : j + 2] == "=":
                    raise ScanError(ErrorReason.NEEDLESS_ARGUMENT, flag)
                switch.handler(None)
                continue

            attached = token[j + 1 :]
            if attached:
                switch.handler(attached)
                return i + 1
            if i + 1 < len(args):
                switch.handler(args[i + 1])
                return i + 2
            raise ScanError(ErrorReason.MISSING_ARGUMENT, flag)
        return i + 1

    def scan(
        self, args: list[str], on_positional: Callable[[str, list[str]], bool]
    ) -> list[str]:
        """
        Consume `args` in order.

        Args:
            args (list[str]): Tokens to scan.
            on_positional (Callable[[str, list[str]], bool]): Called with every
                positional token and the tokens after it. Returning True stops the
                scan.

        Returns:
            list[str]: The tokens following a `--` terminator, or an empty list.

        Raises:
            ScanError: On unknown flags, missing values or needless values.
        """
        i = 0
        while i < len(args):
            token = args[i]
            if token == "--":
                return args[i + 1 :]
            if token.startswith("--"):
                i = self._scan_long(args, i)
            elif token.startswith("-") and token != "-":
                i = self._scan_short(args, i)
            else:
                if on_positional(token, args[i + 1 :]):
                    return []
                i += 1
        return []
