# Clade CLI Framework — (c) 2025 rtj.dev LLC — MIT Licensed
"""utils.py"""
from __future__ import annotations

import logging
import os
import shutil
import sys
from collections.abc import Iterable
from typing import Any

import pythonjsonlogger.json
from rich.logging import RichHandler


def get_program_invocation() -> str:
    """Returns the recommended program invocation prefix."""
    script = sys.argv[0]
    program = shutil.which(script)
    if program:
        return os.path.basename(program)

    executable = sys.executable
    if "python" in executable:
        return f"python {script}"
    return script


def smart_join(
    items: Iterable[Any] | Any,
    separator: str = ", ",
    last_separator: str = " and ",
    quote: str | None = None,
) -> str:
    """
    Join items into prose, using a distinct separator before the last item.

    Args:
        items (Iterable | Any): Items to join. A string or any non-iterable value
            is treated as a single item.
        separator (str): Separator between all but the last two items.
        last_separator (str): Separator before the last item.
        quote (str | None): If set, wraps every item on both sides.

    Returns:
        str: The joined text.

    Example:
        smart_join(["a", "b", "c"], quote='"') → '"a", "b" and "c"'
    """
    if isinstance(items, (str, bytes)) or not isinstance(items, Iterable):
        items = [items]
    texts = [f"{quote}{item}{quote}" if quote else str(item) for item in items]
    if len(texts) < 2:
        return texts[0] if texts else ""
    return separator.join(texts[:-1]) + last_separator + texts[-1]


def running_in_container() -> bool:
    try:
        with open("/proc/1/cgroup", "r", encoding="UTF-8") as f:
            content = f.read()
            return (
                "docker" in content
                or "kubepods" in content
                or "containerd" in content
                or "podman" in content
            )
    except OSError:
        return False


def _get_file_handler(log_filename: str) -> logging.Handler:
    if log_filename == "STDOUT":
        return logging.StreamHandler(sys.stdout)
    if log_filename == "STDERR":
        return logging.StreamHandler(sys.stderr)
    return logging.FileHandler(log_filename, "a", "UTF-8")


def setup_logging(
    mode: str | None = None,
    log_filename: str | None = None,
    json_log_to_file: bool = False,
    file_log_level: int = logging.DEBUG,
    console_log_level: int = logging.WARNING,
):
    """
    Configure logging for Clade with support for both CLI-friendly and structured
    JSON output.

    This function sets up a console handler and an optional file handler, with
    optional support for JSON formatting. It also auto-detects whether the
    application is running inside a container to default to machine-readable logs
    when appropriate.

    Args:
        mode (str | None):
            Logging output mode. Can be:
                - "cli": human-readable Rich console logs (default outside containers)
                - "json": machine-readable JSON logs (default inside containers)
            If not provided, it will use the `CLADE_LOG_MODE` environment variable
            or fallback based on container detection.
        log_filename (str | None):
            Path to the log file. "STDOUT" and "STDERR" select the standard
            streams. No file handler is added when None.
        json_log_to_file (bool):
            Whether to format file logs as JSON (structured) instead of plain text.
        file_log_level (int):
            Logging level for file output. Defaults to `logging.DEBUG`.
        console_log_level (int):
            Logging level for console output. Defaults to `logging.WARNING`.

    Raises:
        ValueError: If an invalid logging `mode` is passed.

    Environment Variables:
        CLADE_LOG_MODE: Can override `mode` to enforce "cli" or "json" logging behavior.
    """
    if not mode:
        mode = os.getenv("CLADE_LOG_MODE") or (
            "json" if running_in_container() else "cli"
        )

    root = logging.getLogger()
    root.setLevel(logging.DEBUG)
    if root.hasHandlers():
        root.handlers.clear()

    if mode == "cli":
        console_handler: RichHandler | logging.StreamHandler = RichHandler(
            rich_tracebacks=True,
            show_time=True,
            show_level=True,
            show_path=False,
            markup=True,
            log_time_format="[%Y-%m-%d %H:%M:%S]",
        )
    elif mode == "json":
        console_handler = logging.StreamHandler()
        console_handler.setFormatter(
            pythonjsonlogger.json.JsonFormatter(
                "%(asctime)s %(name)s %(levelname)s %(message)s"
            )
        )
    else:
        raise ValueError(f"Invalid log mode: {mode}")

    console_handler.setLevel(console_log_level)
    root.addHandler(console_handler)

    if log_filename:
        file_handler = _get_file_handler(log_filename)
        file_handler.setLevel(file_log_level)
        if json_log_to_file:
            file_handler.setFormatter(
                pythonjsonlogger.json.JsonFormatter(
                    "%(asctime)s %(name)s %(levelname)s %(message)s"
                )
            )
        else:
            file_handler.setFormatter(
                logging.Formatter(
                    "%(asctime)s [%(name)s] [%(levelname)s] %(message)s",
                    datefmt="%Y-%m-%d %H:%M:%S",
                )
            )
        root.addHandler(file_handler)

    logger = logging.getLogger("clade")
    logger.propagate = True
    logger.debug("Logging initialized in '%s' mode.", mode)
