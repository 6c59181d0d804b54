import logging
import sys

import pytest
from pythonjsonlogger.json import JsonFormatter
from rich.logging import RichHandler

from clade.utils import get_program_invocation, setup_logging


# --- Fixtures ---
@pytest.fixture(autouse=True)
def restore_root_logger():
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


# --- Tests ---
def test_setup_logging_cli_mode():
    setup_logging(mode="cli")
    root = logging.getLogger()
    assert len(root.handlers) == 1
    assert isinstance(root.handlers[0], RichHandler)
    assert root.handlers[0].level == logging.WARNING


def test_setup_logging_json_mode():
    setup_logging(mode="json", console_log_level=logging.INFO)
    handler = logging.getLogger().handlers[0]
    assert isinstance(handler.formatter, JsonFormatter)
    assert handler.level == logging.INFO


def test_setup_logging_env_mode(monkeypatch):
    monkeypatch.setenv("CLADE_LOG_MODE", "json")
    setup_logging()
    assert isinstance(logging.getLogger().handlers[0].formatter, JsonFormatter)


def test_setup_logging_invalid_mode():
    with pytest.raises(ValueError) as excinfo:
        setup_logging(mode="xml")
    assert "Invalid log mode" in str(excinfo.value)


def test_setup_logging_file(tmp_path):
    path = tmp_path / "clade.log"
    setup_logging(mode="cli", log_filename=str(path))
    root = logging.getLogger()
    assert len(root.handlers) == 2

    logging.getLogger("clade").debug("Written to the file.")
    for handler in root.handlers:
        handler.flush()
    assert "Written to the file." in path.read_text()
    root.handlers[1].close()


def test_setup_logging_json_file(tmp_path):
    path = tmp_path / "clade.json"
    setup_logging(mode="cli", log_filename=str(path), json_log_to_file=True)
    file_handler = logging.getLogger().handlers[1]
    assert isinstance(file_handler.formatter, JsonFormatter)
    file_handler.close()


def test_setup_logging_stdout():
    setup_logging(mode="cli", log_filename="STDOUT")
    file_handler = logging.getLogger().handlers[1]
    assert isinstance(file_handler, logging.StreamHandler)
    assert file_handler.stream is sys.stdout


def test_get_program_invocation(monkeypatch):
    monkeypatch.setattr(sys, "argv", ["/nonexistent/tool.py"])
    monkeypatch.setattr(sys, "executable", "/usr/bin/python3")
    assert get_program_invocation() == "python /nonexistent/tool.py"

    monkeypatch.setattr(sys, "executable", "/opt/frozen/tool")
    assert get_program_invocation() == "/nonexistent/tool.py"
