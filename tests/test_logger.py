"""Tests for the loggers."""

import io

from rich.console import Console

from pyhusky.core.logger import ConsoleLogger, MemoryLogger


def make_logger(prefix="husky"):
    out, err = io.StringIO(), io.StringIO()
    logger = ConsoleLogger(
        prefix=prefix,
        stdout=Console(file=out, color_system=None),
        stderr=Console(file=err, color_system=None),
    )
    return logger, out, err


def test_log_goes_to_stdout():
    logger, out, err = make_logger()

    logger.log("Git hooks installed")

    assert out.getvalue() == "husky - Git hooks installed\n"
    assert err.getvalue() == ""


def test_warn_and_error_go_to_stderr():
    logger, out, err = make_logger()

    logger.warn("careful")
    logger.error("Git hooks failed to install")

    assert out.getvalue() == ""
    assert err.getvalue() == "husky - careful\nhusky - Git hooks failed to install\n"


def test_messages_are_not_rendered_as_markup():
    logger, out, _ = make_logger()

    logger.log("created [bold].husky/pre-commit[/bold]")

    assert out.getvalue() == "husky - created [bold].husky/pre-commit[/bold]\n"


def test_custom_prefix():
    logger, out, _ = make_logger(prefix="hooks")

    logger.log("hi")

    assert out.getvalue() == "hooks - hi\n"


def test_long_messages_are_not_wrapped():
    logger, out, _ = make_logger()
    message = "created " + "x" * 300

    logger.log(message)

    assert out.getvalue() == f"husky - {message}\n"


def test_default_consoles_use_process_streams(capsys):
    logger = ConsoleLogger()

    logger.log("to stdout")
    logger.error("to stderr")

    captured = capsys.readouterr()
    assert "husky - to stdout" in captured.out
    assert "husky - to stderr" in captured.err


def test_memory_logger():
    logger = MemoryLogger()

    logger.log("a")
    logger.warn("b")
    logger.error("c")

    assert logger.records == [("log", "a"), ("warn", "b"), ("error", "c")]
    assert logger.messages() == ["a", "b", "c"]
    assert logger.messages("error") == ["c"]
