"""Tests for the rich-backed logger."""

from __future__ import annotations

import io

import pytest
from rich.console import Console

from ionic1.helpers.console import Logger, verbose_from_env


def _logger(verbose: bool = False) -> tuple[Logger, io.StringIO, io.StringIO]:
    out, err = io.StringIO(), io.StringIO()
    log = Logger(
        Console(file=out, width=200, color_system=None),
        Console(file=err, width=200, color_system=None),
        verbose=verbose,
    )
    return log, out, err


class TestLogger:
    def test_info_goes_to_stdout(self) -> None:
        log, out, err = _logger()
        log.info("Installing android for you.")
        assert "Installing android for you." in out.getvalue()
        assert err.getvalue() == ""

    def test_error_goes_to_stderr(self) -> None:
        log, out, err = _logger()
        log.error(RuntimeError("error occurred"))
        assert "error occurred" in err.getvalue()
        assert out.getvalue() == ""

    def test_brackets_are_not_markup(self) -> None:
        log, _, err = _logger()
        log.error("[bold]not markup[/bold]")
        assert "[bold]not markup[/bold]" in err.getvalue()

    def test_debug_only_when_verbose(self) -> None:
        quiet, quiet_out, _ = _logger()
        quiet.debug("Executing cordova cli: emulate ios")
        assert quiet_out.getvalue() == ""

        loud, loud_out, _ = _logger(verbose=True)
        loud.debug("Executing cordova cli: emulate ios")
        assert "Executing cordova cli: emulate ios" in loud_out.getvalue()


class TestVerboseFromEnv:
    @pytest.mark.parametrize("value", ["1", "true", "YES"])
    def test_truthy(self, monkeypatch: pytest.MonkeyPatch, value: str) -> None:
        monkeypatch.setenv("IONIC1_VERBOSE", value)
        assert verbose_from_env() is True

    def test_unset(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("IONIC1_VERBOSE", raising=False)
        assert verbose_from_env() is False
