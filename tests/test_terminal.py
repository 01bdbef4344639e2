"""Test the terminal width query.

:author: Shay Hill
:created: 2026-10-19
"""

import os

import pytest

import term_justify.terminal as mod


def _terminal_of(columns: int):
    """Pretend the terminal has this many columns."""
    return lambda fd=1: os.terminal_size((columns, 24))


def _no_terminal(fd: int = 1) -> os.terminal_size:
    del fd
    msg = "Inappropriate ioctl for device"
    raise OSError(msg)


class TestGetTerminalWidth:
    def test_columns_variable(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """COLUMNS wins."""
        monkeypatch.setenv("COLUMNS", "42")
        assert mod.get_terminal_width() == 42

    def test_terminal(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("COLUMNS", raising=False)
        monkeypatch.setattr(os, "get_terminal_size", _terminal_of(57))
        assert mod.get_terminal_width() == 57

    def test_no_terminal(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Raise rather than guess."""
        monkeypatch.delenv("COLUMNS", raising=False)
        monkeypatch.setattr(os, "get_terminal_size", _no_terminal)
        with pytest.raises(mod.TerminalError):
            _ = mod.get_terminal_width()

    def test_zero_columns_variable(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """COLUMNS=0 is ignored. Still raise when there is no terminal."""
        monkeypatch.setenv("COLUMNS", "0")
        monkeypatch.setattr(os, "get_terminal_size", _no_terminal)
        with pytest.raises(mod.TerminalError):
            _ = mod.get_terminal_width()

    def test_bad_columns_variable(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """A non-numeric COLUMNS defers to the terminal."""
        monkeypatch.setenv("COLUMNS", "wide")
        monkeypatch.setattr(os, "get_terminal_size", _terminal_of(57))
        assert mod.get_terminal_width() == 57

    def test_fallback(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("COLUMNS", raising=False)
        monkeypatch.setattr(os, "get_terminal_size", _no_terminal)
        assert mod.get_terminal_width(fallback=80) == 80

    def test_zero_width(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("COLUMNS", raising=False)
        monkeypatch.setattr(os, "get_terminal_size", _terminal_of(0))
        with pytest.raises(mod.TerminalError):
            _ = mod.get_terminal_width()
