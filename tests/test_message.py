"""
Tests for console logging.
"""

import pytest
from colorama import Fore

import Message


@pytest.fixture(autouse=True)
def reset_debug():
    Message.set_debug(False)
    yield
    Message.set_debug(False)


class TestMessage:
    """Test log line formatting and debug switch."""

    def test_warning_goes_to_stderr(self, capsys) -> None:
        Message.warning("careful")
        captured = capsys.readouterr()
        assert captured.out == ""
        assert f"[{Fore.YELLOW}war{Fore.RESET}] careful" in captured.err

    def test_debug_hidden_by_default(self, capsys) -> None:
        Message.debug("trace")
        assert capsys.readouterr().err == ""

    def test_debug_shown_when_enabled(self, capsys) -> None:
        Message.set_debug(True)
        assert Message.DEBUG_MODE is True
        Message.debug("trace")
        assert f"[{Fore.CYAN}dbg{Fore.RESET}] trace" in capsys.readouterr().err
