"""Tests for the demo entry point."""

import io

import pytest

from smart_console import main
from smart_console import logging as logging_module


@pytest.fixture(autouse=True)
def quiet_logging(monkeypatch):
    calls = []
    monkeypatch.setattr(main, "setup_logging", lambda **kwargs: calls.append(kwargs))
    yield calls
    logging_module.logger.disable(logging_module.PACKAGE_NAME)


def _run(monkeypatch, text, argv=None):
    stdout = io.StringIO()
    monkeypatch.setattr("sys.stdin", io.StringIO(text))
    monkeypatch.setattr("sys.stdout", stdout)
    status = main.main(argv or [])
    return status, stdout.getvalue()


class TestMain:
    def test_exit_from_main_menu(self, monkeypatch):
        status, output = _run(monkeypatch, "0\n")
        assert status == 0
        assert "smart-console demo" in output
        assert "[3] Settings - Settings" in output

    def test_greet_retries_until_word(self, monkeypatch):
        status, output = _run(monkeypatch, "1\n   \nAda\n0\n")
        assert status == 0
        assert "That was not a valid response. Please try again." in output
        assert "Hello, Ada!" in output

    def test_add_numbers(self, monkeypatch):
        status, output = _run(monkeypatch, "2\nten\n10\n2000\n2.5\n0\n")
        assert "Please enter a value between 0.0 and 1,000.0." in output
        assert "10 + 2.5 = 12.5" in output

    def test_settings_submenu_returns_to_main(self, monkeypatch):
        status, output = _run(monkeypatch, "3\n1\nmaybe\n0\n0\n")
        assert "Assuming default value false." in output
        assert "Colour output off" in output
        assert output.count("smart-console demo") == 2

    def test_reset_confirmation(self, monkeypatch):
        status, output = _run(monkeypatch, "3\n2\nhmm\nyes\n0\n0\n")
        assert "Sorry, hmm is not a valid response. Try again." in output
        assert "Everything was reset." in output

    def test_end_of_input_exits_cleanly(self, monkeypatch):
        status, output = _run(monkeypatch, "1\n")
        assert status == 0
        assert output.endswith("\n")

    def test_debug_flags_passed_to_logging(self, monkeypatch, quiet_logging):
        _run(monkeypatch, "0\n", ["--debug", "--trace"])
        assert quiet_logging == [{"debug": True, "trace": True}]
