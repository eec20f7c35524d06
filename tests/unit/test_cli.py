"""Tests for the command-line interface."""

import json
import logging

import pytest

import cli
from config import CSV_HEADER
from logging_config import logger


@pytest.fixture(autouse=True)
def _reset_logger():
    """cli.main() configures logging against capsys streams; undo it afterwards."""
    yield
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)


def run_cli(monkeypatch: pytest.MonkeyPatch, *argv: str) -> int:
    """Run cli.main() with argv, returning the exit code."""
    monkeypatch.setattr("sys.argv", ["eds", *argv])
    with pytest.raises(SystemExit) as exc_info:
        cli.main()
    return exc_info.value.code


class TestCommands:

    def test_tools_prints_json_listing(self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture) -> None:
        assert run_cli(monkeypatch, "tools") == 0
        listing = json.loads(capsys.readouterr().out)
        assert "get_template" in [t["name"] for t in listing]

    def test_templates_lists_names(self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture) -> None:
        assert run_cli(monkeypatch, "templates") == 0
        assert "evaluation_log" in capsys.readouterr().out

    def test_template_prints_content(self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture) -> None:
        assert run_cli(monkeypatch, "template", "csv_header") == 0
        assert capsys.readouterr().out.strip() == CSV_HEADER

    def test_call_with_argument(self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture) -> None:
        assert run_cli(monkeypatch, "call", "get_template", "--arg", "templateName=csv_header") == 0
        assert capsys.readouterr().out.strip() == CSV_HEADER

    def test_call_unknown_tool_exits_1(self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture) -> None:
        assert run_cli(monkeypatch, "call", "missing") == 1
        assert "missing" in capsys.readouterr().err

    def test_bad_arg_pair_is_usage_error(self, monkeypatch: pytest.MonkeyPatch) -> None:
        assert run_cli(monkeypatch, "call", "get_template", "--arg", "novalue") == 2
