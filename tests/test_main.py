"""Tests for the command-line entry point."""

import logging
from unittest.mock import AsyncMock

import pytest

from v0_mcp import __main__ as cli


@pytest.fixture(autouse=True)
def _restore_package_logger():
    logger = logging.getLogger("v0_mcp")
    handlers, propagate, level = list(logger.handlers), logger.propagate, logger.level
    yield
    logger.handlers[:] = handlers
    logger.propagate = propagate
    logger.setLevel(level)


def test_missing_api_key_exits_with_error(monkeypatch, capsys):
    monkeypatch.delenv("V0_API_KEY", raising=False)
    monkeypatch.setattr("v0_mcp.config.load_dotenv", lambda: None)

    assert cli.main([]) == 1
    assert "V0_API_KEY" in capsys.readouterr().err


def test_check_mode_returns_check_status(monkeypatch):
    monkeypatch.setenv("V0_API_KEY", "test-key")
    run_check = AsyncMock(return_value=1)
    monkeypatch.setattr(cli, "_run_check", run_check)
    run_stdio = AsyncMock()
    monkeypatch.setattr(cli, "run_stdio", run_stdio)

    assert cli.main(["--check", "--log-level", "DEBUG"]) == 1
    run_check.assert_awaited_once()
    run_stdio.assert_not_awaited()


def test_serves_stdio_by_default(monkeypatch):
    monkeypatch.setenv("V0_API_KEY", "test-key")
    run_stdio = AsyncMock()
    monkeypatch.setattr(cli, "run_stdio", run_stdio)

    assert cli.main([]) == 0
    assert run_stdio.await_args.args[0].api_key == "test-key"
