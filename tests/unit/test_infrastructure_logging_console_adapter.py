"""Unit tests for ConsoleAdapter (structured console logging).

Tests cover:
- LoggerProtocol methods forward message and context to structlog
- error/critical expand an exception into error_type and error_message
- bind() returns a new adapter
- Renderer selection (JSON vs console)

Architecture:
- structlog is patched; no real output
"""

from unittest.mock import MagicMock, patch

import pytest

from src.infrastructure.logging.console_adapter import ConsoleAdapter

_STRUCTLOG = "src.infrastructure.logging.console_adapter.structlog"


@pytest.fixture
def structlog_logger():
    with patch(_STRUCTLOG) as mock_structlog:
        logger = MagicMock()
        mock_structlog.get_logger.return_value = logger
        yield mock_structlog, logger


@pytest.mark.unit
class TestConsoleAdapterLogging:
    @pytest.mark.parametrize("level", ["debug", "info", "warning"])
    def test_forwards_context(self, structlog_logger, level):
        _, logger = structlog_logger
        adapter = ConsoleAdapter()

        getattr(adapter, level)("token_issued", account_id="123", purpose="refresh")

        getattr(logger, level).assert_called_once_with(
            "token_issued", account_id="123", purpose="refresh"
        )

    def test_error_with_exception(self, structlog_logger):
        _, logger = structlog_logger
        adapter = ConsoleAdapter()

        adapter.error("refresh_failed", error=ValueError("bad uuid"), token_id="t1")

        logger.error.assert_called_once_with(
            "refresh_failed",
            token_id="t1",
            error_type="ValueError",
            error_message="bad uuid",
        )

    def test_error_without_exception(self, structlog_logger):
        _, logger = structlog_logger
        adapter = ConsoleAdapter()

        adapter.error("unhandled_exception", path="/api/v1/tokens")

        logger.error.assert_called_once_with("unhandled_exception", path="/api/v1/tokens")

    def test_critical_with_exception(self, structlog_logger):
        _, logger = structlog_logger
        adapter = ConsoleAdapter()

        adapter.critical("database_unreachable", error=ConnectionError("refused"))

        logger.critical.assert_called_once_with(
            "database_unreachable",
            error_type="ConnectionError",
            error_message="refused",
        )


@pytest.mark.unit
class TestConsoleAdapterBind:
    def test_bind_returns_new_adapter(self, structlog_logger):
        _, logger = structlog_logger
        bound_logger = MagicMock()
        logger.bind.return_value = bound_logger
        adapter = ConsoleAdapter()

        bound = adapter.bind(account_id="123")
        bound.info("login")

        assert bound is not adapter
        logger.bind.assert_called_once_with(account_id="123")
        bound_logger.info.assert_called_once_with("login")
        logger.info.assert_not_called()


@pytest.mark.unit
class TestConsoleAdapterConfiguration:
    def test_json_renderer(self, structlog_logger):
        mock_structlog, _ = structlog_logger

        ConsoleAdapter(use_json=True)

        processors = mock_structlog.configure.call_args.kwargs["processors"]
        assert processors[-1] is mock_structlog.processors.JSONRenderer.return_value

    def test_console_renderer(self, structlog_logger):
        mock_structlog, _ = structlog_logger

        ConsoleAdapter(use_json=False)

        processors = mock_structlog.configure.call_args.kwargs["processors"]
        assert processors[-1] is mock_structlog.dev.ConsoleRenderer.return_value
        mock_structlog.dev.ConsoleRenderer.assert_called_once_with(colors=True)
