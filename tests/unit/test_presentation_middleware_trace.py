"""Unit tests for TraceMiddleware (request correlation).

Tests cover:
- New trace ID when the client sends none
- Client-supplied X-Trace-Id is reused
- trace_id visible through get_trace_id() and structlog context during the request
- Context cleared after the request, including on exceptions
"""

from unittest.mock import MagicMock
from uuid import UUID

import pytest
import structlog

from src.presentation.api.middleware.trace_middleware import (
    TRACE_HEADER,
    TraceMiddleware,
    get_trace_id,
)


def _request(headers: dict | None = None) -> MagicMock:
    request = MagicMock()
    request.headers = headers or {}
    return request


def _response() -> MagicMock:
    response = MagicMock()
    response.headers = {}
    return response


@pytest.fixture
def middleware():
    return TraceMiddleware(app=MagicMock())


@pytest.mark.unit
class TestTraceMiddleware:
    async def test_generates_trace_id(self, middleware):
        async def call_next(_request):
            return _response()

        response = await middleware.dispatch(_request(), call_next)

        UUID(response.headers[TRACE_HEADER])

    async def test_reuses_incoming_trace_id(self, middleware):
        request = _request({TRACE_HEADER: "abc-123"})

        async def call_next(_request):
            return _response()

        response = await middleware.dispatch(request, call_next)

        assert response.headers[TRACE_HEADER] == "abc-123"
        assert request.state.trace_id == "abc-123"

    async def test_context_bound_during_request(self, middleware):
        seen: dict = {}

        async def call_next(_request):
            seen["trace_id"] = get_trace_id()
            seen["log_context"] = structlog.contextvars.get_contextvars()
            return _response()

        await middleware.dispatch(_request({TRACE_HEADER: "abc-123"}), call_next)

        assert seen["trace_id"] == "abc-123"
        assert seen["log_context"]["trace_id"] == "abc-123"

    async def test_context_cleared_after_request(self, middleware):
        async def call_next(_request):
            return _response()

        await middleware.dispatch(_request(), call_next)

        assert get_trace_id() is None
        assert "trace_id" not in structlog.contextvars.get_contextvars()

    async def test_context_cleared_on_exception(self, middleware):
        async def call_next(_request):
            raise RuntimeError("boom")

        with pytest.raises(RuntimeError):
            await middleware.dispatch(_request(), call_next)

        assert get_trace_id() is None


@pytest.mark.unit
def test_get_trace_id_outside_request():
    assert get_trace_id() is None
