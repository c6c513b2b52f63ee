"""Unit tests for TraceMiddleware (request tracing).

Tests cover:
- Trace ID generation for new requests
- Trace ID extraction from X-Trace-Id header
- Contextvars propagation (get_trace_id and structlog context)
- Cleanup after the request

Architecture:
- Unit tests with mocked Starlette Request/Response
"""

from unittest.mock import AsyncMock, MagicMock
from uuid import UUID

import pytest
import structlog

from docshelf.presentation.api.middleware.trace_middleware import (
    TraceMiddleware,
    get_trace_id,
)


def make_request(headers: dict[str, str] | None = None) -> MagicMock:
    request = MagicMock()
    request.headers = headers or {}
    return request


def make_response() -> MagicMock:
    response = MagicMock()
    response.headers = {}
    return response


@pytest.mark.unit
class TestTraceMiddlewareTraceId:
    """Test TraceMiddleware trace ID selection."""

    @pytest.mark.asyncio
    async def test_generates_new_trace_id_when_missing(self):
        """Test middleware generates a UUID trace ID when none is sent."""
        middleware = TraceMiddleware(app=MagicMock())
        call_next = AsyncMock(return_value=make_response())

        response = await middleware.dispatch(make_request(), call_next)

        UUID(response.headers["X-Trace-Id"])

    @pytest.mark.asyncio
    async def test_uses_existing_trace_id_from_header(self):
        """Test an incoming X-Trace-Id is propagated unchanged."""
        middleware = TraceMiddleware(app=MagicMock())
        call_next = AsyncMock(return_value=make_response())
        request = make_request({"X-Trace-Id": "trace-abc"})

        response = await middleware.dispatch(request, call_next)

        assert response.headers["X-Trace-Id"] == "trace-abc"
        assert request.state.trace_id == "trace-abc"


@pytest.mark.unit
class TestTraceMiddlewareContext:
    """Test TraceMiddleware context propagation."""

    @pytest.mark.asyncio
    async def test_trace_id_visible_during_request(self):
        """Test get_trace_id and structlog context carry the trace ID."""
        seen: dict[str, object] = {}

        async def call_next(request):
            seen["trace_id"] = get_trace_id()
            seen["log_context"] = structlog.contextvars.get_contextvars()
            return make_response()

        middleware = TraceMiddleware(app=MagicMock())
        await middleware.dispatch(make_request({"X-Trace-Id": "trace-1"}), call_next)

        assert seen["trace_id"] == "trace-1"
        assert seen["log_context"] == {"trace_id": "trace-1"}

    @pytest.mark.asyncio
    async def test_context_cleared_after_request(self):
        """Test no trace ID leaks past the request."""
        middleware = TraceMiddleware(app=MagicMock())
        call_next = AsyncMock(return_value=make_response())

        await middleware.dispatch(make_request(), call_next)

        assert get_trace_id() is None
        assert "trace_id" not in structlog.contextvars.get_contextvars()

    @pytest.mark.asyncio
    async def test_context_cleared_when_handler_raises(self):
        """Test cleanup also runs when the downstream handler fails."""
        middleware = TraceMiddleware(app=MagicMock())
        call_next = AsyncMock(side_effect=RuntimeError("boom"))

        with pytest.raises(RuntimeError):
            await middleware.dispatch(make_request(), call_next)

        assert get_trace_id() is None
        assert "trace_id" not in structlog.contextvars.get_contextvars()

    def test_get_trace_id_outside_request(self):
        """Test get_trace_id returns None without an active request."""
        assert get_trace_id() is None
