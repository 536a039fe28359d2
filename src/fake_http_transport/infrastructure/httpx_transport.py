"""Transport that answers `httpx` calls, sync or async, from a response description.

Usage example:
    import httpx

    from fake_http_transport import FakeHttpHandler
    from fake_http_transport.infrastructure import FakeHttpxTransport

    transport = FakeHttpxTransport(FakeHttpHandler().with_expected_content({"ok": True}))
    async with httpx.AsyncClient(transport=transport) as client:
        response = await client.get("https://api.example.com/health")
"""

from __future__ import annotations

from typing import ClassVar, override

import httpx

from ..content import render_content
from ..observability import get_logger
from ..protocols import ResponseSource
from ..types import ResponseSpec
from .interception import entity_headers, take_snapshot

logger = get_logger("fake_http_transport.infrastructure.httpx_transport")

TRAILING_HEADERS_EXTENSION = "trailing_headers"


def _http_version(protocol_version: tuple[int, int]) -> bytes:
    """Render a version the way httpx reports it: HTTP/1.1, HTTP/2."""
    major, minor = protocol_version
    if major >= 2 and minor == 0:
        return f"HTTP/{major}".encode("ascii")
    return f"HTTP/{major}.{minor}".encode("ascii")


class FakeHttpxTransport(httpx.BaseTransport, httpx.AsyncBaseTransport):
    """httpx transport that synthesises every response instead of opening a connection.

    Trailing headers are delivered as `httpx.Headers` in the ``trailing_headers``
    response extension. Cancellation has nothing to interrupt: the async variant
    completes without awaiting anything but the request body.
    """

    supports_trailing_headers: ClassVar[bool] = True

    def __init__(self, source: ResponseSource) -> None:
        self._source = source
        self._captured_requests: list[httpx.Request] = []

    @override
    def handle_request(self, request: httpx.Request) -> httpx.Response:
        request.read()
        return self._intercept(request)

    @override
    async def handle_async_request(self, request: httpx.Request) -> httpx.Response:
        await request.aread()
        return self._intercept(request)

    def _intercept(self, request: httpx.Request) -> httpx.Response:
        self._captured_requests.append(request)
        spec = take_snapshot(
            self._source,
            method=request.method,
            url=str(request.url),
            logger=logger,
        )
        return self._build_response(spec, request)

    def _build_response(self, spec: ResponseSpec, request: httpx.Request) -> httpx.Response:
        content = render_content(spec.body)
        return httpx.Response(
            status_code=spec.status_code,
            headers=entity_headers(spec, content.content_type),
            content=content.data,
            request=request,
            extensions={
                "http_version": _http_version(spec.protocol_version),
                TRAILING_HEADERS_EXTENSION: httpx.Headers(list(spec.iter_trailing_headers())),
            },
        )

    @property
    def call_count(self) -> int:
        return len(self._captured_requests)

    @property
    def captured_requests(self) -> list[httpx.Request]:
        """Requests intercepted so far, oldest first, with bodies already read."""
        return list(self._captured_requests)
