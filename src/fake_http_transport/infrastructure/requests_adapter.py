"""Transport adapter that answers `requests` calls from a response description.

Usage example:
    import requests

    from fake_http_transport import FakeHttpHandler
    from fake_http_transport.infrastructure import FakeHttpAdapter

    session = requests.Session()
    session.mount("https://", FakeHttpAdapter(FakeHttpHandler().with_status_code(404)))
    assert session.get("https://api.example.com/missing").status_code == 404
"""

from __future__ import annotations

import io
from collections.abc import Mapping
from typing import ClassVar, override

import requests
from requests.adapters import HTTPAdapter
from urllib3 import HTTPHeaderDict, HTTPResponse

from ..content import render_content
from ..observability import get_logger
from ..protocols import ResponseSource
from ..types import RenderedContent, ResponseSpec
from .interception import entity_headers, has_header, reason_phrase, take_snapshot

logger = get_logger("fake_http_transport.infrastructure.requests_adapter")


def _encode_version(protocol_version: tuple[int, int]) -> int:
    """Encode (major, minor) the way urllib3 does: HTTP/1.1 is 11."""
    major, minor = protocol_version
    return major * 10 + minor


def _build_raw_response(spec: ResponseSpec, content: RenderedContent) -> HTTPResponse:
    headers = HTTPHeaderDict()
    fields = entity_headers(spec, content.content_type)
    if content.data and not has_header(fields, "Content-Length"):
        fields.append(("Content-Length", str(len(content.data))))
    for name, value in fields:
        headers.add(name, value)
    return HTTPResponse(
        body=io.BytesIO(content.data),
        headers=headers,
        status=spec.status_code,
        version=_encode_version(spec.protocol_version),
        reason=reason_phrase(spec.status_code),
        preload_content=False,
        decode_content=False,
    )


class FakeHttpAdapter(HTTPAdapter):
    """HTTP adapter that synthesises every response instead of opening a connection.

    `requests` responses have no trailing headers, so configured trailing headers
    are dropped. Multi-valued headers are exposed as one comma-joined string, as
    `requests` does for real responses.
    """

    supports_trailing_headers: ClassVar[bool] = False

    def __init__(self, source: ResponseSource) -> None:
        super().__init__(max_retries=0)
        self._source = source
        self._captured_requests: list[requests.PreparedRequest] = []

    @override
    def send(
        self,
        request: requests.PreparedRequest,
        stream: bool = False,
        timeout: float | tuple[float, float] | tuple[float, None] | None = None,
        verify: bool | str = True,
        cert: bytes | str | tuple[bytes | str, bytes | str] | None = None,
        proxies: Mapping[str, str] | None = None,
    ) -> requests.Response:
        """Return a response built from the current snapshot of the source.

        Transport options (timeout, TLS, proxies, streaming) have no effect.

        Raises:
            ContentGenerationError: If the configured body cannot be serialised.
        """
        self._captured_requests.append(request.copy())
        spec = take_snapshot(
            self._source,
            method=request.method or "GET",
            url=request.url or "",
            logger=logger,
        )
        if spec.trailing_headers:
            logger.debug(
                "Dropping %d trailing header(s): requests responses do not carry trailers",
                len(spec.trailing_headers),
            )
        raw = _build_raw_response(spec, render_content(spec.body))
        return self.build_response(request, raw)

    @property
    def call_count(self) -> int:
        return len(self._captured_requests)

    @property
    def captured_requests(self) -> list[requests.PreparedRequest]:
        """Copies of the requests intercepted so far, oldest first."""
        return list(self._captured_requests)


class FakeSession(requests.Session):
    """Session that returns redirect responses as configured instead of following them.

    Every request gets the same synthesised response, so following a 3xx would
    loop until `requests.TooManyRedirects`.
    """

    @override
    def get_redirect_target(self, resp: requests.Response) -> str | None:
        return None
