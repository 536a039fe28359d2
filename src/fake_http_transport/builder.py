"""Fluent builder describing the response a fake transport returns.

Usage example:
    from http import HTTPStatus

    from fake_http_transport import FakeHttpHandler

    fake = (
        FakeHttpHandler()
        .with_status_code(HTTPStatus.OK)
        .with_response_header("order66", "babyyoda")
        .with_expected_content([{"id": 1}, {"id": 2}])
    )
    session = fake.session()       # requests.Session
    client = fake.client()         # httpx.Client
    async_client = fake.async_client()

Repeating a header name (compared case-insensitively) replaces the values set
earlier; it never merges them.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from http import HTTPStatus
from typing import Any, Self

import httpx
import requests
from pydantic import BaseModel

from .config import FakeHttpConfig
from .exceptions import ProtocolVersionError
from .infrastructure import FakeHttpAdapter, FakeHttpxTransport, FakeSession
from .types import ContentSpec, HeaderFields, JsonContent, RawContent, ResponseSpec

_TEXT_CONTENT_TYPE = "text/plain; charset=utf-8"

type HeaderValue = str | Iterable[str]

# Serialised natively; any other iterable is copied into a list.
_NATIVE_VALUES = (str, bytes, bytearray, Mapping, list, tuple, set, frozenset, BaseModel)


def _normalise_values(value: HeaderValue) -> tuple[str, ...]:
    if isinstance(value, str):
        return (value,)
    return tuple(str(item) for item in value)


def _freeze(headers: dict[str, tuple[str, tuple[str, ...]]]) -> HeaderFields:
    return tuple(headers.values())


class FakeHttpHandler:
    """Accumulates the status, version, headers and body of a synthetic response.

    Every configuration method mutates this instance and returns it. Transports
    built from the handler take a fresh snapshot on each request, so a response
    already produced never changes when the handler is reconfigured.
    """

    def __init__(self, *, config: FakeHttpConfig | None = None) -> None:
        self._config = config or FakeHttpConfig()
        self._status_code = self._config.default_status_code
        self._protocol_version = self._config.default_protocol_version
        # Keyed by lower-cased name; the value keeps the caller's spelling.
        self._headers: dict[str, tuple[str, tuple[str, ...]]] = {}
        self._trailing_headers: dict[str, tuple[str, tuple[str, ...]]] = {}
        self._body: ContentSpec | None = None

    @property
    def config(self) -> FakeHttpConfig:
        return self._config

    def with_status_code(self, code: int | HTTPStatus) -> Self:
        """Set the status code. Any integer is accepted."""
        self._status_code = int(code)
        return self

    def with_version(self, major: int, minor: int = 0) -> Self:
        """Set the protocol version reported by the response.

        Raises:
            ProtocolVersionError: If either part is outside 0-9.
        """
        if not (0 <= major <= 9 and 0 <= minor <= 9):
            raise ProtocolVersionError(major, minor)
        self._protocol_version = (major, minor)
        return self

    def with_response_header(self, name: str, value: HeaderValue) -> Self:
        """Set a response header to one value or to a list of values."""
        self._headers[name.lower()] = (name, _normalise_values(value))
        return self

    def with_trailing_response_header(self, name: str, value: HeaderValue) -> Self:
        """Set a trailing header.

        Only transports that support trailing headers emit it. The others drop it
        without raising.
        """
        self._trailing_headers[name.lower()] = (name, _normalise_values(value))
        return self

    def with_expected_content(self, value: object) -> Self:
        """Return `value` serialised as JSON in the response body.

        Serialisation happens when a request is intercepted, so an unserialisable
        value fails the request rather than this call. Other iterables (generators,
        ranges, dict views) are copied into a list here, so they serialise as an
        array and every response sees the same items.
        """
        if isinstance(value, Iterable) and not isinstance(value, _NATIVE_VALUES):
            value = list(value)
        self._body = JsonContent(value=value, content_type=self._config.json_content_type)
        return self

    def with_raw_content(self, content: str | bytes, content_type: str | None = None) -> Self:
        """Return `content` verbatim in the response body."""
        if isinstance(content, str):
            data = content.encode("utf-8")
            content_type = content_type or _TEXT_CONTENT_TYPE
        else:
            data = bytes(content)
        self._body = RawContent(data=data, content_type=content_type)
        return self

    def snapshot(self) -> ResponseSpec:
        return ResponseSpec(
            status_code=self._status_code,
            protocol_version=self._protocol_version,
            headers=_freeze(self._headers),
            trailing_headers=_freeze(self._trailing_headers),
            body=self._body,
        )

    def adapter(self) -> FakeHttpAdapter:
        """Build a requests transport adapter answering from this handler."""
        return FakeHttpAdapter(self)

    def session(self) -> requests.Session:
        """Build a requests session whose http and https traffic hits this handler.

        Redirect responses are returned as configured, not followed.
        """
        session = FakeSession()
        adapter = self.adapter()
        session.mount("http://", adapter)
        session.mount("https://", adapter)
        return session

    def transport(self) -> FakeHttpxTransport:
        """Build an httpx transport answering from this handler."""
        return FakeHttpxTransport(self)

    def client(self, **kwargs: Any) -> httpx.Client:
        """Build an httpx client; keyword arguments go to `httpx.Client`."""
        return httpx.Client(transport=self.transport(), **kwargs)

    def async_client(self, **kwargs: Any) -> httpx.AsyncClient:
        """Build an httpx async client; keyword arguments go to `httpx.AsyncClient`."""
        return httpx.AsyncClient(transport=self.transport(), **kwargs)
