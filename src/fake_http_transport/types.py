"""Typed data structures shared by the builder and the transports."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field

type HeaderFields = tuple[tuple[str, tuple[str, ...]], ...]


@dataclass(frozen=True)
class JsonContent:
    """A structured value serialised to JSON when a response is produced."""

    value: object
    content_type: str


@dataclass(frozen=True)
class RawContent:
    """A pre-encoded payload sent verbatim."""

    data: bytes
    content_type: str | None = None


type ContentSpec = JsonContent | RawContent


@dataclass(frozen=True)
class RenderedContent:
    """Encoded response payload and the content type that describes it."""

    data: bytes = b""
    content_type: str | None = None


@dataclass(frozen=True)
class ResponseSpec:
    """Read-only description of the response a fake transport will synthesise.

    Header maps keep one entry per case-insensitive name, in the order the names
    were first configured.
    """

    status_code: int = 200
    protocol_version: tuple[int, int] = (1, 0)
    headers: HeaderFields = field(default_factory=tuple)
    trailing_headers: HeaderFields = field(default_factory=tuple)
    body: ContentSpec | None = None

    def iter_headers(self) -> Iterator[tuple[str, str]]:
        """Yield one (name, value) pair per configured header value."""
        for name, values in self.headers:
            for value in values:
                yield name, value

    def iter_trailing_headers(self) -> Iterator[tuple[str, str]]:
        for name, values in self.trailing_headers:
            for value in values:
                yield name, value
