"""Protocol definitions for the seams between the builder and the transports.

Transports depend on `ResponseSource` rather than on the concrete builder, so a
test can hand them any object able to describe the next response.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from .config import FakeHttpConfig
    from .types import ResponseSpec


@runtime_checkable
class ResponseSource(Protocol):
    """Describes the response to synthesise for the next intercepted request."""

    @property
    def config(self) -> FakeHttpConfig:
        """Configuration the source was created with."""
        ...

    def snapshot(self) -> ResponseSpec:
        """Return an immutable copy of the current response description."""
        ...


@runtime_checkable
class InterceptionPoint(Protocol):
    """A transport that answers requests from a `ResponseSource` instead of the network."""

    supports_trailing_headers: bool

    @property
    def call_count(self) -> int:
        """Number of requests intercepted so far."""
        ...
