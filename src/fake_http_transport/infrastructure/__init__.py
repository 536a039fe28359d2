"""Transport implementations that answer requests without network I/O."""

from .httpx_transport import FakeHttpxTransport
from .requests_adapter import FakeHttpAdapter, FakeSession

__all__ = [
    "FakeHttpAdapter",
    "FakeHttpxTransport",
    "FakeSession",
]
