"""Fake HTTP transport for exercising client code without network I/O.

Usage example:
    from fake_http_transport import FakeHttpHandler

    fake = FakeHttpHandler().with_status_code(200).with_expected_content({"id": 1})
    session = fake.session()
    assert session.get("https://api.example.com/items/1").json() == {"id": 1}
"""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError, version

from .builder import FakeHttpHandler
from .config import FakeHttpConfig
from .exceptions import ContentGenerationError, FakeHttpError, IncomingDataError
from .infrastructure import FakeHttpAdapter, FakeHttpxTransport
from .responses import protocol_version, read_json_as, trailing_headers
from .types import ResponseSpec

_PACKAGE_NAME = "fake-http-transport"


def _resolve_version() -> str:
    try:
        return version(_PACKAGE_NAME)
    except PackageNotFoundError:
        return "0.0.0+unknown"


__version__ = _resolve_version()

__all__ = [
    "ContentGenerationError",
    "FakeHttpAdapter",
    "FakeHttpConfig",
    "FakeHttpError",
    "FakeHttpHandler",
    "FakeHttpxTransport",
    "IncomingDataError",
    "ResponseSpec",
    "__version__",
    "protocol_version",
    "read_json_as",
    "trailing_headers",
]
