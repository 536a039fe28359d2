"""Helpers for reading synthesised responses uniformly across client libraries.

Usage example:
    from fake_http_transport.responses import protocol_version, read_json_as

    response = session.get("https://api.example.com/items")
    assert protocol_version(response) == (1, 0)
    items = read_json_as(list[Item], response)
"""

from __future__ import annotations

from collections.abc import Mapping

import httpx
import requests
from pydantic import TypeAdapter, ValidationError
from requests.structures import CaseInsensitiveDict

from .exceptions import IncomingDataError, UnsupportedResponseTypeError
from .infrastructure.httpx_transport import TRAILING_HEADERS_EXTENSION

type SupportedResponse = requests.Response | httpx.Response

# urllib3 reports HTTP/1.1 when the underlying response gives no version.
_DEFAULT_RAW_VERSION = 11


def _parse_version_string(text: str) -> tuple[int, int]:
    _, _, number = text.partition("/")
    major, _, minor = number.partition(".")
    return int(major), int(minor or 0)


def protocol_version(response: SupportedResponse) -> tuple[int, int]:
    """Return the (major, minor) protocol version of a response."""
    if isinstance(response, httpx.Response):
        return _parse_version_string(response.http_version)
    if isinstance(response, requests.Response):
        raw_version = getattr(response.raw, "version", None) or _DEFAULT_RAW_VERSION
        major, minor = divmod(int(raw_version), 10)
        return major, minor
    raise UnsupportedResponseTypeError(response)


def trailing_headers(response: SupportedResponse) -> Mapping[str, str]:
    """Return the trailing headers of a response.

    Response models without trailing headers yield an empty mapping.
    """
    if isinstance(response, httpx.Response):
        trailers = response.extensions.get(TRAILING_HEADERS_EXTENSION)
        return trailers if isinstance(trailers, httpx.Headers) else httpx.Headers()
    if isinstance(response, requests.Response):
        return CaseInsensitiveDict()
    raise UnsupportedResponseTypeError(response)


def read_json_as[SchemaT](schema: type[SchemaT], response: SupportedResponse) -> SchemaT:
    """Validate a JSON response body into `schema`.

    Raises:
        IncomingDataError: If the body is not valid JSON for `schema`.
    """
    if not isinstance(response, (httpx.Response, requests.Response)):
        raise UnsupportedResponseTypeError(response)
    try:
        return TypeAdapter(schema).validate_json(response.content)
    except ValidationError as exc:
        message = f"Invalid JSON payload for {schema}."
        raise IncomingDataError(message) from exc
