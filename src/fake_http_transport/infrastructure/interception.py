"""Shared helpers for the interception points."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from http import HTTPStatus

from ..protocols import ResponseSource
from ..types import ResponseSpec


def take_snapshot(
    source: ResponseSource,
    *,
    method: str,
    url: str,
    logger: logging.Logger,
) -> ResponseSpec:
    """Snapshot the source for one intercepted request and log the call."""
    spec = source.snapshot()
    level = logging.INFO if source.config.log_requests else logging.DEBUG
    logger.log(level, "Intercepted %s %s -> %s", method, url, spec.status_code)
    return spec


def reason_phrase(status_code: int) -> str | None:
    try:
        return HTTPStatus(status_code).phrase
    except ValueError:
        return None


def has_header(headers: Iterable[tuple[str, str]], name: str) -> bool:
    wanted = name.lower()
    return any(key.lower() == wanted for key, _ in headers)


def entity_headers(spec: ResponseSpec, content_type: str | None) -> list[tuple[str, str]]:
    """Configured headers plus a Content-Type for the body, unless one was configured."""
    headers = list(spec.iter_headers())
    if content_type and not has_header(headers, "Content-Type"):
        headers.append(("Content-Type", content_type))
    return headers
