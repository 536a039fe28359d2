"""Pytest fixtures for the fake transport tests.

All tests are network-isolated - socket connections are blocked by default.
"""

from __future__ import annotations

import socket
from collections.abc import Iterator
from typing import NoReturn

import pytest

from fake_http_transport import FakeHttpHandler
from tests.support.errors import NetworkIsolationError
from tests.support.example_controller import SampleModel

# =============================================================================
# Network Isolation - Block all socket connections in tests
# =============================================================================


def _blocked_socket_connect(self: socket.socket, *args: object, **kwargs: object) -> NoReturn:
    """Raise an error if any test tries to make a real network connection."""
    raise NetworkIsolationError(repr(args))


@pytest.fixture(autouse=True)
def block_network_access(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Block all network access in tests.

    Every response in this suite comes from a fake transport, so any real
    connection attempt is a bug in the fake.
    """
    monkeypatch.setattr(socket.socket, "connect", _blocked_socket_connect)
    yield


@pytest.fixture
def fake_handler() -> FakeHttpHandler:
    """Provide an unconfigured handler."""
    return FakeHttpHandler()


@pytest.fixture
def sample_models() -> list[SampleModel]:
    """Two distinct sample records."""
    return [SampleModel(name="Din Djarin", rank=1), SampleModel(name="Grogu", rank=2)]
