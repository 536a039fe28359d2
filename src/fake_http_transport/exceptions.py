"""Custom exceptions for the fake HTTP transport.

These exceptions keep failures raised by the fake distinct from failures raised
by the code under test, which propagate through the transport unchanged.
"""

from __future__ import annotations


class FakeHttpError(Exception):
    """Base exception for all fake transport errors."""

    pass


class ContentGenerationError(FakeHttpError):
    """Raised when the configured body cannot be encoded as a response payload.

    Raised while a response is materialised, not while it is configured.
    """

    def __init__(self, value_type: str, reason: str) -> None:
        self.value_type = value_type
        self.reason = reason
        super().__init__(f"Unable to serialise expected content of type {value_type}: {reason}")


class IncomingDataError(ValueError):
    """Raised when a response body fails validation."""


class UnsupportedResponseTypeError(TypeError):
    """Raised when an inspection helper receives an unknown response object."""

    def __init__(self, response: object) -> None:
        super().__init__(
            f"Expected a requests.Response or httpx.Response, got {type(response).__name__}."
        )


class PositiveIntegerEnvVarError(ValueError):
    """Raised when an environment variable must be a positive integer."""

    def __init__(self, env_name: str) -> None:
        super().__init__(f"{env_name} must be a positive integer.")


class BooleanEnvVarError(ValueError):
    """Raised when an environment variable must be a supported boolean."""

    def __init__(self, env_name: str) -> None:
        super().__init__(f"{env_name} must be a boolean value (true/false, 1/0, yes/no, on/off).")


class ProtocolVersionEnvVarError(ValueError):
    """Raised when an environment variable must be a "major.minor" protocol version."""

    def __init__(self, env_name: str) -> None:
        super().__init__(f"{env_name} must be a protocol version such as 1.0 or 1.1.")


class ProtocolVersionError(FakeHttpError, ValueError):
    """Raised when a protocol version is not a single-digit "major.minor" pair.

    HTTP versions are one digit each, and urllib3 encodes them as major*10 + minor.
    """

    def __init__(self, major: int, minor: int) -> None:
        self.major = major
        self.minor = minor
        super().__init__(f"Protocol version {major}.{minor} must use single digits (0-9).")
