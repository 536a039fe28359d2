"""Centralised, injectable configuration for the fake HTTP transport."""

from __future__ import annotations

import os
from dataclasses import dataclass, replace
from typing import Self

from dotenv import load_dotenv

from .exceptions import BooleanEnvVarError, PositiveIntegerEnvVarError, ProtocolVersionEnvVarError

DEFAULT_JSON_CONTENT_TYPE = "application/json; charset=utf-8"


@dataclass(frozen=True)
class FakeHttpConfig:
    """Immutable defaults applied to every new `FakeHttpHandler`.

    Construct directly in tests, or load from the environment with
    `FakeHttpConfig.from_env()` when a suite wants shared defaults.
    """

    default_status_code: int = 200
    default_protocol_version: tuple[int, int] = (1, 0)
    json_content_type: str = DEFAULT_JSON_CONTENT_TYPE
    log_requests: bool = False

    @classmethod
    def from_env(cls, dotenv_path: str | None = None) -> Self:
        """Load configuration from environment variables.

        Args:
            dotenv_path: Optional path to .env file. If None, uses default .env discovery.

        Returns:
            FakeHttpConfig instance populated from environment.
        """
        load_dotenv(dotenv_path)

        return cls(
            default_status_code=_parse_positive_int(
                os.getenv("FAKE_HTTP_DEFAULT_STATUS", "200"),
                env_name="FAKE_HTTP_DEFAULT_STATUS",
            ),
            default_protocol_version=_parse_protocol_version(
                os.getenv("FAKE_HTTP_DEFAULT_VERSION", "1.0"),
                env_name="FAKE_HTTP_DEFAULT_VERSION",
            ),
            json_content_type=os.getenv(
                "FAKE_HTTP_JSON_CONTENT_TYPE", DEFAULT_JSON_CONTENT_TYPE
            ).strip()
            or DEFAULT_JSON_CONTENT_TYPE,
            log_requests=_parse_optional_bool(
                os.getenv("FAKE_HTTP_LOG_REQUESTS", ""),
                env_name="FAKE_HTTP_LOG_REQUESTS",
            )
            or False,
        )

    def with_overrides(
        self,
        *,
        default_status_code: int | None = None,
        default_protocol_version: tuple[int, int] | None = None,
        json_content_type: str | None = None,
        log_requests: bool | None = None,
    ) -> Self:
        """Return a new config with specified overrides."""
        return replace(
            self,
            default_status_code=self.default_status_code
            if default_status_code is None
            else default_status_code,
            default_protocol_version=self.default_protocol_version
            if default_protocol_version is None
            else default_protocol_version,
            json_content_type=self.json_content_type
            if json_content_type is None
            else json_content_type.strip(),
            log_requests=self.log_requests if log_requests is None else log_requests,
        )


def _parse_positive_int(value: str, *, env_name: str) -> int:
    """Parse a positive integer from an environment variable."""
    try:
        parsed = int(value.strip())
    except ValueError as exc:
        raise PositiveIntegerEnvVarError(env_name) from exc
    if parsed < 1:
        raise PositiveIntegerEnvVarError(env_name)
    return parsed


def _parse_protocol_version(value: str, *, env_name: str) -> tuple[int, int]:
    """Parse a single-digit "major.minor" protocol version."""
    major, sep, minor = value.strip().partition(".")
    if not sep or len(major) != 1 or len(minor) != 1:
        raise ProtocolVersionEnvVarError(env_name)
    if not major.isdigit() or not minor.isdigit():
        raise ProtocolVersionEnvVarError(env_name)
    return int(major), int(minor)


def _parse_optional_bool(value: str, *, env_name: str) -> bool | None:
    """Parse an optional boolean from an environment variable."""
    text = value.strip().lower()
    if not text:
        return None
    if text in {"1", "true", "yes", "y", "on"}:
        return True
    if text in {"0", "false", "no", "n", "off"}:
        return False
    raise BooleanEnvVarError(env_name)
