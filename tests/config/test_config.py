"""Tests for fake transport configuration."""

from pathlib import Path

import pytest

from fake_http_transport.config import DEFAULT_JSON_CONTENT_TYPE, FakeHttpConfig
from fake_http_transport.exceptions import (
    BooleanEnvVarError,
    PositiveIntegerEnvVarError,
    ProtocolVersionEnvVarError,
)

_ENV_NAMES = (
    "FAKE_HTTP_DEFAULT_STATUS",
    "FAKE_HTTP_DEFAULT_VERSION",
    "FAKE_HTTP_JSON_CONTENT_TYPE",
    "FAKE_HTTP_LOG_REQUESTS",
)


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> Path:
    """Clear config variables and return an empty .env path."""
    for name in _ENV_NAMES:
        # setenv first so teardown also removes anything load_dotenv writes.
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)
    dotenv = tmp_path / ".env"
    dotenv.write_text("")
    return dotenv


class TestFakeHttpConfig:
    def test_defaults(self) -> None:
        config = FakeHttpConfig()

        assert config.default_status_code == 200
        assert config.default_protocol_version == (1, 0)
        assert config.json_content_type == DEFAULT_JSON_CONTENT_TYPE
        assert config.log_requests is False

    def test_from_env_defaults(self, clean_env: Path) -> None:
        assert FakeHttpConfig.from_env(str(clean_env)) == FakeHttpConfig()

    def test_from_env_values(self, clean_env: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("FAKE_HTTP_DEFAULT_STATUS", "204")
        monkeypatch.setenv("FAKE_HTTP_DEFAULT_VERSION", "1.1")
        monkeypatch.setenv("FAKE_HTTP_JSON_CONTENT_TYPE", " application/vnd.api+json ")
        monkeypatch.setenv("FAKE_HTTP_LOG_REQUESTS", "yes")

        config = FakeHttpConfig.from_env(str(clean_env))

        assert config == FakeHttpConfig(
            default_status_code=204,
            default_protocol_version=(1, 1),
            json_content_type="application/vnd.api+json",
            log_requests=True,
        )

    def test_from_dotenv_file(self, clean_env: Path) -> None:
        clean_env.write_text("FAKE_HTTP_DEFAULT_STATUS=418\n")
        config = FakeHttpConfig.from_env(str(clean_env))

        assert config.default_status_code == 418

    @pytest.mark.parametrize("value", ["abc", "0", "-1"])
    def test_invalid_status(
        self, clean_env: Path, monkeypatch: pytest.MonkeyPatch, value: str
    ) -> None:
        monkeypatch.setenv("FAKE_HTTP_DEFAULT_STATUS", value)
        with pytest.raises(PositiveIntegerEnvVarError, match="FAKE_HTTP_DEFAULT_STATUS"):
            FakeHttpConfig.from_env(str(clean_env))

    @pytest.mark.parametrize("value", ["1", "one.zero", "1.x", "", "1.10", "10.0"])
    def test_invalid_version(
        self, clean_env: Path, monkeypatch: pytest.MonkeyPatch, value: str
    ) -> None:
        monkeypatch.setenv("FAKE_HTTP_DEFAULT_VERSION", value)
        with pytest.raises(ProtocolVersionEnvVarError):
            FakeHttpConfig.from_env(str(clean_env))

    def test_invalid_bool(self, clean_env: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("FAKE_HTTP_LOG_REQUESTS", "maybe")
        with pytest.raises(BooleanEnvVarError):
            FakeHttpConfig.from_env(str(clean_env))

    def test_with_overrides(self) -> None:
        base = FakeHttpConfig(log_requests=True)

        updated = base.with_overrides(default_status_code=202, json_content_type=" text/json ")

        assert updated.default_status_code == 202
        assert updated.json_content_type == "text/json"
        assert updated.log_requests is True
        assert base.default_status_code == 200
