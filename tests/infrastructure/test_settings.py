"""Tests for environment-based settings."""

from __future__ import annotations

import pytest

from entra_hygiene.application.exceptions import ConfigurationError
from entra_hygiene.domain.value_objects import ReportKind
from entra_hygiene.infrastructure.adapters.entra_id.graph_client import DEFAULT_PUBLIC_CLIENT_ID
from entra_hygiene.infrastructure.config import Settings, load_settings

_ENV_KEYS = (
    "AZURE_TENANT_ID",
    "AZURE_CLIENT_ID",
    "AZURE_CLIENT_SECRET",
    "AUTH_MODE",
    "REPORT",
    "LOG_LEVEL",
    "MAX_CONCURRENCY",
    "GRAPH_TIMEOUT",
    "INCLUDE_SERVICE_PRINCIPALS",
    "NO_COLOR",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Start every test from an empty configuration."""
    for key in _ENV_KEYS:
        monkeypatch.delenv(key, raising=False)


class TestSettings:
    """Tests for Settings."""

    def test_defaults_use_interactive_sign_in(self) -> None:
        """Without configuration the public client signs in interactively."""
        settings = load_settings()
        assert settings.auth_mode == "interactive"
        assert settings.graph_config.client_id == DEFAULT_PUBLIC_CLIENT_ID
        assert settings.graph_config.tenant_id == "organizations"
        assert settings.report_kind is ReportKind.EXPIRING_CREDENTIALS
        assert settings.include_service_principals is False

    def test_default_thresholds(self) -> None:
        """User thresholds and severity cutoffs have their fixed values."""
        settings = Settings()
        assert settings.user_thresholds.standard == 90
        assert settings.user_thresholds.guest == 30
        assert settings.severity_cutoffs.high == 30
        assert settings.severity_cutoffs.medium == 90

    def test_client_secret_switches_to_client_credentials(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """A client secret selects the app-only flow."""
        monkeypatch.setenv("AZURE_TENANT_ID", "contoso.onmicrosoft.com")
        monkeypatch.setenv("AZURE_CLIENT_ID", "my-app")
        monkeypatch.setenv("AZURE_CLIENT_SECRET", "s3cret")

        settings = load_settings()

        assert settings.auth_mode == "client_credentials"
        assert settings.graph_config.uses_client_credentials is True

    def test_client_credentials_require_tenant_and_app(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """App-only auth needs an explicit tenant and client id."""
        monkeypatch.setenv("AZURE_CLIENT_SECRET", "s3cret")

        with pytest.raises(ConfigurationError, match="AZURE_TENANT_ID, AZURE_CLIENT_ID"):
            load_settings()

    def test_unknown_auth_mode(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Only the supported flows are accepted."""
        monkeypatch.setenv("AUTH_MODE", "kerberos")

        with pytest.raises(ConfigurationError, match="AUTH_MODE"):
            load_settings()

    def test_report_selection(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """REPORT picks the report by name."""
        monkeypatch.setenv("REPORT", "Empty-Groups")
        assert Settings().report_kind is ReportKind.EMPTY_GROUPS

    def test_unknown_report(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """An unknown report name is a configuration error."""
        monkeypatch.setenv("REPORT", "stale-devices")
        with pytest.raises(ConfigurationError, match="Unknown REPORT"):
            _ = Settings().report_kind

    def test_invalid_integer(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Non-numeric integers are rejected with the variable name."""
        monkeypatch.setenv("MAX_CONCURRENCY", "many")
        with pytest.raises(ConfigurationError, match="MAX_CONCURRENCY"):
            Settings()

    def test_concurrency_must_be_positive(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """At least one sign-in lookup must be allowed in flight."""
        monkeypatch.setenv("MAX_CONCURRENCY", "0")
        with pytest.raises(ConfigurationError, match="at least 1"):
            load_settings()

    @pytest.mark.parametrize("timeout", ["0", "-5"])
    def test_timeout_must_be_positive(self, monkeypatch: pytest.MonkeyPatch, timeout: str) -> None:
        """Non-positive request timeouts are rejected before reaching httpx."""
        monkeypatch.setenv("GRAPH_TIMEOUT", timeout)
        with pytest.raises(ConfigurationError, match="GRAPH_TIMEOUT"):
            load_settings()
