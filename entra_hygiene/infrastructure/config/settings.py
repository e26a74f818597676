"""Application settings loaded from environment variables."""

import os
from dataclasses import dataclass, field
from functools import cached_property

from ...application.exceptions import ConfigurationError
from ...domain.value_objects import InactivityThresholds, ReportKind, SeverityCutoffs
from ..adapters.entra_id.graph_client import DEFAULT_PUBLIC_CLIENT_ID, GraphClientConfig

AUTH_MODES = ("interactive", "device_code", "client_credentials")


def _env_bool(key: str, default: bool = False) -> bool:
    """Get boolean from environment variable."""
    return os.environ.get(key, str(default)).lower() in ("true", "1", "yes")


def _env_int(key: str, default: int) -> int:
    """Get integer from environment variable."""
    value = os.environ.get(key, str(default))
    try:
        return int(value)
    except ValueError as e:
        msg = f"{key} must be an integer, got {value!r}"
        raise ConfigurationError(msg) from e


def _env_str(key: str, default: str = "") -> str:
    """Get string from environment variable."""
    return os.environ.get(key, default) or default


@dataclass
class Settings:
    """Application settings container."""

    # Azure/Entra ID
    azure_tenant_id: str = field(default_factory=lambda: _env_str("AZURE_TENANT_ID", "organizations"))
    azure_client_id: str = field(default_factory=lambda: _env_str("AZURE_CLIENT_ID", DEFAULT_PUBLIC_CLIENT_ID))
    azure_client_secret: str = field(default_factory=lambda: _env_str("AZURE_CLIENT_SECRET"))
    auth_mode: str = field(
        default_factory=lambda: _env_str(
            "AUTH_MODE",
            "client_credentials" if os.environ.get("AZURE_CLIENT_SECRET") else "interactive",
        )
    )
    graph_timeout: int = field(default_factory=lambda: _env_int("GRAPH_TIMEOUT", 30))
    max_concurrency: int = field(default_factory=lambda: _env_int("MAX_CONCURRENCY", 8))

    # Run configuration
    report: str = field(default_factory=lambda: _env_str("REPORT", str(ReportKind.EXPIRING_CREDENTIALS)))
    log_level: str = field(default_factory=lambda: _env_str("LOG_LEVEL", "WARNING"))
    no_color: bool = field(default_factory=lambda: _env_bool("NO_COLOR"))
    include_service_principals: bool = field(
        default_factory=lambda: _env_bool("INCLUDE_SERVICE_PRINCIPALS")
    )

    def validate(self) -> None:
        """Validate settings."""
        if self.auth_mode not in AUTH_MODES:
            msg = f"AUTH_MODE must be one of {', '.join(AUTH_MODES)}, got {self.auth_mode!r}"
            raise ConfigurationError(msg)

        if self.auth_mode == "client_credentials":
            missing: list[str] = []
            if self.azure_tenant_id in ("", "organizations", "common"):
                missing.append("AZURE_TENANT_ID")
            if self.azure_client_id == DEFAULT_PUBLIC_CLIENT_ID:
                missing.append("AZURE_CLIENT_ID")
            if not self.azure_client_secret:
                missing.append("AZURE_CLIENT_SECRET")
            if missing:
                msg = f"Missing required environment variables for client_credentials: {', '.join(missing)}"
                raise ConfigurationError(msg)

        if self.max_concurrency < 1:
            msg = f"MAX_CONCURRENCY must be at least 1, got {self.max_concurrency}"
            raise ConfigurationError(msg)

        if self.graph_timeout < 1:
            msg = f"GRAPH_TIMEOUT must be at least 1 second, got {self.graph_timeout}"
            raise ConfigurationError(msg)

    @cached_property
    def report_kind(self) -> ReportKind:
        """Report selected through REPORT."""
        try:
            return ReportKind(self.report.strip().lower())
        except ValueError as e:
            choices = ", ".join(str(kind) for kind in ReportKind)
            msg = f"Unknown REPORT {self.report!r} (use one of: {choices})"
            raise ConfigurationError(msg) from e

    @cached_property
    def graph_config(self) -> GraphClientConfig:
        """Get Graph API client configuration."""
        return GraphClientConfig(
            tenant_id=self.azure_tenant_id,
            client_id=self.azure_client_id,
            client_secret=self.azure_client_secret,
            auth_mode=self.auth_mode,
            timeout=float(self.graph_timeout),
            max_concurrency=self.max_concurrency,
        )

    @cached_property
    def user_thresholds(self) -> InactivityThresholds:
        """Inactivity thresholds for the user report (90 standard / 30 guest)."""
        return InactivityThresholds(standard=90, guest=30)

    @cached_property
    def severity_cutoffs(self) -> SeverityCutoffs:
        """Severity banding cutoffs."""
        return SeverityCutoffs(high=30, medium=90)


def load_settings() -> Settings:
    """Load and validate settings from environment."""
    settings = Settings()
    settings.validate()
    return settings
