"""Credential fact attached to an application or service principal."""

from dataclasses import dataclass
from datetime import UTC, date, datetime

from ..value_objects import CredentialType


@dataclass(frozen=True, slots=True)
class CredentialFact:
    """A secret or certificate as fetched from the directory."""

    id: str
    credential_type: CredentialType
    display_name: str | None = None
    expires_at: datetime | None = None

    @property
    def has_expiry(self) -> bool:
        """Check if an expiration timestamp is known."""
        return self.expires_at is not None

    @property
    def label(self) -> str:
        """Human label, falling back to a short form of the id."""
        return self.display_name or self.id[:8] or "(unnamed)"

    def days_until_expiry(self, reference_date: date) -> int | None:
        """Whole days from ``reference_date`` to the expiry date (negative if expired)."""
        if self.expires_at is None:
            return None
        expiry = (
            self.expires_at
            if self.expires_at.tzinfo
            else self.expires_at.replace(tzinfo=UTC)
        )
        return (expiry.astimezone(UTC).date() - reference_date).days
