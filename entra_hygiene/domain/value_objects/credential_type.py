"""Credential type value object."""

from enum import StrEnum, auto


class CredentialType(StrEnum):
    """Type of credential attached to an application or service principal."""

    PASSWORD = auto()
    CERTIFICATE = auto()

    def __str__(self) -> str:
        return self.value

    @property
    def label(self) -> str:
        """Label used in console reports."""
        return "Secret" if self is CredentialType.PASSWORD else "Certificate"
