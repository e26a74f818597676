"""Report kind value object."""

from enum import StrEnum


class ReportKind(StrEnum):
    """The reports this tool can produce."""

    EMPTY_GROUPS = "empty-groups"
    INACTIVE_USERS = "inactive-users"
    INACTIVE_APPS = "inactive-apps"
    EXPIRING_CREDENTIALS = "expiring-credentials"

    def __str__(self) -> str:
        return self.value

    @property
    def heading(self) -> str:
        """Report heading."""
        match self:
            case ReportKind.EMPTY_GROUPS:
                return "Empty Groups"
            case ReportKind.INACTIVE_USERS:
                return "Inactive Users"
            case ReportKind.INACTIVE_APPS:
                return "Inactive Enterprise Applications"
            case ReportKind.EXPIRING_CREDENTIALS:
                return "Top Expiring App Credentials"

    @property
    def subject(self) -> str:
        """Plural noun for the objects checked."""
        match self:
            case ReportKind.EMPTY_GROUPS:
                return "groups"
            case ReportKind.INACTIVE_USERS:
                return "users"
            case ReportKind.INACTIVE_APPS:
                return "enterprise applications"
            case ReportKind.EXPIRING_CREDENTIALS:
                return "applications"

    @property
    def none_found_message(self) -> str:
        """Message for a run that flagged nothing."""
        match self:
            case ReportKind.EMPTY_GROUPS:
                return "No empty groups found"
            case ReportKind.INACTIVE_USERS:
                return "No inactive users found"
            case ReportKind.INACTIVE_APPS:
                return "No inactive enterprise applications found"
            case ReportKind.EXPIRING_CREDENTIALS:
                return "No application credentials with expiry data found"
