"""Directory object kind value object."""

from enum import StrEnum, auto


class DirectoryObjectKind(StrEnum):
    """Kind of object managed by Entra ID."""

    GROUP = auto()
    SERVICE_PRINCIPAL = auto()
    APPLICATION = auto()
    USER = auto()

    def __str__(self) -> str:
        return self.value

    @property
    def display_name(self) -> str:
        """Human-readable display name."""
        match self:
            case DirectoryObjectKind.GROUP:
                return "Group"
            case DirectoryObjectKind.SERVICE_PRINCIPAL:
                return "Enterprise Application"
            case DirectoryObjectKind.APPLICATION:
                return "App Registration"
            case DirectoryObjectKind.USER:
                return "User"
