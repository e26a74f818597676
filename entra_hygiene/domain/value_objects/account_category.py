"""Account category value object."""

from enum import StrEnum, auto


class AccountCategory(StrEnum):
    """Category of an account, selecting its inactivity threshold."""

    STANDARD = auto()
    GUEST = auto()

    def __str__(self) -> str:
        return self.value

    @classmethod
    def from_user_type(cls, user_type: str | None) -> "AccountCategory":
        """Map Graph's ``userType`` ("Member", "Guest" or null) to a category."""
        if user_type and user_type.strip().lower() == "guest":
            return cls.GUEST
        return cls.STANDARD

    @property
    def display_name(self) -> str:
        """Human-readable display name."""
        match self:
            case AccountCategory.STANDARD:
                return "Standard"
            case AccountCategory.GUEST:
                return "Guest"
