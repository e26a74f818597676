"""Classification status value object."""

from enum import StrEnum, auto


class ClassificationStatus(StrEnum):
    """Derived status of a directory object after classification."""

    EMPTY = auto()
    INACTIVE = auto()
    NEVER_SIGNED_IN = auto()
    NO_RECENT_SIGN_IN = auto()
    EXPIRED = auto()
    EXPIRING = auto()

    @property
    def has_activity_timestamp(self) -> bool:
        """Check if the status was derived from an actual sign-in timestamp."""
        return self not in {ClassificationStatus.NEVER_SIGNED_IN, ClassificationStatus.NO_RECENT_SIGN_IN}

    @property
    def label(self) -> str:
        """Text shown in place of a missing days metric."""
        match self:
            case ClassificationStatus.NEVER_SIGNED_IN:
                return "Never"
            case ClassificationStatus.NO_RECENT_SIGN_IN:
                return "No sign-in in lookback window"
            case _:
                return self.value.replace("_", " ").capitalize()

    def __str__(self) -> str:
        return self.value
