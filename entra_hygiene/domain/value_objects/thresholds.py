"""Threshold value objects."""

from dataclasses import dataclass

from ..exceptions import InvalidThresholdsError
from .account_category import AccountCategory


@dataclass(frozen=True, slots=True)
class InactivityThresholds:
    """Days without sign-in after which an account is inactive, per category."""

    standard: int = 90
    guest: int = 30

    def __post_init__(self) -> None:
        """Validate thresholds are positive."""
        if self.standard < 1 or self.guest < 1:
            msg = (
                f"Inactivity thresholds must be positive: "
                f"standard({self.standard}), guest({self.guest})"
            )
            raise InvalidThresholdsError(msg)

    @classmethod
    def uniform(cls, days: int) -> "InactivityThresholds":
        """Single window applied regardless of category."""
        return cls(standard=days, guest=days)

    def for_category(self, category: AccountCategory) -> int:
        """Threshold applying to ``category``."""
        if category is AccountCategory.GUEST:
            return self.guest
        return self.standard


@dataclass(frozen=True, slots=True)
class SeverityCutoffs:
    """Day cutoffs for severity banding (in days)."""

    high: int = 30
    medium: int = 90

    def __post_init__(self) -> None:
        """Validate cutoffs are in correct order."""
        if not (0 <= self.high < self.medium):
            msg = f"Cutoffs must be: 0 <= high({self.high}) < medium({self.medium})"
            raise InvalidThresholdsError(msg)
