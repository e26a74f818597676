"""Severity band value object."""

from __future__ import annotations

from enum import StrEnum, auto
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .thresholds import SeverityCutoffs


class SeverityBand(StrEnum):
    """Display-only severity derived from a days metric."""

    HIGH = auto()
    MEDIUM = auto()
    LOW = auto()

    @classmethod
    def for_days_remaining(cls, days: int, cutoffs: SeverityCutoffs) -> SeverityBand:
        """Band a days-until-expiry metric. Already expired counts as high."""
        if days <= cutoffs.high:
            return cls.HIGH
        if days <= cutoffs.medium:
            return cls.MEDIUM
        return cls.LOW

    @classmethod
    def for_days_inactive(cls, days: int | None, cutoffs: SeverityCutoffs) -> SeverityBand:
        """Band a days-since-activity metric. ``None`` (never) counts as high."""
        if days is None or days > cutoffs.medium:
            return cls.HIGH
        if days > cutoffs.high:
            return cls.MEDIUM
        return cls.LOW

    @property
    def rank(self) -> int:
        """Sort rank, most severe first."""
        match self:
            case SeverityBand.HIGH:
                return 0
            case SeverityBand.MEDIUM:
                return 1
            case SeverityBand.LOW:
                return 2

    def __str__(self) -> str:
        return self.value.capitalize()
