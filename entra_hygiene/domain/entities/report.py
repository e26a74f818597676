"""Hygiene report aggregate root."""

from collections import Counter
from dataclasses import dataclass, field
from datetime import UTC, date, datetime

from ..value_objects import ClassificationStatus, ReportKind, SeverityBand
from .classification import ClassificationResult


@dataclass(slots=True)
class HygieneReport:
    """Aggregate root representing one report run.

    ``results`` holds the flagged (or ranked) entities in display order.
    ``total_checked`` counts every object that went through classification,
    flagged or not.
    """

    kind: ReportKind
    results: list[ClassificationResult]
    total_checked: int
    reference_date: date
    generated_at: datetime = field(default_factory=lambda: datetime.now(UTC))

    @property
    def total_flagged(self) -> int:
        """Count of entities in the report."""
        return len(self.results)

    @property
    def is_empty(self) -> bool:
        """Check if the run flagged nothing."""
        return not self.results

    @property
    def breakdown(self) -> dict[str, int]:
        """Flagged counts per category, keyed by display label."""
        match self.kind:
            case ReportKind.INACTIVE_USERS:
                counts = Counter(
                    r.subject.activity.category.display_name
                    for r in self.results
                    if r.subject.activity is not None
                )
            case ReportKind.EXPIRING_CREDENTIALS:
                counts = Counter(str(r.severity) for r in self.results if r.severity is not None)
                return {
                    str(band): counts[str(band)] for band in SeverityBand if counts[str(band)]
                }
            case _:
                counts = Counter(r.status.label for r in self.results)
        return dict(counts)

    @property
    def expired_count(self) -> int:
        """Count of already expired credentials (expiry reports only)."""
        return sum(1 for r in self.results if r.status == ClassificationStatus.EXPIRED)

    def get_summary(self) -> str:
        """Generate a human-readable summary of the report."""
        if self.is_empty:
            return f"0 found: {self.kind.none_found_message} ({self.total_checked} {self.kind.subject} checked)"

        parts = [f"{count} {label.lower()}" for label, count in self.breakdown.items()]
        summary = f"{self.total_flagged} of {self.total_checked} {self.kind.subject} flagged"
        if parts:
            summary += f": {', '.join(parts)}"
        return summary
