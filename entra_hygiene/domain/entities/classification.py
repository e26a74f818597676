"""Classification result."""

from dataclasses import dataclass

from ..value_objects import ClassificationStatus, SeverityBand
from .credential import CredentialFact
from .directory_object import DirectoryObject


@dataclass(frozen=True, slots=True)
class ClassificationResult:
    """Derived status of one directory object. Never persisted."""

    subject: DirectoryObject
    status: ClassificationStatus
    days: int | None = None
    threshold: int | None = None
    severity: SeverityBand | None = None
    credential: CredentialFact | None = None

    @property
    def metric_label(self) -> str:
        """Days metric for display, or the status label when unknown."""
        if self.days is None:
            return self.status.label
        return str(self.days)
