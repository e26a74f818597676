"""Domain value objects - Immutable objects defined by their attributes."""

from .account_category import AccountCategory
from .classification_status import ClassificationStatus
from .credential_type import CredentialType
from .object_kind import DirectoryObjectKind
from .report_kind import ReportKind
from .severity import SeverityBand
from .thresholds import InactivityThresholds, SeverityCutoffs

__all__ = [
    "AccountCategory",
    "ClassificationStatus",
    "CredentialType",
    "DirectoryObjectKind",
    "InactivityThresholds",
    "ReportKind",
    "SeverityBand",
    "SeverityCutoffs",
]
