"""Domain entities - Objects with identity and lifecycle."""

from .activity import ActivityFact
from .classification import ClassificationResult
from .credential import CredentialFact
from .directory_object import DirectoryObject
from .membership import MembershipFact
from .report import HygieneReport

__all__ = [
    "ActivityFact",
    "ClassificationResult",
    "CredentialFact",
    "DirectoryObject",
    "HygieneReport",
    "MembershipFact",
]
