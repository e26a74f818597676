"""Directory object entity."""

from dataclasses import dataclass, field

from ..value_objects import DirectoryObjectKind
from .activity import ActivityFact
from .credential import CredentialFact
from .membership import MembershipFact


@dataclass(frozen=True, slots=True)
class DirectoryObject:
    """Snapshot of a group, application, service principal or user."""

    id: str
    display_name: str
    kind: DirectoryObjectKind
    principal_name: str | None = None
    membership: MembershipFact | None = None
    activity: ActivityFact | None = None
    credentials: tuple[CredentialFact, ...] = field(default_factory=tuple)

    @property
    def primary_identifier(self) -> str:
        """Identifier shown next to the name (appId or UPN where known)."""
        return self.principal_name or self.id
