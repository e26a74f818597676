"""Use case for listing groups without members."""

from datetime import date

from ...domain.entities import ClassificationResult, DirectoryObject
from ...domain.services import MembershipClassifier
from ...domain.value_objects import ReportKind
from .base import ReportUseCase


class FindEmptyGroups(ReportUseCase):
    """Report every group whose member count is zero."""

    kind = ReportKind.EMPTY_GROUPS

    async def _fetch(self) -> list[DirectoryObject]:
        return await self._reader.list_groups()

    def _evaluate(
        self, objects: list[DirectoryObject], reference_date: date
    ) -> list[ClassificationResult]:
        classifier = MembershipClassifier()
        flagged = [r for r in map(classifier.classify, objects) if r is not None]
        return sorted(flagged, key=lambda r: r.subject.display_name.casefold())
