"""Use case for listing users that stopped signing in."""

from datetime import date

from ...domain.entities import ClassificationResult, DirectoryObject
from ...domain.services import ActivityClassifier, rank_by_inactivity
from ...domain.value_objects import (
    ClassificationStatus,
    InactivityThresholds,
    ReportKind,
    SeverityCutoffs,
)
from ..ports import DirectoryReader, ReportSink
from .base import ReportUseCase


class FindInactiveUsers(ReportUseCase):
    """
    Report users past their category's inactivity threshold.

    Guests and standard members have separate thresholds (30 and 90 days
    by default). Users that never signed in are always reported.
    """

    kind = ReportKind.INACTIVE_USERS

    def __init__(
        self,
        reader: DirectoryReader,
        sink: ReportSink,
        thresholds: InactivityThresholds | None = None,
        cutoffs: SeverityCutoffs | None = None,
        *,
        reference_date: date | None = None,
    ) -> None:
        super().__init__(reader, sink, reference_date=reference_date)
        self._classifier = ActivityClassifier(
            thresholds or InactivityThresholds(),
            cutoffs,
            missing_status=ClassificationStatus.NEVER_SIGNED_IN,
        )

    async def _fetch(self) -> list[DirectoryObject]:
        return await self._reader.list_users()

    def _evaluate(
        self, objects: list[DirectoryObject], reference_date: date
    ) -> list[ClassificationResult]:
        flagged = [
            result
            for user in objects
            if (result := self._classifier.classify(user, reference_date)) is not None
        ]
        return rank_by_inactivity(flagged)
