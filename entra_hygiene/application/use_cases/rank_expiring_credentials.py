"""Use case for ranking the soonest-expiring application credentials."""

import logging
from datetime import date

from ...domain.entities import ClassificationResult, DirectoryObject
from ...domain.services import DEFAULT_TOP_N, ExpiryClassifier, rank_by_expiry
from ...domain.value_objects import ReportKind, SeverityCutoffs
from ..ports import DirectoryReader, ReportSink
from .base import ReportUseCase

logger = logging.getLogger(__name__)


class RankExpiringCredentials(ReportUseCase):
    """
    Report the applications whose next credential expiry is soonest.

    Each application is represented by its earliest-expiring secret or
    certificate; the list is cut to the top N.
    """

    kind = ReportKind.EXPIRING_CREDENTIALS

    def __init__(
        self,
        reader: DirectoryReader,
        sink: ReportSink,
        cutoffs: SeverityCutoffs | None = None,
        *,
        top_n: int = DEFAULT_TOP_N,
        include_service_principals: bool = False,
        reference_date: date | None = None,
    ) -> None:
        """
        Initialize the use case.

        Args:
            reader: Adapter for reading the directory.
            sink: Adapter for rendering the report.
            cutoffs: Severity banding cutoffs.
            top_n: Maximum number of applications reported.
            include_service_principals: Also rank service principal credentials.
            reference_date: Date expiry is measured against.
        """
        super().__init__(reader, sink, reference_date=reference_date)
        self._classifier = ExpiryClassifier(cutoffs)
        self._top_n = top_n
        self._include_service_principals = include_service_principals

    async def _fetch(self) -> list[DirectoryObject]:
        objects = await self._reader.list_applications()
        if self._include_service_principals:
            objects = objects + await self._reader.list_service_principals()
        return objects

    def _evaluate(
        self, objects: list[DirectoryObject], reference_date: date
    ) -> list[ClassificationResult]:
        candidates: list[ClassificationResult] = []
        for owner in objects:
            candidates.extend(self._classifier.classify(owner, reference_date))

        skipped = sum(1 for o in objects for c in o.credentials if not c.has_expiry)
        if skipped:
            logger.info("Skipped %d credentials without expiry data", skipped)

        return rank_by_expiry(candidates, self._top_n)
