"""Use case for listing enterprise applications without recent sign-ins."""

import logging
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

logger = logging.getLogger(__name__)

DEFAULT_LOOKBACK_DAYS = 30


class FindInactiveServicePrincipals(ReportUseCase):
    """
    Report service principals with no sign-in inside a fixed window.

    Unlike the user report there is no category distinction. A failed
    sign-in lookup is treated as inactive.
    """

    kind = ReportKind.INACTIVE_APPS

    def __init__(
        self,
        reader: DirectoryReader,
        sink: ReportSink,
        lookback_days: int = DEFAULT_LOOKBACK_DAYS,
        cutoffs: SeverityCutoffs | None = None,
        *,
        reference_date: date | None = None,
    ) -> None:
        super().__init__(reader, sink, reference_date=reference_date)
        self._lookback_days = lookback_days
        self._classifier = ActivityClassifier(
            InactivityThresholds.uniform(lookback_days),
            cutoffs,
            missing_status=ClassificationStatus.NO_RECENT_SIGN_IN,
        )

    async def _fetch(self) -> list[DirectoryObject]:
        return await self._reader.list_service_principals(
            sign_in_lookback_days=self._lookback_days
        )

    def _evaluate(
        self, objects: list[DirectoryObject], reference_date: date
    ) -> list[ClassificationResult]:
        failed = sum(1 for sp in objects if sp.activity and sp.activity.lookup_failed)
        if failed:
            logger.warning("Sign-in lookup failed for %d service principals; treating them as inactive", failed)

        flagged = [
            result
            for sp in objects
            if (result := self._classifier.classify(sp, reference_date)) is not None
        ]
        return rank_by_inactivity(flagged)
