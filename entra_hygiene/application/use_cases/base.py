"""Shared flow of every report use case."""

import logging
from abc import ABC, abstractmethod
from datetime import UTC, date, datetime

from ...domain.entities import ClassificationResult, DirectoryObject, HygieneReport
from ...domain.value_objects import ReportKind
from ..ports import DirectoryReader, ReportSink

logger = logging.getLogger(__name__)


class ReportUseCase(ABC):
    """
    Fetch a snapshot, classify it, rank the results and hand them to a sink.

    Subclasses provide the fetch and the classify/rank step; this class
    owns the order of the steps and the report assembly.
    """

    kind: ReportKind

    def __init__(
        self,
        reader: DirectoryReader,
        sink: ReportSink,
        *,
        reference_date: date | None = None,
    ) -> None:
        """
        Initialize the use case.

        Args:
            reader: Adapter for reading the directory.
            sink: Adapter for rendering the report.
            reference_date: Date classification is measured against
                (defaults to today, UTC).
        """
        self._reader = reader
        self._sink = sink
        self._reference_date = reference_date

    async def execute(self) -> HygieneReport:
        """
        Execute the report.

        Returns:
            The rendered HygieneReport.
        """
        reference_date = self._reference_date or datetime.now(UTC).date()
        logger.info("Starting %s report (reference date %s)...", self.kind, reference_date)

        objects = await self._fetch()
        logger.info("Retrieved %d %s", len(objects), self.kind.subject)

        results = self._evaluate(objects, reference_date)

        report = HygieneReport(
            kind=self.kind,
            results=results,
            total_checked=len(objects),
            reference_date=reference_date,
        )
        logger.info("Analysis complete: %s", report.get_summary())

        self._sink.render(report)
        return report

    @abstractmethod
    async def _fetch(self) -> list[DirectoryObject]:
        """Fetch the snapshot this report classifies."""

    @abstractmethod
    def _evaluate(
        self, objects: list[DirectoryObject], reference_date: date
    ) -> list[ClassificationResult]:
        """Classify and order the snapshot."""
