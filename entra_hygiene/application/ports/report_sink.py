"""Port for report output - driven/secondary port."""

from typing import Protocol

from ...domain.entities import HygieneReport


class ReportSink(Protocol):
    """Port for rendering a finished report."""

    def render(self, report: HygieneReport) -> None:
        """
        Render every entity of the report followed by its summary.

        An empty report must still be rendered, with its "none found"
        message.
        """
        ...
