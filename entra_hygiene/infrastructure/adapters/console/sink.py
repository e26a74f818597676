"""Console report sink with coloured, levelled output."""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING, TextIO

from colorama import Fore, Style

from ....domain.value_objects import ReportKind, SeverityBand

if TYPE_CHECKING:
    from ....domain.entities import ClassificationResult, HygieneReport

_SEVERITY_COLORS = {
    SeverityBand.HIGH: Fore.RED,
    SeverityBand.MEDIUM: Fore.YELLOW,
    SeverityBand.LOW: Fore.GREEN,
}


class ConsoleReportSink:
    """Print reports as text lines, coloured by severity."""

    def __init__(self, stream: TextIO | None = None, *, use_color: bool = True) -> None:
        """
        Initialize the sink.

        Args:
            stream: Where to write (defaults to stdout at render time).
            use_color: Emit ANSI colour codes.
        """
        self._stream = stream
        self._use_color = use_color
        self._logger = logging.getLogger(self.__class__.__name__)

    def render(self, report: HygieneReport) -> None:
        """Write the report header, one line per entity and the summary."""
        self._write(self._paint(f"=== {report.kind.heading} ===", Fore.CYAN + Style.BRIGHT))
        self._write(f"Reference date: {report.reference_date.isoformat()}")
        self._write("")

        if report.is_empty:
            self._write(self._paint(f"[+] {report.kind.none_found_message}", Fore.GREEN))
        else:
            for position, result in enumerate(report.results, start=1):
                self._write(self._format_result(report.kind, position, result))

        self._write("")
        self._write(self._paint("[*] Summary", Fore.CYAN))
        self._write(f"    Checked: {report.total_checked}")
        self._write(f"    Flagged: {report.total_flagged}")
        if report.kind is ReportKind.EXPIRING_CREDENTIALS and report.expired_count:
            self._write(f"    Expired: {report.expired_count}")
        for label, count in report.breakdown.items():
            self._write(f"    {label}: {count}")
        self._logger.debug("Rendered %s report with %d entries", report.kind, report.total_flagged)

    def format_line(self, kind: ReportKind, result: ClassificationResult) -> str:
        """Plain (uncoloured) description of one result."""
        subject = result.subject
        name = f"{subject.display_name} ({subject.primary_identifier})"

        match kind:
            case ReportKind.EMPTY_GROUPS:
                return f"{name}: 0 members"

            case ReportKind.INACTIVE_USERS | ReportKind.INACTIVE_APPS:
                category = ""
                if kind is ReportKind.INACTIVE_USERS and subject.activity is not None:
                    category = f" [{subject.activity.category.display_name}]"
                if not result.status.has_activity_timestamp:
                    detail = result.status.label
                    if subject.activity is not None and subject.activity.lookup_failed:
                        detail += " (lookup failed)"
                else:
                    detail = f"{result.days} days since last sign-in (threshold {result.threshold})"
                return f"{name}{category}: {detail}"

            case ReportKind.EXPIRING_CREDENTIALS:
                credential = result.credential
                what = f"{credential.credential_type.label} '{credential.label}'" if credential else "credential"
                if result.days is not None and result.days < 0:
                    when = f"EXPIRED {-result.days} days ago"
                else:
                    when = f"expires in {result.metric_label} days"
                if credential is not None and credential.expires_at is not None:
                    when += f" ({credential.expires_at.date().isoformat()})"
                return f"{name} - {what}: {when}"

    def _format_result(self, kind: ReportKind, position: int, result: ClassificationResult) -> str:
        line = f"{position:>3}. {self.format_line(kind, result)}"
        if result.severity is None:
            return line
        tag = f"[{result.severity}]"
        return f"{self._paint(tag, _SEVERITY_COLORS[result.severity])} {line}"

    def _paint(self, text: str, color: str) -> str:
        if not self._use_color:
            return text
        return f"{color}{text}{Style.RESET_ALL}"

    def _write(self, line: str) -> None:
        print(line, file=self._stream or sys.stdout)  # noqa: T201
