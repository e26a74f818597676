"""Tests for the console report sink."""

from __future__ import annotations

import io
from datetime import date

from colorama import Fore
from conftest import make_app, make_group, make_user

from entra_hygiene.domain.entities import ActivityFact, DirectoryObject, HygieneReport
from entra_hygiene.domain.services import (
    ActivityClassifier,
    ExpiryClassifier,
    MembershipClassifier,
    rank_by_expiry,
)
from entra_hygiene.domain.value_objects import (
    ClassificationStatus,
    DirectoryObjectKind,
    InactivityThresholds,
    ReportKind,
)
from entra_hygiene.infrastructure.adapters.console import ConsoleReportSink


def _render(report: HygieneReport, *, use_color: bool = False) -> str:
    stream = io.StringIO()
    ConsoleReportSink(stream, use_color=use_color).render(report)
    return stream.getvalue()


class TestConsoleReportSink:
    """Tests for ConsoleReportSink."""

    def test_none_found(self, reference_date: date) -> None:
        """An empty report prints its none-found message and zero counts."""
        report = HygieneReport(
            kind=ReportKind.INACTIVE_USERS,
            results=[],
            total_checked=7,
            reference_date=reference_date,
        )
        output = _render(report)

        assert "=== Inactive Users ===" in output
        assert "No inactive users found" in output
        assert "Checked: 7" in output
        assert "Flagged: 0" in output

    def test_expiring_credentials_lines(self, reference_date: date) -> None:
        """Expiry lines show severity, app, credential and days."""
        classifier = ExpiryClassifier()
        candidates = []
        for app in [make_app("Payroll", 10, 40), make_app("Legacy", -4)]:
            candidates.extend(classifier.classify(app, reference_date))
        report = HygieneReport(
            kind=ReportKind.EXPIRING_CREDENTIALS,
            results=rank_by_expiry(candidates),
            total_checked=2,
            reference_date=reference_date,
        )
        lines = _render(report).splitlines()

        legacy = next(line for line in lines if "Legacy" in line)
        payroll = next(line for line in lines if "Payroll" in line)
        assert legacy.startswith("[High]   1.")
        assert "EXPIRED 4 days ago" in legacy
        assert "expires in 10 days (2026-03-25)" in payroll
        assert "Secret" in payroll
        assert "    High: 2" in lines
        assert "    Expired: 1" in lines

    def test_inactive_user_lines(
        self, user_thresholds: InactivityThresholds, reference_date: date
    ) -> None:
        """Never signed in shows as Never; others show days and threshold."""
        classifier = ActivityClassifier(user_thresholds)
        results = [
            classifier.classify(make_user("New Hire", None), reference_date),
            classifier.classify(make_user("Old Timer", 120), reference_date),
        ]
        report = HygieneReport(
            kind=ReportKind.INACTIVE_USERS,
            results=results,
            total_checked=2,
            reference_date=reference_date,
        )
        output = _render(report)

        assert "New Hire (new.hire@contoso.com) [Standard]: Never" in output
        assert "120 days since last sign-in (threshold 90)" in output

    def test_failed_lookup_marked(self, reference_date: date) -> None:
        """Service principals whose lookup failed say so."""
        classifier = ActivityClassifier(
            InactivityThresholds.uniform(30),
            missing_status=ClassificationStatus.NO_RECENT_SIGN_IN,
        )
        sp = DirectoryObject(
            id="sp1",
            display_name="Batch Job",
            kind=DirectoryObjectKind.SERVICE_PRINCIPAL,
            principal_name="app-1",
            activity=ActivityFact(lookup_failed=True),
        )
        report = HygieneReport(
            kind=ReportKind.INACTIVE_APPS,
            results=[classifier.classify(sp, reference_date)],
            total_checked=1,
            reference_date=reference_date,
        )

        assert "Batch Job (app-1): No sign-in in lookback window (lookup failed)" in _render(report)

    def test_empty_groups_without_severity(self, reference_date: date) -> None:
        """Group lines are numbered without a severity tag."""
        report = HygieneReport(
            kind=ReportKind.EMPTY_GROUPS,
            results=[MembershipClassifier().classify(make_group("Old Team", None, group_id="g-1"))],
            total_checked=3,
            reference_date=reference_date,
        )
        output = _render(report)

        assert "  1. Old Team (g-1): 0 members" in output

    def test_color_codes(self, reference_date: date) -> None:
        """High severity is printed in red when colour is on."""
        classifier = ExpiryClassifier()
        report = HygieneReport(
            kind=ReportKind.EXPIRING_CREDENTIALS,
            results=rank_by_expiry(classifier.classify(make_app("Soon", 2), reference_date)),
            total_checked=1,
            reference_date=reference_date,
        )

        assert Fore.RED in _render(report, use_color=True)
        assert Fore.RED not in _render(report, use_color=False)

    def test_expired_count_omitted_when_nothing_expired(self, reference_date: date) -> None:
        """The expired line only appears when a credential has already expired."""
        report = HygieneReport(
            kind=ReportKind.EXPIRING_CREDENTIALS,
            results=rank_by_expiry(ExpiryClassifier().classify(make_app("Later", 50), reference_date)),
            total_checked=1,
            reference_date=reference_date,
        )

        assert "Expired:" not in _render(report)
