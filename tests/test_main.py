"""Tests for the composition root."""

from __future__ import annotations

import pytest
from conftest import FakeDirectoryReader, RecordingSink, make_app, make_group

from entra_hygiene.application.exceptions import DirectoryReadError, DirectorySetupError
from entra_hygiene.application.use_cases import (
    FindEmptyGroups,
    FindInactiveServicePrincipals,
    FindInactiveUsers,
    RankExpiringCredentials,
)
from entra_hygiene.domain.value_objects import ReportKind
from entra_hygiene.infrastructure.config import Settings
from entra_hygiene.main import Application, ApplicationContainer


class FakeContainer(ApplicationContainer):
    """Container wired to in-memory adapters."""

    def __init__(self, settings: Settings, reader: FakeDirectoryReader) -> None:
        super().__init__(settings)
        self._reader = reader
        self.sink = RecordingSink()

    def directory_reader(self) -> FakeDirectoryReader:
        return self._reader

    def create_report_sink(self) -> RecordingSink:
        return self.sink


class FailingProbeReader(FakeDirectoryReader):
    async def probe(self) -> None:
        raise DirectorySetupError("Cannot access Entra ID: 403 Forbidden")


class FailingGroupsReader(FakeDirectoryReader):
    async def list_groups(self) -> list:
        raise DirectoryReadError("Failed to retrieve groups from Entra ID: timeout")


@pytest.fixture
def settings(monkeypatch: pytest.MonkeyPatch) -> Settings:
    for key in ("AZURE_CLIENT_SECRET", "AUTH_MODE", "REPORT", "INCLUDE_SERVICE_PRINCIPALS"):
        monkeypatch.delenv(key, raising=False)
    return Settings()


class TestApplicationContainer:
    """Tests for ApplicationContainer."""

    @pytest.mark.parametrize(
        ("kind", "expected"),
        [
            (ReportKind.EMPTY_GROUPS, FindEmptyGroups),
            (ReportKind.INACTIVE_USERS, FindInactiveUsers),
            (ReportKind.INACTIVE_APPS, FindInactiveServicePrincipals),
            (ReportKind.EXPIRING_CREDENTIALS, RankExpiringCredentials),
        ],
    )
    def test_create_use_case(self, settings: Settings, kind: ReportKind, expected: type) -> None:
        """Each report kind maps to its use case."""
        container = FakeContainer(settings, FakeDirectoryReader())
        assert isinstance(container.create_use_case(kind), expected)

    def test_directory_reader_is_shared(self, settings: Settings) -> None:
        """The real reader is built once per run."""
        container = ApplicationContainer(settings)
        assert container.directory_reader() is container.directory_reader()


class TestApplication:
    """Tests for Application."""

    async def test_run_probes_then_reports(self, settings: Settings) -> None:
        """A successful run probes first and exits with 0."""
        reader = FakeDirectoryReader(groups=[make_group("Empty", [])])
        container = FakeContainer(settings, reader)

        exit_code = await Application(settings, container).run(ReportKind.EMPTY_GROUPS)

        assert exit_code == 0
        assert reader.probed is True
        assert container.sink.reports[0].total_flagged == 1

    async def test_none_found_is_success(self, settings: Settings) -> None:
        """An empty report is not a failure."""
        container = FakeContainer(settings, FakeDirectoryReader(applications=[make_app("No secrets")]))

        exit_code = await Application(settings, container).run(ReportKind.EXPIRING_CREDENTIALS)

        assert exit_code == 0
        assert container.sink.reports[0].is_empty is True
        assert container.sink.reports[0].total_checked == 1

    async def test_probe_failure_stops_before_report(self, settings: Settings) -> None:
        """Setup errors exit with 1 and render nothing."""
        container = FakeContainer(settings, FailingProbeReader())

        exit_code = await Application(settings, container).run(ReportKind.EMPTY_GROUPS)

        assert exit_code == 1
        assert container.sink.reports == []

    async def test_read_failure_aborts_report(self, settings: Settings) -> None:
        """A failed collection read exits with 1 and renders nothing."""
        container = FakeContainer(settings, FailingGroupsReader())

        exit_code = await Application(settings, container).run(ReportKind.EMPTY_GROUPS)

        assert exit_code == 1
        assert container.sink.reports == []
