#!/usr/bin/env python3
"""
Entra ID Hygiene Reports

Composition root and console entry points.
Wires together all layers following hexagonal architecture principles.
"""

from __future__ import annotations

import asyncio
import logging
import sys
from typing import TYPE_CHECKING

from colorama import just_fix_windows_console

from .application.exceptions import ApplicationError, DirectoryReadError, DirectorySetupError
from .application.use_cases import (
    FindEmptyGroups,
    FindInactiveServicePrincipals,
    FindInactiveUsers,
    RankExpiringCredentials,
)
from .domain.value_objects import ReportKind
from .infrastructure.adapters import ConsoleReportSink, EntraIdDirectoryRepository
from .infrastructure.config import Settings, load_settings

if TYPE_CHECKING:
    from .application.use_cases import ReportUseCase
    from .domain.entities import HygieneReport

# Configure logging
logging.basicConfig(
    level=logging.WARNING,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    handlers=[logging.StreamHandler(sys.stderr)],
)
logger = logging.getLogger(__name__)

# Application version
__version__ = "1.0.0"


class ApplicationContainer:
    """
    Dependency injection container.

    Responsible for creating and wiring all application components.
    """

    def __init__(self, settings: Settings) -> None:
        """Initialize container with settings."""
        self._settings = settings
        self._reader: EntraIdDirectoryRepository | None = None

    def directory_reader(self) -> EntraIdDirectoryRepository:
        """The directory reader adapter, created once per run."""
        if self._reader is None:
            self._reader = EntraIdDirectoryRepository(self._settings.graph_config)
        return self._reader

    def create_report_sink(self) -> ConsoleReportSink:
        """Create the console report sink."""
        return ConsoleReportSink(use_color=not self._settings.no_color)

    def create_use_case(self, kind: ReportKind) -> ReportUseCase:
        """Create the use case producing ``kind`` with all dependencies."""
        reader = self.directory_reader()
        sink = self.create_report_sink()
        cutoffs = self._settings.severity_cutoffs

        match kind:
            case ReportKind.EMPTY_GROUPS:
                return FindEmptyGroups(reader, sink)
            case ReportKind.INACTIVE_USERS:
                return FindInactiveUsers(reader, sink, self._settings.user_thresholds, cutoffs)
            case ReportKind.INACTIVE_APPS:
                return FindInactiveServicePrincipals(reader, sink, cutoffs=cutoffs)
            case ReportKind.EXPIRING_CREDENTIALS:
                return RankExpiringCredentials(
                    reader,
                    sink,
                    cutoffs,
                    include_service_principals=self._settings.include_service_principals,
                )


class Application:
    """
    Main application orchestrator.

    Probes the directory once, then runs a single report.
    """

    def __init__(self, settings: Settings, container: ApplicationContainer | None = None) -> None:
        """Initialize application with settings."""
        self._settings = settings
        self._container = container or ApplicationContainer(settings)

    async def run_report(self, kind: ReportKind) -> HygieneReport:
        """Probe capabilities, then execute one report."""
        await self._container.directory_reader().probe()
        use_case = self._container.create_use_case(kind)
        return await use_case.execute()

    async def run(self, kind: ReportKind) -> int:
        """
        Run a report.

        Returns:
            Exit code (0 for success, including "none found"; 1 for failure).
        """
        try:
            await self.run_report(kind)
        except DirectorySetupError as e:
            logger.error("Setup failed: %s", e)
            return 1
        except DirectoryReadError as e:
            logger.error("Report aborted: %s", e)
            return 1
        return 0


async def async_main(kind: ReportKind | None = None) -> int:
    """Async entry point."""
    try:
        settings = load_settings()
        logging.getLogger().setLevel(settings.log_level.upper())
        logger.info("Entra ID Hygiene Reports %s starting...", __version__)

        app = Application(settings)
        return await app.run(kind or settings.report_kind)

    except (ApplicationError, ValueError) as e:
        logger.error("Configuration error: %s", e)
        return 1
    except KeyboardInterrupt:
        logger.info("Shutting down...")
        return 0
    except Exception:
        logger.exception("Unexpected error")
        return 1


def main(kind: ReportKind | None = None) -> None:
    """Main entry point. Without ``kind`` the report is taken from REPORT."""
    just_fix_windows_console()
    exit_code = asyncio.run(async_main(kind))
    sys.exit(exit_code)


def empty_groups() -> None:
    """Console script: groups without members."""
    main(ReportKind.EMPTY_GROUPS)


def inactive_users() -> None:
    """Console script: users past their inactivity threshold."""
    main(ReportKind.INACTIVE_USERS)


def inactive_apps() -> None:
    """Console script: enterprise applications without recent sign-ins."""
    main(ReportKind.INACTIVE_APPS)


def expiring_credentials() -> None:
    """Console script: top 10 soonest-expiring application credentials."""
    main(ReportKind.EXPIRING_CREDENTIALS)


if __name__ == "__main__":
    main()
