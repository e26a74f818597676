"""Pytest configuration and shared fixtures."""

from __future__ import annotations

from datetime import UTC, date, datetime, timedelta
from itertools import count

import pytest

from entra_hygiene.domain.entities import (
    ActivityFact,
    CredentialFact,
    DirectoryObject,
    HygieneReport,
    MembershipFact,
)
from entra_hygiene.domain.value_objects import (
    AccountCategory,
    CredentialType,
    DirectoryObjectKind,
    InactivityThresholds,
    SeverityCutoffs,
)

REFERENCE_DATE = date(2026, 3, 15)

_ids = count(1)


def _next_id(prefix: str) -> str:
    return f"{prefix}-{next(_ids):04d}"


def at_noon(day: date) -> datetime:
    """Timezone-aware midday timestamp on ``day``."""
    return datetime(day.year, day.month, day.day, 12, 0, tzinfo=UTC)


def make_group(name: str, members: list | None, *, group_id: str | None = None) -> DirectoryObject:
    """A group snapshot with the given member list."""
    return DirectoryObject(
        id=group_id or _next_id("grp"),
        display_name=name,
        kind=DirectoryObjectKind.GROUP,
        membership=MembershipFact.from_members(members),
    )


def make_user(
    name: str,
    days_since_sign_in: int | None,
    category: AccountCategory = AccountCategory.STANDARD,
    *,
    user_id: str | None = None,
) -> DirectoryObject:
    """A user whose last sign-in was ``days_since_sign_in`` days before the reference date."""
    last = None
    if days_since_sign_in is not None:
        last = at_noon(REFERENCE_DATE - timedelta(days=days_since_sign_in))
    return DirectoryObject(
        id=user_id or _next_id("usr"),
        display_name=name,
        kind=DirectoryObjectKind.USER,
        principal_name=f"{name.lower().replace(' ', '.')}@contoso.com",
        activity=ActivityFact(last_activity=last, category=category),
    )


def make_credential(
    days_until_expiry: int | None,
    *,
    name: str | None = None,
    credential_type: CredentialType = CredentialType.PASSWORD,
) -> CredentialFact:
    """A credential expiring ``days_until_expiry`` days after the reference date."""
    expires_at = None
    if days_until_expiry is not None:
        expires_at = at_noon(REFERENCE_DATE + timedelta(days=days_until_expiry))
    return CredentialFact(
        id=_next_id("key"),
        credential_type=credential_type,
        display_name=name,
        expires_at=expires_at,
    )


def make_app(
    name: str,
    *expiries: int | None,
    app_id: str | None = None,
    kind: DirectoryObjectKind = DirectoryObjectKind.APPLICATION,
) -> DirectoryObject:
    """An application with one credential per expiry offset."""
    return DirectoryObject(
        id=app_id or _next_id("app"),
        display_name=name,
        kind=kind,
        principal_name=_next_id("appid"),
        credentials=tuple(make_credential(days) for days in expiries),
    )


class FakeDirectoryReader:
    """In-memory DirectoryReader."""

    def __init__(
        self,
        *,
        groups: list[DirectoryObject] | None = None,
        users: list[DirectoryObject] | None = None,
        applications: list[DirectoryObject] | None = None,
        service_principals: list[DirectoryObject] | None = None,
    ) -> None:
        self.groups = groups or []
        self.users = users or []
        self.applications = applications or []
        self.service_principals = service_principals or []
        self.probed = False
        self.lookback_days: int | None = None

    async def probe(self) -> None:
        self.probed = True

    async def list_groups(self) -> list[DirectoryObject]:
        return list(self.groups)

    async def list_users(self) -> list[DirectoryObject]:
        return list(self.users)

    async def list_applications(self) -> list[DirectoryObject]:
        return list(self.applications)

    async def list_service_principals(
        self, *, sign_in_lookback_days: int | None = None
    ) -> list[DirectoryObject]:
        self.lookback_days = sign_in_lookback_days
        return list(self.service_principals)


class RecordingSink:
    """ReportSink that keeps every rendered report."""

    def __init__(self) -> None:
        self.reports: list[HygieneReport] = []

    def render(self, report: HygieneReport) -> None:
        self.reports.append(report)


@pytest.fixture
def reference_date() -> date:
    """Fixed date every classification is measured against."""
    return REFERENCE_DATE


@pytest.fixture
def user_thresholds() -> InactivityThresholds:
    """Default user thresholds (90 standard, 30 guest)."""
    return InactivityThresholds(standard=90, guest=30)


@pytest.fixture
def cutoffs() -> SeverityCutoffs:
    """Default severity cutoffs (30, 90)."""
    return SeverityCutoffs(high=30, medium=90)


@pytest.fixture
def sink() -> RecordingSink:
    """A sink recording rendered reports."""
    return RecordingSink()
