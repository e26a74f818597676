"""Entra ID directory repository implementation."""

from __future__ import annotations

import logging
from collections.abc import Awaitable
from datetime import UTC, datetime, timedelta
from typing import TypeVar

import httpx
from pydantic import BaseModel, ValidationError

from ....application.exceptions import DirectoryReadError, DirectorySetupError
from ....domain.entities import (
    ActivityFact,
    CredentialFact,
    DirectoryObject,
    MembershipFact,
)
from ....domain.value_objects import AccountCategory, CredentialType, DirectoryObjectKind
from .graph_client import GraphAuthenticationError, GraphClient, GraphClientConfig
from .models import (
    GraphApplication,
    GraphCredential,
    GraphCredentialOwner,
    GraphGroup,
    GraphServicePrincipal,
    GraphSignIn,
    GraphUser,
)

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)


class EntraIdDirectoryRepository:
    """
    Directory reader implementation using Microsoft Graph API.

    Implements the DirectoryReader port for Entra ID.
    """

    def __init__(
        self,
        config: GraphClientConfig,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
        client: GraphClient | None = None,
    ) -> None:
        """
        Initialize the repository.

        Args:
            config: Configuration for the Graph API client.
            transport: Optional httpx transport handed to the Graph client.
            client: Prebuilt Graph client, overrides ``config`` and ``transport``.
        """
        self._client = client or GraphClient(config, transport=transport)

    async def probe(self) -> None:
        """
        Authenticate and read the organization object once.

        Raises:
            DirectorySetupError: If sign-in or the read fails.
        """
        try:
            organizations = await self._client.get_organization()
        except (GraphAuthenticationError, httpx.HTTPError) as e:
            msg = f"Cannot access Entra ID: {e}"
            raise DirectorySetupError(msg) from e

        if organizations:
            logger.info(
                "Connected to tenant %s",
                organizations[0].get("displayName") or organizations[0].get("id"),
            )

    async def list_groups(self) -> list[DirectoryObject]:
        """Groups with their membership fact."""
        raw_groups = await self._read("groups", self._client.get_groups())
        return [
            DirectoryObject(
                id=group.id,
                display_name=group.display_name or "Unknown",
                kind=DirectoryObjectKind.GROUP,
                membership=MembershipFact.from_members(group.members),
            )
            for group in self._validate_all(GraphGroup, raw_groups)
        ]

    async def list_users(self) -> list[DirectoryObject]:
        """Users with their sign-in activity fact and account category."""
        raw_users = await self._read("users", self._client.get_users())
        users: list[DirectoryObject] = []

        for user in self._validate_all(GraphUser, raw_users):
            last_sign_in = None
            if user.sign_in_activity and user.sign_in_activity.last_sign_in_date_time:
                last_sign_in = self._parse_datetime(user.sign_in_activity.last_sign_in_date_time)

            users.append(
                DirectoryObject(
                    id=user.id,
                    display_name=user.display_name or "Unknown",
                    kind=DirectoryObjectKind.USER,
                    principal_name=user.user_principal_name,
                    activity=ActivityFact(
                        last_activity=last_sign_in,
                        category=AccountCategory.from_user_type(user.user_type),
                    ),
                )
            )

        return users

    async def list_applications(self) -> list[DirectoryObject]:
        """App registrations with their credential facts."""
        raw_apps = await self._read("application registrations", self._client.get_applications())
        applications = [
            self._map_credential_owner(app, DirectoryObjectKind.APPLICATION)
            for app in self._validate_all(GraphApplication, raw_apps)
        ]
        logger.info(
            "Retrieved %d credentials from %d app registrations",
            sum(len(a.credentials) for a in applications),
            len(applications),
        )
        return applications

    async def list_service_principals(
        self, *, sign_in_lookback_days: int | None = None
    ) -> list[DirectoryObject]:
        """
        Service principals with their credential facts.

        With ``sign_in_lookback_days`` each service principal's latest sign-in
        inside the window is looked up as one concurrent batch keyed by object
        id and joined back before returning.
        """
        raw_sps = await self._read("service principals", self._client.get_service_principals())
        service_principals = list(self._validate_all(GraphServicePrincipal, raw_sps))

        if sign_in_lookback_days is None:
            return [
                self._map_credential_owner(sp, DirectoryObjectKind.SERVICE_PRINCIPAL)
                for sp in service_principals
            ]

        since = datetime.now(UTC) - timedelta(days=sign_in_lookback_days)
        outcomes = await self._client.get_latest_sign_ins(
            {sp.id: sp.app_id for sp in service_principals if sp.app_id},
            since,
        )

        return [
            self._map_credential_owner(
                sp,
                DirectoryObjectKind.SERVICE_PRINCIPAL,
                activity=self._map_sign_in_outcome(sp, outcomes.get(sp.id)),
            )
            for sp in service_principals
        ]

    def _map_sign_in_outcome(
        self, sp: GraphServicePrincipal, outcome: dict | None | BaseException
    ) -> ActivityFact:
        """Turn one sign-in lookup outcome into an activity fact."""
        if isinstance(outcome, BaseException):
            logger.warning(
                "Sign-in lookup failed for service principal %s: %s",
                sp.display_name or sp.id,
                outcome,
            )
            return ActivityFact(lookup_failed=True)

        if outcome is None:
            return ActivityFact()

        try:
            sign_in = GraphSignIn.model_validate(outcome)
        except ValidationError as e:
            logger.warning(
                "Malformed sign-in record for service principal %s: %d errors",
                sp.display_name or sp.id,
                e.error_count(),
            )
            return ActivityFact(lookup_failed=True)

        last = self._parse_datetime(sign_in.created_date_time) if sign_in.created_date_time else None
        return ActivityFact(last_activity=last)

    def _map_credential_owner(
        self,
        owner: GraphCredentialOwner,
        kind: DirectoryObjectKind,
        *,
        activity: ActivityFact | None = None,
    ) -> DirectoryObject:
        """Map an application or service principal to a domain object."""
        name = owner.display_name or "Unknown"
        credentials = [
            self._map_credential(cred, CredentialType.PASSWORD, name)
            for cred in owner.password_credentials
        ] + [
            self._map_credential(cred, CredentialType.CERTIFICATE, name)
            for cred in owner.key_credentials
        ]

        return DirectoryObject(
            id=owner.id,
            display_name=name,
            kind=kind,
            principal_name=owner.app_id,
            activity=activity,
            credentials=tuple(credentials),
        )

    def _map_credential(
        self,
        raw: GraphCredential,
        credential_type: CredentialType,
        owner_name: str,
    ) -> CredentialFact:
        """
        Map a Graph credential to a domain fact.

        A missing or unparseable ``endDateTime`` yields a fact without
        expiry, which ranking skips.
        """
        expires_at = None
        if raw.end_date_time:
            expires_at = self._parse_datetime(raw.end_date_time)
        else:
            logger.warning(
                "Credential %s in %s has no expiry date",
                raw.key_id or "unknown",
                owner_name,
            )

        return CredentialFact(
            id=raw.key_id,
            credential_type=credential_type,
            display_name=raw.display_name,
            expires_at=expires_at,
        )

    async def _read(self, what: str, fetch: Awaitable[list[dict]]) -> list[dict]:
        """Await a collection fetch, translating failures to DirectoryReadError."""
        try:
            return await fetch
        except (GraphAuthenticationError, httpx.HTTPError) as e:
            msg = f"Failed to retrieve {what} from Entra ID: {e}"
            logger.exception(msg)
            raise DirectoryReadError(msg) from e

    @staticmethod
    def _validate_all(model: type[ModelT], items: list[dict]) -> list[ModelT]:
        """Validate raw items, skipping (and logging) malformed ones."""
        validated: list[ModelT] = []
        for item in items:
            try:
                validated.append(model.model_validate(item))
            except ValidationError as e:
                logger.warning(
                    "Skipping malformed %s %s: %s",
                    model.__name__,
                    item.get("id", "unknown") if isinstance(item, dict) else "unknown",
                    e.error_count(),
                )
        return validated

    @staticmethod
    def _parse_datetime(dt_string: str) -> datetime | None:
        """Parse ISO datetime string to datetime object."""
        try:
            # Handle various formats from Graph API
            dt_string = dt_string.replace("Z", "+00:00")
            dt = datetime.fromisoformat(dt_string)
            # Ensure timezone-aware
            return dt if dt.tzinfo else dt.replace(tzinfo=UTC)
        except ValueError:
            logger.warning("Failed to parse datetime: %s", dt_string)
            return None
