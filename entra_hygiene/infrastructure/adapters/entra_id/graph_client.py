"""Microsoft Graph API client for Entra ID."""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from datetime import UTC, datetime, timedelta
from typing import Any, ClassVar

import httpx
import msal

logger = logging.getLogger(__name__)

# Microsoft Graph Command Line Tools, the public client behind Connect-MgGraph
DEFAULT_PUBLIC_CLIENT_ID = "14d82eec-204b-4c2f-b7e8-296a70dab67e"


class GraphAuthenticationError(RuntimeError):
    """Raised when no access token could be acquired."""


@dataclass(frozen=True, slots=True)
class GraphClientConfig:
    """Configuration for Microsoft Graph API client."""

    tenant_id: str = "organizations"
    client_id: str = DEFAULT_PUBLIC_CLIENT_ID
    client_secret: str = ""
    auth_mode: str = "interactive"
    timeout: float = 30.0
    max_concurrency: int = 8

    @property
    def uses_client_credentials(self) -> bool:
        """Check if the app-only (client secret) flow is configured."""
        return self.auth_mode == "client_credentials"


class GraphClient:
    """
    Async client for Microsoft Graph API.

    Handles authentication and paginated requests to the Graph API. Every
    collection is drained through ``@odata.nextLink`` before it is returned.
    """

    GRAPH_BASE_URL: ClassVar[str] = "https://graph.microsoft.com/v1.0"
    AUTHORITY_BASE: ClassVar[str] = "https://login.microsoftonline.com"
    APP_SCOPE: ClassVar[list[str]] = ["https://graph.microsoft.com/.default"]
    DELEGATED_SCOPES: ClassVar[list[str]] = [
        "https://graph.microsoft.com/Application.Read.All",
        "https://graph.microsoft.com/AuditLog.Read.All",
        "https://graph.microsoft.com/Directory.Read.All",
        "https://graph.microsoft.com/GroupMember.Read.All",
        "https://graph.microsoft.com/User.Read.All",
    ]

    def __init__(
        self,
        config: GraphClientConfig,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """
        Initialize the Graph client.

        Args:
            config: Client configuration.
            transport: Optional httpx transport, used to fake Graph in tests.
        """
        self._config = config
        self._transport = transport
        self._access_token: str | None = None
        self._token_expiry: datetime | None = None
        self._msal_app: msal.ClientApplication | None = None

    def _get_msal_app(self) -> msal.ClientApplication:
        """Get or create MSAL application instance."""
        if self._msal_app is None:
            authority = f"{self.AUTHORITY_BASE}/{self._config.tenant_id}"
            if self._config.uses_client_credentials:
                self._msal_app = msal.ConfidentialClientApplication(
                    client_id=self._config.client_id,
                    client_credential=self._config.client_secret,
                    authority=authority,
                )
            else:
                self._msal_app = msal.PublicClientApplication(
                    client_id=self._config.client_id,
                    authority=authority,
                )
        return self._msal_app

    def _request_token(self) -> dict[str, Any]:
        """Run the configured MSAL flow and return its raw result."""
        app = self._get_msal_app()

        if self._config.uses_client_credentials:
            return app.acquire_token_for_client(scopes=self.APP_SCOPE)

        accounts = app.get_accounts()
        if accounts:
            result = app.acquire_token_silent(self.DELEGATED_SCOPES, account=accounts[0])
            if result and "access_token" in result:
                return result

        if self._config.auth_mode == "device_code":
            flow = app.initiate_device_flow(scopes=self.DELEGATED_SCOPES)
            if "user_code" not in flow:
                return flow
            print(flow["message"], flush=True)  # noqa: T201
            return app.acquire_token_by_device_flow(flow)

        logger.info("Opening browser for interactive sign-in...")
        return app.acquire_token_interactive(
            scopes=self.DELEGATED_SCOPES,
            prompt="select_account",
        )

    async def _acquire_token(self) -> str:
        """Acquire access token, reusing it until shortly before expiry."""
        if self._access_token and self._token_expiry and datetime.now(UTC) < self._token_expiry:
            return self._access_token

        result = self._request_token()

        if not result or "access_token" not in result:
            result = result or {}
            error = result.get("error_description", result.get("error", "Unknown error"))
            msg = f"Failed to acquire access token: {error}"
            raise GraphAuthenticationError(msg)

        self._access_token = result["access_token"]
        expires_in = int(result.get("expires_in", 3600))
        # Refresh 5 minutes before expiry
        self._token_expiry = datetime.now(UTC) + timedelta(seconds=expires_in - 300)

        return self._access_token

    def _new_http_client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            base_url=self.GRAPH_BASE_URL,
            timeout=self._config.timeout,
            transport=self._transport,
        )

    async def _headers(self) -> dict[str, str]:
        token = await self._acquire_token()
        return {
            "Authorization": f"Bearer {token}",
            "Content-Type": "application/json",
        }

    async def get_organization(self) -> list[dict]:
        """Read the tenant's organization object (capability probe)."""
        return await self._get_all_pages("/organization", {"$select": "id,displayName"})

    async def get_groups(self) -> list[dict]:
        """
        Retrieve all groups with their members expanded.

        Returns:
            List of group dictionaries from Graph API.
        """
        logger.info("Fetching groups from Entra ID...")
        groups = await self._get_all_pages(
            "/groups",
            {"$select": "id,displayName", "$expand": "members($select=id)"},
        )
        logger.info("Found %d groups", len(groups))
        return groups

    async def get_users(self) -> list[dict]:
        """
        Retrieve all users with their sign-in activity.

        Returns:
            List of user dictionaries from Graph API.
        """
        logger.info("Fetching users from Entra ID...")
        users = await self._get_all_pages(
            "/users",
            {
                "$select": "id,displayName,userPrincipalName,userType,signInActivity",
                "$top": "999",
            },
        )
        logger.info("Found %d users", len(users))
        return users

    async def get_applications(self) -> list[dict]:
        """
        Retrieve all application registrations.

        Returns:
            List of application dictionaries from Graph API.
        """
        logger.info("Fetching application registrations from Entra ID...")
        applications = await self._get_all_pages(
            "/applications",
            {"$select": "id,appId,displayName,passwordCredentials,keyCredentials"},
        )
        logger.info("Found %d application registrations", len(applications))
        return applications

    async def get_service_principals(self) -> list[dict]:
        """
        Retrieve all service principals.

        Returns:
            List of service principal dictionaries from Graph API.
        """
        logger.info("Fetching service principals from Entra ID...")
        service_principals = await self._get_all_pages(
            "/servicePrincipals",
            {"$select": "id,appId,displayName,passwordCredentials,keyCredentials"},
        )
        logger.info("Found %d service principals", len(service_principals))
        return service_principals

    async def get_latest_sign_ins(
        self, app_ids: dict[str, str], since: datetime
    ) -> dict[str, dict | None | BaseException]:
        """
        Look up the most recent sign-in of many applications concurrently.

        At most ``max_concurrency`` requests are in flight. Each lookup is
        independent; a failed lookup is returned as its exception instead of
        aborting the batch.

        Args:
            app_ids: Mapping of caller key (object id) to application id.
            since: Start of the lookback window.

        Returns:
            Mapping of the same keys to the latest sign-in record, None if
            there was none in the window, or the exception raised.
        """
        semaphore = asyncio.Semaphore(max(1, self._config.max_concurrency))
        since_str = since.astimezone(UTC).strftime("%Y-%m-%dT%H:%M:%SZ")

        async with self._new_http_client() as client:

            async def lookup(app_id: str) -> dict | None:
                async with semaphore:
                    params = {
                        "$filter": f"appId eq '{app_id}' and createdDateTime ge {since_str}",
                        "$orderby": "createdDateTime desc",
                        "$top": "1",
                    }
                    response = await client.get(
                        "/auditLogs/signIns", params=params, headers=await self._headers()
                    )
                    response.raise_for_status()
                    values = response.json().get("value", [])
                    return values[0] if values else None

            keys = list(app_ids)
            outcomes = await asyncio.gather(
                *(lookup(app_ids[key]) for key in keys),
                return_exceptions=True,
            )

        return dict(zip(keys, outcomes, strict=True))

    async def _get_all_pages(
        self, endpoint: str, params: dict[str, str] | None = None
    ) -> list[dict]:
        """
        Retrieve all pages from a paginated Graph API endpoint.

        Args:
            endpoint: The API endpoint path.
            params: Query parameters for the first page. Later pages reuse
                the query encoded in ``@odata.nextLink``.

        Returns:
            Combined list of all results across pages.
        """
        results: list[dict] = []
        url: str | None = endpoint
        query = params

        async with self._new_http_client() as client:
            while url:
                response = await client.get(url, params=query, headers=await self._headers())
                response.raise_for_status()
                data = response.json()

                results.extend(data.get("value", []))
                url = data.get("@odata.nextLink")
                query = None

        return results
