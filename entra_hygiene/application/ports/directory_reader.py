"""Port for directory reads - driven/secondary port."""

from typing import Protocol

from ...domain.entities import DirectoryObject


class DirectoryReader(Protocol):
    """
    Port for retrieving directory snapshots from an identity provider.

    Every method returns a fully paginated, immutable snapshot. Collections
    are fetched once per run.
    """

    async def probe(self) -> None:
        """
        Verify authentication and read access once at process start.

        Raises:
            DirectorySetupError: If the directory cannot be used.
        """
        ...

    async def list_groups(self) -> list[DirectoryObject]:
        """Groups with their membership fact."""
        ...

    async def list_users(self) -> list[DirectoryObject]:
        """Users with their sign-in activity fact and account category."""
        ...

    async def list_applications(self) -> list[DirectoryObject]:
        """App registrations with their credential facts."""
        ...

    async def list_service_principals(
        self, *, sign_in_lookback_days: int | None = None
    ) -> list[DirectoryObject]:
        """
        Service principals with their credential facts.

        Args:
            sign_in_lookback_days: If set, also look up each service
                principal's most recent sign-in within this many days and
                attach it as the activity fact.

        Raises:
            DirectoryReadError: If the collection cannot be fetched.
        """
        ...
