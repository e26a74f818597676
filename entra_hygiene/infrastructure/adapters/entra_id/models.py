"""Graph API payload models.

Only the fields the reports read are declared; everything else Graph
returns is ignored. Timestamps stay strings here so that a malformed value
affects a single credential or account instead of the whole page.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


class GraphModel(BaseModel):
    """Base for Graph payloads (camelCase aliases, unknown fields ignored)."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore", frozen=True)


class GraphCredential(GraphModel):
    """A ``passwordCredential`` or ``keyCredential``."""

    key_id: str = Field(default="", alias="keyId")
    display_name: str | None = Field(default=None, alias="displayName")
    end_date_time: str | None = Field(default=None, alias="endDateTime")


class GraphCredentialOwner(GraphModel):
    """Fields shared by applications and service principals."""

    id: str
    app_id: str | None = Field(default=None, alias="appId")
    display_name: str | None = Field(default=None, alias="displayName")
    password_credentials: list[GraphCredential] = Field(default_factory=list, alias="passwordCredentials")
    key_credentials: list[GraphCredential] = Field(default_factory=list, alias="keyCredentials")

    @field_validator("password_credentials", "key_credentials", mode="before")
    @classmethod
    def _null_as_empty(cls, value: Any) -> Any:
        return [] if value is None else value


class GraphApplication(GraphCredentialOwner):
    """An application registration."""


class GraphServicePrincipal(GraphCredentialOwner):
    """A service principal (enterprise application)."""


class GraphGroup(GraphModel):
    """A group with its expanded ``members``."""

    id: str
    display_name: str | None = Field(default=None, alias="displayName")
    members: list[dict[str, Any]] | None = None


class GraphSignInActivity(GraphModel):
    """A user's ``signInActivity`` resource."""

    last_sign_in_date_time: str | None = Field(default=None, alias="lastSignInDateTime")


class GraphUser(GraphModel):
    """A user with sign-in activity."""

    id: str
    display_name: str | None = Field(default=None, alias="displayName")
    user_principal_name: str | None = Field(default=None, alias="userPrincipalName")
    user_type: str | None = Field(default=None, alias="userType")
    sign_in_activity: GraphSignInActivity | None = Field(default=None, alias="signInActivity")


class GraphSignIn(GraphModel):
    """An entry of ``/auditLogs/signIns``."""

    id: str = ""
    app_id: str | None = Field(default=None, alias="appId")
    created_date_time: str | None = Field(default=None, alias="createdDateTime")
