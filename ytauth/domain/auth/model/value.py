"""Value objects for the auth domain."""

from dataclasses import dataclass, field

from pydantic import BaseModel, ConfigDict, Field

ParamMap = dict[str, str]
"""Provider query-parameter name to value, serialized into the authorization URL."""


class AuthorizationOptions(BaseModel):
    """Provider-specific options for the authorization request.

    Every option is optional; an absent (or empty) option leaves its query
    parameter out. Both snake_case names and the camelCase spelling used
    by browser-side Google clients are accepted. Unrecognized keys are
    ignored.
    """

    model_config = ConfigDict(frozen=True, extra="ignore", populate_by_name=True)

    access_type: str | None = Field(default=None, alias="accessType")
    approval_prompt: str | None = Field(default=None, alias="approvalPrompt")
    prompt: str | None = None
    login_hint: str | None = Field(default=None, alias="loginHint")
    user_id: str | None = Field(default=None, alias="userID")
    hosted_domain: str | None = Field(default=None, alias="hostedDomain")
    hd: str | None = None
    display: str | None = None
    request_visible_actions: str | None = Field(default=None, alias="requestVisibleActions")
    openid_realm: str | None = Field(default=None, alias="openIDRealm")


class TokenSet(BaseModel):
    """Token endpoint response."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    access_token: str
    token_type: str | None = None
    expires_in: int | None = None
    refresh_token: str | None = None
    scope: str | None = None
    id_token: str | None = None


@dataclass(frozen=True)
class ProtectedResource:
    """Response of a bearer-authenticated or token endpoint request."""

    body: str
    status_code: int
    headers: dict[str, str] = field(default_factory=dict)
