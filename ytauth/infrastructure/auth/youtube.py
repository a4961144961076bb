"""YouTube identity provider adapter."""

import json
import logging
from collections.abc import Iterable, Mapping
from typing import Any

from ytauth.config import YouTubeConfig
from ytauth.domain.auth.model.profile import Profile
from ytauth.domain.auth.model.value import AuthorizationOptions, ParamMap
from ytauth.domain.auth.port.identity_provider import IdentityProvider
from ytauth.domain.auth.port.oauth2_transport import OAuth2Transport
from ytauth.domain.shared.error import ProfileFetchError, ProfileParseError, TransportError

logger = logging.getLogger(__name__)

PROVIDER_NAME = "youtube"

# (option attribute, query parameter). hosted_domain and hd share "hd",
# hosted_domain wins when both are set.
_AUTHORIZATION_PARAMS: tuple[tuple[str, str], ...] = (
    ("access_type", "access_type"),
    ("approval_prompt", "approval_prompt"),
    # Undocumented by Google, but honoured by the account chooser
    ("prompt", "prompt"),
    # Derived from OpenID Connect, supported by Google's OAuth 2.0 endpoint
    ("login_hint", "login_hint"),
    # Undocumented, equivalent to login_hint
    ("user_id", "user_id"),
    ("display", "display"),
    # Space separated list of allowed app activity types
    ("request_visible_actions", "request_visible_actions"),
    # Needed when migrating users from Google's OpenID 2.0
    ("openid_realm", "openid.realm"),
)

PROFILE_FIELDS: dict[str, str | tuple[str, ...]] = {
    "id": "id",
    "username": "username",
    "displayName": "name",
    "name": ("last_name", "first_name"),
}


def map_profile_fields(requested: Iterable[str]) -> list[str]:
    """Map logical profile field names to provider field names.

    ``name`` expands in place to ``last_name, first_name``; unknown names
    are dropped.

    >>> map_profile_fields(["id", "name", "username"])
    ['id', 'last_name', 'first_name', 'username']
    """
    fields: list[str] = []
    for name in requested:
        mapped = PROFILE_FIELDS.get(name)
        if mapped is None:
            continue
        if isinstance(mapped, tuple):
            fields.extend(mapped)
        else:
            fields.append(mapped)
    return fields


def _param_value(value: Any) -> str:
    # Query values are strings; booleans go out as "true"/"false"
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def parse_profile(body: str) -> Profile:
    """Parse a YouTube channel list response into a Profile.

    The first channel item, if any, provides ``id`` and ``snippet.title``.
    An absent or empty ``items`` list, or an empty first item, gives a
    profile with neither set.

    Raises:
        ProfileParseError: If the body is not JSON or does not have the
            expected shape.
    """
    try:
        data = json.loads(body)
        items = data.get("items")
        channel = items[0] if items else None
        if not channel:
            return Profile(provider=PROVIDER_NAME, raw=body, json=data)
        return Profile(
            provider=PROVIDER_NAME,
            raw=body,
            json=data,
            id=channel.get("id"),
            display_name=channel["snippet"].get("title"),
        )
    except (ValueError, TypeError, KeyError, IndexError, AttributeError) as e:
        raise ProfileParseError(e) from e


class YouTubeIdentityProvider(IdentityProvider):
    """IdentityProvider implementation for YouTube accounts.

    Signs the user in through Google's OAuth 2.0 endpoint and reads the
    authenticated user's own channel as the profile.
    """

    def __init__(self, config: YouTubeConfig | None, transport: OAuth2Transport) -> None:
        self._config = config or YouTubeConfig()
        self._transport = transport

    @property
    def provider_name(self) -> str:
        return PROVIDER_NAME

    @property
    def authorization_url(self) -> str:
        return self._config.authorization_url

    @property
    def token_url(self) -> str:
        return self._config.token_url

    @property
    def scope(self) -> list[str]:
        return list(self._config.scope)

    @property
    def profile_url(self) -> str:
        return self._config.profile_url

    def authorization_params(
        self,
        options: AuthorizationOptions | Mapping[str, Any] | None = None,
    ) -> ParamMap:
        """Return extra Google-specific parameters for the authorization request."""
        if options is None:
            return {}
        if not isinstance(options, AuthorizationOptions):
            options = AuthorizationOptions.model_validate(
                {key: _param_value(value) for key, value in options.items() if value}
            )

        params: ParamMap = {}
        for attr, param in _AUTHORIZATION_PARAMS:
            value = getattr(options, attr)
            if value:
                params[param] = value

        # Derived from Google's OAuth 1.0 endpoint, still honoured by OAuth 2.0
        hosted_domain = options.hosted_domain or options.hd
        if hosted_domain:
            params["hd"] = hosted_domain
        return params

    async def fetch_profile(self, access_token: str) -> Profile:
        """Fetch the authenticated user's channel and normalize it."""
        logger.debug("Fetching YouTube profile from %s", self.profile_url)
        try:
            resource = await self._transport.get_protected_resource(self.profile_url, access_token)
        except TransportError as e:
            logger.warning(
                "YouTube profile fetch failed: status=%s, error=%s",
                e.status_code,
                e.message,
            )
            raise ProfileFetchError(cause=e) from e

        try:
            return parse_profile(resource.body)
        except ProfileParseError as e:
            logger.error("YouTube profile response could not be parsed: %s", e.message)
            raise

    def map_profile_fields(self, requested: Iterable[str]) -> list[str]:
        return map_profile_fields(requested)

    def profile_fields_param(self, requested: Iterable[str]) -> str:
        """Comma separated provider field list, as used in a ``fields`` query value."""
        return ",".join(map_profile_fields(requested))
