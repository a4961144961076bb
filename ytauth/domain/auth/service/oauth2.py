"""Generic OAuth 2.0 authorization-code flow."""

import json
import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any
from urllib.parse import urlencode

import pydantic

from ytauth.domain.auth.model.profile import Profile
from ytauth.domain.auth.model.value import AuthorizationOptions, TokenSet
from ytauth.domain.auth.port.identity_provider import IdentityProvider
from ytauth.domain.auth.port.oauth2_transport import OAuth2Transport
from ytauth.domain.shared.error import ConfigurationError, TokenExchangeError, TransportError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AuthenticationResult:
    """Tokens and profile of a completed authorization-code grant."""

    tokens: TokenSet
    profile: Profile


@dataclass
class OAuth2Service:
    """Drives the authorization-code grant for a single identity provider.

    - get_authorization_url: Build the URL to redirect the user to
    - exchange_code: Trade the callback code for tokens
    - authenticate: Exchange the code, then fetch the provider profile

    The ``state`` value is passed through untouched; storing and checking
    it is up to the caller. Nothing is persisted or retried here.
    """

    _provider: IdentityProvider
    _transport: OAuth2Transport
    _client_id: str
    _client_secret: str = ""
    _callback_url: str = ""

    @property
    def provider(self) -> IdentityProvider:
        return self._provider

    def get_authorization_url(
        self,
        state: str | None = None,
        redirect_uri: str | None = None,
        options: AuthorizationOptions | Mapping[str, Any] | None = None,
    ) -> str:
        """Generate the authorization URL for the provider.

        Args:
            state: Opaque CSRF token, echoed back by the provider
            redirect_uri: Callback URL; defaults to the configured one
            options: Provider-specific authorization options

        Returns:
            Full URL to redirect the user to
        """
        params: dict[str, str] = {
            "response_type": "code",
            "client_id": self._client_id,
            "redirect_uri": self._resolve_redirect_uri(redirect_uri),
            "scope": " ".join(self._provider.scope),
        }
        if state is not None:
            params["state"] = state
        params.update(self._provider.authorization_params(options))

        base_url = self._provider.authorization_url
        separator = "&" if "?" in base_url else "?"
        return f"{base_url}{separator}{urlencode(params)}"

    async def exchange_code(self, code: str, redirect_uri: str | None = None) -> TokenSet:
        """Exchange an authorization code for tokens.

        Raises:
            TokenExchangeError: If the token request fails or the response
                does not carry an access token
        """
        data = {
            "grant_type": "authorization_code",
            "code": code,
            "client_id": self._client_id,
            "redirect_uri": self._resolve_redirect_uri(redirect_uri),
        }
        if self._client_secret:
            data["client_secret"] = self._client_secret

        try:
            resource = await self._transport.post_form(self._provider.token_url, data)
        except TransportError as e:
            raise TokenExchangeError(
                f"{self._provider.provider_name} token exchange failed",
                code="idp_unavailable",
                cause=e,
            ) from e

        try:
            return TokenSet.model_validate(json.loads(resource.body))
        except (ValueError, pydantic.ValidationError) as e:
            logger.error(
                "Token response from %s is not usable: %s",
                self._provider.provider_name,
                e,
            )
            raise TokenExchangeError(
                f"{self._provider.provider_name} token response is not usable",
                code="oauth_error",
                cause=e,
            ) from e

    async def authenticate(self, code: str, redirect_uri: str | None = None) -> AuthenticationResult:
        """Complete the grant: exchange the code, then fetch the profile."""
        tokens = await self.exchange_code(code, redirect_uri)
        profile = await self._provider.fetch_profile(tokens.access_token)

        logger.info(
            "User authenticated: provider=%s, external_id=%s",
            profile.provider,
            profile.id,
        )
        return AuthenticationResult(tokens=tokens, profile=profile)

    def _resolve_redirect_uri(self, redirect_uri: str | None) -> str:
        resolved = redirect_uri or self._callback_url
        if not resolved:
            raise ConfigurationError(
                "No redirect URI given and no callback_url configured",
                code="missing_callback_url",
            )
        return resolved
