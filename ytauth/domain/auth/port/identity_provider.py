"""Identity provider port for the auth domain."""

from abc import abstractmethod
from collections.abc import Mapping
from typing import Any, Protocol

from ytauth.domain.auth.model.profile import Profile
from ytauth.domain.auth.model.value import AuthorizationOptions, ParamMap


class IdentityProvider(Protocol):
    """Provider capabilities the generic OAuth2 flow depends on.

    Implementations are adapters in infrastructure/ (e.g., YouTubeIdentityProvider).
    The OAuth2 handshake itself lives in OAuth2Service; a provider only
    supplies its endpoints, its extra authorization parameters, and its
    profile retrieval.
    """

    @property
    @abstractmethod
    def provider_name(self) -> str:
        """Unique identifier for this provider (e.g., 'youtube')."""
        ...

    @property
    @abstractmethod
    def authorization_url(self) -> str: ...

    @property
    @abstractmethod
    def token_url(self) -> str: ...

    @property
    @abstractmethod
    def scope(self) -> list[str]: ...

    @abstractmethod
    def authorization_params(
        self,
        options: AuthorizationOptions | Mapping[str, Any] | None = None,
    ) -> ParamMap:
        """Translate provider options into extra authorization query parameters.

        Never fails: unrecognized or empty options are left out.
        """
        ...

    @abstractmethod
    async def fetch_profile(self, access_token: str) -> Profile:
        """Fetch and normalize the authenticated user's profile.

        Args:
            access_token: Bearer token obtained from the token endpoint

        Returns:
            The normalized Profile

        Raises:
            ProfileFetchError: If the profile request failed
            ProfileParseError: If the response body could not be read
        """
        ...
