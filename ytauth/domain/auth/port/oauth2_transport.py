"""HTTP transport port used by the OAuth2 flow and providers."""

from abc import abstractmethod
from collections.abc import Mapping
from typing import Protocol

from ytauth.domain.auth.model.value import ProtectedResource


class OAuth2Transport(Protocol):
    """Sends the two kinds of requests an OAuth2 client makes."""

    @abstractmethod
    async def get_protected_resource(self, url: str, access_token: str) -> ProtectedResource:
        """GET a resource authenticated with a bearer token.

        Raises:
            TransportError: On network failure or a non-2xx response
        """
        ...

    @abstractmethod
    async def post_form(self, url: str, data: Mapping[str, str]) -> ProtectedResource:
        """POST a form-encoded body (token endpoint requests).

        Raises:
            TransportError: On network failure or a non-2xx response
        """
        ...
