"""HTTP adapter for the OAuth2Transport port."""

import logging
from collections.abc import Mapping

import httpx

from ytauth.domain.auth.model.value import ProtectedResource
from ytauth.domain.auth.port.oauth2_transport import OAuth2Transport
from ytauth.domain.shared.error import TransportError

logger = logging.getLogger(__name__)


class HttpxOAuth2Transport(OAuth2Transport):
    """Sends OAuth2 requests with a shared httpx.AsyncClient."""

    def __init__(self, client: httpx.AsyncClient) -> None:
        self._client = client

    async def get_protected_resource(self, url: str, access_token: str) -> ProtectedResource:
        return await self._send(
            "GET",
            url,
            headers={
                "Authorization": f"Bearer {access_token}",
                "Accept": "application/json",
            },
        )

    async def post_form(self, url: str, data: Mapping[str, str]) -> ProtectedResource:
        return await self._send(
            "POST",
            url,
            data=dict(data),
            headers={"Accept": "application/json"},
        )

    async def _send(self, method: str, url: str, **kwargs) -> ProtectedResource:
        try:
            response = await self._client.request(method, url, **kwargs)
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            status_code = e.response.status_code
            logger.error("%s %s failed: status=%d, body=%s", method, url, status_code, e.response.text)
            raise TransportError(
                f"{method} {url} returned {status_code}",
                status_code=status_code,
                cause=e,
            ) from e
        except (httpx.InvalidURL, httpx.HTTPError) as e:
            logger.exception("%s %s failed: %s", method, url, e)
            raise TransportError(f"{method} {url} failed: {e}", cause=e) from e

        return ProtectedResource(
            body=response.text,
            status_code=response.status_code,
            headers=dict(response.headers),
        )
