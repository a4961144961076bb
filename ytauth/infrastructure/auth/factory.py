"""Wiring of the auth adapters from configuration."""

import httpx

from ytauth.config import Config, YouTubeConfig
from ytauth.domain.auth.port.oauth2_transport import OAuth2Transport
from ytauth.domain.auth.service.oauth2 import OAuth2Service
from ytauth.domain.shared.error import ConfigurationError
from ytauth.infrastructure.auth.youtube import YouTubeIdentityProvider
from ytauth.infrastructure.http.transport import HttpxOAuth2Transport


def build_youtube_provider(
    config: YouTubeConfig | None, transport: OAuth2Transport
) -> YouTubeIdentityProvider:
    return YouTubeIdentityProvider(config=config, transport=transport)


def build_oauth2_service(config: Config, http_client: httpx.AsyncClient) -> OAuth2Service:
    """Provide an OAuth2Service for the configured YouTube client.

    Raises:
        ConfigurationError: If no client_id is configured
    """
    youtube = config.youtube
    if not youtube.client_id:
        raise ConfigurationError(
            "YouTube client_id is not configured (set YTAUTH_YOUTUBE__CLIENT_ID)",
            code="missing_client_id",
        )

    transport = HttpxOAuth2Transport(http_client)
    return OAuth2Service(
        _provider=build_youtube_provider(youtube, transport),
        _transport=transport,
        _client_id=youtube.client_id,
        _client_secret=youtube.client_secret,
        _callback_url=youtube.callback_url,
    )
