"""Identity provider adapters."""

from .factory import build_oauth2_service, build_youtube_provider
from .youtube import YouTubeIdentityProvider, map_profile_fields, parse_profile

__all__ = [
    "YouTubeIdentityProvider",
    "build_oauth2_service",
    "build_youtube_provider",
    "map_profile_fields",
    "parse_profile",
]
