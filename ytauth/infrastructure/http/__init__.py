"""HTTP adapters."""

from .client import create_http_client
from .transport import HttpxOAuth2Transport

__all__ = [
    "HttpxOAuth2Transport",
    "create_http_client",
]
