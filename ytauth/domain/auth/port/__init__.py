"""Auth domain ports."""

from .identity_provider import IdentityProvider
from .oauth2_transport import OAuth2Transport

__all__ = [
    "IdentityProvider",
    "OAuth2Transport",
]
