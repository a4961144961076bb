"""Auth domain models."""

from .profile import Profile
from .value import AuthorizationOptions, ParamMap, ProtectedResource, TokenSet

__all__ = [
    "AuthorizationOptions",
    "ParamMap",
    "Profile",
    "ProtectedResource",
    "TokenSet",
]
