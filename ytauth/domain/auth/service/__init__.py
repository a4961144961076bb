from .oauth2 import AuthenticationResult, OAuth2Service

__all__ = [
    "AuthenticationResult",
    "OAuth2Service",
]
