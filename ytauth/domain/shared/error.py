"""Error hierarchy for ytauth.

Error layers:
- YTAuthError: Base class for all ytauth errors
- InfrastructureError: Failures talking to Google or a misconfigured setup

Infrastructure errors that wrap a lower-level exception keep it in ``cause``
and raise it as ``__cause__`` too.
"""


class YTAuthError(Exception):
    """Base class for all ytauth errors."""

    def __init__(self, message: str, code: str | None = None) -> None:
        self.message = message
        self.code = code or self.__class__.__name__
        super().__init__(message)


# =============================================================================
# Infrastructure Errors
# =============================================================================


class InfrastructureError(YTAuthError):
    """Base class for infrastructure/system errors."""


class ConfigurationError(InfrastructureError):
    """System misconfiguration detected."""


class ExternalServiceError(InfrastructureError):
    """External service (Google OAuth, YouTube Data API) is unavailable or failed."""

    def __init__(
        self,
        message: str,
        code: str | None = None,
        cause: BaseException | None = None,
    ) -> None:
        super().__init__(message, code=code)
        self.cause = cause


class TransportError(ExternalServiceError):
    """HTTP request failed at the transport level or returned a non-2xx status."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        cause: BaseException | None = None,
    ) -> None:
        super().__init__(message, code="transport_error", cause=cause)
        self.status_code = status_code


class TokenExchangeError(ExternalServiceError):
    """Authorization code could not be exchanged for an access token."""


class ProfileError(ExternalServiceError):
    """Base class for user profile retrieval failures."""


class ProfileFetchError(ProfileError):
    """The profile resource could not be fetched."""

    MESSAGE = "failed to fetch user profile"

    def __init__(self, cause: BaseException | None = None) -> None:
        super().__init__(self.MESSAGE, code="profile_fetch_failed", cause=cause)


class ProfileParseError(ProfileError):
    """The profile resource was fetched but its body could not be read."""

    def __init__(self, cause: BaseException) -> None:
        super().__init__(str(cause), code="profile_parse_failed", cause=cause)
