from typing import Optional


class OvcError(Exception):
    """Base class for all ovc_client errors."""
    pass


class ConfigurationError(OvcError):
    """Raised when the SDK is used before it is correctly configured."""
    pass


class UnsupportedProviderError(OvcError):
    """Raised when a token holder is built for an unknown identity provider."""
    pass


class ClaimNotPresentError(OvcError, LookupError):
    """Raised when a claim is looked up that the token does not carry."""

    def __init__(self, claim: str) -> None:
        super().__init__(f"Claim not present: {claim}")
        self.claim = claim


class ResourceNotFoundError(OvcError, LookupError):
    """Raised when a lookup by name finds no matching API resource."""
    pass


class ApiError(OvcError):
    """Raised when the OVC API answers with an error status."""

    def __init__(self, status_code: int, body: str) -> None:
        super().__init__(f"OVC API request failed ({status_code}): {body}")
        self.status_code = status_code
        self.body = body


class AuthenticationError(OvcError):
    """
    Raised when no usable token can be produced.

    `token` carries the last known token string, if there is one, so a
    caller can still attempt its request with it.
    """

    def __init__(self, message: str = "Authentication failed", token: Optional[str] = None) -> None:
        super().__init__(message)
        self.token = token


class InvalidTokenError(AuthenticationError):
    """Raised when a token is malformed or its signature does not verify."""
    pass


class TokenRefreshError(AuthenticationError):
    """Raised when the provider-specific refresh call fails."""
    pass


class TokenExpiredError(AuthenticationError):
    """Raised when a token has expired and there is no way to refresh it."""
    pass
