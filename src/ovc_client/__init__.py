"""
ovc_client

Client SDK for the OpenvCloud API, built around a thread-safe bearer
token holder that verifies, refreshes and exposes ItsYouOnline JWTs.
"""

import logging

__version__ = "0.1.0"

from .domain.constants import IdentityProvider, TokenState, DEFAULT_EXPIRATION_BUFFER
from .domain.entities import Token
from .domain.exceptions import (
    OvcError,
    ConfigurationError,
    UnsupportedProviderError,
    ClaimNotPresentError,
    ResourceNotFoundError,
    ApiError,
    AuthenticationError,
    InvalidTokenError,
    TokenRefreshError,
    TokenExpiredError,
)
from .domain.ports import ClaimDecoder, RefreshFunc

from .application.expiry import ExpiryPolicy, is_expired
from .application.registry import RefreshStrategy, RefreshStrategyRegistry
from .application.token_holder import TokenHolder

from .adapters.jwt.keys import VerificationKeyConfig
from .adapters.jwt.decoder import JWTClaimDecoder
from .adapters.iyo.client import ItsYouOnlineClient

from .api import OvcClient, OvcSettings, settings_from_env, client_from_env
from .factory import create_client, create_token_holder, default_registry

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "__version__",
    # domain core
    "IdentityProvider",
    "TokenState",
    "DEFAULT_EXPIRATION_BUFFER",
    "Token",
    "ClaimDecoder",
    "RefreshFunc",
    # exceptions
    "OvcError",
    "ConfigurationError",
    "UnsupportedProviderError",
    "ClaimNotPresentError",
    "ResourceNotFoundError",
    "ApiError",
    "AuthenticationError",
    "InvalidTokenError",
    "TokenRefreshError",
    "TokenExpiredError",
    # token management
    "ExpiryPolicy",
    "is_expired",
    "RefreshStrategy",
    "RefreshStrategyRegistry",
    "TokenHolder",
    # adapters
    "VerificationKeyConfig",
    "JWTClaimDecoder",
    "ItsYouOnlineClient",
    # API client
    "OvcClient",
    "OvcSettings",
    "settings_from_env",
    "client_from_env",
    "create_client",
    "create_token_holder",
    "default_registry",
]
