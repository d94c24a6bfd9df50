from __future__ import annotations

from typing import Iterable, Optional

from .adapters.iyo.client import ItsYouOnlineClient
from .adapters.jwt.decoder import JWTClaimDecoder
from .adapters.jwt.keys import VerificationKeyConfig
from .api.client import OvcClient
from .api.settings import OvcSettings
from .application.expiry import ExpiryPolicy
from .application.registry import RefreshStrategy, RefreshStrategyRegistry
from .application.token_holder import TokenHolder
from .domain.constants import DEFAULT_ALGORITHMS, DEFAULT_EXPIRATION_BUFFER, IdentityProvider
from .domain.ports import RefreshFunc


def default_registry(refresher: Optional[RefreshFunc] = None) -> RefreshStrategyRegistry:
    """Registry with every built-in provider; IYO refreshes through ItsYouOnline."""
    if refresher is None:
        refresher = ItsYouOnlineClient().refresh
    return RefreshStrategyRegistry({
        IdentityProvider.IYO: RefreshStrategy(refresh=refresher),
    })


def create_token_holder(
        token: str,
        provider: IdentityProvider | str = IdentityProvider.IYO,
        *,
        public_key: Optional[str | bytes] = None,
        key_config: Optional[VerificationKeyConfig] = None,
        registry: Optional[RefreshStrategyRegistry] = None,
        expiration_buffer: float = DEFAULT_EXPIRATION_BUFFER,
        algorithms: Iterable[str] = DEFAULT_ALGORITHMS,
) -> TokenHolder:
    """
    High-level factory: token + verification key -> TokenHolder.

    - installs `public_key` into `key_config` (a new one if not given)
    - builds a JWTClaimDecoder and ExpiryPolicy
    - binds the provider's RefreshStrategy from `registry`

    Raises:
        ConfigurationError, UnsupportedProviderError, InvalidTokenError
    """
    key_config = key_config or VerificationKeyConfig()
    if public_key is not None:
        key_config.install(public_key)

    return TokenHolder(
        token,
        provider,
        decoder=JWTClaimDecoder(key_config, algorithms=algorithms),
        registry=registry or default_registry(),
        expiry=ExpiryPolicy(buffer=expiration_buffer),
    )


def create_client(
        settings: OvcSettings,
        *,
        token: Optional[str] = None,
        iyo: Optional[ItsYouOnlineClient] = None,
) -> OvcClient:
    """
    Assemble an OvcClient from settings.

    Without `token`, one is obtained from ItsYouOnline with the configured
    client credentials.
    """
    iyo = iyo or ItsYouOnlineClient(
        settings.iyo_base_url,
        timeout=settings.timeout,
        verify=settings.verify_ssl,
    )
    if token is None:
        client_id, client_secret = settings.credentials()
        token = iyo.login(client_id, client_secret, scopes=settings.scopes)

    holder = create_token_holder(
        token,
        settings.identity_provider,
        public_key=settings.jwt_public_key,
        registry=default_registry(iyo.refresh),
        expiration_buffer=settings.expiration_buffer,
    )
    return OvcClient(settings, holder)
