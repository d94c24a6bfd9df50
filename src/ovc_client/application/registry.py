from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Optional

from ..domain.constants import IdentityProvider, REFRESH_TOKEN_CLAIM
from ..domain.exceptions import UnsupportedProviderError
from ..domain.ports import RefreshFunc


def provider_key(provider: IdentityProvider | str) -> str:
    if isinstance(provider, IdentityProvider):
        return provider.value
    return str(provider)


@dataclass(frozen=True, slots=True)
class RefreshStrategy:
    """
    How tokens of one identity provider are refreshed.

    - refresh:       the refresh operation, or None if the provider never refreshes
    - refresh_claim: claim a token must carry to be refreshable
    """

    refresh: Optional[RefreshFunc] = None
    refresh_claim: str = REFRESH_TOKEN_CLAIM

    def is_refreshable(self, claims: Mapping[str, Any]) -> bool:
        return self.refresh is not None and bool(claims.get(self.refresh_claim))


class RefreshStrategyRegistry:
    """
    Maps identity provider identifiers to their RefreshStrategy.

    Filled while the SDK is assembled and only read afterwards.
    """

    def __init__(
        self,
        strategies: Optional[Mapping[IdentityProvider | str, RefreshStrategy]] = None,
    ) -> None:
        self._strategies: dict[str, RefreshStrategy] = {}
        for provider, strategy in (strategies or {}).items():
            self.register(provider, strategy)

    def register(self, provider: IdentityProvider | str, strategy: RefreshStrategy) -> None:
        self._strategies[provider_key(provider)] = strategy

    def lookup(self, provider: IdentityProvider | str) -> RefreshStrategy:
        """
        Raises:
            UnsupportedProviderError for an unknown identifier.
        """
        try:
            return self._strategies[provider_key(provider)]
        except KeyError:
            raise UnsupportedProviderError(
                f"Unsupported identity provider: {provider_key(provider)!r}"
            ) from None

    @property
    def providers(self) -> tuple[str, ...]:
        return tuple(self._strategies)

    def __contains__(self, provider: object) -> bool:
        if not isinstance(provider, (IdentityProvider, str)):
            return False
        return provider_key(provider) in self._strategies
