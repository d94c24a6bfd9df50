from __future__ import annotations

from typing import Any, Callable, Mapping, Protocol

# Provider-specific refresh: takes the current token string, returns a new one.
RefreshFunc = Callable[[str], str]


class ClaimDecoder(Protocol):
    """
    Port for turning a signed token string into its claims.

    Implementations live in the adapters layer (e.g. the PyJWT decoder).
    """

    def decode(self, token: str) -> Mapping[str, Any]:
        """
        Verify the given token and return its claims.

        Should:
          - verify the signature
          - require an expiry claim, but NOT reject expired tokens
        Raises:
          - InvalidTokenError
          - ConfigurationError when no verification key is available
        """
        ...
