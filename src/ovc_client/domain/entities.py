from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Mapping

from .constants import EXPIRY_CLAIM


@dataclass(frozen=True, slots=True)
class Token:
    """
    A signed token string together with the claims decoded from it.

    Tokens are never mutated: a refresh produces a new Token.
    """
    raw: str
    claims: Mapping[str, Any]

    @property
    def expiry(self) -> float:
        """Expiry as Unix seconds."""
        return float(self.claims[EXPIRY_CLAIM])

    @property
    def expires_at(self) -> datetime:
        return datetime.fromtimestamp(self.expiry, tz=timezone.utc)

    def __repr__(self) -> str:
        return f"Token({EXPIRY_CLAIM}={self.claims.get(EXPIRY_CLAIM)!r})"
