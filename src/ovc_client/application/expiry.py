from __future__ import annotations

import time
from dataclasses import dataclass
from typing import Any, Callable, Mapping

from ..domain.constants import DEFAULT_EXPIRATION_BUFFER, EXPIRY_CLAIM


def is_expired(claims: Mapping[str, Any], now: float, buffer: float) -> bool:
    """
    A token counts as expired `buffer` seconds before its `exp` claim,
    inclusive of that instant.
    """
    return float(claims[EXPIRY_CLAIM]) - buffer <= now


@dataclass(frozen=True, slots=True)
class ExpiryPolicy:
    """
    Applies `is_expired` with a fixed buffer and an injectable clock.
    """

    buffer: float = DEFAULT_EXPIRATION_BUFFER
    clock: Callable[[], float] = time.time

    def is_expired(self, claims: Mapping[str, Any]) -> bool:
        return is_expired(claims, self.clock(), self.buffer)
