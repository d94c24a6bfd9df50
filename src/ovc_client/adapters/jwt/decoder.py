import math
from datetime import datetime, timezone
from numbers import Real
from types import MappingProxyType
from typing import Any, Iterable, Mapping

import jwt
from jwt.exceptions import PyJWTError

from .keys import VerificationKeyConfig
from ...domain.constants import DEFAULT_ALGORITHMS, EXPIRY_CLAIM
from ...domain.exceptions import InvalidTokenError
from ...domain.ports import ClaimDecoder


class JWTClaimDecoder(ClaimDecoder):
    """
    Adapter implementing ClaimDecoder using PyJWT.

    - Verifies the signature against the installed public key.
    - Requires an `exp` claim but leaves the expired/valid decision to the
      expiry policy, so stale tokens still decode.
    """

    def __init__(
        self,
        key_config: VerificationKeyConfig,
        algorithms: Iterable[str] = DEFAULT_ALGORITHMS,
    ) -> None:
        self._key_config = key_config
        self._algorithms = list(algorithms)

    def decode(self, token: str) -> Mapping[str, Any]:
        """
        Decode and verify a JWT.

        Returns:
            Read-only mapping of the token claims.

        Raises:
            ConfigurationError if no public key is installed
            InvalidTokenError
        """
        # resolve the key first so a missing key is not reported as a bad token
        key = self._key_config.key

        if not isinstance(token, str) or not token:
            raise InvalidTokenError(f"Invalid token: expected a non-empty string, got {type(token).__name__}")

        try:
            payload = jwt.decode(
                token,
                key,
                algorithms=self._algorithms,
                options={
                    "require": [EXPIRY_CLAIM],
                    "verify_exp": False,
                    "verify_aud": False,
                },
            )
        except PyJWTError as exc:
            raise InvalidTokenError(f"Invalid token: {exc}") from exc

        exp = payload.get(EXPIRY_CLAIM)
        if isinstance(exp, bool) or not isinstance(exp, Real):
            raise InvalidTokenError(f"Invalid token: {EXPIRY_CLAIM} must be numeric, got {exp!r}")
        try:
            finite = math.isfinite(exp)
            if finite:
                datetime.fromtimestamp(exp, tz=timezone.utc)
        except (ValueError, OverflowError, OSError) as exc:
            raise InvalidTokenError(f"Invalid token: {EXPIRY_CLAIM} out of range, got {exp!r}") from exc
        if not finite:
            raise InvalidTokenError(f"Invalid token: {EXPIRY_CLAIM} must be finite, got {exp!r}")

        return MappingProxyType(payload)
