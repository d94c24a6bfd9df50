from __future__ import annotations

import logging
import threading
from concurrent.futures import Future, TimeoutError as FutureTimeoutError
from typing import Any, Mapping, Optional

from .expiry import ExpiryPolicy
from .registry import RefreshStrategyRegistry, provider_key
from ..domain.constants import EXPIRY_CLAIM, IdentityProvider, TokenState
from ..domain.entities import Token
from ..domain.exceptions import (
    ClaimNotPresentError,
    InvalidTokenError,
    TokenExpiredError,
    TokenRefreshError,
)
from ..domain.ports import ClaimDecoder

logger = logging.getLogger(__name__)


class TokenHolder:
    """
    Owns the bearer token shared by every outbound API call.

    - `get()` returns a currently valid token, refreshing it through the
      provider's RefreshStrategy once it falls inside the expiry buffer.
    - A failed refresh never replaces the held token; the stale token is
      attached to the raised AuthenticationError as `.token`.
    - Concurrent callers that find the same expired token share one
      refresh call and all observe its outcome.
    - `claim()` reads the held token's claims without refreshing.
    """

    def __init__(
        self,
        token: str,
        provider: IdentityProvider | str,
        *,
        decoder: ClaimDecoder,
        registry: RefreshStrategyRegistry,
        expiry: Optional[ExpiryPolicy] = None,
    ) -> None:
        """
        Raises:
            UnsupportedProviderError
            InvalidTokenError
            ConfigurationError
        """
        self._provider = provider_key(provider)
        self._strategy = registry.lookup(provider)
        self._decoder = decoder
        self._expiry = expiry or ExpiryPolicy()

        self._lock = threading.Lock()
        self._in_flight: Optional[Future] = None

        initial = self._decode(token)
        self._token = initial
        self._refreshable = self._strategy.is_refreshable(initial.claims)

    # ------------------------------------------------------------------ #
    # read-only views
    # ------------------------------------------------------------------ #

    @property
    def provider(self) -> str:
        return self._provider

    @property
    def token(self) -> str:
        """Currently held token string, whether or not it is expired."""
        with self._lock:
            return self._token.raw

    @property
    def claims(self) -> Mapping[str, Any]:
        with self._lock:
            return self._token.claims

    @property
    def refreshable(self) -> bool:
        with self._lock:
            return self._refreshable

    @property
    def state(self) -> TokenState:
        with self._lock:
            token, refreshable = self._token, self._refreshable
        if not self._expiry.is_expired(token.claims):
            return TokenState.VALID
        if refreshable:
            return TokenState.STALE_REFRESHABLE
        return TokenState.STALE_TERMINAL

    def claim(self, name: str) -> Any:
        """
        Look up a claim of the held token. Expired tokens are not refreshed.

        Raises:
            ClaimNotPresentError
        """
        with self._lock:
            claims = self._token.claims
        try:
            return claims[name]
        except KeyError:
            raise ClaimNotPresentError(name) from None

    # ------------------------------------------------------------------ #
    # token access
    # ------------------------------------------------------------------ #

    def get(self, timeout: Optional[float] = None) -> str:
        """
        Return a usable token string.

        `timeout` bounds how long to wait for a refresh started by another
        caller; giving up does not affect that refresh.

        Raises (each carrying the stale token as `.token`):
            TokenExpiredError   expired and not refreshable
            TokenRefreshError   the refresh call failed or was not awaited
            InvalidTokenError   the refresh returned an unusable token
        """
        with self._lock:
            current = self._token
            if not self._expiry.is_expired(current.claims):
                return current.raw
            if not self._refreshable:
                raise TokenExpiredError(
                    f"{self._provider} token expired and is not refreshable",
                    token=current.raw,
                )
            flight = self._in_flight
            leader = flight is None
            if leader:
                flight = self._in_flight = Future()

        if leader:
            self._refresh(current, flight)

        try:
            return flight.result(timeout=timeout)
        except FutureTimeoutError as exc:
            raise TokenRefreshError(
                f"Timed out waiting for {self._provider} token refresh",
                token=current.raw,
            ) from exc

    # ------------------------------------------------------------------ #
    # internal helpers
    # ------------------------------------------------------------------ #

    def _decode(self, raw: str) -> Token:
        return Token(raw=raw, claims=self._decoder.decode(raw))

    def _refresh(self, stale: Token, flight: Future) -> None:
        """
        Run the refresh call and publish its outcome on `flight`.

        Whatever happens, the in-flight marker is cleared and `flight` is
        resolved, so no later caller waits on an abandoned refresh.
        """
        try:
            logger.info("Refreshing %s token (exp=%s)", self._provider, stale.claims.get(EXPIRY_CLAIM))
            fresh = self._fetch_replacement(stale)
            refreshable = self._strategy.is_refreshable(fresh.claims)
        except BaseException as exc:
            with self._lock:
                self._in_flight = None
            flight.set_exception(exc)
            if isinstance(exc, Exception):
                return
            # interrupted leader: waiters are released, now unwind
            raise

        with self._lock:
            self._token = fresh
            self._refreshable = refreshable
            self._in_flight = None
        flight.set_result(fresh.raw)
        logger.info("Refreshed %s token (exp=%s)", self._provider, fresh.claims.get(EXPIRY_CLAIM))

    def _fetch_replacement(self, stale: Token) -> Token:
        # only reached for refreshable tokens, which imply a refresh callable
        try:
            raw = self._strategy.refresh(stale.raw)
        except Exception as exc:
            logger.warning("%s token refresh failed: %s", self._provider, exc)
            raise TokenRefreshError(f"Token refresh failed: {exc}", token=stale.raw) from exc

        try:
            return self._decode(raw)
        except InvalidTokenError as exc:
            logger.warning("%s refresh returned an unusable token: %s", self._provider, exc)
            raise InvalidTokenError(f"Refreshed token rejected: {exc}", token=stale.raw) from exc
