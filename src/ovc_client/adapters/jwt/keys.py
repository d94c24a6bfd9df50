from __future__ import annotations

import logging
import threading
from typing import Any, Optional

from cryptography.exceptions import UnsupportedAlgorithm
from cryptography.hazmat.primitives.serialization import load_pem_public_key

from ...domain.exceptions import ConfigurationError

logger = logging.getLogger(__name__)


class VerificationKeyConfig:
    """
    Holds the public key used to verify token signatures.

    The host application builds one of these while assembling the SDK and
    hands it to the decoder. Installing a key again replaces the previous
    one: the last install wins.
    """

    def __init__(self, public_key: Optional[str | bytes] = None) -> None:
        self._lock = threading.Lock()
        self._key: Any = None
        if public_key is not None:
            self.install(public_key)

    def install(self, public_key: str | bytes) -> None:
        """
        Parse a PEM encoded public key and make it the verification key.

        Raises:
            ConfigurationError if the PEM cannot be parsed.
        """
        pem = public_key.encode() if isinstance(public_key, str) else public_key
        try:
            key = load_pem_public_key(pem)
        except (ValueError, TypeError, UnsupportedAlgorithm) as exc:
            raise ConfigurationError(f"Invalid JWT public key: {exc}") from exc

        with self._lock:
            replaced = self._key is not None
            self._key = key
        if replaced:
            logger.info("Replaced JWT verification key")

    @property
    def is_configured(self) -> bool:
        with self._lock:
            return self._key is not None

    @property
    def key(self) -> Any:
        with self._lock:
            key = self._key
        if key is None:
            raise ConfigurationError("No JWT public key installed")
        return key
