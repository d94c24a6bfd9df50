from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional

from ..domain.constants import DEFAULT_EXPIRATION_BUFFER, DEFAULT_IYO_BASE_URL, IdentityProvider
from ..domain.exceptions import ConfigurationError


@dataclass(slots=True)
class OvcSettings:
    """
    OVC API connection + identity provider settings.

    Host code decides how to construct this (env, config file, etc.).
    """
    server_url: str
    client_id: Optional[str] = None
    client_secret: Optional[str] = None
    jwt_public_key: Optional[str] = None
    identity_provider: str = IdentityProvider.IYO.value
    iyo_base_url: str = DEFAULT_IYO_BASE_URL
    scopes: List[str] = field(default_factory=list)
    expiration_buffer: float = DEFAULT_EXPIRATION_BUFFER
    verify_ssl: bool = True
    timeout: float = 30.0

    @property
    def base_url(self) -> str:
        return self.server_url.strip().rstrip("/")

    def credentials(self) -> tuple[str, str]:
        """Client id + secret, or ConfigurationError naming what is missing."""
        missing = [
            n
            for n, v in [
                ("OVC_CLIENT_ID", self.client_id),
                ("OVC_CLIENT_SECRET", self.client_secret),
            ]
            if not v
        ]
        if missing:
            raise ConfigurationError(f"Missing OVC settings: {', '.join(missing)}")
        return self.client_id, self.client_secret
