from __future__ import annotations

import os
from typing import TYPE_CHECKING, Optional

from .settings import OvcSettings
from ..domain.constants import DEFAULT_EXPIRATION_BUFFER, DEFAULT_IYO_BASE_URL, IdentityProvider
from ..domain.exceptions import ConfigurationError

if TYPE_CHECKING:
    from .client import OvcClient


def settings_from_env() -> OvcSettings:
    def _bool(key: str, default: bool = True) -> bool:
        raw = os.getenv(key)
        if raw is None:
            return default
        return str(raw).strip().lower() in {"1", "true", "yes", "on"}

    def _float(key: str, default: float) -> float:
        raw = os.getenv(key)
        if not raw:
            return default
        try:
            return float(raw)
        except ValueError:
            raise ConfigurationError(f"{key} must be a number, got {raw!r}") from None

    def _split_csv(key: str) -> list[str]:
        raw = os.getenv(key)
        if not raw:
            return []
        return [x.strip() for x in raw.split(",") if x and x.strip()]

    server_url = os.getenv("OVC_SERVER_URL")
    public_key = os.getenv("OVC_JWT_PUBLIC_KEY")
    if not all([server_url, public_key]):
        missing = [
            n
            for n, v in [
                ("OVC_SERVER_URL", server_url),
                ("OVC_JWT_PUBLIC_KEY", public_key),
            ]
            if not v
        ]
        raise ConfigurationError(f"Missing OVC settings: {', '.join(missing)}")

    return OvcSettings(
        server_url=server_url,
        client_id=os.getenv("OVC_CLIENT_ID"),
        client_secret=os.getenv("OVC_CLIENT_SECRET"),
        jwt_public_key=public_key,
        identity_provider=os.getenv("OVC_IDENTITY_PROVIDER") or IdentityProvider.IYO.value,
        iyo_base_url=os.getenv("IYO_BASE_URL") or DEFAULT_IYO_BASE_URL,
        scopes=_split_csv("OVC_SCOPES"),
        expiration_buffer=_float("OVC_EXPIRATION_BUFFER", DEFAULT_EXPIRATION_BUFFER),
        verify_ssl=_bool("VERIFY_SSL", True),
        timeout=_float("OVC_TIMEOUT", 30.0),
    )


def client_from_env(token: Optional[str] = None) -> "OvcClient":
    """Convenience wrapper using env-configured settings."""
    from ..factory import create_client

    return create_client(settings_from_env(), token=token)
