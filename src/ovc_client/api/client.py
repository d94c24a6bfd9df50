from __future__ import annotations

import logging
from typing import Any, Optional

import httpx

from .accounts import AccountService
from .cloudspaces import CloudSpaceService
from .disks import DiskService
from .forwarding import PortForwardingService
from .images import ImageService, TemplateService
from .machines import MachineService
from .settings import OvcSettings
from ..application.token_holder import TokenHolder
from ..domain.exceptions import ApiError, AuthenticationError

logger = logging.getLogger(__name__)


class OvcClient:
    """
    Minimal OVC API transport.

    - takes its bearer token from the shared TokenHolder on every request
    - falls back to the stale token when a refresh fails, so the API
      itself gets to decide whether the request is authorised
    - translates error statuses into ApiError
    """

    def __init__(
        self,
        settings: OvcSettings,
        token_holder: TokenHolder,
        client: Optional[httpx.Client] = None,
    ) -> None:
        self.s = settings
        self.token_holder = token_holder
        self._client = client or httpx.Client(verify=settings.verify_ssl, timeout=settings.timeout)

        self.accounts = AccountService(self)
        self.cloudspaces = CloudSpaceService(self)
        self.machines = MachineService(self)
        self.disks = DiskService(self)
        self.forwarding = PortForwardingService(self)
        self.templates = TemplateService(self)
        self.images = ImageService(self)

    def close(self) -> None:
        self._client.close()

    def __enter__(self) -> "OvcClient":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    # ------------------------------------------------------------------ #
    # token management
    # ------------------------------------------------------------------ #

    def _bearer_token(self) -> str:
        try:
            return self.token_holder.get()
        except AuthenticationError as exc:
            if exc.token is None:
                raise
            logger.warning("Sending OVC request with stale token: %s", exc)
            return exc.token

    def _auth_headers(self, token: str) -> dict[str, str]:
        return {"Authorization": f"bearer {token}", "Content-Type": "application/json"}

    # ------------------------------------------------------------------ #
    # requests
    # ------------------------------------------------------------------ #

    def post(self, path: str, payload: Optional[dict[str, Any]] = None) -> Any:
        """
        POST `payload` as JSON to `path` and return the decoded response.

        Returns None for an empty response body.

        Raises:
            ApiError for any status above 202
        """
        url = f"{self.s.base_url}{path}"
        resp = self._client.post(
            url,
            headers=self._auth_headers(self._bearer_token()),
            json=payload,
        )
        logger.debug("POST %s -> %s", path, resp.status_code)
        if resp.status_code > 202:
            raise ApiError(resp.status_code, resp.text)
        if not resp.content:
            return None
        return resp.json()
