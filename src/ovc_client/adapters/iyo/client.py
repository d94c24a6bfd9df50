from __future__ import annotations

import logging
from typing import Iterable, Optional

import requests
from requests import Session

from ...domain.constants import DEFAULT_IYO_BASE_URL
from ...domain.exceptions import AuthenticationError

logger = logging.getLogger(__name__)


class ItsYouOnlineClient:
    """
    Minimal ItsYouOnline client.

    - obtains a JWT with client credentials
    - refreshes a JWT that carries a refresh_token claim

    `refresh` is the refresh operation registered for the IYO provider.
    """

    def __init__(
        self,
        base_url: str = DEFAULT_IYO_BASE_URL,
        *,
        session: Optional[Session] = None,
        timeout: float = 10.0,
        verify: bool = True,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._session = session or Session()
        self._timeout = timeout
        self._verify = verify

    def close(self) -> None:
        self._session.close()

    def login(
        self,
        client_id: str,
        client_secret: str,
        *,
        scopes: Iterable[str] = (),
    ) -> str:
        """
        Exchange client credentials for a JWT.

        Raises:
            AuthenticationError if ItsYouOnline refuses the credentials or
            cannot be reached.
        """
        data = {
            "grant_type": "client_credentials",
            "client_id": client_id,
            "client_secret": client_secret,
            "response_type": "id_token",
        }
        scope = ",".join(scopes)
        if scope:
            data["scope"] = scope

        try:
            resp = self._session.post(
                f"{self._base_url}/v1/oauth/access_token",
                data=data,
                timeout=self._timeout,
                verify=self._verify,
            )
            resp.raise_for_status()
        except requests.HTTPError as exc:
            raise AuthenticationError(
                f"ItsYouOnline login failed: {exc.response.status_code} {exc.response.text}"
            ) from exc
        except requests.RequestException as exc:
            raise AuthenticationError(f"ItsYouOnline login failed: {exc}") from exc

        token = resp.text.strip()
        if not token:
            raise AuthenticationError("ItsYouOnline login returned an empty token")
        logger.debug("Obtained ItsYouOnline JWT for client %s", client_id)
        return token

    def refresh(self, token: str) -> str:
        """
        Ask ItsYouOnline for a fresh JWT.

        Errors from requests propagate untouched; the token holder wraps them.
        """
        resp = self._session.get(
            f"{self._base_url}/v1/oauth/jwt/refresh",
            headers={"Authorization": f"bearer {token}"},
            timeout=self._timeout,
            verify=self._verify,
        )
        resp.raise_for_status()
        return resp.text.strip()
