from __future__ import annotations

from typing import TYPE_CHECKING, Any

from ..domain.exceptions import ResourceNotFoundError

if TYPE_CHECKING:
    from .client import OvcClient


class AccountService:
    """Account endpoints of the OVC cloud API."""

    def __init__(self, client: "OvcClient") -> None:
        self._client = client

    def list(self) -> list[dict[str, Any]]:
        return self._client.post("/cloudapi/accounts/list") or []

    def get_id_by_name(self, name: str) -> int:
        for account in self.list():
            if account.get("name") == name:
                return account["id"]
        raise ResourceNotFoundError(f"Account not found: {name}")
