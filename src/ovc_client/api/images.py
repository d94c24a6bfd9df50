from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Optional

from ._payload import compact

if TYPE_CHECKING:
    from .client import OvcClient


@dataclass(slots=True)
class ImageConfig:
    """Fields used when uploading an image through the system API."""
    name: str
    url: str
    gid: int
    account_id: int
    boot_type: Optional[str] = None
    image_type: Optional[str] = None
    username: Optional[str] = None
    password: Optional[str] = None

    def to_payload(self) -> dict[str, Any]:
        return compact({
            "name": self.name,
            "url": self.url,
            "gid": self.gid,
            "boottype": self.boot_type,
            "imagetype": self.image_type,
            "username": self.username,
            "password": self.password,
            "accountId": self.account_id,
        })


class TemplateService:
    """Images an account can boot machines from."""

    def __init__(self, client: "OvcClient") -> None:
        self._client = client

    def list(self, account_id: int) -> list[dict[str, Any]]:
        return self._client.post("/cloudapi/images/list", {"accountId": int(account_id)}) or []


class ImageService:
    """Image uploads through the OVC system API."""

    def __init__(self, client: "OvcClient") -> None:
        self._client = client

    def upload(self, config: ImageConfig) -> None:
        self._client.post("/system/cloudbroker/image/createImage", config.to_payload())
