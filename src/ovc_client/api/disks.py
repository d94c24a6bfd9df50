from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Optional

from ._payload import compact
from ..domain.exceptions import ResourceNotFoundError

if TYPE_CHECKING:
    from .client import OvcClient


@dataclass(slots=True)
class DiskConfig:
    """Fields used when attaching or resizing a disk."""
    machine_id: Optional[int] = None
    disk_name: Optional[str] = None
    description: Optional[str] = None
    size: Optional[int] = None
    type: Optional[str] = None
    ssd_size: Optional[int] = None
    iops: Optional[int] = None
    disk_id: Optional[int] = None

    def to_payload(self) -> dict[str, Any]:
        return compact({
            "machineId": self.machine_id,
            "diskName": self.disk_name,
            "description": self.description,
            "size": self.size,
            "type": self.type,
            "ssdSize": self.ssd_size,
            "iops": self.iops,
            "diskId": self.disk_id,
        })


class DiskService:
    """Disk endpoints of the OVC cloud API."""

    def __init__(self, client: "OvcClient") -> None:
        self._client = client

    def list(self, account_id: int) -> list[dict[str, Any]]:
        return self._client.post("/cloudapi/disks/list", {"accountId": int(account_id)}) or []

    def get(self, disk_id: int) -> dict[str, Any]:
        return self._client.post("/cloudapi/disks/get", {"diskId": int(disk_id)})

    def get_by_max_size(self, name: str, account_id: int) -> dict[str, Any]:
        """Find a disk of the account by name and fetch its full details."""
        for disk in self.list(account_id):
            if disk.get("name") == name:
                return self.get(disk["id"])
        raise ResourceNotFoundError(f"Disk not found: {name}")

    def create(self, config: DiskConfig) -> Any:
        """Create a disk and attach it to `config.machine_id`; returns the disk id."""
        return self._client.post("/cloudapi/machines/addDisk", config.to_payload())

    def resize(self, config: DiskConfig) -> None:
        self._client.post("/cloudapi/disks/resize", config.to_payload())

    def delete(self, disk_id: int, *, detach: bool = False, permanently: bool = False) -> None:
        self._client.post(
            "/cloudapi/disks/delete",
            {"diskId": int(disk_id), "detach": detach, "permanently": permanently},
        )
