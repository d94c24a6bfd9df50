from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, List, Optional

from ._payload import compact

if TYPE_CHECKING:
    from .client import OvcClient


@dataclass(slots=True)
class CloudSpaceConfig:
    """Fields used when creating or updating a cloudspace."""
    cloudspace_id: Optional[int] = None
    account_id: Optional[int] = None
    location: Optional[str] = None
    name: Optional[str] = None
    access: Optional[str] = None
    max_memory_capacity: Optional[float] = None
    max_cpu_capacity: Optional[int] = None
    max_disk_capacity: Optional[int] = None
    max_network_peer_transfer: Optional[int] = None
    max_num_public_ip: Optional[int] = None
    allowed_vm_sizes: Optional[List[int]] = None

    def to_payload(self) -> dict[str, Any]:
        return compact({
            "cloudspaceId": self.cloudspace_id,
            "accountId": self.account_id,
            "location": self.location,
            "name": self.name,
            "access": self.access,
            "maxMemoryCapacity": self.max_memory_capacity,
            "maxCPUCapacity": self.max_cpu_capacity,
            "maxVDiskCapacity": self.max_disk_capacity,
            "maxNetworkPeerTransfer": self.max_network_peer_transfer,
            "maxNumPublicIP": self.max_num_public_ip,
            "allowedVMSizes": self.allowed_vm_sizes,
        })


class CloudSpaceService:
    """Cloudspace endpoints of the OVC cloud API."""

    def __init__(self, client: "OvcClient") -> None:
        self._client = client

    def list(self) -> list[dict[str, Any]]:
        return self._client.post("/cloudapi/cloudspaces/list") or []

    def get(self, cloudspace_id: int) -> dict[str, Any]:
        return self._client.post("/cloudapi/cloudspaces/get", {"cloudspaceId": int(cloudspace_id)})

    def create(self, config: CloudSpaceConfig) -> Any:
        return self._client.post("/cloudapi/cloudspaces/create", config.to_payload())

    def update(self, config: CloudSpaceConfig) -> None:
        self._client.post("/cloudapi/cloudspaces/update", config.to_payload())

    def delete(self, cloudspace_id: int, *, permanently: bool = False) -> None:
        self._client.post(
            "/cloudapi/cloudspaces/delete",
            {"cloudspaceId": int(cloudspace_id), "permanently": permanently},
        )
