from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, List, Optional

from ._payload import compact

if TYPE_CHECKING:
    from .client import OvcClient


@dataclass(slots=True)
class MachineConfig:
    """Fields used when creating, updating or deleting a machine."""
    machine_id: Optional[int] = None
    cloudspace_id: Optional[int] = None
    name: Optional[str] = None
    description: Optional[str] = None
    size_id: Optional[int] = None
    image_id: Optional[int] = None
    disksize: Optional[int] = None
    datadisks: Optional[List[int]] = None
    permanently: Optional[bool] = None

    def to_payload(self) -> dict[str, Any]:
        return compact({
            "machineId": self.machine_id,
            "cloudspaceId": self.cloudspace_id,
            "name": self.name,
            "description": self.description,
            "sizeId": self.size_id,
            "imageId": self.image_id,
            "disksize": self.disksize,
            "datadisks": self.datadisks,
            "permanently": self.permanently,
        })


class MachineService:
    """Machine endpoints of the OVC cloud API."""

    def __init__(self, client: "OvcClient") -> None:
        self._client = client

    def list(self, cloudspace_id: int) -> list[dict[str, Any]]:
        return self._client.post("/cloudapi/machines/list", {"cloudspaceId": int(cloudspace_id)}) or []

    def get(self, machine_id: int) -> dict[str, Any]:
        return self._client.post("/cloudapi/machines/get", {"machineId": int(machine_id)})

    def create(self, config: MachineConfig) -> Any:
        """Returns the id of the new machine."""
        return self._client.post("/cloudapi/machines/create", config.to_payload())

    def update(self, config: MachineConfig) -> None:
        self._client.post("/cloudapi/machines/update", config.to_payload())

    def delete(self, config: MachineConfig) -> None:
        self._client.post("/cloudapi/machines/delete", config.to_payload())

    def template(self, machine_id: int, template_name: str) -> None:
        """Create an image from an existing machine."""
        self._client.post(
            "/cloudapi/machines/createTemplate",
            {"machineId": int(machine_id), "templateName": template_name},
        )
