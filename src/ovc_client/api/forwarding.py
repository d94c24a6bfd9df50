from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Optional

from ._payload import compact

if TYPE_CHECKING:
    from .client import OvcClient


@dataclass(slots=True)
class PortForwardingConfig:
    cloudspace_id: int
    public_ip: Optional[str] = None
    public_port: Optional[int] = None
    machine_id: Optional[int] = None
    local_port: Optional[int] = None
    protocol: Optional[str] = None
    # identify an existing rule when updating or deleting by port
    source_public_ip: Optional[str] = None
    source_public_port: Optional[int] = None
    source_protocol: Optional[str] = None

    def to_payload(self) -> dict[str, Any]:
        return compact({
            "cloudspaceId": self.cloudspace_id,
            "publicIp": self.public_ip,
            "publicPort": self.public_port,
            "machineId": self.machine_id,
            "localPort": self.local_port,
            "protocol": self.protocol,
            "sourcePublicIp": self.source_public_ip,
            "sourcePublicPort": self.source_public_port,
            "sourceProtocol": self.source_protocol,
        })


class PortForwardingService:
    """Port forwarding endpoints of the OVC cloud API."""

    def __init__(self, client: "OvcClient") -> None:
        self._client = client

    def list(self, config: PortForwardingConfig) -> list[dict[str, Any]]:
        return self._client.post("/cloudapi/portforwarding/list", config.to_payload()) or []

    def create(self, config: PortForwardingConfig) -> None:
        self._client.post("/cloudapi/portforwarding/create", config.to_payload())

    def update(self, config: PortForwardingConfig) -> None:
        self._client.post("/cloudapi/portforwarding/updateByPort", config.to_payload())

    def delete(self, config: PortForwardingConfig) -> None:
        self._client.post("/cloudapi/portforwarding/deleteByPort", config.to_payload())
