"""
ovc_client.api

OVC cloud API transport and resource services:

- OvcSettings: connection + identity provider configuration.
- OvcClient: httpx-based transport that authenticates every request with
  the shared TokenHolder.
- AccountService, CloudSpaceService, MachineService, DiskService,
  PortForwardingService, TemplateService, ImageService: one per resource.
- settings_from_env / client_from_env:
    convenience wrappers for env-driven scripts and the CLI.
"""

from __future__ import annotations

from .accounts import AccountService
from .client import OvcClient
from .cloudspaces import CloudSpaceConfig, CloudSpaceService
from .disks import DiskConfig, DiskService
from .env import client_from_env, settings_from_env
from .forwarding import PortForwardingConfig, PortForwardingService
from .images import ImageConfig, ImageService, TemplateService
from .machines import MachineConfig, MachineService
from .settings import OvcSettings

__all__ = [
    "OvcSettings",
    "OvcClient",
    "AccountService",
    "CloudSpaceConfig",
    "CloudSpaceService",
    "MachineConfig",
    "MachineService",
    "DiskConfig",
    "DiskService",
    "PortForwardingConfig",
    "PortForwardingService",
    "TemplateService",
    "ImageConfig",
    "ImageService",
    "settings_from_env",
    "client_from_env",
]
