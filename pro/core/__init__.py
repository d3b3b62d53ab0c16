"""Core pro functionality."""

from __future__ import annotations

from pro.core.config import ConfigLoader
from pro.core.connect import ConnectManager
from pro.core.provision import CreateOptions, ProvisionManager, ensure_doctl_ready

__all__ = [
    "ConfigLoader",
    "ConnectManager",
    "CreateOptions",
    "ProvisionManager",
    "ensure_doctl_ready",
]
