"""DigitalOcean provider backed by the doctl CLI."""

from __future__ import annotations

from pro.providers.digitalocean.doctl import DoctlClient
from pro.providers.digitalocean.types import Droplet

__all__ = ["DoctlClient", "Droplet"]
