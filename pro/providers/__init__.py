"""Cloud provider adapters.

Only DigitalOcean is implemented; it drives the provider through its CLI
rather than the REST API.
"""

from __future__ import annotations

from pro.providers.digitalocean import DoctlClient, Droplet
from pro.providers.exceptions import (
    ProviderAPIError,
    ProviderCredentialsError,
    ProviderError,
)

__all__ = [
    "DoctlClient",
    "Droplet",
    "ProviderError",
    "ProviderCredentialsError",
    "ProviderAPIError",
]
