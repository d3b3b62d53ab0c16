"""Provider command groups exposed on the command line.

Each class is one provider subcommand; its public methods are the
provider's subcommands. The first docstring line is the summary shown in
the grouped help.
"""

from __future__ import annotations

from fire import decorators

from pro.core.connect import ConnectManager
from pro.core.provision import ProvisionManager


class DigitalOcean:
    """Manage DigitalOcean droplets.

    Parameters
    ----------
    provision_manager : ProvisionManager
        Handles ``create``
    connect_manager : ConnectManager
        Handles ``ssh``
    """

    def __init__(
        self, provision_manager: ProvisionManager, connect_manager: ConnectManager
    ) -> None:
        self._provision_manager = provision_manager
        self._connect_manager = connect_manager

    @decorators.SetParseFn(
        str, "repo", "branch", "playbook_path", "name", "region", "size", "tags"
    )
    def create(
        self,
        repo: str | None = None,
        branch: str | None = None,
        playbook_path: str | None = None,
        name: str | None = None,
        region: str | None = None,
        size: str | None = None,
        tags: str | None = None,
    ) -> None:
        """Create a new DigitalOcean droplet.

        Flag values reach this method exactly as typed; fire does not
        literal-evaluate them.

        Parameters
        ----------
        repo : str | None
            Git repository to clone, URL or owner/name (required, -r)
        branch : str | None
            Git branch (default: main, -b)
        playbook_path : str | None
            Path to the playbook directory (default: src/pro, -p)
        name : str | None
            Droplet name (default: QuickSearch, -n)
        region : str | None
            Droplet region (default: sfo3, -R)
        size : str | None
            Droplet size (default: s-1vcpu-1gb, -s)
        tags : str | None
            Comma-separated tags
        """
        self._provision_manager.create(
            repo=repo,
            branch=branch,
            playbook_path=playbook_path,
            name=name,
            region=region,
            size=size,
            tags=tags,
        )

    def ssh(self) -> None:
        """SSH into a selected DigitalOcean droplet."""
        self._connect_manager.ssh()


class AWS:
    """Manage AWS EC2 instances."""

    def create(self) -> None:
        """Create a new AWS EC2 instance."""
        print("Creating an AWS EC2 instance...")


class Azure:
    """Manage Azure VMs."""

    def create(self) -> None:
        """Deploy a new Azure VM."""
        print("Creating an Azure VM...")

    def list(self) -> None:
        """List existing Azure VMs."""
        print("Listing Azure VMs...")


class GCP:
    """Manage Google Cloud Compute Engine instances."""

    def create(self) -> None:
        """Launch a new GCE instance."""
        print("Creating a Google Cloud Compute Engine instance...")

    def list(self) -> None:
        """List existing GCE instances."""
        print("Listing Google Cloud Compute Engine instances...")


class OpenStack:
    """Manage OpenStack instances."""

    def create(self) -> None:
        """Launch a new OpenStack instance."""
        print("Creating an OpenStack instance...")

    def list(self) -> None:
        """List existing OpenStack instances."""
        print("Listing OpenStack instances...")
