#!/usr/bin/env python3
"""PRO - cloud server provisioning tool."""

from __future__ import annotations

from collections.abc import Callable, Sequence

from fire.completion import Script as completion_script

from pro.cli.commands import AWS, GCP, Azure, DigitalOcean, OpenStack
from pro.cli.help import render_help
from pro.cli.main import main
from pro.core.config import ConfigLoader
from pro.core.connect import ConnectManager
from pro.core.provision import ProvisionManager
from pro.providers.digitalocean import DoctlClient


class Pro:
    """PRO is a CLI tool for provisioning, configuring, and managing cloud servers.

    Supports multiple cloud providers including DigitalOcean, AWS, Azure,
    GCP, and OpenStack. The whole command tree is built here: each provider
    group is an attribute and its public methods are its subcommands.

    Parameters
    ----------
    doctl_client : DoctlClient | None
        Provider CLI adapter; a default client is created when None
    selector : Callable[[Sequence[str]], str] | None
        Interactive chooser used by ``digitalocean ssh``
    connector : Callable[[str], None] | None
        Terminal session opener used by ``digitalocean ssh``
    """

    def __init__(
        self,
        doctl_client: DoctlClient | None = None,
        selector: Callable[[Sequence[str]], str] | None = None,
        connector: Callable[[str], None] | None = None,
    ) -> None:
        self._config_loader = ConfigLoader()
        self._doctl_client = doctl_client or DoctlClient()

        self.digitalocean = DigitalOcean(
            provision_manager=ProvisionManager(
                config_loader=self._config_loader,
                doctl_client=self._doctl_client,
            ),
            connect_manager=ConnectManager(
                doctl_client=self._doctl_client,
                selector=selector,
                connector=connector,
            ),
        )
        self.aws = AWS()
        self.azure = Azure()
        self.gcp = GCP()
        self.openstack = OpenStack()

    def help(self) -> None:
        """Help about any command."""
        print(render_help(self))

    def completion(self, shell: str = "bash") -> str:
        """Generate the autocompletion script for the specified shell.

        Parameters
        ----------
        shell : str
            Target shell, ``bash`` or ``fish``

        Returns
        -------
        str
            Completion script
        """
        return completion_script("pro", self, shell=shell)


if __name__ == "__main__":
    main()
