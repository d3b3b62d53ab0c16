"""Interactive droplet selection and SSH connection."""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence

from pro.core.provision import ensure_doctl_ready
from pro.providers.digitalocean import DoctlClient, Droplet
from pro.services.exceptions import SelectionError
from pro.services.selector import fzf_select
from pro.services.ssh import connect_interactive

logger = logging.getLogger(__name__)


class ConnectManager:
    """Lets the user pick a droplet and opens a shell on it.

    Parameters
    ----------
    doctl_client : DoctlClient
        Adapter used to list droplets
    selector : Callable[[Sequence[str]], str] | None
        Interactive chooser; defaults to fzf_select
    connector : Callable[[str], None] | None
        Opens the terminal session to an address; defaults to
        connect_interactive
    """

    def __init__(
        self,
        doctl_client: DoctlClient,
        selector: Callable[[Sequence[str]], str] | None = None,
        connector: Callable[[str], None] | None = None,
    ) -> None:
        self.doctl_client = doctl_client
        self.selector = selector or fzf_select
        self.connector = connector or connect_interactive

    def select_droplet(self) -> Droplet:
        """Show the droplet list in the selector and parse the choice.

        Returns
        -------
        Droplet
            The chosen droplet

        Raises
        ------
        ProviderAPIError
            If droplets cannot be listed
        SelectionError
            If nothing is selected or the selected droplet has no public IPv4
        """
        output = self.doctl_client.list_instances()
        options = [line for line in output.split("\n") if line.strip()]

        selected = self.selector(options)
        if not selected:
            raise SelectionError("No droplet selected.")

        try:
            return Droplet.from_listing_line(selected)
        except ValueError as e:
            raise SelectionError(str(e)) from e

    def ssh(self) -> None:
        """Select a droplet and attach the terminal to ``ssh -t root@<ip>``.

        Raises
        ------
        ToolNotFoundError
            If doctl, fzf or ssh is not installed
        ProviderCredentialsError
            If doctl is not authenticated
        ProviderAPIError
            If droplets cannot be listed
        SelectionError
            If no droplet is selected
        SSHSessionError
            If the ssh session exits non-zero
        """
        ensure_doctl_ready(self.doctl_client)

        droplet = self.select_droplet()
        logger.debug("Selected droplet %s (%s)", droplet.name, droplet.droplet_id)

        logger.info("Connecting to %s...", droplet.public_ipv4, extra={"stream": "stdout"})
        self.connector(droplet.public_ipv4)
