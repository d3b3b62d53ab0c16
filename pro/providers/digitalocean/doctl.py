"""DigitalOcean operations through the doctl CLI."""

from __future__ import annotations

import logging
import shutil
import subprocess
from collections.abc import Callable

from pro.providers.exceptions import ProviderAPIError
from pro.services.exceptions import ToolNotFoundError
from pro.utils import CommandResult, run_command

logger = logging.getLogger(__name__)

DOCTL_INSTALL_HINT = (
    "Install doctl with:\n\n"
    "  brew install doctl     # Using Homebrew (macOS)\n"
    "  snap install doctl     # Using snap (Ubuntu)\n\n"
    "For more info: https://docs.digitalocean.com/reference/doctl/how-to/install/"
)


def _returncode(error: Exception | None) -> int | None:
    if isinstance(error, subprocess.CalledProcessError):
        return error.returncode
    return None


class DoctlClient:
    """Thin wrapper around the doctl executable.

    Every operation is a single doctl invocation through the runner. Output
    on stdout is parsed; doctl's stderr goes straight to the terminal.

    Parameters
    ----------
    runner : Callable[..., CommandResult] | None
        Process runner taking ``(name, *args)``; defaults to run_command
    executable : str
        doctl executable name or path
    """

    def __init__(
        self,
        runner: Callable[..., CommandResult] | None = None,
        executable: str = "doctl",
    ) -> None:
        self._run = runner or run_command
        self.executable = executable

    def _doctl(self, *args: str) -> CommandResult:
        return self._run(self.executable, *args)

    def check_installed(self) -> None:
        """Check that doctl is available locally.

        Raises
        ------
        ToolNotFoundError
            If doctl is not found in PATH
        """
        if not shutil.which(self.executable):
            raise ToolNotFoundError(self.executable, DOCTL_INSTALL_HINT)

    def is_authenticated(self) -> bool:
        """Check whether doctl has a usable access token.

        Returns
        -------
        bool
            True if ``doctl account get`` succeeds
        """
        _, error = self._doctl("account", "get")
        return error is None

    def list_ssh_keys(self) -> str:
        """Fetch the IDs of every SSH key registered with the account.

        Returns
        -------
        str
            Comma-separated key IDs, no whitespace and no trailing comma

        Raises
        ------
        ProviderAPIError
            If doctl fails
        """
        output, error = self._doctl(
            "compute", "ssh-key", "list", "--format", "ID", "--no-header"
        )

        if error is not None:
            raise ProviderAPIError(
                f"Error fetching SSH keys: {error}",
                output=output,
                returncode=_returncode(error),
            )

        key_ids = [line.strip() for line in output.strip().splitlines() if line.strip()]

        if not key_ids:
            logger.warning(
                "No SSH keys registered with DigitalOcean; the droplet will not accept key logins"
            )

        return ",".join(key_ids)

    def create_instance(
        self,
        name: str,
        region: str,
        image: str,
        size: str,
        ssh_keys: str,
        user_data: str,
        tags: str,
    ) -> str:
        """Create a droplet.

        Parameters
        ----------
        name : str
            Droplet name
        region : str
            Region slug
        image : str
            Image slug
        size : str
            Size slug
        ssh_keys : str
            Comma-separated SSH key IDs
        user_data : str
            Cloud-init document
        tags : str
            Comma-separated tag names

        Returns
        -------
        str
            doctl output

        Raises
        ------
        ProviderAPIError
            If doctl fails; the captured output is attached
        """
        output, error = self._doctl(
            "compute",
            "droplet",
            "create",
            name,
            "--region",
            region,
            "--image",
            image,
            "--size",
            size,
            "--ssh-keys",
            ssh_keys,
            "--user-data",
            user_data,
            "--tag-names",
            tags,
        )

        if error is not None:
            raise ProviderAPIError(
                "Failed to create droplet.",
                output=output,
                returncode=_returncode(error),
            )

        return output

    def list_instances(self) -> str:
        """List droplets as ``ID Name PublicIPv4`` rows.

        Returns
        -------
        str
            doctl output, verbatim

        Raises
        ------
        ProviderAPIError
            If doctl fails
        """
        output, error = self._doctl(
            "compute",
            "droplet",
            "list",
            "--format",
            "ID,Name,PublicIPv4",
            "--no-header",
        )

        if error is not None:
            raise ProviderAPIError(
                "Could not retrieve droplets.",
                output=output,
                returncode=_returncode(error),
            )

        return output
