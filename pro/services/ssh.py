"""Interactive SSH sessions attached to the user's terminal."""

from __future__ import annotations

import logging
import shutil
import subprocess

from pro.constants import SSH_USER
from pro.services.exceptions import SSHSessionError, ToolNotFoundError

logger = logging.getLogger(__name__)


def build_ssh_command(host: str, username: str = SSH_USER) -> list[str]:
    """Build the argv for an interactive ssh session.

    Parameters
    ----------
    host : str
        Remote address
    username : str
        Login user (default: root)

    Returns
    -------
    list[str]
        ssh argv forcing TTY allocation
    """
    return ["ssh", "-t", f"{username}@{host}"]


def connect_interactive(host: str, username: str = SSH_USER) -> None:
    """Open an interactive ssh session on the current terminal.

    The child inherits stdin, stdout and stderr so password prompts, host key
    confirmations and the remote shell all talk to the user directly. Nothing
    is captured.

    Parameters
    ----------
    host : str
        Remote address
    username : str
        Login user (default: root)

    Raises
    ------
    ToolNotFoundError
        If ssh is not installed
    SSHSessionError
        If ssh exits with a non-zero status
    """
    if not shutil.which("ssh"):
        raise ToolNotFoundError("ssh", "Install an OpenSSH client and try again.")

    cmd = build_ssh_command(host, username)
    logger.debug("Handing terminal to: %s", " ".join(cmd))

    result = subprocess.run(cmd, check=False)

    if result.returncode != 0:
        raise SSHSessionError(f"{username}@{host}", result.returncode)
