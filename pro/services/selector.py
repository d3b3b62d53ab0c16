"""Interactive selection through fzf."""

from __future__ import annotations

import logging
import shutil
import subprocess
from collections.abc import Sequence

from pro.services.exceptions import ToolNotFoundError

logger = logging.getLogger(__name__)

FZF_INSTALL_HINT = (
    "Install fzf with:\n\n"
    "  brew install fzf       # Using Homebrew (macOS)\n"
    "  apt install fzf        # Using apt (Ubuntu)\n"
    "  dnf install fzf        # Using dnf (Fedora/CentOS)"
)


def check_fzf_installed() -> None:
    """Check that fzf is available locally.

    Raises
    ------
    ToolNotFoundError
        If fzf is not found in PATH
    """
    if not shutil.which("fzf"):
        raise ToolNotFoundError("fzf", FZF_INSTALL_HINT)


def fzf_select(options: Sequence[str]) -> str:
    """Let the user pick one line from options with fzf.

    fzf reads the options on stdin and draws its interface on the
    controlling terminal, so the terminal belongs to fzf until it exits.

    Parameters
    ----------
    options : Sequence[str]
        Lines to choose from, in display order

    Returns
    -------
    str
        The selected line stripped of surrounding whitespace, or an empty
        string when fzf exits non-zero, nothing is chosen or the user
        interrupts

    Raises
    ------
    ToolNotFoundError
        If fzf is not installed
    """
    check_fzf_installed()

    try:
        result = subprocess.run(
            ["fzf"],
            input="\n".join(options),
            stdout=subprocess.PIPE,
            text=True,
            check=False,
        )
    except KeyboardInterrupt:
        logger.debug("Selection interrupted")
        return ""

    if result.returncode != 0:
        logger.debug("fzf exited with code %d", result.returncode)
        return ""

    return result.stdout.strip()
