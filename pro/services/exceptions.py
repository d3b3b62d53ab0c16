"""Errors raised by the local tool services (fzf, ssh)."""

from __future__ import annotations


class ToolNotFoundError(RuntimeError):
    """Raised when a required executable is not installed.

    Parameters
    ----------
    tool : str
        Executable name
    hint : str
        Installation instructions shown to the user
    """

    def __init__(self, tool: str, hint: str = "") -> None:
        message = f"'{tool}' not found in PATH."
        if hint:
            message = f"{message}\n\n{hint}"
        super().__init__(message)
        self.tool = tool


class SelectionError(RuntimeError):
    """Raised when the interactive selection yields nothing usable."""


class SSHSessionError(RuntimeError):
    """Raised when the interactive ssh session exits non-zero.

    Parameters
    ----------
    host : str
        Target the session was opened to
    returncode : int
        Exit code of the ssh process
    """

    def __init__(self, host: str, returncode: int) -> None:
        super().__init__(f"ssh to {host} exited with status {returncode}")
        self.host = host
        self.returncode = returncode
