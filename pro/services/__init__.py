"""Local tool services (interactive selection, SSH)."""

from __future__ import annotations

from pro.services.exceptions import SelectionError, SSHSessionError, ToolNotFoundError
from pro.services.selector import fzf_select
from pro.services.ssh import build_ssh_command, connect_interactive

__all__ = [
    "fzf_select",
    "build_ssh_command",
    "connect_interactive",
    "SelectionError",
    "SSHSessionError",
    "ToolNotFoundError",
]
