"""Grouped help output for the root command."""

from __future__ import annotations

import inspect
from typing import Any

from pro.constants import GENERAL_COMMANDS, HELP_COLUMN_WIDTH


def command_summary(member: Any) -> str:
    """Summarize a command by the first line of its docstring.

    Parameters
    ----------
    member : Any
        Command group instance or method

    Returns
    -------
    str
        First docstring line without its trailing period, or an empty
        string when the command has no docstring
    """
    doc = inspect.getdoc(member) or ""
    first_line = doc.splitlines()[0] if doc else ""
    return first_line.rstrip(".")


def list_commands(root: Any) -> list[tuple[str, str]]:
    """List the public commands of the root component sorted by name.

    Parameters
    ----------
    root : Any
        Root command object

    Returns
    -------
    list[tuple[str, str]]
        ``(name, summary)`` pairs
    """
    commands = []

    for name in sorted(dir(root)):
        if name.startswith("_"):
            continue
        commands.append((name, command_summary(getattr(root, name))))

    return commands


def render_help(root: Any, prog: str = "pro") -> str:
    """Render the root help with cloud providers and general commands apart.

    Parameters
    ----------
    root : Any
        Root command object
    prog : str
        Program name shown in the usage line

    Returns
    -------
    str
        Help text
    """
    cloud_providers = []
    general_commands = []

    for name, summary in list_commands(root):
        line = f"  {name:<{HELP_COLUMN_WIDTH}} {summary}"
        if name in GENERAL_COMMANDS:
            general_commands.append(line)
        else:
            cloud_providers.append(line)

    lines = [
        "🚀 PRO CLI: Cloud Server Provisioning",
        "Usage:",
        f"  {prog} [command]",
        "",
        "🌐 Cloud Providers:",
        *cloud_providers,
        "",
        "⌘ General Commands:",
        *general_commands,
        "",
        f"Use '{prog} [command] --help' for more details.",
    ]

    return "\n".join(lines)
