"""CLI argument parsing utilities."""

from __future__ import annotations

from collections.abc import Sequence

CREATE_SHORT_FLAGS = {
    "-r": "--repo",
    "-b": "--branch",
    "-p": "--playbook-path",
    "-n": "--name",
    "-R": "--region",
    "-s": "--size",
}
"""Short aliases for ``create`` flags.

Fire only abbreviates flags by their first letter and is case-insensitive
about it, so ``-r``/``-R`` have to be rewritten before fire sees the argv.
"""


def expand_short_flags(argv: Sequence[str]) -> list[str]:
    """Rewrite short ``create`` flags into their long form.

    Both ``-r value`` and ``-r=value`` are accepted. Expansion only happens
    after a ``create`` token and stops at a bare ``--`` so fire's own flags
    are left alone.

    Parameters
    ----------
    argv : Sequence[str]
        Command-line arguments without the program name

    Returns
    -------
    list[str]
        Arguments with short flags expanded
    """
    expanded: list[str] = []
    in_create = False
    passthrough = False

    for arg in argv:
        if passthrough:
            expanded.append(arg)
            continue

        if arg == "--":
            passthrough = True
            expanded.append(arg)
            continue

        if arg == "create":
            in_create = True
            expanded.append(arg)
            continue

        if in_create:
            flag, sep, value = arg.partition("=")
            if flag in CREATE_SHORT_FLAGS:
                expanded.append(f"{CREATE_SHORT_FLAGS[flag]}{sep}{value}")
                continue

        expanded.append(arg)

    return expanded


__all__ = [
    "CREATE_SHORT_FLAGS",
    "expand_short_flags",
]
