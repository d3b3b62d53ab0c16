"""Utility functions for pro."""

from __future__ import annotations

import logging
import shlex
import subprocess
import sys
from typing import Any, NamedTuple

from pro.constants import DEFAULT_TAG, GITHUB_URL_PREFIX

logger = logging.getLogger(__name__)


class CommandResult(NamedTuple):
    """Outcome of an external command.

    Attributes
    ----------
    output : str
        Captured standard output (possibly partial when the command failed)
    error : Exception | None
        None on success, CalledProcessError for a non-zero exit, OSError when
        the executable could not be started
    """

    output: str
    error: Exception | None


def run_command(name: str, *args: str) -> CommandResult:
    """Run an external executable and capture its standard output.

    Standard error is inherited from the parent so the tool's progress and
    diagnostics reach the user's terminal live, while standard output is
    captured for the caller to parse. Arguments are passed as an argv vector,
    never through a shell.

    Parameters
    ----------
    name : str
        Executable name, resolved through PATH
    *args : str
        Arguments passed verbatim

    Returns
    -------
    CommandResult
        Captured output and error indicator
    """
    cmd = [name, *args]
    logger.debug("Running: %s", shlex.join(cmd))

    try:
        result = subprocess.run(
            cmd,
            stdout=subprocess.PIPE,
            text=True,
            check=False,
        )
    except OSError as e:
        logger.debug("Failed to start %s: %s", name, e)
        return CommandResult("", e)

    if result.returncode != 0:
        logger.debug("%s exited with code %d", name, result.returncode)
        return CommandResult(
            result.stdout,
            subprocess.CalledProcessError(result.returncode, cmd, output=result.stdout),
        )

    return CommandResult(result.stdout, None)


def validate_and_get_repo_url(repo: str) -> str:
    """Expand a repository identifier into a clone URL.

    Anything starting with ``http`` is treated as already qualified and
    returned unchanged; everything else is taken as a GitHub ``owner/name``.

    Parameters
    ----------
    repo : str
        Non-empty repository URL or GitHub shorthand

    Returns
    -------
    str
        Clone URL
    """
    if repo.startswith("http"):
        return repo

    return f"{GITHUB_URL_PREFIX}{repo}.git"


def process_tags(provider_tag: str, cli_tags: str) -> str:
    """Combine the default tag, the provider tag and user tags.

    Parameters
    ----------
    provider_tag : str
        Tag identifying the cloud provider
    cli_tags : str
        Comma-separated user tags, appended verbatim; may be empty

    Returns
    -------
    str
        Comma-separated tag list starting with the default and provider tags
    """
    all_tags = [DEFAULT_TAG, provider_tag]

    if cli_tags:
        all_tags.append(cli_tags)

    return ",".join(all_tags)


def log_and_print_error(message: str, *args: Any) -> None:
    """Log error message and print to stderr.

    Parameters
    ----------
    message : str
        Error message with optional format placeholders
    *args : Any
        Format arguments for message
    """
    logger.debug(message, *args)
    formatted_msg = message % args if args else message
    print(f"Error: {formatted_msg}", file=sys.stderr)
