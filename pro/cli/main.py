"""CLI entry point for pro."""

from __future__ import annotations

import os
import sys
from collections.abc import Sequence

import fire

from pro.cli.help import render_help
from pro.cli.parsing import expand_short_flags
from pro.constants import (
    DEBUG_ENV_VAR,
    EXIT_CONFIG_ERROR,
    EXIT_ERROR,
    EXIT_INTERRUPTED,
)
from pro.logging import configure_logging
from pro.providers.exceptions import ProviderAPIError, ProviderCredentialsError
from pro.services.exceptions import SelectionError, SSHSessionError, ToolNotFoundError
from pro.utils import log_and_print_error

HELP_TOKENS = ("help", "--help", "-h")


def get_pro_class() -> type:
    """Get Pro root class on-demand to avoid circular imports.

    Returns
    -------
    type
        Pro root command class
    """
    from pro.__main__ import Pro

    return Pro


def handle_credentials_error(error: ProviderCredentialsError, debug_mode: bool) -> None:
    """Handle unauthenticated provider CLI.

    Parameters
    ----------
    error : ProviderCredentialsError
        The credentials error that was raised
    debug_mode : bool
        Whether debug mode is enabled

    Raises
    ------
    ProviderCredentialsError
        Re-raised if debug mode is enabled
    """
    if debug_mode:
        raise error

    log_and_print_error("%s", error)
    sys.exit(EXIT_ERROR)


def handle_value_error(error: ValueError, debug_mode: bool) -> None:
    """Handle usage and configuration errors.

    Parameters
    ----------
    error : ValueError
        The value error that was raised
    debug_mode : bool
        Whether debug mode is enabled

    Raises
    ------
    ValueError
        Re-raised if debug mode is enabled
    """
    if debug_mode:
        raise error

    error_msg = str(error)

    if "--repo" in error_msg:
        print(f"Error: {error_msg}\n", file=sys.stderr)
        print("Usage:", file=sys.stderr)
        print("  pro digitalocean create --repo owner/name", file=sys.stderr)
        print("  pro digitalocean create -r https://github.com/owner/name.git", file=sys.stderr)
    else:
        print(f"Configuration error: {error_msg}", file=sys.stderr)

    sys.exit(EXIT_CONFIG_ERROR)


def handle_api_error(error: ProviderAPIError, debug_mode: bool) -> None:
    """Handle a failed provider CLI call, keeping the provider's own output.

    Parameters
    ----------
    error : ProviderAPIError
        The API error that was raised
    debug_mode : bool
        Whether debug mode is enabled

    Raises
    ------
    ProviderAPIError
        Re-raised if debug mode is enabled
    """
    if debug_mode:
        raise error

    log_and_print_error("%s", error)

    if error.output:
        print(f"Output: {error.output}", file=sys.stderr)

    sys.exit(EXIT_ERROR)


def handle_ssh_error(error: Exception, debug_mode: bool) -> None:
    """Handle a failed interactive SSH session.

    Parameters
    ----------
    error : Exception
        SSHSessionError or OSError raised while running ssh
    debug_mode : bool
        Whether debug mode is enabled

    Raises
    ------
    SSHSessionError, OSError
        Re-raised if debug mode is enabled
    """
    if debug_mode:
        raise error

    print(f"Error connecting via SSH: {error}", file=sys.stderr)
    sys.exit(EXIT_ERROR)


def handle_runtime_error(error: RuntimeError, debug_mode: bool) -> None:
    """Handle missing tools, empty selections and unexpected runtime errors.

    Parameters
    ----------
    error : RuntimeError
        The runtime error that was raised
    debug_mode : bool
        Whether debug mode is enabled

    Raises
    ------
    RuntimeError
        Re-raised if debug mode is enabled
    """
    if debug_mode:
        raise error

    if isinstance(error, SelectionError):
        print(str(error), file=sys.stderr)
    elif isinstance(error, ToolNotFoundError):
        log_and_print_error("%s", error)
    else:
        print(f"Unexpected error: {error}", file=sys.stderr)

    sys.exit(EXIT_ERROR)


def main(argv: Sequence[str] | None = None) -> None:
    """Entry point for Fire CLI with graceful error handling.

    The root help is rendered here rather than by Fire so providers and
    general commands are listed apart. Everything else is dispatched by Fire
    on a ``Pro`` instance after short flags are expanded. Errors raised by
    any command are turned into a diagnostic and an exit code here and only
    here.

    Parameters
    ----------
    argv : Sequence[str] | None
        Arguments without the program name; defaults to ``sys.argv[1:]``
    """
    debug_mode = os.environ.get(DEBUG_ENV_VAR) == "1"
    configure_logging(debug=debug_mode)

    args = list(sys.argv[1:] if argv is None else argv)
    Pro = get_pro_class()

    if not args or (args[0] in HELP_TOKENS and len(args) == 1):
        print(render_help(Pro()))
        return

    if args[0] == "help":
        args = [*args[1:], "--", "--help"]

    try:
        fire.Fire(Pro(), command=expand_short_flags(args), name="pro")
    except ProviderCredentialsError as e:
        handle_credentials_error(e, debug_mode)
    except ProviderAPIError as e:
        handle_api_error(e, debug_mode)
    except ValueError as e:
        handle_value_error(e, debug_mode)
    except (SSHSessionError, OSError) as e:
        handle_ssh_error(e, debug_mode)
    except RuntimeError as e:
        handle_runtime_error(e, debug_mode)
    except KeyboardInterrupt:
        if debug_mode:
            raise
        sys.exit(EXIT_INTERRUPTED)
