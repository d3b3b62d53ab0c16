"""Logging setup for the pro CLI."""

from __future__ import annotations

import logging
import sys

from pro.logging.filters import StreamRoutingFilter
from pro.logging.formatters import StreamFormatter

__all__ = ["StreamFormatter", "StreamRoutingFilter", "configure_logging"]


def configure_logging(debug: bool = False) -> None:
    """Install stdout and stderr handlers on the root logger.

    Parameters
    ----------
    debug : bool
        Log at DEBUG instead of INFO
    """
    stdout_handler = logging.StreamHandler(sys.stdout)
    stdout_handler.setFormatter(StreamFormatter("%(message)s"))
    stdout_handler.addFilter(StreamRoutingFilter("stdout"))

    stderr_handler = logging.StreamHandler(sys.stderr)
    stderr_handler.setFormatter(StreamFormatter("%(message)s"))
    stderr_handler.addFilter(StreamRoutingFilter("stderr"))

    logging.basicConfig(
        level=logging.DEBUG if debug else logging.INFO,
        handlers=[stdout_handler, stderr_handler],
        force=True,
    )
