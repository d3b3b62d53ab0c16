"""CLI argument parsing and handling."""

from __future__ import annotations

from pro.cli.parsing import expand_short_flags

__all__ = ["expand_short_flags"]
