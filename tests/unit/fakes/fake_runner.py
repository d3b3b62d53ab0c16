"""Fake process runner recording doctl invocations."""

import subprocess
from typing import Any

from pro.utils import CommandResult


class FakeRunner:
    """Callable standing in for ``pro.utils.run_command``.

    Responses are registered per argv prefix; the longest matching prefix
    wins. Unmatched invocations succeed with empty output.

    Attributes
    ----------
    calls : list[tuple[str, ...]]
        Every argv the runner was invoked with, in order
    """

    def __init__(self) -> None:
        self.calls: list[tuple[str, ...]] = []
        self._responses: dict[tuple[str, ...], tuple[str, int]] = {}

    def respond(self, *argv_prefix: str, output: str = "", returncode: int = 0) -> None:
        """Register the output and exit code for commands starting with argv_prefix."""
        self._responses[tuple(argv_prefix)] = (output, returncode)

    def __call__(self, name: str, *args: Any) -> CommandResult:
        argv = (name, *args)
        self.calls.append(argv)

        matches = [
            prefix for prefix in self._responses if argv[: len(prefix)] == prefix
        ]
        if not matches:
            return CommandResult("", None)

        output, returncode = self._responses[max(matches, key=len)]
        if returncode != 0:
            return CommandResult(
                output, subprocess.CalledProcessError(returncode, list(argv), output=output)
            )
        return CommandResult(output, None)
