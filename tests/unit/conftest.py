"""Pytest configuration and fixtures for pro tests."""

import logging
import sys
from collections.abc import Generator
from pathlib import Path
from typing import Any

import pytest
import yaml

unit_root = Path(__file__).parent
if str(unit_root) not in sys.path:
    sys.path.insert(0, str(unit_root))

from fakes.fake_doctl_client import FakeDoctlClient  # noqa: E402
from fakes.fake_runner import FakeRunner  # noqa: E402

from pro.logging import configure_logging  # noqa: E402


@pytest.fixture(autouse=True)
def isolated_config(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> Generator[Path, None, None]:
    """Point PRO_CONFIG at a per-test path and clear PRO_DEBUG.

    Keeps a pro.yaml in the working directory, or the developer's own
    environment, from leaking into unit tests.

    Yields
    ------
    Path
        Config file path (not created)
    """
    config_path = tmp_path / "pro.yaml"
    monkeypatch.setenv("PRO_CONFIG", str(config_path))
    monkeypatch.delenv("PRO_DEBUG", raising=False)
    yield config_path


@pytest.fixture
def write_config(isolated_config: Path):
    """Helper fixture to write config data to file.

    Parameters
    ----------
    isolated_config : Path
        Path to config file from isolated_config fixture

    Returns
    -------
    callable
        Function that takes config_data dict and writes to file
    """

    def _write(config_data: dict[str, Any]) -> Path:
        with open(isolated_config, "w") as f:
            yaml.dump(config_data, f)
        return isolated_config

    return _write


@pytest.fixture
def fake_runner() -> FakeRunner:
    """Process runner fake with no registered responses."""
    return FakeRunner()


@pytest.fixture
def fake_doctl() -> FakeDoctlClient:
    """Authenticated doctl fake with two SSH keys and no droplets."""
    return FakeDoctlClient()


class _CurrentStream:
    """Write-through to whatever ``sys.<name>`` is at write time.

    capsys swaps in fresh capture streams between the setup and call
    phases, so handlers bound to the setup-time stream would write to a
    closed file.
    """

    def __init__(self, name: str) -> None:
        self._name = name

    def write(self, text: str) -> int:
        return getattr(sys, self._name).write(text)

    def flush(self) -> None:
        getattr(sys, self._name).flush()


@pytest.fixture
def cli_logging(capsys: pytest.CaptureFixture[str]) -> Generator[None, None, None]:
    """Install the CLI log handlers on pytest's captured stdout and stderr.

    The handlers are removed and the root level restored on teardown so
    later tests never write to a closed capture stream.
    """
    root = logging.getLogger()
    saved_level = root.level
    configure_logging()
    installed = root.handlers[:]
    for handler in installed:
        if isinstance(handler, logging.StreamHandler):
            if handler.stream is sys.stdout:
                handler.setStream(_CurrentStream("stdout"))
            elif handler.stream is sys.stderr:
                handler.setStream(_CurrentStream("stderr"))

    yield

    for handler in installed:
        root.removeHandler(handler)
    root.setLevel(saved_level)
