"""Tests for the droplet selection and SSH pipeline."""

import pytest

from pro.core.connect import ConnectManager
from pro.providers.digitalocean import Droplet
from pro.providers.exceptions import ProviderCredentialsError
from pro.services.exceptions import SelectionError

LISTING = (
    "301234567   web-1   203.0.113.10\n"
    "301234568   db-1    203.0.113.11\n"
)


class RecordingSelector:
    def __init__(self, choice: str) -> None:
        self.choice = choice
        self.options: list[str] | None = None

    def __call__(self, options):
        self.options = list(options)
        return self.choice


class RecordingConnector:
    def __init__(self) -> None:
        self.hosts: list[str] = []

    def __call__(self, host: str) -> None:
        self.hosts.append(host)


def test_connects_to_third_field_of_selection(fake_doctl, capsys, cli_logging) -> None:
    fake_doctl.droplet_listing = LISTING
    selector = RecordingSelector("301234568   db-1    203.0.113.11")
    connector = RecordingConnector()

    ConnectManager(fake_doctl, selector=selector, connector=connector).ssh()

    assert selector.options == [
        "301234567   web-1   203.0.113.10",
        "301234568   db-1    203.0.113.11",
    ]
    assert connector.hosts == ["203.0.113.11"]
    assert "Connecting to 203.0.113.11..." in capsys.readouterr().out


def test_empty_selection_raises(fake_doctl) -> None:
    fake_doctl.droplet_listing = LISTING
    connector = RecordingConnector()

    with pytest.raises(SelectionError, match="No droplet selected"):
        ConnectManager(
            fake_doctl, selector=RecordingSelector(""), connector=connector
        ).ssh()

    assert connector.hosts == []


def test_selection_without_address_raises(fake_doctl) -> None:
    fake_doctl.droplet_listing = "301234569   new-box\n"

    with pytest.raises(SelectionError, match="No public IPv4"):
        ConnectManager(
            fake_doctl,
            selector=RecordingSelector("301234569   new-box"),
            connector=RecordingConnector(),
        ).ssh()


def test_unauthenticated_raises(fake_doctl) -> None:
    fake_doctl.authenticated = False
    selector = RecordingSelector("x")

    with pytest.raises(ProviderCredentialsError):
        ConnectManager(fake_doctl, selector=selector, connector=RecordingConnector()).ssh()

    assert selector.options is None


def test_select_droplet_returns_record(fake_doctl) -> None:
    fake_doctl.droplet_listing = LISTING
    manager = ConnectManager(
        fake_doctl,
        selector=RecordingSelector("301234567   web-1   203.0.113.10"),
        connector=RecordingConnector(),
    )

    assert manager.select_droplet() == Droplet("301234567", "web-1", "203.0.113.10")


def test_droplet_from_listing_line_requires_three_fields() -> None:
    with pytest.raises(ValueError):
        Droplet.from_listing_line("1 only-two")
