"""Tests for fzf-based selection."""

from unittest.mock import MagicMock, patch

import pytest

from pro.services.exceptions import ToolNotFoundError
from pro.services.selector import fzf_select


@pytest.fixture
def fzf_on_path():
    with patch("shutil.which", return_value="/usr/bin/fzf"):
        yield


def test_returns_stripped_selection(fzf_on_path) -> None:
    with patch("subprocess.run") as mock_run:
        mock_run.return_value = MagicMock(returncode=0, stdout="Option 1\n")
        result = fzf_select(["Option 1", "Option 2", "Option 3"])

    assert result == "Option 1"


def test_feeds_newline_joined_options_on_stdin(fzf_on_path) -> None:
    with patch("subprocess.run") as mock_run:
        mock_run.return_value = MagicMock(returncode=0, stdout="b\n")
        fzf_select(["a", "b", "c"])

    args, kwargs = mock_run.call_args
    assert args[0] == ["fzf"]
    assert kwargs["input"] == "a\nb\nc"


@pytest.mark.parametrize("returncode", [1, 2, 130])
def test_nonzero_exit_returns_empty(fzf_on_path, returncode: int) -> None:
    with patch("subprocess.run") as mock_run:
        mock_run.return_value = MagicMock(returncode=returncode, stdout="")
        assert fzf_select(["a"]) == ""


def test_interrupt_returns_empty(fzf_on_path) -> None:
    with patch("subprocess.run", side_effect=KeyboardInterrupt):
        assert fzf_select(["a"]) == ""


def test_blank_selection_returns_empty(fzf_on_path) -> None:
    with patch("subprocess.run") as mock_run:
        mock_run.return_value = MagicMock(returncode=0, stdout="\n")
        assert fzf_select(["a"]) == ""


def test_missing_fzf_raises() -> None:
    with patch("shutil.which", return_value=None):
        with pytest.raises(ToolNotFoundError, match="fzf"):
            fzf_select(["a"])
