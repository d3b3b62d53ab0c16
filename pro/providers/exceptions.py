"""Provider-agnostic exception hierarchy."""

from __future__ import annotations


class ProviderError(Exception):
    """Base class for cloud provider errors."""


class ProviderCredentialsError(ProviderError):
    """Raised when the provider CLI is not authenticated.

    Parameters
    ----------
    message : str
        Human-readable description
    provider : str
        Provider name the credentials belong to
    """

    def __init__(self, message: str, provider: str = "digitalocean") -> None:
        super().__init__(message)
        self.provider = provider


class ProviderAPIError(ProviderError):
    """Raised when a provider CLI invocation fails.

    Parameters
    ----------
    message : str
        Human-readable description of the failed operation
    output : str
        Standard output captured from the provider CLI before it failed
    returncode : int | None
        Exit code of the provider CLI, None if it could not be started
    """

    def __init__(
        self, message: str, output: str = "", returncode: int | None = None
    ) -> None:
        super().__init__(message)
        self.output = output
        self.returncode = returncode
