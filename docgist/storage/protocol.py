"""
Storage protocols for credentials, persistent settings and the Gist API.

Defines the interfaces the publishing workflow depends on: the OS keychain
for secrets, a small key/value settings file for everything else, and the
remote create-gist call.
"""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable

from docgist.models import Credentials, GistRequest, GistResult


@runtime_checkable
class Keychain(Protocol):
    """Protocol for secret storage bound to a single service name."""

    async def get_password(self, account: str) -> str | None:
        """
        Look up the secret stored for an account.

        Args:
            account: Account (GitHub username) the secret belongs to

        Returns:
            The secret, or None if nothing is stored

        Raises:
            CredentialLookupError: If the backing store fails or times out
        """
        ...

    async def set_password(self, account: str, password: str) -> None:
        """
        Store a secret for an account, replacing any previous one.

        Raises:
            CredentialWriteError: If the backing store rejects the write
        """
        ...


@runtime_checkable
class SettingsStore(Protocol):
    """Protocol for durable, non-secret settings."""

    def get(self, key: str, default: Any = None) -> Any: ...

    def set(self, key: str, value: Any) -> None: ...


class GistApi(Protocol):
    """Protocol for the remote create-gist call."""

    async def create(self, request: GistRequest, credentials: Credentials) -> GistResult:
        """
        Raises:
            GistCreateError: If the gist could not be created
        """
        ...
