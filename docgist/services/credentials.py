"""
Credential service - GitHub username and password resolution.

Combines the in-process CredentialSession, the OS keychain and the persistent
settings file. The password only ever lives in the keychain and in memory.
"""

from __future__ import annotations

import attrs

from docgist.exceptions import CredentialLookupError, CredentialWriteError
from docgist.models import Credentials
from docgist.protocols import LoggerProtocol, NullLogger
from docgist.storage.protocol import Keychain, SettingsStore

USERNAME_SETTING = 'githubUsername'


@attrs.define
class CredentialSession:
    """
    The one mutable credential record of a running application.

    Owned by whoever wires the services together and shared by reference
    between CredentialStore, LoginPrompt and GistPublisher.
    """

    username: str | None = None
    credentials: Credentials | None = None

    def remember(self, credentials: Credentials) -> None:
        self.username = credentials.username
        self.credentials = credentials

    def credentials_for(self, username: str) -> Credentials | None:
        """In-memory credentials, only if they belong to the given user."""
        if self.credentials is not None and self.credentials.username == username:
            return self.credentials
        return None


class CredentialStore:
    """Keychain-backed credential store for a single service."""

    def __init__(
        self,
        keychain: Keychain,
        settings: SettingsStore,
        session: CredentialSession | None = None,
        logger: LoggerProtocol | None = None,
    ) -> None:
        """
        Initialize credential store.

        Args:
            keychain: Secret storage for passwords
            settings: Persistent settings holding the last username
            session: Shared in-process credential record (creates one if not provided)
            logger: Optional logger instance
        """
        self.keychain = keychain
        self.settings = settings
        self.session = session if session is not None else CredentialSession()
        self.logger = logger or NullLogger()

    def get_username(self) -> str | None:
        """Cached username, falling back to the one persisted by the last login."""
        if self.session.username:
            return self.session.username
        stored = self.settings.get(USERNAME_SETTING)
        if isinstance(stored, str) and stored:
            return stored
        return None

    async def get_password(self, username: str) -> Credentials | None:
        """
        Look up the keychain password for a user.

        Any keychain failure is reported as "no password" so the caller falls
        back to asking the user.

        Args:
            username: GitHub username (keychain account)

        Returns:
            Credentials, or None if no password could be found
        """
        try:
            password = await self.keychain.get_password(username)
        except CredentialLookupError as e:
            await self.logger.warning(str(e))
            return None
        if not password:
            return None
        return Credentials.of(username, password)

    async def save(self, username: str, password: str) -> None:
        """
        Store a password in the keychain and remember the username.

        The in-memory session is left alone; updating it is up to the caller
        once the write has succeeded.

        Raises:
            CredentialWriteError: If the keychain rejects the write or the
                username cannot be persisted
        """
        await self.keychain.set_password(username, password)
        try:
            self.settings.set(USERNAME_SETTING, username)
        except OSError as e:
            await self.logger.error(f'Could not write settings for {username}: {e}')
            raise CredentialWriteError(username, f'Could not save your username: {e.strerror or e}') from e
        await self.logger.info(f'Saved GitHub credentials for {username}')
