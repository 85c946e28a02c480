"""
OS keychain backend built on the keyring library.

keyring calls are blocking (they may talk to D-Bus, the macOS Security
framework or the Windows Credential Manager), so they run in a worker thread
and are bounded by a timeout.
"""

from __future__ import annotations

import asyncio

import keyring
import keyring.errors

from docgist.exceptions import CredentialLookupError, CredentialWriteError


class KeyringKeychain:
    """Keychain backend storing every password under one service name."""

    def __init__(self, service: str, timeout: float = 10.0) -> None:
        """
        Initialize keychain backend.

        Args:
            service: Service name the secrets are filed under
            timeout: Seconds to wait for the OS keychain before giving up
        """
        self.service = service
        self.timeout = timeout

    async def get_password(self, account: str) -> str | None:
        try:
            return await asyncio.wait_for(
                asyncio.to_thread(keyring.get_password, self.service, account),
                timeout=self.timeout,
            )
        except TimeoutError:
            raise CredentialLookupError(account, f'keychain did not answer within {self.timeout:g}s')
        except (keyring.errors.KeyringError, OSError) as e:
            raise CredentialLookupError(account, str(e) or type(e).__name__) from e

    async def set_password(self, account: str, password: str) -> None:
        try:
            await asyncio.wait_for(
                asyncio.to_thread(keyring.set_password, self.service, account, password),
                timeout=self.timeout,
            )
        except TimeoutError:
            raise CredentialWriteError(account, f'The keychain did not answer within {self.timeout:g}s.')
        except (keyring.errors.KeyringError, OSError) as e:
            raise CredentialWriteError(account, str(e) or type(e).__name__) from e
