"""
Shared exceptions for doc-gist.

Domain-specific exceptions used across services and host adapters.

Exception Hierarchy:
    DocGistError (base)
    ├── NothingToPublishError (surfaced as a beep, never a dialog)
    │   ├── NoDocumentsError (no documents resolved)
    │   └── NoContentError (every resolved document is empty)
    ├── PublishInProgressError (second trigger while a publish is running)
    ├── CredentialError (keychain access failures)
    │   ├── CredentialLookupError (treated as "no password")
    │   └── CredentialWriteError (shown to the user, login stays open)
    ├── LoginError (login prompt failures)
    │   ├── LoginValidationError (empty username or password)
    │   └── LoginInProgressError (prompt opened twice)
    ├── GistCreateError (remote create-gist call failed)
    └── NotificationUnavailableError (no desktop notification backend)
"""

from __future__ import annotations


class DocGistError(Exception):
    """Base exception for all doc-gist errors."""


class NothingToPublishError(DocGistError):
    """Base exception for publish requests that have nothing to send."""


class NoDocumentsError(NothingToPublishError):
    """Raised when a publish request resolves to zero documents."""

    def __init__(self) -> None:
        super().__init__('No documents to publish.')


class NoContentError(NothingToPublishError):
    """Raised when every document of a publish request has empty content."""

    def __init__(self, document_count: int) -> None:
        self.document_count = document_count
        super().__init__(f'All {document_count} document(s) are empty; nothing to publish.')


class PublishInProgressError(DocGistError):
    """Raised when a publish is triggered while another one is still running."""

    def __init__(self) -> None:
        super().__init__('A gist is already being published. Finish or cancel it first.')


class CredentialError(DocGistError):
    """Base exception for keychain access failures."""


class CredentialLookupError(CredentialError):
    """Raised when the keychain cannot be read for an account."""

    def __init__(self, account: str, reason: str) -> None:
        self.account = account
        self.reason = reason
        super().__init__(f"Could not read keychain entry for '{account}': {reason}")


class CredentialWriteError(CredentialError):
    """Raised when the keychain rejects a password write."""

    def __init__(self, account: str, reason: str) -> None:
        self.account = account
        self.reason = reason
        super().__init__(reason)


class LoginError(DocGistError):
    """Base exception for login prompt failures."""


class LoginValidationError(LoginError):
    """Raised when a login form is submitted with an empty field."""

    def __init__(self) -> None:
        super().__init__('Please fill in your username and password.')


class LoginInProgressError(LoginError):
    """Raised when a login prompt is opened while it is already open."""

    def __init__(self) -> None:
        super().__init__('The login prompt is already open.')


class GistCreateError(DocGistError):
    """Raised when GitHub refuses or fails to create a gist."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        self.status_code = status_code
        self.message = message
        if status_code is not None:
            super().__init__(f'GitHub returned HTTP {status_code}: {message}')
        else:
            super().__init__(message)


class NotificationUnavailableError(DocGistError):
    """Raised when the platform has no desktop notification backend."""
