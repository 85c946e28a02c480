"""
Shared protocols for doc-gist services.

The publishing workflow never talks to the editor, the desktop or the terminal
directly. Everything it needs from its surroundings is described here and
passed in by whoever assembles the services (the CLI, or a test).
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from typing import Protocol

from docgist.models import LoginForm, LoginSubmission, Notification


class LoggerProtocol(Protocol):
    """
    Protocol for async logger - enables services to work with any logging implementation.

    Implementations:
    - CLILogger (cli/logger.py): Logs to stdout with optional verbose mode
    - NullLogger (below): No-op implementation for when logging is optional
    """

    async def info(self, message: str) -> None: ...
    async def warning(self, message: str) -> None: ...
    async def error(self, message: str) -> None: ...


class NullLogger:
    """No-op logger used when the caller does not want output."""

    async def info(self, message: str) -> None:
        pass

    async def warning(self, message: str) -> None:
        pass

    async def error(self, message: str) -> None:
        pass


# ==============================================================================
# Editor host
# ==============================================================================


class Document(Protocol):
    """An open editor document."""

    @property
    def text(self) -> str | None: ...

    def filename(self) -> str | None: ...

    def is_untitled(self) -> bool: ...


class Tab(Protocol):
    """An editor tab (window split) holding several documents."""

    def visible_documents(self) -> Sequence[Document]: ...

    def active_documents(self) -> Sequence[Document]: ...


class EditorHost(Protocol):
    """Entry point into the editor's document state."""

    def current_document(self) -> Document | None: ...

    def current_tab(self) -> Tab | None: ...


# ==============================================================================
# User-facing surface
# ==============================================================================


class Clipboard(Protocol):
    """System clipboard."""

    @property
    def name(self) -> str: ...

    def copy(self, text: str) -> bool: ...


class Notifications(Protocol):
    """Rich (desktop) notifications with a single action."""

    @property
    def available(self) -> bool: ...

    def post(self, notification: Notification, on_action: Callable[[], object]) -> None:
        """
        Show a notification.

        Raises:
            NotificationUnavailableError: If the platform cannot show it
        """
        ...


class Alerts(Protocol):
    """Blocking modal alerts."""

    async def show(self, title: str, message: str, buttons: Sequence[str] = ('OK',)) -> str:
        """Show an alert and return the label of the button the user chose."""
        ...


class Beeper(Protocol):
    """Audible "nothing to do" feedback."""

    def beep(self) -> None: ...


class LoginDialog(Protocol):
    """Modal username/password dialog."""

    async def ask(self, form: LoginForm) -> LoginSubmission | None:
        """
        Show the dialog until the user presses a button.

        Returns:
            The submitted fields for Login, None for Cancel
        """
        ...
