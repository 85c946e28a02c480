"""
Shared fakes for the doc-gist test suite.

Every host collaborator is replaced by an in-memory fake that records what
happened in a shared event list, so tests can assert on ordering across
collaborators (for example clipboard before notification).
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable, Sequence
from typing import Any

import attrs
import pytest

from docgist.app import GistApp, assemble
from docgist.exceptions import CredentialLookupError, CredentialWriteError, GistCreateError, NotificationUnavailableError
from docgist.models import Credentials, GistRequest, GistResult, LoginForm, LoginSubmission, Notification


@attrs.define
class FakeKeychain:
    events: list[str]
    passwords: dict[str, str] = attrs.Factory(dict)
    lookup_error: str | None = None
    write_error: str | None = None
    writes: list[tuple[str, str]] = attrs.Factory(list)

    async def get_password(self, account: str) -> str | None:
        self.events.append(f'keychain.get:{account}')
        if self.lookup_error is not None:
            raise CredentialLookupError(account, self.lookup_error)
        return self.passwords.get(account)

    async def set_password(self, account: str, password: str) -> None:
        self.events.append(f'keychain.set:{account}')
        if self.write_error is not None:
            raise CredentialWriteError(account, self.write_error)
        self.writes.append((account, password))
        self.passwords[account] = password


@attrs.define
class FakeSettingsStore:
    values: dict[str, Any] = attrs.Factory(dict)
    write_error: OSError | None = None

    def get(self, key: str, default: Any = None) -> Any:
        return self.values.get(key, default)

    def set(self, key: str, value: Any) -> None:
        if self.write_error is not None:
            raise self.write_error
        self.values[key] = value


@attrs.define
class FakeLoginDialog:
    """Answers each ask() with the next scripted submission (None = Cancel)."""

    events: list[str]
    answers: list[LoginSubmission | None] = attrs.Factory(list)
    forms: list[LoginForm] = attrs.Factory(list)
    # Awaited while the dialog is "on screen", before the answer is returned
    while_open: Callable[[], Awaitable[object]] | None = None

    async def ask(self, form: LoginForm) -> LoginSubmission | None:
        self.events.append('dialog.ask')
        self.forms.append(form)
        if self.while_open is not None:
            await self.while_open()
        if not self.answers:
            return None
        return self.answers.pop(0)


@attrs.define
class FakeAlerts:
    """Records alerts; answers with scripted button labels, else the first button."""

    events: list[str]
    answers: list[str] = attrs.Factory(list)
    shown: list[tuple[str, str, tuple[str, ...]]] = attrs.Factory(list)

    async def show(self, title: str, message: str, buttons: Sequence[str] = ('OK',)) -> str:
        self.events.append(f'alert:{title}')
        self.shown.append((title, message, tuple(buttons)))
        if self.answers:
            return self.answers.pop(0)
        return buttons[0]


@attrs.define
class FakeBeeper:
    events: list[str]
    count: int = 0

    def beep(self) -> None:
        self.events.append('beep')
        self.count += 1


@attrs.define
class FakeClipboard:
    events: list[str]
    contents: str | None = None
    works: bool = True

    @property
    def name(self) -> str:
        return 'fake'

    def copy(self, text: str) -> bool:
        self.events.append('clipboard.copy')
        if self.works:
            self.contents = text
        return self.works


@attrs.define
class FakeNotifications:
    events: list[str]
    available: bool = True
    fails: bool = False
    posted: list[Notification] = attrs.Factory(list)
    actions: list[Callable[[], object]] = attrs.Factory(list)

    def post(self, notification: Notification, on_action: Callable[[], object]) -> None:
        self.events.append('notification.post')
        if self.fails:
            raise NotificationUnavailableError('no backend')
        self.posted.append(notification)
        self.actions.append(on_action)


@attrs.define
class FakeGistApi:
    """Returns scripted results; a GistCreateError entry is raised instead."""

    events: list[str]
    results: list[GistResult | GistCreateError] = attrs.Factory(list)
    calls: list[tuple[GistRequest, Credentials]] = attrs.Factory(list)

    async def create(self, request: GistRequest, credentials: Credentials) -> GistResult:
        self.events.append('api.create')
        self.calls.append((request, credentials))
        outcome = self.results.pop(0) if self.results else GistResult(url='https://gist.github.com/abc123')
        if isinstance(outcome, GistCreateError):
            raise outcome
        return outcome


@attrs.define
class FakeDocument:
    name: str | None
    body: str | None = ''
    untitled: bool = False

    @property
    def text(self) -> str | None:
        return self.body

    def filename(self) -> str | None:
        return self.name

    def is_untitled(self) -> bool:
        return self.untitled


@attrs.define
class FakeTab:
    visible: list[FakeDocument] = attrs.Factory(list)
    active: list[FakeDocument] = attrs.Factory(list)

    def visible_documents(self) -> Sequence[FakeDocument]:
        return self.visible

    def active_documents(self) -> Sequence[FakeDocument]:
        return self.active


@attrs.define
class FakeHost:
    current: FakeDocument | None = None
    tab: FakeTab | None = None

    def current_document(self) -> FakeDocument | None:
        return self.current

    def current_tab(self) -> FakeTab | None:
        return self.tab


@attrs.define
class Harness:
    """A fully wired GistApp plus handles on every fake."""

    events: list[str]
    keychain: FakeKeychain
    settings: FakeSettingsStore
    dialog: FakeLoginDialog
    alerts: FakeAlerts
    beeper: FakeBeeper
    clipboard: FakeClipboard
    notifications: FakeNotifications
    api: FakeGistApi
    app: GistApp

    def login_as(self, username: str, password: str) -> None:
        """Simulate a previous login: username in settings, password in the keychain."""
        self.settings.values['githubUsername'] = username
        self.keychain.passwords[username] = password


@pytest.fixture
def harness() -> Harness:
    events: list[str] = []
    keychain = FakeKeychain(events)
    settings = FakeSettingsStore()
    dialog = FakeLoginDialog(events)
    alerts = FakeAlerts(events)
    beeper = FakeBeeper(events)
    clipboard = FakeClipboard(events)
    notifications = FakeNotifications(events)
    api = FakeGistApi(events)
    app = assemble(
        client=api,
        keychain=keychain,
        settings_store=settings,
        dialog=dialog,
        alerts=alerts,
        beeper=beeper,
        clipboard=clipboard,
        notifications=notifications,
    )
    return Harness(
        events=events,
        keychain=keychain,
        settings=settings,
        dialog=dialog,
        alerts=alerts,
        beeper=beeper,
        clipboard=clipboard,
        notifications=notifications,
        api=api,
        app=app,
    )
