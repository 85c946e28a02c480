"""
Application wiring.

Builds the service graph around one CredentialSession. Front ends create a
GistApp once and trigger commands against it; tests build one from fakes.
"""

from __future__ import annotations

import attrs

from docgist.cli.logger import CLILogger
from docgist.cli.terminal import TerminalAlerts, TerminalBeeper, TerminalLoginDialog
from docgist.config.cli import CliSettings
from docgist.host.clipboard import NativeClipboard
from docgist.host.notifications import DesktopNotifications
from docgist.protocols import Alerts, Beeper, Clipboard, LoggerProtocol, LoginDialog, Notifications
from docgist.services.credentials import CredentialSession, CredentialStore
from docgist.services.login import LoginPrompt
from docgist.services.notifier import ResultNotifier
from docgist.services.publisher import GistPublisher
from docgist.storage.gist import GistClient
from docgist.storage.keychain import KeyringKeychain
from docgist.storage.protocol import GistApi, Keychain, SettingsStore
from docgist.storage.settings import JsonSettingsStore


@attrs.define(frozen=True)
class GistApp:
    """
    Immutable application state initialized at startup.

    Contains all services needed to run the gist commands.
    """

    session: CredentialSession
    store: CredentialStore
    login_prompt: LoginPrompt
    notifier: ResultNotifier
    publisher: GistPublisher


def assemble(
    *,
    client: GistApi,
    keychain: Keychain,
    settings_store: SettingsStore,
    dialog: LoginDialog,
    alerts: Alerts,
    beeper: Beeper,
    clipboard: Clipboard,
    notifications: Notifications,
    description: str = '',
    logger: LoggerProtocol | None = None,
) -> GistApp:
    """Wire the services around a fresh CredentialSession."""
    session = CredentialSession()
    store = CredentialStore(keychain, settings_store, session=session, logger=logger)
    login_prompt = LoginPrompt(dialog, alerts, store, logger=logger)
    notifier = ResultNotifier(clipboard, notifications, alerts, logger=logger)
    publisher = GistPublisher(
        client,
        store,
        login_prompt,
        notifier,
        alerts,
        beeper,
        description=description,
        logger=logger,
    )
    return GistApp(session=session, store=store, login_prompt=login_prompt, notifier=notifier, publisher=publisher)


def build_app(settings: CliSettings, logger: CLILogger, open_after_publish: bool = False) -> GistApp:
    """Wire the services against the real keychain, GitHub, desktop and terminal."""
    return assemble(
        client=GistClient(base_url=settings.GITHUB_API_URL, timeout=settings.REQUEST_TIMEOUT_SECONDS),
        keychain=KeyringKeychain(settings.KEYCHAIN_SERVICE, timeout=settings.KEYCHAIN_TIMEOUT_SECONDS),
        settings_store=JsonSettingsStore(settings.SETTINGS_PATH),
        dialog=TerminalLoginDialog(),
        alerts=TerminalAlerts(),
        beeper=TerminalBeeper(),
        clipboard=NativeClipboard(),
        notifications=DesktopNotifications(
            app_name=settings.APP_NAME,
            enabled=settings.NOTIFICATIONS_ENABLED,
            timeout=settings.NOTIFICATION_TIMEOUT_SECONDS,
            run_action=open_after_publish or settings.OPEN_AFTER_PUBLISH,
        ),
        description=settings.GIST_DESCRIPTION,
        logger=logger,
    )
