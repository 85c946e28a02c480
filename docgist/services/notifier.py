"""
Result notifier service - tells the user where their new gist lives.

The URL always goes to the clipboard first; the notification (or the alert
used when notifications are unavailable) only confirms it.
"""

from __future__ import annotations

import webbrowser
from collections.abc import Callable

from docgist.exceptions import NotificationUnavailableError
from docgist.models import Notification, Visibility
from docgist.protocols import Alerts, Clipboard, LoggerProtocol, Notifications, NullLogger

COPIED_BODY = 'The URL has been copied to your clipboard.'


def created_title(visibility: Visibility) -> str:
    return f'{visibility.capitalize()} Gist Created'


class ResultNotifier:
    """Copies gist URLs to the clipboard and announces them."""

    def __init__(
        self,
        clipboard: Clipboard,
        notifications: Notifications,
        alerts: Alerts,
        opener: Callable[[str], object] = webbrowser.open,
        logger: LoggerProtocol | None = None,
    ) -> None:
        """
        Initialize notifier.

        Args:
            clipboard: System clipboard
            notifications: Rich notification center
            alerts: Modal alerts, used when notifications are unavailable
            opener: Opens a URL in the default viewer (the notification's "Show" action)
            logger: Optional logger instance
        """
        self.clipboard = clipboard
        self.notifications = notifications
        self.alerts = alerts
        self.opener = opener
        self.logger = logger or NullLogger()

    async def notify(self, url: str | None, visibility: Visibility) -> None:
        if not url:
            return

        if not self.clipboard.copy(url):
            await self.logger.warning(f'Could not copy the gist URL to the clipboard ({self.clipboard.name})')

        title = created_title(visibility)
        if self.notifications.available:
            notification = Notification(title=title, subtitle=url, body=COPIED_BODY)
            try:
                self.notifications.post(notification, on_action=lambda: self.opener(url))
                return
            except NotificationUnavailableError as e:
                await self.logger.info(f'Desktop notifications unavailable, falling back to an alert: {e}')

        await self.alerts.show(title, url, ['OK'])
