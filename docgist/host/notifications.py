"""
Desktop notifications via plyer.

plyer picks the platform backend (Notification Center, libnotify/D-Bus,
Windows toasts) and raises NotImplementedError where there is none.
"""

from __future__ import annotations

from collections.abc import Callable

from docgist.exceptions import NotificationUnavailableError
from docgist.models import Notification


class DesktopNotifications:
    """Notification center backed by plyer."""

    def __init__(
        self,
        app_name: str = 'doc-gist',
        enabled: bool = True,
        timeout: int = 8,
        run_action: bool = False,
    ) -> None:
        """
        Initialize notification center.

        Args:
            app_name: Application name shown by the platform
            enabled: False turns every post into NotificationUnavailableError
            timeout: Seconds the notification stays on screen
            run_action: Run the notification's action right after posting it
                (plyer notifications cannot carry buttons)
        """
        self.app_name = app_name
        self.enabled = enabled
        self.timeout = timeout
        self.run_action = run_action

    @property
    def available(self) -> bool:
        return self.enabled

    def post(self, notification: Notification, on_action: Callable[[], object]) -> None:
        if not self.enabled:
            raise NotificationUnavailableError('Desktop notifications are disabled')

        from plyer import notification as plyer_notification

        try:
            plyer_notification.notify(
                title=notification.title,
                message=f'{notification.subtitle}\n{notification.body}',
                app_name=self.app_name,
                timeout=self.timeout,
            )
        except NotImplementedError as e:
            raise NotificationUnavailableError('No desktop notification backend for this platform') from e
        except Exception as e:
            # Backends fail with their own error types (D-Bus, win32 API, ...)
            raise NotificationUnavailableError(f'Notification failed: {e}') from e

        if self.run_action:
            on_action()
