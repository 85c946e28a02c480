"""
Command-line configuration.

Extends base configuration with settings for the desktop surface the CLI
drives (notifications and opening the created gist).
"""

from __future__ import annotations

import pydantic

from docgist.config.base import BaseGistSettings, lazy_settings


class CliSettings(BaseGistSettings):
    """CLI-specific configuration."""

    NOTIFICATIONS_ENABLED: bool = True
    NOTIFICATION_TIMEOUT_SECONDS: int = 8

    # plyer notifications have no buttons; run the "Show" action right away instead
    OPEN_AFTER_PUBLISH: bool = False

    @pydantic.field_validator('NOTIFICATION_TIMEOUT_SECONDS')
    @classmethod
    def validate_notification_timeout(cls, v: int) -> int:
        if v < 1:
            raise ValueError('NOTIFICATION_TIMEOUT_SECONDS must be at least 1')
        return v


# Module-level singleton (lazy-loaded)
settings = lazy_settings(CliSettings)
