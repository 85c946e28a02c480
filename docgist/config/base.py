"""
Base configuration for doc-gist.

Settings shared by every front end (currently only the CLI), loaded from
environment variables and an optional .env file.
"""

from __future__ import annotations

import os
import pathlib
from typing import TypeVar

import lazy_object_proxy
import pydantic
import pydantic_settings


T = TypeVar('T', bound='BaseGistSettings')


class BaseGistSettings(pydantic_settings.BaseSettings):
    """Shared configuration across all doc-gist front ends."""

    model_config = pydantic_settings.SettingsConfigDict(
        env_file='.env',
        env_file_encoding='utf-8',
        case_sensitive=True,  # Fail fast on misconfiguration
        extra='forbid',  # Reject unknown environment variables
    )

    # Application metadata
    APP_NAME: str = 'doc-gist'
    VERSION: str = '0.1.0'

    # Keychain service name every password is stored under
    KEYCHAIN_SERVICE: str = 'doc-gist'

    # Remote Gist API
    GITHUB_API_URL: str = 'https://api.github.com'
    GIST_DESCRIPTION: str = ''

    # Upper bounds for the two external suspension points
    REQUEST_TIMEOUT_SECONDS: float = 30.0
    KEYCHAIN_TIMEOUT_SECONDS: float = 10.0

    # Persistent (non-secret) settings such as the last GitHub username
    SETTINGS_PATH: pathlib.Path = pathlib.Path.home() / '.config' / 'doc-gist' / 'settings.json'

    @pydantic.field_validator('REQUEST_TIMEOUT_SECONDS', 'KEYCHAIN_TIMEOUT_SECONDS')
    @classmethod
    def validate_timeout(cls, v: float) -> float:
        """Timeouts must be positive."""
        if v <= 0:
            raise ValueError('timeouts must be greater than 0 seconds')
        return v

    @pydantic.field_validator('GITHUB_API_URL')
    @classmethod
    def validate_api_url(cls, v: str) -> str:
        """Strip the trailing slash so endpoint paths can be appended."""
        if not v.startswith(('http://', 'https://')):
            raise ValueError('GITHUB_API_URL must be an http(s) URL')
        return v.rstrip('/')


def get_settings(settings_class: type[T], env_file: str | None = None) -> T:
    """
    Factory for creating settings with dynamic .env file loading.

    LOAD_ENV_FILE environment variable specifies custom .env file path.
    When unset, loads from environment variables only.

    Args:
        settings_class: Settings class to instantiate
        env_file: Optional path to .env file (overrides LOAD_ENV_FILE)

    Returns:
        Settings instance

    Raises:
        FileNotFoundError: If specified .env file doesn't exist
    """
    env_file_path = env_file or os.getenv('LOAD_ENV_FILE')

    if not env_file_path:
        return settings_class()

    resolved_path = pathlib.Path(env_file_path).resolve()
    if not resolved_path.exists():
        raise FileNotFoundError(f'Environment file not found: {resolved_path}')

    return settings_class(_env_file=resolved_path)


def lazy_settings(settings_class: type[T]) -> T:
    """Proxy that instantiates settings on first attribute access."""
    return lazy_object_proxy.Proxy(lambda: get_settings(settings_class))
