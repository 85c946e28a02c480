"""Tests for credential resolution and storage."""

from __future__ import annotations

from pathlib import Path

import attrs
import pytest

from docgist.exceptions import CredentialWriteError
from docgist.models import Credentials
from docgist.services.credentials import CredentialSession, CredentialStore
from docgist.storage.settings import JsonSettingsStore

from conftest import FakeKeychain, FakeSettingsStore


@attrs.define
class RecordingLogger:
    messages: list[tuple[str, str]] = attrs.Factory(list)

    async def info(self, message: str) -> None:
        self.messages.append(('info', message))

    async def warning(self, message: str) -> None:
        self.messages.append(('warning', message))

    async def error(self, message: str) -> None:
        self.messages.append(('error', message))


def make_store(**keychain_kwargs) -> tuple[CredentialStore, FakeKeychain, FakeSettingsStore, RecordingLogger]:
    keychain = FakeKeychain([], **keychain_kwargs)
    settings = FakeSettingsStore()
    logger = RecordingLogger()
    return CredentialStore(keychain, settings, logger=logger), keychain, settings, logger


def test_username_prefers_session_over_settings() -> None:
    store, _, settings, _ = make_store()
    settings.values['githubUsername'] = 'from-settings'
    store.session.username = 'from-session'

    assert store.get_username() == 'from-session'


def test_username_falls_back_to_settings() -> None:
    store, _, settings, _ = make_store()
    settings.values['githubUsername'] = 'octocat'

    assert store.get_username() == 'octocat'


def test_username_unknown() -> None:
    store, _, _, _ = make_store()

    assert store.get_username() is None


@pytest.mark.asyncio
async def test_password_found_in_keychain() -> None:
    store, keychain, _, _ = make_store()
    keychain.passwords['octocat'] = 'token'

    credentials = await store.get_password('octocat')

    assert credentials == Credentials.of('octocat', 'token')


@pytest.mark.asyncio
async def test_missing_password_is_absent() -> None:
    store, _, _, _ = make_store()

    assert await store.get_password('octocat') is None


@pytest.mark.asyncio
async def test_keychain_failure_is_absent_and_logged() -> None:
    store, _, _, logger = make_store(lookup_error='keychain locked')

    assert await store.get_password('octocat') is None
    assert logger.messages[0][0] == 'warning'
    assert 'keychain locked' in logger.messages[0][1]


@pytest.mark.asyncio
async def test_save_writes_keychain_and_remembers_username() -> None:
    store, keychain, settings, logger = make_store()

    await store.save('octocat', 's3cret')

    assert keychain.writes == [('octocat', 's3cret')]
    assert settings.values == {'githubUsername': 'octocat'}
    assert store.session.credentials is None
    assert all('s3cret' not in message for _, message in logger.messages)


@pytest.mark.asyncio
async def test_save_failure_raises_with_keychain_message() -> None:
    store, _, settings, _ = make_store(write_error='The user name or passphrase you entered is not correct.')

    with pytest.raises(CredentialWriteError) as exc_info:
        await store.save('octocat', 's3cret')

    assert str(exc_info.value) == 'The user name or passphrase you entered is not correct.'
    assert settings.values == {}


def test_session_credentials_are_per_user() -> None:
    session = CredentialSession()
    session.remember(Credentials.of('octocat', 'token'))

    assert session.username == 'octocat'
    assert session.credentials_for('octocat') == Credentials.of('octocat', 'token')
    assert session.credentials_for('someone-else') is None


def test_password_is_hidden_from_repr() -> None:
    credentials = Credentials.of('octocat', 's3cret')

    assert 's3cret' not in repr(credentials)
    assert 's3cret' not in str(credentials)


@pytest.mark.asyncio
async def test_save_settings_write_failure_raises_credential_write_error(tmp_path: Path) -> None:
    blocker = tmp_path / 'blocker'
    blocker.write_text('', encoding='utf-8')
    keychain = FakeKeychain([])
    logger = RecordingLogger()
    store = CredentialStore(keychain, JsonSettingsStore(blocker / 'settings.json'), logger=logger)

    with pytest.raises(CredentialWriteError) as exc_info:
        await store.save('octocat', 'token')

    assert exc_info.value.account == 'octocat'
    assert str(exc_info.value).startswith('Could not save your username')
    assert store.session.credentials is None
    assert logger.messages[-1][0] == 'error'
