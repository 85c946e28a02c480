"""Stores and remote backends: keychain, settings file and the Gist API."""

from docgist.storage.gist import GistClient
from docgist.storage.keychain import KeyringKeychain
from docgist.storage.protocol import GistApi, Keychain, SettingsStore
from docgist.storage.settings import JsonSettingsStore

__all__ = ['GistApi', 'GistClient', 'JsonSettingsStore', 'Keychain', 'KeyringKeychain', 'SettingsStore']
