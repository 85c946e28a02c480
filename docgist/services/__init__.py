"""Service layer for the gist publishing workflow."""

from docgist.services.credentials import CredentialSession, CredentialStore
from docgist.services.documents import DocumentSource
from docgist.services.login import LoginPrompt, LoginState
from docgist.services.notifier import ResultNotifier
from docgist.services.publisher import GistPublisher, build_files, build_request

__all__ = [
    'CredentialSession',
    'CredentialStore',
    'DocumentSource',
    'GistPublisher',
    'LoginPrompt',
    'LoginState',
    'ResultNotifier',
    'build_files',
    'build_request',
]
