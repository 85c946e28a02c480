"""
Data records for the gist publishing workflow.

Documents, credentials, gist requests/results and the dialog and notification
payloads exchanged between services and host adapters.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Literal

import pydantic

from docgist.base_model import StrictModel

Visibility = Literal['public', 'private']
DocumentScope = Literal['current', 'selected', 'active']
LoginField = Literal['username', 'password']

UNTITLED = 'untitled'


class DocumentRef(StrictModel):
    """Snapshot of one editor document taken for a single publish request."""

    name: str
    content: str


class Credentials(StrictModel):
    """GitHub username plus password (or personal access token)."""

    username: str
    password: pydantic.SecretStr

    @classmethod
    def of(cls, username: str, password: str) -> Credentials:
        return cls(username=username, password=pydantic.SecretStr(password))


class GistRequest(StrictModel):
    """A validated create-gist request. Never carries an empty file set."""

    visibility: Visibility
    files: dict[str, str]
    description: str = ''

    @pydantic.field_validator('files')
    @classmethod
    def validate_files(cls, v: dict[str, str]) -> dict[str, str]:
        """A gist needs at least one file."""
        if not v:
            raise ValueError('files must not be empty')
        return v

    @property
    def public(self) -> bool:
        return self.visibility == 'public'

    def to_payload(self) -> dict[str, object]:
        """Build the JSON body for POST /gists."""
        return {
            'public': self.public,
            'files': {name: {'content': content} for name, content in self.files.items()},
            'description': self.description,
        }


class GistResult(StrictModel):
    """Outcome of a successful create-gist call."""

    url: str | None = None
    gist_id: str | None = None

    @classmethod
    def from_response(cls, data: Mapping[str, object]) -> GistResult:
        url = data.get('html_url')
        gist_id = data.get('id')
        return cls(
            url=url if isinstance(url, str) and url else None,
            gist_id=gist_id if isinstance(gist_id, str) and gist_id else None,
        )


class PendingPublish(StrictModel):
    """A publish request parked while the user logs in."""

    visibility: Visibility
    documents: tuple[DocumentRef, ...]

    @classmethod
    def of(cls, visibility: Visibility, documents: Sequence[DocumentRef]) -> PendingPublish:
        return cls(visibility=visibility, documents=tuple(documents))


class LoginForm(StrictModel):
    """What the login dialog shows when it opens."""

    title: str = 'Login to Gist'
    buttons: tuple[str, ...] = ('Login', 'Cancel')
    username: str = ''
    focus: LoginField = 'username'


class LoginSubmission(StrictModel):
    """Raw field values the user submitted with the Login button."""

    username: str
    password: pydantic.SecretStr

    @classmethod
    def of(cls, username: str, password: str) -> LoginSubmission:
        return cls(username=username, password=pydantic.SecretStr(password))

    @property
    def is_complete(self) -> bool:
        return bool(self.username) and bool(self.password.get_secret_value())


class Notification(StrictModel):
    """Rich notification content shown after a gist is created."""

    title: str
    subtitle: str
    body: str
    action_label: str = 'Show'
