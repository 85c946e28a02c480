"""
Gist publisher service - the credential-gated publishing workflow.

Steps of one publish, strictly in order:

1. No documents                     -> beep, stop
2. Build files (untitled names, drop empty documents)
3. No file left                     -> beep, stop
4. Resolve credentials; if missing, park the request, run the login prompt
   and resume the parked request once on success (stop on cancel)
5. Create the gist
6. URL returned                     -> clipboard + notification
   API failure                      -> alert with Retry / Cancel

Only one publish runs at a time; a second trigger while the first is still in
progress (for example waiting on the login prompt) just beeps.
"""

from __future__ import annotations

from collections.abc import Sequence

from docgist.exceptions import (
    GistCreateError,
    NoContentError,
    NoDocumentsError,
    NothingToPublishError,
    PublishInProgressError,
)
from docgist.models import UNTITLED, Credentials, DocumentRef, GistRequest, GistResult, PendingPublish, Visibility
from docgist.protocols import Alerts, Beeper, LoggerProtocol, NullLogger
from docgist.services.credentials import CredentialStore
from docgist.services.login import LoginPrompt
from docgist.services.notifier import ResultNotifier
from docgist.storage.protocol import GistApi

CREATE_FAILED_TITLE = 'Could not create Gist.'
RETRY = 'Retry'
CANCEL = 'Cancel'


def build_files(documents: Sequence[DocumentRef]) -> dict[str, str]:
    """
    Map documents to gist files.

    Empty documents are skipped. Documents resolving to the same name
    overwrite each other in order, so the last one wins.
    """
    files: dict[str, str] = {}
    for document in documents:
        if not document.content:
            continue
        files[document.name or UNTITLED] = document.content
    return files


def build_request(visibility: Visibility, documents: Sequence[DocumentRef], description: str = '') -> GistRequest:
    """
    Raises:
        NoDocumentsError: If there are no documents
        NoContentError: If every document is empty
    """
    if not documents:
        raise NoDocumentsError()
    files = build_files(documents)
    if not files:
        raise NoContentError(len(documents))
    return GistRequest(visibility=visibility, files=files, description=description)


class GistPublisher:
    """Publishes documents as gists once credentials are available."""

    def __init__(
        self,
        client: GistApi,
        store: CredentialStore,
        login_prompt: LoginPrompt,
        notifier: ResultNotifier,
        alerts: Alerts,
        beeper: Beeper,
        description: str = '',
        logger: LoggerProtocol | None = None,
    ) -> None:
        """
        Initialize publisher.

        Args:
            client: Remote create-gist API
            store: Credential store (and, through it, the shared session)
            login_prompt: Prompt opened when credentials are missing
            notifier: Announces the created gist
            alerts: Modal alerts for API failures
            beeper: "Nothing to do" feedback
            description: Description attached to every gist
            logger: Optional logger instance
        """
        self.client = client
        self.store = store
        self.login_prompt = login_prompt
        self.notifier = notifier
        self.alerts = alerts
        self.beeper = beeper
        self.description = description
        self.logger = logger or NullLogger()
        self._busy = False

    @property
    def busy(self) -> bool:
        return self._busy

    async def publish(self, visibility: Visibility, documents: Sequence[DocumentRef]) -> GistResult | None:
        """
        Publish documents as a gist.

        Args:
            visibility: 'public' or 'private'
            documents: Documents to include, in order

        Returns:
            GistResult when the gist was created, None when nothing was published
            (nothing to send, another publish running, login or retry cancelled)
        """
        documents = tuple(documents)
        try:
            if self._busy:
                raise PublishInProgressError()
            request = build_request(visibility, documents, self.description)
        except (NothingToPublishError, PublishInProgressError) as e:
            await self.logger.info(str(e))
            self.beeper.beep()
            return None

        self._busy = True
        try:
            return await self._publish(PendingPublish.of(visibility, documents), request, allow_login=True)
        finally:
            self._busy = False

    async def _publish(self, pending: PendingPublish, request: GistRequest, allow_login: bool) -> GistResult | None:
        credentials = await self.resolve_credentials()
        if credentials is not None:
            return await self._create(request, credentials)

        if not allow_login:
            await self.logger.warning('Still no GitHub credentials after login; giving up')
            return None

        credentials = await self.login_prompt.open(self.store.get_username())
        if credentials is None:
            return None
        return await self._resume(pending)

    async def _resume(self, pending: PendingPublish) -> GistResult | None:
        """Re-run a parked request exactly once, without another login round."""
        await self.logger.info(f'Resuming {pending.visibility} gist of {len(pending.documents)} document(s)')
        request = build_request(pending.visibility, pending.documents, self.description)
        return await self._publish(pending, request, allow_login=False)

    async def resolve_credentials(self) -> Credentials | None:
        """
        Username from the store, password from the keychain.

        Falls back to the password held in the session for the same user when
        the keychain has nothing (or cannot be read).
        """
        username = self.store.get_username()
        if not username:
            return None
        credentials = await self.store.get_password(username)
        if credentials is None:
            credentials = self.store.session.credentials_for(username)
        return credentials

    async def _create(self, request: GistRequest, credentials: Credentials) -> GistResult | None:
        await self.logger.info(f'Creating {request.visibility} gist with {len(request.files)} file(s)')
        while True:
            try:
                result = await self.client.create(request, credentials)
                break
            except GistCreateError as e:
                await self.logger.error(f'Failed to create gist: {e}')
                choice = await self.alerts.show(CREATE_FAILED_TITLE, str(e), [RETRY, CANCEL])
                if choice != RETRY:
                    return None

        if result.url:
            await self.logger.info(f'Gist created: {result.url}')
            await self.notifier.notify(result.url, request.visibility)
        else:
            await self.logger.warning('GitHub did not return a gist URL')
        return result
