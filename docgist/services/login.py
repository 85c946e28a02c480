"""
Login prompt service - the modal GitHub login state machine.

    Closed -> Open -> Submitted -> Closed   (credentials saved, returned once)
                   -> Cancelled -> Closed   (nothing saved, None returned)

While Open, an invalid submission or a keychain write failure shows a blocking
alert and keeps the prompt Open so the user can correct it or cancel.
"""

from __future__ import annotations

from enum import StrEnum

from docgist.exceptions import CredentialWriteError, LoginInProgressError, LoginValidationError
from docgist.models import Credentials, LoginForm, LoginSubmission
from docgist.protocols import Alerts, LoggerProtocol, LoginDialog, NullLogger
from docgist.services.credentials import CredentialStore

SAVE_FAILED_TITLE = 'Could not save your credentials.'


class LoginState(StrEnum):
    CLOSED = 'closed'
    OPEN = 'open'
    SUBMITTED = 'submitted'
    CANCELLED = 'cancelled'


class LoginPrompt:
    """
    Modal login prompt.

    Collects a username and password through a LoginDialog, saves them via the
    CredentialStore and records them in the store's session.
    """

    def __init__(
        self,
        dialog: LoginDialog,
        alerts: Alerts,
        store: CredentialStore,
        logger: LoggerProtocol | None = None,
    ) -> None:
        self.dialog = dialog
        self.alerts = alerts
        self.store = store
        self.logger = logger or NullLogger()
        self.state = LoginState.CLOSED
        # Last terminal state reached (SUBMITTED or CANCELLED), for callers and tests
        self.outcome: LoginState | None = None

    @property
    def is_open(self) -> bool:
        return self.state == LoginState.OPEN

    @staticmethod
    def build_form(prefill_username: str | None) -> LoginForm:
        """Prefill the username when known and put the cursor on the password."""
        if prefill_username:
            return LoginForm(username=prefill_username, focus='password')
        return LoginForm(focus='username')

    @staticmethod
    def validate(submission: LoginSubmission) -> None:
        """
        Raises:
            LoginValidationError: If the username or password is empty
        """
        if not submission.is_complete:
            raise LoginValidationError()

    async def open(self, prefill_username: str | None = None) -> Credentials | None:
        """
        Run the prompt until the user logs in successfully or cancels.

        Args:
            prefill_username: Username shown in the form when it opens

        Returns:
            The saved credentials on success, None if the user cancelled

        Raises:
            LoginInProgressError: If this prompt is already open
        """
        if self.is_open:
            raise LoginInProgressError()

        self.state = LoginState.OPEN
        form = self.build_form(prefill_username)
        await self.logger.info('Waiting for GitHub login')
        try:
            while True:
                submission = await self.dialog.ask(form)
                if submission is None:
                    self.outcome = LoginState.CANCELLED
                    await self.logger.info('Login cancelled')
                    return None

                credentials = await self._submit(submission)
                if credentials is not None:
                    self.outcome = LoginState.SUBMITTED
                    return credentials

                # Keep what the user typed for the next round
                form = form.model_copy(update={'username': submission.username, 'focus': 'password'})
        finally:
            self.state = LoginState.CLOSED

    async def _submit(self, submission: LoginSubmission) -> Credentials | None:
        """Validate and save one submission. None means the prompt stays open."""
        try:
            self.validate(submission)
        except LoginValidationError as e:
            await self.alerts.show(SAVE_FAILED_TITLE, str(e), ['OK'])
            return None

        username = submission.username
        password = submission.password.get_secret_value()
        try:
            await self.store.save(username, password)
        except CredentialWriteError as e:
            await self.logger.error(f'Keychain write failed for {username}: {e}')
            await self.alerts.show(SAVE_FAILED_TITLE, str(e), ['OK'])
            return None

        credentials = Credentials.of(username, password)
        self.store.session.remember(credentials)
        return credentials
