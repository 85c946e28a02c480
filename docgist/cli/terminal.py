"""
Terminal implementations of the interactive host surface.

The login dialog, modal alerts and the "nothing to do" beep, all driven
through typer prompts. Ctrl-C or end of input at a prompt means Cancel.
"""

from __future__ import annotations

from collections.abc import Sequence

import typer

from docgist.models import LoginForm, LoginSubmission


class TerminalAlerts:
    """Modal alerts printed to stderr."""

    async def show(self, title: str, message: str, buttons: Sequence[str] = ('OK',)) -> str:
        typer.secho(title, bold=True, err=True)
        typer.echo(f'  {message}', err=True)
        if len(buttons) < 2:
            return buttons[0] if buttons else 'OK'

        # First button is the default action, the last one is the way out
        try:
            confirmed = typer.confirm(f'{buttons[0]}?', default=True, err=True)
        except typer.Abort:
            return buttons[-1]
        return buttons[0] if confirmed else buttons[-1]


class TerminalBeeper:
    """Rings the terminal bell."""

    def beep(self) -> None:
        typer.echo('\a', nl=False, err=True)


class TerminalLoginDialog:
    """
    Username/password prompt. The password is read without echo.

    Prompts are sequential, so a prefilled username is accepted with Enter and
    the user lands on the password prompt.
    """

    async def ask(self, form: LoginForm) -> LoginSubmission | None:
        typer.secho(form.title, bold=True, err=True)
        try:
            username = typer.prompt('Username', default=form.username, show_default=bool(form.username), err=True)
            password = typer.prompt('Password or token', default='', hide_input=True, show_default=False, err=True)
        except typer.Abort:
            typer.echo('', err=True)
            return None
        return LoginSubmission.of(username, password)
