#!/usr/bin/env python3
"""
Command-line interface for doc-gist.

Provides one command per gist action (public/private x current/selected/active
documents), plus login and a listing of the available commands.
"""

from __future__ import annotations

import asyncio
import traceback
from collections.abc import Sequence

import typer

from docgist.app import build_app
from docgist.cli.logger import CLILogger
from docgist.commands import GIST_COMMANDS, GistCommand, find_command
from docgist.config.cli import settings
from docgist.exceptions import DocGistError
from docgist.host.workspace import FileWorkspace
from docgist.services.documents import DocumentSource

app = typer.Typer(
    name='doc-gist',
    help='Publish documents as GitHub Gists',
    add_completion=False,
)


def _register_gist_command(command: GistCommand) -> None:
    """Expose a GistCommand as a subcommand of the same name."""

    def run(
        paths: list[str] | None = typer.Argument(None, help="Documents to open ('-' reads stdin as untitled)"),
        focus: list[str] | None = typer.Option(None, '--focus', '-F', help='Mark a document as active (repeatable)'),
        open_url: bool = typer.Option(False, '--open', help='Open the gist in the browser once created'),
        verbose: bool = typer.Option(False, '--verbose', '-v', help='Verbose output'),
    ) -> None:
        asyncio.run(_publish_async(command, paths or [], focus or [], open_url, verbose))

    app.command(
        name=command.name,
        help=f'{command.title}. Menu: {command.menu_path} ({command.shortcut})',
    )(run)


for _command in GIST_COMMANDS:
    _register_gist_command(_command)


@app.command()
def login(
    verbose: bool = typer.Option(False, '--verbose', '-v', help='Verbose output'),
) -> None:
    """Store GitHub credentials in the OS keychain."""
    asyncio.run(_login_async(verbose))


@app.command()
def commands(
    name: str | None = typer.Argument(None, help='Show only this command'),
) -> None:
    """List the gist commands with their menu paths and shortcuts."""
    if name is None:
        selected: Sequence[GistCommand] = GIST_COMMANDS
    else:
        try:
            selected = [find_command(name)]
        except KeyError:
            typer.secho(f'Error: Unknown command: {name}', fg=typer.colors.RED, err=True)
            raise typer.Exit(1)

    for command in selected:
        typer.secho(command.name, bold=True)
        typer.echo(f'  Menu: {command.menu_path}')
        typer.echo(f'  Shortcut: {command.shortcut}')


async def _publish_async(
    command: GistCommand,
    paths: Sequence[str],
    focus: Sequence[str],
    open_url: bool,
    verbose: bool,
) -> None:
    """Async implementation of the gist commands."""
    logger = CLILogger(verbose=verbose)

    try:
        workspace = FileWorkspace.from_paths(paths, focus)
        documents = DocumentSource(workspace).resolve(command.scope)
        await logger.info(f'{command.title}: {len(documents)} document(s)')

        gist_app = build_app(settings, logger, open_after_publish=open_url)
        result = await gist_app.publisher.publish(command.visibility, documents)

        if result is not None and result.url:
            typer.secho(f'✓ {command.visibility.capitalize()} gist created!', fg=typer.colors.GREEN, err=True)
            typer.echo(result.url)

    except (DocGistError, FileNotFoundError, UnicodeDecodeError) as e:
        typer.secho(f'Error: {e}', fg=typer.colors.RED, err=True)
        raise typer.Exit(1)
    except Exception as e:
        await logger.error(f'Failed to publish gist: {e}')
        if verbose:
            traceback.print_exc()
        raise typer.Exit(1)


async def _login_async(verbose: bool) -> None:
    """Async implementation of login command."""
    logger = CLILogger(verbose=verbose)

    try:
        gist_app = build_app(settings, logger)
        credentials = await gist_app.login_prompt.open(gist_app.store.get_username())
        if credentials is None:
            typer.echo('Login cancelled.', err=True)
            return
        typer.secho(f'✓ Logged in as {credentials.username}', fg=typer.colors.GREEN)

    except DocGistError as e:
        typer.secho(f'Error: {e}', fg=typer.colors.RED, err=True)
        raise typer.Exit(1)
    except Exception as e:
        await logger.error(f'Login failed: {e}')
        if verbose:
            traceback.print_exc()
        raise typer.Exit(1)


def main() -> None:
    """Entry point for CLI."""
    app()


if __name__ == '__main__':
    main()
