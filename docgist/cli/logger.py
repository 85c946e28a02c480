"""
CLI logger adapter - implements LoggerProtocol for command-line usage.

Info goes to stdout in verbose mode only; warnings and errors always go to
stderr so they never mix with a gist URL printed on stdout.
"""

from __future__ import annotations

import typer


class CLILogger:
    """Logger implementation for the doc-gist CLI."""

    def __init__(self, verbose: bool = False) -> None:
        """
        Initialize CLI logger.

        Args:
            verbose: If True, show info messages. If False, only warnings/errors.
        """
        self.verbose = verbose

    async def info(self, message: str) -> None:
        """Log info message (only if verbose)."""
        if self.verbose:
            typer.echo(f'[INFO] {message}')

    async def warning(self, message: str) -> None:
        typer.secho(f'[WARNING] {message}', fg=typer.colors.YELLOW, err=True)

    async def error(self, message: str) -> None:
        typer.secho(f'[ERROR] {message}', fg=typer.colors.RED, err=True)
