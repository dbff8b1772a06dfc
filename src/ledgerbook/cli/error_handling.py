"""Rendering of domain errors on the command line."""

import click

from ledgerbook.domain.errors import ClosedPeriodError, DomainError


def handle_domain_error(ctx: click.Context, error: DomainError | ValueError) -> None:
    """Print ``Error: <message>`` to stderr and exit with status 1."""
    click.echo(f"Error: {error}", err=True)
    if isinstance(error, ClosedPeriodError):
        click.echo("Hint: use 'ledgerbook period reopen YYYY-MM' to reopen the period", err=True)
    ctx.exit(1)
