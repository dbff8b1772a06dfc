"""Accounting period commands."""

import click
from ledgerbook.domain.errors import DomainError
from ledgerbook.domain.period import PeriodService
from ledgerbook.cli.error_handling import handle_domain_error


@click.group()
def period_group():
    """Open, check and close monthly accounting periods."""
    pass


@period_group.command("open")
@click.argument("period", metavar="YYYY-MM")
@click.pass_context
def open_period(ctx, period: str):
    """Register an open accounting period."""
    try:
        found = PeriodService(ctx.obj["db"]).open_period(period)
        click.echo(f"Opened period {found.period}")
    except DomainError as e:
        handle_domain_error(ctx, e)


@period_group.command("list")
@click.pass_context
def list_periods(ctx):
    """List accounting periods."""
    periods = PeriodService(ctx.obj["db"]).list_periods()
    if not periods:
        click.echo("No accounting periods found.")
        return

    for found in periods:
        closed = ""
        if found.closed_at is not None:
            closed = f" | closed {found.closed_at:%Y-%m-%d %H:%M}"
            if found.closed_by:
                closed += f" by {found.closed_by}"
        click.echo(f"{found.period} | {found.status.value}{closed}")


@period_group.command("check")
@click.argument("period", metavar="YYYY-MM")
@click.pass_context
def check_period(ctx, period: str):
    """Show what blocks closing a period."""
    try:
        check = PeriodService(ctx.obj["db"]).check_period(period)
    except DomainError as e:
        handle_domain_error(ctx, e)

    click.echo(f"Period {check.period}")
    click.echo(f"Pending vouchers:        {check.pending_vouchers}")
    click.echo(f"Unmatched bank records:  {check.unmatched_bank_records}")
    click.echo(f"Pending tax records:     {check.pending_tax_records}")
    click.echo("Ready to close" if check.can_close else "Not ready to close")


@period_group.command("close")
@click.argument("period", metavar="YYYY-MM")
@click.option("--by", "closed_by", help="Name recorded as the closer")
@click.pass_context
def close_period(ctx, period: str, closed_by: str | None):
    """Close a period; vouchers dated in it can no longer be recorded or posted."""
    try:
        found = PeriodService(ctx.obj["db"]).close_period(period, closed_by=closed_by)
        click.echo(f"Closed period {found.period}")
    except DomainError as e:
        handle_domain_error(ctx, e)


@period_group.command("reopen")
@click.argument("period", metavar="YYYY-MM")
@click.pass_context
def reopen_period(ctx, period: str):
    """Reopen a closed period."""
    try:
        found = PeriodService(ctx.obj["db"]).reopen_period(period)
        click.echo(f"Reopened period {found.period}")
    except DomainError as e:
        handle_domain_error(ctx, e)


def register_commands(cli):
    """Register period commands with main CLI."""
    cli.add_command(period_group, name="period")
