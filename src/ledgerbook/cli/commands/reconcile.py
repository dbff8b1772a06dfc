"""Reconciliation commands."""

import click
from ledgerbook.domain.reconciliation import ReconciliationService
from ledgerbook.cli.parsing import format_amount


@click.group()
def reconcile_group():
    """Check the books for consistency."""
    pass


@reconcile_group.command("check")
@click.pass_context
def internal_check(ctx):
    """Recheck that every posted voucher balances.

    Exits with status 1 when unbalanced vouchers are found.
    """
    result = ReconciliationService(ctx.obj["db"]).internal_check()

    click.echo(f"Posted vouchers:     {result.total_vouchers}")
    click.echo(f"Balanced vouchers:   {result.balanced_vouchers}")
    click.echo(f"Unbalanced vouchers: {result.unbalanced_vouchers}")
    if not result.issues:
        return

    click.echo("-" * 80)
    for issue in result.issues:
        click.echo(
            f"{issue.date.isoformat()} | {issue.voucher_no:<12} | debit {format_amount(issue.total_debit)} | "
            f"credit {format_amount(issue.total_credit)} | difference {format_amount(issue.difference)}"
        )
    ctx.exit(1)


@reconcile_group.command("summary")
@click.pass_context
def summary(ctx):
    """Compare bank records with posted vouchers."""
    result = ReconciliationService(ctx.obj["db"]).summary()

    click.echo(f"Matched bank records:   {result.matched_count}")
    click.echo(f"Unmatched bank records: {result.unmatched_bank_count}")
    click.echo(f"Unmatched book records: {result.unmatched_book_count}")
    click.echo(f"Bank total:             {format_amount(result.bank_total)}")
    click.echo(f"Book total:             {format_amount(result.book_total)}")
    click.echo(f"Difference:             {format_amount(result.difference)}")


def register_commands(cli):
    """Register reconciliation commands with main CLI."""
    cli.add_command(reconcile_group, name="reconcile")
