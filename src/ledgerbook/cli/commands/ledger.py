"""General ledger commands."""

import click
from ledgerbook.domain.account import AccountService
from ledgerbook.domain.ledger import LedgerService
from ledgerbook.cli.parsing import format_amount, resolve_account_or_exit


@click.group()
def ledger_group():
    """View the general ledger built from posted vouchers."""
    pass


@ledger_group.command("show")
@click.argument("account", metavar="ACCOUNT")
@click.pass_context
def show_ledger(ctx, account: str):
    """Show the running balance of an account.

    ACCOUNT can be an account code or ID.

    Examples:
        ledgerbook ledger show 1001
    """
    db = ctx.obj["db"]
    account_obj = resolve_account_or_exit(ctx, AccountService(db), account)

    click.echo(f"\nLedger {account_obj.code} {account_obj.name} ({account_obj.type.value})")
    click.echo("-" * 96)
    click.echo(f"{'Date':<10} {'Voucher':<12} {'Description':<28} {'Debit':>14} {'Credit':>14} {'Balance':>14}")
    click.echo(f"{'':<10} {'':<12} {'Opening balance':<28} {'':>14} {'':>14} {format_amount(account_obj.balance):>14}")
    for row in LedgerService(db).account_ledger(account_obj.id):
        debit = format_amount(row.debit) if row.debit else ""
        credit = format_amount(row.credit) if row.credit else ""
        click.echo(
            f"{row.date.isoformat():<10} {row.voucher_no:<12} {row.description[:28]:<28} "
            f"{debit:>14} {credit:>14} {format_amount(row.running_balance):>14}"
        )


@ledger_group.command("trial-balance")
@click.pass_context
def trial_balance(ctx):
    """Show debit and credit totals per account."""
    result = LedgerService(ctx.obj["db"]).trial_balance()
    if not result.rows:
        click.echo("No accounts found.")
        return

    click.echo("\nTrial Balance:")
    click.echo("-" * 96)
    click.echo(f"{'Code':<8} {'Name':<24} {'Opening':>14} {'Debit':>14} {'Credit':>14} {'Closing':>14}")
    for row in result.rows:
        click.echo(
            f"{row.code:<8} {row.name[:24]:<24} {format_amount(row.opening_balance):>14} "
            f"{format_amount(row.debit):>14} {format_amount(row.credit):>14} "
            f"{format_amount(row.closing_balance):>14}"
        )
    click.echo("=" * 96)
    click.echo(
        f"{'Total':<8} {'':<24} {'':>14} {format_amount(result.total_debit):>14} "
        f"{format_amount(result.total_credit):>14}"
    )
    if not result.balanced:
        click.echo("Warning: debits and credits do not balance", err=True)


def register_commands(cli):
    """Register ledger commands with main CLI."""
    cli.add_command(ledger_group, name="ledger")
