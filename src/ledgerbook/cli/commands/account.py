"""Chart of accounts commands."""

import click
from ledgerbook.domain.account import AccountService
from ledgerbook.domain.entities import AccountType
from ledgerbook.domain.errors import DomainError
from ledgerbook.cli.error_handling import handle_domain_error
from ledgerbook.cli.parsing import format_amount, parse_amount_or_exit, resolve_account_or_exit

ACCOUNT_TYPES = click.Choice([t.value for t in AccountType], case_sensitive=False)


@click.group()
def account_group():
    """Manage the chart of accounts."""
    pass


@account_group.command("create")
@click.argument("code", metavar="CODE")
@click.argument("name", metavar="NAME")
@click.option("--type", "account_type", type=ACCOUNT_TYPES, required=True, help="Account type")
@click.option("--balance", default="0", show_default=True, help="Opening balance")
@click.pass_context
def create_account(ctx, code: str, name: str, account_type: str, balance: str):
    """Create a new account.

    Examples:
        ledgerbook account create 1001 "Cash" --type asset
        ledgerbook account create 1002 "Bank Deposits" --type asset --balance 50,000
        ledgerbook account create 6001 "Sales Revenue" --type income
    """
    service = AccountService(ctx.obj["db"])
    opening = parse_amount_or_exit(ctx, balance)

    try:
        account = service.create_account(code=code, name=name, type=account_type, opening_balance=opening)
        click.echo(f"Created account {account.code} '{account.name}' (ID: {account.id})")
    except DomainError as e:
        handle_domain_error(ctx, e)


@account_group.command("list")
@click.pass_context
def list_accounts(ctx):
    """List all accounts ordered by code."""
    service = AccountService(ctx.obj["db"])

    accounts = service.list_accounts()
    if not accounts:
        click.echo("No accounts found.")
        return

    click.echo("\nAccounts:")
    click.echo("-" * 80)
    for acc in accounts:
        click.echo(
            f"{acc.code:<8} | {acc.name:<28} | {acc.type.value:<9} | "
            f"{format_amount(acc.balance):>14} | {acc.id}"
        )


@account_group.command("update")
@click.argument("account", metavar="ACCOUNT")
@click.option("--code", help="New account code")
@click.option("--name", help="New account name")
@click.option("--type", "account_type", type=ACCOUNT_TYPES, help="New account type")
@click.option("--balance", help="New opening balance")
@click.pass_context
def update_account(
    ctx,
    account: str,
    code: str | None,
    name: str | None,
    account_type: str | None,
    balance: str | None,
) -> None:
    """Update an account.

    ACCOUNT can be an account code or ID. Only the given fields change.
    The code cannot change while vouchers use it.

    Examples:
        ledgerbook account update 1001 --name "Petty Cash"
        ledgerbook account update 2201 --balance 12000
    """
    service = AccountService(ctx.obj["db"])
    account_obj = resolve_account_or_exit(ctx, service, account)
    opening = parse_amount_or_exit(ctx, balance) if balance is not None else None

    try:
        updated = service.update_account(
            account_id=account_obj.id,
            code=code,
            name=name,
            type=account_type,
            balance=opening,
        )
        click.echo(f"Updated account {updated.code} '{updated.name}'")
    except DomainError as e:
        handle_domain_error(ctx, e)


@account_group.command("delete")
@click.argument("account", metavar="ACCOUNT")
@click.option("--yes", is_flag=True, help="Do not ask for confirmation")
@click.pass_context
def delete_account(ctx, account: str, yes: bool) -> None:
    """Delete an account.

    ACCOUNT can be an account code or ID.

    The account can only be deleted if no voucher line uses its code.

    Examples:
        ledgerbook account delete 1001
        ledgerbook account delete 1001 --yes
    """
    service = AccountService(ctx.obj["db"])
    account_obj = resolve_account_or_exit(ctx, service, account)

    if not yes and not click.confirm(
        f"Are you sure you want to delete account {account_obj.code} '{account_obj.name}'?"
    ):
        click.echo("Deletion cancelled.")
        return

    try:
        service.delete_account(account_obj.id)
        click.echo(f"Deleted account {account_obj.code} '{account_obj.name}'")
    except DomainError as e:
        handle_domain_error(ctx, e)


def register_commands(cli):
    """Register account commands with main CLI."""
    cli.add_command(account_group, name="account")
