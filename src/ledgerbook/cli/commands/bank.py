"""Bank statement record commands."""

import click
from ledgerbook.domain.entities import Direction
from ledgerbook.domain.errors import DomainError
from ledgerbook.domain.reconciliation import ReconciliationService
from ledgerbook.cli.error_handling import handle_domain_error
from ledgerbook.cli.parsing import format_amount, parse_amount_or_exit, parse_date_or_exit


@click.group()
def bank_group():
    """Manage bank statement records."""
    pass


@bank_group.command("add")
@click.option("--date", "record_date", default="today", show_default=True, help="Statement date")
@click.option("--description", required=True, help="Statement text")
@click.option("--amount", required=True, help="Amount (not negative)")
@click.option("--type", "direction", type=click.Choice([d.value for d in Direction]), required=True, help="Money in or out")
@click.pass_context
def add_record(ctx, record_date: str, description: str, amount: str, direction: str):
    """Add a bank statement record.

    Examples:
        ledgerbook bank add --date 2024-03-05 --description "Customer payment" --amount 1000 --type income
    """
    service = ReconciliationService(ctx.obj["db"])
    parsed_date = parse_date_or_exit(ctx, record_date)
    parsed_amount = parse_amount_or_exit(ctx, amount)

    try:
        record = service.create_bank_record(parsed_date, description, parsed_amount, direction)
        click.echo(f"Added bank record {record.id}")
    except DomainError as e:
        handle_domain_error(ctx, e)


@bank_group.command("list")
@click.option("--unmatched", is_flag=True, help="Show only unmatched records")
@click.pass_context
def list_records(ctx, unmatched: bool):
    """List bank records, newest first."""
    service = ReconciliationService(ctx.obj["db"])

    records = service.list_bank_records(matched=False if unmatched else None)
    if not records:
        click.echo("No bank records found.")
        return

    click.echo("\nBank records:")
    click.echo("-" * 80)
    for record in records:
        status = f"matched {record.matched_voucher_id}" if record.matched else "unmatched"
        click.echo(
            f"{record.date.isoformat()} | {record.direction.value:<7} | {format_amount(record.amount):>14} | "
            f"{record.description} | {status} ({record.id})"
        )


@bank_group.command("match")
@click.argument("record_id", metavar="RECORD")
@click.argument("voucher_id", metavar="VOUCHER")
@click.pass_context
def match_record(ctx, record_id: str, voucher_id: str):
    """Match a bank record to a posted voucher."""
    service = ReconciliationService(ctx.obj["db"])
    try:
        service.match(record_id, voucher_id)
        click.echo(f"Matched bank record {record_id} to voucher {voucher_id}")
    except DomainError as e:
        handle_domain_error(ctx, e)


@bank_group.command("unmatch")
@click.argument("record_id", metavar="RECORD")
@click.pass_context
def unmatch_record(ctx, record_id: str):
    """Clear a bank record's match."""
    service = ReconciliationService(ctx.obj["db"])
    try:
        service.unmatch(record_id)
        click.echo(f"Unmatched bank record {record_id}")
    except DomainError as e:
        handle_domain_error(ctx, e)


@bank_group.command("delete")
@click.argument("record_id", metavar="RECORD")
@click.pass_context
def delete_record(ctx, record_id: str):
    """Delete an unmatched bank record."""
    service = ReconciliationService(ctx.obj["db"])
    try:
        service.delete_bank_record(record_id)
        click.echo(f"Deleted bank record {record_id}")
    except DomainError as e:
        handle_domain_error(ctx, e)


def register_commands(cli):
    """Register bank commands with main CLI."""
    cli.add_command(bank_group, name="bank")
