"""Voucher commands."""

import click
from ledgerbook.domain.entities import Voucher, VoucherStatus
from ledgerbook.domain.errors import DomainError
from ledgerbook.domain.voucher import VoucherService
from ledgerbook.cli.error_handling import handle_domain_error
from ledgerbook.cli.parsing import format_amount, parse_date_or_exit, parse_line_spec


@click.group()
def voucher_group():
    """Record and post journal vouchers."""
    pass


def _echo_voucher_row(voucher: Voucher) -> None:
    click.echo(
        f"{voucher.date.isoformat()} | {voucher.voucher_no:<12} | {voucher.status.value:<7} | "
        f"{format_amount(voucher.amount):>14} | {voucher.description} ({voucher.id})"
    )


@voucher_group.command("create")
@click.argument("voucher_no", metavar="NUMBER")
@click.option("--date", "voucher_date", default="today", show_default=True, help="Voucher date (YYYY-MM-DD or relative like 'today')")
@click.option(
    "--line",
    "line_specs",
    multiple=True,
    required=True,
    help="Entry line as ACCOUNT:SIDE:AMOUNT[:MEMO], e.g. 1001:debit:1000",
)
@click.option("--description", default="", help="Voucher description")
@click.pass_context
def create_voucher(ctx, voucher_no: str, voucher_date: str, line_specs: tuple[str, ...], description: str):
    """Create a pending voucher.

    ACCOUNT in --line is an account code. The debits and credits must
    balance and be greater than zero.

    Examples:
        ledgerbook voucher create V001 --line 1001:debit:1000 --line 6001:credit:1000
        ledgerbook voucher create V002 --date 2024-03-01 --description "Rent" \\
            --line 6602:d:3000:March --line 1002:c:3000
    """
    service = VoucherService(ctx.obj["db"])
    parsed_date = parse_date_or_exit(ctx, voucher_date)

    try:
        lines = [parse_line_spec(spec) for spec in line_specs]
        voucher = service.create_voucher(
            voucher_no=voucher_no,
            date=parsed_date,
            lines=lines,
            description=description,
        )
        click.echo(f"Created voucher {voucher.voucher_no} (ID: {voucher.id}), status {voucher.status.value}")
    except ValueError as e:
        handle_domain_error(ctx, e)


@voucher_group.command("list")
@click.option("--status", type=click.Choice([s.value for s in VoucherStatus]), help="Filter by status")
@click.pass_context
def list_vouchers(ctx, status: str | None):
    """List vouchers, newest first."""
    service = VoucherService(ctx.obj["db"])

    vouchers = service.list_vouchers(status=status)
    if not vouchers:
        click.echo("No vouchers found.")
        return

    click.echo("\nVouchers:")
    click.echo("-" * 80)
    for voucher in vouchers:
        _echo_voucher_row(voucher)


@voucher_group.command("show")
@click.argument("voucher_id", metavar="ID")
@click.pass_context
def show_voucher(ctx, voucher_id: str):
    """Show a voucher with its entry lines."""
    service = VoucherService(ctx.obj["db"])

    try:
        voucher = service.require_voucher(voucher_id)
    except DomainError as e:
        handle_domain_error(ctx, e)

    click.echo(f"Voucher {voucher.voucher_no} ({voucher.id})")
    click.echo(f"Date:        {voucher.date.isoformat()}")
    click.echo(f"Status:      {voucher.status.value}")
    click.echo(f"Description: {voucher.description}")
    click.echo("-" * 60)
    for line in voucher.lines:
        debit = format_amount(line.amount) if line.side.value == "debit" else ""
        credit = format_amount(line.amount) if line.side.value == "credit" else ""
        click.echo(f"{line.account:<8} {debit:>14} {credit:>14}  {line.memo}")
    click.echo("-" * 60)
    click.echo(f"{'Total':<8} {format_amount(voucher.total_debit):>14} {format_amount(voucher.total_credit):>14}")


@voucher_group.command("post")
@click.argument("voucher_ids", metavar="ID...", nargs=-1, required=True)
@click.pass_context
def post_vouchers(ctx, voucher_ids: tuple[str, ...]):
    """Post one or more vouchers.

    All vouchers are posted together or not at all.
    """
    service = VoucherService(ctx.obj["db"])

    try:
        result = service.post_batch(voucher_ids)
    except DomainError as e:
        handle_domain_error(ctx, e)

    click.echo(f"Posted {len(result.posted)} voucher(s)")
    if result.already_posted:
        click.echo(f"{len(result.already_posted)} voucher(s) were already posted")


@voucher_group.command("post-all")
@click.pass_context
def post_all(ctx):
    """Post every pending voucher."""
    service = VoucherService(ctx.obj["db"])

    try:
        result = service.post_all_pending()
    except DomainError as e:
        handle_domain_error(ctx, e)

    click.echo(f"Posted {len(result.posted)} voucher(s)")


def register_commands(cli):
    """Register voucher commands with main CLI."""
    cli.add_command(voucher_group, name="voucher")
