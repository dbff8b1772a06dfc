"""CLI helpers for resolving accounts and parsing typed-in values."""

from __future__ import annotations

from datetime import date

import click

from ledgerbook.domain.account import AccountService
from ledgerbook.domain.entities import Account, EntryLine
from ledgerbook.domain.errors import DomainError
from ledgerbook.domain.voucher import make_line
from ledgerbook.utils.account_resolver import resolve_account
from ledgerbook.utils.amount_parser import parse_amount
from ledgerbook.utils.date_parser import parse_date
from ledgerbook.cli.error_handling import handle_domain_error


def resolve_account_or_exit(ctx: click.Context, account_service: AccountService, account: str) -> Account:
    """Resolve an account id or code, or exit with a CLI error."""
    try:
        return resolve_account(account_service, account)
    except DomainError as exc:
        handle_domain_error(ctx, exc)


def parse_date_or_exit(ctx: click.Context, value: str) -> date:
    try:
        return parse_date(value)
    except ValueError as exc:
        click.echo(f"Error: Invalid date format: {exc}", err=True)
        ctx.exit(1)


def parse_amount_or_exit(ctx: click.Context, value: str):
    try:
        return parse_amount(value)
    except ValueError as exc:
        click.echo(f"Error: Invalid amount format: {exc}", err=True)
        ctx.exit(1)


def parse_line_spec(spec: str) -> EntryLine:
    """Parse ``ACCOUNT:SIDE:AMOUNT[:MEMO]`` into an entry line.

    SIDE accepts debit/credit or the short forms d/c (or dr/cr).

    Raises:
        ValueError: If the line is malformed
    """
    parts = spec.split(":", 3)
    if len(parts) < 3:
        raise ValueError(f"Invalid line '{spec}' (expected ACCOUNT:SIDE:AMOUNT[:MEMO])")
    account, side, amount = (p.strip() for p in parts[:3])
    memo = parts[3].strip() if len(parts) == 4 else ""
    side = {"d": "debit", "dr": "debit", "c": "credit", "cr": "credit"}.get(side.lower(), side)
    return make_line(account, side, parse_amount(amount), memo)


def format_amount(amount) -> str:
    return f"{amount:,.2f}"
