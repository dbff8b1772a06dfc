"""Main CLI entry point."""

import click
from ledgerbook.database.factories import create_sqlite_database
from ledgerbook.logging_config import setup_logging

# Import and register all commands at module level
from ledgerbook.cli.commands import (
    account,
    voucher,
    ledger,
    reconcile,
    bank,
    period,
    serve,
)


@click.group()
@click.option(
    "--db-path",
    type=click.Path(),
    help="Path to database file (overrides LEDGERBOOK_DB_PATH environment variable)",
    envvar="LEDGERBOOK_DB_PATH",
)
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    help="Log level (overrides LEDGERBOOK_LOG_LEVEL environment variable)",
)
@click.pass_context
def cli(ctx, db_path: str | None, log_level: str | None):
    """Ledgerbook - Double-entry bookkeeping for small businesses.

    Keep a chart of accounts, record balanced vouchers, post them to the
    ledger and reconcile the books against the bank statement.
    """
    ctx.ensure_object(dict)
    setup_logging(log_level)
    ctx.obj["db_path"] = db_path

    # Initialize database connection only when actually running a command
    # (not when showing help); serve opens its own per-request sessions
    if ctx.invoked_subcommand not in (None, "serve"):
        db = create_sqlite_database(database_path=db_path)
        db.connect()
        db.initialize_schema()
        ctx.obj["db"] = db
        ctx.call_on_close(db.disconnect)


# Register all commands
account.register_commands(cli)
voucher.register_commands(cli)
ledger.register_commands(cli)
reconcile.register_commands(cli)
bank.register_commands(cli)
period.register_commands(cli)
serve.register_commands(cli)


def main():
    """Main entry point for CLI."""
    cli()


if __name__ == "__main__":
    main()
