"""REST API server command."""

import os

import click
import uvicorn

from ledgerbook.api.app import create_app


@click.command("serve")
@click.option("--host", default=lambda: os.environ.get("LEDGERBOOK_HOST", "127.0.0.1"), help="Bind address [default: 127.0.0.1]")
@click.option("--port", type=int, default=lambda: int(os.environ.get("LEDGERBOOK_PORT", "3001")), help="Bind port [default: 3001]")
@click.pass_context
def serve(ctx, host: str, port: int):
    """Run the REST API server."""
    # Logging is already configured by the command group
    app = create_app(database_path=ctx.obj.get("db_path"), configure_logging=False)
    uvicorn.run(app, host=host, port=port, log_level="info")


def register_commands(cli):
    """Register serve command with main CLI."""
    cli.add_command(serve)
