"""Main CLI entry point."""

import click
from ledgerit.database.factories import create_sqlite_database
from ledgerit.logging_config import DEFAULT_LEVEL, configure_logging

# Import and register all commands at module level
from ledgerit.cli.commands import (
    account,
    batch,
    journal,
    ledger,
    reconcile,
    report,
    settings,
    statement,
)


@click.group()
@click.option(
    "--db-path",
    type=click.Path(),
    help="Path to database file (overrides LEDGERIT_DB_PATH environment variable)",
    envvar="LEDGERIT_DB_PATH",
)
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    default=DEFAULT_LEVEL,
    show_default=True,
    help="Logging level (overrides LEDGERIT_LOG_LEVEL environment variable)",
    envvar="LEDGERIT_LOG_LEVEL",
)
@click.pass_context
def cli(ctx, db_path: str | None, log_level: str):
    """Ledgerit - Double-entry ledger.

    Post balanced journals against a numbered chart of accounts, read
    balances and reconcile bank statements.
    """
    ctx.ensure_object(dict)
    configure_logging(log_level)

    # Initialize database connection only when actually running a command
    # (not when showing help)
    if ctx.invoked_subcommand is not None:
        db = create_sqlite_database(database_path=db_path)
        db.connect()
        db.initialize_schema()
        ctx.obj["db"] = db
        ctx.call_on_close(db.disconnect)


# Register all commands
account.register_commands(cli)
journal.register_commands(cli)
batch.register_commands(cli)
ledger.register_commands(cli)
statement.register_commands(cli)
reconcile.register_commands(cli)
report.register_commands(cli)
settings.register_commands(cli)


def main():
    """Main entry point for CLI."""
    cli()


if __name__ == "__main__":
    main()
