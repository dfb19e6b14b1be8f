"""Batch commands."""

import click
from ledgerit.cli.commands.journal import echo_journal
from ledgerit.cli.error_handling import format_id, handle_domain_error
from ledgerit.domain.account import AccountService
from ledgerit.domain.journal import JournalService
from ledgerit.utils.date_parser import parse_date


@click.group()
def batch_group():
    """Create and inspect journal batches."""
    pass


@batch_group.command("create")
@click.option("--date", "batch_date", help="Batch date (YYYY-MM-DD or relative like 'today'); default today")
@click.pass_context
def create_batch(ctx, batch_date: str | None):
    """Create an empty batch to post journals into.

    Examples:
        ledgerit batch create
        ledgerit batch create --date 2024-03-31
    """
    db = ctx.obj["db"]
    try:
        parsed = parse_date(batch_date) if batch_date else None
        batch = JournalService(db).create_batch(parsed)
        click.echo(f"Created batch {format_id(batch.id)} dated {batch.date.isoformat()}")
    except ValueError as e:
        handle_domain_error(ctx, e)


@batch_group.command("show")
@click.argument("batch_id", type=int)
@click.pass_context
def show_batch(ctx, batch_id: int):
    """Show a batch and its journals."""
    db = ctx.obj["db"]
    service = JournalService(db)
    try:
        batch = service.get_batch(batch_id)
        journals = service.list_batch_journals(batch_id)
    except ValueError as e:
        handle_domain_error(ctx, e)
        return

    click.echo(f"Batch {format_id(batch.id)} dated {batch.date.isoformat()}")
    if not journals:
        click.echo("No journals in batch.")
        return
    account_service = AccountService(db)
    for posted in journals:
        click.echo("")
        echo_journal(posted, account_service)


def register_commands(cli):
    """Register batch commands with main CLI."""
    cli.add_command(batch_group, name="batch")
