"""Journal posting commands."""

import click
from ledgerit.cli.account_resolution import resolve_account_or_exit
from ledgerit.cli.error_handling import format_id, handle_domain_error
from ledgerit.domain.account import AccountService
from ledgerit.domain.entities import EntryLine, PostedJournal
from ledgerit.domain.journal import JournalService
from ledgerit.utils.amount_parser import format_amount, parse_minor_units


def parse_entry_options(ctx, account_service: AccountService, entries: tuple[str, ...]) -> list[EntryLine]:
    """Turn ACCOUNT=AMOUNT options into entry lines, exiting on bad input."""
    lines = []
    for raw in entries:
        account, sep, amount = raw.rpartition("=")
        if not sep or not account.strip():
            click.echo(f"Error: Entry '{raw}' must be written as ACCOUNT=AMOUNT", err=True)
            ctx.exit(1)
        account_id = resolve_account_or_exit(ctx, account_service, account)
        try:
            lines.append(EntryLine(account_id=account_id, amount=parse_minor_units(amount)))
        except ValueError as e:
            handle_domain_error(ctx, e)
    return lines


def echo_journal(posted: PostedJournal, account_service: AccountService) -> None:
    """Print a journal and its entries."""
    journal = posted.journal
    batch = format_id(journal.batch_id) if journal.batch_id is not None else "-"
    click.echo(f"Journal {format_id(journal.id)}  (batch {batch})")
    if journal.unstructured_narrative:
        click.echo(f"  {journal.unstructured_narrative}")
    for entry in posted.entries:
        account = account_service.find_account(entry.account_id)
        name = account.name if account else "?"
        debit = format_amount(entry.amount) if entry.amount > 0 else ""
        credit = format_amount(-entry.amount) if entry.amount < 0 else ""
        click.echo(f"  {format_id(entry.account_id)} {name[:30]:30s} {debit:>14s} {credit:>14s}")


@click.group()
def journal_group():
    """Post and inspect journals."""
    pass


@journal_group.command("post")
@click.option(
    "--entry",
    "entries",
    multiple=True,
    required=True,
    help="Entry as ACCOUNT=AMOUNT; positive debits, negative credits (repeatable)",
)
@click.option("--narrative", "-n", help="Journal narrative")
@click.option("--batch", "batch_id", type=int, help="Post into an existing batch")
@click.pass_context
def post_journal(ctx, entries: tuple[str, ...], narrative: str | None, batch_id: int | None):
    """Post a balanced journal.

    Amounts are in major units and must sum to zero.

    Examples:
        ledgerit journal post --entry 100=50.00 --entry Sales=-50.00 -n "Cash sale"
        ledgerit journal post --entry 500=12.30 --entry 200=-12.30 --batch 1
    """
    db = ctx.obj["db"]
    account_service = AccountService(db)
    service = JournalService(db)

    lines = parse_entry_options(ctx, account_service, entries)
    try:
        posted = service.post(narrative, lines, batch_id=batch_id)
        click.echo(f"Posted journal {format_id(posted.id)} with {len(posted.entries)} entries")
    except ValueError as e:
        handle_domain_error(ctx, e)


@journal_group.command("show")
@click.argument("journal_id", type=int)
@click.pass_context
def show_journal(ctx, journal_id: int):
    """Show a journal and its entries."""
    db = ctx.obj["db"]
    try:
        posted = JournalService(db).get_journal(journal_id)
        echo_journal(posted, AccountService(db))
    except ValueError as e:
        handle_domain_error(ctx, e)


@journal_group.command("reverse")
@click.argument("journal_id", type=int)
@click.option("--narrative", "-n", help="Narrative for the reversing journal")
@click.pass_context
def reverse_journal(ctx, journal_id: int, narrative: str | None):
    """Post a journal cancelling JOURNAL_ID."""
    db = ctx.obj["db"]
    try:
        reversal = JournalService(db).reverse(journal_id, narrative=narrative)
        click.echo(f"Posted journal {format_id(reversal.id)} reversing {format_id(journal_id)}")
    except ValueError as e:
        handle_domain_error(ctx, e)


def register_commands(cli):
    """Register journal commands with main CLI."""
    cli.add_command(journal_group, name="journal")
