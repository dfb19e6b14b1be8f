"""Ledger reading commands."""

import click
from ledgerit.cli.account_resolution import resolve_account_or_exit
from ledgerit.cli.error_handling import format_id
from ledgerit.domain.account import AccountService
from ledgerit.domain.ledger import LedgerService
from ledgerit.utils.amount_parser import format_amount


@click.group()
def ledger_group():
    """Read balances and entry histories."""
    pass


@ledger_group.command("balance")
@click.argument("account", metavar="ACCOUNT")
@click.option("--as-of", type=int, help="Only count journals up to and including this journal ID")
@click.pass_context
def balance(ctx, account: str, as_of: int | None):
    """Show an account's balance.

    ACCOUNT can be an account name or ID.
    """
    db = ctx.obj["db"]
    account_id = resolve_account_or_exit(ctx, AccountService(db), account)
    amount = LedgerService(db).balance(account_id, as_of=as_of)
    click.echo(f"{format_id(account_id)} {format_amount(amount)}")


@ledger_group.command("entries")
@click.argument("account", metavar="ACCOUNT")
@click.option("--after", type=int, help="Only journals after this journal ID")
@click.option("--until", type=int, help="Only journals up to and including this journal ID")
@click.option("--limit", type=int, help="Maximum number of entries to show")
@click.pass_context
def entries(ctx, account: str, after: int | None, until: int | None, limit: int | None):
    """List an account's entries in journal order with a running balance."""
    db = ctx.obj["db"]
    account_id = resolve_account_or_exit(ctx, AccountService(db), account)
    history = LedgerService(db).entries(account_id, after=after, until=until)

    running = LedgerService(db).balance(account_id, as_of=after) if after is not None else 0
    shown = 0
    for item in history:
        if limit is not None and shown >= limit:
            break
        running += item.amount
        when = item.date.isoformat() if item.date else "----------"
        click.echo(
            f"{format_id(item.journal_id)} | {when} | {item.unstructured_narrative[:40]:40s} | "
            f"{format_amount(item.amount):>14s} | {format_amount(running):>14s}"
        )
        shown += 1

    if shown == 0:
        click.echo("No entries found.")


def register_commands(cli):
    """Register ledger commands with main CLI."""
    cli.add_command(ledger_group, name="ledger")
