"""Reconcile command."""

import click
from ledgerit.cli.account_resolution import resolve_account_or_exit
from ledgerit.cli.error_handling import format_id, handle_domain_error
from ledgerit.domain.account import AccountService
from ledgerit.domain.reconciliation import DEFAULT_DATE_WINDOW_DAYS, ReconciliationService
from ledgerit.utils.amount_parser import format_amount


def _describe_line(line) -> str:
    when = line.date.isoformat() if line.date else "----------"
    return f"line {line.id} {when} {format_amount(line.amt):>12s} {line.unstructured_narrative}"


def _describe_entry(entry) -> str:
    when = entry.date.isoformat() if entry.date else "----------"
    return (
        f"journal {format_id(entry.journal_id)} {when} "
        f"{format_amount(entry.amount):>12s} {entry.unstructured_narrative}"
    )


@click.command("reconcile")
@click.argument("account", metavar="ACCOUNT")
@click.option("--invert-sign", is_flag=True, help="Negate statement amounts before matching")
@click.option(
    "--window",
    "date_window_days",
    type=int,
    default=DEFAULT_DATE_WINDOW_DAYS,
    show_default=True,
    help="Largest date distance in days between a line and its entry",
)
@click.pass_context
def reconcile(ctx, account: str, invert_sign: bool, date_window_days: int):
    """Match an account's statement lines to its ledger entries.

    Nothing is stored; running it again gives the same report.

    Examples:
        ledgerit reconcile 100
        ledgerit reconcile "Credit card" --invert-sign --window 3
    """
    db = ctx.obj["db"]
    account_id = resolve_account_or_exit(ctx, AccountService(db), account)
    try:
        report = ReconciliationService(db).reconcile(
            account_id, invert_sign=invert_sign, date_window_days=date_window_days
        )
    except ValueError as e:
        handle_domain_error(ctx, e)
        return

    click.echo(f"Reconciliation of account {format_id(account_id)}")
    click.echo(f"Matched: {len(report.matches)}")
    for match in report.matches:
        click.echo(f"  {_describe_line(match.statement_entry)}")
        click.echo(f"    -> {_describe_entry(match.entry)}")

    if report.ambiguous:
        click.echo(f"\nAmbiguous: {len(report.ambiguous)}")
        for item in report.ambiguous:
            click.echo(f"  {_describe_line(item.statement_entry)}")
            for candidate in item.candidates:
                click.echo(f"    ?  {_describe_entry(candidate)}")

    if report.unmatched_statement_entries:
        click.echo(f"\nStatement lines without an entry: {len(report.unmatched_statement_entries)}")
        for line in report.unmatched_statement_entries:
            click.echo(f"  {_describe_line(line)}")

    if report.unmatched_entries:
        click.echo(f"\nEntries not on the statement: {len(report.unmatched_entries)}")
        for entry in report.unmatched_entries:
            click.echo(f"  {_describe_entry(entry)}")

    click.echo("\nReconciled." if report.is_reconciled else "\nNot reconciled.")


def register_commands(cli):
    """Register reconcile command with main CLI."""
    cli.add_command(reconcile)
