"""Bank statement commands."""

import click
from ledgerit.cli.account_resolution import resolve_account_or_exit
from ledgerit.cli.error_handling import format_id, handle_domain_error
from ledgerit.domain.account import AccountService
from ledgerit.domain.statement import StatementService
from ledgerit.utils.amount_parser import format_amount, parse_minor_units
from ledgerit.utils.date_parser import parse_date


@click.group()
def statement_group():
    """Record bank statement lines."""
    pass


@statement_group.command("add")
@click.option("--account", required=True, help="Account name or ID")
@click.option("--amount", required=True, help="Amount as printed by the bank (e.g., 123.45 or -123.45)")
@click.option("--description", help="Statement description")
@click.option("--date", "entry_date", help="Value date (YYYY-MM-DD or relative like 'today', 'yesterday')")
@click.pass_context
def add_line(ctx, account: str, amount: str, description: str | None, entry_date: str | None):
    """Add one statement line.

    Examples:
        ledgerit statement add --account 100 --amount 50.00 --description "Deposit" --date today
    """
    db = ctx.obj["db"]
    account_id = resolve_account_or_exit(ctx, AccountService(db), account)
    try:
        parsed_date = parse_date(entry_date) if entry_date else None
        line = StatementService(db).add_entry(
            account_id, parse_minor_units(amount), description, parsed_date
        )
        click.echo(f"Added statement line {line.id} to account {format_id(account_id)}")
    except ValueError as e:
        handle_domain_error(ctx, e)


@statement_group.command("import")
@click.argument("csv_file", type=click.Path(exists=True))
@click.option("--account", required=True, help="Account name or ID")
@click.option("--amount-column", default="Amount", show_default=True, help="Header of the amount column")
@click.option("--description-column", default="Description", show_default=True, help="Header of the description column")
@click.option("--date-column", default="Date", show_default=True, help="Header of the date column")
@click.option("--dayfirst", is_flag=True, help="Read dates like 03/04/2024 as day/month")
@click.pass_context
def import_lines(
    ctx,
    csv_file: str,
    account: str,
    amount_column: str,
    description_column: str,
    date_column: str,
    dayfirst: bool,
):
    """Import statement lines from a CSV file.

    Examples:
        ledgerit statement import statement.csv --account 100
        ledgerit statement import export.csv --account Cash --amount-column Value --dayfirst
    """
    db = ctx.obj["db"]
    account_id = resolve_account_or_exit(ctx, AccountService(db), account)
    try:
        result = StatementService(db).import_csv(
            csv_file,
            account_id,
            amount_column=amount_column,
            narrative_column=description_column,
            date_column=date_column,
            dayfirst=dayfirst,
        )
    except (ValueError, FileNotFoundError) as e:
        handle_domain_error(ctx, e)
        return

    click.echo(f"Imported {len(result.imported)} statement lines")
    if result.errors:
        click.echo(f"{len(result.errors)} rows skipped:", err=True)
        for message in result.errors:
            click.echo(f"  {message}", err=True)


@statement_group.command("list")
@click.argument("account", metavar="ACCOUNT")
@click.pass_context
def list_lines(ctx, account: str):
    """List an account's statement lines."""
    db = ctx.obj["db"]
    account_id = resolve_account_or_exit(ctx, AccountService(db), account)
    lines = StatementService(db).list_entries(account_id)
    if not lines:
        click.echo("No statement lines found.")
        return
    for line in lines:
        when = line.date.isoformat() if line.date else "----------"
        click.echo(
            f"{line.id:6d} | {when} | {line.unstructured_narrative[:40]:40s} | "
            f"{format_amount(line.amt):>14s}"
        )


def register_commands(cli):
    """Register statement commands with main CLI."""
    cli.add_command(statement_group, name="statement")
