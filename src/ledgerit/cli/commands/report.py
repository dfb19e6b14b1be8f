"""Report commands."""

import click
from ledgerit.cli.error_handling import format_id
from ledgerit.domain.ledger import LedgerService
from ledgerit.utils.amount_parser import format_amount


@click.group()
def report_group():
    """Produce financial reports."""
    pass


def _echo_section(title: str, items) -> None:
    click.echo(f"\n{title}")
    for item in items:
        if item.account.confidential:
            name = "(confidential)"
        else:
            name = item.account.name
        click.echo(f"  {format_id(item.account.id)} {name[:30]:30s} {format_amount(item.balance):>14s}")
    total = sum(item.balance for item in items)
    click.echo(f"  {'Total':39s} {format_amount(total):>14s}")


@report_group.command("balance-sheet")
@click.pass_context
def balance_sheet(ctx):
    """Show cash, current assets, current liabilities and net assets."""
    db = ctx.obj["db"]
    sheet = LedgerService(db).balance_sheet()

    click.echo(sheet.entity_name or "Balance sheet")
    click.echo("=" * 56)
    _echo_section("Cash", sheet.cash)
    _echo_section("Other current assets", sheet.current_assets)
    click.echo(f"{'Total current assets':41s} {format_amount(sheet.total_current_assets):>14s}")
    _echo_section("Current liabilities", sheet.current_liabilities)
    click.echo("=" * 56)
    click.echo(f"{'Net current assets':41s} {format_amount(sheet.net_assets):>14s}")


def register_commands(cli):
    """Register report commands with main CLI."""
    cli.add_command(report_group, name="report")
