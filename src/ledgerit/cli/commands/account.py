"""Account management commands."""

import click
from ledgerit.cli.account_resolution import resolve_account_or_exit
from ledgerit.cli.error_handling import format_id, handle_domain_error
from ledgerit.domain.account import AccountService
from ledgerit.domain.ledger import LedgerService
from ledgerit.utils.amount_parser import format_amount


@click.group()
def account_group():
    """Manage accounts."""
    pass


@account_group.command("create")
@click.argument("account_type", metavar="TYPE")
@click.argument("name", metavar="ACCOUNT_NAME")
@click.option("--id", "account_id", type=int, help="Explicit account ID within the type's range")
@click.pass_context
def create_account(ctx, account_type: str, name: str, account_id: int | None):
    """Create a new account.

    TYPE is one of: Cash, CurrentAsset, NonCurrentAsset, CurrentLiability,
    NonCurrentLiability, Equity, Revenue, OtherIncome, Expense. The ID is
    taken from the type's range unless --id is given.

    Examples:
        ledgerit account create Expense "Office supplies"
        ledgerit account create CurrentLiability "Credit card" --id 210
    """
    db = ctx.obj["db"]
    service = AccountService(db)

    try:
        account = service.create_account(account_type, name, account_id=account_id)
        click.echo(f"Created account '{account.name}' (ID: {format_id(account.id)})")
    except ValueError as e:
        handle_domain_error(ctx, e)


@account_group.command("list")
@click.option("--all", "include_archived", is_flag=True, help="Include archived accounts")
@click.pass_context
def list_accounts(ctx, include_archived: bool):
    """List accounts with their balances."""
    db = ctx.obj["db"]
    balances = LedgerService(db).account_balances(include_archived=include_archived)
    if not balances:
        click.echo("No accounts found.")
        return

    click.echo("\nAccounts:")
    click.echo("-" * 78)
    for item in balances:
        acc = item.account
        flags = []
        if acc.archived:
            flags.append("archived")
        if acc.confidential:
            flags.append("confidential")
        suffix = f"  [{', '.join(flags)}]" if flags else ""
        click.echo(
            f"{format_id(acc.id)} | {acc.name[:30]:30s} | {acc.type.value:19s} | "
            f"{format_amount(item.balance):>14s}{suffix}"
        )


@account_group.command("show")
@click.argument("account", metavar="ACCOUNT")
@click.pass_context
def show_account(ctx, account: str):
    """Show an account's debit and credit totals.

    ACCOUNT can be an account name or ID.
    """
    db = ctx.obj["db"]
    account_id = resolve_account_or_exit(ctx, AccountService(db), account)
    detail = LedgerService(db).account_detail(account_id)

    click.echo(f"Account:  {format_id(detail.account.id)} {detail.account.name}")
    click.echo(f"Type:     {detail.account.type.value}")
    click.echo(f"Archived: {'yes' if detail.account.archived else 'no'}")
    click.echo(f"Debits:   {format_amount(detail.total_debits)}")
    click.echo(f"Credits:  {format_amount(detail.total_credits)}")
    click.echo(f"Balance:  {format_amount(detail.balance)}")


@account_group.command("archive")
@click.argument("account", metavar="ACCOUNT")
@click.pass_context
def archive_account(ctx, account: str):
    """Archive an account. It keeps its history and can still be posted to."""
    db = ctx.obj["db"]
    service = AccountService(db)
    account_id = resolve_account_or_exit(ctx, service, account)
    acc = service.archive(account_id)
    click.echo(f"Archived account '{acc.name}' (ID: {format_id(acc.id)})")


@account_group.command("unarchive")
@click.argument("account", metavar="ACCOUNT")
@click.pass_context
def unarchive_account(ctx, account: str):
    """Restore an archived account."""
    db = ctx.obj["db"]
    service = AccountService(db)
    account_id = resolve_account_or_exit(ctx, service, account)
    acc = service.unarchive(account_id)
    click.echo(f"Unarchived account '{acc.name}' (ID: {format_id(acc.id)})")


@account_group.command("confidential")
@click.argument("account", metavar="ACCOUNT")
@click.option("--off", is_flag=True, help="Clear the confidential flag instead of setting it")
@click.pass_context
def confidential_account(ctx, account: str, off: bool):
    """Mark an account confidential."""
    db = ctx.obj["db"]
    service = AccountService(db)
    account_id = resolve_account_or_exit(ctx, service, account)
    acc = service.set_confidential(account_id, confidential=not off)
    state = "confidential" if acc.confidential else "not confidential"
    click.echo(f"Account '{acc.name}' is now {state}")


def register_commands(cli):
    """Register account commands with main CLI."""
    cli.add_command(account_group, name="account")
