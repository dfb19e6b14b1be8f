"""Settings commands."""

import click
from ledgerit.domain.ledger import LedgerService


@click.group()
def settings_group():
    """View and change settings."""
    pass


@settings_group.command("entity-name")
@click.argument("name", required=False)
@click.pass_context
def entity_name(ctx, name: str | None):
    """Show or set the entity name printed on reports."""
    db = ctx.obj["db"]
    service = LedgerService(db)
    if name is None:
        click.echo(service.entity_name() or "(not set)")
        return
    service.set_entity_name(name)
    click.echo(f"Entity name set to '{name}'")


def register_commands(cli):
    """Register settings commands with main CLI."""
    cli.add_command(settings_group, name="settings")
