"""CLI error handling helpers."""

import click

from ledgerit.domain.errors import DomainError


def handle_domain_error(ctx: click.Context, error: DomainError | ValueError) -> None:
    """Render a domain error and exit with failure."""
    click.echo(f"Error: {error}", err=True)
    ctx.exit(1)


def format_id(value: int) -> str:
    """Render an account, journal or batch ID the way reports show it."""
    return f"{value:08d}"
