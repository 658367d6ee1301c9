"""CLI error handling helpers."""

import click

from ptaquery.domain.errors import DomainError, LedgerError


def format_domain_error(error: DomainError) -> str:
    """Render a domain error, with the offending ledger text when known."""
    message = f"Error: {error}"
    if isinstance(error, LedgerError) and error.source:
        excerpt = "\n".join(f"  | {line}" for line in error.source.splitlines())
        message = f"{message}\n{excerpt}"
    return message


def handle_domain_error(ctx: click.Context, error: DomainError) -> None:
    """Render a domain error and exit with failure."""
    click.echo(format_domain_error(error), err=True)
    ctx.exit(1)
