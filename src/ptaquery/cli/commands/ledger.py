"""Ledger inspection commands."""

import click

from ptaquery.cli.error_handling import handle_domain_error
from ptaquery.domain.balance import BalanceService
from ptaquery.domain.errors import DomainError
from ptaquery.utils.account_path import normalize_path, split_path


@click.command("check")
@click.pass_context
def check(ctx):
    """Parse the ledger and report whether every transaction balances."""
    service = BalanceService(ctx.obj["source"])
    try:
        index = service.load_index()
    except DomainError as e:
        handle_domain_error(ctx, e)
        return

    click.echo(
        f"Ledger OK: {len(index.transactions)} transaction(s), "
        f"{len(index)} account(s) in {service.source.describe()}"
    )


@click.command("accounts")
@click.argument("root", required=False)
@click.pass_context
def accounts(ctx, root: str | None):
    """List accounts as a tree, optionally only below ROOT."""
    if root is not None:
        try:
            root = normalize_path(root)
        except ValueError as e:
            click.echo(f"Error: {e}", err=True)
            ctx.exit(1)

    service = BalanceService(ctx.obj["source"])
    try:
        index = service.load_index()
    except DomainError as e:
        handle_domain_error(ctx, e)
        return

    paths = index.accounts(root=root)
    if not paths:
        click.echo("No accounts found.")
        return

    for path in paths:
        segments = split_path(path)
        click.echo(f"{'  ' * (len(segments) - 1)}{segments[-1]}")


def register_commands(cli):
    """Register ledger commands with main CLI."""
    cli.add_command(check)
    cli.add_command(accounts)
