"""Query language command."""

import click

from ptaquery.cli.error_handling import handle_domain_error
from ptaquery.cli.report_view import echo_report
from ptaquery.domain.balance import BalanceService
from ptaquery.domain.errors import DomainError


@click.command("query")
@click.argument("text", nargs=-1, required=True)
@click.option("--json", "as_json", is_flag=True, help="Print the report as JSON")
@click.pass_context
def query(ctx, text: tuple[str, ...], as_json: bool):
    """Run a query written in the query language.

    Example: ptaquery query balance Expenses from:2023-08-01 to:2023-08-31
    """
    service = BalanceService(ctx.obj["source"])
    try:
        report = service.run_query(" ".join(text))
    except DomainError as e:
        handle_domain_error(ctx, e)
        return

    echo_report(report, as_json=as_json)


def register_commands(cli):
    """Register query command with main CLI."""
    cli.add_command(query)
