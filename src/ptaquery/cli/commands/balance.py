"""Balance report command."""

import click

from ptaquery.cli.date_filters import period_options, resolve_cli_date_range
from ptaquery.cli.error_handling import handle_domain_error
from ptaquery.cli.report_view import echo_report
from ptaquery.domain.balance import BalanceService
from ptaquery.domain.entities import BalanceQuery
from ptaquery.domain.errors import DomainError
from ptaquery.utils.account_path import normalize_path
from ptaquery.utils.date_parser import PERIODS


@click.command("balance")
@click.argument("account", required=False)
@click.option("--start-date", help="Start date, inclusive (YYYY-MM-DD, 'today' or 'yesterday')")
@click.option("--end-date", help="End date, inclusive (YYYY-MM-DD, 'today' or 'yesterday')")
@period_options
@click.option("--json", "as_json", is_flag=True, help="Print the report as JSON")
@click.pass_context
def balance(ctx, account: str | None, start_date: str | None, end_date: str | None, as_json: bool, **periods):
    """Show rolled-up balances, optionally for one ACCOUNT subtree.

    Example: ptaquery balance Assets:Banking --last-month
    """
    period_flags = {period: periods[period.replace("-", "_")] for period in PERIODS}
    start, end = resolve_cli_date_range(
        ctx, start_date=start_date, end_date=end_date, period_flags=period_flags
    )

    if account is not None:
        try:
            account = normalize_path(account)
        except ValueError as e:
            click.echo(f"Error: {e}", err=True)
            ctx.exit(1)

    service = BalanceService(ctx.obj["source"])
    query = BalanceQuery(account=account, start_date=start, end_date=end)
    try:
        report = service.run(query)
    except DomainError as e:
        handle_domain_error(ctx, e)
        return

    echo_report(report, as_json=as_json)


def register_commands(cli):
    """Register balance command with main CLI."""
    cli.add_command(balance)
