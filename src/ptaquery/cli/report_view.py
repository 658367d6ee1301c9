"""Text and JSON rendering of reports."""

import json

import click

from ptaquery.domain.entities import Report
from ptaquery.utils.amount_parser import format_amount

INDENT_SIZE = 2
ACCOUNT_WIDTH = 40
AMOUNT_WIDTH = 20


def report_lines(report: Report) -> list[str]:
    """Lay out a report as aligned text lines, one per account and currency."""
    if report.is_empty:
        return ["No balances found."]

    lines = []
    for row in report:
        label = f"{' ' * (INDENT_SIZE * row.depth)}{row.account}"
        for i, (currency, amount) in enumerate(row.balances):
            name = label if i == 0 else ""
            lines.append(
                f"{name:<{ACCOUNT_WIDTH}} {format_amount(amount, currency):>{AMOUNT_WIDTH}}"
            )
    return lines


def echo_report(report: Report, as_json: bool = False) -> None:
    if as_json:
        click.echo(json.dumps(report.as_dicts(), indent=2))
        return
    for line in report_lines(report):
        click.echo(line.rstrip())
