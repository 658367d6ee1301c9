"""Document rendering command."""

import json
from pathlib import Path

import click

from ptaquery.cli.error_handling import format_domain_error, handle_domain_error
from ptaquery.cli.report_view import echo_report
from ptaquery.domain.balance import BalanceService
from ptaquery.domain.document import DEFAULT_LANGUAGE
from ptaquery.domain.errors import DomainError


@click.command("render")
@click.argument("document", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option(
    "--language",
    default=DEFAULT_LANGUAGE,
    show_default=True,
    help="Info string of the fenced code blocks that hold queries",
)
@click.option("--json", "as_json", is_flag=True, help="Print all results as one JSON document")
@click.pass_context
def render(ctx, document: Path, language: str, as_json: bool):
    """Run every query block of a Markdown DOCUMENT.

    A failing query is reported in place of its report; the remaining blocks
    are still rendered. Exits with status 1 if any block failed.
    """
    try:
        markdown = document.read_text(encoding="utf-8-sig")
    except (OSError, UnicodeDecodeError) as e:
        click.echo(f"Error: Could not read document '{document}': {e}", err=True)
        ctx.exit(1)

    service = BalanceService(ctx.obj["source"])
    try:
        results = service.run_document(markdown, language=language)
    except DomainError as e:
        handle_domain_error(ctx, e)
        return

    if not results:
        click.echo(f"No {language} blocks found in {document}.")
        return

    if as_json:
        payload = [
            {
                "line": result.block.line,
                "query": result.block.source,
                "rows": result.report.as_dicts() if result.ok else None,
                "error": None if result.ok else str(result.error),
            }
            for result in results
        ]
        click.echo(json.dumps(payload, indent=2))
    else:
        for i, result in enumerate(results):
            if i > 0:
                click.echo()
            click.echo(f"# {document.name}:{result.block.line}: {result.block.source}")
            if result.ok:
                echo_report(result.report)
            else:
                click.echo(format_domain_error(result.error))

    if any(not result.ok for result in results):
        ctx.exit(1)


def register_commands(cli):
    """Register render command with main CLI."""
    cli.add_command(render)
