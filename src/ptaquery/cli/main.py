"""Main CLI entry point."""

import click

from ptaquery.logging_setup import LOG_LEVEL_ENVVAR, configure_logging
from ptaquery.storage.factories import LEDGER_PATH_ENVVAR, create_file_source

# Import and register all commands at module level
from ptaquery.cli.commands import balance, ledger, query, render


@click.group()
@click.option(
    "--ledger",
    "ledger_path",
    type=click.Path(dir_okay=False),
    help=f"Path to ledger file (overrides {LEDGER_PATH_ENVVAR} environment variable)",
    envvar=LEDGER_PATH_ENVVAR,
)
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    envvar=LOG_LEVEL_ENVVAR,
    default="WARNING",
    show_default=True,
    help="Logging verbosity (written to stderr)",
)
@click.pass_context
def cli(ctx, ledger_path: str | None, log_level: str):
    """ptaquery - Balance reports for plain-text ledgers.

    Reads a double-entry ledger and answers balance queries given on the
    command line or embedded as ```pta blocks in Markdown documents.
    """
    ctx.ensure_object(dict)
    configure_logging(log_level)
    ctx.obj["source"] = create_file_source(ledger_path=ledger_path)


# Register all commands
balance.register_commands(cli)
query.register_commands(cli)
render.register_commands(cli)
ledger.register_commands(cli)


def main():
    """Main entry point for CLI."""
    cli()


if __name__ == "__main__":
    main()
