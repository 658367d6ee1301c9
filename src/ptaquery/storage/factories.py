"""Ledger source factory functions."""

import os
from typing import Optional

from ptaquery.storage.file_source import FileLedgerSource

LEDGER_PATH_ENVVAR = "PTAQUERY_LEDGER_PATH"
DEFAULT_LEDGER_PATH = "Ledger.md"


def create_file_source(ledger_path: Optional[str] = None) -> FileLedgerSource:
    """Create a file ledger source.

    Args:
        ledger_path: Path to the ledger file. If None, checks PTAQUERY_LEDGER_PATH
            environment variable, then defaults to Ledger.md in the current directory

    Returns:
        FileLedgerSource for the resolved path
    """
    if ledger_path is None:
        ledger_path = os.environ.get(LEDGER_PATH_ENVVAR)

    if ledger_path is None:
        ledger_path = DEFAULT_LEDGER_PATH

    return FileLedgerSource(ledger_path)
