"""Shared pytest fixtures for ptaquery tests."""

from pathlib import Path
import pytest

from ptaquery.domain.account_index import AccountIndex
from ptaquery.domain.ledger_parser import parse_ledger
from ptaquery.storage.file_source import FileLedgerSource


SAMPLE_LEDGER = """\
2023-08-10 "Starting Balance"
 Assets:Banking:HDFC 1000.00INR
 Assets:Banking:Axis 2000.00INR

2023-08-10 "Lunch"
 Expenses:Food:Lunch 110.00INR
 Assets:Banking:HDFC

2023-08-10 "Dinner"
 Expenses:Food:Dinner 150.00INR
 Assets:Banking:HDFC
"""

CIGG_TRANSACTION = """
2023-08-11 "C"
 Expenses:Cigg 150INR
 Assets:Banking:HDFC
"""


@pytest.fixture
def sample_ledger_text():
    """The three-transaction example ledger."""
    return SAMPLE_LEDGER


@pytest.fixture
def full_ledger_text():
    """The example ledger including the 2023-08-11 transaction."""
    return SAMPLE_LEDGER + CIGG_TRANSACTION


@pytest.fixture
def sample_index(sample_ledger_text):
    """Account index over the three-transaction example ledger."""
    return AccountIndex.build(parse_ledger(sample_ledger_text))


@pytest.fixture
def full_index(full_ledger_text):
    """Account index over the four-transaction example ledger."""
    return AccountIndex.build(parse_ledger(full_ledger_text))


@pytest.fixture
def ledger_file(tmp_path, full_ledger_text) -> Path:
    """Write the full example ledger to a temporary Ledger.md."""
    path = tmp_path / "Ledger.md"
    path.write_text(full_ledger_text, encoding="utf-8")
    return path


@pytest.fixture
def file_source(ledger_file):
    """File source reading the temporary ledger."""
    return FileLedgerSource(ledger_file)


@pytest.fixture
def cli_runner():
    """Create a Click CLI test runner."""
    from click.testing import CliRunner

    return CliRunner()
