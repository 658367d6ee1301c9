"""Ledger sources."""

from ptaquery.storage.base import LedgerSource, StringLedgerSource
from ptaquery.storage.file_source import FileLedgerSource
from ptaquery.storage.factories import create_file_source

__all__ = ["LedgerSource", "StringLedgerSource", "FileLedgerSource", "create_file_source"]
