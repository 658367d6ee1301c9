"""Domain layer for ptaquery application."""

from ptaquery.domain.ledger_parser import parse_ledger
from ptaquery.domain.account_index import AccountIndex, build_index
from ptaquery.domain.query_parser import parse_query
from ptaquery.domain.query_executor import execute
from ptaquery.domain.balance import BalanceService

__all__ = [
    "parse_ledger",
    "AccountIndex",
    "build_index",
    "parse_query",
    "execute",
    "BalanceService",
]
