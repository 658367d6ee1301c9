"""Query executor: binds a parsed query to an account index."""

from typing import Callable

from ptaquery.domain.account_index import AccountIndex
from ptaquery.domain.entities import BalanceQuery, Query, QueryCommand, Report, ReportRow
from ptaquery.logging_setup import get_logger

logger = get_logger(__name__)


def execute(query: Query, index: AccountIndex) -> Report:
    """Execute a query against an account index.

    The index is only read; date-restricted queries work on a fresh index
    built from the matching transactions.

    Args:
        query: Parsed query
        index: Account index of the ledger

    Returns:
        Report with one row per account that has a non-zero balance
    """
    handler = _EXECUTORS.get(query.command)
    if handler is None:
        raise TypeError(f"No executor for query command {query.command}")
    report = handler(query, index)
    logger.debug("Query %r produced %d row(s)", query, len(report))
    return report


def _execute_balance(query: BalanceQuery, index: AccountIndex) -> Report:
    if query.start_date is not None or query.end_date is not None:
        index = index.between(query.start_date, query.end_date)

    rows = []
    for account in index.accounts(root=query.account):
        balances = tuple(
            (currency, amount)
            for currency, amount in index.balance(account).items()
            if amount != 0
        )
        if balances:
            rows.append(ReportRow(account=account, balances=balances))

    return Report(query=query, rows=tuple(rows))


_EXECUTORS: dict[QueryCommand, Callable[..., Report]] = {
    QueryCommand.BALANCE: _execute_balance,
}
