"""Account index built over parsed transactions.

Accounts are not declared anywhere; an account exists as soon as a posting
references it or one of its descendants. Amounts are attributed to the exact
posting account, and every balance lookup rolls up the amounts of all
descendants.
"""

from collections import defaultdict
from datetime import date
from decimal import Decimal
from typing import Iterable, Optional, Sequence

from ptaquery.domain.entities import Transaction
from ptaquery.domain.errors import ValidationError
from ptaquery.logging_setup import get_logger
from ptaquery.utils.account_path import ancestors, is_within, parent, sort_key

logger = get_logger(__name__)


def _sorted_balances(balances: dict[str, Decimal]) -> dict[str, Decimal]:
    return {currency: balances[currency] for currency in sorted(balances)}


class AccountIndex:
    """Queryable, read-only view of a ledger's accounts and balances."""

    def __init__(self, transactions: Sequence[Transaction]):
        """Initialize the index.

        Args:
            transactions: Balanced transactions in ledger order
        """
        self._transactions = tuple(transactions)
        own: dict[str, dict[str, Decimal]] = {}
        rolled: dict[str, dict[str, Decimal]] = {}

        for txn in self._transactions:
            for posting in txn.postings:
                if posting.amount is None or posting.currency is None:
                    raise ValidationError(
                        f"Posting to '{posting.account}' on line {txn.line} has no amount"
                    )
                lineage = ancestors(posting.account)
                for path in lineage:
                    own.setdefault(path, {})

                leaf = own.setdefault(posting.account, {})
                leaf[posting.currency] = (
                    leaf.get(posting.currency, Decimal(0)) + posting.amount
                )
                for path in lineage + [posting.account]:
                    totals = rolled.setdefault(path, {})
                    totals[posting.currency] = (
                        totals.get(posting.currency, Decimal(0)) + posting.amount
                    )

        self._own = own
        self._rolled = rolled
        self._accounts = tuple(sorted(own, key=sort_key))

        children: dict[str, list[str]] = defaultdict(list)
        for path in self._accounts:
            parent_path = parent(path)
            if parent_path is not None:
                children[parent_path].append(path)
        self._children = {key: tuple(value) for key, value in children.items()}

        logger.debug(
            "Indexed %d account(s) from %d transaction(s)",
            len(self._accounts),
            len(self._transactions),
        )

    @classmethod
    def build(cls, transactions: Iterable[Transaction]) -> "AccountIndex":
        return cls(list(transactions))

    @property
    def transactions(self) -> tuple[Transaction, ...]:
        return self._transactions

    def accounts(self, root: Optional[str] = None) -> list[str]:
        """List account paths, ancestors first, optionally within a subtree."""
        if root is None:
            return list(self._accounts)
        return [path for path in self._accounts if is_within(path, root)]

    def has_account(self, path: str) -> bool:
        return path in self._own

    def children(self, path: Optional[str] = None) -> list[str]:
        """Immediate children of an account, or the top-level accounts."""
        if path is None:
            return [p for p in self._accounts if parent(p) is None]
        return list(self._children.get(path, ()))

    def descendants(self, path: str) -> list[str]:
        return [p for p in self._accounts if p != path and is_within(p, path)]

    def own_balance(self, path: str) -> dict[str, Decimal]:
        """Amounts posted directly to an account, per currency."""
        return _sorted_balances(self._own.get(path, {}))

    def balance(self, path: str) -> dict[str, Decimal]:
        """Balance of an account including all descendants, per currency."""
        return _sorted_balances(self._rolled.get(path, {}))

    def between(
        self, start_date: Optional[date] = None, end_date: Optional[date] = None
    ) -> "AccountIndex":
        """Build a new index over transactions dated within inclusive bounds."""
        return AccountIndex(
            [
                txn
                for txn in self._transactions
                if (start_date is None or txn.date >= start_date)
                and (end_date is None or txn.date <= end_date)
            ]
        )

    def __len__(self) -> int:
        return len(self._accounts)

    def __contains__(self, path: object) -> bool:
        return path in self._own


def build_index(transactions: Iterable[Transaction]) -> AccountIndex:
    """Build an account index from parsed transactions."""
    return AccountIndex.build(transactions)
