"""Domain model entities for ptaquery.

These are pure, immutable data classes. Transactions come out of the ledger
parser, queries out of the query parser, and reports out of the executor;
nothing here knows how the ledger text was obtained or how a report is shown.
"""

from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal
from enum import Enum
from typing import ClassVar, Iterator, Optional, Union


@dataclass(frozen=True)
class Posting:
    """One account/amount leg of a transaction."""

    account: str
    amount: Optional[Decimal] = None
    currency: Optional[str] = None

    @property
    def elided(self) -> bool:
        return self.amount is None


@dataclass(frozen=True)
class Transaction:
    """A dated, described, balanced set of postings."""

    date: date
    description: str
    postings: tuple[Posting, ...]
    line: int = 0

    def totals(self) -> dict[str, Decimal]:
        """Sum explicit posting amounts per currency."""
        totals: dict[str, Decimal] = {}
        for posting in self.postings:
            if posting.amount is None or posting.currency is None:
                continue
            totals[posting.currency] = (
                totals.get(posting.currency, Decimal(0)) + posting.amount
            )
        return dict(sorted(totals.items()))


class QueryCommand(Enum):
    """Command kinds understood by the query language."""

    BALANCE = "balance"


@dataclass(frozen=True)
class BalanceQuery:
    """Balance report over an optional account subtree and date range."""

    command: ClassVar[QueryCommand] = QueryCommand.BALANCE

    account: Optional[str] = None
    start_date: Optional[date] = None
    end_date: Optional[date] = None


# Tagged union over command records, keyed by ``command``.
Query = Union[BalanceQuery]


@dataclass(frozen=True)
class ReportRow:
    """Balances of one account, sorted by currency code."""

    account: str
    balances: tuple[tuple[str, Decimal], ...]

    @property
    def depth(self) -> int:
        return self.account.count(":")

    def balance_for(self, currency: str) -> Decimal:
        for code, amount in self.balances:
            if code == currency:
                return amount
        return Decimal(0)

    def as_dict(self) -> dict:
        return {
            "account": self.account,
            "balances": {code: f"{amount:f}" for code, amount in self.balances},
        }


@dataclass(frozen=True)
class Report:
    """Ordered rows produced by executing one query."""

    query: Query
    rows: tuple[ReportRow, ...] = ()

    def __iter__(self) -> Iterator[ReportRow]:
        return iter(self.rows)

    def __len__(self) -> int:
        return len(self.rows)

    @property
    def is_empty(self) -> bool:
        return not self.rows

    @property
    def accounts(self) -> list[str]:
        return [row.account for row in self.rows]

    def find(self, account: str) -> Optional[ReportRow]:
        for row in self.rows:
            if row.account == account:
                return row
        return None

    def as_dicts(self) -> list[dict]:
        return [row.as_dict() for row in self.rows]


@dataclass(frozen=True)
class QueryBlock:
    """Query text found in a document, with the line of its opening fence."""

    source: str
    line: int


@dataclass(frozen=True)
class BlockResult:
    """Outcome of running one query block: a report or the error in its place."""

    block: QueryBlock
    report: Optional[Report] = None
    error: Optional[Exception] = field(default=None, compare=False)

    @property
    def ok(self) -> bool:
        return self.error is None
