"""Ledger text parser.

Turns plain-text ledger source into validated transactions. The
source is a sequence of blocks separated by blank lines:

    2023-08-10 "Lunch"
     Expenses:Food:Lunch 110.00INR
     Assets:Banking:HDFC

The first line of a block is the header, every following line is an indented
posting. At most one posting per transaction may leave out its amount; it is
filled in so that its currency nets to zero. Transactions that spell out
every amount, such as opening balances, are taken as written.
"""

import re
from decimal import Decimal

from ptaquery.domain.entities import Posting, Transaction
from ptaquery.domain.errors import (
    LedgerBalanceError,
    LedgerSyntaxError,
    ambiguous_elision,
    invalid_date,
    invalid_header,
    too_few_postings,
)
from ptaquery.logging_setup import get_logger
from ptaquery.utils.account_path import is_valid_path
from ptaquery.utils.amount_parser import parse_amount
from ptaquery.utils.date_parser import parse_iso_date

logger = get_logger(__name__)

_HEADER_RE = re.compile(r'^(?P<date>\S+)\s+"(?P<description>[^"]*)"\s*$')


def parse_ledger(text: str) -> list[Transaction]:
    """Parse ledger text into an ordered list of transactions.

    Args:
        text: Full ledger source

    Returns:
        Transactions in source order

    Raises:
        LedgerSyntaxError: If a header or posting line is malformed
        LedgerBalanceError: If a transaction cannot be balanced
    """
    transactions = [
        _parse_block(block) for block in _split_blocks(text.splitlines())
    ]
    logger.debug("Parsed %d transaction(s)", len(transactions))
    return transactions


def _split_blocks(lines: list[str]) -> list[list[tuple[int, str]]]:
    """Group non-blank lines into blocks, keeping 1-based line numbers."""
    blocks: list[list[tuple[int, str]]] = []
    current: list[tuple[int, str]] = []

    for number, line in enumerate(lines, start=1):
        if not line.strip():
            if current:
                blocks.append(current)
                current = []
            continue
        current.append((number, line.rstrip()))

    if current:
        blocks.append(current)

    return blocks


def _parse_block(block: list[tuple[int, str]]) -> Transaction:
    header_line, header = block[0]
    source = "\n".join(line for _, line in block)

    txn_date, description = _parse_header(header_line, header)

    postings = [_parse_posting(number, line) for number, line in block[1:]]
    if len(postings) < 2:
        raise LedgerSyntaxError(too_few_postings(len(postings)), header_line, source)

    draft = Transaction(
        date=txn_date,
        description=description,
        postings=tuple(postings),
        line=header_line,
    )
    return Transaction(
        date=txn_date,
        description=description,
        postings=resolve_elided_postings(draft, source),
        line=header_line,
    )


def _parse_header(number: int, line: str):
    if line[0].isspace():
        raise LedgerSyntaxError(invalid_header(line), number, line)

    match = _HEADER_RE.match(line)
    if match is None:
        raise LedgerSyntaxError(invalid_header(line), number, line)

    description = match.group("description").strip()
    if not description:
        raise LedgerSyntaxError("Transaction description is empty", number, line)

    try:
        txn_date = parse_iso_date(match.group("date"))
    except ValueError:
        raise LedgerSyntaxError(invalid_date(match.group("date")), number, line)

    return txn_date, description


def _parse_posting(number: int, line: str) -> Posting:
    if not line[0].isspace():
        raise LedgerSyntaxError(
            f"Posting line must be indented, got '{line.strip()}'", number, line
        )

    tokens = line.split()
    account = tokens[0]
    if not is_valid_path(account):
        raise LedgerSyntaxError(f"Invalid account path '{account}'", number, line)

    if len(tokens) == 1:
        return Posting(account=account)

    if len(tokens) > 2:
        raise LedgerSyntaxError(
            f"Unexpected text after amount: '{' '.join(tokens[2:])}' "
            "(the amount and currency must not be separated)",
            number,
            line,
        )

    try:
        amount, currency = parse_amount(tokens[1])
    except ValueError as e:
        raise LedgerSyntaxError(str(e), number, line)

    return Posting(account=account, amount=amount, currency=currency)


def resolve_elided_postings(transaction: Transaction, source: str = "") -> tuple[Posting, ...]:
    """Return the postings of a transaction with the elided amount filled in.

    The input transaction is left untouched.

    Raises:
        LedgerBalanceError: If the postings cannot be balanced uniquely
    """
    postings = transaction.postings
    line = transaction.line
    elided = [i for i, posting in enumerate(postings) if posting.elided]

    if len(elided) > 1:
        raise LedgerBalanceError(
            ambiguous_elision(f"{len(elided)} postings have no amount"),
            line,
            source,
            transaction,
        )

    residues = {
        currency: total
        for currency, total in transaction.totals().items()
        if total != 0
    }

    # Fully explicit transactions are taken as written; opening balances
    # such as "Starting Balance" do not net to zero.
    if not elided:
        if residues:
            logger.debug(
                "Line %d: explicit transaction leaves %s unbalanced",
                line,
                ", ".join(residues),
            )
        return postings

    currencies = transaction.totals()
    if len(residues) > 1:
        raise LedgerBalanceError(
            ambiguous_elision(
                f"more than one currency is unbalanced ({', '.join(residues)})"
            ),
            line,
            source,
            transaction,
        )

    if residues:
        currency, residue = next(iter(residues.items()))
        amount = -residue
    elif len(currencies) == 1:
        currency = next(iter(currencies))
        amount = Decimal(0)
    else:
        raise LedgerBalanceError(
            ambiguous_elision("no currency to balance against"),
            line,
            source,
            transaction,
        )

    index = elided[0]
    filled = Posting(
        account=postings[index].account, amount=amount, currency=currency
    )
    return postings[:index] + (filled,) + postings[index + 1:]
