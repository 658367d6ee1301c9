"""Query language parser.

A query is a command keyword followed by clauses, separated by whitespace
(newlines included):

    balance Assets from:2023-08-01 to:2023-08-31
    balance Expenses:Food period:last-month

A token whose text before its first ``:`` names a clause (``from``, ``to``,
``period`` or ``account``, in any case) is a clause. Any other token whose
prefix is an all-lowercase word is rejected as an unknown clause; the
remaining tokens are the account filter. Lowercase account names can still
be filtered with an explicit ``account:`` clause:

    balance account:expenses:food
"""

import re
from dataclasses import dataclass
from datetime import date
from typing import Optional

from ptaquery.domain.entities import BalanceQuery, Query, QueryCommand
from ptaquery.domain.errors import QuerySemanticError, QuerySyntaxError
from ptaquery.logging_setup import get_logger
from ptaquery.utils.account_path import normalize_path
from ptaquery.utils.date_parser import PERIODS, get_date_range, parse_date

logger = get_logger(__name__)

COMMANDS = {
    "balance": QueryCommand.BALANCE,
    "bal": QueryCommand.BALANCE,
}

CLAUSES = ("from", "to", "period", "account")

_TOKEN_RE = re.compile(r"\S+")
_KEYWORD_RE = re.compile(r"^(?P<keyword>[A-Za-z]+):(?P<value>.*)$")


@dataclass(frozen=True)
class Token:
    text: str
    position: int
    line: int
    column: int


def tokenize(text: str) -> list[Token]:
    """Split query text into whitespace-separated tokens with their locations."""
    tokens = []
    for match in _TOKEN_RE.finditer(text):
        position = match.start()
        line = text.count("\n", 0, position) + 1
        column = position - (text.rfind("\n", 0, position) + 1) + 1
        tokens.append(Token(match.group(), position, line, column))
    return tokens


def _syntax_error(reason: str, token: Token, expected: Optional[str] = None) -> QuerySyntaxError:
    return QuerySyntaxError(
        reason,
        position=token.position,
        line=token.line,
        column=token.column,
        token=token.text,
        expected=expected,
    )


def _semantic_error(reason: str, token: Token) -> QuerySemanticError:
    return QuerySemanticError(
        reason,
        position=token.position,
        line=token.line,
        column=token.column,
        token=token.text,
    )


def parse_query(text: str, today: Optional[date] = None) -> Query:
    """Parse query text into a query.

    Args:
        text: Query source
        today: Reference date for relative dates and periods

    Returns:
        Parsed query

    Raises:
        QuerySyntaxError: If the text does not follow the query grammar
        QuerySemanticError: If a clause value is not meaningful
    """
    tokens = tokenize(text)
    if not tokens:
        end = len(text)
        raise QuerySyntaxError(
            "Empty query",
            position=end,
            line=text.count("\n") + 1,
            column=end - (text.rfind("\n") + 1) + 1,
            expected="a command keyword (balance)",
        )

    command_token, clause_tokens = tokens[0], tokens[1:]
    command = COMMANDS.get(command_token.text.lower())
    if command is None:
        raise _syntax_error(
            f"Unknown command '{command_token.text}'",
            command_token,
            expected="a command keyword (balance)",
        )

    if command is QueryCommand.BALANCE:
        query = _parse_balance_clauses(clause_tokens, today)
    else:
        raise AssertionError(f"Unhandled query command: {command}")

    logger.debug("Parsed query %r", query)
    return query


def _parse_balance_clauses(tokens: list[Token], today: Optional[date]) -> BalanceQuery:
    seen: dict[str, Token] = {}
    account: Optional[str] = None
    start_date: Optional[date] = None
    end_date: Optional[date] = None

    for token in tokens:
        match = _KEYWORD_RE.match(token.text)
        if match and match.group("keyword").lower() in CLAUSES:
            keyword = match.group("keyword").lower()
            value = match.group("value")
        elif match and match.group("keyword").islower():
            raise _syntax_error(
                f"Unknown clause '{match.group('keyword')}'",
                token,
                expected="one of from:DATE, to:DATE, period:NAME, account:PATH or an account path",
            )
        else:
            keyword, value = "account", token.text

        if keyword in seen:
            raise _syntax_error(f"Duplicate {keyword} clause", token)
        seen[keyword] = token

        if keyword == "account":
            try:
                account = normalize_path(value)
            except ValueError:
                raise _syntax_error(
                    f"Invalid account path '{value}'",
                    token,
                    expected="colon-separated account names, e.g. Assets:Banking",
                )
            continue

        if not value:
            raise _syntax_error(
                f"Missing value for {keyword} clause",
                token,
                expected="YYYY-MM-DD" if keyword != "period" else ", ".join(PERIODS),
            )

        if keyword == "period":
            try:
                start_date, end_date = get_date_range(value, today=today)
            except ValueError as e:
                raise _semantic_error(str(e), token)
            continue

        try:
            parsed = parse_date(value, today=today)
        except ValueError as e:
            raise _semantic_error(f"Invalid {keyword} date: {e}", token)

        if keyword == "from":
            start_date = parsed
        else:
            end_date = parsed

    if "period" in seen and ("from" in seen or "to" in seen):
        raise _semantic_error(
            "period cannot be combined with from or to", seen["period"]
        )

    if start_date is not None and end_date is not None and start_date > end_date:
        raise _semantic_error(
            f"from date {start_date} is after to date {end_date}",
            seen.get("from") or seen["period"],
        )

    return BalanceQuery(account=account, start_date=start_date, end_date=end_date)
