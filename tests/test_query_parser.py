"""Tests for the query language parser."""

from datetime import date

import pytest

from ptaquery.domain.entities import BalanceQuery, QueryCommand
from ptaquery.domain.errors import QuerySemanticError, QuerySyntaxError
from ptaquery.domain.query_parser import parse_query, tokenize


def test_parse_bare_command():
    query = parse_query("balance")

    assert query == BalanceQuery()
    assert query.command is QueryCommand.BALANCE


def test_parse_account_filter():
    assert parse_query("balance Assets").account == "Assets"
    assert parse_query("balance Assets:Banking:").account == "Assets:Banking"


def test_account_clause_allows_lowercase_paths():
    assert parse_query("balance account:expenses:food").account == "expenses:food"
    assert parse_query("balance Account:Assets").account == "Assets"


def test_clause_keywords_ignore_case():
    query = parse_query("balance FROM:2023-08-11 To:2023-08-31")

    assert query == BalanceQuery(start_date=date(2023, 8, 11), end_date=date(2023, 8, 31))


def test_account_clause_and_bare_path_conflict():
    with pytest.raises(QuerySyntaxError) as excinfo:
        parse_query("balance Assets account:expenses")

    assert "Duplicate account clause" in str(excinfo.value)
    assert excinfo.value.token == "account:expenses"


def test_lowercase_path_hints_at_account_clause():
    with pytest.raises(QuerySyntaxError) as excinfo:
        parse_query("balance expenses:food")

    assert "Unknown clause 'expenses'" in str(excinfo.value)
    assert "account:PATH" in str(excinfo.value)


def test_parse_date_range():
    query = parse_query("balance from:2023-08-01 to:2023-08-31")

    assert query.start_date == date(2023, 8, 1)
    assert query.end_date == date(2023, 8, 31)
    assert query.account is None


def test_clauses_in_any_order_across_lines():
    query = parse_query("BAL\n  to:2023-08-31\n  Expenses:Food\n  from:2023-08-01\n")

    assert query == BalanceQuery(
        account="Expenses:Food",
        start_date=date(2023, 8, 1),
        end_date=date(2023, 8, 31),
    )


def test_relative_dates():
    today = date(2024, 3, 15)

    query = parse_query("balance from:yesterday to:today", today=today)

    assert query.start_date == date(2024, 3, 14)
    assert query.end_date == today


def test_period_clause():
    query = parse_query("balance period:last-month", today=date(2024, 3, 15))

    assert query.start_date == date(2024, 2, 1)
    assert query.end_date == date(2024, 2, 29)


def test_empty_query_fails():
    with pytest.raises(QuerySyntaxError) as excinfo:
        parse_query("   \n ")

    assert "command keyword" in excinfo.value.expected


def test_unknown_command_names_token():
    with pytest.raises(QuerySyntaxError) as excinfo:
        parse_query("register Assets")

    assert excinfo.value.token == "register"
    assert excinfo.value.position == 0
    assert "register" in str(excinfo.value)


def test_unknown_clause_names_token_and_position():
    with pytest.raises(QuerySyntaxError) as excinfo:
        parse_query("balance\n  depth:2")

    error = excinfo.value
    assert error.token == "depth:2"
    assert (error.line, error.column, error.position) == (2, 3, 10)
    assert "Unknown clause 'depth'" in str(error)


@pytest.mark.parametrize(
    "text",
    [
        "balance from:2023-01-01 from:2023-02-01",
        "balance Assets Expenses",
        "balance from:",
        "balance Assets::Bank",
    ],
)
def test_malformed_clauses_fail(text):
    with pytest.raises(QuerySyntaxError):
        parse_query(text)


@pytest.mark.parametrize(
    "text",
    [
        "balance from:2023-02-30",
        "balance to:last-tuesday",
        "balance from:2023-09-01 to:2023-08-01",
        "balance period:next-month",
        "balance period:this-year from:2023-01-01",
    ],
)
def test_meaningless_values_fail(text):
    with pytest.raises(QuerySemanticError):
        parse_query(text, today=date(2024, 3, 15))


def test_tokenize_tracks_locations():
    tokens = tokenize("balance\nAssets  from:2023-01-01")

    assert [(t.text, t.line, t.column) for t in tokens] == [
        ("balance", 1, 1),
        ("Assets", 2, 1),
        ("from:2023-01-01", 2, 9),
    ]
