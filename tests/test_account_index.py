"""Tests for the account index."""

from datetime import date
from decimal import Decimal

import pytest

from ptaquery.domain.account_index import AccountIndex, build_index
from ptaquery.domain.entities import Posting, Transaction
from ptaquery.domain.errors import ValidationError
from ptaquery.domain.ledger_parser import parse_ledger


def _sum_children(index, path):
    totals = {}
    for child in index.children(path):
        for currency, amount in index.balance(child).items():
            totals[currency] = totals.get(currency, Decimal(0)) + amount
    return totals


def test_leaf_balance(sample_index):
    """Test HDFC balance is 1000 - 110 - 150."""
    assert sample_index.balance("Assets:Banking:HDFC") == {"INR": Decimal("740.00")}
    assert str(sample_index.balance("Assets:Banking:HDFC")["INR"]) == "740.00"


def test_rolled_up_balance(sample_index):
    assert sample_index.balance("Expenses:Food") == {"INR": Decimal("260.00")}
    assert sample_index.balance("Assets") == {"INR": Decimal("2740.00")}
    assert sample_index.balance("Expenses") == {"INR": Decimal("260.00")}


def test_own_balance_only_counts_exact_account(sample_index):
    assert sample_index.own_balance("Assets:Banking:HDFC") == {"INR": Decimal("740.00")}
    assert sample_index.own_balance("Assets:Banking") == {}


def test_ancestors_are_registered(sample_index):
    assert sample_index.accounts() == [
        "Assets",
        "Assets:Banking",
        "Assets:Banking:Axis",
        "Assets:Banking:HDFC",
        "Expenses",
        "Expenses:Food",
        "Expenses:Food:Dinner",
        "Expenses:Food:Lunch",
    ]
    assert "Assets:Banking" in sample_index
    assert sample_index.has_account("Expenses")
    assert not sample_index.has_account("Income")


def test_roll_up_equals_sum_of_children(full_index):
    """Test every parent balance equals the sum of its immediate children."""
    for path in full_index.accounts():
        children = full_index.children(path)
        if not children:
            continue
        assert full_index.balance(path) == _sum_children(full_index, path)


def test_children_and_descendants(sample_index):
    assert sample_index.children() == ["Assets", "Expenses"]
    assert sample_index.children("Assets:Banking") == [
        "Assets:Banking:Axis",
        "Assets:Banking:HDFC",
    ]
    assert sample_index.descendants("Expenses") == [
        "Expenses:Food",
        "Expenses:Food:Dinner",
        "Expenses:Food:Lunch",
    ]
    assert sample_index.accounts(root="Expenses:Food") == [
        "Expenses:Food",
        "Expenses:Food:Dinner",
        "Expenses:Food:Lunch",
    ]


def test_prefix_is_segment_based():
    index = build_index(
        parse_ledger('2024-01-01 "A"\n Assets:Bank 1X\n Assets:Banking\n')
    )

    assert index.balance("Assets:Bank") == {"X": Decimal("1")}
    assert index.descendants("Assets:Bank") == []


def test_unknown_account_has_empty_balance(sample_index):
    assert sample_index.balance("Liabilities") == {}


def test_empty_index():
    index = AccountIndex.build([])

    assert index.accounts() == []
    assert index.balance("Assets") == {}
    assert len(index) == 0


def test_currencies_sorted_by_code():
    index = build_index(
        parse_ledger(
            '2024-01-01 "A"\n Assets:Cash 5USD\n Income:Gift\n\n'
            '2024-01-02 "B"\n Assets:Cash 3EUR\n Income:Gift\n'
        )
    )

    assert list(index.balance("Assets")) == ["EUR", "USD"]


def test_insertion_order_does_not_matter(full_ledger_text):
    transactions = parse_ledger(full_ledger_text)
    forward = AccountIndex.build(transactions)
    backward = AccountIndex.build(reversed(transactions))

    assert forward.accounts() == backward.accounts()
    for path in forward.accounts():
        assert forward.balance(path) == backward.balance(path)


def test_between_rebuilds_from_matching_transactions(full_index):
    later = full_index.between(start_date=date(2023, 8, 11))

    assert len(later.transactions) == 1
    assert later.balance("Expenses") == {"INR": Decimal("150")}
    assert later.balance("Assets:Banking:HDFC") == {"INR": Decimal("-150")}
    assert not later.has_account("Expenses:Food")
    # The original index is untouched
    assert full_index.balance("Assets:Banking:HDFC") == {"INR": Decimal("590.00")}


def test_unresolved_posting_is_rejected():
    txn = Transaction(
        date=date(2024, 1, 1),
        description="Draft",
        postings=(Posting("A", Decimal("1"), "X"), Posting("B")),
        line=3,
    )

    with pytest.raises(ValidationError):
        AccountIndex.build([txn])
