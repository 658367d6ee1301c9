"""Shared domain error messages and error types."""

from typing import Optional


class DomainError(ValueError):
    """Base class for domain-level errors.

    Subclasses provide semantic categories while preserving ValueError
    compatibility for existing error handling.
    """


class ValidationError(DomainError):
    """Invalid input or failed validation in domain logic."""


class NotFoundError(DomainError):
    """Requested domain entity or path does not exist."""


class LedgerError(ValidationError):
    """Ledger text could not be turned into balanced transactions."""

    def __init__(self, reason: str, line: int, source: str = ""):
        self.reason = reason
        self.line = line
        self.source = source
        super().__init__(f"Line {line}: {reason}")


class LedgerSyntaxError(LedgerError):
    """Malformed header or posting line."""


class LedgerBalanceError(LedgerError):
    """An elided posting amount cannot be inferred uniquely."""

    def __init__(self, reason: str, line: int, source: str = "", transaction=None):
        self.transaction = transaction
        super().__init__(reason, line, source)


class QueryError(ValidationError):
    """Query text could not be turned into a query."""

    def __init__(
        self,
        reason: str,
        position: int = 0,
        line: int = 1,
        column: int = 1,
        token: Optional[str] = None,
    ):
        self.reason = reason
        self.position = position
        self.line = line
        self.column = column
        self.token = token
        super().__init__(f"Query line {line}, column {column}: {reason}")


class QuerySyntaxError(QueryError):
    """Malformed query text."""

    def __init__(
        self,
        reason: str,
        position: int = 0,
        line: int = 1,
        column: int = 1,
        token: Optional[str] = None,
        expected: Optional[str] = None,
    ):
        self.expected = expected
        if expected:
            reason = f"{reason} (expected {expected})"
        super().__init__(reason, position, line, column, token)


class QuerySemanticError(QueryError):
    """Well-formed query with values that make no sense."""


class LedgerSourceError(NotFoundError):
    """Ledger text could not be read from its source."""


def invalid_header(line_text: str) -> str:
    """Return message for a header line that does not match the grammar."""
    return f"Expected transaction header 'YYYY-MM-DD \"description\"', got '{line_text.strip()}'"


def invalid_date(value: str) -> str:
    """Return message for a date token that is not a real calendar date."""
    return f"Invalid date '{value}'"


def too_few_postings(count: int) -> str:
    """Return message for a transaction without enough postings."""
    return f"Transaction must have at least 2 postings, found {count}"


def ambiguous_elision(detail: str) -> str:
    """Return message when an elided amount cannot be inferred uniquely."""
    return f"Cannot infer elided amount: {detail}"
