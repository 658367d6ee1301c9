"""Abstract ledger source interface."""

from abc import ABC, abstractmethod


class LedgerSource(ABC):
    """Supplies raw ledger text on demand.

    Every call to ``read_text`` must return a complete snapshot; callers parse
    each snapshot independently and never cache the result.
    """

    @abstractmethod
    def read_text(self) -> str:
        """Return the current ledger text."""
        pass

    @abstractmethod
    def describe(self) -> str:
        """Return a human-readable description of where the text comes from."""
        pass


class StringLedgerSource(LedgerSource):
    """Ledger text held in memory."""

    def __init__(self, text: str, name: str = "<string>"):
        self.text = text
        self.name = name

    def read_text(self) -> str:
        return self.text

    def describe(self) -> str:
        return self.name
