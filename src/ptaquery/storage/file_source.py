"""File-backed ledger source."""

from pathlib import Path

from ptaquery.domain.errors import LedgerSourceError
from ptaquery.logging_setup import get_logger
from ptaquery.storage.base import LedgerSource

logger = get_logger(__name__)


class FileLedgerSource(LedgerSource):
    """Reads ledger text from a file on every call."""

    def __init__(self, path: str | Path, encoding: str = "utf-8-sig"):
        """Initialize file source.

        Args:
            path: Path to the ledger file
            encoding: Text encoding of the file (a leading BOM is dropped by default)
        """
        self.path = Path(path)
        self.encoding = encoding

    def read_text(self) -> str:
        """Read the ledger file.

        Raises:
            LedgerSourceError: If the file does not exist or cannot be read
        """
        if not self.path.is_file():
            raise LedgerSourceError(f"Ledger file '{self.path}' not found")
        try:
            text = self.path.read_text(encoding=self.encoding)
        except (OSError, UnicodeDecodeError) as e:
            raise LedgerSourceError(f"Could not read ledger file '{self.path}': {e}")
        logger.debug("Read %d character(s) from %s", len(text), self.path)
        return text

    def describe(self) -> str:
        return str(self.path)
