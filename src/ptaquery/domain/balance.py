"""Balance domain service."""

from typing import Optional
from datetime import date

from ptaquery.domain.account_index import AccountIndex
from ptaquery.domain.document import DEFAULT_LANGUAGE, extract_query_blocks
from ptaquery.domain.entities import BlockResult, Query, Report
from ptaquery.domain.errors import QueryError
from ptaquery.domain.ledger_parser import parse_ledger
from ptaquery.domain.query_executor import execute
from ptaquery.domain.query_parser import parse_query
from ptaquery.logging_setup import get_logger
from ptaquery.storage.base import LedgerSource

logger = get_logger(__name__)


class BalanceService:
    """Service for answering balance queries against a ledger source."""

    def __init__(self, source: LedgerSource, today: Optional[date] = None):
        """Initialize balance service.

        Args:
            source: Where ledger text is read from
            today: Reference date for relative query dates
        """
        self.source = source
        self.today = today

    def load_index(self) -> AccountIndex:
        """Read and parse the ledger into a fresh account index.

        Raises:
            LedgerSourceError: If the ledger cannot be read
            LedgerSyntaxError: If the ledger text is malformed
            LedgerBalanceError: If a transaction does not balance
        """
        text = self.source.read_text()
        index = AccountIndex.build(parse_ledger(text))
        logger.info(
            "Loaded %d transaction(s) from %s",
            len(index.transactions),
            self.source.describe(),
        )
        return index

    def run(self, query: Query, index: Optional[AccountIndex] = None) -> Report:
        """Execute a parsed query."""
        if index is None:
            index = self.load_index()
        return execute(query, index)

    def run_query(self, query_text: str, index: Optional[AccountIndex] = None) -> Report:
        """Parse and execute query text.

        Raises:
            QuerySyntaxError: If the query text is malformed
            QuerySemanticError: If a clause value is not meaningful
        """
        query = parse_query(query_text, today=self.today)
        return self.run(query, index)

    def run_document(self, markdown: str, language: str = DEFAULT_LANGUAGE) -> list[BlockResult]:
        """Run every query block of a document against one ledger snapshot.

        Query errors are reported in place of the block's report; ledger
        errors abort the whole call.
        """
        blocks = extract_query_blocks(markdown, language=language)
        if not blocks:
            return []

        index = self.load_index()
        results = []
        for block in blocks:
            try:
                report = self.run_query(block.source, index)
            except QueryError as e:
                logger.info("Query block at line %d failed: %s", block.line, e)
                results.append(BlockResult(block=block, error=e))
                continue
            results.append(BlockResult(block=block, report=report))
        return results
