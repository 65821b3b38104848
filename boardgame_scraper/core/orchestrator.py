"""
Sync orchestrator: look up every title in the sheet and write the results back
"""
import logging
from typing import List, Optional

from ..config.schema import SpreadsheetRow, SyncSummary
from .errors import DataStoreError, NavigationError

class SyncOrchestrator:
    """
    Process title rows strictly in order, one lookup at a time

    `source` must provide read_title_rows() and `sink` must provide
    write_record(row, record); GoogleSheetsStore is both. Row level
    failures (NavigationError, a failed write) are recorded in the summary
    and the loop moves on. Anything else, such as a TransportError or a
    failed initial read, ends the run.
    """

    def __init__(self, lookup, logger: Optional[logging.Logger] = None):
        self.lookup = lookup
        self.logger = logger or logging.getLogger(__name__)

    async def run(self, source, sink) -> SyncSummary:
        """Run one sync pass and return its summary"""
        rows: List[SpreadsheetRow] = source.read_title_rows()
        summary = SyncSummary()

        if not rows:
            self.logger.info("No titles to process")
            return summary

        self.logger.info(f"Starting sync of {len(rows)} rows")

        for row in rows:
            if row.is_blank:
                summary.skipped += 1
                continue

            await self._process_row(row, sink, summary)

        self.log_summary(summary)
        return summary

    async def _process_row(self, row: SpreadsheetRow, sink, summary: SyncSummary):
        self.logger.info(f"Processing game: {row.title} (row {row.row_index})")

        try:
            row.record = await self.lookup.lookup(row.title)
        except NavigationError as e:
            self.logger.error(f"Lookup failed for '{row.title}' (row {row.row_index}): {e}")
            summary.record_failure(row, str(e))
            return

        try:
            sink.write_record(row, row.record)
        except DataStoreError as e:
            self.logger.error(f"Write failed for '{row.title}' (row {row.row_index}): {e}")
            summary.record_failure(row, str(e))
            return

        summary.processed += 1

    def log_summary(self, summary: SyncSummary):
        """Log counts and every failed row"""
        self.logger.info("=== SYNC SUMMARY ===")
        self.logger.info(f"Processed: {summary.processed}")
        self.logger.info(f"Skipped (blank title): {summary.skipped}")
        self.logger.info(f"Failed: {summary.failed}")

        for failure in summary.failures:
            self.logger.info(f"  Row {failure.row_index} '{failure.title}': {failure.reason}")
