"""
Google Sheets store for game titles and scraped records
"""
import logging
from typing import List, Any

import httplib2
from google.auth.exceptions import GoogleAuthError
from google.oauth2.service_account import Credentials
from googleapiclient.discovery import build
from googleapiclient.errors import Error as GoogleApiError

from ..config.schema import GameRecord, SpreadsheetRow
from ..core.errors import DataStoreError
from ..core.utils import range_start_row

logger = logging.getLogger(__name__)

SCOPES = ['https://www.googleapis.com/auth/spreadsheets']

# Everything the Sheets client can raise while talking to the API
SHEETS_ERRORS = (GoogleApiError, httplib2.HttpLib2Error, GoogleAuthError, OSError)

class GoogleSheetsStore:
    """Read game titles from and write game records to a Google Sheet"""

    def __init__(self, sheet_id: str, service_account_file: str = None,
                 sheet_name: str = "Sheet1", title_range: str = "A2:A",
                 first_write_column: str = "B", last_write_column: str = "K",
                 service=None):
        self.sheet_id = sheet_id
        self.service_account_file = service_account_file
        self.sheet_name = sheet_name
        self.title_range = title_range
        self.first_write_column = first_write_column
        self.last_write_column = last_write_column
        self.service = service
        if self.service is None:
            self._authenticate()

    def _authenticate(self):
        """Authenticate with Google Sheets API using service account"""
        try:
            credentials = Credentials.from_service_account_file(
                self.service_account_file,
                scopes=SCOPES
            )

            self.service = build('sheets', 'v4', credentials=credentials)
            logger.info("Successfully authenticated with Google Sheets API")

        except (GoogleAuthError, OSError, ValueError) as e:
            logger.error(f"Failed to authenticate with Google Sheets API: {e}")
            raise DataStoreError(f"Failed to authenticate with Google Sheets API: {e}") from e

    def read_range(self, sheet_name: str, range_ref: str) -> List[List[Any]]:
        """Read cell values; trailing empty rows are omitted by the API"""
        try:
            response = self.service.spreadsheets().values().get(
                spreadsheetId=self.sheet_id,
                range=f"{sheet_name}!{range_ref}",
            ).execute()

        except SHEETS_ERRORS as e:
            logger.error(f"Failed to read {sheet_name}!{range_ref}: {e}")
            raise DataStoreError(f"Failed to read {sheet_name}!{range_ref}: {e}") from e

        return response.get('values', [])

    def write_range(self, sheet_name: str, range_ref: str, values: List[List[Any]]):
        """Write cell values as-is (RAW input)"""
        try:
            self.service.spreadsheets().values().update(
                spreadsheetId=self.sheet_id,
                range=f"{sheet_name}!{range_ref}",
                valueInputOption='RAW',
                body={'values': values}
            ).execute()

        except SHEETS_ERRORS as e:
            logger.error(f"Failed to write {sheet_name}!{range_ref}: {e}")
            raise DataStoreError(f"Failed to write {sheet_name}!{range_ref}: {e}") from e

    def read_title_rows(self) -> List[SpreadsheetRow]:
        """Read the title column, one SpreadsheetRow per physical row"""
        first_row = range_start_row(self.title_range)
        if first_row < 2:
            raise DataStoreError(
                f"Title range {self.title_range} must start at row 2 or later (row 1 is the header)"
            )

        values = self.read_range(self.sheet_name, self.title_range)

        rows = []
        for offset, cells in enumerate(values):
            title = str(cells[0]).strip() if cells else ""
            rows.append(SpreadsheetRow(row_index=first_row + offset, title=title))

        if not rows:
            logger.info(f"No data found in {self.sheet_name}!{self.title_range}")
        else:
            logger.info(f"Read {len(rows)} title rows from {self.sheet_name}")

        return rows

    def write_record(self, row: SpreadsheetRow, record: GameRecord):
        """Write a record's display fields into its row"""
        range_ref = row.range_ref(self.first_write_column, self.last_write_column)
        self.write_range(self.sheet_name, range_ref, [record.to_row()])
        logger.info(f"Updated {self.sheet_name}!{range_ref} for {row.title}")

    def get_sheet_info(self):
        """Get basic information about the sheet"""
        try:
            sheet_metadata = self.service.spreadsheets().get(
                spreadsheetId=self.sheet_id
            ).execute()

            return {
                'title': sheet_metadata.get('properties', {}).get('title', 'Unknown'),
                'sheet_id': self.sheet_id,
                'url': f"https://docs.google.com/spreadsheets/d/{self.sheet_id}/edit"
            }

        except SHEETS_ERRORS as e:
            logger.error(f"Failed to get sheet info: {e}")
            return None
