import json
import logging
import os
import threading
from typing import Any, List, Optional

import gspread
from google.oauth2.service_account import Credentials

from models.booking import Record
from settings import Settings, settings

logger = logging.getLogger(__name__)

SCOPES = ["https://www.googleapis.com/auth/spreadsheets.readonly"]


class SheetServiceError(Exception):
    """Base error for reading the booking sheet"""


class SheetConfigError(SheetServiceError):
    """Credentials or sheet settings are missing or malformed"""


class SheetFetchError(SheetServiceError):
    """The sheet could not be reached or read"""


def rows_to_records(values: List[List[Any]]) -> List[Record]:
    """Turn a value grid into records keyed by the trimmed first row.

    Short rows are padded with empty strings so every record carries every
    header.
    """
    if not values:
        return []
    headers = [str(h or "").strip() for h in values[0]]
    records = []
    for row in values[1:]:
        records.append({
            header: str(row[i] if i < len(row) and row[i] is not None else "").strip()
            for i, header in enumerate(headers)
        })
    return records


class SheetService:
    def __init__(self, config: Settings = settings):
        self.settings = config
        self.gc = None
        self.client_lock = threading.Lock()

    def credential_source(self) -> Optional[str]:
        """Where credentials would be loaded from, without loading them"""
        if self.settings.service_key:
            return "GOOGLE_SERVICE_KEY"
        for path in self._credential_paths():
            if os.path.exists(path):
                return path
        return None

    def _credential_paths(self) -> List[str]:
        return [
            self.settings.credentials_file,
            "credentials.json",
            os.path.join(os.path.dirname(__file__), "..", "credentials.json"),
        ]

    def _load_credentials(self) -> Credentials:
        if self.settings.service_key:
            try:
                info = json.loads(self.settings.service_key)
            except json.JSONDecodeError as e:
                logger.error(
                    "Failed to parse GOOGLE_SERVICE_KEY as JSON: %s. "
                    "Paste the full service account key JSON, without extra quotes.", e
                )
                raise SheetConfigError("GOOGLE_SERVICE_KEY is not valid JSON") from e
            try:
                return Credentials.from_service_account_info(info, scopes=SCOPES)
            except (ValueError, KeyError) as e:
                raise SheetConfigError(f"GOOGLE_SERVICE_KEY is not a service account key: {e}") from e

        for path in self._credential_paths():
            if os.path.exists(path):
                logger.info("Loading Google Sheets credentials from: %s", path)
                return Credentials.from_service_account_file(path, scopes=SCOPES)

        raise SheetConfigError("GOOGLE_SERVICE_KEY env var is missing and no credentials file was found")

    def _client(self) -> gspread.Client:
        with self.client_lock:
            if self.gc is None:
                self.gc = gspread.authorize(self._load_credentials())
            return self.gc

    def get_values(self) -> List[List[Any]]:
        """Read the raw value grid, header row first"""
        if not self.settings.sheet_id:
            raise SheetConfigError("SHEET_ID is not set")

        client = self._client()
        sheet_range = self.settings.sheet_range
        try:
            spreadsheet = client.open_by_key(self.settings.sheet_id)
            result = spreadsheet.values_get(sheet_range)
        except Exception as e:
            raise SheetFetchError(f"Failed to read {sheet_range}: {e}") from e

        values = result.get("values", [])
        logger.info("Read %d rows from %s", len(values), sheet_range)
        return values

    def get_records(self) -> List[Record]:
        return rows_to_records(self.get_values())


sheet_service = SheetService()
