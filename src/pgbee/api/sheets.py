"""
Published Sheet Client

Fetches the "Publish to Web" CSV export of the scoring sheet.
"""

import requests
from ..config import Config
from ..utils.logging import get_logger

logger = get_logger(__name__)


class SheetClient:
    """Client for a published Google Sheet CSV export"""

    def __init__(self, url: str = None, timeout: int = None):
        self.url = (Config.SHEET_URL if url is None else url).strip()
        self.timeout = timeout or Config.API_TIMEOUT

    @property
    def is_configured(self) -> bool:
        return bool(self.url)

    def fetch_csv(self) -> str:
        """
        Fetch the sheet as CSV text.

        Any non-2xx response is treated as a failure. No retry is attempted.

        Returns:
            Raw CSV text

        Raises:
            requests.RequestException: on transport errors or a non-success status
        """
        try:
            resp = requests.get(self.url, timeout=self.timeout)
            resp.raise_for_status()
        except requests.Timeout:
            logger.error("Sheet fetch timed out")
            raise
        except requests.RequestException as e:
            logger.error(f"Sheet fetch failed: {e}")
            raise

        text = resp.text
        logger.info(f"Fetched {len(text)} characters from published sheet")
        return text
