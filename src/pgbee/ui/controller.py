"""
Leaderboard Controller

Orchestrates fetch -> parse -> sort -> rank and owns the view state.

Every refresh takes a new request token. Only the outcome carrying the
latest token is applied, so when refreshes overlap the last one triggered
wins regardless of which response arrives last.
"""

from typing import List, Optional
from ..api.sheets import SheetClient
from ..config import Config
from ..data.leaderboard import (
    SHEET_FORMAT,
    CsvFormat,
    LeaderboardEntry,
    load_leaderboard,
    placeholder_entries,
)
from ..utils.logging import get_logger
from . import state as view

logger = get_logger(__name__)


class LeaderboardController:
    """Owns the leaderboard view state"""

    def __init__(self, client: SheetClient = None, fmt: CsvFormat = SHEET_FORMAT):
        self.client = client or SheetClient()
        self.fmt = fmt
        self.state: view.ViewState = view.initial_state(placeholder_entries())
        self._latest_token = 0
        self._activated = False

    # --- read-only view of the state ---

    @property
    def loading(self) -> bool:
        return view.is_loading(self.state)

    @property
    def error_message(self) -> Optional[str]:
        return view.error_message(self.state)

    @property
    def entries(self) -> List[LeaderboardEntry]:
        return list(self.state.entries)

    # --- triggers ---

    def activate(self):
        """Load once when the view is first shown"""
        if self._activated:
            return
        self._activated = True
        if self.client.is_configured:
            self.refresh()

    def refresh(self):
        """
        Fetch, parse and rank the sheet, then replace the entries.

        Failures are reported through the view state and never raised.
        """
        token = self.begin_refresh()
        if token is None:
            return

        try:
            csv_text = self.client.fetch_csv()
            ranked = load_leaderboard(csv_text, self.fmt)
        except Exception as e:
            logger.error(f"Failed to load sheet: {e}")
            self.fail(token, Config.LOAD_FAILED_MESSAGE)
        else:
            self.complete(token, ranked)
        finally:
            # Never leave this request stuck in Loading
            if view.is_loading(self.state) and self.state.token == token:
                self.fail(token, Config.LOAD_FAILED_MESSAGE)

    # --- transitions ---

    def begin_refresh(self) -> Optional[int]:
        """
        Move to Loading under a fresh token.

        Returns:
            The request token, or None if no sheet URL is configured
        """
        if not self.client.is_configured:
            logger.warning("No sheet URL configured")
            self.state = view.config_missing(self.state, Config.CONFIG_MISSING_MESSAGE)
            return None

        self._latest_token += 1
        self.state = view.start_loading(self.state, self._latest_token)
        logger.debug(f"Refresh {self._latest_token} started")
        return self._latest_token

    def complete(self, token: int, entries: List[LeaderboardEntry]) -> bool:
        """Apply a successful load. Returns False if the token is stale."""
        if not self._is_current(token):
            return False
        self.state = view.load_succeeded(self.state, entries)
        logger.info(f"Leaderboard updated with {len(entries)} entries")
        return True

    def fail(self, token: int, message: str) -> bool:
        """Apply a failed load. Returns False if the token is stale."""
        if not self._is_current(token):
            return False
        self.state = view.load_failed(self.state, message)
        return True

    def _is_current(self, token: int) -> bool:
        if not (view.is_loading(self.state) and self.state.token == token):
            logger.debug(f"Discarding stale refresh {token} (latest is {self._latest_token})")
            return False
        return True
