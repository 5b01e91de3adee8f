"""
Centralized configuration for the PgBee leaderboard

Sheet URL, timeouts, output paths and user-facing messages in one place.
Supports environment variables via .env file.
"""

import os
from pathlib import Path

# Try to load .env file if python-dotenv is available
try:
    from dotenv import load_dotenv
    load_dotenv()
except ImportError:
    pass  # dotenv not installed, use defaults


# "Publish to Web" CSV link of the scoring sheet
DEFAULT_SHEET_URL = (
    "https://docs.google.com/spreadsheets/d/e/"
    "2PACX-1vSgzWqPstEpxBps7xVg-dSrOy_n7jUIgXLU9aflxWm0EUayjk6qFcDQ5Klhbftmw5aA2l3iElw8nwmG"
    "/pub?gid=0&single=true&output=csv"
)


class Config:
    """Application configuration"""

    # Base paths
    BASE_DIR = Path(__file__).parent.parent.parent  # Project root

    # Data source
    SHEET_URL = os.getenv("SHEET_URL", DEFAULT_SHEET_URL).strip()

    # API settings
    API_TIMEOUT = int(os.getenv("API_TIMEOUT", "30"))

    # File paths
    DASHBOARD_OUTPUT = BASE_DIR / "leaderboard.html"
    LOG_FILE = BASE_DIR / "logs" / "leaderboard.log"

    # View
    APP_TITLE = "Performance Leaderboard"
    APP_SUBTITLE = "Weekly Top Performers"
    PLACEHOLDER_ROWS = 5

    # Banner messages
    CONFIG_MISSING_MESSAGE = "Please add your Google Sheet CSV Link in the code configuration."
    LOAD_FAILED_MESSAGE = "Failed to load data. Ensure the Sheet is 'Published to Web' as CSV."

    @classmethod
    def as_dict(cls) -> dict:
        """Export config as dictionary (useful for debugging)"""
        return {
            "BASE_DIR": str(cls.BASE_DIR),
            "SHEET_URL": cls.SHEET_URL,
            "API_TIMEOUT": cls.API_TIMEOUT,
            "DASHBOARD_OUTPUT": str(cls.DASHBOARD_OUTPUT),
        }

