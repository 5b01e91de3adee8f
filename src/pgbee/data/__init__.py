"""Leaderboard data parsing and ranking"""

from .leaderboard import (
    CsvFormat,
    SHEET_FORMAT,
    LeaderboardEntry,
    placeholder_entries,
    parse_leaderboard_csv,
    rank_entries,
    load_leaderboard,
)

__all__ = [
    "CsvFormat",
    "SHEET_FORMAT",
    "LeaderboardEntry",
    "placeholder_entries",
    "parse_leaderboard_csv",
    "rank_entries",
    "load_leaderboard",
]
