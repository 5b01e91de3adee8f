"""API clients for the leaderboard data source"""

from .sheets import SheetClient

__all__ = [
    "SheetClient",
]
