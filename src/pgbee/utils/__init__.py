"""Utility functions for the PgBee leaderboard"""

from .parsers import (
    parse_int_cell,
    strip_quotes,
    format_score,
)
from .logging import (
    setup_logging,
    get_logger,
    log_success,
    log_error,
)

__all__ = [
    # Parsers
    "parse_int_cell",
    "strip_quotes",
    "format_score",
    # Logging
    "setup_logging",
    "get_logger",
    "log_success",
    "log_error",
]
