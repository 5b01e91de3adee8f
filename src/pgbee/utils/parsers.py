"""
Parsing utilities for the PgBee leaderboard

Cell-level helpers used when reading the published sheet.
"""

import re

# Optional sign followed by ASCII digits, after leading whitespace
LEADING_INT_PATTERN = re.compile(r'^\s*([+-]?[0-9]+)')


def parse_int_cell(value: str) -> int:
    """
    Parse the leading integer of a sheet cell.

    Anything that does not start with an integer counts as zero, so a
    blank week or a stray note never breaks the row total.

    Examples:
        >>> parse_int_cell(" 10 ")
        10
        >>> parse_int_cell("12abc")
        12
        >>> parse_int_cell("3.7")
        3
        >>> parse_int_cell("abc")
        0
        >>> parse_int_cell("")
        0
        >>> parse_int_cell("\u0663")
        0
    """
    if not value:
        return 0

    match = LEADING_INT_PATTERN.match(value)
    if match:
        try:
            return int(match.group(1))
        except ValueError:
            # Longer than the interpreter's int conversion limit
            return 0

    return 0


def strip_quotes(value: str, quote_char: str = '"') -> str:
    """
    Remove one enclosing pair of quote characters.

    Examples:
        >>> strip_quotes('"Bob"')
        'Bob'
        >>> strip_quotes('"Bob')
        '"Bob'
    """
    if len(value) >= 2 and value.startswith(quote_char) and value.endswith(quote_char):
        return value[1:-1]
    return value


def format_score(score: int) -> str:
    """Format a score with thousands separators"""
    return f"{score:,}"
