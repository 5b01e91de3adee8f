"""
Leaderboard Data

Parse the published sheet CSV into leaderboard entries and rank them.

Sheet layout:
    line 0  -> "NAME, coins awarded, coins awarded, ..."  (column headers)
    line 1  -> ", 12/02, 12/09, ..."                      (period labels)
    line 2+ -> "name, value1, value2, ..."                (one participant per line)
"""

import csv
import re
from dataclasses import dataclass, replace
from typing import Iterable, List
from ..config import Config
from ..utils.logging import get_logger
from ..utils.parsers import parse_int_cell, strip_quotes

logger = get_logger(__name__)

LINE_SPLIT_PATTERN = re.compile(r'\r?\n')


@dataclass(frozen=True)
class CsvFormat:
    """
    Structural contract of the published export.

    Attributes:
        header_lines: Leading lines skipped unconditionally
        delimiter: Column separator
        quote_char: Quote character stripped from around the name
        quote_aware: Whether delimiters inside quotes are honored.
            Off for the published export: lines are split naively, so a
            name containing a comma is split across columns.
    """

    header_lines: int = 2
    delimiter: str = ","
    quote_char: str = '"'
    quote_aware: bool = False


SHEET_FORMAT = CsvFormat()


@dataclass(frozen=True)
class LeaderboardEntry:
    """One participant row"""

    id: int
    name: str
    score: int
    rank: int = 0

    @property
    def rank_label(self) -> str:
        return str(self.rank)


def placeholder_entries(count: int = None) -> List[LeaderboardEntry]:
    """Rows shown before the first successful load"""
    count = Config.PLACEHOLDER_ROWS if count is None else count
    return [
        LeaderboardEntry(id=i, name="loading...", score=0, rank=i)
        for i in range(1, count + 1)
    ]


def _split_columns(line: str, fmt: CsvFormat) -> List[str]:
    if fmt.quote_aware:
        return next(csv.reader([line], delimiter=fmt.delimiter, quotechar=fmt.quote_char))
    return line.split(fmt.delimiter)


def parse_leaderboard_csv(text: str, fmt: CsvFormat = SHEET_FORMAT) -> List[LeaderboardEntry]:
    """
    Parse sheet CSV text into unranked entries.

    Every column after the name is summed horizontally; cells that are
    empty or not integers count as zero. Rows without a name are dropped.

    Args:
        text: Raw CSV text
        fmt: Format contract (header lines, delimiter, quoting)

    Returns:
        Entries in input order, rank 0. The id of each entry is its
        line index in the original text.
    """
    lines = LINE_SPLIT_PATTERN.split(text)
    entries = []

    for i in range(fmt.header_lines, len(lines)):
        line = lines[i].strip()
        if not line:
            continue

        cols = _split_columns(line, fmt)
        if len(cols) < 2:
            continue

        name = strip_quotes(cols[0].strip(), fmt.quote_char)
        if not name:
            continue

        total_score = sum(parse_int_cell(col) for col in cols[1:])
        entries.append(LeaderboardEntry(id=i, name=name, score=total_score))

    logger.debug(f"Parsed {len(entries)} entries from {len(lines)} lines")
    return entries


def rank_entries(entries: Iterable[LeaderboardEntry]) -> List[LeaderboardEntry]:
    """
    Sort by score (descending) and assign ranks 1..n.

    The sort is stable, so tied scores keep their input order.
    """
    ordered = sorted(entries, key=lambda e: e.score, reverse=True)
    return [replace(entry, rank=index + 1) for index, entry in enumerate(ordered)]


def load_leaderboard(text: str, fmt: CsvFormat = SHEET_FORMAT) -> List[LeaderboardEntry]:
    """Parse and rank in one step"""
    ranked = rank_entries(parse_leaderboard_csv(text, fmt))
    logger.info(f"Loaded {len(ranked)} leaderboard entries")
    return ranked
