"""
Leaderboard View State

The view is always in exactly one of four states. Each state carries the
entries that are on screen, so a failed load never blanks the list.
"""

from dataclasses import dataclass
from typing import Optional, Tuple, Union
from ..data.leaderboard import LeaderboardEntry

Entries = Tuple[LeaderboardEntry, ...]


@dataclass(frozen=True)
class Idle:
    """Nothing in flight, nothing loaded yet"""

    entries: Entries


@dataclass(frozen=True)
class Loading:
    """A fetch identified by token is in flight"""

    entries: Entries
    token: int


@dataclass(frozen=True)
class Loaded:
    entries: Entries


@dataclass(frozen=True)
class Error:
    """Last attempt failed; entries are the last good ones"""

    message: str
    entries: Entries


ViewState = Union[Idle, Loading, Loaded, Error]


def initial_state(entries) -> Idle:
    return Idle(entries=tuple(entries))


def start_loading(state: ViewState, token: int) -> Loading:
    return Loading(entries=state.entries, token=token)


def load_succeeded(state: ViewState, entries) -> Loaded:
    return Loaded(entries=tuple(entries))


def load_failed(state: ViewState, message: str) -> Error:
    return Error(message=message, entries=state.entries)


def config_missing(state: ViewState, message: str) -> Error:
    return Error(message=message, entries=state.entries)


def is_loading(state: ViewState) -> bool:
    return isinstance(state, Loading)


def error_message(state: ViewState) -> Optional[str]:
    return state.message if isinstance(state, Error) else None
