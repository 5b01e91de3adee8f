"""Leaderboard view: state, controller and HTML rendering"""

from .controller import LeaderboardController
from .dashboard import avatar_for, render_dashboard_html, generate_html_dashboard

__all__ = [
    "LeaderboardController",
    "avatar_for",
    "render_dashboard_html",
    "generate_html_dashboard",
]
