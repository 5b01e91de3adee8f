"""
Dashboard HTML Generator

Renders the leaderboard view state as a self-contained HTML page.
"""

from html import escape
from pathlib import Path
from ..config import Config
from ..utils.logging import get_logger
from . import state as view

logger = get_logger(__name__)

# Avatar chosen by entry id % 3
AVATARS = ("👻", "👩‍💼", "👨‍💻")


def avatar_for(entry_id: int) -> str:
    """Deterministic avatar glyph for an entry"""
    return AVATARS[entry_id % len(AVATARS)]


def _render_entry(entry) -> str:
    return f'''
            <div class="entry" data-id="{entry.id}">
                <div class="entry-left">
                    <div class="avatar">
                        <span class="glyph">{avatar_for(entry.id)}</span>
                        <div class="rank-badge">{escape(entry.rank_label)}</div>
                    </div>
                    <span class="entry-name">{escape(entry.name)}</span>
                </div>
                <div class="entry-right">
                    <span class="entry-score">{entry.score}</span>
                    <span class="entry-unit">Points</span>
                </div>
            </div>'''


def render_dashboard_html(state: view.ViewState) -> str:
    """
    Build the leaderboard page for a view state.

    The loading indicator and the error banner are rendered on top of the
    entry list; neither one hides the entries.

    Args:
        state: Current view state (see pgbee.ui.state)

    Returns:
        Complete HTML document
    """
    syncing_html = ""
    if view.is_loading(state):
        syncing_html = '<div class="syncing"><span class="pulse"></span>Syncing Sheet...</div>'

    message = view.error_message(state)
    error_html = ""
    if message:
        error_html = f'<div class="error-banner" role="alert">{escape(message)}</div>'

    entries_html = "".join(_render_entry(entry) for entry in state.entries)

    return f'''<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>{escape(Config.APP_TITLE)}</title>
    <style>
        :root {{
            --honey: #FDE047;
            --honey-dark: #CA8A04;
            --text-primary: #0F172A;
            --text-secondary: #64748B;
            --border: #F1F5F9;
        }}
        body {{
            margin: 0;
            font-family: -apple-system, BlinkMacSystemFont, 'Segoe UI', Roboto, sans-serif;
            background: #fff;
            color: var(--text-primary);
            display: flex;
            flex-direction: column;
            align-items: center;
        }}
        header {{
            width: 100%;
            max-width: 32rem;
            display: flex;
            justify-content: space-between;
            align-items: center;
            padding: 2rem 1.5rem;
            box-sizing: border-box;
        }}
        .brand {{ font-size: 1.875rem; font-weight: 700; }}
        .brand .pg {{ color: #FACC15; }}
        .syncing {{
            display: flex;
            align-items: center;
            gap: 0.5rem;
            font-size: 0.75rem;
            color: var(--honey-dark);
            background: #FEFCE8;
            border: 1px solid #FEF08A;
            border-radius: 9999px;
            padding: 0.25rem 0.75rem;
        }}
        .pulse {{
            width: 0.5rem;
            height: 0.5rem;
            border-radius: 9999px;
            background: #EAB308;
        }}
        main {{ width: 100%; max-width: 32rem; padding: 0 1rem; box-sizing: border-box; }}
        h1 {{ text-align: center; font-size: 1.875rem; margin: 0.5rem 0; }}
        .subtitle {{ text-align: center; color: var(--text-secondary); font-size: 0.875rem; margin-bottom: 2.5rem; }}
        .error-banner {{
            margin-bottom: 1.5rem;
            padding: 1rem;
            background: #FEF2F2;
            color: #DC2626;
            font-size: 0.875rem;
            border: 1px solid #FEE2E2;
            border-radius: 0.75rem;
        }}
        .entries {{ display: flex; flex-direction: column; gap: 1rem; }}
        .entry {{
            display: flex;
            align-items: center;
            justify-content: space-between;
            border: 1px solid var(--border);
            border-left: 0.5rem solid #FACC15;
            border-radius: 1rem;
            padding: 1rem;
            box-shadow: 0 1px 2px rgba(0,0,0,0.05);
        }}
        .entry-left {{ display: flex; align-items: center; gap: 1rem; }}
        .avatar {{
            position: relative;
            width: 3.5rem;
            height: 3.5rem;
            border-radius: 9999px;
            background: #F9FAFB;
            border: 2px solid #FEF9C3;
            display: flex;
            align-items: center;
            justify-content: center;
        }}
        .glyph {{ font-size: 1.5rem; }}
        .rank-badge {{
            position: absolute;
            right: -0.25rem;
            bottom: -0.25rem;
            width: 1.5rem;
            height: 1.5rem;
            background: #000;
            color: #fff;
            font-size: 10px;
            font-weight: 700;
            display: flex;
            align-items: center;
            justify-content: center;
            clip-path: polygon(25% 0%, 75% 0%, 100% 50%, 75% 100%, 25% 100%, 0% 50%);
        }}
        .entry-name {{ font-size: 1.125rem; font-weight: 700; }}
        .entry-right {{ display: flex; flex-direction: column; align-items: flex-end; }}
        .entry-score {{ font-size: 1.5rem; font-weight: 900; }}
        .entry-unit {{
            font-size: 10px;
            color: #EAB308;
            font-weight: 700;
            text-transform: uppercase;
            letter-spacing: 0.05em;
        }}
    </style>
</head>
<body>
    <header>
        <div class="brand"><span class="pg">Pg</span>Bee</div>
        {syncing_html}
    </header>
    <main>
        <h1>{escape(Config.APP_TITLE)}</h1>
        <p class="subtitle">{escape(Config.APP_SUBTITLE)}</p>
        {error_html}
        <div class="entries">{entries_html}
        </div>
    </main>
</body>
</html>'''


def generate_html_dashboard(state: view.ViewState, output_path: Path = None) -> Path:
    """
    Write the leaderboard page to disk.

    Args:
        state: Current view state
        output_path: Custom output path (default: Config.DASHBOARD_OUTPUT)

    Returns:
        Path of the written file
    """
    final_output_path = Path(output_path or Config.DASHBOARD_OUTPUT)
    final_output_path.parent.mkdir(parents=True, exist_ok=True)
    with open(final_output_path, "w", encoding="utf-8") as f:
        f.write(render_dashboard_html(state))

    logger.info(f"📊 Dashboard saved to {final_output_path}")
    return final_output_path
