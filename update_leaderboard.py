"""
PgBee Leaderboard Updater
Fetches the published scoring sheet, ranks everyone and writes the dashboard

Usage:
    python update_leaderboard.py          # refresh and write leaderboard.html
    python update_leaderboard.py text     # refresh and print the ranking only
"""

import sys
from datetime import datetime

from pgbee.config import Config
from pgbee.ui import LeaderboardController, generate_html_dashboard
from pgbee.utils import format_score, log_error, log_success, setup_logging


def display_summary(controller):
    """Print the current ranking"""
    print(f"\n🐝 {Config.APP_TITLE} - {datetime.now().strftime('%Y-%m-%d %H:%M')}")
    print("-" * 50)

    if controller.error_message:
        print(f"  ⚠️  {controller.error_message}")

    for entry in controller.entries:
        print(f"  #{entry.rank:<3} {entry.name:<30} {format_score(entry.score):>8} pts")


def run(write_html: bool = True) -> int:
    """Refresh once and report. Returns the process exit code."""
    logger = setup_logging(log_file=Config.LOG_FILE)
    logger.debug(f"Config: {Config.as_dict()}")

    controller = LeaderboardController()
    controller.activate()
    if not controller.client.is_configured:
        # activate() only loads when configured; surface the banner message
        controller.refresh()

    if write_html:
        generate_html_dashboard(controller.state)

    display_summary(controller)

    if controller.error_message:
        log_error(controller.error_message)
        return 1

    log_success(f"Ranked {len(controller.entries)} entries")
    return 0


def main(argv=None) -> int:
    """Dispatch on the optional mode argument"""
    argv = sys.argv[1:] if argv is None else argv
    if argv and argv[0] == "text":
        return run(write_html=False)
    return run()


if __name__ == "__main__":
    sys.exit(main())
