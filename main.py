#!/usr/bin/env python3
# main.py
"""
Terminal stats tracker for players on the Bad Company PMC Arma 3 server.

Usage:
    python main.py "Corpse Decay [x]"
    python main.py "Corpse Decay [x]" --once --json
    python main.py "Corpse Decay [x]" --interval 30 --verbose
    python main.py --online
"""

import argparse
import json
import logging
import sys
import time

from arma3points.http_client import NetworkError
from arma3points.scraper import GameTrackerScraper, fetch_player_stats, iter_player_rows
from arma3points.settings import REFRESH_INTERVAL_SECONDS, REQUEST_TIMEOUT_SECONDS
from arma3points.ui import TerminalUI

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description='Track a player\'s GameTracker stats on the Arma 3 server',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python main.py "Corpse Decay [x]"
  python main.py "Corpse Decay [x]" --once
  python main.py "Corpse Decay [x]" --once --json
  python main.py --online
        """
    )

    parser.add_argument('nickname', nargs='?', help='In-game nickname including clan tag')
    parser.add_argument('--once', action='store_true', help='Fetch once and exit')
    parser.add_argument(
        '--interval', type=int, default=REFRESH_INTERVAL_SECONDS,
        help=f'Seconds between refreshes (default: {REFRESH_INTERVAL_SECONDS})'
    )
    parser.add_argument(
        '--timeout', type=float, default=REQUEST_TIMEOUT_SECONDS,
        help=f'HTTP timeout per page in seconds (default: {REQUEST_TIMEOUT_SECONDS})'
    )
    parser.add_argument('--json', action='store_true', help='Print stats as JSON')
    parser.add_argument('--online', action='store_true', help='List players currently online and exit')
    parser.add_argument('--verbose', action='store_true', help='Verbose logging')
    return parser


def _print_json(nickname: str, result) -> None:
    payload = {
        'nickname': nickname,
        'timestamp': result.timestamp,
        'stats': result.record.to_dict() if result.record else None,
        'error': result.error.message if result.error else None,
    }
    print(json.dumps(payload, indent=2))


def run(args, scraper: GameTrackerScraper, ui: TerminalUI) -> int:
    """Run fetch cycles until interrupted. Returns the process exit code."""
    nickname = args.nickname.strip()

    while True:
        result = fetch_player_stats(nickname, scraper=scraper)
        if args.json:
            _print_json(nickname, result)
        else:
            ui.show_result(nickname, result, interval=0 if args.once else args.interval)

        if args.once:
            return 0 if result.ok else 1
        logger.debug("Next refresh in %ss", args.interval)
        time.sleep(args.interval)


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.timeout <= 0:
        parser.error('--timeout must be positive')

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format='%(asctime)s %(levelname)s %(name)s: %(message)s',
    )

    ui = TerminalUI()
    scraper = GameTrackerScraper(timeout_seconds=args.timeout)

    if args.online:
        try:
            rows = list(iter_player_rows(scraper.fetch_widget()))
        except NetworkError as e:
            ui.show_error(f"Could not load online players: {e}")
            return 1
        ui.show_online_players(rows)
        return 0

    if not args.nickname or not args.nickname.strip():
        parser.error('nickname is required')

    if args.interval <= 0:
        parser.error('--interval must be positive')

    try:
        return run(args, scraper, ui)
    except KeyboardInterrupt:
        print("\nStopped.")
        return 0


if __name__ == '__main__':
    sys.exit(main())
