# arma3points/scraper/__init__.py
"""
Web scraping module for GameTracker player stats.

Fetches the current players widget and the player profile page over plain
HTTP and extracts the session score and profile stats with BeautifulSoup.
"""

from .core import (
    FetchError,
    FetchResult,
    GameTrackerScraper,
    encode_nickname,
    fetch_player_stats,
)
from .profile import extract_stats_blocks, parse_profile
from .session_score import iter_player_rows, locate_session_score

__all__ = [
    'FetchError',
    'FetchResult',
    'GameTrackerScraper',
    'encode_nickname',
    'fetch_player_stats',
    'extract_stats_blocks',
    'parse_profile',
    'iter_player_rows',
    'locate_session_score',
]
