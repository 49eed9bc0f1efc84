# arma3points/scraper/core.py

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Optional
from urllib.parse import quote, urlencode

from arma3points.http_client import NetworkError, PageClient
from arma3points.models import PlayerStatsRecord
from arma3points.settings import (
    GAME_SERVER,
    REQUEST_TIMEOUT_SECONDS,
    STATS_BASE_URL,
    WIDGET_BASE_URL,
    WIDGET_THEME,
)
from .profile import parse_profile
from .session_score import locate_session_score

logger = logging.getLogger(__name__)


class FetchError(Exception):
    """Raised when stats for a player could not be fetched this cycle."""

    def __init__(self, nickname: str, message: str):
        super().__init__(message)
        self.nickname = nickname
        self.message = message


@dataclass(frozen=True)
class FetchResult:
    """Outcome of one fetch cycle: a record or an error, plus HH:MM:SS."""

    record: Optional[PlayerStatsRecord]
    error: Optional[FetchError]
    timestamp: str

    @property
    def ok(self) -> bool:
        return self.error is None


def encode_nickname(nickname: str) -> str:
    """
    Percent-encode a nickname for use as a URL path segment.

    Spaces become %20 (never '+'); letters, digits and '-_.*' are kept.
    'Corpse Decay [x]' -> 'Corpse%20Decay%20%5Bx%5D'.
    """
    return quote(nickname, safe="*").replace("~", "%7E")


def timestamp_now() -> str:
    return datetime.now().strftime("%H:%M:%S")


class GameTrackerScraper:
    """Scrape a player's live score and profile stats from GameTracker."""

    def __init__(
        self,
        timeout_seconds: float = REQUEST_TIMEOUT_SECONDS,
        game_server: str = GAME_SERVER,
        client: Optional[PageClient] = None,
    ):
        self.game_server = game_server
        self.client = client or PageClient(timeout_seconds=timeout_seconds)

    def widget_url(self) -> str:
        params = (("host", self.game_server),) + WIDGET_THEME
        return f"{WIDGET_BASE_URL}?{urlencode(params, safe=':')}"

    def profile_url(self, nickname: str) -> str:
        return f"{STATS_BASE_URL}/player/{encode_nickname(nickname)}/{self.game_server}/"

    def fetch_widget(self) -> str:
        return self.client.get_html(self.widget_url())

    def scrape_player_stats(self, nickname: str) -> PlayerStatsRecord:
        """
        Fetch and merge the session score and profile stats for `nickname`.

        Raises:
            ValueError: If nickname is blank
            FetchError: If either page cannot be retrieved or parsing fails
        """
        if not nickname or not nickname.strip():
            raise ValueError("Nickname is required")

        profile_url = self.profile_url(nickname)
        logger.debug("Player Stats URL: %s", profile_url)

        try:
            widget_html = self.fetch_widget()
            profile_html = self.client.get_html(profile_url)
            session_score = locate_session_score(widget_html, nickname)
            profile = parse_profile(profile_html)
        except NetworkError as exc:
            raise FetchError(nickname, f"Failed to fetch player data: {exc}") from exc
        except Exception as exc:
            raise FetchError(nickname, f"Failed to parse player data: {exc}") from exc

        return PlayerStatsRecord.from_profile(session_score, profile)


def fetch_player_stats(nickname: str, scraper: Optional[GameTrackerScraper] = None) -> FetchResult:
    """Run one fetch cycle and capture its completion time."""
    scraper = scraper or GameTrackerScraper()
    try:
        record = scraper.scrape_player_stats(nickname)
    except FetchError as exc:
        logger.info("Fetch failed for '%s': %s", nickname, exc.message)
        return FetchResult(record=None, error=exc, timestamp=timestamp_now())
    return FetchResult(record=record, error=None, timestamp=timestamp_now())
