# arma3points/ui.py

from typing import Iterable

from arma3points.models import PlayerRow, PlayerStatsRecord
from arma3points.scraper import FetchError, FetchResult


def format_duration(hours: int, minutes: int) -> str:
    return f"{hours}h {minutes}m"


def format_fetch_error(error: FetchError) -> str:
    """Build the message shown when a fetch cycle fails."""
    return (
        f"Failed to load stats for '{error.nickname}'. Make sure:\n"
        "1. You're using the exact in-game nickname and clan tag\n"
        "2. The player exists on gametracker.com\n"
        "3. Check your internet connection\n\n"
        f"Technical details: {error.message}"
    )


class TerminalUI:
    """Simple terminal-based UI."""

    WIDTH = 40

    def _rule(self, char: str = "=") -> None:
        print(char * self.WIDTH)

    @staticmethod
    def _row(label: str, value: str) -> None:
        print(f"  {label:<8}{value:>28}")

    def show_header(self, nickname: str) -> None:
        print("\n" + "=" * self.WIDTH)
        print(nickname.center(self.WIDTH))
        self._rule()

    def show_stats(self, record: PlayerStatsRecord) -> None:
        """Display one player's session and all-time stats."""
        print("Current Session Score".center(self.WIDTH))
        print(record.session_score.center(self.WIDTH))
        self._rule("-")

        print("CURRENT SESSION")
        self._row("Time:", format_duration(record.current_hours, record.current_remaining_minutes))
        self._row("SPM:", record.current_spm)
        self._rule("-")

        print("ALL TIME")
        self._row("Score:", record.all_time_score)
        self._row("Time:", format_duration(record.all_time_hours, record.all_time_remaining_minutes))
        self._row("SPM:", record.all_time_spm)
        self._row("Rank:", f"#{record.rank}" if record.has_rank else record.rank)

    def show_error(self, message: str) -> None:
        print(f"\nError: {message}")

    def show_result(self, nickname: str, result: FetchResult, interval: int = 0) -> None:
        """Render a full fetch cycle: header, stats or error, update footer."""
        self.show_header(nickname)
        if result.error is not None:
            print(format_fetch_error(result.error))
        else:
            self.show_stats(result.record)
        self._rule()
        print(f"Updated: {result.timestamp}")
        if interval:
            print(f"Auto-refresh: {interval}s")

    def show_online_players(self, rows: Iterable[PlayerRow]) -> None:
        """Display everyone currently on the server."""
        rows = list(rows)
        print("\n" + "=" * self.WIDTH)
        print("Players Online:")
        self._rule()
        if not rows:
            print("No players online")
        for row in rows:
            print(f"{row.rank:>4} {row.name:<26}{row.score:>8}")
        self._rule()
