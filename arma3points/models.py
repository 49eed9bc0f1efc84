# arma3points/models.py

from dataclasses import asdict, dataclass
from typing import Any, Dict, NamedTuple

RANK_NOT_AVAILABLE = "not available"


class PlayerRow(NamedTuple):
    """One row of the online players widget."""

    rank: str
    name: str
    score: str


@dataclass(frozen=True)
class RawStatsBlock:
    """Flattened text of one titled section on a player profile page."""

    title: str
    text: str


@dataclass(frozen=True)
class ProfileStats:
    """Current and all-time stats parsed from a player profile page."""

    current_minutes: int = 0
    current_hours: int = 0
    current_remaining_minutes: int = 0
    current_spm: str = "0"
    all_time_score: str = "0"
    all_time_minutes: int = 0
    all_time_hours: int = 0
    all_time_remaining_minutes: int = 0
    all_time_spm: str = "0"
    rank: str = RANK_NOT_AVAILABLE


@dataclass(frozen=True)
class PlayerStatsRecord:
    """Everything shown for a player after one fetch cycle."""

    session_score: str = "0"
    current_minutes: int = 0
    current_hours: int = 0
    current_remaining_minutes: int = 0
    current_spm: str = "0"
    all_time_score: str = "0"
    all_time_minutes: int = 0
    all_time_hours: int = 0
    all_time_remaining_minutes: int = 0
    all_time_spm: str = "0"
    rank: str = RANK_NOT_AVAILABLE

    @classmethod
    def from_profile(cls, session_score: str, profile: ProfileStats) -> "PlayerStatsRecord":
        return cls(session_score=session_score, **asdict(profile))

    @property
    def has_rank(self) -> bool:
        return self.rank != RANK_NOT_AVAILABLE

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)
