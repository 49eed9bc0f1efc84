# arma3points/scraper/profile.py
"""
Parse a GameTracker player profile page.

The profile lays its stats out in side-by-side columns (div.item_float_left),
each headed by a div.section_title. Only the "CURRENT STATS" and
"ALL TIME STATS" columns are read; everything else is ignored.
"""

import logging
import re
from typing import Dict, List

from bs4 import BeautifulSoup

from arma3points.models import RANK_NOT_AVAILABLE, ProfileStats, RawStatsBlock
from .fields import FieldSpec, cell_text, extract_fields, parse_minutes, split_minutes

logger = logging.getLogger(__name__)

CONTAINER_CLASS = "item_float_left"
TITLE_SELECTOR = "div.section_title"

MINUTES_PATTERN = re.compile(r"Minutes Played:\s*(\d+)")
SPM_PATTERN = re.compile(r"Score per Minute:\s*([\d.]+)")
SCORE_PATTERN = re.compile(r"Score:\s*(\d+)")
RANK_PATTERN = re.compile(r"#(\d+ out of \d+)")

PROFILE_SECTIONS = {
    "CURRENT STATS": (
        FieldSpec("current_minutes", MINUTES_PATTERN),
        FieldSpec("current_spm", SPM_PATTERN),
    ),
    "ALL TIME STATS": (
        FieldSpec("all_time_score", SCORE_PATTERN),
        FieldSpec("all_time_minutes", MINUTES_PATTERN),
        FieldSpec("all_time_spm", SPM_PATTERN),
        FieldSpec("rank", RANK_PATTERN, RANK_NOT_AVAILABLE),
    ),
}


def _wraps_titled_columns(container) -> bool:
    return any(
        inner.select_one(TITLE_SELECTOR) is not None
        for inner in container.select(f"div.{CONTAINER_CLASS}")
    )


def extract_stats_blocks(profile_html: str) -> List[RawStatsBlock]:
    """
    Collect the title and flattened text of every stats column.

    A wrapper container holding titled columns of its own is skipped; the
    inner columns are read instead.

    Args:
        profile_html: Player profile page HTML

    Returns:
        One RawStatsBlock per container, in document order
    """
    soup = BeautifulSoup(profile_html or "", "html.parser")
    blocks: List[RawStatsBlock] = []

    for container in soup.select(f"div.{CONTAINER_CLASS}"):
        if _wraps_titled_columns(container):
            continue
        title = " ".join(cell_text(t) for t in container.select(TITLE_SELECTOR)).strip()
        blocks.append(RawStatsBlock(title=title, text=cell_text(container)))

    return blocks


def _parse_block(block: RawStatsBlock) -> Dict[str, str]:
    for title, specs in PROFILE_SECTIONS.items():
        if title in block.title:
            return extract_fields(block.text, specs)
    return {}


def _build_profile(raw: Dict[str, str]) -> ProfileStats:
    current_minutes = parse_minutes(raw.get("current_minutes"))
    all_time_minutes = parse_minutes(raw.get("all_time_minutes"))
    current_hours, current_remaining = split_minutes(current_minutes)
    all_time_hours, all_time_remaining = split_minutes(all_time_minutes)

    return ProfileStats(
        current_minutes=current_minutes,
        current_hours=current_hours,
        current_remaining_minutes=current_remaining,
        current_spm=raw.get("current_spm", "0"),
        all_time_score=raw.get("all_time_score", "0"),
        all_time_minutes=all_time_minutes,
        all_time_hours=all_time_hours,
        all_time_remaining_minutes=all_time_remaining,
        all_time_spm=raw.get("all_time_spm", "0"),
        rank=raw.get("rank", RANK_NOT_AVAILABLE),
    )


def parse_profile(profile_html: str) -> ProfileStats:
    """
    Parse current session and all-time stats from a profile page.

    Each section is read independently; a missing or malformed section leaves
    its fields at their defaults. Parsing never raises: on any unexpected
    error an all-default ProfileStats is returned.
    """
    try:
        raw: Dict[str, str] = {}
        for block in extract_stats_blocks(profile_html):
            try:
                raw.update(_parse_block(block))
            except Exception as exc:
                logger.warning("Skipping malformed section '%s': %s", block.title, exc)
        return _build_profile(raw)
    except Exception as exc:
        logger.warning("Error parsing player stats: %s", exc)
        return ProfileStats()
