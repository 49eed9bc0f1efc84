# arma3points/scraper/session_score.py
"""
Live session score lookup in the GameTracker "current players" widget.

The widget renders its player table as a flat run of divs with no row
container:

    <div class="scrollable_on_c01">1.</div>
    <div class="scrollable_on_c02"><a href="...">Corpse Decay [x]</a></div>
    <div class="scrollable_on_c03">154</div>
    <div class="scrollable_on_c01">2.</div>
    ...

Rows are rebuilt by a small state machine driven by the cell classes.
"""

import logging
from enum import Enum
from typing import Iterator, Optional

from bs4 import BeautifulSoup

from arma3points.matcher import names_match
from arma3points.models import PlayerRow
from .fields import cell_text, first_link_text

logger = logging.getLogger(__name__)

RANK_CLASS = "scrollable_on_c01"
NAME_CLASS = "scrollable_on_c02"
SCORE_CLASS = "scrollable_on_c03"
CELL_SELECTOR = f"div.{RANK_CLASS}, div.{NAME_CLASS}, div.{SCORE_CLASS}"

NOT_ONLINE_SCORE = "0"


class RowState(Enum):
    AWAITING_NAME = "awaiting_name"
    AWAITING_SCORE = "awaiting_score"
    ROW_COMPLETE = "row_complete"


def _cell_kind(cell) -> Optional[str]:
    classes = cell.get("class") or []
    for kind in (RANK_CLASS, NAME_CLASS, SCORE_CLASS):
        if kind in classes:
            return kind
    return None


def iter_player_rows(widget_html: str) -> Iterator[PlayerRow]:
    """
    Yield every complete (rank, name, score) row of the widget in order.

    A row is emitted on its score cell once a name has been seen, so the last
    row needs no trailing rank cell. Rows missing a name or a score are
    dropped, and a second name cell before the score is ignored.
    """
    soup = BeautifulSoup(widget_html or "", "html.parser")

    state = RowState.AWAITING_NAME
    rank = ""
    name = ""

    for cell in soup.select(CELL_SELECTOR):
        kind = _cell_kind(cell)

        if kind == RANK_CLASS:
            state = RowState.AWAITING_NAME
            rank = cell_text(cell)
            name = ""

        elif kind == NAME_CLASS:
            if state not in (RowState.AWAITING_NAME, RowState.ROW_COMPLETE):
                continue
            name = first_link_text(cell)
            logger.debug("Found player name: '%s'", name)
            if name:
                state = RowState.AWAITING_SCORE

        elif kind == SCORE_CLASS:
            if state is RowState.AWAITING_SCORE:
                score = cell_text(cell)
                logger.debug("Found player score: '%s' for '%s'", score, name)
                yield PlayerRow(rank=rank, name=name, score=score)
            state = RowState.ROW_COMPLETE
            rank = ""
            name = ""


def locate_session_score(widget_html: str, query_name: str) -> str:
    """
    Find the current session score of `query_name` in the widget HTML.

    Args:
        widget_html: HTML of the current players widget
        query_name: Nickname to look for

    Returns:
        The score text of the first matching row, or "0" when the player is
        not online
    """
    logger.debug("Searching for player: %s", query_name)
    for row in iter_player_rows(widget_html):
        if names_match(row.name, query_name):
            logger.debug("Found player! Score: %s", row.score)
            return row.score or NOT_ONLINE_SCORE

    logger.debug("Player not found in online list")
    return NOT_ONLINE_SCORE
