# tests/helpers.py

import os
from typing import Iterable, Optional, Tuple

FIXTURES_DIR = os.path.join(os.path.dirname(__file__), "fixtures")


def load_fixture(filename: str) -> str:
    with open(os.path.join(FIXTURES_DIR, filename), "r", encoding="utf-8") as f:
        return f.read()


def build_widget_html(rows: Iterable[Tuple[str, str, str]]) -> str:
    """Render (rank, name, score) rows as the flat widget cell sequence."""
    cells = []
    for rank, name, score in rows:
        cells.append(f'<div class="scrollable_on_c01">{rank}</div>')
        cells.append(f'<div class="scrollable_on_c02"><a href="/player/x/">{name}</a></div>')
        cells.append(f'<div class="scrollable_on_c03">{score}</div>')
    return (
        '<html><body><div class="scrollable_on">'
        + "\n".join(cells)
        + "</div></body></html>"
    )


def build_profile_html(current: Optional[str] = None, all_time: Optional[str] = None,
                       extra: Optional[str] = None) -> str:
    """Render a profile page with optional CURRENT / ALL TIME STATS columns."""
    columns = []
    if current is not None:
        columns.append(
            '<div class="item_float_left">'
            '<div class="section_title">CURRENT STATS</div>'
            f'{current}</div>'
        )
    if all_time is not None:
        columns.append(
            '<div class="item_float_left">'
            '<div class="section_title">ALL TIME STATS</div>'
            f'{all_time}</div>'
        )
    if extra is not None:
        columns.append(extra)
    return "<html><body>" + "\n".join(columns) + "</body></html>"
