# arma3points/scraper/fields.py
"""
Typed field extraction from loosely structured GameTracker text.

Profile sections render as flat text such as
'Score: 1200 Minutes Played: 600 Score per Minute: 2.0', so fields are pulled
out with one regex each and fall back to a default when absent.
"""

import re
from typing import Dict, Iterable, NamedTuple, Optional, Tuple, Union


class FieldSpec(NamedTuple):
    """A named field, the regex whose first group holds it, and its default."""

    name: str
    pattern: Union[str, "re.Pattern[str]"]
    default: str = "0"


def extract_fields(text: str, specs: Iterable[FieldSpec]) -> Dict[str, str]:
    """
    Extract every field in `specs` from `text`.

    Args:
        text: Flattened section text
        specs: Field specifications to apply

    Returns:
        Mapping of field name to the first captured group, or the field's
        default when the pattern does not match
    """
    values: Dict[str, str] = {}
    for spec in specs:
        match = re.search(spec.pattern, text or "")
        values[spec.name] = match.group(1) if match else spec.default
    return values


def parse_minutes(value: Optional[str]) -> int:
    """Parse a minute count, treating non-numeric or negative text as 0."""
    clean = (value or "").replace(",", "").strip()
    if not re.fullmatch(r"[0-9]+", clean):
        return 0
    return int(clean)


def split_minutes(total_minutes: int) -> Tuple[int, int]:
    """Split minutes into (hours, remaining minutes), e.g. 125 -> (2, 5)."""
    total = max(total_minutes, 0)
    return divmod(total, 60)


def cell_text(element) -> str:
    """Trimmed, whitespace-normalized text of a BeautifulSoup element."""
    if element is None:
        return ""
    return element.get_text(" ", strip=True)


def first_link_text(element) -> str:
    """Trimmed text of the first anchor inside `element`, or ''."""
    if element is None:
        return ""
    link = element.find("a")
    return cell_text(link)
