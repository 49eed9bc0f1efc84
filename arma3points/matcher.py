# arma3points/matcher.py

import re

_WHITESPACE = re.compile(r"\s+")
_BRACKETS = re.compile(r"[\[\]]")
_SPACE_AROUND_BRACKET = re.compile(r"\s*([\[\]])\s*")


def collapse_whitespace(name: str) -> str:
    """Collapse whitespace runs to a single space and trim."""
    return _WHITESPACE.sub(" ", name).strip()


def normalize_name(name: str) -> str:
    """
    Normalize a player name for loose comparison.

    Collapses whitespace, drops clan tag brackets and lower-cases, so
    'Corpse  Decay [X]' becomes 'corpse decay x'.
    """
    return collapse_whitespace(_BRACKETS.sub("", collapse_whitespace(name))).lower()


def _tight_tag_name(name: str) -> str:
    # 'Foo [X]' and 'Foo[X]' both become 'foox'
    return normalize_name(_SPACE_AROUND_BRACKET.sub(r"\1", name))


def names_match(found_name: str, query_name: str) -> bool:
    """
    Decide whether a scraped name and a searched name denote the same player.

    Args:
        found_name: Name as rendered on GameTracker
        query_name: Nickname entered by the user

    Returns:
        True if the names are equal ignoring case, whitespace runs or
        clan tag brackets. No partial matching is done.
    """
    if found_name.lower() == query_name.lower():
        return True
    if collapse_whitespace(found_name).lower() == collapse_whitespace(query_name).lower():
        return True
    if normalize_name(found_name) == normalize_name(query_name):
        return True
    return _tight_tag_name(found_name) == _tight_tag_name(query_name)
