"""
Life-event extraction from a free-text note.

PURPOSE: Turn phrases like "getting married in 2 years" or "5 years until I retire"
         into year offsets per milestone.
CONTEXT: Best-effort heuristic scan; missed phrasings simply leave the field as None.
"""

from __future__ import annotations

import re
from typing import Dict, List, Optional, Tuple

from portfolio_advisor.model_interface.types import LifeEvents

# A number followed by "year(s)"; the gap to the keyword may not cross a digit or a full stop.
_YEARS = r"(\d+)\s*(?:years?|yrs?)\b"
_GAP = r"[^\d.]*?"


def _patterns(keyword: str) -> List[re.Pattern[str]]:
    """Keyword-first pattern, then number-first pattern, both case-insensitive."""
    return [
        re.compile(keyword + _GAP + _YEARS, re.IGNORECASE),
        re.compile(_YEARS + _GAP + keyword, re.IGNORECASE),
    ]


_MARRIAGE = r"\bmarr(?:y|ied|iage|ying)\b"
_RETIREMENT = r"\bretir(?:e|ement|ing|ed)\b"
_HOUSE_PURCHASE = r"\b(?:buy|buying|purchase|purchasing)\b[^\d.]*?\bhouse\b"
_HOUSE = r"\bhouse\b"
_KIDS = r"\b(?:kids?|child|children|bab(?:y|ies))\b"

EVENT_PATTERNS: Tuple[Tuple[str, List[re.Pattern[str]]], ...] = (
    ("marriage_years", _patterns(_MARRIAGE)),
    ("retirement_years", _patterns(_RETIREMENT)),
    ("house_years", _patterns(_HOUSE_PURCHASE) + _patterns(_HOUSE)),
    ("kids_years", _patterns(_KIDS)),
)


def _first_match(text: str, patterns: List[re.Pattern[str]]) -> Optional[int]:
    for pattern in patterns:
        m = pattern.search(text)
        if m:
            return int(m.group(1))
    return None


def empty_life_events() -> LifeEvents:
    return {"marriage_years": None, "retirement_years": None, "house_years": None, "kids_years": None}


def extract_life_events(text: Optional[str]) -> LifeEvents:
    """
    Parse a free-text note into year offsets for marriage, retirement, house purchase and kids.

    parameters:
    - text: str|None – user note, e.g. "buy a house in 3 years and have kids in 5 years"

    returns:
    - LifeEvents – each field is an int number of years, or None when not mentioned.

    notes:
    - Categories are scanned independently; one phrase may feed two categories.
    - Within a category the first pattern that matches wins.
    """
    events = empty_life_events()
    if not text:
        return events
    found: Dict[str, Optional[int]] = {field: _first_match(text, patterns) for field, patterns in EVENT_PATTERNS}
    events.update(found)
    return events


def has_life_events(events: Optional[LifeEvents]) -> bool:
    return bool(events) and any(v is not None for v in events.values())
