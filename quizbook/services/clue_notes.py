from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from enum import Enum

from ..models.diagnostic import Diagnostic, DiagnosticKind
from ..models.page_variant import ClueValue

"""Items-note parser for list pages.

The Pages sheet describes list clues in free text, e.g.::

    "25 items – clues are years descending from 2024"
    "20 items – clues are rank numbers (#1, #2 …)"
    "5 items – clues are <anything else>"      -> empty clues + warning

Matching is a best-effort heuristic, case-insensitive. Only one rule fires and
years are checked before ranks. Nothing here raises: unrecognised notes
degrade to empty clues and one UNPARSABLE_NOTE diagnostic.
"""

__all__ = [
    "ClueRule",
    "DEFAULT_ITEM_COUNT",
    "ParsedNote",
    "descending_years",
    "parse_items_note",
    "rank_labels",
]

logger = logging.getLogger(__name__)

DEFAULT_ITEM_COUNT = 10

_COUNT_RE = re.compile(r"^(\d+)\s+items", re.IGNORECASE)
_YEARS_RE = re.compile(r"years\s+descending\s+from\s+(\d{4})", re.IGNORECASE)
_RANKS_RE = re.compile(r"rank\s+numbers?", re.IGNORECASE)


class ClueRule(Enum):
    DESCENDING_YEARS = "descending_years"
    RANK_LABELS = "rank_labels"
    UNKNOWN = "unknown"


@dataclass(frozen=True)
class ParsedNote:
    count: int
    rule: ClueRule
    clues: tuple[ClueValue, ...]
    diagnostics: tuple[Diagnostic, ...] = ()


def descending_years(start: int, count: int) -> tuple[int, ...]:
    return tuple(start - i for i in range(count))


def rank_labels(count: int) -> tuple[str, ...]:
    return tuple(f"#{i + 1}" for i in range(count))


def _unparsable(count: int, message: str) -> ParsedNote:
    logger.warning(message)
    diag = Diagnostic.create(DiagnosticKind.UNPARSABLE_NOTE, message)
    return ParsedNote(count=count, rule=ClueRule.UNKNOWN, clues=("",) * count, diagnostics=(diag,))


def parse_items_note(note: str) -> ParsedNote:
    """Infer item count and clue sequence from an items-note cell."""
    note = note.strip()
    count_match = _COUNT_RE.match(note)
    if not count_match:
        return _unparsable(
            DEFAULT_ITEM_COUNT,
            f'could not parse item count from: "{note}" - defaulting to '
            f"{DEFAULT_ITEM_COUNT} items with empty clues",
        )
    count = int(count_match.group(1))

    year_match = _YEARS_RE.search(note)
    if year_match:
        start = int(year_match.group(1))
        return ParsedNote(count=count, rule=ClueRule.DESCENDING_YEARS, clues=descending_years(start, count))

    if _RANKS_RE.search(note):
        return ParsedNote(count=count, rule=ClueRule.RANK_LABELS, clues=rank_labels(count))

    return _unparsable(count, f'unrecognised clue style in: "{note}" - items will have empty clues')
