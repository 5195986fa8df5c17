from __future__ import annotations

from collections.abc import Iterable

from ..models.page_row import DetailItemRow
from ..models.page_variant import MatchupItem


def index_matchup_items(rows: Iterable[DetailItemRow]) -> dict[int, tuple[MatchupItem, ...]]:
    """Group detail-sheet rows by page number, keeping sheet order per page.

    Rows without a positive page number are dropped without a warning.
    """
    grouped: dict[int, list[MatchupItem]] = {}
    for row in rows:
        if row.page_number is None:
            continue
        grouped.setdefault(row.page_number, []).append(
            MatchupItem(center_text=row.center_text, context=row.context)
        )
    return {page: tuple(items) for page, items in grouped.items()}
