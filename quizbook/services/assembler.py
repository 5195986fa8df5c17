from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping

from ..models.diagnostic import Diagnostic, DiagnosticKind
from ..models.generation_result import AssemblyResult
from ..models.page_row import PageRow
from ..models.page_variant import ActionContent, ListPage, MatchupItem, MatchupPage, PageVariant, TextPage
from .clue_notes import parse_items_note

"""Page assembly: Pages-sheet rows -> page variants.

Rows are processed in sheet order. Rows without a positive page number are
ignored silently; rows with an unknown type are skipped with a warning, which
leaves a gap that the runtime lookup fills with a placeholder page.
"""

__all__ = [
    "DEFAULT_NOTE_ICON",
    "assemble_pages",
    "build_action_content",
]

logger = logging.getLogger(__name__)

DEFAULT_NOTE_ICON = "\U0001F4CC"  # 📌


def build_action_content(row: PageRow, default_icon: str = DEFAULT_NOTE_ICON) -> ActionContent | None:
    """Callout for a row, only when its note text is non-empty."""
    if not row.action_note:
        return None
    return ActionContent(
        content=row.action_note,
        position="left" if row.note_position.lower() == "left" else "right",
        rotation=row.note_rotation if row.note_rotation is not None else 0,
        icon=row.note_icon or default_icon,
    )


def _warn(diagnostics: list[Diagnostic], kind: DiagnosticKind, page_number: int, message: str) -> None:
    logger.warning(message)
    diagnostics.append(Diagnostic.create(kind, message, page_number))


def _assemble_row(
    row: PageRow,
    page_number: int,
    matchup_items: Mapping[int, tuple[MatchupItem, ...]],
    diagnostics: list[Diagnostic],
    default_icon: str,
) -> PageVariant | None:
    action_content = build_action_content(row, default_icon)

    if row.page_type == "list":
        parsed = parse_items_note(row.items_note)
        diagnostics.extend(d.for_page(page_number) for d in parsed.diagnostics)
        return ListPage(
            title=row.title,
            description=row.description,
            clues=parsed.clues,
            columns=row.columns,
            answer_key_url=row.answer_key_url,
            action_content=action_content,
        )

    if row.page_type == "matchup":
        items = matchup_items.get(page_number, ())
        if not items:
            # 件数の整合性チェックはしない (list ページのみ件数を持つ)
            _warn(
                diagnostics,
                DiagnosticKind.EMPTY_MATCHUP_ITEMS,
                page_number,
                f'page {page_number} ("{row.title}") is type=matchup but has no detail rows',
            )
        return MatchupPage(
            title=row.title,
            description=row.description,
            items=items,
            columns=row.columns,
            answer_key_url=row.answer_key_url,
            action_content=action_content,
        )

    if row.page_type == "text":
        # text ページでは description が本文
        return TextPage(content=row.description, answer_key_url=row.answer_key_url)

    _warn(
        diagnostics,
        DiagnosticKind.UNKNOWN_PAGE_TYPE,
        page_number,
        f'page {page_number} ("{row.title}") has unknown type "{row.page_type}" - skipping',
    )
    return None


def assemble_pages(
    rows: Iterable[PageRow],
    matchup_items: Mapping[int, tuple[MatchupItem, ...]],
    *,
    default_icon: str = DEFAULT_NOTE_ICON,
) -> AssemblyResult:
    """Build one page variant per usable Pages row.

    Args:
        rows: Pages-sheet rows in sheet order
        matchup_items: Output of index_matchup_items()
        default_icon: Glyph used for callouts without an icon

    Returns:
        AssemblyResult with pages keyed by page number and all diagnostics
    """
    pages: dict[int, PageVariant] = {}
    diagnostics: list[Diagnostic] = []

    for row in rows:
        if row.page_number is None:
            continue
        if row.page_number in pages:
            _warn(
                diagnostics,
                DiagnosticKind.DUPLICATE_PAGE,
                row.page_number,
                f'page {row.page_number} ("{row.title}") appears more than once - keeping the first row',
            )
            continue
        variant = _assemble_row(row, row.page_number, matchup_items, diagnostics, default_icon)
        if variant is not None:
            pages[row.page_number] = variant

    return AssemblyResult(pages=pages, diagnostics=tuple(diagnostics))
