from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

"""Diagnostic model for non-fatal generator warnings.

A run never keeps a global warning counter. Each step returns the diagnostics
it produced next to its result so callers (and tests) can count and inspect
them without capturing console output.
"""

__all__ = [
    "Diagnostic",
    "DiagnosticKind",
]


class DiagnosticKind(Enum):
    """Classification of a non-fatal problem found while generating.

    - UNPARSABLE_NOTE: items-note had no count or no recognised clue style
    - UNKNOWN_PAGE_TYPE: Pages row with a type other than list/matchup/text
    - EMPTY_MATCHUP_ITEMS: matchup page without rows in the detail sheet
    - DUPLICATE_PAGE: page number already assembled from an earlier row
    """
    UNPARSABLE_NOTE = "UNPARSABLE_NOTE"
    UNKNOWN_PAGE_TYPE = "UNKNOWN_PAGE_TYPE"
    EMPTY_MATCHUP_ITEMS = "EMPTY_MATCHUP_ITEMS"
    DUPLICATE_PAGE = "DUPLICATE_PAGE"


@dataclass(frozen=True)
class Diagnostic:
    """Structured warning record.

    Attributes:
        kind: Warning classification
        page_number: Page the warning belongs to, None when not known yet
            (e.g. the note parser runs before it knows its page)
        message: Human readable description, logged with a WARN label
    """
    kind: DiagnosticKind
    page_number: int | None
    message: str

    @staticmethod
    def create(kind: DiagnosticKind, message: str, page_number: int | None = None) -> Diagnostic:
        return Diagnostic(kind=kind, page_number=page_number, message=message)

    def for_page(self, page_number: int) -> Diagnostic:
        """Attach a page number to a diagnostic raised without one."""
        if self.page_number is not None:
            return self
        return Diagnostic(kind=self.kind, page_number=page_number, message=f"page {page_number}: {self.message}")
