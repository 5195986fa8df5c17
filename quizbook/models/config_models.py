from __future__ import annotations

from dataclasses import dataclass, field, replace
from pathlib import Path

"""Config dataclasses for the page-configuration generator.

These are separate from the loader implementation in quizbook/config/loader.py
and focus on typing. The sheet layout is described explicitly by SheetSchema
values instead of being implied by column order at call sites.
"""

__all__ = [
    "SheetSchema",
    "GeneratorConfig",
    "PAGES_COLUMNS",
    "DETAIL_COLUMNS",
    "DEFAULT_HEADER_ROWS",
]

# banner / subtitle / spacer / header
DEFAULT_HEADER_ROWS = 4

PAGES_COLUMNS: tuple[str, ...] = (
    "page_num",
    "type",
    "title",
    "description",
    "items_note",
    "columns",
    "answer_key_url",
    "action_note",
    "note_position",
    "note_rotation",
    "note_icon",
)

DETAIL_COLUMNS: tuple[str, ...] = (
    "page_num",
    "context",
    "center_text",
    "notes",
)


@dataclass(frozen=True)
class SheetSchema:
    """Layout contract for one sheet of the workbook template.

    Columns are positional: the n-th cell of a data row is stored under
    ``columns[n]``. The first ``skip_rows`` rows are never data.
    """
    sheet_name: str
    columns: tuple[str, ...]
    skip_rows: int = DEFAULT_HEADER_ROWS


@dataclass(frozen=True)
class GeneratorConfig:
    """Root configuration object for a generator run."""
    workbook: Path = Path("page_config.xlsx")
    output: Path = Path("site") / "page_config.py"
    total_pages: int = 100
    answer_key_base: str = "https://example.com"
    header_rows: int = DEFAULT_HEADER_ROWS
    pages_sheet: str = "Pages"
    detail_sheet: str = "Matchup Items"
    default_note_icon: str = "\U0001F4CC"  # 📌
    source: Path | None = field(default=None, compare=False)  # 読み込んだ設定ファイル

    @property
    def pages_schema(self) -> SheetSchema:
        return SheetSchema(self.pages_sheet, PAGES_COLUMNS, self.header_rows)

    @property
    def detail_schema(self) -> SheetSchema:
        return SheetSchema(self.detail_sheet, DETAIL_COLUMNS, self.header_rows)

    def with_overrides(self, *, workbook: Path | None = None, output: Path | None = None) -> GeneratorConfig:
        """Return a copy with CLI / environment overrides applied (None keeps current)."""
        return replace(
            self,
            workbook=workbook if workbook is not None else self.workbook,
            output=output if output is not None else self.output,
        )
