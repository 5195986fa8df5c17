from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path
from typing import Any

import pandas as pd

"""Writer for workbooks in the page_config.xlsx template layout.

Each sheet starts with the four fixed rows the reader skips:
1. banner  2. subtitle  3. spacer (empty)  4. column header
followed by the data rows.
"""

__all__ = [
    "PAGES_HEADER",
    "DETAIL_HEADER",
    "write_template_workbook",
]

PAGES_HEADER = [
    "Page #", "Type", "Title", "Description", "Items Note", "Columns",
    "Answer Key URL", "Action Note", "Note Position", "Note Rotation", "Note Icon",
]
DETAIL_HEADER = ["Page #", "Context", "Center Text", "Notes"]



def _sheet_frame(banner: str, header: list[str], rows: Sequence[Sequence[Any]]) -> pd.DataFrame:
    width = len(header)
    prefix: list[list[Any]] = [
        [banner] + [None] * (width - 1),
        ["Edit this sheet, then run quizbook-sync"] + [None] * (width - 1),
        [None] * width,
        list(header),
    ]
    body = [list(r) + [None] * (width - len(r)) for r in rows]
    return pd.DataFrame(prefix + body)


def write_template_workbook(
    path: Path,
    pages_rows: Sequence[Sequence[Any]],
    detail_rows: Sequence[Sequence[Any]] = (),
    *,
    pages_sheet: str = "Pages",
    detail_sheet: str | None = "Matchup Items",
) -> Path:
    """Write a workbook in template layout.

    Rows are positional (see PAGES_HEADER / DETAIL_HEADER); short rows are
    padded with empty cells. ``detail_sheet=None`` omits the detail sheet.
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    with pd.ExcelWriter(path, engine="openpyxl") as writer:
        _sheet_frame("Quiz Book Pages", PAGES_HEADER, pages_rows).to_excel(
            writer, sheet_name=pages_sheet, header=False, index=False
        )
        if detail_sheet is not None:
            _sheet_frame("Matchup Items", DETAIL_HEADER, detail_rows).to_excel(
                writer, sheet_name=detail_sheet, header=False, index=False
            )
    return path
