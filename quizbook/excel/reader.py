from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import pandas as pd

from quizbook.models.config_models import SheetSchema

"""Workbook reader for the page_config.xlsx template.

The first ``skip_rows`` rows of each sheet (banner, subtitle, spacer, header)
are dropped unconditionally; this offset is a contract with the template, not
detected from the content. Remaining cells are mapped by position to the
column names of the SheetSchema. Missing cells become "".
"""

__all__ = [
    "MissingSheetError",
    "SheetData",
    "WorkbookError",
    "WorkbookNotFoundError",
    "inspect_workbook",
    "normalize_sheet",
    "read_workbook",
]

logger = logging.getLogger(__name__)


class WorkbookError(Exception):
    """Base class for fatal workbook problems."""


class WorkbookNotFoundError(WorkbookError):
    """Raised when the workbook file does not exist."""

    def __init__(self, path: Path) -> None:
        super().__init__(f"could not find Excel file at: {path}")
        self.path = path


class MissingSheetError(WorkbookError):
    """Raised when a required sheet is absent from the workbook."""

    def __init__(self, sheet_name: str, path: Path) -> None:
        super().__init__(f"could not find a sheet named {sheet_name!r} in {path.name}")
        self.sheet_name = sheet_name
        self.path = path


@dataclass
class SheetData:
    sheet_name: str
    columns: list[str]
    rows: list[dict[str, Any]]  # 列名→値 ("" for empty cells)


def _open(path: Path) -> pd.ExcelFile:
    if not path.exists():
        raise WorkbookNotFoundError(path)
    return pd.ExcelFile(path, engine="openpyxl")


def _parse_raw(xls: pd.ExcelFile, sheet_name: str) -> pd.DataFrame:
    # ヘッダなし・NA 変換なしで生読み ("NA" などの文字列もそのまま残す)
    return xls.parse(sheet_name, header=None, dtype=object, keep_default_na=False, na_values=[])


def normalize_sheet(df: pd.DataFrame, sheet_name: str, columns: tuple[str, ...], skip_rows: int) -> SheetData:
    """Apply a positional column schema to a raw DataFrame.

    Steps:
    1. Drop the first ``skip_rows`` rows
    2. Map cell n of each row to ``columns[n]`` (extra cells are ignored)
    3. Missing / NaN cells -> ""
    4. Skip rows where every mapped cell is empty
    """
    rows: list[dict[str, Any]] = []
    for raw in df.iloc[skip_rows:].itertuples(index=False, name=None):
        row_dict: dict[str, Any] = {}
        for idx, col in enumerate(columns):
            val = raw[idx] if idx < len(raw) else ""
            if val is None or (not isinstance(val, str) and pd.isna(val)):
                val = ""
            row_dict[col] = val
        if all(isinstance(v, str) and v.strip() == "" for v in row_dict.values()):
            continue
        rows.append(row_dict)
    return SheetData(sheet_name=sheet_name, columns=list(columns), rows=rows)


def read_workbook(path: Path, schemas: Iterable[SheetSchema]) -> dict[str, SheetData]:
    """Read the sheets described by ``schemas``.

    Raises:
        WorkbookNotFoundError: The file does not exist
        MissingSheetError: One of the schema sheets is absent (first missing one)
    """
    xls = _open(path)
    available = {str(name) for name in xls.sheet_names}
    schemas = list(schemas)
    for schema in schemas:
        if schema.sheet_name not in available:
            raise MissingSheetError(schema.sheet_name, path)

    sheets: dict[str, SheetData] = {}
    for schema in schemas:
        df = _parse_raw(xls, schema.sheet_name)
        sheet = normalize_sheet(df, schema.sheet_name, schema.columns, schema.skip_rows)
        logger.debug(f"sheet {schema.sheet_name!r}: {len(sheet.rows)} data rows")
        sheets[schema.sheet_name] = sheet
    return sheets


def inspect_workbook(path: Path, limit: int = 3) -> dict[str, list[list[Any]]]:
    """Return the first ``limit`` raw rows of every sheet (template troubleshooting)."""
    xls = _open(path)
    preview: dict[str, list[list[Any]]] = {}
    for name in xls.sheet_names:
        df = _parse_raw(xls, str(name))
        preview[str(name)] = [list(r) for r in df.head(limit).itertuples(index=False, name=None)]
    return preview
