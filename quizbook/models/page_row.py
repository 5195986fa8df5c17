from __future__ import annotations

import math
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

"""Raw sheet records for the Pages and detail sheets.

Rows only live for the duration of one generator run. Cell values arrive as
whatever openpyxl produced (int, float, str, datetime, "") and are coerced
here so the services only see text and plain numbers.
"""

__all__ = [
    "DetailItemRow",
    "PageRow",
    "as_number",
    "as_page_number",
    "as_text",
]


def as_text(value: Any) -> str:
    """Cell value -> trimmed string ("" for empty / NaN cells)."""
    if value is None:
        return ""
    if isinstance(value, float):
        if math.isnan(value):
            return ""
        # 2024.0 のような整数値 float は "2024" として扱う
        if value.is_integer():
            return str(int(value))
    return str(value).strip()


def as_number(value: Any) -> int | float | None:
    """Cell value -> number, or None when empty or not numeric."""
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        if isinstance(value, float):
            if math.isnan(value):
                return None
            return int(value) if value.is_integer() else value
        return value
    text = as_text(value)
    if not text:
        return None
    try:
        number = float(text)
    except ValueError:
        return None
    if math.isnan(number) or math.isinf(number):
        return None
    return int(number) if number.is_integer() else number


def as_page_number(value: Any) -> int | None:
    """Positive integer page number, or None for anything else."""
    number = as_number(value)
    if isinstance(number, int) and number > 0:
        return number
    return None


@dataclass(frozen=True)
class PageRow:
    """One data row of the Pages sheet."""
    page_number: int | None
    page_type: str  # lower-cased
    title: str
    description: str
    items_note: str
    columns: int
    answer_key_url: str
    action_note: str = ""
    note_position: str = ""
    note_rotation: int | float | None = None
    note_icon: str = ""

    @classmethod
    def from_record(cls, record: Mapping[str, Any]) -> PageRow:
        columns = as_number(record.get("columns"))
        return cls(
            page_number=as_page_number(record.get("page_num")),
            page_type=as_text(record.get("type")).lower(),
            title=as_text(record.get("title")),
            description=as_text(record.get("description")),
            items_note=as_text(record.get("items_note")),
            columns=columns if isinstance(columns, int) and columns > 0 else 1,
            answer_key_url=as_text(record.get("answer_key_url")),
            action_note=as_text(record.get("action_note")),
            note_position=as_text(record.get("note_position")),
            note_rotation=as_number(record.get("note_rotation")),
            note_icon=as_text(record.get("note_icon")),
        )


@dataclass(frozen=True)
class DetailItemRow:
    """One data row of the matchup detail sheet (page number is not unique)."""
    page_number: int | None
    context: str
    center_text: str

    @classmethod
    def from_record(cls, record: Mapping[str, Any]) -> DetailItemRow:
        return cls(
            page_number=as_page_number(record.get("page_num")),
            context=as_text(record.get("context")),
            center_text=as_text(record.get("center_text")),
        )
