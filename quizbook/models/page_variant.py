from __future__ import annotations

from dataclasses import dataclass
from typing import Literal, Union

"""Page variant records: the assembled, immutable unit of book configuration.

Exactly one variant exists per configured page. List and matchup pages share
the title/description/columns/answer-key fields and an optional callout
(ActionContent); text pages only carry a body and the answer-key URL.
"""

__all__ = [
    "ActionContent",
    "ClueValue",
    "ListPage",
    "MatchupItem",
    "MatchupPage",
    "PageVariant",
    "TextPage",
]

ClueValue = Union[int, str]


@dataclass(frozen=True)
class ActionContent:
    """Decorative side note shown next to a puzzle."""
    content: str
    position: Literal["left", "right"] = "right"
    rotation: int | float = 0
    icon: str = "\U0001F4CC"


@dataclass(frozen=True)
class MatchupItem:
    center_text: str
    context: str


@dataclass(frozen=True)
class ListPage:
    title: str
    description: str
    clues: tuple[ClueValue, ...]
    columns: int = 1
    answer_key_url: str = ""
    action_content: ActionContent | None = None

    type = "list"


@dataclass(frozen=True)
class MatchupPage:
    title: str
    description: str
    items: tuple[MatchupItem, ...]
    columns: int = 1
    answer_key_url: str = ""
    action_content: ActionContent | None = None

    type = "matchup"


@dataclass(frozen=True)
class TextPage:
    content: str
    answer_key_url: str = ""

    type = "text"


PageVariant = Union[ListPage, MatchupPage, TextPage]
