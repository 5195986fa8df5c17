from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field

from .page_variant import PageVariant, TextPage

"""Runtime lookup over the generated page configuration.

The generated ``page_config.py`` builds one PageConfig from its PAGES mapping.
Page numbers missing from the mapping (never configured, or skipped during
generation) resolve to a deterministic placeholder text page.
"""

__all__ = [
    "DEFAULT_ANSWER_KEY_BASE",
    "DEFAULT_TOTAL_PAGES",
    "PageConfig",
    "default_answer_key_url",
]

DEFAULT_TOTAL_PAGES = 100
DEFAULT_ANSWER_KEY_BASE = "https://example.com"

PLACEHOLDER_TEMPLATE = (
    "This is page {page} of our book. The content for this page is dynamically generated. "
    "Lorem ipsum dolor sit amet, consectetur adipiscing elit. Sed do eiusmod tempor incididunt "
    "ut labore et dolore magna aliqua. Ut enim ad minim veniam, quis nostrud exercitation ullamco "
    "laboris nisi ut aliquip ex ea commodo consequat."
)


def default_answer_key_url(page_number: int, base: str = DEFAULT_ANSWER_KEY_BASE) -> str:
    return f"{base.rstrip('/')}/page-{page_number}-answers"


@dataclass(frozen=True)
class PageConfig:
    """Configuration Artifact: total page count + pages keyed by page number."""
    total_pages: int = DEFAULT_TOTAL_PAGES
    pages: Mapping[int, PageVariant] = field(default_factory=dict)
    answer_key_base: str = DEFAULT_ANSWER_KEY_BASE

    def get_page_configuration(self, page_number: int) -> PageVariant:
        page = self.pages.get(page_number)
        if page is not None:
            return page
        return TextPage(
            content=PLACEHOLDER_TEMPLATE.format(page=page_number),
            answer_key_url=default_answer_key_url(page_number, self.answer_key_base),
        )

    def get_answer_key_url(self, page_number: int) -> str:
        page = self.get_page_configuration(page_number)
        return page.answer_key_url or default_answer_key_url(page_number, self.answer_key_base)

    def page_exists(self, page_number: int) -> bool:
        # 設定の有無とは無関係 (範囲のみ)
        return 1 <= page_number <= self.total_pages
