from __future__ import annotations

import logging
import re
from collections.abc import Callable
from dataclasses import dataclass
from html import escape

from ..models.page_config import DEFAULT_ANSWER_KEY_BASE, DEFAULT_TOTAL_PAGES, default_answer_key_url

"""Page navigation and answer-key footer helpers for the book site.

The site derives the current page from the last non-empty URL path segment
(``/barbooks/3/`` -> 3) and links to neighbouring pages under the same base.
QR drawing for the on-screen and print footers is delegated to an injected
renderer (text -> SVG markup). A failure there is contained: the on-screen
footer falls back to a clickable link and the print footer to an error label.
"""

__all__ = [
    "BookNavigator",
    "FooterQr",
    "page_from_path",
    "render_footer_qr",
    "render_print_footer",
    "resolve_answer_key_url",
]

logger = logging.getLogger(__name__)

QrRenderer = Callable[[str], str]

_LEADING_INT_RE = re.compile(r"^\s*([+-]?\d+)")


def _leading_int(text: str) -> int:
    match = _LEADING_INT_RE.match(text)
    return int(match.group(1)) if match else 0


def page_from_path(path: str) -> int:
    """Page number from a URL path; 1 when the last segment is not a number."""
    segments = [part for part in path.split("/") if part]
    if not segments:
        return 1
    return _leading_int(segments[-1]) or 1


def resolve_answer_key_url(injected: str | None, page_number: int, base: str = DEFAULT_ANSWER_KEY_BASE) -> str:
    return injected or default_answer_key_url(page_number, base)


@dataclass(frozen=True)
class BookNavigator:
    """Previous / next / go-to targets for one page.

    Targets outside ``[1, total_pages]`` give None (no navigation).
    """
    current_page: int
    total_pages: int = DEFAULT_TOTAL_PAGES
    base: str = "/barbooks"

    def page_url(self, page_number: int) -> str:
        return f"/{self.base.strip('/')}/{page_number}/"

    def _target(self, page_number: int) -> str | None:
        if 1 <= page_number <= self.total_pages:
            return self.page_url(page_number)
        return None

    def previous_url(self) -> str | None:
        return self._target(self.current_page - 1)

    def next_url(self) -> str | None:
        return self._target(self.current_page + 1)

    def go_to_url(self, value: str) -> str | None:
        """Target for the go-to box; invalid or out-of-range input gives None."""
        return self._target(_leading_int(value))


@dataclass(frozen=True)
class FooterQr:
    page_number: int
    answer_key_url: str
    markup: str
    fallback: bool = False


def render_footer_qr(page_number: int, answer_key_url: str, renderer: QrRenderer) -> FooterQr:
    """Footer QR markup linking to the answer key.

    The renderer is a third-party black box; when it raises, the error is
    logged and a placeholder link to the same URL is returned instead.
    """
    try:
        svg = renderer(answer_key_url)
    except Exception as e:
        logger.error(f"QR code generation failed for page {page_number}: {e}")
        href = escape(answer_key_url, quote=True)
        markup = (
            '<div class="qr-fallback">'
            f'<a href="{href}" target="_blank" rel="noopener">!</a>'
            "</div>"
        )
        return FooterQr(page_number, answer_key_url, markup, fallback=True)
    logger.debug(f"QR code generated for: {answer_key_url}")
    return FooterQr(page_number, answer_key_url, svg)


def render_print_footer(page_number: int, answer_key_url: str, renderer: QrRenderer) -> str:
    """Print-only footer: page label in the centre, answer-key QR on the right.

    When the renderer raises, the footer keeps the page label and shows
    ``Answer Key: Error`` in place of the code.
    """
    label = f"Page {page_number}"
    try:
        svg = renderer(answer_key_url)
    except Exception as e:
        logger.error(f"QR code generation failed for page {page_number} (print footer): {e}")
        return f'<div class="print-footer"><span>{label}</span><span>Answer Key: Error</span></div>'
    return f'<div class="print-footer"><span></span><span>{label}</span><div class="qr-code">{svg}</div></div>'
