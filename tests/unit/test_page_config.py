from __future__ import annotations

import pytest

from quizbook.models.page_config import PageConfig
from quizbook.models.page_variant import ListPage, TextPage


@pytest.fixture()
def config() -> PageConfig:
    return PageConfig(
        total_pages=100,
        pages={
            1: ListPage("MVP", "", (2024,), 1, "https://mvp.example"),
            2: TextPage("Break", ""),
        },
    )


@pytest.mark.parametrize("n", [-100, -1, 0, 1, 2, 50, 99, 100, 101, 1000])
def test_page_exists_is_range_only(config: PageConfig, n: int):
    assert config.page_exists(n) is (1 <= n <= 100)


def test_configured_page_is_returned(config: PageConfig):
    assert config.get_page_configuration(1).title == "MVP"


@pytest.mark.parametrize("n", [3, 7, 100, 250])
def test_unconfigured_page_gets_placeholder(config: PageConfig, n: int):
    page = config.get_page_configuration(n)
    assert isinstance(page, TextPage)
    assert str(n) in page.content
    assert page.content.startswith(f"This is page {n} of our book.")
    assert page.answer_key_url == f"https://example.com/page-{n}-answers"


def test_placeholder_is_deterministic(config: PageConfig):
    assert config.get_page_configuration(42) == config.get_page_configuration(42)


def test_answer_key_url_falls_back_when_empty(config: PageConfig):
    assert config.get_answer_key_url(1) == "https://mvp.example"
    assert config.get_answer_key_url(2) == "https://example.com/page-2-answers"
    assert config.get_answer_key_url(9) == "https://example.com/page-9-answers"
