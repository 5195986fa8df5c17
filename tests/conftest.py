# Shared pytest fixtures
from __future__ import annotations

import logging
import tempfile
from pathlib import Path

import pytest

from quizbook.excel.template import write_template_workbook
from quizbook.logging.init import LOGGER_NAME, reset_logging


@pytest.fixture()
def temp_workdir(monkeypatch) -> Path:
    with tempfile.TemporaryDirectory() as d:
        p = Path(d)
        (p / "config").mkdir()
        monkeypatch.chdir(p)
        monkeypatch.delenv("QUIZBOOK_EXCEL", raising=False)
        monkeypatch.delenv("QUIZBOOK_OUT", raising=False)
        yield p


@pytest.fixture(autouse=True)
def _fresh_logging():
    # ハンドラは setup 時点の sys.stdout を掴むため、テスト毎に作り直す
    reset_logging()
    yield
    app_logger = logging.getLogger(LOGGER_NAME)
    for handler in app_logger.handlers[:]:
        app_logger.removeHandler(handler)
    reset_logging()


@pytest.fixture()
def sample_config_yaml() -> str:
    return """workbook: book.xlsx
output: out/page_config.py
total_pages: 100
answer_key_base: https://example.com
header_rows: 4
sheets:
  pages: Pages
  detail: Matchup Items
"""


@pytest.fixture()
def write_config(temp_workdir: Path, sample_config_yaml: str) -> Path:
    cfg = temp_workdir / "config" / "quizbook.yml"
    cfg.write_text(sample_config_yaml, encoding="utf-8")
    return cfg


@pytest.fixture()
def example_pages() -> list[list[object]]:
    """Pages rows: list (5), matchup without details (6), unknown type (7) + extras."""
    return [
        [1, "list", "NFL MVP Challenge", "List the MVPs.",
         "25 items – clues are years descending from 2024", 1, "https://mvp.example/answers",
         "Co-MVP bonus!", "right", 3, "🧠"],
        [2, "matchup", "AFC Championship Games", "Fill in the teams.", "", 2, "https://afc.example/answers"],
        [3, "text", "", "Take a breather.", "", "", ""],
        [4, "list", "Touchdown Leaders", "Top 20.", "20 items – clues are rank numbers", 1, "",
         "Only one active player!", "LEFT", "tilted", ""],
        [5, "list", "Defensive Player of the Year", "2015-2024.",
         "10 items – clues are years descending from 2024", 1, "https://dpoy.example/answers"],
        [6, "matchup", "NFC Championship Games", "Fill in the teams.", "", 2, "https://nfc.example/answers"],
        [7, "banana", "Fruit Page", "???", "", 1, "https://fruit.example/answers"],
    ]


@pytest.fixture()
def example_detail() -> list[list[object]]:
    return [
        [2, "2024", "vs"],
        [2, "2023", "vs"],
        ["", "orphan", "vs"],
        [0, "zero page", "vs"],
        [2, "2022", "vs"],
    ]


@pytest.fixture()
def example_workbook(temp_workdir: Path, example_pages, example_detail) -> Path:
    return write_template_workbook(temp_workdir / "book.xlsx", example_pages, example_detail)
