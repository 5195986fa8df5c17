from __future__ import annotations

import runpy
from datetime import UTC, datetime
from pathlib import Path

from quizbook.models.config_models import GeneratorConfig
from quizbook.models.diagnostic import DiagnosticKind
from quizbook.models.page_variant import ActionContent, ListPage, MatchupItem, MatchupPage, TextPage
from quizbook.services.orchestrator import generate

"""Integration test: real workbook -> generate() -> importable page_config.py."""


def test_generate_from_workbook(temp_workdir: Path, example_workbook: Path):
    out = temp_workdir / "site" / "page_config.py"
    config = GeneratorConfig(workbook=example_workbook, output=out)

    result = generate(config, generated_at=datetime(2024, 1, 1, tzinfo=UTC))

    assert result.output_path == out
    assert out.exists()
    assert list(result.pages) == [1, 2, 3, 4, 5, 6]

    assert result.pages[1] == ListPage(
        title="NFL MVP Challenge",
        description="List the MVPs.",
        clues=tuple(range(2024, 1999, -1)),
        columns=1,
        answer_key_url="https://mvp.example/answers",
        action_content=ActionContent(content="Co-MVP bonus!", position="right", rotation=3, icon="🧠"),
    )
    assert result.pages[2].items == (
        MatchupItem(center_text="vs", context="2024"),
        MatchupItem(center_text="vs", context="2023"),
        MatchupItem(center_text="vs", context="2022"),
    )
    assert result.pages[2].columns == 2
    assert result.pages[3] == TextPage(content="Take a breather.", answer_key_url="")
    assert result.pages[4].clues == tuple(f"#{i}" for i in range(1, 21))
    assert result.pages[4].action_content == ActionContent(
        content="Only one active player!", position="left", rotation=0, icon="📌"
    )
    assert result.pages[5].clues == (2024, 2023, 2022, 2021, 2020, 2019, 2018, 2017, 2016, 2015)

    page6 = result.pages[6]
    assert isinstance(page6, MatchupPage) and page6.items == ()
    assert 7 not in result.pages

    kinds = [d.kind for d in result.diagnostics]
    assert kinds == [DiagnosticKind.EMPTY_MATCHUP_ITEMS, DiagnosticKind.UNKNOWN_PAGE_TYPE]
    assert result.warning_count == 2

    ns = runpy.run_path(str(out))
    assert ns["PAGES"] == result.pages
    placeholder = ns["get_page_configuration"](7)
    assert isinstance(placeholder, TextPage)
    assert "7" in placeholder.content
    assert placeholder.answer_key_url == "https://example.com/page-7-answers"
    assert ns["get_answer_key_url"](3) == "https://example.com/page-3-answers"
    assert ns["page_exists"](7) is True


def test_generate_replaces_previous_output(temp_workdir: Path, example_workbook: Path):
    out = temp_workdir / "page_config.py"
    out.write_text("stale = True\n", encoding="utf-8")
    generate(GeneratorConfig(workbook=example_workbook, output=out))
    text = out.read_text(encoding="utf-8")
    assert "stale" not in text
    assert "clues=tuple(2024 - i for i in range(25))," in text
    assert "Source: book.xlsx" in text


def test_generate_logs_warnings(temp_workdir: Path, example_workbook: Path, capsys):
    from quizbook.logging.init import setup_logging

    setup_logging()
    generate(GeneratorConfig(workbook=example_workbook, output=temp_workdir / "p.py"))
    out = capsys.readouterr().out
    assert 'WARN page 6 ("NFC Championship Games") is type=matchup but has no detail rows' in out
    assert 'WARN page 7 ("Fruit Page") has unknown type "banana" - skipping' in out
    assert "INFO Generated 6 pages" in out


def test_generate_with_backslash_in_workbook_name(temp_workdir: Path):
    from quizbook.excel.template import write_template_workbook

    workbook = write_template_workbook(temp_workdir / "book\\x1.xlsx", [[1, "text", "", "Hello"]])
    out = temp_workdir / "page_config.py"
    generate(GeneratorConfig(workbook=workbook, output=out))
    ns = runpy.run_path(str(out))
    assert ns["PAGES"] == {1: TextPage(content="Hello", answer_key_url="")}
    assert "# Source: book\\x1.xlsx\n" in out.read_text(encoding="utf-8")
