from __future__ import annotations

from quizbook.models.diagnostic import DiagnosticKind
from quizbook.models.page_row import PageRow
from quizbook.models.page_variant import ActionContent, ListPage, MatchupItem, MatchupPage, TextPage
from quizbook.services.assembler import DEFAULT_NOTE_ICON, assemble_pages, build_action_content


def _row(page_number, page_type, **kw) -> PageRow:
    fields = dict(
        title=kw.pop("title", f"Page {page_number}"),
        description="",
        items_note="",
        columns=1,
        answer_key_url="",
    )
    fields.update(kw)
    return PageRow(page_number=page_number, page_type=page_type, **fields)


def test_end_to_end_example_rows():
    rows = [
        _row(5, "list", items_note="10 items – clues are years descending from 2024"),
        _row(6, "matchup"),
        _row(7, "banana"),
    ]
    result = assemble_pages(rows, {})

    assert list(result.pages) == [5, 6]
    page5 = result.pages[5]
    assert isinstance(page5, ListPage)
    assert page5.clues == (2024, 2023, 2022, 2021, 2020, 2019, 2018, 2017, 2016, 2015)

    page6 = result.pages[6]
    assert isinstance(page6, MatchupPage)
    assert page6.items == ()

    assert 7 not in result.pages
    assert result.count(DiagnosticKind.EMPTY_MATCHUP_ITEMS) == 1
    assert result.count(DiagnosticKind.UNKNOWN_PAGE_TYPE) == 1
    assert len(result.diagnostics) == 2
    assert "type=matchup but has no detail rows" in result.diagnostics[0].message


def test_matchup_uses_indexed_items():
    items = (MatchupItem("vs", "2024"), MatchupItem("vs", "2023"))
    result = assemble_pages([_row(2, "matchup", columns=2, answer_key_url="https://a")], {2: items})
    assert result.pages[2] == MatchupPage(
        title="Page 2", description="", items=items, columns=2, answer_key_url="https://a"
    )
    assert result.diagnostics == ()


def test_text_page_uses_description_as_content():
    result = assemble_pages([_row(3, "text", description="Body text", answer_key_url="https://t")], {})
    assert result.pages[3] == TextPage(content="Body text", answer_key_url="https://t")


def test_rows_without_page_number_are_ignored_silently():
    result = assemble_pages([_row(None, "list"), _row(None, "banana")], {})
    assert result.pages == {}
    assert result.diagnostics == ()


def test_unparsable_note_diagnostic_gets_page_number():
    result = assemble_pages([_row(4, "list", items_note="lots of items")], {})
    assert result.pages[4].clues == ("",) * 10
    (diag,) = result.diagnostics
    assert diag.kind is DiagnosticKind.UNPARSABLE_NOTE
    assert diag.page_number == 4
    assert diag.message.startswith("page 4:")


def test_duplicate_page_number_keeps_first_row():
    rows = [_row(1, "text", description="first"), _row(1, "text", description="second")]
    result = assemble_pages(rows, {})
    assert result.pages[1].content == "first"
    assert result.count(DiagnosticKind.DUPLICATE_PAGE) == 1


def test_action_content_only_with_note_text():
    assert build_action_content(_row(1, "list")) is None
    ac = build_action_content(_row(1, "list", action_note="Bonus!", note_position="LEFT", note_rotation=2, note_icon="🧠"))
    assert ac == ActionContent(content="Bonus!", position="left", rotation=2, icon="🧠")


def test_action_content_defaults():
    ac = build_action_content(_row(1, "list", action_note="Hmm", note_position="middle", note_rotation=None))
    assert ac.position == "right"
    assert ac.rotation == 0
    assert ac.icon == DEFAULT_NOTE_ICON == "📌"


def test_action_content_not_attached_to_text_pages():
    result = assemble_pages([_row(3, "text", action_note="ignored")], {})
    assert isinstance(result.pages[3], TextPage)


def test_row_warnings_carry_page_number():
    result = assemble_pages([_row(8, "matchup", title="Empty"), _row(9, "banana", title="Fruit")], {})
    assert [(d.kind, d.page_number) for d in result.diagnostics] == [
        (DiagnosticKind.EMPTY_MATCHUP_ITEMS, 8),
        (DiagnosticKind.UNKNOWN_PAGE_TYPE, 9),
    ]
    assert list(result.pages) == [8]
