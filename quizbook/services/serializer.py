from __future__ import annotations

import ast
from collections.abc import Iterable, Mapping, Sequence
from datetime import UTC, datetime
from pathlib import Path

from ..models.page_config import DEFAULT_ANSWER_KEY_BASE, DEFAULT_TOTAL_PAGES
from ..models.page_variant import ActionContent, ClueValue, ListPage, MatchupItem, MatchupPage, PageVariant, TextPage
from .clue_notes import ClueRule, descending_years, rank_labels

"""Source serializer: page variants -> importable ``page_config.py``.

The emitted module is meant to be read in review, so list clues that follow one
of the note rules are compressed back into generator shorthand::

    clues=tuple(2024 - i for i in range(25))
    clues=tuple(f"#{i + 1}" for i in range(20))

Every other sequence is written as a literal tuple. The shorthand is purely
cosmetic; parse_clue_expression() turns either form back into the same values.
"""

__all__ = [
    "detect_clue_rule",
    "parse_clue_expression",
    "render_clues",
    "render_page",
    "render_page_config_module",
    "write_page_config_module",
]

INDENT = " " * 4

MODULE_HEADER = '''\
# AUTO-GENERATED by quizbook-sync
# Source: {source}
# Generated: {generated}
# DO NOT EDIT BY HAND - edit the workbook and re-run quizbook-sync instead.
"""Quiz book page configuration."""

from __future__ import annotations

from quizbook.models.page_config import PageConfig
from quizbook.models.page_variant import ActionContent, ListPage, MatchupItem, MatchupPage, TextPage

'''


def _comment_text(value: str) -> str:
    # コメント行を壊す改行・制御文字を含む場合のみ repr() で書く
    return value if value.isprintable() else repr(value)


def _is_int(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def detect_clue_rule(clues: Sequence[ClueValue]) -> ClueRule:
    """Which generator rule (if any) reproduces ``clues`` exactly."""
    if not clues:
        return ClueRule.UNKNOWN
    first = clues[0]
    if _is_int(first) and all(_is_int(c) and c == first - i for i, c in enumerate(clues)):
        return ClueRule.DESCENDING_YEARS
    if first == "#1" and all(c == f"#{i + 1}" for i, c in enumerate(clues)):
        return ClueRule.RANK_LABELS
    return ClueRule.UNKNOWN


def _render_tuple(parts: Iterable[str]) -> str:
    parts = list(parts)
    if len(parts) == 1:
        return f"({parts[0]},)"
    return "(" + ", ".join(parts) + ")"


def render_clues(clues: Sequence[ClueValue]) -> str:
    rule = detect_clue_rule(clues)
    if rule is ClueRule.DESCENDING_YEARS:
        return f"tuple({clues[0]} - i for i in range({len(clues)}))"
    if rule is ClueRule.RANK_LABELS:
        return f'tuple(f"#{{i + 1}}" for i in range({len(clues)}))'
    return _render_tuple(repr(c) for c in clues)


def _range_count(generators: list[ast.comprehension]) -> tuple[str, int]:
    if len(generators) != 1:
        raise ValueError("expected a single 'for' clause")
    gen = generators[0]
    if gen.ifs or not isinstance(gen.target, ast.Name):
        raise ValueError("unsupported comprehension target")
    it = gen.iter
    if not (
        isinstance(it, ast.Call)
        and isinstance(it.func, ast.Name)
        and it.func.id == "range"
        and len(it.args) == 1
        and not it.keywords
    ):
        raise ValueError("expected range(<count>)")
    count = ast.literal_eval(it.args[0])
    if not _is_int(count) or count < 0:
        raise ValueError("range count must be a non-negative integer")
    return gen.target.id, count


def _is_var(node: ast.AST, var: str) -> bool:
    return isinstance(node, ast.Name) and node.id == var


def parse_clue_expression(source: str) -> tuple[ClueValue, ...]:
    """Evaluate a rendered clue expression without exec/eval.

    Accepts the two shorthand forms produced by render_clues() and literal
    tuples/lists of ints and strings.

    Raises:
        ValueError: Expression is neither shorthand nor a literal sequence
    """
    try:
        node = ast.parse(source.strip(), mode="eval").body
    except SyntaxError as e:
        raise ValueError(f"invalid clue expression: {e}") from e

    if (
        isinstance(node, ast.Call)
        and isinstance(node.func, ast.Name)
        and node.func.id == "tuple"
        and len(node.args) == 1
        and isinstance(node.args[0], ast.GeneratorExp)
    ):
        gen = node.args[0]
        var, count = _range_count(gen.generators)
        elt = gen.elt
        # <start> - i
        if isinstance(elt, ast.BinOp) and isinstance(elt.op, ast.Sub) and _is_var(elt.right, var):
            start = ast.literal_eval(elt.left)
            if _is_int(start):
                return descending_years(start, count)
        # f"#{i + 1}"
        if isinstance(elt, ast.JoinedStr) and len(elt.values) == 2:
            prefix, formatted = elt.values
            if (
                isinstance(prefix, ast.Constant)
                and prefix.value == "#"
                and isinstance(formatted, ast.FormattedValue)
                and isinstance(formatted.value, ast.BinOp)
                and isinstance(formatted.value.op, ast.Add)
                and _is_var(formatted.value.left, var)
                and ast.literal_eval(formatted.value.right) == 1
            ):
                return rank_labels(count)
        raise ValueError(f"unsupported clue generator: {source!r}")

    value = ast.literal_eval(node)
    if not isinstance(value, (tuple, list)) or not all(_is_int(v) or isinstance(v, str) for v in value):
        raise ValueError(f"clue expression must be a sequence of ints/strings: {source!r}")
    return tuple(value)


def _indent(text: str, spaces: int) -> str:
    pad = " " * spaces
    return "\n".join(pad + line if line else line for line in text.split("\n"))


def _render_action_content(ac: ActionContent) -> str:
    return (
        f"ActionContent(content={ac.content!r}, position={ac.position!r}, "
        f"rotation={ac.rotation!r}, icon={ac.icon!r})"
    )


def _render_matchup_items(items: Sequence[MatchupItem]) -> str:
    if not items:
        return "()"
    lines = ["("]
    for it in items:
        lines.append(f"{INDENT}MatchupItem(center_text={it.center_text!r}, context={it.context!r}),")
    lines.append(")")
    return "\n".join(lines)


def render_page(page: PageVariant) -> str:
    """Render one variant as a constructor call (multi-line, unindented)."""
    lines = [f"{type(page).__name__}("]
    if isinstance(page, TextPage):
        lines.append(f"{INDENT}content={page.content!r},")
        lines.append(f"{INDENT}answer_key_url={page.answer_key_url!r},")
    else:
        lines.append(f"{INDENT}title={page.title!r},")
        lines.append(f"{INDENT}description={page.description!r},")
        if isinstance(page, ListPage):
            lines.append(f"{INDENT}clues={render_clues(page.clues)},")
        else:
            items = _render_matchup_items(page.items).split("\n")
            lines.append(f"{INDENT}items={items[0]}")
            lines.extend(INDENT + line for line in items[1:])
            lines[-1] += ","
        lines.append(f"{INDENT}columns={page.columns!r},")
        lines.append(f"{INDENT}answer_key_url={page.answer_key_url!r},")
        if page.action_content is not None:
            lines.append(f"{INDENT}action_content={_render_action_content(page.action_content)},")
    lines.append(")")
    return "\n".join(lines)


def render_page_config_module(
    pages: Mapping[int, PageVariant],
    *,
    source_name: str,
    generated_at: datetime | None = None,
    total_pages: int = DEFAULT_TOTAL_PAGES,
    answer_key_base: str = DEFAULT_ANSWER_KEY_BASE,
) -> str:
    """Render the complete page_config module text."""
    generated_at = generated_at or datetime.now(UTC)
    stamp = generated_at.isoformat().replace("+00:00", "Z")

    entries = []
    for number, page in pages.items():
        body = _indent(render_page(page), 4).lstrip()
        entries.append(f"{INDENT}{number}: {body},")
    pages_block = "PAGES = {\n" + "\n".join(entries) + "\n}\n" if entries else "PAGES = {}\n"

    config_args = f"total_pages={total_pages!r}, pages=PAGES"
    if answer_key_base != DEFAULT_ANSWER_KEY_BASE:
        config_args += f", answer_key_base={answer_key_base!r}"

    return (
        MODULE_HEADER.format(source=_comment_text(source_name), generated=stamp)
        + pages_block
        + "\n"
        + f"PAGE_CONFIG = PageConfig({config_args})\n"
        + "\n"
        + "get_page_configuration = PAGE_CONFIG.get_page_configuration\n"
        + "get_answer_key_url = PAGE_CONFIG.get_answer_key_url\n"
        + "page_exists = PAGE_CONFIG.page_exists\n"
    )


def write_page_config_module(path: Path, text: str) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")
    return path
