from __future__ import annotations

import logging
from datetime import UTC, datetime

from ..excel.reader import read_workbook
from ..models.config_models import GeneratorConfig
from ..models.generation_result import GenerationResult
from ..models.page_row import DetailItemRow, PageRow
from .assembler import assemble_pages
from .detail_index import index_matchup_items
from .progress import ProgressTracker
from .serializer import render_page_config_module, write_page_config_module

"""Service orchestration for one generator run.

Workbook Reader -> Detail-Item Indexer + Page Assembler (with the note parser)
-> Source Serializer -> page_config.py. The whole workbook is read into memory
and the output file is fully replaced on every run.
"""

__all__ = [
    "generate",
]

logger = logging.getLogger(__name__)


def generate(config: GeneratorConfig, *, generated_at: datetime | None = None) -> GenerationResult:
    """Run the generator described by ``config``.

    Args:
        config: Generator configuration (workbook/output paths, sheet layout)
        generated_at: Timestamp written into the module header (default: now, UTC)

    Returns:
        GenerationResult with the assembled pages and all non-fatal diagnostics

    Raises:
        WorkbookNotFoundError: The workbook does not exist
        MissingSheetError: The Pages or detail sheet is missing
    """
    start_time = datetime.now(UTC)
    pages_schema = config.pages_schema
    detail_schema = config.detail_schema

    logger.info(f"Reading workbook: {config.workbook}")
    sheets = read_workbook(config.workbook, [pages_schema, detail_schema])

    detail_rows = [DetailItemRow.from_record(r) for r in sheets[detail_schema.sheet_name].rows]
    matchup_items = index_matchup_items(detail_rows)
    logger.debug(f"indexed detail rows for {len(matchup_items)} page(s)")

    page_rows = [PageRow.from_record(r) for r in sheets[pages_schema.sheet_name].rows]
    with ProgressTracker(len(page_rows)) as progress:
        assembly = assemble_pages(
            progress.track(page_rows),
            matchup_items,
            default_icon=config.default_note_icon,
        )

    text = render_page_config_module(
        assembly.pages,
        source_name=config.workbook.name,
        generated_at=generated_at,
        total_pages=config.total_pages,
        answer_key_base=config.answer_key_base,
    )
    output_path = write_page_config_module(config.output, text)
    logger.info(f"Generated {len(assembly.pages)} pages -> {output_path}")

    end_time = datetime.now(UTC)
    return GenerationResult(
        pages=assembly.pages,
        diagnostics=assembly.diagnostics,
        output_path=output_path,
        start_time=start_time,
        end_time=end_time,
        elapsed_seconds=(end_time - start_time).total_seconds(),
    )
