from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path

from .diagnostic import Diagnostic, DiagnosticKind
from .page_variant import PageVariant

"""Result models for assembly and for a complete generator run."""


@dataclass(frozen=True)
class AssemblyResult:
    """Pages assembled from the Pages sheet, keyed by page number.

    Insertion order follows the sheet. Diagnostics hold every non-fatal
    warning raised while assembling (including note-parser warnings).
    """
    pages: dict[int, PageVariant] = field(default_factory=dict)
    diagnostics: tuple[Diagnostic, ...] = ()

    def count(self, kind: DiagnosticKind) -> int:
        return sum(1 for d in self.diagnostics if d.kind is kind)


@dataclass(frozen=True)
class GenerationResult:
    """Aggregated outcome of one generator run (SUMMARY line source)."""
    pages: dict[int, PageVariant]
    diagnostics: tuple[Diagnostic, ...]
    output_path: Path
    start_time: datetime
    end_time: datetime
    elapsed_seconds: float

    @property
    def page_count(self) -> int:
        return len(self.pages)

    @property
    def warning_count(self) -> int:
        return len(self.diagnostics)
