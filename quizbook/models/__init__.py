"""Domain models for the quiz book page-configuration generator.

This package contains the records shared by the reader, the assembly
services, the source serializer and the runtime lookup.
"""

from .config_models import GeneratorConfig, SheetSchema
from .diagnostic import Diagnostic, DiagnosticKind
from .generation_result import AssemblyResult, GenerationResult
from .page_config import PageConfig
from .page_row import DetailItemRow, PageRow
from .page_variant import ActionContent, ListPage, MatchupItem, MatchupPage, PageVariant, TextPage

__all__ = [
    # Configuration models
    "GeneratorConfig",
    "SheetSchema",
    # Sheet rows
    "DetailItemRow",
    "PageRow",
    # Page variants
    "ActionContent",
    "ListPage",
    "MatchupItem",
    "MatchupPage",
    "PageVariant",
    "TextPage",
    # Results
    "AssemblyResult",
    "Diagnostic",
    "DiagnosticKind",
    "GenerationResult",
    "PageConfig",
]
