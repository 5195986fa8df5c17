from __future__ import annotations

from ..models.generation_result import GenerationResult

"""SUMMARY line rendering for a generator run."""

__all__ = [
    "render_summary_fields",
]


def _format_seconds(seconds: float) -> str:
    if seconds == 0:
        return "0"
    if seconds == int(seconds):
        return str(int(seconds))
    if seconds < 0.01:
        # 指数表記を避ける
        return f"{seconds:.6f}".rstrip("0").rstrip(".")
    return f"{seconds:.3f}".rstrip("0").rstrip(".")


def render_summary_fields(result: GenerationResult) -> str:
    """Render the fields of the SUMMARY line for a finished run.

    The ``SUMMARY`` label is added by the log formatter (see log_summary), so
    the logged line reads:
    SUMMARY pages={pages} warnings={warnings} out={path} elapsed_sec={elapsed}

    Examples:
        >>> from datetime import datetime, timezone
        >>> from pathlib import Path
        >>> t = datetime(2024, 1, 1, tzinfo=timezone.utc)
        >>> result = GenerationResult(
        ...     pages={}, diagnostics=(), output_path=Path("site/page_config.py"),
        ...     start_time=t, end_time=t, elapsed_seconds=2.0,
        ... )
        >>> render_summary_fields(result)
        'pages=0 warnings=0 out=site/page_config.py elapsed_sec=2'
    """
    return (
        f"pages={result.page_count} "
        f"warnings={result.warning_count} "
        f"out={result.output_path.as_posix()} "
        f"elapsed_sec={_format_seconds(result.elapsed_seconds)}"
    )
