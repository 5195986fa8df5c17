from __future__ import annotations

import argparse
import sys
from pathlib import Path

from dotenv import load_dotenv

from quizbook.config.loader import DEFAULT_CONFIG_PATH, ConfigError, apply_env_overrides, load_config
from quizbook.excel.reader import WorkbookError, inspect_workbook
from quizbook.logging.init import log_summary, set_debug, setup_logging
from quizbook.models.config_models import GeneratorConfig
from quizbook.services.orchestrator import generate
from quizbook.services.summary import render_summary_fields

"""CLI entrypoint: regenerate page_config.py from page_config.xlsx.

Usage:
    quizbook-sync
    quizbook-sync --excel path/to/page_config.xlsx
    quizbook-sync --out site/page_config.py
    quizbook-sync --inspect-data
"""

EXIT_SUCCESS = 0
EXIT_FATAL = 1


def _parse_args(argv: list[str]) -> argparse.Namespace:
    p = argparse.ArgumentParser(prog="quizbook-sync", description="Regenerate page_config.py from the page workbook")
    p.add_argument("--excel", type=Path, default=None, help="Workbook path (default: page_config.xlsx)")
    p.add_argument("--out", type=Path, default=None, help="Output module path (default: site/page_config.py)")
    p.add_argument("--config", type=Path, default=None, help=f"YAML config (default: {DEFAULT_CONFIG_PATH}, optional)")
    p.add_argument("--debug", action="store_true", help="Enable debug logging")
    p.add_argument("--inspect-data", action="store_true", help="Print the first rows of every sheet then exit")
    return p.parse_args(argv)


def _load_env_file(path: Path) -> None:
    """Load .env; existing environment variables win."""
    if path.exists():
        load_dotenv(dotenv_path=path, override=False)


def _resolve_config(args: argparse.Namespace) -> GeneratorConfig:
    if args.config is not None:
        cfg = load_config(args.config)
    elif DEFAULT_CONFIG_PATH.exists():
        cfg = load_config(DEFAULT_CONFIG_PATH)
    else:
        cfg = GeneratorConfig()
    cfg = apply_env_overrides(cfg)
    return cfg.with_overrides(workbook=args.excel, output=args.out)


def _inspect_data(cfg: GeneratorConfig) -> int:
    preview = inspect_workbook(cfg.workbook)
    print(f"FILE: {cfg.workbook.name}")
    for sheet_name, rows in preview.items():
        print(f"  SHEET: {sheet_name}")
        for row in rows:
            # datetime などは isoformat で表示
            print("    row=", [v.isoformat() if hasattr(v, "isoformat") else v for v in row])
    return EXIT_SUCCESS


def main(argv: list[str] | None = None) -> int:
    logger = setup_logging()

    # NOTE: 空リスト [] のときに sys.argv[1:] (pytest の引数) を読まないよう None のみ判定
    if argv is None:
        argv = sys.argv[1:]
    args = _parse_args(argv)
    _load_env_file(Path(".env"))

    if args.debug:
        set_debug()
        logger.debug("debug mode enabled")

    try:
        cfg = _resolve_config(args)
    except ConfigError as e:
        logger.error(f"config: {e}")
        return EXIT_FATAL

    logger.debug(f"config: {cfg.source or 'defaults'} (workbook={cfg.workbook}, out={cfg.output})")

    try:
        if args.inspect_data:
            return _inspect_data(cfg)
        result = generate(cfg)
    except WorkbookError as e:
        logger.error(str(e))
        if not cfg.workbook.exists():
            logger.error("run with --excel <path> to specify a different location")
        return EXIT_FATAL

    log_summary(render_summary_fields(result))
    if result.warning_count > 0:
        logger.warning(f"{result.warning_count} warning(s) above - review before committing")
    return EXIT_SUCCESS


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
