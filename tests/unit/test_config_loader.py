from __future__ import annotations

from pathlib import Path

import pytest

from quizbook.config.loader import ConfigError, apply_env_overrides, load_config
from quizbook.models.config_models import DETAIL_COLUMNS, PAGES_COLUMNS, GeneratorConfig


def test_load_config_success(write_config: Path):
    cfg = load_config(write_config)
    assert cfg.workbook == Path("book.xlsx")
    assert cfg.output == Path("out/page_config.py")
    assert cfg.total_pages == 100
    assert cfg.pages_schema.sheet_name == "Pages"
    assert cfg.pages_schema.columns == PAGES_COLUMNS
    assert cfg.detail_schema.columns == DETAIL_COLUMNS
    assert cfg.detail_schema.skip_rows == 4
    assert cfg.source == write_config


def test_load_config_defaults_for_missing_keys(temp_workdir: Path):
    path = temp_workdir / "config" / "quizbook.yml"
    path.write_text("total_pages: 40\n", encoding="utf-8")
    cfg = load_config(path)
    assert cfg.total_pages == 40
    assert cfg.workbook == GeneratorConfig().workbook
    assert cfg.detail_sheet == "Matchup Items"
    assert cfg.default_note_icon == "📌"


def test_load_config_empty_file_is_all_defaults(temp_workdir: Path):
    path = temp_workdir / "config" / "quizbook.yml"
    path.write_text("", encoding="utf-8")
    assert load_config(path) == GeneratorConfig()


def test_load_config_missing_file(temp_workdir: Path):
    with pytest.raises(ConfigError):
        load_config(temp_workdir / "config" / "not_exists.yml")


def test_load_config_invalid_yaml(temp_workdir: Path):
    path = temp_workdir / "config" / "quizbook.yml"
    path.write_text("sheets: [unclosed\n", encoding="utf-8")
    with pytest.raises(ConfigError) as e:
        load_config(path)
    assert "invalid yaml" in str(e.value)


def test_load_config_extra_field(write_config: Path):
    text = write_config.read_text(encoding="utf-8") + "\nextra_field: not_allowed\n"
    write_config.write_text(text, encoding="utf-8")
    with pytest.raises(ConfigError) as e:
        load_config(write_config)
    assert "config validation failed" in str(e.value)


def test_load_config_wrong_type(write_config: Path):
    text = write_config.read_text(encoding="utf-8").replace("total_pages: 100", "total_pages: lots")
    write_config.write_text(text, encoding="utf-8")
    with pytest.raises(ConfigError) as e:
        load_config(write_config)
    assert "config validation failed" in str(e.value)


def test_env_overrides():
    cfg = apply_env_overrides(GeneratorConfig(), {"QUIZBOOK_EXCEL": "other.xlsx", "QUIZBOOK_OUT": ""})
    assert cfg.workbook == Path("other.xlsx")
    assert cfg.output == GeneratorConfig().output
