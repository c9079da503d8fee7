from __future__ import annotations

import json
import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from config_loader import DEFAULT_THEME, load_config  # noqa: E402


def test_load_config_resolves_log_file_relative_to_config(tmp_path: Path) -> None:
    config_path = tmp_path / "config.yaml"
    config_path.write_text(
        "presentation:\n  theme: one-dark\n  show_footer: false\n"
        "logging:\n  level: debug\n  file: logs/run.log\n",
        encoding="utf-8",
    )

    config = load_config(config_path)

    assert config.theme_name == "one-dark"
    assert config.show_footer is False
    assert config.logging_level == "DEBUG"
    assert config.log_file == (tmp_path / "logs" / "run.log").resolve()
    assert json.loads(config.dumps())["theme"] == "one-dark"


def test_load_config_defaults_without_file(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.chdir(tmp_path)

    config = load_config()

    assert config.config_path is None
    assert config.theme_name == DEFAULT_THEME
    assert config.show_footer is True
    assert config.logging_level == "INFO"


def test_load_config_missing_explicit_file(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        load_config(tmp_path / "missing.yaml")


def test_load_config_rejects_non_mapping_sections(tmp_path: Path) -> None:
    config_path = tmp_path / "config.yaml"
    config_path.write_text("presentation: dark\n", encoding="utf-8")

    with pytest.raises(ValueError):
        load_config(config_path)
