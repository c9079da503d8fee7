from __future__ import annotations

import io
import logging
import sys
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, List

import pytest

sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

import presentation_mode.main as cli  # noqa: E402
from presentation_mode.terminal import TerminalError  # noqa: E402


@pytest.fixture(autouse=True)
def _isolated_logging(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    monkeypatch.chdir(tmp_path)
    yield
    root = logging.getLogger()
    for handler in list(root.handlers):
        if isinstance(handler, logging.FileHandler):
            root.removeHandler(handler)
            handler.close()


def _fake_terminal(keys: List[str]):
    @contextmanager
    def _raw_terminal() -> Iterator[int]:
        yield 0

    def _read_keys(fd: int) -> Iterator[str]:
        yield from keys

    return _raw_terminal, _read_keys


def test_missing_document_exits_non_zero(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    missing = tmp_path / "absent.md"

    assert cli.main([str(missing)]) == cli.EXIT_INPUT_ERROR
    assert str(missing) in capsys.readouterr().err


def test_empty_deck_exits_non_zero(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    document = tmp_path / "plain.md"
    document.write_text("just text\n", encoding="utf-8")

    assert cli.main([str(document)]) == cli.EXIT_INPUT_ERROR
    assert "No header lines" in capsys.readouterr().err


def test_malformed_metadata_exits_non_zero(tmp_path: Path) -> None:
    document = tmp_path / "broken.md"
    document.write_text("---\ntitle: X\n# A\n", encoding="utf-8")

    assert cli.main([str(document)]) == cli.EXIT_INPUT_ERROR


def test_unknown_theme_exits_non_zero(tmp_path: Path) -> None:
    document = tmp_path / "talk.md"
    document.write_text("# A\n", encoding="utf-8")

    assert cli.main([str(document), "--theme", "neon"]) == cli.EXIT_INPUT_ERROR


def test_presentation_quits_cleanly(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    document = tmp_path / "talk.md"
    document.write_text("---\ntitle: Demo\n---\n# A\nhello\n# B\nworld\n", encoding="utf-8")
    raw_terminal, read_keys = _fake_terminal(["l", "x", "q"])
    monkeypatch.setattr(cli, "raw_terminal", raw_terminal)
    monkeypatch.setattr(cli, "read_keys", read_keys)
    stream = io.StringIO()
    monkeypatch.setattr(sys, "stdout", stream)

    assert cli.main([str(document)]) == cli.EXIT_OK
    output = stream.getvalue()
    assert "Demo" in output
    assert "world" in output
    assert (tmp_path / "logs" / "term_slides.log").exists()


def test_non_tty_exits_with_display_error(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    document = tmp_path / "talk.md"
    document.write_text("# A\n", encoding="utf-8")

    @contextmanager
    def _no_tty() -> Iterator[int]:
        raise TerminalError("Standard input is not a terminal")
        yield 0  # pragma: no cover

    monkeypatch.setattr(cli, "raw_terminal", _no_tty)

    assert cli.main([str(document)]) == cli.EXIT_DISPLAY_ERROR


def test_list_themes(capsys: pytest.CaptureFixture[str]) -> None:
    assert cli.main(["--list-themes"]) == cli.EXIT_OK
    assert "catppuccin-mocha" in capsys.readouterr().out


def test_unwritable_log_location_exits_non_zero(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    (tmp_path / "logs").write_text("not a directory", encoding="utf-8")
    document = tmp_path / "talk.md"
    document.write_text("# A\n", encoding="utf-8")

    assert cli.main([str(document)]) == cli.EXIT_INPUT_ERROR
    assert "Cannot open log file" in capsys.readouterr().err
