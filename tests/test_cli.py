"""CLI tests driving a board file through its whole lifecycle."""

from __future__ import annotations

import runpy
import sys
from pathlib import Path

import pytest

from jeopardy_app.cli import main
from jeopardy_app.core.models import Board
from jeopardy_app.core.services.board_store import BoardStore


def _load(path: Path) -> Board:
    return BoardStore().load_from_path(path, Board(""))


@pytest.fixture
def board_file(tmp_path: Path) -> Path:
    assert main(["new", str(tmp_path / "game"), "--name", "Friday Trivia"]) == 0
    path = tmp_path / "game.jpdy"
    assert path.is_file()
    return path


def test_cli_root_help(capsys: pytest.CaptureFixture[str]) -> None:
    with pytest.raises(SystemExit) as excinfo:
        main(["--help"])
    assert excinfo.value.code == 0
    assert "usage:" in capsys.readouterr().out.lower()


def test_new_creates_empty_board(board_file: Path, capsys: pytest.CaptureFixture[str]) -> None:
    board = _load(board_file)
    assert board.name == "Friday Trivia"
    assert board.categories == []
    assert board.players == []


def test_full_editing_flow(board_file: Path, capsys: pytest.CaptureFixture[str]) -> None:
    file_arg = str(board_file)
    assert main(["add-category", file_arg, "Science"]) == 0
    assert main(["add-category", file_arg, "History"]) == 0
    assert main(["add-question", file_arg, "Science", "--prompt", "H2O?", "--answer", "Water", "--points", "200"]) == 0
    assert main(["add-question", file_arg, "Science", "--prompt", "Au?", "--answer", "Gold", "--points", "100"]) == 0
    assert main(["swap-categories", file_arg, "0", "1"]) == 0
    assert main(["rename-category", file_arg, "History", "World History"]) == 0
    assert main(["add-player", file_arg, "Joey"]) == 0
    assert main(["award", file_arg, "Science", "200", "Joey"]) == 0

    board = _load(board_file)
    assert [c.name for c in board.categories] == ["World History", "Science"]
    science = board.categories[1]
    assert [(q.points, q.answered) for q in science.questions] == [(100, False), (200, True)]
    assert str(board.players[0]) == "Joey: 200"

    capsys.readouterr()
    assert main(["show", file_arg]) == 0
    out = capsys.readouterr().out
    assert "Board: Friday Trivia (2 x 3, max 200 points)" in out
    assert "[1] Science" in out
    assert "H2O? -> Water (answered)" in out
    assert "Joey: 200" in out


def test_wrong_award_deducts(board_file: Path) -> None:
    file_arg = str(board_file)
    main(["add-category", file_arg, "Science"])
    main(["add-question", file_arg, "Science", "--prompt", "p", "--answer", "a", "--points", "300"])
    main(["add-player", file_arg, "Rachel"])

    assert main(["award", file_arg, "Science", "300", "Rachel", "--wrong"]) == 0

    board = _load(board_file)
    assert board.players[0].score == -300
    assert board.categories[0].questions[0].answered is False


def test_remove_category(board_file: Path) -> None:
    main(["add-category", str(board_file), "Science"])
    assert main(["remove-category", str(board_file), "Science"]) == 0
    assert _load(board_file).categories == []


@pytest.mark.parametrize(
    "argv,message",
    [
        (["add-question", "{file}", "Science", "--prompt", "p", "--answer", "a", "--points", "ten"], "ten is not a valid number"),
        (["add-question", "{file}", "Missing", "--prompt", "p", "--answer", "a", "--points", "10"], "No category named"),
        (["swap-categories", "{file}", "0", "5"], "out of range"),
        (["add-category", "{file}", " "], "non-empty"),
        (["award", "{file}", "Science", "100", "Nobody"], "No open 100-point question"),
    ],
)
def test_errors_exit_with_code_2(
    board_file: Path, capsys: pytest.CaptureFixture[str], argv: list[str], message: str
) -> None:
    main(["add-category", str(board_file), "Science"])
    before = board_file.read_bytes()
    capsys.readouterr()

    code = main([arg.replace("{file}", str(board_file)) for arg in argv])

    assert code == 2
    captured = capsys.readouterr()
    assert "ERROR: " in captured.err
    assert message in captured.err
    assert "ERROR" not in captured.out
    assert board_file.read_bytes() == before


def test_show_missing_file_reports_error(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["show", str(tmp_path / "nope.jpdy")]) == 2
    assert "ERROR:" in capsys.readouterr().err


def test_show_corrupt_file_reports_error(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    path = tmp_path / "corrupt.jpdy"
    path.write_text("{not json", encoding="utf-8")
    assert main(["show", str(path)]) == 2
    assert "Invalid board file" in capsys.readouterr().err


def test_settings_command(tmp_path: Path, capsys: pytest.CaptureFixture[str], monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("JPDY_BORDER_COLOR", raising=False)
    env_file = tmp_path / "custom.env"
    env_file.write_text("JPDY_BORDER_COLOR=#123456\n", encoding="utf-8")

    assert main(["--env", str(env_file), "settings"]) == 0
    assert "JPDY_BORDER_COLOR=#123456" in capsys.readouterr().out

    assert main(["settings"]) == 0
    assert "JPDY_BORDER_COLOR=#b31b1b" in capsys.readouterr().out


def test_bad_env_file_fails_every_command(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["--env", str(tmp_path / "missing.env"), "settings"]) == 2
    assert "Environment file not found" in capsys.readouterr().err


def test_board_path_without_extension_is_resolved(
    board_file: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    bare = board_file.with_suffix("")
    assert main(["add-category", str(bare), "Science"]) == 0
    assert [c.name for c in _load(board_file).categories] == ["Science"]
    assert not bare.exists()

    capsys.readouterr()
    assert main(["show", str(bare)]) == 0
    assert "Board: Friday Trivia" in capsys.readouterr().out


def test_package_runs_as_module(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    monkeypatch.setattr(sys, "argv", ["jeopardy", "--help"])
    with pytest.raises(SystemExit) as excinfo:
        runpy.run_module("jeopardy_app", run_name="__main__")
    assert excinfo.value.code == 0
    assert "usage: jeopardy" in capsys.readouterr().out
