"""Command line and frontend tests."""

from __future__ import annotations

from pathlib import Path

import pytest
from rich.console import Console
from typer.testing import CliRunner

from main import app
from npuzzle.engine.solver import Solver
from npuzzle.frontend.cli.rich import app as rich_app
from npuzzle.frontend.cli.vanilla import app as vanilla_app
from npuzzle.io import read_board
from npuzzle.models.board import Board

PUZZLES_DIR = Path(__file__).resolve().parent.parent.parent / "fixtures" / "puzzles"

runner = CliRunner()


# -- vanilla frontend ---------------------------------------------------------


def test_vanilla_prints_moves_then_boards(capsys: pytest.CaptureFixture[str]) -> None:
    solver = Solver(Board.from_rows([[1, 2, 3], [4, 5, 6], [7, 0, 8]]))

    vanilla_app.run(solver)

    assert capsys.readouterr().out == (
        "Minimum number of moves = 1\n"
        "\n"
        "3\n  1  2  3\n  4  5  6\n  7  0  8\n"
        "\n"
        "3\n  1  2  3\n  4  5  6\n  7  8  0\n"
    )


def test_vanilla_reports_unsolvable(capsys: pytest.CaptureFixture[str]) -> None:
    vanilla_app.run(Solver(Board.from_rows([[2, 1], [3, 0]])))

    assert capsys.readouterr().out == "No solution possible\n"


# -- rich frontend ------------------------------------------------------------


def test_rich_renders_every_step() -> None:
    console = Console(record=True, width=80)
    solver = Solver(read_board(PUZZLES_DIR / "puzzle3x3-04.txt"))

    rich_app.run(solver, console=console)

    text = console.export_text()
    assert "Minimum number of moves = 4" in text
    assert "Step 4/4" in text
    assert "left" in text


def test_rich_reports_unsolvable() -> None:
    console = Console(record=True, width=80)

    rich_app.run(Solver(Board.from_rows([[2, 1], [3, 0]])), console=console)

    assert "No solution possible" in console.export_text()


# -- commands -----------------------------------------------------------------


def test_solve_command() -> None:
    result = runner.invoke(app, ["solve", str(PUZZLES_DIR / "puzzle3x3-04.txt")])

    assert result.exit_code == 0
    assert result.stdout.startswith("Minimum number of moves = 4\n")
    assert result.stdout.count("\n3\n") == 5


def test_solve_command_rich_frontend() -> None:
    result = runner.invoke(
        app, ["solve", str(PUZZLES_DIR / "puzzle2x2-unsolvable.txt"), "-f", "rich"]
    )

    assert result.exit_code == 0
    assert "No solution possible" in result.stdout


def test_solve_command_rejects_invalid_board() -> None:
    result = runner.invoke(app, ["solve", str(PUZZLES_DIR / "bad-duplicate.txt")])

    assert result.exit_code == 1
    assert "Error:" in result.output
    assert "duplicated [4]" in result.output


def test_solve_command_missing_file(tmp_path: Path) -> None:
    result = runner.invoke(app, ["solve", str(tmp_path / "absent.txt")])

    assert result.exit_code == 1
    assert "cannot read" in result.output


def test_generate_is_reproducible() -> None:
    first = runner.invoke(app, ["generate", "3", "--seed", "4"])
    second = runner.invoke(app, ["generate", "3", "--seed", "4"])

    assert first.exit_code == 0
    assert first.stdout == second.stdout
    assert first.stdout.startswith("3\n")


def test_generate_unsolvable_to_file(tmp_path: Path) -> None:
    target = tmp_path / "hard.txt"
    result = runner.invoke(
        app,
        ["generate", "2", "--moves", "5", "--seed", "1", "--unsolvable", "-o", str(target)],
    )

    assert result.exit_code == 0
    assert not Solver(read_board(target)).is_solvable()


def test_generate_rejects_small_size() -> None:
    result = runner.invoke(app, ["generate", "1"])

    assert result.exit_code != 0


def test_solve_command_rejects_non_utf8_file(tmp_path: Path) -> None:
    target = tmp_path / "binary.txt"
    target.write_bytes(b"2\n 1 2\n 3 0\xff\n")

    result = runner.invoke(app, ["solve", str(target)])

    assert result.exit_code == 1
    assert not isinstance(result.exception, UnicodeDecodeError)
    assert "Error:" in result.output
    assert "not valid UTF-8" in result.output
