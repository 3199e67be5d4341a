"""Tests for the scoretally command line interface."""

from collections.abc import Callable
from pathlib import Path

from click.testing import CliRunner

from conftest import key, note, score
from scoretally import __version__
from scoretally.cli import main


def test_version() -> None:
    result = CliRunner().invoke(main, ["--version"])
    assert result.exit_code == 0
    assert __version__ in result.output


def test_bars(scenario_a: str, write_score: Callable[[str], Path]) -> None:
    path = write_score(scenario_a)
    result = CliRunner().invoke(main, ["bars", str(path)])
    assert result.exit_code == 0
    assert result.output.strip() == "3 bars"


def test_bars_without_measures_fails(write_score: Callable[[str], Path]) -> None:
    path = write_score("<score-partwise/>")
    result = CliRunner().invoke(main, ["bars", str(path)])
    assert result.exit_code == 1
    assert "ERROR" in result.output


def test_beats_played(scenario_a: str, write_score: Callable[[str], Path]) -> None:
    path = write_score(scenario_a)
    result = CliRunner().invoke(main, ["beats", str(path)])
    assert result.exit_code == 0
    assert result.output.strip() == "7 quarter beats"


def test_beats_include_rests_with_reference(
    scenario_a: str, write_score: Callable[[str], Path]
) -> None:
    path = write_score(scenario_a)
    result = CliRunner().invoke(main, ["beats", str(path), "--include-rests", "-r", "half"])
    assert result.exit_code == 0
    assert result.output.strip() == "4.5 half beats"


def test_beats_rejects_unknown_reference(
    scenario_a: str, write_score: Callable[[str], Path]
) -> None:
    path = write_score(scenario_a)
    result = CliRunner().invoke(main, ["beats", str(path), "-r", "breve"])
    assert result.exit_code == 2


def test_accidentals_to_stdout(write_score: Callable[[str], Path]) -> None:
    path = write_score(score([[key(1), note("F")]]))
    result = CliRunner().invoke(main, ["accidentals", str(path)])
    assert result.exit_code == 0
    assert "<accidental>sharp</accidental>" in result.output


def test_accidentals_to_file(tmp_path: Path, write_score: Callable[[str], Path]) -> None:
    path = write_score(score([[key(-1), note("B")]]))
    out = tmp_path / "explicit.musicxml"
    result = CliRunner().invoke(main, ["accidentals", str(path), "-o", str(out)])
    assert result.exit_code == 0
    assert "<accidental>flat</accidental>" in out.read_text(encoding="utf-8")


def test_analyze(scenario_a: str, write_score: Callable[[str], Path]) -> None:
    path = write_score(scenario_a)
    result = CliRunner().invoke(main, ["analyze", str(path)])
    assert result.exit_code == 0
    assert "Bars         : 3" in result.output
    assert "Played beats : 7" in result.output
    assert "All beats    : 9" in result.output
    assert "Silent beats : 2" in result.output


def test_malformed_file_reports_error(write_score: Callable[[str], Path]) -> None:
    path = write_score("This is not valid XML")
    result = CliRunner().invoke(main, ["analyze", str(path)])
    assert result.exit_code == 1
    assert "ERROR" in result.output


def test_missing_file_is_rejected_by_click(tmp_path: Path) -> None:
    result = CliRunner().invoke(main, ["bars", str(tmp_path / "missing.musicxml")])
    assert result.exit_code == 2
