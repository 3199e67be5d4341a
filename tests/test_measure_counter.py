"""Unit tests for MeasureCounter."""

from collections.abc import Callable
from pathlib import Path

import pytest

from conftest import note, score
from scoretally.errors import MalformedDocumentError, NoMeasuresFoundError, ScoreFileNotFoundError
from scoretally.measure_counter import MeasureCounter


def test_counts_measures_in_single_part(scenario_a: str) -> None:
    assert MeasureCounter().count_measures(scenario_a) == 3


def test_counts_measures_flatly_across_parts() -> None:
    two_parts = score(
        [[note("C")], [note("D")]],
        [[note("E")], [note("F")]],
    )
    assert MeasureCounter().count_measures(two_parts) == 4


def test_empty_measures_are_counted() -> None:
    document = score([[], [], [], [], []])
    assert MeasureCounter().count_measures(document) == 5


def test_namespaced_measures_are_counted() -> None:
    document = (
        '<score-partwise xmlns="urn:example"><part id="P1">'
        "<measure/><measure/></part></score-partwise>"
    )
    assert MeasureCounter().count_measures(document) == 2


def test_no_measures_raises() -> None:
    document = '<score-partwise><part id="P1"></part></score-partwise>'
    with pytest.raises(NoMeasuresFoundError):
        MeasureCounter().count_measures(document)


def test_plain_text_is_malformed() -> None:
    with pytest.raises(MalformedDocumentError):
        MeasureCounter().count_measures("This is not valid XML")


def test_counts_measures_from_file(scenario_a: str, write_score: Callable[[str], Path]) -> None:
    path = write_score(scenario_a)
    assert MeasureCounter().count_measures(path) == 3


def test_missing_file_raises(tmp_path: Path) -> None:
    with pytest.raises(ScoreFileNotFoundError):
        MeasureCounter().count_measures(tmp_path / "nope.musicxml")


def test_accepts_bytes(scenario_a: str) -> None:
    assert MeasureCounter().count_measures(scenario_a.encode("utf-8")) == 3
