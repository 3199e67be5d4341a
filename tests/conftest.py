"""Shared MusicXML builders for the test suite."""

from collections.abc import Callable
from pathlib import Path

import pytest

HEADER = '<?xml version="1.0" encoding="UTF-8"?>\n'


def note(
    step: str | None = "C",
    note_type: str | None = "quarter",
    *,
    rest: bool = False,
    accidental: str | None = None,
    tuplet: tuple[str, str] | None = None,
) -> str:
    """Build a <note> element string."""
    parts = ["<note>"]
    if rest:
        parts.append("<rest/>")
    elif step is not None:
        parts.append(f"<pitch><step>{step}</step><octave>4</octave></pitch>")
    parts.append("<duration>1</duration>")
    if note_type is not None:
        parts.append(f"<type>{note_type}</type>")
    if accidental is not None:
        parts.append(f"<accidental>{accidental}</accidental>")
    if tuplet is not None:
        actual, normal = tuplet
        parts.append(
            "<time-modification>"
            f"<actual-notes>{actual}</actual-notes>"
            f"<normal-notes>{normal}</normal-notes>"
            "</time-modification>"
        )
    parts.append("</note>")
    return "".join(parts)


def key(fifths: str | int) -> str:
    """Build an <attributes> block declaring a key signature."""
    return f"<attributes><key><fifths>{fifths}</fifths></key></attributes>"


def score(*parts: list[list[str]]) -> str:
    """
    Build a score-partwise document.

    Each positional argument is a part; each part is a list of measures; each
    measure is a list of element strings.
    """
    body = []
    for index, measures in enumerate(parts, start=1):
        body.append(f'<part id="P{index}">')
        for number, measure in enumerate(measures, start=1):
            body.append(f'<measure number="{number}">{"".join(measure)}</measure>')
        body.append("</part>")
    return f'{HEADER}<score-partwise version="3.1">{"".join(body)}</score-partwise>'


@pytest.fixture
def scenario_a() -> str:
    """Whole note; half note + half rest; quarter note."""
    return score(
        [
            [note("C", "whole")],
            [note("D", "half"), note(None, "half", rest=True)],
            [note("E", "quarter")],
        ]
    )


@pytest.fixture
def write_score(tmp_path: Path) -> Callable[[str], Path]:
    """Write document text to a temporary .musicxml file and return its path."""

    def _write(content: str) -> Path:
        path = tmp_path / "score.musicxml"
        path.write_text(content, encoding="utf-8")
        return path

    return _write
