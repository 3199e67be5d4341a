"""Note duration table and beat-counting modes."""

from __future__ import annotations

from enum import Enum
from typing import Final


class BeatMode(Enum):
    """Which note events contribute to a beat total."""

    PLAYED = "played"  # sounding notes only, rests skipped
    ALL = "all"  # notes and rests


class NoteType(Enum):
    """
    Symbolic note durations, valued by their MusicXML ``<type>`` label.

    ``beat_value`` expresses each duration as a fraction of a whole note.
    All values are powers of two, so ratios between them are exact floats.
    """

    WHOLE = "whole"
    HALF = "half"
    QUARTER = "quarter"
    EIGHTH = "eighth"
    SIXTEENTH = "16th"
    THIRTY_SECOND = "32nd"
    SIXTY_FOURTH = "64th"

    @property
    def beat_value(self) -> float:
        """Duration relative to a whole note (whole = 1.0)."""
        return _BEAT_VALUES[self]

    @classmethod
    def from_label(cls, label: str | None) -> NoteType | None:
        """
        Look up a duration label.

        Accepts the MusicXML label (``"16th"``) or the spelled-out name
        (``"sixteenth"``), ignoring case and surrounding whitespace.

        Returns:
            The matching NoteType, or None when the label is unknown.
        """
        if label is None:
            return None
        return _LABELS.get(label.strip().lower())


_BEAT_VALUES: Final[dict[NoteType, float]] = {
    NoteType.WHOLE: 1.0,
    NoteType.HALF: 0.5,
    NoteType.QUARTER: 0.25,
    NoteType.EIGHTH: 0.125,
    NoteType.SIXTEENTH: 0.0625,
    NoteType.THIRTY_SECOND: 0.03125,
    NoteType.SIXTY_FOURTH: 0.015625,
}

_LABELS: Final[dict[str, NoteType]] = {
    **{note_type.value: note_type for note_type in NoteType},
    "sixteenth": NoteType.SIXTEENTH,
    "thirty-second": NoteType.THIRTY_SECOND,
    "sixty-fourth": NoteType.SIXTY_FOURTH,
}
