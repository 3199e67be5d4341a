"""BeatCounter: sums note durations relative to a reference note type."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from scoretally.document import ScoreSource, iter_events, local_name
from scoretally.note_types import BeatMode, NoteType

logger = logging.getLogger(__name__)


def _parse_ratio_term(text: str) -> int:
    """Parse an actual-notes/normal-notes value, falling back to 1."""
    try:
        value = int(text)
    except ValueError:
        return 1
    return value if value > 0 else 1


@dataclass
class NoteEventState:
    """
    Running state for the ``<note>`` element currently being streamed.

    Attributes:
        label:        Text of the note's ``<type>`` element, if any.
        is_rest:      True once a ``<rest>`` marker is seen.
        actual_notes: Tuplet numerator (notes played in the tuplet).
        normal_notes: Tuplet denominator (notes normally occupying the span).
    """

    label: str | None = None
    is_rest: bool = False
    actual_notes: int = 1
    normal_notes: int = 1

    def mark_rest(self) -> None:
        self.is_rest = True

    def set_label(self, text: str) -> None:
        self.label = text

    def set_actual_notes(self, text: str) -> None:
        self.actual_notes = _parse_ratio_term(text)

    def set_normal_notes(self, text: str) -> None:
        self.normal_notes = _parse_ratio_term(text)

    def beats(self, reference: NoteType) -> float:
        """
        Length of this note in units of *reference*.

        Unset or unrecognised duration labels contribute nothing.
        """
        note_type = NoteType.from_label(self.label)
        if note_type is None:
            return 0.0
        base = note_type.beat_value / reference.beat_value
        return base * (self.normal_notes / self.actual_notes)


class BeatCounter:
    """
    Streams a MusicXML document and totals its note durations.

    Each ``<note>`` is tracked with a fresh NoteEventState. Its ``<type>``
    gives the nominal duration and an optional ``<time-modification>`` scales
    it by normal-notes / actual-notes, so three tuplet eighths 3:2 count as
    one quarter.

    Example (reference = quarter):

        whole + half + quarter        → 4 + 2 + 1 = 7.0 beats
        3 eighths under a 3:2 tuplet  → 3 × 0.5 × 2/3 ≈ 1.0 beat
    """

    DEFAULT_REFERENCE = NoteType.QUARTER

    def __init__(self, reference: NoteType = DEFAULT_REFERENCE) -> None:
        """
        Args:
            reference: Note type used as the unit of the returned totals.
        """
        self.reference = reference

    # ------------------------------------------------------------------
    # Private helpers
    # ------------------------------------------------------------------

    def _update(self, state: NoteEventState, name: str, text: str) -> None:
        """Apply the end of a note child element to the running state."""
        if not text:
            return
        if name == "type":
            state.set_label(text)
        elif name == "actual-notes":
            state.set_actual_notes(text)
        elif name == "normal-notes":
            state.set_normal_notes(text)

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def count_beats(self, source: ScoreSource, mode: BeatMode = BeatMode.PLAYED) -> float:
        """
        Total the beats in a MusicXML document.

        Args:
            source: Document text, encoded bytes, or a path to a file.
            mode:   BeatMode.PLAYED skips rests; BeatMode.ALL includes them.

        Returns:
            The beat total in units of the reference note type.

        Raises:
            MalformedDocumentError: If the document cannot be parsed.
        """
        total = 0.0
        state: NoteEventState | None = None

        for event, element in iter_events(source):
            name = local_name(element)
            if name is None:
                continue

            if event == "start":
                if name == "note":
                    state = NoteEventState()
                elif name == "rest" and state is not None:
                    state.mark_rest()
                continue

            if state is None:
                continue

            if name == "note":
                if not (mode is BeatMode.PLAYED and state.is_rest):
                    total += state.beats(self.reference)
                state = None
                element.clear()
            else:
                self._update(state, name, (element.text or "").strip())

        logger.debug(
            "Counted %.3f %s beat(s) (mode=%s)", total, self.reference.value, mode.value
        )
        return total

    def count_played_beats(self, source: ScoreSource) -> float:
        """Total the beats of sounding notes, excluding rests."""
        return self.count_beats(source, BeatMode.PLAYED)

    def count_all_beats(self, source: ScoreSource) -> float:
        """Total the beats of every note event, rests included."""
        return self.count_beats(source, BeatMode.ALL)
