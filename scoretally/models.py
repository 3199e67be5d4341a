"""Data models for analysis results."""

from dataclasses import dataclass

from scoretally.note_types import NoteType


@dataclass(frozen=True)
class AnalysisReport:
    """Measure count and beat totals for one document."""

    measures: int
    played_beats: float
    all_beats: float
    reference: NoteType

    @property
    def silent_beats(self) -> float:
        """Beats spent in rests."""
        return self.all_beats - self.played_beats
