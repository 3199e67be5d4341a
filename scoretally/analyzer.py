"""ScoreAnalyzer: one entry point for measure, beat and accidental analysis."""

import logging

from scoretally.accidental_processor import AccidentalProcessor
from scoretally.beat_counter import BeatCounter
from scoretally.document import ScoreSource
from scoretally.measure_counter import MeasureCounter
from scoretally.models import AnalysisReport
from scoretally.note_types import BeatMode, NoteType

logger = logging.getLogger(__name__)


class ScoreAnalyzer:
    """
    Facade over MeasureCounter, BeatCounter and AccidentalProcessor.

    Every method parses its source independently; nothing is cached between
    calls, so one analyzer can be shared freely.

    Usage:

        analyzer = ScoreAnalyzer(reference=NoteType.QUARTER)
        bars = analyzer.count_measures(Path("song.musicxml"))
        report = analyzer.analyze(xml_text)
    """

    def __init__(self, reference: NoteType = BeatCounter.DEFAULT_REFERENCE) -> None:
        """
        Args:
            reference: Note type used as the unit of beat totals.
        """
        self.reference = reference
        self._measure_counter = MeasureCounter()
        self._beat_counter = BeatCounter(reference=reference)
        self._accidental_processor = AccidentalProcessor()

    def count_measures(self, source: ScoreSource) -> int:
        """Count the measures in *source* across all parts."""
        return self._measure_counter.count_measures(source)

    def count_beats(self, source: ScoreSource, mode: BeatMode = BeatMode.PLAYED) -> float:
        """Total the beats in *source* for the given mode."""
        return self._beat_counter.count_beats(source, mode)

    def count_played_beats(self, source: ScoreSource) -> float:
        """Total the beats of sounding notes, excluding rests."""
        return self._beat_counter.count_played_beats(source)

    def count_all_beats(self, source: ScoreSource) -> float:
        """Total the beats of every note event, rests included."""
        return self._beat_counter.count_all_beats(source)

    def add_explicit_accidentals(self, source: ScoreSource) -> str:
        """Return *source* with key-signature accidentals written on each note."""
        return self._accidental_processor.add_explicit_accidentals(source)

    def analyze(self, source: ScoreSource) -> AnalysisReport:
        """
        Collect the measure count and both beat totals for one document.

        Raises:
            ScoreParseError: If any of the analyses fails; no partial report
                is returned.
        """
        report = AnalysisReport(
            measures=self.count_measures(source),
            played_beats=self.count_played_beats(source),
            all_beats=self.count_all_beats(source),
            reference=self.reference,
        )
        logger.debug("Analysis report: %s", report)
        return report
