"""scoretally: measure, beat and accidental analysis for MusicXML scores."""

__version__ = "0.1.0"

from scoretally.accidental_processor import AccidentalProcessor  # noqa: E402
from scoretally.analyzer import ScoreAnalyzer  # noqa: E402
from scoretally.beat_counter import BeatCounter  # noqa: E402
from scoretally.errors import (  # noqa: E402
    InvalidEncodingError,
    MalformedDocumentError,
    NoMeasuresFoundError,
    ScoreFileNotFoundError,
    ScoreParseError,
)
from scoretally.measure_counter import MeasureCounter  # noqa: E402
from scoretally.models import AnalysisReport  # noqa: E402
from scoretally.note_types import BeatMode, NoteType  # noqa: E402

__all__ = [
    "AccidentalProcessor",
    "AnalysisReport",
    "BeatCounter",
    "BeatMode",
    "InvalidEncodingError",
    "MalformedDocumentError",
    "MeasureCounter",
    "NoMeasuresFoundError",
    "NoteType",
    "ScoreAnalyzer",
    "ScoreFileNotFoundError",
    "ScoreParseError",
    "__version__",
]
