"""MeasureCounter: counts <measure> elements in a MusicXML document."""

import logging

from scoretally.document import ScoreSource, iter_events, local_name
from scoretally.errors import NoMeasuresFoundError

logger = logging.getLogger(__name__)


class MeasureCounter:
    """
    Count measure boundaries by streaming through the document.

    Measures are counted flatly across every part, so a score with two parts
    of two measures each yields 4.
    """

    def count_measures(self, source: ScoreSource) -> int:
        """
        Count the ``<measure>`` elements in a MusicXML document.

        Args:
            source: Document text, encoded bytes, or a path to a file.

        Returns:
            The number of measure elements found.

        Raises:
            MalformedDocumentError: If the document cannot be parsed.
            NoMeasuresFoundError:   If the document has no measures.
        """
        count = 0
        for event, element in iter_events(source):
            if event == "start" and local_name(element) == "measure":
                count += 1

        if count == 0:
            raise NoMeasuresFoundError()

        logger.debug("Counted %d measure(s)", count)
        return count
