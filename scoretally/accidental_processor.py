"""AccidentalProcessor: writes key-signature accidentals onto notes."""

from __future__ import annotations

import logging

from lxml import etree

from scoretally.document import ScoreSource, local_name, parse_tree
from scoretally.key_signature import STEPS, accidental_for_step, parse_fifths

logger = logging.getLogger(__name__)


def _child(element: etree._Element, name: str) -> etree._Element | None:
    """Return the first direct child with the given local name."""
    for child in element:
        if local_name(child) == name:
            return child
    return None


class AccidentalProcessor:
    """
    Make every key-signature accidental explicit on the notes it affects.

    The document is walked depth-first in document order. The most recent
    ``<key><fifths>`` value is the active key signature (0 before the first
    declaration) and stays active until the next declaration, regardless of
    which part or measure it appeared in.

    A note gets ``<accidental>sharp</accidental>`` or
    ``<accidental>flat</accidental>`` when its step letter is altered by the
    active key. Notes that already carry an ``<accidental>``, whatever its
    value, and notes without a pitch are left untouched, so running the
    processor on its own output changes nothing.
    """

    # ------------------------------------------------------------------
    # Private helpers
    # ------------------------------------------------------------------

    def _walk(self, element: etree._Element, fifths: int) -> int:
        """Visit *element* and its descendants; return the active key afterwards."""
        name = local_name(element)
        if name == "key":
            fifths = self._read_key(element, fifths)
        elif name == "note":
            self._process_note(element, fifths)

        for child in element:
            if local_name(child) is not None:
                fifths = self._walk(child, fifths)
        return fifths

    def _read_key(self, key_element: etree._Element, fifths: int) -> int:
        fifths_element = _child(key_element, "fifths")
        if fifths_element is None:
            return fifths
        value = parse_fifths(fifths_element.text)
        if value is None:
            logger.debug("Ignoring unparsable key signature %r", fifths_element.text)
            return fifths
        return value

    def _process_note(self, note: etree._Element, fifths: int) -> None:
        if _child(note, "accidental") is not None:
            return

        pitch = _child(note, "pitch")
        step_element = _child(pitch, "step") if pitch is not None else None
        if step_element is None:
            return
        step = (step_element.text or "").strip()
        if step not in STEPS:
            return

        accidental = accidental_for_step(step, fifths)
        if accidental is not None:
            self._append_accidental(note, accidental.value)
            logger.debug("Added %s to %s (fifths=%d)", accidental.value, step, fifths)

    def _append_accidental(self, note: etree._Element, value: str) -> None:
        """Append an <accidental> child, keeping the note's indentation."""
        namespace = etree.QName(note).namespace
        tag = f"{{{namespace}}}accidental" if namespace else "accidental"

        last = note[-1] if len(note) else None
        accidental = etree.SubElement(note, tag)
        accidental.text = value
        if last is not None:
            accidental.tail = last.tail
            last.tail = note.text

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def add_explicit_accidentals(self, source: ScoreSource) -> str:
        """
        Return the document with key-signature accidentals made explicit.

        Args:
            source: Document text, encoded bytes, or a path to a file.

        Returns:
            The annotated document serialized as UTF-8 text, including the
            XML declaration and any DOCTYPE.

        Raises:
            MalformedDocumentError: If the document cannot be parsed.
        """
        root = parse_tree(source)
        self._walk(root, 0)

        serialized: bytes = etree.tostring(
            root.getroottree(),
            xml_declaration=True,
            encoding="UTF-8",
        )
        return serialized.decode("utf-8")
