"""Key-signature accidental table for diatonic major keys."""

from __future__ import annotations

from enum import Enum
from typing import Final

#: Valid MusicXML ``<step>`` letters.
STEPS: Final[frozenset[str]] = frozenset("ABCDEFG")

#: Order in which sharps are added to a key signature (circle of fifths).
SHARP_ORDER: Final[tuple[str, ...]] = ("F", "C", "G", "D", "A", "E", "B")

#: Order in which flats are added to a key signature.
FLAT_ORDER: Final[tuple[str, ...]] = ("B", "E", "A", "D", "G", "C", "F")


class Accidental(Enum):
    """Accidental values written into ``<accidental>`` elements."""

    SHARP = "sharp"
    FLAT = "flat"


def parse_fifths(text: str | None) -> int | None:
    """
    Parse the text of a ``<fifths>`` element.

    Returns:
        The signed number of sharps (positive) or flats (negative), or None
        when the text is missing or not an integer.
    """
    if text is None:
        return None
    try:
        return int(text.strip())
    except ValueError:
        return None


def altered_steps(fifths: int) -> frozenset[str]:
    """
    Return the step letters altered by a key signature.

    Magnitudes above seven are clamped to the seven-letter table.
    """
    if fifths > 0:
        return frozenset(SHARP_ORDER[: min(fifths, len(SHARP_ORDER))])
    if fifths < 0:
        return frozenset(FLAT_ORDER[: min(-fifths, len(FLAT_ORDER))])
    return frozenset()


def accidental_for_step(step: str, fifths: int) -> Accidental | None:
    """
    Determine the accidental a note needs under the given key signature.

    Args:
        step:   Note letter (C, D, E, F, G, A, B).
        fifths: Number of sharps (positive) or flats (negative).

    Returns:
        Accidental.SHARP or Accidental.FLAT when the letter is altered by the
        key, None otherwise.
    """
    if step not in altered_steps(fifths):
        return None
    return Accidental.SHARP if fifths > 0 else Accidental.FLAT
