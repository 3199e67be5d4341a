"""Loading and parsing of MusicXML sources shared by every analysis."""

from __future__ import annotations

import io
import logging
import os
from collections.abc import Iterator
from pathlib import Path
from typing import Union

from lxml import etree

from scoretally.errors import (
    InvalidEncodingError,
    MalformedDocumentError,
    ScoreFileNotFoundError,
)

logger = logging.getLogger(__name__)

#: Document text, encoded document bytes, or a path to a MusicXML file.
ScoreSource = Union[str, bytes, "os.PathLike[str]"]

_EVENTS = ("start", "end")


def read_source(source: ScoreSource) -> bytes:
    """
    Resolve a source to UTF-8 encoded document bytes.

    ``str`` is treated as document text, ``bytes`` as encoded document text
    and any ``os.PathLike`` as a file locator.

    Raises:
        ScoreFileNotFoundError: If a path does not resolve to a file.
        InvalidEncodingError:   If the content is not valid UTF-8.
        MalformedDocumentError: If the file exists but cannot be read.
    """
    if isinstance(source, os.PathLike):
        path = Path(source)
        if not path.is_file():
            raise ScoreFileNotFoundError(str(path))
        try:
            data = path.read_bytes()
        except OSError as exc:
            raise MalformedDocumentError(f"Failed to read file: {exc}") from exc
        logger.debug("Read %d bytes from %s", len(data), path)
    elif isinstance(source, str):
        try:
            data = source.encode("utf-8")
        except UnicodeEncodeError as exc:
            raise InvalidEncodingError() from exc
    else:
        data = bytes(source)

    try:
        data.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise InvalidEncodingError() from exc
    return data


def make_parser() -> etree.XMLParser:
    """Return an XML parser that never resolves entities or touches the network."""
    return etree.XMLParser(resolve_entities=False, no_network=True)


def parse_tree(source: ScoreSource) -> etree._Element:
    """
    Parse a source into an element tree and return its root element.

    Raises:
        MalformedDocumentError: If the text is not well-formed XML.
    """
    data = _require_content(read_source(source))
    try:
        return etree.fromstring(data, make_parser())
    except etree.XMLSyntaxError as exc:
        raise MalformedDocumentError(str(exc)) from exc


def iter_events(source: ScoreSource) -> Iterator[tuple[str, etree._Element]]:
    """
    Stream ``(event, element)`` pairs for element starts and ends.

    Text content of an element is only complete on its ``"end"`` event.

    Raises:
        MalformedDocumentError: If the text is not well-formed XML. The error
            surfaces at the point the parser reaches the bad input.
    """
    data = _require_content(read_source(source))
    events = etree.iterparse(
        io.BytesIO(data),
        events=_EVENTS,
        resolve_entities=False,
        no_network=True,
    )
    try:
        yield from events
    except etree.XMLSyntaxError as exc:
        raise MalformedDocumentError(str(exc)) from exc


def local_name(element: etree._Element) -> str | None:
    """
    Return an element's tag without its namespace.

    Comments and processing instructions have no name and return None.
    """
    tag = element.tag
    if not isinstance(tag, str):
        return None
    return tag.rsplit("}", 1)[-1]


def _require_content(data: bytes) -> bytes:
    if not data.strip():
        raise MalformedDocumentError("Document is empty")
    return data
