"""Exceptions raised while loading or parsing a MusicXML document."""


class ScoreParseError(ValueError):
    """Base class for every failure reported by scoretally."""

    default_message = "The MusicXML document could not be processed."

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.default_message)


class ScoreFileNotFoundError(ScoreParseError, FileNotFoundError):
    """The input path does not point to an existing file."""

    default_message = "The specified MusicXML file could not be found."

    def __init__(self, path: str | None = None) -> None:
        self.path = path
        message = f"MusicXML file not found: '{path}'." if path else None
        super().__init__(message)


class InvalidEncodingError(ScoreParseError):
    """The input bytes are not valid UTF-8 text."""

    default_message = "The MusicXML document is not valid UTF-8 text."


class MalformedDocumentError(ScoreParseError):
    """The input text cannot be parsed as an XML element tree."""

    default_message = "The file does not contain valid MusicXML."

    def __init__(self, detail: str | None = None) -> None:
        self.detail = detail
        message = f"XML parsing failed: {detail}" if detail else None
        super().__init__(message)


class NoMeasuresFoundError(ScoreParseError):
    """The document parsed cleanly but contains no <measure> elements."""

    default_message = "No measures (bars) were found in the MusicXML document."
