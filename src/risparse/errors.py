"""Error types raised by the RIS parser.

All errors are fatal for the current parse call. Unknown tags are never
errors; they are kept on ``Citation.unknown_tags``.
"""

__all__ = [
    "RISFormatError",
    "MalformedDocument",
    "MalformedLine",
    "UnknownReferenceType",
]


class RISFormatError(ValueError):
    """Base class for input that is not a valid RIS citation."""

    def __init__(self, message: str) -> None:
        """Initialize format error.

        Parameters
        ----------
        message : str
            Human-readable reason.
        """
        super().__init__(message)
        self.message = message


class MalformedDocument(RISFormatError):
    """Raised when the record framing (TY first, ER last) is violated."""

    def __init__(self, reason: str) -> None:
        """Initialize malformed document error.

        Parameters
        ----------
        reason : str
            Which framing rule failed.
        """
        super().__init__(f"Malformed document: {reason}")
        self.reason = reason


class MalformedLine(RISFormatError):
    """Raised when a non-blank line is too short for the fixed-column layout."""

    def __init__(self, line_number: int, line: str) -> None:
        """Initialize malformed line error.

        Parameters
        ----------
        line_number : int
            0-based physical line index.
        line : str
            Offending line content.
        """
        super().__init__(f"Line {line_number}: malformed tag line {line!r}")
        self.line_number = line_number
        self.line = line


class UnknownReferenceType(RISFormatError):
    """Raised when the TY value is not a known reference type code."""

    def __init__(self, code: str) -> None:
        """Initialize unknown reference type error.

        Parameters
        ----------
        code : str
            Raw TY value as found in the document.
        """
        super().__init__(f"Unknown reference type {code!r}")
        self.code = code
