"""Public API for parsing RIS citations.

This module provides the main public API for risparse, enabling:
- Parsing a single citation from a string or file
- Parsing buffers that hold several consecutive records
- Exporting citations to JSONL format
"""

import json
from collections.abc import Iterable
from pathlib import Path
from typing import NamedTuple

from risparse.audit import AuditLogger
from risparse.config import DEFAULT_CONFIG, ParserConfig
from risparse.errors import RISFormatError
from risparse.models import Citation
from risparse.parse import parse_ris, read_text, split_records
from risparse.utils import calculate_json_sha256

__all__ = [
    "parse_string",
    "parse_file",
    "parse_records",
    "parse_records_file",
    "split_records",
    "write_jsonl",
    "citation_digest",
    "RecordsResult",
    "ParseError",
]

STRING_SOURCE = "<string>"


class ParseError(Exception):
    """Raised when a file cannot be read or a strict multi-record parse fails."""

    def __init__(
        self,
        message: str,
        file: str | None = None,
    ) -> None:
        """Initialize parse error.

        Parameters
        ----------
        message : str
            Error message.
        file : str | None, optional
            File where error occurred.
        """
        super().__init__(message)
        self.message = message
        self.file = file


class RecordsResult(NamedTuple):
    """Result of parsing a multi-record buffer.

    Supports tuple unpacking: ``citations, errors = parse_records(...)``.

    Attributes
    ----------
    citations : list[Citation]
        Citations parsed successfully, in file order.
    errors : list[str]
        One message per record that failed, prefixed with its 0-based index.
    """

    citations: list[Citation]
    errors: list[str]


def parse_string(
    text: str,
    *,
    config: ParserConfig | None = None,
    logger: AuditLogger | None = None,
    source: str = STRING_SOURCE,
) -> Citation:
    """Parse one RIS citation from a string.

    Parameters
    ----------
    text : str
        Citation text, ``TY`` line first and ``ER`` line last.
    config : ParserConfig | None, optional
        Parser settings, by default the standard RIS layout.
    logger : AuditLogger | None, optional
        Audit logger receiving citation_parsed / parse_failed events.
    source : str, optional
        Source name recorded in audit events.

    Returns
    -------
    Citation
        Parsed citation.

    Raises
    ------
    RISFormatError
        If the text is not a valid RIS citation (MalformedLine,
        MalformedDocument or UnknownReferenceType).

    Examples
    --------
        >>> from risparse import parse_string
        >>> citation = parse_string("TY  - BOOK\\nTI  - Dune\\nER  -")
        >>> citation.title
        'Dune'
    """
    try:
        citation = parse_ris(text, config)
    except RISFormatError as e:
        if logger is not None:
            logger.parse_failed(e, source=source)
        raise

    if logger is not None:
        logger.citation_parsed(citation, text, source=source)

    return citation


def _read_file(path: str | Path, config: ParserConfig) -> tuple[Path, str]:
    file_path = Path(path)

    if not file_path.exists():
        raise FileNotFoundError(f"File not found: {path}")

    try:
        text = read_text(file_path, config.encoding)
    except (OSError, UnicodeDecodeError, LookupError) as e:
        raise ParseError(f"Failed to read {file_path.name}: {e}", file=str(file_path)) from e

    return file_path, text


def parse_file(
    path: str | Path,
    *,
    config: ParserConfig | None = None,
    logger: AuditLogger | None = None,
) -> Citation:
    """Parse one RIS citation from a file.

    The file is read completely and closed before parsing starts.

    Parameters
    ----------
    path : str | Path
        Path to the citation file.
    config : ParserConfig | None, optional
        Parser settings; ``config.encoding`` selects the codec.
    logger : AuditLogger | None, optional
        Audit logger receiving parse events.

    Returns
    -------
    Citation
        Parsed citation.

    Raises
    ------
    FileNotFoundError
        If the file does not exist.
    ParseError
        If the file cannot be read or decoded.
    RISFormatError
        If the content is not a valid RIS citation.

    Examples
    --------
        >>> from risparse import parse_file
        >>> citation = parse_file("citation.ris")
        >>> print(citation.reference_type)
        ELEC
    """
    config = config or DEFAULT_CONFIG
    file_path, text = _read_file(path, config)
    return parse_string(text, config=config, logger=logger, source=file_path.name)


def parse_records(
    text: str,
    *,
    config: ParserConfig | None = None,
    logger: AuditLogger | None = None,
    source: str = STRING_SOURCE,
) -> RecordsResult:
    """Parse every record of a buffer holding consecutive RIS citations.

    The buffer is split at ``ER`` lines and each chunk is parsed on its own.

    Parameters
    ----------
    text : str
        Text with one or more records.
    config : ParserConfig | None, optional
        Parser settings. With ``strict=True`` (default) the first failing
        record raises; otherwise failures are collected.
    logger : AuditLogger | None, optional
        Audit logger receiving one event per record.
    source : str, optional
        Source name recorded in audit events and error messages.

    Returns
    -------
    RecordsResult
        Parsed citations and per-record error messages.

    Raises
    ------
    ParseError
        If a record fails and ``config.strict`` is True.
    """
    config = config or DEFAULT_CONFIG
    citations: list[Citation] = []
    errors: list[str] = []

    for index, chunk in enumerate(split_records(text)):
        try:
            citations.append(parse_string(chunk, config=config, logger=logger, source=source))
        except RISFormatError as e:
            message = f"Record {index}: {e}"
            if config.strict:
                raise ParseError(f"Failed to parse {source}: {message}", file=source) from e
            errors.append(message)

    return RecordsResult(citations, errors)


def parse_records_file(
    path: str | Path,
    *,
    config: ParserConfig | None = None,
    logger: AuditLogger | None = None,
) -> RecordsResult:
    """Parse every record of a multi-record RIS file.

    Parameters
    ----------
    path : str | Path
        Path to the RIS file.
    config : ParserConfig | None, optional
        Parser settings.
    logger : AuditLogger | None, optional
        Audit logger receiving one event per record.

    Returns
    -------
    RecordsResult
        Parsed citations and per-record error messages.

    Raises
    ------
    FileNotFoundError
        If the file does not exist.
    ParseError
        If the file cannot be read, or a record fails in strict mode.
    """
    config = config or DEFAULT_CONFIG
    file_path, text = _read_file(path, config)
    return parse_records(text, config=config, logger=logger, source=file_path.name)


def citation_digest(citation: Citation) -> str:
    """Content fingerprint of a citation.

    Parameters
    ----------
    citation : Citation
        Citation to fingerprint.

    Returns
    -------
    str
        SHA-256 of the canonical JSON form, "sha256:" prefixed.
    """
    return calculate_json_sha256(citation.to_dict())


def write_jsonl(
    citations: Iterable[Citation],
    path: str | Path,
    *,
    sort_keys: bool = True,
) -> int:
    """Write citations to JSONL file (one JSON object per line).

    Output is deterministic with consistent field ordering and UTF-8 encoding.

    Parameters
    ----------
    citations : Iterable[Citation]
        Citations to write.
    path : str | Path
        Output file path.
    sort_keys : bool, optional
        Whether to sort dictionary keys for deterministic output,
        by default True.

    Returns
    -------
    int
        Number of citations written.

    Examples
    --------
        >>> from risparse import parse_records_file, write_jsonl
        >>> citations, _ = parse_records_file("library.ris")
        >>> write_jsonl(citations, "library.jsonl")
    """
    file_path = Path(path)
    count = 0

    with file_path.open("w", encoding="utf-8", newline="\n") as f:
        for citation in citations:
            f.write(json.dumps(citation.to_dict(), ensure_ascii=False, sort_keys=sort_keys) + "\n")
            count += 1

    return count
