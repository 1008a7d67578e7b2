"""Text handling shared by the parser and the file-level API."""

from pathlib import Path

from risparse.config import END_TAG, TAG_WIDTH


def detect_encoding(file_bytes: bytes) -> str:
    """Detect encoding of file bytes using deterministic strategy.

    Parameters
    ----------
    file_bytes : bytes
        Complete file content as bytes.

    Returns
    -------
    str
        Detected encoding (utf-8-sig, utf-8 or latin-1).
    """
    if file_bytes.startswith(b"\xef\xbb\xbf"):
        return "utf-8-sig"

    try:
        file_bytes.decode("utf-8")
        return "utf-8"
    except UnicodeDecodeError:
        pass

    return "latin-1"


def normalize_line_endings(content: str) -> str:
    """Normalize line endings to LF.

    Parameters
    ----------
    content : str
        Text content with potentially mixed line endings.

    Returns
    -------
    str
        Text with normalized line endings (\\n only).
    """
    content = content.replace("\r\n", "\n")
    return content.replace("\r", "\n")


def line_tag(line: str) -> str:
    """Return the tag of a physical line: its first two characters."""
    return line[:TAG_WIDTH]


def read_text(file_path: Path, encoding: str | None = None) -> str:
    """Read a whole file as text.

    The file is read once and closed before the content is returned.

    Parameters
    ----------
    file_path : Path
        File to read.
    encoding : str | None, optional
        Codec to decode with. If None, detected from the bytes.

    Returns
    -------
    str
        Decoded file content.

    Raises
    ------
    OSError
        If the file cannot be read.
    UnicodeDecodeError
        If the bytes are not valid for ``encoding``.
    """
    file_bytes = file_path.read_bytes()
    return file_bytes.decode(encoding or detect_encoding(file_bytes))


def split_records(content: str) -> list[str]:
    """Split a buffer holding several RIS records into one chunk per record.

    A chunk ends at a line whose tag (first two characters, see
    :func:`line_tag`) is ``ER``, whatever follows the tag; that line stays in
    the chunk.
    A trailing remainder without ``ER`` is kept as a final chunk when it has
    any non-blank line, so the parser can report it; blank remainders are
    dropped.

    Parameters
    ----------
    content : str
        Text with one or more records.

    Returns
    -------
    list[str]
        Record chunks in file order.
    """
    chunks: list[str] = []
    current: list[str] = []

    for line in normalize_line_endings(content).split("\n"):
        current.append(line)
        if line_tag(line) == END_TAG:
            chunks.append("\n".join(current))
            current = []

    if any(line.strip() for line in current):
        chunks.append("\n".join(current))

    return chunks
