"""Fixed-column line tokenizer.

RIS lines have the layout ``XX  - value``: a two-character tag in columns
0-1 and the value from column 6 to end of line. Values are sliced, never
trimmed.
"""

from typing import NamedTuple

from risparse.config import DEFAULT_CONFIG, ParserConfig
from risparse.errors import MalformedLine
from risparse.parse.base import line_tag, normalize_line_endings

__all__ = ["TagLine", "tokenize_line", "tokenize_lines"]


class TagLine(NamedTuple):
    """One classified physical line.

    Attributes
    ----------
    tag : str
        Two-character tag.
    value : str
        Raw value (may be empty).
    line_number : int
        0-based physical line index in the input.
    """

    tag: str
    value: str
    line_number: int


def tokenize_line(line: str, line_number: int, config: ParserConfig = DEFAULT_CONFIG) -> TagLine:
    """Classify a single non-blank line.

    Parameters
    ----------
    line : str
        Physical line without its line terminator.
    line_number : int
        0-based physical line index.
    config : ParserConfig, optional
        Column layout settings.

    Returns
    -------
    TagLine
        Tag and value of the line.

    Raises
    ------
    MalformedLine
        If the line is shorter than ``config.min_line_length``.
    """
    if len(line) < config.min_line_length:
        raise MalformedLine(line_number, line)

    return TagLine(line_tag(line), line[config.value_offset :], line_number)


def tokenize_lines(text: str, config: ParserConfig = DEFAULT_CONFIG) -> list[TagLine]:
    """Split text into physical lines and classify every non-blank one.

    Parameters
    ----------
    text : str
        Full citation text.
    config : ParserConfig, optional
        Column layout settings.

    Returns
    -------
    list[TagLine]
        One entry per non-blank line, in file order.

    Raises
    ------
    MalformedLine
        On the first non-blank line that is too short.
    """
    tag_lines: list[TagLine] = []

    for line_number, line in enumerate(normalize_line_endings(text).split("\n")):
        if not line.strip():
            continue
        tag_lines.append(tokenize_line(line, line_number, config))

    return tag_lines
