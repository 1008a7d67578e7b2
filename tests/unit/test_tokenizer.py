"""Unit tests for the fixed-column line tokenizer."""

import pytest

from risparse.config import ParserConfig
from risparse.errors import MalformedLine
from risparse.parse.tokenizer import TagLine, tokenize_line, tokenize_lines


@pytest.mark.unit
def test_tokenize_line_slices_fixed_columns() -> None:
    """Tag is columns 0-1 and value starts at column 6."""
    assert tokenize_line("TI  - A title", 3) == TagLine("TI", "A title", 3)


@pytest.mark.unit
def test_tokenize_line_value_not_trimmed() -> None:
    """Leading and trailing whitespace in the value is kept."""
    assert tokenize_line("N1  -   padded  ", 0).value == "  padded  "


@pytest.mark.unit
def test_tokenize_line_no_delimiter_search() -> None:
    """Column drift is not corrected: the slice is purely positional."""
    assert tokenize_line("TI - Drifted", 0) == TagLine("TI", "rifted", 0)


@pytest.mark.unit
@pytest.mark.parametrize("line", ["ER  -", "ER  - "])
def test_tokenize_line_end_tag_has_empty_value(line: str) -> None:
    """Bare end lines tokenize with an empty value."""
    assert tokenize_line(line, 0) == TagLine("ER", "", 0)


@pytest.mark.unit
@pytest.mark.parametrize("line", ["T", "TI", "TI -", "ER  "])
def test_tokenize_line_too_short(line: str) -> None:
    """Lines shorter than the minimum width raise MalformedLine."""
    with pytest.raises(MalformedLine) as exc_info:
        tokenize_line(line, 7)

    assert exc_info.value.line_number == 7
    assert exc_info.value.line == line


@pytest.mark.unit
def test_tokenize_line_respects_config() -> None:
    """Value offset and minimum width come from the config."""
    config = ParserConfig(value_offset=3, min_line_length=2)

    assert tokenize_line("TI Short", 0, config) == TagLine("TI", "Short", 0)
    assert tokenize_line("ER", 0, config) == TagLine("ER", "", 0)


@pytest.mark.unit
def test_tokenize_lines_skips_blank_lines_and_keeps_physical_numbers() -> None:
    """Blank and whitespace-only lines produce no pair but count as lines."""
    text = "\nTY  - BOOK\n   \n\t\nTI  - Dune\n\nER  -\n"

    assert tokenize_lines(text) == [
        TagLine("TY", "BOOK", 1),
        TagLine("TI", "Dune", 4),
        TagLine("ER", "", 6),
    ]


@pytest.mark.unit
@pytest.mark.parametrize("newline", ["\n", "\r\n", "\r"])
def test_tokenize_lines_line_endings(newline: str) -> None:
    """CRLF and CR line endings split like LF and leave no stray CR."""
    text = newline.join(["TY  - BOOK", "TI  - Dune", "ER  -"])

    assert [t.value for t in tokenize_lines(text)] == ["BOOK", "Dune", ""]


@pytest.mark.unit
def test_tokenize_lines_reports_first_malformed_line() -> None:
    """The first short non-blank line is reported with its physical index."""
    with pytest.raises(MalformedLine) as exc_info:
        tokenize_lines("TY  - BOOK\n\nXY\nZ\nER  -")

    assert exc_info.value.line_number == 2
    assert exc_info.value.line == "XY"


@pytest.mark.unit
def test_tokenize_lines_empty_text() -> None:
    """Empty and blank-only input yields no pairs."""
    assert tokenize_lines("") == []
    assert tokenize_lines(" \n\n\t") == []
