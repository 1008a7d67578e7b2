"""Unit tests for parser configuration."""

import pytest

from risparse.config import DEFAULT_CONFIG, ParserConfig


@pytest.mark.unit
def test_defaults_match_standard_layout() -> None:
    """Defaults describe the ``XX  - value`` layout."""
    assert DEFAULT_CONFIG.value_offset == 6
    assert DEFAULT_CONFIG.min_line_length == 5
    assert DEFAULT_CONFIG.encoding is None
    assert DEFAULT_CONFIG.strict is True


@pytest.mark.unit
@pytest.mark.parametrize(
    ("kwargs", "message"),
    [
        ({"value_offset": 1}, "value_offset"),
        ({"min_line_length": 0}, "min_line_length"),
        ({"encoding": "  "}, "encoding"),
    ],
)
def test_invalid_values_rejected(kwargs: dict, message: str) -> None:
    """Out-of-range settings raise ValueError naming the field."""
    with pytest.raises(ValueError, match=message):
        ParserConfig(**kwargs)


@pytest.mark.unit
def test_to_dict() -> None:
    """to_dict() exposes every setting."""
    assert ParserConfig(encoding="latin-1", strict=False).to_dict() == {
        "value_offset": 6,
        "min_line_length": 5,
        "encoding": "latin-1",
        "strict": False,
    }
