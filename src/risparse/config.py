"""Parser configuration dataclass."""

from dataclasses import asdict, dataclass
from typing import Any

TAG_WIDTH = 2
TYPE_TAG = "TY"
END_TAG = "ER"


@dataclass
class ParserConfig:
    """Configuration for RIS parsing.

    Attributes
    ----------
    value_offset : int
        Column where the tag value starts (default: 6, as in ``"TI  - x"``).
    min_line_length : int
        Shortest accepted non-blank line (default: 5, as in ``"ER  -"``).
    encoding : str | None
        File encoding. If None, detected from the file bytes.
    strict : bool
        For multi-record input, raise on the first bad record instead of
        collecting per-record errors.
    """

    value_offset: int = 6
    min_line_length: int = 5
    encoding: str | None = None
    strict: bool = True

    def __post_init__(self) -> None:
        """Validate settings."""
        if self.value_offset < TAG_WIDTH:
            raise ValueError(f"value_offset must be >= {TAG_WIDTH}, got {self.value_offset}")

        if self.min_line_length < TAG_WIDTH:
            raise ValueError(
                f"min_line_length must be >= {TAG_WIDTH}, got {self.min_line_length}"
            )

        if self.encoding is not None and not self.encoding.strip():
            raise ValueError("encoding must be a non-empty codec name or None")

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        return asdict(self)


DEFAULT_CONFIG = ParserConfig()
