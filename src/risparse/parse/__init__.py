"""RIS citation parsing.

Stages:
- tokenizer: fixed-column (tag, value) classification of physical lines
- framing: TY-first / ER-last record checks
- ris: table-driven fold of tag lines into a Citation

Main entry point:
- parse_ris: Parse one citation from text
"""

from risparse.parse.base import detect_encoding, read_text, split_records
from risparse.parse.framing import validate_framing
from risparse.parse.ris import build_citation, parse_ris
from risparse.parse.tokenizer import TagLine, tokenize_lines

__all__ = [
    "parse_ris",
    "build_citation",
    "tokenize_lines",
    "validate_framing",
    "TagLine",
    "detect_encoding",
    "read_text",
    "split_records",
]
