"""Parse RIS (Research Information Systems) citations into typed records.

This package provides:
- Data models (risparse.models): Citation and ReferenceType
- Parsing (risparse.parse): tokenizer, framing checks and tag dispatch
- Errors (risparse.errors): MalformedDocument, MalformedLine, UnknownReferenceType
- Configuration (risparse.config): ParserConfig
- Audit (risparse.audit): JSONL event logging
- CLI (risparse.cli): command-line interface
- Public API (risparse.api): high-level convenience functions
"""

__version__ = "1.0.0"
__license__ = "MIT"

from risparse.api import (
    ParseError,
    RecordsResult,
    citation_digest,
    parse_file,
    parse_records,
    parse_records_file,
    parse_string,
    split_records,
    write_jsonl,
)
from risparse.config import ParserConfig
from risparse.errors import (
    MalformedDocument,
    MalformedLine,
    RISFormatError,
    UnknownReferenceType,
)
from risparse.models import Citation, ReferenceType, UnknownTag

__all__ = [
    "__version__",
    "__license__",
    "Citation",
    "ReferenceType",
    "UnknownTag",
    "ParserConfig",
    "parse_string",
    "parse_file",
    "parse_records",
    "parse_records_file",
    "split_records",
    "write_jsonl",
    "citation_digest",
    "RecordsResult",
    "ParseError",
    "RISFormatError",
    "MalformedDocument",
    "MalformedLine",
    "UnknownReferenceType",
]
