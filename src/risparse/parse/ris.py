"""RIS citation parser.

RIS layout: two-letter tags at columns 0-1, value from column 6,
``TY  - `` opens the record and ``ER  -`` closes it.
Reference: https://refdb.sourceforge.net/manual-0.9.6/sect1-ris-format.html

One call parses one citation. Unknown tags are kept on the citation; an
unknown ``TY`` value is fatal.
"""

from typing import Any

from risparse.config import DEFAULT_CONFIG, END_TAG, TYPE_TAG, ParserConfig
from risparse.errors import MalformedDocument
from risparse.models import Citation, ReferenceType, UnknownTag, resolve_reference_type
from risparse.parse.framing import validate_framing
from risparse.parse.tag_mappings import TagAction, get_rule
from risparse.parse.tokenizer import TagLine, tokenize_lines


def parse_ris(text: str, config: ParserConfig | None = None) -> Citation:
    """Parse one RIS citation from text.

    Parameters
    ----------
    text : str
        Complete citation text, ``TY`` line first and ``ER`` line last.
    config : ParserConfig | None, optional
        Column layout settings. Defaults to the standard RIS layout.

    Returns
    -------
    Citation
        Fully populated citation.

    Raises
    ------
    MalformedLine
        If a non-blank line is too short for the fixed-column layout.
    MalformedDocument
        If the input is empty or the TY/ER framing is wrong.
    UnknownReferenceType
        If the ``TY`` value is not a known reference type code.
    """
    tag_lines = tokenize_lines(text, config or DEFAULT_CONFIG)
    validate_framing(tag_lines)
    return build_citation(tag_lines)


def build_citation(tag_lines: list[TagLine]) -> Citation:
    """Fold framed tag lines into a citation.

    Lines are processed in order and processing stops at the first ``ER``.

    Parameters
    ----------
    tag_lines : list[TagLine]
        Tokenized lines that passed framing validation.

    Returns
    -------
    Citation
        Citation built from the lines.

    Raises
    ------
    MalformedDocument
        If no ``TY`` line precedes the first ``ER`` line.
    UnknownReferenceType
        If a ``TY`` value is not a known reference type code.
    """
    reference_type: ReferenceType | None = None
    values: dict[str, Any] = {}
    unknown_tags: list[UnknownTag] = []

    for tag, value, _ in tag_lines:
        rule = get_rule(tag)

        if rule is None:
            unknown_tags.append(UnknownTag(tag, value))
        elif rule.action is TagAction.TERMINATE:
            break
        elif rule.action is TagAction.RESOLVE_TYPE:
            reference_type = resolve_reference_type(value)
        elif rule.action is TagAction.APPEND:
            values.setdefault(rule.field, []).append(value)
        else:
            values.setdefault(rule.field, value)

    if reference_type is None:
        raise MalformedDocument(f"no {TYPE_TAG} line before {END_TAG}")

    return Citation(reference_type=reference_type, unknown_tags=unknown_tags, **values)
