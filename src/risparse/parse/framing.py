"""Record framing checks: ``TY`` must open and ``ER`` must close the record."""

from collections.abc import Sequence

from risparse.config import END_TAG, TYPE_TAG
from risparse.errors import MalformedDocument
from risparse.parse.tokenizer import TagLine

__all__ = ["validate_framing"]


def validate_framing(tag_lines: Sequence[TagLine]) -> None:
    """Check that a token sequence is one framed citation record.

    Only the first and last tags are inspected; tags in between may appear
    in any order.

    Parameters
    ----------
    tag_lines : Sequence[TagLine]
        Tokenized lines in file order.

    Raises
    ------
    MalformedDocument
        If the sequence is empty, does not start with ``TY`` or does not end
        with ``ER``.
    """
    if not tag_lines:
        raise MalformedDocument("document contains no tagged lines")

    if tag_lines[0].tag != TYPE_TAG:
        raise MalformedDocument(f"first tag is not {TYPE_TAG} (type of reference)")

    if tag_lines[-1].tag != END_TAG:
        raise MalformedDocument(f"last tag is not {END_TAG} (end of reference)")
