"""Tag dispatch table for the RIS record builder.

Every recognized tag maps to one action and, for field tags, the Citation
attribute it fills. Field tags are derived from the Citation model, so adding
a field there is enough to make the parser recognize it.
"""

from enum import StrEnum
from typing import NamedTuple

from risparse.config import END_TAG, TYPE_TAG
from risparse.models import FIELD_BY_TAG, REPEATABLE_TAGS

__all__ = ["TagAction", "TagRule", "TAG_RULES", "get_rule"]


class TagAction(StrEnum):
    """What the record builder does with a tag.

    Attributes
    ----------
    RESOLVE_TYPE : str
        Resolve the value to a reference type; every occurrence overwrites.
    APPEND : str
        Append the value to a repeatable field.
    SET_IF_ABSENT : str
        Set a scalar field unless an earlier occurrence already set it.
    TERMINATE : str
        Stop processing the record.
    """

    RESOLVE_TYPE = "resolve_type"
    APPEND = "append"
    SET_IF_ABSENT = "set_if_absent"
    TERMINATE = "terminate"


class TagRule(NamedTuple):
    """Dispatch entry for one tag."""

    action: TagAction
    field: str | None = None


TAG_RULES: dict[str, TagRule] = {
    TYPE_TAG: TagRule(TagAction.RESOLVE_TYPE, "reference_type"),
    END_TAG: TagRule(TagAction.TERMINATE),
    **{
        tag: TagRule(
            TagAction.APPEND if tag in REPEATABLE_TAGS else TagAction.SET_IF_ABSENT,
            field_name,
        )
        for tag, field_name in FIELD_BY_TAG.items()
    },
}


def get_rule(tag: str) -> TagRule | None:
    """Get dispatch rule for a tag.

    Parameters
    ----------
    tag : str
        Two-character RIS tag.

    Returns
    -------
    TagRule | None
        Rule for the tag, or None if the tag is not recognized.
    """
    return TAG_RULES.get(tag)
