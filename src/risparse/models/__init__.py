"""Shared data types for risparse.

This package contains the citation record and the closed set of reference
types consumed by the parser and the public API.
"""

from risparse.models.citation import (
    FIELD_BY_TAG,
    REPEATABLE_TAGS,
    SCALAR_TAGS,
    Citation,
    UnknownTag,
)
from risparse.models.reference_types import (
    REFERENCE_TYPE_DESCRIPTIONS,
    ReferenceType,
    resolve_reference_type,
)

__all__ = [
    # Record models
    "Citation",
    "UnknownTag",
    # Field/tag tables
    "FIELD_BY_TAG",
    "REPEATABLE_TAGS",
    "SCALAR_TAGS",
    # Reference types
    "ReferenceType",
    "REFERENCE_TYPE_DESCRIPTIONS",
    "resolve_reference_type",
]
