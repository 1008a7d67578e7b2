"""Citation record produced by the RIS parser.

Each recognized RIS tag maps to exactly one field; the tag is carried in the
field metadata so the dispatch table and ``Citation.get`` share one source of
truth.
"""

from dataclasses import asdict, dataclass, field, fields
from typing import Any, NamedTuple

from risparse.models.reference_types import ReferenceType

__all__ = ["Citation", "UnknownTag", "FIELD_BY_TAG", "REPEATABLE_TAGS", "SCALAR_TAGS"]


class UnknownTag(NamedTuple):
    """Tag/value pair for a tag outside the recognized set."""

    tag: str
    value: str


def _repeatable(tag: str) -> Any:
    return field(default_factory=list, metadata={"tag": tag, "repeatable": True})


def _scalar(tag: str) -> Any:
    return field(default=None, metadata={"tag": tag, "repeatable": False})


@dataclass(frozen=True)
class Citation:
    """Parsed RIS citation.

    Repeatable fields keep every occurrence in document order. Scalar fields
    keep the first occurrence only; ``None`` means the tag never appeared,
    which is distinct from an empty value.

    Attributes
    ----------
    reference_type : ReferenceType
        Kind of work (``TY``).
    authors, secondary_authors, tertiary_authors, subsidiary_authors : list[str]
        Author lists (``AU``, ``A2``, ``A3``, ``A4``).
    keywords : list[str]
        Keywords (``KW``).
    unknown_tags : list[UnknownTag]
        Unrecognized tags in file order, duplicates included.
    """

    reference_type: ReferenceType
    authors: list[str] = _repeatable("AU")
    secondary_authors: list[str] = _repeatable("A2")
    tertiary_authors: list[str] = _repeatable("A3")
    subsidiary_authors: list[str] = _repeatable("A4")
    abstract: str | None = _scalar("AB")
    author_address: str | None = _scalar("AD")
    accession_number: str | None = _scalar("AN")
    custom1: str | None = _scalar("C1")
    custom2: str | None = _scalar("C2")
    custom3: str | None = _scalar("C3")
    custom4: str | None = _scalar("C4")
    custom5: str | None = _scalar("C5")
    custom6: str | None = _scalar("C6")
    custom7: str | None = _scalar("C7")
    custom8: str | None = _scalar("C8")
    caption: str | None = _scalar("CA")
    call_number: str | None = _scalar("CN")
    place_published: str | None = _scalar("CY")
    date: str | None = _scalar("DA")
    database_name: str | None = _scalar("DB")
    doi: str | None = _scalar("DO")
    database_provider: str | None = _scalar("DP")
    end_page: str | None = _scalar("EP")
    edition: str | None = _scalar("ET")
    number: str | None = _scalar("IS")
    alternate_title: str | None = _scalar("J2")
    keywords: list[str] = _repeatable("KW")
    file_attachments: str | None = _scalar("L1")
    figure: str | None = _scalar("L4")
    language: str | None = _scalar("LA")
    label: str | None = _scalar("LB")
    work_type: str | None = _scalar("M3")
    notes: str | None = _scalar("N1")
    number_of_volumes: str | None = _scalar("NV")
    original_publication: str | None = _scalar("OP")
    publisher: str | None = _scalar("PB")
    year: str | None = _scalar("PY")
    reviewed_item: str | None = _scalar("RI")
    research_notes: str | None = _scalar("RN")
    reprint_edition: str | None = _scalar("RP")
    section: str | None = _scalar("SE")
    isbn: str | None = _scalar("SN")
    start_page: str | None = _scalar("SP")
    short_title: str | None = _scalar("ST")
    primary_title: str | None = _scalar("T1")
    secondary_title: str | None = _scalar("T2")
    tertiary_title: str | None = _scalar("T3")
    translated_author: str | None = _scalar("TA")
    title: str | None = _scalar("TI")
    translated_title: str | None = _scalar("TT")
    url: str | None = _scalar("UR")
    volume: str | None = _scalar("VL")
    access_date: str | None = _scalar("Y2")
    unknown_tags: list[UnknownTag] = field(default_factory=list)

    def get(self, tag: str) -> list[str] | str | None:
        """Return the value stored for a recognized tag.

        Parameters
        ----------
        tag : str
            Two-character RIS tag (e.g. 'TI', 'AU').

        Returns
        -------
        list[str] | str | None
            List for repeatable tags, string or None for scalar tags.

        Raises
        ------
        KeyError
            If ``tag`` is not a recognized field tag.
        """
        return getattr(self, FIELD_BY_TAG[tag])

    def to_dict(self) -> dict[str, Any]:
        """Convert citation to dictionary for JSON serialization.

        Returns
        -------
        dict[str, Any]
            Dictionary with the reference type as its RIS code and unknown
            tags as ``{"tag", "value"}`` objects.
        """
        data = asdict(self)
        data["reference_type"] = str(self.reference_type)
        data["unknown_tags"] = [t._asdict() for t in self.unknown_tags]
        return data

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Citation":
        """Reconstruct a Citation from a dictionary.

        Parameters
        ----------
        data : dict[str, Any]
            Dictionary (e.g. from JSON) as produced by ``to_dict``.

        Returns
        -------
        Citation
            Reconstructed citation.
        """
        kwargs: dict[str, Any] = {}
        for f in fields(cls):
            if f.name not in data or f.name in ("reference_type", "unknown_tags"):
                continue
            value = data[f.name]
            kwargs[f.name] = list(value) if f.metadata.get("repeatable") else value

        return cls(
            reference_type=ReferenceType(data["reference_type"]),
            unknown_tags=[UnknownTag(t["tag"], t["value"]) for t in data.get("unknown_tags", [])],
            **kwargs,
        )


FIELD_BY_TAG: dict[str, str] = {
    f.metadata["tag"]: f.name for f in fields(Citation) if "tag" in f.metadata
}

REPEATABLE_TAGS: frozenset[str] = frozenset(
    f.metadata["tag"] for f in fields(Citation) if f.metadata.get("repeatable")
)

SCALAR_TAGS: frozenset[str] = frozenset(FIELD_BY_TAG) - REPEATABLE_TAGS
