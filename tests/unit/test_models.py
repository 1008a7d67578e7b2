"""Unit tests for the Citation model."""

import json
from dataclasses import FrozenInstanceError

import pytest

from risparse.models import Citation, ReferenceType, UnknownTag
from risparse.parse.ris import parse_ris


@pytest.fixture
def citation(sample_text: str) -> Citation:
    """Parsed documented example with one unknown tag appended."""
    return parse_ris(sample_text.replace("ER  -", "M1  - extra\nER  -"))


@pytest.mark.unit
def test_citation_is_frozen(citation: Citation) -> None:
    """Citation attributes cannot be reassigned."""
    with pytest.raises(FrozenInstanceError):
        citation.title = "changed"  # type: ignore[misc]


@pytest.mark.unit
def test_default_citation_is_empty() -> None:
    """Only the reference type is required."""
    citation = Citation(reference_type=ReferenceType.BOOK)

    assert citation.authors == []
    assert citation.keywords == []
    assert citation.title is None
    assert citation.unknown_tags == []


@pytest.mark.unit
def test_repeatable_defaults_are_not_shared() -> None:
    """Each citation gets its own lists."""
    a = Citation(reference_type=ReferenceType.BOOK)
    b = Citation(reference_type=ReferenceType.BOOK)

    assert a.authors is not b.authors


@pytest.mark.unit
def test_get_by_tag(citation: Citation) -> None:
    """get() returns the stored value for a recognized tag."""
    assert citation.get("TI") == "Nim RIS module documentation"
    assert citation.get("KW") == ["Nim", "RIS", "module"]
    assert citation.get("AB") is None


@pytest.mark.unit
def test_get_unknown_tag_raises(citation: Citation) -> None:
    """get() only covers recognized field tags."""
    with pytest.raises(KeyError):
        citation.get("M1")


@pytest.mark.unit
def test_to_dict_is_json_ready(citation: Citation) -> None:
    """to_dict() uses the RIS code and plain objects for unknown tags."""
    data = citation.to_dict()

    assert data["reference_type"] == "ELEC"
    assert data["unknown_tags"] == [{"tag": "M1", "value": "extra"}]
    assert data["abstract"] is None
    assert json.loads(json.dumps(data)) == data


@pytest.mark.unit
def test_to_dict_case_type_uses_code() -> None:
    """CASETYPE serializes as its RIS code."""
    assert Citation(reference_type=ReferenceType.CASETYPE).to_dict()["reference_type"] == "CASE"


@pytest.mark.unit
def test_from_dict_rebuilds_citation(citation: Citation) -> None:
    """from_dict() reverses to_dict() through JSON."""
    rebuilt = Citation.from_dict(json.loads(json.dumps(citation.to_dict())))

    assert rebuilt == citation
    assert rebuilt.unknown_tags[0] == UnknownTag("M1", "extra")
    assert rebuilt.reference_type is ReferenceType.ELEC


@pytest.mark.unit
def test_from_dict_missing_fields_default() -> None:
    """Missing keys fall back to field defaults."""
    citation = Citation.from_dict({"reference_type": "THES", "title": "On RIS"})

    assert citation.reference_type is ReferenceType.THES
    assert citation.title == "On RIS"
    assert citation.authors == []
