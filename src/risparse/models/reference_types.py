"""Closed enumeration of RIS reference types (the ``TY`` tag values)."""

from enum import StrEnum

from risparse.errors import UnknownReferenceType

__all__ = ["ReferenceType", "REFERENCE_TYPE_DESCRIPTIONS", "resolve_reference_type"]


class ReferenceType(StrEnum):
    """RIS reference type.

    Member values are the RIS codes. ``CASE`` is exposed as ``CASETYPE``;
    it is the only member whose name differs from its code.
    """

    ABST = "ABST"
    ADVS = "ADVS"
    AGGR = "AGGR"
    ANCIENT = "ANCIENT"
    ART = "ART"
    BILL = "BILL"
    BLOG = "BLOG"
    BOOK = "BOOK"
    CASETYPE = "CASE"
    CHAP = "CHAP"
    CHART = "CHART"
    CLSWK = "CLSWK"
    COMP = "COMP"
    CONF = "CONF"
    CPAPER = "CPAPER"
    CTLG = "CTLG"
    DATA = "DATA"
    DBASE = "DBASE"
    DICT = "DICT"
    EBOOK = "EBOOK"
    ECHAP = "ECHAP"
    EDBOOK = "EDBOOK"
    EJOUR = "EJOUR"
    ELEC = "ELEC"
    ENCYC = "ENCYC"
    EQUA = "EQUA"
    FIGURE = "FIGURE"
    GEN = "GEN"
    GOVDOC = "GOVDOC"
    GRANT = "GRANT"
    HEAR = "HEAR"
    ICOMM = "ICOMM"
    INPR = "INPR"
    JFULL = "JFULL"
    JOUR = "JOUR"
    LEGAL = "LEGAL"
    MANSCPT = "MANSCPT"
    MAP = "MAP"
    MGZN = "MGZN"
    MPCT = "MPCT"
    MULTI = "MULTI"
    MUSIC = "MUSIC"
    NEWS = "NEWS"
    PAMP = "PAMP"
    PAT = "PAT"
    PCOMM = "PCOMM"
    RPRT = "RPRT"
    SER = "SER"
    SLIDE = "SLIDE"
    SOUND = "SOUND"
    STAND = "STAND"
    STAT = "STAT"
    THES = "THES"
    UNPB = "UNPB"
    VIDEO = "VIDEO"

    @property
    def description(self) -> str:
        """Human-readable name of the reference type."""
        return REFERENCE_TYPE_DESCRIPTIONS[self]


REFERENCE_TYPE_DESCRIPTIONS: dict[ReferenceType, str] = {
    ReferenceType.ABST: "Abstract",
    ReferenceType.ADVS: "Audiovisual material",
    ReferenceType.AGGR: "Aggregated Database",
    ReferenceType.ANCIENT: "Ancient Text",
    ReferenceType.ART: "Art Work",
    ReferenceType.BILL: "Bill",
    ReferenceType.BLOG: "Blog",
    ReferenceType.BOOK: "Whole book",
    ReferenceType.CASETYPE: "Case",
    ReferenceType.CHAP: "Book chapter",
    ReferenceType.CHART: "Chart",
    ReferenceType.CLSWK: "Classical Work",
    ReferenceType.COMP: "Computer program",
    ReferenceType.CONF: "Conference proceeding",
    ReferenceType.CPAPER: "Conference paper",
    ReferenceType.CTLG: "Catalog",
    ReferenceType.DATA: "Data file",
    ReferenceType.DBASE: "Online Database",
    ReferenceType.DICT: "Dictionary",
    ReferenceType.EBOOK: "Electronic Book",
    ReferenceType.ECHAP: "Electronic Book Section",
    ReferenceType.EDBOOK: "Edited Book",
    ReferenceType.EJOUR: "Electronic Article",
    ReferenceType.ELEC: "Web Page",
    ReferenceType.ENCYC: "Encyclopedia",
    ReferenceType.EQUA: "Equation",
    ReferenceType.FIGURE: "Figure",
    ReferenceType.GEN: "Generic",
    ReferenceType.GOVDOC: "Government Document",
    ReferenceType.GRANT: "Grant",
    ReferenceType.HEAR: "Hearing",
    ReferenceType.ICOMM: "Internet Communication",
    ReferenceType.INPR: "In Press",
    ReferenceType.JFULL: "Journal (full)",
    ReferenceType.JOUR: "Journal",
    ReferenceType.LEGAL: "Legal Rule or Regulation",
    ReferenceType.MANSCPT: "Manuscript",
    ReferenceType.MAP: "Map",
    ReferenceType.MGZN: "Magazine article",
    ReferenceType.MPCT: "Motion picture",
    ReferenceType.MULTI: "Online Multimedia",
    ReferenceType.MUSIC: "Music score",
    ReferenceType.NEWS: "Newspaper",
    ReferenceType.PAMP: "Pamphlet",
    ReferenceType.PAT: "Patent",
    ReferenceType.PCOMM: "Personal communication",
    ReferenceType.RPRT: "Report",
    ReferenceType.SER: "Serial publication",
    ReferenceType.SLIDE: "Slide",
    ReferenceType.SOUND: "Sound recording",
    ReferenceType.STAND: "Standard",
    ReferenceType.STAT: "Statute",
    ReferenceType.THES: "Thesis/Dissertation",
    ReferenceType.UNPB: "Unpublished work",
    ReferenceType.VIDEO: "Video recording",
}


def resolve_reference_type(code: str) -> ReferenceType:
    """Map a raw ``TY`` value to its reference type.

    Matching is exact and case-sensitive; the value is not trimmed.

    Parameters
    ----------
    code : str
        Raw value of the ``TY`` tag.

    Returns
    -------
    ReferenceType
        Matching reference type.

    Raises
    ------
    UnknownReferenceType
        If ``code`` is not one of the known codes.
    """
    try:
        return ReferenceType(code)
    except ValueError:
        raise UnknownReferenceType(code) from None
