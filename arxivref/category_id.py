"""arXiv category identifiers such as ``cs.LG`` or ``astro-ph.HE``."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from arxivref.archive import Archive, Group

_DELIMITER = "."

_COMPSCI_SUBJECTS = frozenset(
    "AI AR CC CE CG CL CR CV CY DB DC DL DM DS ET FL GL GR GT HC IR IT LG LO MA "
    "MM MS NA NI OH OS PF PL RO SC SD SE SI SY".split()
)

_MATH_SUBJECTS = frozenset(
    "AC AG AP AT CA CO CT CV DG DS FA GM GN GR GT HO IT KT LO MG MP NA NT OA OC "
    "PR QA RA RT SG SP ST".split()
)

_PHYSICS_SUBJECTS = frozenset(
    "acc-ph ao-ph app-ph atm-clus atom-ph bio-ph chem-ph class-ph comp-ph data-an "
    "ed-pn flu-dyn gen-ph geo-ph hist-ph ins-det med-ph optics plasm-ph pop-ph "
    "soc-ph space-ph".split()
)

_NO_SUBJECT = frozenset({""})

_SUBJECTS = {
    Archive.ASTRO_PH: frozenset({"CO", "EP", "GA", "HE", "IM", "SR"}),
    Archive.COND_MAT: frozenset(
        {
            "dis-nn",
            "mes-hall",
            "mtrl-sci",
            "other",
            "quant-gas",
            "soft",
            "stat-mech",
            "str-el",
            "supr-con",
        }
    ),
    Archive.CS: _COMPSCI_SUBJECTS,
    Archive.ECON: frozenset({"EM", "GN", "TH"}),
    Archive.EESS: frozenset({"AS", "IV", "SP", "SY"}),
    Archive.GR_QC: _NO_SUBJECT,
    Archive.HEP_EX: _NO_SUBJECT,
    Archive.HEP_LAT: _NO_SUBJECT,
    Archive.HEP_PH: _NO_SUBJECT,
    Archive.HEP_TH: _NO_SUBJECT,
    Archive.MATH_PH: _NO_SUBJECT,
    Archive.MATH: _MATH_SUBJECTS,
    Archive.NLIN: frozenset({"AO", "CD", "CG", "PS", "SI"}),
    Archive.NUCL_EX: _NO_SUBJECT,
    Archive.NUCL_TH: _NO_SUBJECT,
    Archive.PHYSICS: _PHYSICS_SUBJECTS,
    Archive.Q_BIO: frozenset({"BM", "CB", "GN", "MN", "NC", "OT", "PE", "QM", "SC", "TO"}),
    Archive.Q_FIN: frozenset({"CP", "EC", "GN", "MF", "PM", "PR", "RM", "ST", "SR"}),
    Archive.QUANT_PH: _NO_SUBJECT,
    Archive.STAT: frozenset({"AP", "CO", "ME", "ML", "OT", "TH"}),
}


class CategoryIdErrorKind(Enum):
    """Why a category identifier was rejected."""

    EXPECTED_SUBJECT = "expected subject"
    INVALID_ARCHIVE = "invalid archive"
    INVALID_ARCHIVE_SUBJECT = "invalid archive subject"
    EXPECTED_BRACKETS = "expected brackets"


class CategoryIdError(ValueError):
    """Raised when a category identifier cannot be parsed or validated."""

    def __init__(
        self,
        kind: CategoryIdErrorKind,
        *,
        text: str | None = None,
        archive: Archive | None = None,
    ) -> None:
        self.kind = kind
        self.text = text
        self.archive = archive
        super().__init__(self._message())

    def _message(self) -> str:
        if self.kind is CategoryIdErrorKind.EXPECTED_SUBJECT:
            return "Expected to find a subject identifier"
        if self.kind is CategoryIdErrorKind.INVALID_ARCHIVE:
            return f"Invalid arXiv archive identifier: {self.text}"
        if self.kind is CategoryIdErrorKind.INVALID_ARCHIVE_SUBJECT:
            return (
                f'The arXiv subject "{self.text}" does not fall under '
                f'the archive "{self.archive}"'
            )
        return f"Expected a bracketed category such as [cs.LG], got {self.text!r}"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CategoryIdError):
            return NotImplemented
        return (self.kind, self.text, self.archive) == (other.kind, other.text, other.archive)

    def __hash__(self) -> int:
        return hash((self.kind, self.text, self.archive))


@dataclass(frozen=True)
class CategoryId:
    """A category made of a group, an archive and a subject class."""

    group: Group
    archive: Archive
    subject: str

    def __str__(self) -> str:
        return f"{self.archive}{_DELIMITER}{self.subject}"

    @classmethod
    def try_new(cls, archive: Archive, subject: str) -> CategoryId:
        """Build a category, checking that the subject belongs to the archive."""
        if subject not in _SUBJECTS[archive]:
            raise CategoryIdError(
                CategoryIdErrorKind.INVALID_ARCHIVE_SUBJECT, text=subject, archive=archive
            )
        return cls(Group.from_archive(archive), archive, subject)

    @classmethod
    def parse(cls, s: str) -> CategoryId:
        """Parse a category such as ``astro-ph.EP``."""
        parts = s.split(_DELIMITER)
        if len(parts) != 2:
            raise CategoryIdError(CategoryIdErrorKind.EXPECTED_SUBJECT)
        archive_str, subject = parts
        if not subject:
            raise CategoryIdError(CategoryIdErrorKind.EXPECTED_SUBJECT)
        try:
            archive = Archive.parse(archive_str)
        except ValueError:
            raise CategoryIdError(
                CategoryIdErrorKind.INVALID_ARCHIVE, text=archive_str
            ) from None
        return cls.try_new(archive, subject)

    @classmethod
    def parse_bracketed(cls, s: str) -> CategoryId:
        """Parse a bracketed category such as ``[astro-ph.CE]``."""
        if not (s.startswith("[") and s.endswith("]")) or len(s) < 2:
            raise CategoryIdError(CategoryIdErrorKind.EXPECTED_BRACKETS, text=s)
        return cls.parse(s[1:-1])