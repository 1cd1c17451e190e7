"""Archives and groups of the arXiv category taxonomy."""

from __future__ import annotations

from enum import Enum

_ARCHIVE_URL_BASE = "https://arxiv.org/archive/"


class Archive(Enum):
    """A collection of publications that relate under the same field of study."""

    ASTRO_PH = "astro-ph"
    COND_MAT = "cond-mat"
    CS = "cs"
    ECON = "econ"
    EESS = "eess"
    GR_QC = "gr-qc"
    HEP_EX = "hep-ex"
    HEP_LAT = "hep-lat"
    HEP_PH = "hep-ph"
    HEP_TH = "hep-th"
    MATH_PH = "math-ph"
    MATH = "math"
    NLIN = "nlin"
    NUCL_EX = "nucl-ex"
    NUCL_TH = "nucl-th"
    PHYSICS = "physics"
    Q_BIO = "q-bio"
    Q_FIN = "q-fin"
    QUANT_PH = "quant-ph"
    STAT = "stat"

    def __str__(self) -> str:
        return self.value

    def contains_subjects(self) -> bool:
        """Return True if the archive has no nested subject classes."""
        return self in _ARCHIVES_WITHOUT_SUBJECT_CLASSES

    def as_url(self) -> str:
        """Return the URL of the archive's listing page."""
        return f"{_ARCHIVE_URL_BASE}{self.value}"

    @classmethod
    def parse(cls, s: str) -> Archive:
        """Parse an archive identifier such as ``astro-ph``."""
        try:
            return cls(s)
        except ValueError:
            raise ValueError(f"invalid arXiv archive identifier: {s!r}") from None


_ARCHIVES_WITHOUT_SUBJECT_CLASSES = frozenset(
    {
        Archive.GR_QC,
        Archive.HEP_EX,
        Archive.HEP_LAT,
        Archive.HEP_PH,
        Archive.HEP_TH,
        Archive.MATH_PH,
        Archive.NUCL_EX,
        Archive.NUCL_TH,
        Archive.QUANT_PH,
    }
)


class Group(Enum):
    """A top-level classification for arXiv publications."""

    CS = "cs"
    ECON = "econ"
    EESS = "eess"
    MATH = "math"
    PHYSICS = "physics"
    Q_BIO = "q-bio"
    Q_FIN = "q-fin"
    STAT = "stat"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def from_archive(cls, archive: Archive) -> Group:
        """Return the group an archive belongs to."""
        return _GROUP_OF_ARCHIVE[archive]


_GROUP_OF_ARCHIVE = {
    Archive.CS: Group.CS,
    Archive.ECON: Group.ECON,
    Archive.EESS: Group.EESS,
    Archive.MATH: Group.MATH,
    Archive.ASTRO_PH: Group.PHYSICS,
    Archive.COND_MAT: Group.PHYSICS,
    Archive.GR_QC: Group.PHYSICS,
    Archive.HEP_EX: Group.PHYSICS,
    Archive.HEP_LAT: Group.PHYSICS,
    Archive.HEP_PH: Group.PHYSICS,
    Archive.HEP_TH: Group.PHYSICS,
    Archive.MATH_PH: Group.PHYSICS,
    Archive.NLIN: Group.PHYSICS,
    Archive.NUCL_EX: Group.PHYSICS,
    Archive.NUCL_TH: Group.PHYSICS,
    Archive.PHYSICS: Group.PHYSICS,
    Archive.QUANT_PH: Group.PHYSICS,
    Archive.Q_BIO: Group.Q_BIO,
    Archive.Q_FIN: Group.Q_FIN,
    Archive.STAT: Group.STAT,
}