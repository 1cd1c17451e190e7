"""arXiv article identifiers such as ``arXiv:2304.11188v1``."""

from __future__ import annotations

import ipaddress
import re
from dataclasses import dataclass, field
from enum import Enum
from urllib.parse import urlsplit

from arxivref.article_version import ArticleVersion, parse_numbervv

MIN_YEAR = 2007
MAX_YEAR = 2099
MIN_NUM_DIGITS = 4
MAX_NUM_DIGITS = 5
MIN_MONTH = 1
MAX_MONTH = 12

_TOKEN_COLON = ":"
_TOKEN_DOT = "."
_LITERAL = "arXiv"
_ABS_URL_BASE = "https://arxiv.org/abs/"
_URL_FORMATS = frozenset({"abs", "html", "pdf"})
_PDF_SUFFIX = ".pdf"
_INTEGER = re.compile(r"[+-]?[0-9]+", re.ASCII)


class ArticleIdScheme(Enum):
    """The versioned grammar that defines an arXiv identifier."""

    OLD = "old"
    """Identifier scheme up to March 2007."""
    NEW = "new"
    """Identifier scheme since 1 April 2007."""


class ArticleIdErrorKind(Enum):
    """Why an article identifier was rejected."""

    EXPECTED_BEGINNING_LITERAL = 'Expected the identifier to start with the literal "arXiv".'
    EXPECTED_NUMBER_VV = "Expected the identifier to have a component of format .number{vV}."
    INVALID_MONTH = "A valid month must be between 1 and 12."
    INVALID_YEAR = "A valid year must be be between 2007 and 2099."
    INVALID_ID = "A valid identifier must be between 1 and 99999"


class ArticleIdError(ValueError):
    """Raised when an article identifier cannot be parsed or validated."""

    def __init__(self, kind: ArticleIdErrorKind) -> None:
        self.kind = kind
        super().__init__(kind.value)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ArticleIdError):
            return NotImplemented
        return self.kind is other.kind

    def __hash__(self) -> int:
        return hash(self.kind)


class UrlParsingErrorKind(Enum):
    """Why a URL could not be turned into an article identifier."""

    MISSING_DOMAIN = "the URL has no domain"
    INVALID_DOMAIN = "the URL's domain is not arxiv.org"
    MISSING_URL_SEGMENTS = "the URL has no path segments"
    MISSING_FORMAT = "the URL has no format segment"
    INVALID_ARXIV_FORMAT = "the URL's format segment must be abs, html or pdf"
    MISSING_ARTICLE_ID = "the URL has no article identifier"
    INVALID_ARTICLE_ID = "the URL's article identifier is invalid"


class UrlParsingError(ValueError):
    """Raised when a URL does not point to an arXiv article."""

    def __init__(
        self,
        kind: UrlParsingErrorKind,
        *,
        domain: str | None = None,
        cause: ArticleIdError | None = None,
    ) -> None:
        self.kind = kind
        self.domain = domain
        self.cause = cause
        message = kind.value
        if domain is not None:
            message = f"{message}: {domain}"
        if cause is not None:
            message = f"{message}: {cause}"
        super().__init__(message)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, UrlParsingError):
            return NotImplemented
        return (self.kind, self.domain, self.cause) == (other.kind, other.domain, other.cause)

    def __hash__(self) -> int:
        return hash((self.kind, self.domain, self.cause))


def _parse_int(text: str) -> int | None:
    if _INTEGER.fullmatch(text) is None:
        return None
    return int(text)


@dataclass
class ArticleId:
    """A unique identifier for an article published on arXiv.

    Constructing it directly performs no validation; use ``try_new`` or
    ``parse`` for checked construction.
    """

    year: int
    month: int
    number: str
    version: ArticleVersion = field(default_factory=ArticleVersion)

    @classmethod
    def new_latest(cls, year: int, month: int, number: str) -> ArticleId:
        """Build an unchecked identifier referring to the latest version."""
        return cls(year, month, number, ArticleVersion())

    @classmethod
    def new_versioned(cls, year: int, month: int, number: str, version: int) -> ArticleId:
        """Build an unchecked identifier with a specific version."""
        return cls(year, month, number, ArticleVersion(version))

    @classmethod
    def try_new(
        cls,
        year: int,
        month: int,
        number: str,
        version: ArticleVersion | int,
    ) -> ArticleId:
        """Build an identifier, validating every component."""
        if not MIN_YEAR <= year <= MAX_YEAR:
            raise ArticleIdError(ArticleIdErrorKind.INVALID_YEAR)
        if not MIN_MONTH <= month <= MAX_MONTH:
            raise ArticleIdError(ArticleIdErrorKind.INVALID_MONTH)
        length_ok = MIN_NUM_DIGITS <= len(number) <= MAX_NUM_DIGITS
        digits_ok = all(c in "0123456789" for c in number)
        if not length_ok or not digits_ok:
            raise ArticleIdError(ArticleIdErrorKind.INVALID_ID)
        if isinstance(version, int):
            version = ArticleVersion(version)
        return cls(year, month, number, version)

    @classmethod
    def try_latest(cls, year: int, month: int, number: str) -> ArticleId:
        """Build a validated identifier referring to the latest version."""
        return cls.try_new(year, month, number, ArticleVersion())

    @classmethod
    def _parse_unique_ident(cls, ident: str) -> ArticleId:
        parts = ident.split(_TOKEN_DOT)
        if len(parts) != 2:
            raise ArticleIdError(ArticleIdErrorKind.EXPECTED_NUMBER_VV)
        date, numbervv = parts

        year_text = date[0:2]
        year = _parse_int(year_text) if len(year_text) == 2 else None
        if year is None:
            raise ArticleIdError(ArticleIdErrorKind.INVALID_YEAR)

        month_text = date[2:4]
        month = _parse_int(month_text) if len(month_text) == 2 else None
        if month is None:
            raise ArticleIdError(ArticleIdErrorKind.INVALID_MONTH)

        try:
            number, version = parse_numbervv(numbervv)
        except ValueError:
            raise ArticleIdError(ArticleIdErrorKind.EXPECTED_NUMBER_VV) from None

        return cls.try_new(year + 2000, month, number, version)

    @classmethod
    def parse(cls, value: str) -> ArticleId:
        """Parse an identifier of the form ``arXiv:YYMM.NNNNN[vV]``."""
        parts = value.split(_TOKEN_COLON)
        if len(parts) != 2 or parts[0] != _LITERAL:
            raise ArticleIdError(ArticleIdErrorKind.EXPECTED_BEGINNING_LITERAL)
        return cls._parse_unique_ident(parts[1])

    @classmethod
    def from_url(cls, url: str) -> ArticleId:
        """Extract an identifier from an arxiv.org abs, html or pdf URL."""
        parts = urlsplit(url)
        domain = parts.hostname
        if domain:
            try:
                ipaddress.ip_address(domain)
            except ValueError:
                pass
            else:
                domain = None
        if not domain:
            raise UrlParsingError(UrlParsingErrorKind.MISSING_DOMAIN)
        if not domain.endswith("arxiv.org"):
            raise UrlParsingError(UrlParsingErrorKind.INVALID_DOMAIN, domain=domain)

        path = parts.path
        if path == "":
            segments = [""]
        elif path.startswith("/"):
            segments = path[1:].split("/")
        else:
            raise UrlParsingError(UrlParsingErrorKind.MISSING_URL_SEGMENTS)

        if not segments:
            raise UrlParsingError(UrlParsingErrorKind.MISSING_FORMAT)
        if segments[0] not in _URL_FORMATS:
            raise UrlParsingError(UrlParsingErrorKind.INVALID_ARXIV_FORMAT)
        if len(segments) < 2:
            raise UrlParsingError(UrlParsingErrorKind.MISSING_ARTICLE_ID)

        ident = segments[1]
        if ident.endswith(_PDF_SUFFIX):
            ident = ident[: -len(_PDF_SUFFIX)]
        try:
            return cls._parse_unique_ident(ident)
        except ArticleIdError as error:
            raise UrlParsingError(
                UrlParsingErrorKind.INVALID_ARTICLE_ID, cause=error
            ) from error

    def is_latest(self) -> bool:
        """Return True if the identifier refers to the latest version."""
        return self.version.is_latest()

    def set_version(self, version: int) -> None:
        """Pin the identifier to a specific version."""
        self.version = ArticleVersion(version)

    def set_latest(self) -> None:
        """Make the identifier refer to the latest version."""
        self.version = ArticleVersion()

    def unique_ident(self) -> str:
        """Return the identifier without the ``arXiv:`` prefix or version."""
        half_year = str(self.year)[2:]
        width = 4 if len(self.number) == 4 else 5
        return f"{half_year:2}{self.month:02}.{self.number:{width}}"

    def as_url(self) -> str:
        """Return the URL of the article's abstract page."""
        return f"{_ABS_URL_BASE}{self.unique_ident()}{self.version}"

    def __str__(self) -> str:
        return f"{_LITERAL}{_TOKEN_COLON}{self.unique_ident()}{self.version}"