"""Stamps printed along the side of arXiv PDFs, e.g. ``arXiv:0706.0001v1 [q-bio.CB] 1 Jun 2007``."""

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import date
from enum import Enum

from arxivref.article_id import ArticleId, ArticleIdError
from arxivref.category_id import CategoryId, CategoryIdError

_SEPARATOR = " "
_MONTH_ABBREVIATIONS = (
    "Jan",
    "Feb",
    "Mar",
    "Apr",
    "May",
    "Jun",
    "Jul",
    "Aug",
    "Sep",
    "Oct",
    "Nov",
    "Dec",
)
_MONTH_NUMBERS = {name.lower(): index for index, name in enumerate(_MONTH_ABBREVIATIONS, 1)}
_DATE_PATTERN = re.compile(r" ?([0-9]{1,2}) ([A-Za-z]{3}) ([0-9]{4})", re.ASCII)


class StampErrorKind(Enum):
    """Why a stamp was rejected."""

    INVALID_ARXIV_ID = "Invalid arXiv ID"
    INVALID_DATE = "Invalid date"
    INVALID_CATEGORY = "Invalid category"
    NOT_ENOUGH_COMPONENTS = "Not enough components"


class StampError(ValueError):
    """Raised when a stamp cannot be parsed."""

    def __init__(self, kind: StampErrorKind, *, cause: ArticleIdError | None = None) -> None:
        self.kind = kind
        self.cause = cause
        message = kind.value if cause is None else f"{kind.value}: {cause}"
        super().__init__(message)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, StampError):
            return NotImplemented
        return (self.kind, self.cause) == (other.kind, other.cause)

    def __hash__(self) -> int:
        return hash((self.kind, self.cause))


def parse_date(date_str: str) -> date:
    """Parse a date such as ``1 Jan 2000``.

    The day has no zero padding, the month is a three-letter abbreviation and
    the year has four digits. Raises ValueError on anything else.
    """
    match = _DATE_PATTERN.fullmatch(date_str)
    if match is None:
        raise ValueError(f"expected a date like '1 Jan 2000', got {date_str!r}")
    day_text, month_text, year_text = match.groups()
    month = _MONTH_NUMBERS.get(month_text.lower())
    if month is None:
        raise ValueError(f"unknown month abbreviation {month_text!r}")
    return date(int(year_text), month, int(day_text))


def _format_date(value: date) -> str:
    return f"{value.day} {_MONTH_ABBREVIATIONS[value.month - 1]} {value.year:04}"


@dataclass
class Stamp:
    """An article identifier, its primary category and its submission date."""

    id: ArticleId
    category: CategoryId
    submitted: date

    def __str__(self) -> str:
        return f"{self.id} [{self.category}] {_format_date(self.submitted)}"

    @classmethod
    def parse(cls, s: str) -> Stamp:
        """Parse a stamp of the form ``<id> [<category>] <date>``."""
        first = s.find(_SEPARATOR)
        if first < 0:
            raise StampError(StampErrorKind.NOT_ENOUGH_COMPONENTS)
        second = s.find(_SEPARATOR, first + 1)
        if second < 0:
            raise StampError(StampErrorKind.NOT_ENOUGH_COMPONENTS)

        try:
            article_id = ArticleId.parse(s[:first])
        except ArticleIdError as error:
            raise StampError(StampErrorKind.INVALID_ARXIV_ID, cause=error) from error

        try:
            category = CategoryId.parse_bracketed(s[first + 1 : second])
        except CategoryIdError as error:
            raise StampError(StampErrorKind.INVALID_CATEGORY) from error

        try:
            submitted = parse_date(s[second + 1 :])
        except ValueError as error:
            raise StampError(StampErrorKind.INVALID_DATE) from error

        return cls(article_id, category, submitted)