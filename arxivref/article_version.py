"""Article versions and the ``number{vV}`` component of identifiers."""

from __future__ import annotations

from dataclasses import dataclass

_DIGITS = frozenset("0123456789")
_MAX_VERSION = 255


@dataclass(frozen=True)
class ArticleVersion:
    """The version of an article; ``number`` is None for the latest version."""

    number: int | None = None

    def __post_init__(self) -> None:
        if self.number is not None and not 0 <= self.number <= _MAX_VERSION:
            raise ValueError(f"article version must be between 0 and {_MAX_VERSION}")

    def is_latest(self) -> bool:
        """Return True if this refers to the latest version."""
        return self.number is None

    def __str__(self) -> str:
        return "" if self.number is None else f"v{self.number}"


def _is_digit(c: str) -> bool:
    return c in _DIGITS


def parse_numbervv(s: str) -> tuple[str, ArticleVersion]:
    """Parse ``number{vV}``: 4 or 5 digits, optionally followed by ``v`` and digits.

    Raises ValueError if the text does not have that form.
    """
    if len(s) < 4 or not all(map(_is_digit, s[:4])):
        raise ValueError(f"expected at least four leading digits in {s!r}")

    number_len = 5 if len(s) > 4 and _is_digit(s[4]) else 4
    number = s[:number_len]
    rest = s[number_len:]

    version = ArticleVersion()
    if rest.startswith("v"):
        digits = []
        for c in rest[1:]:
            if not _is_digit(c):
                break
            digits.append(c)
        if not digits:
            raise ValueError(f"expected digits after 'v' in {s!r}")
        value = int("".join(digits))
        if value > _MAX_VERSION:
            raise ValueError(f"version out of range in {s!r}")
        version = ArticleVersion(value)

    return number, version