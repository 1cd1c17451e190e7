# arxivref

Parse and validate arXiv article identifiers, subject categories and the
stamps printed down the side of arXiv PDFs. Pure Python, no dependencies.

This is a library only: it has no command-line tool, and it never contacts
arxiv.org. URLs are built and taken apart as text.

## Installation

```
pip install arxivref
```

## Article identifiers

```python
from arxivref.article_id import ArticleId, ArticleIdError
from arxivref.article_version import ArticleVersion

article = ArticleId.parse("arXiv:9912.12345v2")
article.year            # 2099
article.month           # 12
article.number          # "12345"
article.version         # ArticleVersion(number=2)
article.unique_ident()  # "9912.12345"
str(article)            # "arXiv:9912.12345v2"
article.as_url()        # "https://arxiv.org/abs/9912.12345v2"

article.set_latest()
article.is_latest()     # True
str(article)            # "arXiv:9912.12345"
article.set_version(3)
str(article)            # "arXiv:9912.12345v3"
```

`ArticleId.parse` raises `ArticleIdError`; its `kind` is an
`ArticleIdErrorKind` (missing `arXiv` literal, missing `.number{vV}` part,
invalid year, month or number).

Identifiers can also be built from their parts. `ArticleId.new_latest` and
`ArticleId.new_versioned` do no checking. `ArticleId.try_new` (which takes an
`ArticleVersion` or an `int` as its version) and `ArticleId.try_latest` check
the parts — the year must be 2007–2099, the month 1–12, the number 4 or 5
ASCII digits — and raise `ArticleIdError` otherwise:

```python
ArticleId.try_latest(2011, 1, "00001")
ArticleId.try_new(2011, 1, "00001", 2)
ArticleId.try_latest(2006, 1, "00001")   # raises ArticleIdError
```

An abstract, HTML or PDF link on an arxiv.org domain can be turned back into
an identifier with `ArticleId.from_url`; a trailing `.pdf` is dropped. It
raises `UrlParsingError`, with a `UrlParsingErrorKind` as its `kind`, for
links it does not recognise:

```python
ArticleId.from_url("https://arxiv.org/pdf/2010.14462v2.pdf")
ArticleId.from_url("https://arxiv.org/abs/2010.14462")
```

The `number{vV}` part alone can be split with
`arxivref.article_version.parse_numbervv`, which returns the number and an
`ArticleVersion` and raises `ValueError` on malformed text:

```python
from arxivref.article_version import parse_numbervv

parse_numbervv("0001v1")   # ("0001", ArticleVersion(number=1))
```

`ArticleVersion()` means the latest version; `ArticleVersion(n)` accepts
0–255.

## Categories

```python
from arxivref.archive import Archive, Group
from arxivref.category_id import CategoryId, CategoryIdError

category = CategoryId.parse("astro-ph.HE")
category.group     # Group.PHYSICS
category.archive   # Archive.ASTRO_PH
category.subject   # "HE"
str(category)      # "astro-ph.HE"

CategoryId.parse_bracketed("[cs.LG]")
CategoryId.try_new(Archive.CS, "LG")

Archive.parse("astro-ph").as_url()     # "https://arxiv.org/archive/astro-ph"
Group.from_archive(Archive.HEP_TH)     # Group.PHYSICS
```

`CategoryId.parse`, `CategoryId.try_new` and `CategoryId.parse_bracketed`
raise `CategoryIdError`; its `kind` is a `CategoryIdErrorKind` saying whether
the subject was missing, the archive unknown, the subject not part of the
archive, or (for `parse_bracketed`) the square brackets were missing.
`Archive.parse` raises `ValueError` for an unknown archive.

## Stamps

```python
from arxivref.stamp import Stamp, StampError, parse_date

stamp = Stamp.parse("arXiv:0706.0001v1 [q-bio.CB] 1 Jun 2007")
stamp.id          # ArticleId for arXiv:0706.0001v1
stamp.category    # CategoryId for q-bio.CB
stamp.submitted   # datetime.date(2007, 6, 1)
str(stamp)        # "arXiv:0706.0001v1 [q-bio.CB] 1 Jun 2007"

parse_date("1 Jan 2000")   # datetime.date(2000, 1, 1)
```

A malformed stamp raises `StampError`, whose `kind` (a `StampErrorKind`)
tells which part was wrong: the identifier, the category, the date, or too
few components. For a bad identifier, `cause` holds the `ArticleIdError`.

## Running the tests

```
pip install -e ".[test]"
pytest
```