from datetime import date

import pytest

from arxivref.archive import Archive
from arxivref.article_id import ArticleId, ArticleIdError, ArticleIdErrorKind
from arxivref.category_id import CategoryId
from arxivref.stamp import Stamp, StampError, StampErrorKind, parse_date


def test_display_stamp():
    stamp = Stamp(
        ArticleId.parse("arXiv:2011.00001"),
        CategoryId.try_new(Archive.CS, "LG"),
        date(2011, 1, 1),
    )
    assert str(stamp) == "arXiv:2011.00001 [cs.LG] 1 Jan 2011"


def test_parse_stamp():
    parsed = Stamp.parse("arXiv:2001.00001 [cs.LG] 1 Jan 2000")
    assert parsed == Stamp(
        ArticleId.parse("arXiv:2001.00001"),
        CategoryId.try_new(Archive.CS, "LG"),
        date(2000, 1, 1),
    )


def test_parse_stamp_readme():
    parsed = Stamp.parse("arXiv:0706.0001v1 [q-bio.CB] 1 Jun 2007")
    assert parsed == Stamp(
        ArticleId.parse("arXiv:0706.0001v1"),
        CategoryId.try_new(Archive.Q_BIO, "CB"),
        date(2007, 6, 1),
    )
    assert parsed.submitted.year == 2007


@pytest.mark.parametrize("text", ["", "arXiv:2001.00001", "arXiv:2001.00001 [cs.LG]"])
def test_not_enough_components(text):
    with pytest.raises(StampError) as info:
        Stamp.parse(text)
    assert info.value == StampError(StampErrorKind.NOT_ENOUGH_COMPONENTS)
    assert str(info.value) == "Not enough components"


def test_invalid_category():
    with pytest.raises(StampError) as info:
        Stamp.parse("arXiv:2001.00001 [cs.LG 1 Jan 2000")
    assert info.value.kind is StampErrorKind.INVALID_CATEGORY


def test_invalid_date_day():
    with pytest.raises(StampError) as info:
        Stamp.parse("arXiv:2001.00001 [cs.LG] 32 Jan 2000")
    assert info.value == StampError(StampErrorKind.INVALID_DATE)


def test_invalid_date_month():
    with pytest.raises(StampError) as info:
        Stamp.parse("arXiv:2001.00001 [cs.LG] 1 Zan 2000")
    assert info.value.kind is StampErrorKind.INVALID_DATE
    assert str(info.value) == "Invalid date"


def test_invalid_arxiv_id_carries_cause():
    with pytest.raises(StampError) as info:
        Stamp.parse("foo [cs.LG] 1 Jan 2000")
    expected_cause = ArticleIdError(ArticleIdErrorKind.EXPECTED_BEGINNING_LITERAL)
    assert info.value.kind is StampErrorKind.INVALID_ARXIV_ID
    assert info.value.cause == expected_cause
    assert str(info.value).startswith("Invalid arXiv ID: ")


def test_stamp_error_is_value_error():
    with pytest.raises(ValueError):
        Stamp.parse("arXiv:2001.00001 [cs.XX] 1 Jan 2000")


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("1 Jan 2000", date(2000, 1, 1)),
        ("29 Feb 2024", date(2024, 2, 29)),
        ("7 Sep 2019", date(2019, 9, 7)),
    ],
)
def test_parse_date(text, expected):
    assert parse_date(text) == expected


@pytest.mark.parametrize(
    "text", ["", "32 Jan 2000", "1 Zan 2000", "30 Feb 2020", "1 Jan 20", "1 Jan 2000 extra"]
)
def test_parse_date_rejects(text):
    with pytest.raises(ValueError):
        parse_date(text)