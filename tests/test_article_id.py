import pytest

from arxivref.article_id import (
    ArticleId,
    ArticleIdError,
    ArticleIdErrorKind,
    UrlParsingError,
    UrlParsingErrorKind,
)
from arxivref.article_version import ArticleVersion


def test_display_with_version():
    assert str(ArticleId.new_versioned(2007, 1, "0001", 1)) == "arXiv:0701.0001v1"


def test_display_without_version():
    assert str(ArticleId.new_latest(2007, 1, "0001")) == "arXiv:0701.0001"


def test_parse_from_readme():
    article = ArticleId.parse("arXiv:0706.0001v1")
    assert article.year == 2007
    assert article.month == 6
    assert article.number == "0001"
    assert article.version == ArticleVersion(1)


def test_parse_without_version():
    assert ArticleId.parse("arXiv:1501.00001") == ArticleId.new_latest(2015, 1, "00001")


def test_parse_with_version():
    assert ArticleId.parse("arXiv:9912.12345v2") == ArticleId(
        2099, 12, "12345", ArticleVersion(2)
    )


def test_number_four_digits():
    assert str(ArticleId.new_latest(2014, 1, "7878")) == "arXiv:1401.7878"
    assert str(ArticleId.new_latest(2014, 12, "7878")) == "arXiv:1412.7878"


def test_number_five_digits():
    assert str(ArticleId.new_latest(2014, 1, "00008")) == "arXiv:1401.00008"
    assert str(ArticleId.new_latest(2014, 12, "00008")) == "arXiv:1412.00008"


def test_parse_accessors():
    article = ArticleId.parse("arXiv:2304.11188v1")
    assert (article.year, article.month, article.number) == (2023, 4, "11188")
    assert article.version == ArticleVersion(1)


def test_parse_empty_string():
    with pytest.raises(ArticleIdError) as info:
        ArticleId.parse("")
    assert info.value.kind is ArticleIdErrorKind.EXPECTED_BEGINNING_LITERAL


def test_parse_wrong_literal():
    with pytest.raises(ArticleIdError) as info:
        ArticleId.parse("arxiv:2001.00001")
    assert info.value.kind is ArticleIdErrorKind.EXPECTED_BEGINNING_LITERAL


def test_parse_no_numbervv():
    with pytest.raises(ArticleIdError) as info:
        ArticleId.parse("arXiv:1501")
    assert info.value.kind is ArticleIdErrorKind.EXPECTED_NUMBER_VV


def test_parse_bad_numbervv():
    with pytest.raises(ArticleIdError) as info:
        ArticleId.parse("arXiv:1501.12ab")
    assert info.value.kind is ArticleIdErrorKind.EXPECTED_NUMBER_VV


def test_parse_invalid_month():
    with pytest.raises(ArticleIdError) as info:
        ArticleId.parse("arXiv:1513.00001")
    assert info.value.kind is ArticleIdErrorKind.INVALID_MONTH


def test_try_latest_invalid_year():
    with pytest.raises(ArticleIdError) as info:
        ArticleId.try_latest(2006, 1, "00001")
    assert info.value == ArticleIdError(ArticleIdErrorKind.INVALID_YEAR)


def test_try_latest_invalid_month():
    with pytest.raises(ArticleIdError) as info:
        ArticleId.try_latest(2007, 127, "00001")
    assert info.value.kind is ArticleIdErrorKind.INVALID_MONTH


def test_try_latest_invalid_id():
    with pytest.raises(ArticleIdError) as info:
        ArticleId.try_latest(2007, 11, "")
    assert info.value.kind is ArticleIdErrorKind.INVALID_ID


def test_try_new_non_digit_number():
    with pytest.raises(ArticleIdError) as info:
        ArticleId.try_new(2007, 11, "12a4", ArticleVersion())
    assert info.value.kind is ArticleIdErrorKind.INVALID_ID


def test_try_new_ok():
    article = ArticleId.try_new(2011, 1, "00001", ArticleVersion(1))
    assert article == ArticleId.new_versioned(2011, 1, "00001", 1)


def test_error_message():
    assert str(ArticleIdError(ArticleIdErrorKind.INVALID_MONTH)) == (
        "A valid month must be between 1 and 12."
    )


def test_set_version_and_latest():
    article = ArticleId.parse("arXiv:2001.00001")
    assert article.is_latest()
    article.set_version(1)
    assert article.version == ArticleVersion(1)
    assert not article.is_latest()
    article.set_latest()
    assert article.version == ArticleVersion()


def test_unique_ident():
    assert ArticleId.new_versioned(2020, 10, "14462", 2).unique_ident() == "2010.14462"


def test_as_url_versioned():
    article = ArticleId.new_versioned(2020, 10, "14462", 2)
    assert article.as_url() == "https://arxiv.org/abs/2010.14462v2"


def test_as_url_latest():
    article = ArticleId.try_new(2007, 1, "00001", ArticleVersion())
    assert article.as_url() == "https://arxiv.org/abs/0701.00001"


def test_string_round_trip():
    text = "arXiv:1412.00008v3"
    assert str(ArticleId.parse(text)) == text


@pytest.mark.parametrize(
    "url",
    [
        "https://arxiv.org/abs/2010.14462v2",
        "https://arxiv.org/html/2010.14462v2",
        "https://arxiv.org/pdf/2010.14462v2.pdf",
        "https://export.arxiv.org/abs/2010.14462v2",
    ],
)
def test_from_url_ok(url):
    assert ArticleId.from_url(url) == ArticleId.new_versioned(2020, 10, "14462", 2)


def test_from_url_round_trip():
    article = ArticleId.new_latest(2015, 1, "00001")
    assert ArticleId.from_url(article.as_url()) == article


def test_from_url_invalid_domain():
    with pytest.raises(UrlParsingError) as info:
        ArticleId.from_url("https://example.com/abs/2010.14462")
    assert info.value == UrlParsingError(
        UrlParsingErrorKind.INVALID_DOMAIN, domain="example.com"
    )


def test_from_url_missing_domain():
    with pytest.raises(UrlParsingError) as info:
        ArticleId.from_url("https://127.0.0.1/abs/2010.14462")
    assert info.value.kind is UrlParsingErrorKind.MISSING_DOMAIN


def test_from_url_invalid_format():
    with pytest.raises(UrlParsingError) as info:
        ArticleId.from_url("https://arxiv.org/list/2010.14462")
    assert info.value.kind is UrlParsingErrorKind.INVALID_ARXIV_FORMAT


def test_from_url_missing_article_id():
    with pytest.raises(UrlParsingError) as info:
        ArticleId.from_url("https://arxiv.org/abs")
    assert info.value.kind is UrlParsingErrorKind.MISSING_ARTICLE_ID


def test_from_url_invalid_article_id():
    with pytest.raises(UrlParsingError) as info:
        ArticleId.from_url("https://arxiv.org/abs/2013.14462")
    assert info.value.kind is UrlParsingErrorKind.INVALID_ARTICLE_ID
    assert info.value.cause == ArticleIdError(ArticleIdErrorKind.INVALID_MONTH)