# File: tests/test_link_extractor.py
import pytest

from selenops.crawler.crawler import Crawler
from selenops.crawler.errors import ParseError
from selenops.crawler.link_extractor import extract_links, normalize_url

BASE = "https://example.com/"


def titles(html: str, base: str = BASE) -> dict[str, str]:
    return {link.url: link.title for link in extract_links(html, base)}


@pytest.mark.parametrize(
    "url,expected",
    [
        ("https://example.com", "https://example.com/"),
        ("HTTPS://Example.COM/Path", "https://example.com/Path"),
        ("https://example.com/a?x=1&y=2", "https://example.com/a"),
        ("https://example.com/a#section", "https://example.com/a"),
        ("https://example.com/a/?q=1#frag", "https://example.com/a/"),
        ("http://example.com:80/a", "http://example.com/a"),
        ("https://example.com:443/", "https://example.com/"),
        ("https://example.com:8443/", "https://example.com:8443/"),
        ("http://user:pw@Example.com/", "http://user:pw@example.com/"),
        ("http://[::1]:8080/x", "http://[::1]:8080/x"),
    ],
)
def test_normalize_url(url, expected):
    assert normalize_url(url) == expected


@pytest.mark.parametrize(
    "url",
    [
        "https://example.com",
        "https://Example.com/a/b?c=d#e",
        "http://example.com:80/x?y",
        "http://[::1]:8080/x#y",
        "https://example.com/%7Euser/",
        "https://BÜcher.example/x?y=1",
    ],
)
def test_normalize_is_idempotent(url):
    once = normalize_url(url)
    assert normalize_url(once) == once


def test_scenario_self_link_and_page2(seed_html):
    links = Crawler.parse_links(seed_html, BASE)
    assert {link.url for link in links} == {BASE, "https://example.com/page2"}


def test_non_http_links_are_dropped():
    html = (
        '<a href="mailto:a@b.com">mail</a>'
        '<a href="javascript:void(0)">js</a>'
        '<a href="tel:+123">phone</a>'
        '<a href="ftp://example.com/file">ftp</a>'
    )
    assert extract_links(html, BASE) == set()


def test_missing_and_broken_hrefs_are_dropped():
    html = '<a>no href</a><a name="x">anchor</a><a href="http://host:99999/">bad port</a>'
    assert extract_links(html, BASE) == set()


def test_empty_markup_gives_empty_set():
    assert extract_links("", BASE) == set()
    assert extract_links("<html></html>", BASE) == set()


def test_relative_links_resolve_against_page():
    html = '<a href="c.html">c</a><a href="../up">up</a><a href="//other.org/x?y=1">other</a>'
    assert set(titles(html, "https://example.com/a/b/index.html")) == {
        "https://example.com/a/b/c.html",
        "https://example.com/a/up",
        "https://other.org/x",
    }


def test_query_variants_collapse_to_first_anchor():
    html = (
        '<a href="/item?id=1">first</a>'
        '<a href="/item?id=2">second</a>'
        '<a href="/item#reviews">third</a>'
    )
    assert titles(html) == {"https://example.com/item": "first"}


def test_engine_does_not_filter_other_domains():
    html = '<a href="https://different.com">Different domain</a><a href="/page2">Same</a>'
    assert set(titles(html)) == {"https://different.com/", "https://example.com/page2"}


def test_title_prefers_aria_label():
    html = '<a href="/x" aria-label=" A " title="T"><img src="i.png" alt="I">B</a>'
    assert titles(html) == {"https://example.com/x": "A"}


def test_title_uses_image_alt_before_title_attr():
    html = '<a href="/x" title="T"><img src="i.png" alt=" Logo ">B</a>'
    assert titles(html) == {"https://example.com/x": "Logo"}


def test_title_attribute_before_text():
    html = '<a href="/x" title=" Tooltip ">B</a>'
    assert titles(html) == {"https://example.com/x": "Tooltip"}


def test_title_uses_text():
    html = '<a href="/x">\n   B  \n</a>'
    assert titles(html) == {"https://example.com/x": "B"}


def test_title_skips_blank_candidates():
    html = '<a href="/x" aria-label="   " title=""><img src="i.png" alt="">  B </a>'
    assert titles(html) == {"https://example.com/x": "B"}


def test_title_falls_back_to_normalized_url():
    html = '<a href="/x?q=1#top"><img src="i.png"></a>'
    assert titles(html) == {"https://example.com/x": "https://example.com/x"}


def test_parse_failure_raises_parse_error(monkeypatch):
    import selenops.crawler.link_extractor as module

    def broken(*args, **kwargs):
        raise RuntimeError("parser exploded")

    monkeypatch.setattr(module, "BeautifulSoup", broken)
    with pytest.raises(ParseError):
        extract_links("<a href='/x'>x</a>", BASE)


def test_idn_host_is_punycode_encoded():
    unicode_form = normalize_url("https://bücher.example/x")
    assert unicode_form == normalize_url("https://xn--bcher-kva.example/x")
    assert unicode_form == "https://xn--bcher-kva.example/x"


def test_idn_links_share_identity_with_punycode_links():
    html = '<a href="https://bücher.example/a">unicode</a><a href="https://xn--bcher-kva.example/a">ascii</a>'
    assert titles(html) == {"https://xn--bcher-kva.example/a": "unicode"}


def test_unencodable_host_is_dropped():
    html = f'<a href="http://a..b/">empty label</a><a href="http://{"a" * 64}.com/">long label</a>'
    assert extract_links(html, BASE) == set()


def test_title_text_whitespace_is_collapsed():
    html = '<a href="/x">Hello\n   World <b> again</b></a>'
    assert titles(html) == {"https://example.com/x": "Hello World again"}
