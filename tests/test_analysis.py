import pytest
import requests

from seo_inspector.analysis import analyze_url, build_analysis
from seo_inspector.errors import AnalysisError
from seo_inspector.fetcher import normalize_url
from tests.conftest import PAGE_URL, OPTIMIZED_PAGE, fake_fetch, soup_of

TITLE_32 = "Acme Widgets - Quality Tools Inc"
BARE_PAGE = f"<html><head><title>{TITLE_32}</title></head><body>Hi</body></html>"


def test_bare_page_scenario():
    assert len(TITLE_32) == 32
    result = build_analysis(soup_of(BARE_PAGE), "https://example.com")

    assert result.title.status == "good"
    assert result.description.status == "missing"
    assert result.canonical.status == "missing"
    assert result.viewport.status == "missing"
    assert result.robots.status == "warning"
    assert result.robots.value == "index, follow"
    assert len(result.og_tags) == 5
    assert len(result.twitter_tags) == 5
    assert all(t.status == "missing" for t in result.og_tags + result.twitter_tags)
    assert result.issues_count == 14
    assert result.total_tags == 2
    assert result.score == 20
    assert result.og_image is None
    assert result.twitter_image is None
    assert [r.type for r in result.recommendations] == ["warning"] * 4 + ["success"]


def test_optimized_page_scores_100(optimized_soup):
    result = build_analysis(optimized_soup, PAGE_URL)

    assert result.issues_count == 0
    assert result.score == 100
    assert result.total_tags == 15
    assert result.og_image == "https://example.com/og.png"
    assert result.twitter_image == "https://example.com/tw.png"
    assert all(r.type == "success" for r in result.recommendations)
    assert len(result.recommendations) == 4


def test_twitter_image_falls_back_to_image_src():
    html = '<html><head><meta name="twitter:image:src" content="https://a.com/t.png"></head></html>'
    result = build_analysis(soup_of(html), "https://a.com")
    assert result.twitter_image == "https://a.com/t.png"


def test_analysis_is_deterministic():
    first = build_analysis(soup_of(OPTIMIZED_PAGE), PAGE_URL, analyzed_at="2024-01-01T00:00:00.000Z")
    second = build_analysis(soup_of(OPTIMIZED_PAGE), PAGE_URL, analyzed_at="2024-01-01T00:00:00.000Z")
    assert first.model_dump_json() == second.model_dump_json()


def test_analyzed_at_is_iso_utc():
    result = build_analysis(soup_of(BARE_PAGE), "https://example.com")
    assert result.analyzed_at.endswith("Z")
    assert "T" in result.analyzed_at


def test_result_is_immutable():
    result = build_analysis(soup_of(BARE_PAGE), "https://example.com")
    with pytest.raises(Exception):
        result.score = 99


@pytest.mark.parametrize("raw, expected", [
    ("example.com", "https://example.com"),
    ("  example.com/a ", "https://example.com/a"),
    ("http://example.com", "http://example.com"),
    ("https://example.com/", "https://example.com/"),
])
def test_normalize_url(raw, expected):
    assert normalize_url(raw) == expected


def test_analyze_url_prepends_scheme_before_fetching():
    seen = []

    def fetch(url):
        seen.append(url)
        return fake_fetch(BARE_PAGE)(url)

    result = analyze_url("example.com", fetch=fetch)
    assert seen == ["https://example.com"]
    assert result.url == "https://example.com"


def test_transport_error_is_wrapped():
    def fetch(url):
        raise requests.HTTPError("404 Client Error: Not Found")

    with pytest.raises(AnalysisError) as exc:
        analyze_url("https://example.com/gone", fetch=fetch)
    assert str(exc.value) == "Error analyzing SEO tags: Failed to fetch URL: 404 Client Error: Not Found"


def test_unexpected_error_is_wrapped():
    def fetch(url):
        return object()

    with pytest.raises(AnalysisError) as exc:
        analyze_url("https://example.com", fetch=fetch)
    assert str(exc.value).startswith("Error analyzing SEO tags: ")


def test_result_collections_cannot_be_mutated():
    result = build_analysis(soup_of(BARE_PAGE), "https://example.com")
    assert isinstance(result.og_tags, tuple)
    assert isinstance(result.twitter_tags, tuple)
    assert isinstance(result.recommendations, tuple)
    with pytest.raises(AttributeError):
        result.og_tags.clear()
    with pytest.raises(AttributeError):
        result.recommendations.append(result.recommendations[0])
    assert len(result.og_tags) == 5
