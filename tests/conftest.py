from types import SimpleNamespace

import pytest

from seo_inspector.fetcher import parse_html

PAGE_URL = "https://example.com/widgets"

GOOD_TITLE = "Acme Widgets - Quality Tools for Every Workshop"
GOOD_DESCRIPTION = (
    "Acme builds durable widgets, clamps and fixtures for professional workshops. "
    "Browse the catalogue, compare models and order online today."
)

OPTIMIZED_PAGE = f"""
<html>
  <head>
    <title>{GOOD_TITLE}</title>
    <meta name="description" content="{GOOD_DESCRIPTION}">
    <link rel="canonical" href="{PAGE_URL}/">
    <meta name="robots" content="index, follow">
    <meta name="viewport" content="width=device-width, initial-scale=1">
    <meta property="og:title" content="Acme Widgets">
    <meta property="og:description" content="Durable widgets for workshops">
    <meta property="og:url" content="{PAGE_URL}">
    <meta property="og:image" content="https://example.com/og.png">
    <meta property="og:type" content="website">
    <meta name="twitter:card" content="summary_large_image">
    <meta name="twitter:title" content="Acme Widgets">
    <meta name="twitter:description" content="Durable widgets for workshops">
    <meta name="twitter:image" content="https://example.com/tw.png">
    <meta name="twitter:site" content="@acme">
  </head>
  <body><h1>Widgets</h1></body>
</html>
"""


def soup_of(html: str):
    return parse_html(html)


def head(*tags: str):
    """Parse a document whose <head> holds the given markup."""
    return parse_html(f"<html><head>{''.join(tags)}</head><body></body></html>")


def fake_fetch(html: str):
    def fetch(url: str):
        return SimpleNamespace(url=url, soup=parse_html(html))
    return fetch


@pytest.fixture
def optimized_soup():
    return parse_html(OPTIMIZED_PAGE)
