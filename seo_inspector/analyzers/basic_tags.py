"""Extraction rules for the five single-valued tags of a page.

Each tag has a rule table: ordered ``(predicate, status, message)`` rows
evaluated against a measurement of the tag (its length, its content, or
whether it matches the requested URL). The first matching row decides the
status; a tag matching no row is ``good``.
"""

from typing import Any, Callable

from bs4 import BeautifulSoup

from seo_inspector.config import (
    DESCRIPTION_MAX_LENGTH,
    DESCRIPTION_MIN_LENGTH,
    ROBOTS_BLOCKING_DIRECTIVES,
    ROBOTS_DEFAULT,
    TITLE_MAX_LENGTH,
    TITLE_MIN_LENGTH,
    VIEWPORT_REQUIRED,
)
from seo_inspector.models import Tag, TagStatus

Rule = tuple[Callable[[Any], bool], TagStatus, str]


TITLE_RULES: list[Rule] = [
    (
        lambda n: n < TITLE_MIN_LENGTH,
        "warning",
        f"Your title is too short. Aim for {TITLE_MIN_LENGTH}-{TITLE_MAX_LENGTH} characters "
        "for optimal visibility in search results.",
    ),
    (
        lambda n: n > TITLE_MAX_LENGTH,
        "warning",
        "Your title is too long and might be truncated in search results. "
        f"Try to keep it under {TITLE_MAX_LENGTH} characters.",
    ),
]

DESCRIPTION_RULES: list[Rule] = [
    (
        lambda n: n < DESCRIPTION_MIN_LENGTH,
        "warning",
        f"Your description is a bit short. Aim for {DESCRIPTION_MIN_LENGTH}-{DESCRIPTION_MAX_LENGTH} "
        "characters for optimal visibility in search results.",
    ),
    (
        lambda n: n > DESCRIPTION_MAX_LENGTH,
        "warning",
        "Your description is too long and might be truncated in search results. "
        f"Try to keep it under {DESCRIPTION_MAX_LENGTH} characters.",
    ),
]

CANONICAL_RULES: list[Rule] = [
    (
        lambda matches: not matches,
        "warning",
        "Your canonical URL differs from the accessed URL. Ensure this is intentional.",
    ),
]

ROBOTS_RULES: list[Rule] = [
    (
        lambda content: any(d in content for d in ROBOTS_BLOCKING_DIRECTIVES),
        "warning",
        "Your robots meta tag is preventing indexing or following. Make sure this is intentional.",
    ),
]

VIEWPORT_RULES: list[Rule] = [
    (
        lambda content: VIEWPORT_REQUIRED not in content,
        "warning",
        f"Your viewport meta tag should include {VIEWPORT_REQUIRED} for proper mobile rendering.",
    ),
]


def apply_rules(measure: Any, rules: list[Rule], good_message: str) -> tuple[TagStatus, str]:
    for predicate, status, message in rules:
        if predicate(measure):
            return status, message
    return "good", good_message


def _meta_content(soup: BeautifulSoup, name: str) -> str:
    tag = soup.find("meta", attrs={"name": name})
    return (tag.get("content") or "").strip() if tag else ""


def _strip_trailing_slash(url: str) -> str:
    return url[:-1] if url.endswith("/") else url


def extract_title(soup: BeautifulSoup) -> Tag:
    title_tag = soup.find("title")
    title = title_tag.get_text().strip() if title_tag else ""
    if not title:
        return Tag(
            name="title",
            status="missing",
            message="Add a title tag to your page. This is one of the most important SEO elements.",
        )

    status, message = apply_rules(
        len(title), TITLE_RULES,
        f"Your title is between {TITLE_MIN_LENGTH}-{TITLE_MAX_LENGTH} characters.",
    )
    return Tag(name="title", value=title, status=status, message=message, char_count=len(title))


def extract_description(soup: BeautifulSoup) -> Tag:
    desc = _meta_content(soup, "description")
    if not desc:
        return Tag(
            name="description",
            status="missing",
            message="Add a meta description to your page. This improves click-through rates from search results.",
        )

    status, message = apply_rules(
        len(desc), DESCRIPTION_RULES,
        f"Your description is between {DESCRIPTION_MIN_LENGTH}-{DESCRIPTION_MAX_LENGTH} characters.",
    )
    return Tag(name="description", value=desc, status=status, message=message, char_count=len(desc))


def _is_canonical_link(tag) -> bool:
    # rel must be exactly "canonical", not a token list that contains it
    rel = tag.get("rel")
    if isinstance(rel, list):
        rel = " ".join(rel)
    return tag.name == "link" and rel == "canonical"


def extract_canonical(soup: BeautifulSoup, url: str) -> Tag:
    link = soup.find(_is_canonical_link)
    canonical = (link.get("href") or "").strip() if link else ""
    if not canonical:
        return Tag(
            name="canonical",
            status="missing",
            message="Add a canonical URL to prevent duplicate content issues and help search engines "
                    "identify the preferred version of your page.",
        )

    matches = _strip_trailing_slash(canonical) == _strip_trailing_slash(url)
    status, message = apply_rules(matches, CANONICAL_RULES, "Your canonical URL is properly set.")
    return Tag(name="canonical", value=canonical, status=status, message=message)


def extract_robots(soup: BeautifulSoup) -> Tag:
    content = _meta_content(soup, "robots")
    if not content:
        # Crawlers fall back to index, follow when no directive is given
        return Tag(
            name="robots",
            value=ROBOTS_DEFAULT,
            status="warning",
            message=f"No robots meta tag found. Search engines will use default behavior ({ROBOTS_DEFAULT}).",
        )

    status, message = apply_rules(
        content, ROBOTS_RULES, "Your page is set to be indexed and followed by search engines."
    )
    return Tag(name="robots", value=content, status=status, message=message)


def extract_viewport(soup: BeautifulSoup) -> Tag:
    content = _meta_content(soup, "viewport")
    if not content:
        return Tag(
            name="viewport",
            status="missing",
            message="Add a viewport meta tag for proper mobile rendering, which is important for mobile SEO.",
        )

    status, message = apply_rules(
        content, VIEWPORT_RULES, "Your viewport is properly configured for mobile devices."
    )
    return Tag(name="viewport", value=content, status=status, message=message)
