from typing import Optional

from bs4 import BeautifulSoup

from seo_inspector.config import ESSENTIAL_OG_PROPERTIES, ESSENTIAL_TWITTER_PROPERTIES
from seo_inspector.models import Tag


def _collect(soup: BeautifulSoup, attr: str, prefix: str) -> list[Tag]:
    tags: list[Tag] = []
    for meta in soup.find_all("meta", attrs={attr: lambda v: v and v.startswith(prefix)}):
        content = (meta.get("content") or "").strip()
        if content:
            tags.append(Tag(name=meta.get(attr), value=content, status="good"))
    return tags


def _backfill(tags: list[Tag], essentials: list[str], message: str) -> list[Tag]:
    found = {tag.name for tag in tags}
    for prop in essentials:
        if prop not in found:
            tags.append(Tag(name=prop, status="missing", message=message.format(prop=prop)))
    return tags


def extract_og_tags(soup: BeautifulSoup) -> list[Tag]:
    """Open Graph tags found on the page, followed by a ``missing`` entry for
    each essential property the page lacks."""
    return _backfill(
        _collect(soup, "property", "og:"),
        ESSENTIAL_OG_PROPERTIES,
        "Add the {prop} meta tag to improve social sharing appearance.",
    )


def extract_twitter_tags(soup: BeautifulSoup) -> list[Tag]:
    return _backfill(
        _collect(soup, "name", "twitter:"),
        ESSENTIAL_TWITTER_PROPERTIES,
        "Add a {prop} meta tag to improve Twitter card appearance.",
    )


def get_tag_value(tags: list[Tag], name: str) -> Optional[str]:
    for tag in tags:
        if tag.name == name:
            return tag.value
    return None
