import logging
from datetime import datetime, timezone
from typing import Callable, Optional

import requests
from bs4 import BeautifulSoup

from seo_inspector.analyzers import (
    extract_canonical,
    extract_description,
    extract_og_tags,
    extract_robots,
    extract_title,
    extract_twitter_tags,
    extract_viewport,
    get_tag_value,
)
from seo_inspector.errors import AnalysisError
from seo_inspector.fetcher import FetchResult, fetch_page, normalize_url
from seo_inspector.models import SeoAnalysisResult
from seo_inspector.recommendations import generate_recommendations
from seo_inspector.scoring import calculate_seo_score, count_issues, count_present_tags

logger = logging.getLogger(__name__)


def _iso_now() -> str:
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def build_analysis(soup: BeautifulSoup, url: str, analyzed_at: Optional[str] = None) -> SeoAnalysisResult:
    """Run every extractor over ``soup`` and assemble the report for ``url``.

    ``url`` is the address that was requested; the canonical link is
    compared against it.
    """
    title = extract_title(soup)
    description = extract_description(soup)
    canonical = extract_canonical(soup, url)
    robots = extract_robots(soup)
    viewport = extract_viewport(soup)
    og_tags = extract_og_tags(soup)
    twitter_tags = extract_twitter_tags(soup)

    all_tags = [title, description, canonical, robots, viewport, *og_tags, *twitter_tags]
    issues_count = count_issues(all_tags)

    # The essential-property backfill keeps both social lists non-empty
    score = calculate_seo_score(
        has_mandatory_tags=bool(title.value and description.value),
        has_title=bool(title.value),
        has_description=bool(description.value),
        has_canonical=bool(canonical.value),
        has_og_tags=len(og_tags) > 0,
        has_twitter_tags=len(twitter_tags) > 0,
        title_length=title.char_count,
        description_length=description.char_count,
        issues_count=issues_count,
    )

    return SeoAnalysisResult(
        url=url,
        title=title,
        description=description,
        canonical=canonical,
        robots=robots,
        viewport=viewport,
        og_tags=og_tags,
        twitter_tags=twitter_tags,
        score=score,
        total_tags=count_present_tags(all_tags),
        issues_count=issues_count,
        og_image=get_tag_value(og_tags, "og:image"),
        twitter_image=get_tag_value(twitter_tags, "twitter:image")
        or get_tag_value(twitter_tags, "twitter:image:src"),
        recommendations=generate_recommendations(title, description, canonical, og_tags, twitter_tags),
        analyzed_at=analyzed_at or _iso_now(),
    )


def analyze_url(url: str, fetch: Callable[[str], FetchResult] = fetch_page) -> SeoAnalysisResult:
    url = normalize_url(url)
    logger.info("Analyzing SEO tags for %s", url)
    try:
        page = fetch(url)
    except requests.RequestException as e:
        logger.warning("Fetch failed for %s: %s", url, e)
        raise AnalysisError(f"Error analyzing SEO tags: Failed to fetch URL: {e}") from e

    try:
        result = build_analysis(page.soup, url)
    except Exception as e:
        logger.exception("Analysis failed for %s", url)
        if str(e):
            raise AnalysisError(f"Error analyzing SEO tags: {e}") from e
        raise AnalysisError("Unknown error occurred during SEO analysis") from e

    logger.info("Analysis complete for %s: score %d, %d issues", url, result.score, result.issues_count)
    return result
