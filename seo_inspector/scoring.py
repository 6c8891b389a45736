from typing import Iterable, Optional

from seo_inspector.config import (
    SCORE_DEDUCTIONS,
    SCORE_DESCRIPTION_LONG,
    SCORE_DESCRIPTION_SHORT,
    SCORE_TITLE_LONG,
    SCORE_TITLE_SHORT,
)
from seo_inspector.models import Tag


def count_issues(tags: Iterable[Tag]) -> int:
    return sum(1 for tag in tags if tag.status in ("warning", "missing"))


def count_present_tags(tags: Iterable[Tag]) -> int:
    return sum(1 for tag in tags if tag.value)


def calculate_seo_score(
    has_mandatory_tags: bool,
    has_title: bool,
    has_description: bool,
    has_canonical: bool,
    has_og_tags: bool,
    has_twitter_tags: bool,
    title_length: Optional[int] = None,
    description_length: Optional[int] = None,
    issues_count: int = 0,
) -> int:
    d = SCORE_DEDUCTIONS
    score = 100

    if not has_mandatory_tags:
        score -= d["mandatory_tags"]

    if not has_title:
        score -= d["title_missing"]
    elif title_length:
        if title_length < SCORE_TITLE_SHORT:
            score -= d["title_length"]
        if title_length > SCORE_TITLE_LONG:
            score -= d["title_length"]

    if not has_description:
        score -= d["description_missing"]
    elif description_length:
        if description_length < SCORE_DESCRIPTION_SHORT:
            score -= d["description_length"]
        if description_length > SCORE_DESCRIPTION_LONG:
            score -= d["description_length"]

    if not has_canonical:
        score -= d["canonical_missing"]
    if not has_og_tags:
        score -= d["og_tags_missing"]
    if not has_twitter_tags:
        score -= d["twitter_tags_missing"]

    score -= min(d["issues_cap"], issues_count * d["per_issue"])

    return max(0, min(100, round(score)))
