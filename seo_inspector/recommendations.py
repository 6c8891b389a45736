"""Advisories for a finished set of tags.

The output order is part of the report contract: title, description,
canonical, Open Graph, Twitter warnings first, then successes in the same
tag order. Robots and viewport never produce recommendations.
"""

from seo_inspector.config import (
    DESCRIPTION_MAX_LENGTH,
    DESCRIPTION_MIN_LENGTH,
    SOCIAL_SUCCESS_MIN_TAGS,
    TITLE_MAX_LENGTH,
    TITLE_MIN_LENGTH,
)
from seo_inspector.models import Recommendation, Tag


def _warning(message: str) -> Recommendation:
    return Recommendation(type="warning", message=message)


def _success(message: str) -> Recommendation:
    return Recommendation(type="success", message=message)


def _social_warning(tags: list[Tag], label: str, generic_message: str) -> list[Recommendation]:
    missing = [tag for tag in tags if tag.status == "missing"]
    if not missing:
        return []
    if len(missing) == len(tags):
        return [_warning(generic_message)]
    names = ", ".join(tag.name for tag in missing)
    return [_warning(f"Add missing {label} tags: {names}")]


def _has_enough_social_tags(tags: list[Tag]) -> bool:
    return sum(1 for tag in tags if tag.value) >= SOCIAL_SUCCESS_MIN_TAGS


def generate_recommendations(
    title: Tag,
    description: Tag,
    canonical: Tag,
    og_tags: list[Tag],
    twitter_tags: list[Tag],
) -> list[Recommendation]:
    recs: list[Recommendation] = []

    if title.status == "missing":
        recs.append(_warning("Add a title tag to your page - this is crucial for SEO."))
    elif title.status == "warning":
        recs.append(_warning(
            f"Optimize your title length (currently {title.char_count} characters). "
            f"Aim for {TITLE_MIN_LENGTH}-{TITLE_MAX_LENGTH} characters."
        ))

    if description.status == "missing":
        recs.append(_warning("Add a meta description to improve click-through rates from search results."))
    elif description.status == "warning":
        recs.append(_warning(
            f"Adjust your meta description length (currently {description.char_count} characters). "
            f"Aim for {DESCRIPTION_MIN_LENGTH}-{DESCRIPTION_MAX_LENGTH} characters."
        ))

    if canonical.status == "missing":
        recs.append(_warning("Add a canonical URL to prevent duplicate content issues."))
    elif canonical.status == "warning":
        recs.append(_warning(
            f"Ensure your canonical URL {canonical.value} matches the accessed URL for consistent indexing."
        ))

    recs.extend(_social_warning(
        og_tags, "Open Graph",
        "Add Open Graph meta tags to improve how your content appears when shared on "
        "social media platforms like Facebook and LinkedIn.",
    ))
    recs.extend(_social_warning(
        twitter_tags, "Twitter Card",
        "Add Twitter Card meta tags to improve how your content appears when shared on Twitter.",
    ))

    if title.status == "good":
        recs.append(_success(
            f"Your meta title is well-optimized with a good length of {title.char_count} characters."
        ))
    if description.status == "good":
        recs.append(_success(
            f"Your meta description is well-optimized with a good length of {description.char_count} characters."
        ))
    if _has_enough_social_tags(og_tags):
        recs.append(_success(
            "Your Open Graph tags are well-implemented, providing rich previews on Facebook and other platforms."
        ))
    if _has_enough_social_tags(twitter_tags):
        recs.append(_success("Your Twitter Card tags are well-implemented, providing rich previews on Twitter."))

    return recs
