from .basic_tags import (
    extract_title,
    extract_description,
    extract_canonical,
    extract_robots,
    extract_viewport,
)
from .social_tags import extract_og_tags, extract_twitter_tags, get_tag_value

__all__ = [
    "extract_title",
    "extract_description",
    "extract_canonical",
    "extract_robots",
    "extract_viewport",
    "extract_og_tags",
    "extract_twitter_tags",
    "get_tag_value",
]
