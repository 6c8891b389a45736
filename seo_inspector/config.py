import os

REQUEST_TIMEOUT = 15
LOG_LEVEL = os.environ.get("SEO_INSPECTOR_LOG_LEVEL", "INFO")

TITLE_MIN_LENGTH = 30
TITLE_MAX_LENGTH = 60
DESCRIPTION_MIN_LENGTH = 120
DESCRIPTION_MAX_LENGTH = 158

ROBOTS_DEFAULT = "index, follow"
ROBOTS_BLOCKING_DIRECTIVES = ("noindex", "nofollow")
VIEWPORT_REQUIRED = "width=device-width"

ESSENTIAL_OG_PROPERTIES = [
    "og:title",
    "og:description",
    "og:url",
    "og:image",
    "og:type",
]
ESSENTIAL_TWITTER_PROPERTIES = [
    "twitter:card",
    "twitter:title",
    "twitter:description",
    "twitter:image",
    "twitter:site",
]

# Social categories need at least this many filled tags to earn a success note
SOCIAL_SUCCESS_MIN_TAGS = 4

# Score deductions, applied from a base of 100
SCORE_DEDUCTIONS = {
    "mandatory_tags": 40,
    "title_missing": 20,
    "title_length": 5,
    "description_missing": 15,
    "description_length": 5,
    "canonical_missing": 10,
    "og_tags_missing": 10,
    "twitter_tags_missing": 5,
    "per_issue": 5,
    "issues_cap": 15,
}
SCORE_TITLE_SHORT = 30
SCORE_TITLE_LONG = 70
SCORE_DESCRIPTION_SHORT = 80
SCORE_DESCRIPTION_LONG = 170

USER_AGENT = (
    "Mozilla/5.0 (compatible; SEOTagInspector/1.0; +https://seotaginspector.example.com)"
)
