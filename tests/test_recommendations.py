from seo_inspector.analyzers import extract_og_tags, extract_twitter_tags
from seo_inspector.models import Tag
from seo_inspector.recommendations import generate_recommendations
from tests.conftest import head

GOOD_TITLE = Tag(name="title", value="t" * 40, status="good", message="ok", char_count=40)
GOOD_DESC = Tag(name="description", value="d" * 130, status="good", message="ok", char_count=130)
GOOD_CANONICAL = Tag(name="canonical", value="https://a.com", status="good", message="ok")


def _social(*markup):
    soup = head(*markup)
    return extract_og_tags(soup), extract_twitter_tags(soup)


def test_everything_missing_orders_warnings():
    og, tw = _social()
    recs = generate_recommendations(
        Tag(name="title", status="missing"),
        Tag(name="description", status="missing"),
        Tag(name="canonical", status="missing"),
        og, tw,
    )
    assert [r.type for r in recs] == ["warning"] * 5
    assert "title tag" in recs[0].message
    assert "meta description" in recs[1].message
    assert "canonical URL" in recs[2].message
    assert recs[3].message.startswith("Add Open Graph meta tags")
    assert recs[4].message.startswith("Add Twitter Card meta tags")


def test_length_warnings_cite_char_count():
    og, tw = _social()
    recs = generate_recommendations(
        Tag(name="title", value="Home", status="warning", char_count=4),
        Tag(name="description", value="d" * 200, status="warning", char_count=200),
        GOOD_CANONICAL,
        og, tw,
    )
    assert "currently 4 characters" in recs[0].message
    assert "currently 200 characters" in recs[1].message
    # canonical good produces nothing
    assert recs[2].message.startswith("Add Open Graph meta tags")


def test_canonical_mismatch_cites_value():
    og, tw = _social()
    canonical = Tag(name="canonical", value="https://b.com/x", status="warning", message="differs")
    recs = generate_recommendations(GOOD_TITLE, GOOD_DESC, canonical, og, tw)
    assert recs[0].type == "warning"
    assert "https://b.com/x" in recs[0].message


def test_partial_social_tags_name_missing_properties():
    og, tw = _social(
        '<meta property="og:title" content="A">',
        '<meta property="og:image" content="https://a.com/i.png">',
        '<meta name="twitter:card" content="summary">',
    )
    recs = generate_recommendations(GOOD_TITLE, GOOD_DESC, GOOD_CANONICAL, og, tw)
    warnings = [r.message for r in recs if r.type == "warning"]
    assert warnings == [
        "Add missing Open Graph tags: og:description, og:url, og:type",
        "Add missing Twitter Card tags: twitter:title, twitter:description, twitter:image, twitter:site",
    ]


def test_successes_follow_warnings():
    og, tw = _social(
        '<meta property="og:title" content="A">',
        '<meta property="og:description" content="B">',
        '<meta property="og:url" content="https://a.com">',
        '<meta property="og:image" content="https://a.com/i.png">',
    )
    recs = generate_recommendations(GOOD_TITLE, GOOD_DESC, GOOD_CANONICAL, og, tw)
    assert [r.type for r in recs] == ["warning", "warning", "success", "success", "success"]
    assert recs[0].message == "Add missing Open Graph tags: og:type"
    assert "40 characters" in recs[2].message
    assert "130 characters" in recs[3].message
    assert "Open Graph tags are well-implemented" in recs[4].message


def test_social_success_needs_four_values():
    og, tw = _social(
        '<meta name="twitter:card" content="summary">',
        '<meta name="twitter:title" content="A">',
        '<meta name="twitter:description" content="B">',
    )
    recs = generate_recommendations(GOOD_TITLE, GOOD_DESC, GOOD_CANONICAL, og, tw)
    assert not any("Twitter Card tags are well-implemented" in r.message for r in recs)

    og, tw = _social(
        '<meta name="twitter:card" content="summary">',
        '<meta name="twitter:title" content="A">',
        '<meta name="twitter:description" content="B">',
        '<meta name="twitter:creator" content="@me">',
    )
    recs = generate_recommendations(GOOD_TITLE, GOOD_DESC, GOOD_CANONICAL, og, tw)
    assert recs[-1].type == "success"
    assert "Twitter Card tags are well-implemented" in recs[-1].message
