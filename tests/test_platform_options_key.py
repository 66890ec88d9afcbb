from publish_composer.platforms import (
    PLATFORM_NAMES,
    get_platform_options_key,
    normalize_platform,
    unique_platforms,
)


def test_known_and_fallback_platforms():
    assert get_platform_options_key("x") == "twitterOptions"
    assert get_platform_options_key("reddit") == "redditOptions"
    assert get_platform_options_key("pinterest") == "pinterestOptions"
    assert get_platform_options_key("myspace") == "myspaceOptions"
    assert get_platform_options_key("") == "Options"


def test_required_platforms_are_known():
    assert {"base", "instagram", "reddit", "pinterest", "x", "bluesky"}.issubset(PLATFORM_NAMES)


def test_normalize_platform_maps_delivery_names():
    assert normalize_platform(" Twitter ") == "x"
    assert normalize_platform("Reddit") == "reddit"


def test_unique_platforms_keeps_first_seen_order():
    assert unique_platforms(["reddit", "x"], ["instagram", "x"]) == ["reddit", "x", "instagram"]
