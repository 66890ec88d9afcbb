import base64

from publish_composer.media import (
    build_proxy_url,
    media_ref_url,
    media_urls,
    persisted_media_urls,
    proxy_format,
    proxy_media_urls,
)
from publish_composer.config import DEFAULT_SETTINGS
from publish_composer.validators import get_media_limit, limit_media


def _b64url(value):
    return base64.urlsafe_b64encode(value.encode("utf-8")).decode("ascii").rstrip("=")


def test_media_urls_pass_request_strings_through():
    items = [
        "https://a.example/1.jpg",
        {"type": "image", "url": "https://a.example/2.jpg"},
        {"type": "video"},
        "ftp://a.example/3.jpg",
        "/api/media-proxy/co_z1",
        {"url": "/api/media-proxy/co_z2"},
        "",
        None,
    ]
    assert media_urls(items) == [
        "https://a.example/1.jpg",
        "https://a.example/2.jpg",
        "ftp://a.example/3.jpg",
        "/api/media-proxy/co_z1",
        "/api/media-proxy/co_z2",
    ]
    assert media_urls(None) == []


def test_media_ref_url_reads_attribute_descriptors():
    class Descriptor:
        type = "url-image"
        url = "http://a.example/obj.jpg"

    assert media_ref_url(Descriptor()) == "http://a.example/obj.jpg"


def test_persisted_media_skips_unknown_types():
    items = [
        {"type": "url-image", "url": "https://a.example/1.jpg"},
        {"type": "url-video", "url": "https://a.example/2.mp4"},
        {"type": "image", "image": "co_z123"},
        {"type": "file-stream", "url": "https://a.example/3.jpg"},
        {"url": "https://a.example/4.jpg"},
    ]
    assert persisted_media_urls(items) == [
        "https://a.example/1.jpg",
        "https://a.example/2.mp4",
        "https://a.example/4.jpg",
    ]


def test_proxy_rewrites_matching_urls_only():
    lunary = "https://lunary.app/api/og/crystal?date=2025-11-19"
    config = {
        "media_proxy": {
            "base_url": "https://api.test.com/",
            "identifiers": ["lunary.app/api/og/"],
            "format": "png",
        }
    }

    result = proxy_media_urls([lunary, "https://other.example/a.png"], config, environ={})

    assert result == [
        f"https://api.test.com/api/convert-media-url?u={_b64url(lunary)}&format=png",
        "https://other.example/a.png",
    ]


def test_proxy_base_url_from_environment():
    config = {"media_proxy": {"base_url": None, "identifiers": ["lunary.app/api/og/"]}}
    url = "https://lunary.app/api/og/cosmic/2025-11-19"

    assert proxy_media_urls([url], config, environ={}) == [url]
    assert proxy_media_urls([url], config, environ={"MEDIA_PROXY_BASE_URL": "https://env.test"}) == [
        build_proxy_url(url, "https://env.test", "png")
    ]


def test_media_limits():
    assert get_media_limit({}, "x") == 4
    assert get_media_limit({}, "instagram") is None
    assert get_media_limit({"media_limits": {"instagram_max_media": 10}}, "instagram") == 10
    assert get_media_limit({"media_limits": {"x_max_media": None}}, "x") is None

    urls = [f"https://example.com/{i}.png" for i in range(6)]
    assert limit_media("bluesky", urls, {}) == urls[:4]
    assert limit_media("instagram", urls, {}) == urls


def test_persisted_media_keeps_http_filter():
    items = [
        {"type": "url-image", "url": "/api/media-proxy/co_z1"},
        {"type": "url-image", "url": "https://a.example/1.jpg"},
    ]
    assert persisted_media_urls(items) == ["https://a.example/1.jpg"]


def test_default_settings_proxy_lunary_og_media():
    url = "https://lunary.app/api/og/cosmic/2025-11-19"

    result = proxy_media_urls([url, "https://other.example/a.png"], DEFAULT_SETTINGS, environ={})

    assert result == [
        f"https://app.succulent.social/api/convert-media-url?u={_b64url(url)}&format=png",
        "https://other.example/a.png",
    ]


def test_proxy_format_per_platform():
    url = "https://lunary.app/api/og/x"

    tiktok = proxy_media_urls([url], DEFAULT_SETTINGS, environ={}, platform="tiktok")
    instagram = proxy_media_urls([url], DEFAULT_SETTINGS, environ={}, platform="instagram")

    assert tiktok == [f"https://app.succulent.social/api/convert-media-url?u={_b64url(url)}&format=jpg"]
    assert instagram[0].endswith("&format=png")
    assert proxy_format(DEFAULT_SETTINGS, "TikTok") == "jpg"
    assert proxy_format({"media_proxy": {"format": "png"}}, "tiktok") == "png"


def test_relative_urls_are_never_proxied():
    assert proxy_media_urls(["/api/og/lunary.app/api/og/a"], DEFAULT_SETTINGS, environ={}) == [
        "/api/og/lunary.app/api/og/a"
    ]
