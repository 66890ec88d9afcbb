"""Known platform identifiers and their option-bag field names."""

from __future__ import annotations

from typing import Dict, Iterable, List

BASE_PLATFORM = "base"

PLATFORM_NAMES = (
    BASE_PLATFORM,
    "instagram",
    "facebook",
    "x",
    "linkedin",
    "youtube",
    "tiktok",
    "pinterest",
    "reddit",
    "telegram",
    "threads",
    "bluesky",
)

# Platforms whose option field is not simply "<platform>Options".
OPTIONS_KEY_OVERRIDES: Dict[str, str] = {
    "x": "twitterOptions",
    "reddit": "redditOptions",
    "pinterest": "pinterestOptions",
}

ALIASES = {
    "twitter": "x",
}

OPTIONS_SUFFIX = "Options"


def get_platform_options_key(platform: str) -> str:
    return OPTIONS_KEY_OVERRIDES.get(platform, f"{platform}{OPTIONS_SUFFIX}")


def normalize_platform(name: str) -> str:
    clean = (name or "").strip().lower()
    return ALIASES.get(clean, clean)


def unique_platforms(*groups: Iterable[str]) -> List[str]:
    ordered: List[str] = []
    for group in groups:
        for platform in group:
            if platform not in ordered:
                ordered.append(platform)
    return ordered
