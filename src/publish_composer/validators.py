"""Per-platform media attachment limits."""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

from .config import section

logger = logging.getLogger(__name__)

DEFAULT_MEDIA_LIMITS = {
    "x": 4,
    "bluesky": 4,
}


def get_media_limit(config: Dict[str, Any], platform: str) -> Optional[int]:
    limits = section(config, "media_limits")
    key = f"{platform}_max_media"
    if key in limits:
        value = limits[key]
        return None if value is None else int(value)
    return DEFAULT_MEDIA_LIMITS.get(platform)


def limit_media(platform: str, media_urls: List[str], config: Dict[str, Any]) -> List[str]:
    limit = get_media_limit(config, platform)
    if limit is None or len(media_urls) <= limit:
        return media_urls
    logger.info("Trimming %s media from %d to %d item(s)", platform, len(media_urls), limit)
    return media_urls[:limit]
