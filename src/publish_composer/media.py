"""Media reference normalization and proxy rewriting."""

from __future__ import annotations

import base64
import logging
from typing import Any, Dict, Iterable, List, Mapping, Optional

from .config import media_proxy_base_url, section
from .utils import get_field, is_http_url

logger = logging.getLogger(__name__)

PERSISTED_MEDIA_TYPES = {"url-image", "url-video", "image", "video"}


def media_ref_url(item: Any) -> Optional[str]:
    """Returns the URL of a bare string or a ``{type, url}`` descriptor."""
    url = item if isinstance(item, str) else get_field(item, "url")
    if isinstance(url, str) and url:
        return url
    return None


def media_urls(items: Iterable[Any] | None) -> List[str]:
    urls: List[str] = []
    for item in items or []:
        url = media_ref_url(item)
        if url:
            urls.append(url)
    return urls


def persisted_media_urls(items: Iterable[Any] | None) -> List[str]:
    """Stored media: only URL-typed descriptors with an http(s) URL."""
    urls: List[str] = []
    for item in items or []:
        if not isinstance(item, str):
            media_type = get_field(item, "type")
            if media_type is not None and media_type not in PERSISTED_MEDIA_TYPES:
                continue
        url = media_ref_url(item)
        if is_http_url(url):
            urls.append(url)
    return urls


def _to_base64url(value: str) -> str:
    return base64.urlsafe_b64encode(value.encode("utf-8")).decode("ascii").rstrip("=")


def build_proxy_url(url: str, base_url: str, media_format: str = "png") -> str:
    return f"{base_url}/api/convert-media-url?u={_to_base64url(url)}&format={media_format}"


def proxy_format(config: Dict[str, Any], platform: str | None = None) -> str:
    proxy_cfg = section(config, "media_proxy")
    platform_formats = proxy_cfg.get("platform_formats") or {}
    if platform and platform.lower() in platform_formats:
        return str(platform_formats[platform.lower()])
    return str(proxy_cfg.get("format") or "png")


def proxy_media_urls(
    urls: List[str],
    config: Dict[str, Any],
    environ: Mapping[str, str] | None = None,
    platform: str | None = None,
) -> List[str]:
    identifiers = section(config, "media_proxy").get("identifiers") or []
    base_url = media_proxy_base_url(config, environ)
    if not identifiers or not base_url:
        return urls

    media_format = proxy_format(config, platform)
    rewritten: List[str] = []
    for url in urls:
        if is_http_url(url) and any(identifier in url for identifier in identifiers):
            proxied = build_proxy_url(url, base_url, media_format)
            logger.debug("Proxying media %s -> %s", url, proxied)
            rewritten.append(proxied)
        else:
            rewritten.append(url)
    return rewritten
