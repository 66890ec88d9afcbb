"""Composes one publish request per target platform."""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Mapping, MutableMapping

from .aliases import normalize_option_aliases
from .config import DEFAULT_SETTINGS, platform_names
from .media import proxy_media_urls
from .persisted import persisted_variant
from .platforms import unique_platforms
from .resolvers import resolve_media, resolve_platform_options, resolve_text
from .types import ResolvedPublishRequest
from .validators import limit_media

logger = logging.getLogger(__name__)


def target_platforms(request: Mapping[str, Any]) -> List[str]:
    """Requested platforms first, then platforms introduced only by variants."""
    variants = request.get("variants") or {}
    variant_platforms = list(variants.keys()) if isinstance(variants, Mapping) else []
    return unique_platforms(request.get("platforms") or [], variant_platforms)


def compose_platform_request(
    request: Mapping[str, Any],
    platform: str,
    stored_post: Any,
    profile_key: str | None,
    config: Dict[str, Any],
    environ: Mapping[str, str] | None = None,
) -> ResolvedPublishRequest:
    persisted = persisted_variant(stored_post, platform)

    text = resolve_text(request, platform, persisted)
    media = resolve_media(request, platform, persisted)
    media = proxy_media_urls(media, config, environ, platform)
    media = limit_media(platform, media, config)
    options_key, options = resolve_platform_options(request, platform, persisted, config, environ)

    return ResolvedPublishRequest(
        platform=platform,
        text=text,
        media_urls=media,
        options_key=options_key,
        options=options,
        profile_key=profile_key,
        schedule_date=request.get("scheduledDate"),
    )


def compose_publish_requests(
    request: MutableMapping[str, Any],
    stored_post: Any,
    profile_key: str | None,
    config: Dict[str, Any] | None = None,
    environ: Mapping[str, str] | None = None,
) -> List[ResolvedPublishRequest]:
    """Resolves ``request`` into one :class:`ResolvedPublishRequest` per platform.

    ``request`` is normalized in place. ``stored_post`` may be None for a new
    post. ``environ`` defaults to ``os.environ`` and is only read.
    """
    cfg = DEFAULT_SETTINGS if config is None else config
    normalize_option_aliases(request, platform_names(cfg))

    targets = target_platforms(request)
    results = [
        compose_platform_request(request, platform, stored_post, profile_key, cfg, environ)
        for platform in targets
    ]
    logger.info("Composed %d publish request(s) for %s", len(results), ", ".join(targets) or "no platforms")
    return results


def compose_publish_payloads(
    request: MutableMapping[str, Any],
    stored_post: Any,
    profile_key: str | None,
    config: Dict[str, Any] | None = None,
    environ: Mapping[str, str] | None = None,
) -> List[Dict[str, Any]]:
    return [
        item.to_dict()
        for item in compose_publish_requests(request, stored_post, profile_key, config, environ)
    ]
