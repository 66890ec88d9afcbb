"""Per-platform text, media and option-bag resolution.

Each resolver builds an ordered list of candidate providers and takes the
first one that yields a non-empty value:

    variant override > persisted variant > base request > environment default

Precedence is decided per field group; a winning option bag or media list is
used whole and never merged with lower tiers.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Dict, List, Mapping, Optional, Sequence, Tuple

from .config import DEFAULT_SETTINGS, env_default_options
from .media import media_urls
from .persisted import persisted_media, persisted_options, persisted_text
from .platforms import get_platform_options_key

logger = logging.getLogger(__name__)

Candidate = Tuple[str, Callable[[], Any]]


def _is_empty(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, (str, list, tuple, dict)) and not value:
        return True
    return False


def first_candidate(candidates: Sequence[Candidate], default: Any = None) -> Tuple[Optional[str], Any]:
    """Returns ``(tier, value)`` for the first candidate with a non-empty value."""
    for tier, provider in candidates:
        value = provider()
        if not _is_empty(value):
            return tier, value
    return None, default


def variant_override(request: Mapping[str, Any], platform: str) -> Mapping[str, Any]:
    variants = request.get("variants") or {}
    override = variants.get(platform) if isinstance(variants, Mapping) else None
    return override if isinstance(override, Mapping) else {}


def base_media(request: Mapping[str, Any]) -> List[str]:
    """Base media; legacy ``imageUrls`` only when ``media`` is absent."""
    media = request.get("media")
    if media is None:
        return media_urls(request.get("imageUrls"))
    return media_urls(media)


def resolve_text(request: Mapping[str, Any], platform: str, persisted: Any = None) -> str:
    override = variant_override(request, platform)
    tier, text = first_candidate(
        [
            ("variant", lambda: override.get("content")),
            ("persisted", lambda: persisted_text(persisted)),
            ("base", lambda: request.get("content")),
        ],
        default="",
    )
    logger.debug("Text for %s resolved from %s", platform, tier or "nothing")
    return text if isinstance(text, str) else str(text)


def resolve_media(request: Mapping[str, Any], platform: str, persisted: Any = None) -> List[str]:
    override = variant_override(request, platform)
    tier, urls = first_candidate(
        [
            ("variant", lambda: media_urls(override.get("media"))),
            ("persisted", lambda: persisted_media(persisted)),
            ("base", lambda: base_media(request)),
        ],
        default=[],
    )
    logger.debug("Media for %s resolved from %s (%d item(s))", platform, tier or "nothing", len(urls))
    return list(urls)


def resolve_platform_options(
    request: Mapping[str, Any],
    platform: str,
    persisted: Any = None,
    config: Dict[str, Any] | None = None,
    environ: Mapping[str, str] | None = None,
) -> Tuple[str, Optional[Any]]:
    """Returns the canonical options key and the winning bag (or None)."""
    key = get_platform_options_key(platform)
    override = variant_override(request, platform)
    tier, options = first_candidate(
        [
            ("variant", lambda: override.get(key)),
            ("persisted", lambda: persisted_options(persisted, key) if persisted is not None else None),
            ("base", lambda: request.get(key)),
            ("environment", lambda: env_default_options(DEFAULT_SETTINGS if config is None else config, platform, environ)),
        ]
    )
    if tier:
        logger.debug("%s for %s resolved from %s", key, platform, tier)
    return key, options

