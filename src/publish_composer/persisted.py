"""Read-only adapter over a previously stored post.

A stored post maps platform identifiers (plus ``base``) to persisted
variants shaped ``{text, media, platformOptions}``. ``platformOptions`` is
kept as a JSON string by the storage layer; decoding happens here and never
raises past :func:`persisted_options`.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Mapping, Optional

from .media import persisted_media_urls
from .types import MalformedPlatformOptions
from .utils import get_field, json_loads_object

logger = logging.getLogger(__name__)


def stored_variants(stored_post: Any) -> Any:
    if stored_post is None:
        return None
    nested = get_field(stored_post, "variants")
    if nested is not None:
        return nested
    return stored_post


def persisted_variant(stored_post: Any, platform: str) -> Any:
    return get_field(stored_variants(stored_post), platform)


def persisted_text(variant: Any) -> Optional[str]:
    value = get_field(variant, "text")
    if value is None:
        return None
    return value if isinstance(value, str) else str(value)


def persisted_media(variant: Any) -> List[str]:
    return persisted_media_urls(get_field(variant, "media"))


def decode_platform_options(raw: Any) -> Dict[str, Any]:
    if isinstance(raw, Mapping):
        return dict(raw)
    if not isinstance(raw, (str, bytes, bytearray)):
        raise MalformedPlatformOptions(f"Unsupported platformOptions type: {type(raw).__name__}")
    try:
        return json_loads_object(raw)
    except ValueError as exc:
        raise MalformedPlatformOptions(str(exc)) from exc


def persisted_options(variant: Any, options_key: str) -> Optional[Any]:
    raw = get_field(variant, "platformOptions")
    if raw is None or raw == "":
        return None
    try:
        decoded = decode_platform_options(raw)
    except MalformedPlatformOptions as exc:
        logger.warning("Ignoring malformed persisted %s: %s", options_key, exc)
        return None
    return decoded.get(options_key)
