"""Migration of legacy bare-platform option fields to canonical option keys.

Older clients sent platform options under the bare platform name, e.g.
``{"reddit": {"subreddit": "python"}}``. The composer only reads the
canonical ``redditOptions`` field, so every request is normalized first.
The same migration runs inside each ``variants`` entry, independent of which
platforms the request targets.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict, Iterable, MutableMapping, Optional, Union

from .platforms import PLATFORM_NAMES, get_platform_options_key

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AliasField:
    platform: str
    value: Any


@dataclass(frozen=True)
class CanonicalField:
    key: str
    value: Any


RawOptionsField = Union[AliasField, CanonicalField]


def alias_table(platform_names: Iterable[str] = PLATFORM_NAMES) -> Dict[str, str]:
    """Maps each bare alias to its canonical key.

    Platforms whose canonical key equals the bare name cannot have an alias.
    """
    table: Dict[str, str] = {}
    for platform in platform_names:
        key = get_platform_options_key(platform)
        if key != platform:
            table[platform] = key
    return table


def classify_field(name: str, value: Any, table: Dict[str, str]) -> Optional[RawOptionsField]:
    if name in table:
        return AliasField(platform=name, value=value)
    if name in table.values():
        return CanonicalField(key=name, value=value)
    return None


def _migrate(target: MutableMapping[str, Any], table: Dict[str, str]) -> None:
    for name in list(target.keys()):
        field = classify_field(name, target[name], table)
        if not isinstance(field, AliasField):
            continue
        canonical = table[field.platform]
        if target.get(canonical) is None:
            target[canonical] = field.value
        else:
            logger.debug("Dropping alias %r, %r already set", field.platform, canonical)
        del target[field.platform]


def normalize_option_aliases(
    request: MutableMapping[str, Any],
    platform_names: Iterable[str] = PLATFORM_NAMES,
) -> MutableMapping[str, Any]:
    table = alias_table(platform_names)
    _migrate(request, table)

    variants = request.get("variants")
    if isinstance(variants, MutableMapping):
        for override in variants.values():
            if isinstance(override, MutableMapping):
                _migrate(override, table)
    return request
