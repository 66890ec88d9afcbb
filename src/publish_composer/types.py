"""Shared data structures for composed publish requests."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional


@dataclass
class ResolvedPublishRequest:
    platform: str
    text: str
    media_urls: List[str] = field(default_factory=list)
    options_key: Optional[str] = None
    options: Optional[Dict[str, Any]] = None
    profile_key: Optional[str] = None
    schedule_date: Optional[str] = None

    @property
    def platforms(self) -> List[str]:
        return [self.platform]

    def post_data(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {
            "text": self.text,
            "mediaUrls": list(self.media_urls),
            "profileKey": self.profile_key,
        }
        if self.options_key and self.options is not None:
            data[self.options_key] = self.options
        if self.schedule_date:
            data["scheduleDate"] = self.schedule_date
        return data

    def to_dict(self) -> Dict[str, Any]:
        return {
            "platforms": self.platforms,
            "postData": self.post_data(),
        }


class MalformedPlatformOptions(ValueError):
    """Persisted platform options could not be decoded into a JSON object."""


class ComposeInputError(RuntimeError):
    """CLI input could not be read as a JSON object."""
