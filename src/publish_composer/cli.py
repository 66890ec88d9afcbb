"""Command line interface: compose publish requests from JSON files."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional

from dotenv import load_dotenv

from .composer import compose_publish_payloads
from .config import load_settings, platform_names
from .platforms import get_platform_options_key, normalize_platform
from .types import ComposeInputError
from .utils import json_dumps, json_loads_object


def read_json_object(path: str) -> Dict[str, Any]:
    file_path = Path(path)
    try:
        text = file_path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ComposeInputError(f"Cannot read {path}: {exc}") from exc
    try:
        return json_loads_object(text)
    except ValueError as exc:
        raise ComposeInputError(f"{path} is not a JSON object: {exc}") from exc


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Compose per-platform publish requests")
    parser.add_argument("--settings", default="config/settings.yaml", help="Path to settings.yaml")
    parser.add_argument("--log-level", default="WARNING", help="Logging level")

    subparsers = parser.add_subparsers(dest="command")

    compose = subparsers.add_parser("compose", help="Resolve a publish request into per-platform requests")
    compose.add_argument("--request", required=True, help="Path to the request JSON")
    compose.add_argument("--stored-post", help="Path to the stored post JSON")
    compose.add_argument("--profile-key", help="Profile key attached to every request")

    platforms = subparsers.add_parser("platforms", help="List platforms and their option keys")
    platforms.add_argument("names", nargs="*", help="Platform names to look up (default: all known)")
    return parser


def _list_platforms(names: List[str], config: Dict[str, Any]) -> None:
    for name in names or platform_names(config):
        platform = normalize_platform(name)
        print(f"{platform}\t{get_platform_options_key(platform)}")


def main(argv: Optional[List[str]] = None) -> int:
    load_dotenv()
    parser = _build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, str(args.log_level).upper(), logging.WARNING),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    config = load_settings(args.settings)

    if args.command == "platforms":
        _list_platforms(args.names, config)
        return 0

    if args.command != "compose":
        parser.print_help()
        return 2

    try:
        request = read_json_object(args.request)
        stored_post = read_json_object(args.stored_post) if args.stored_post else None
    except ComposeInputError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    payloads = compose_publish_payloads(request, stored_post, args.profile_key, config)
    print(json_dumps(payloads))
    return 0


if __name__ == "__main__":
    sys.exit(main())
