"""
CatalogHub - Main Entry Point

Normalizes a JSON payload file captured from a provider and prints the
response envelope.

Usage:
    python main.py brickset sets.json --query "millennium falcon"
    python main.py jikan anime.json --detail --lang fr
"""

import argparse
import json
import sys
from pathlib import Path
from typing import Any, Optional

import structlog

from cataloghub.config import get_settings
from cataloghub.core import CatalogHubError, configure_logging
from cataloghub.normalization import (
    NormalizeOptions,
    build_default_catalog,
    build_error_response,
)

logger = structlog.get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Create the command-line parser."""
    parser = argparse.ArgumentParser(
        prog="cataloghub",
        description="Normalize a provider JSON payload into a CatalogHub response envelope.",
    )
    parser.add_argument("provider", help="Provider name (e.g. brickset, googlebooks, jikan)")
    parser.add_argument("payload", type=Path, help="JSON file with one record or a list of records")
    parser.add_argument("--detail", action="store_true", help="Build a detail response from one record")
    parser.add_argument("--query", default="", help="Search query echoed in the envelope")
    parser.add_argument("--total", type=int, default=None, help="Provider-reported total result count")
    parser.add_argument("--lang", default=None, help="Language reported in meta")
    parser.add_argument("--include-raw", action="store_true", help="Attach _raw payloads to items")
    return parser


def load_payload(path: Path) -> Any:
    """Read a payload file; ``{"results": [...]}`` wrappers are unwrapped."""
    with path.open(encoding="utf-8") as f:
        payload = json.load(f)
    if isinstance(payload, dict) and isinstance(payload.get("results"), list):
        return payload["results"]
    return payload


def run(argv: Optional[list[str]] = None) -> int:
    """Run the CLI and return the process exit code."""
    args = build_parser().parse_args(argv)
    settings = get_settings()
    configure_logging(settings)

    options = NormalizeOptions.from_settings(settings, include_raw=args.include_raw or settings.debug)
    meta = {"query": args.query, "total": args.total, "lang": args.lang or settings.default_lang}

    try:
        normalizer = build_default_catalog().get(args.provider)
        payload = load_payload(args.payload)
        if args.detail:
            if isinstance(payload, list):
                payload = payload[0] if payload else None
            response = normalizer.normalize_detail_response(payload, meta, options)
        else:
            response = normalizer.normalize_search_response(payload, meta, options)
    except CatalogHubError as e:
        logger.error("cli_failed", provider=args.provider, error=e.message, code=e.code)
        print(json.dumps(build_error_response(e), indent=2, ensure_ascii=False))
        return 1
    except (OSError, ValueError) as e:
        logger.error("payload_unreadable", path=str(args.payload), error=str(e))
        return 2

    print(json.dumps(response, indent=2, ensure_ascii=False))
    return 0


if __name__ == "__main__":
    sys.exit(run())
