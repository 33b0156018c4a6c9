"""Command line entry point.

Usage:
    python -m mealscan photo <path> [--hint TEXT]
    python -m mealscan barcode <code>
    python -m mealscan photo <path> --metrics

Prints the report as JSON on stdout.

Exit codes:
    0 success
    1 barcode not found / invalid, lookup failure or image encoding error
"""

from __future__ import annotations

import argparse
import asyncio
import json
import sys
from typing import List, Optional

from mealscan.application.recognition_service import create_recognition_service
from mealscan.config import load_settings
from mealscan.domain.errors import BarcodeError, ImageEncodingError
from mealscan.logging_config import configure_logging
from mealscan.metrics import recognition as metrics


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="mealscan", description="Food recognition and nutrition reports")
    parser.add_argument("--env-file", dest="env_file", default=None, help="dotenv file to load")
    parser.add_argument("--metrics", action="store_true", help="print metrics snapshot to stderr")
    sub = parser.add_subparsers(dest="command", required=True)

    photo = sub.add_parser("photo", help="recognize food in a photo")
    photo.add_argument("path")
    photo.add_argument("--hint", default=None, help="what the food is, in your words")

    barcode = sub.add_parser("barcode", help="look up a packaged product")
    barcode.add_argument("code")
    return parser


async def _run(args: argparse.Namespace) -> dict:
    settings = load_settings(args.env_file)
    configure_logging(settings.log_level)

    async with create_recognition_service(settings) as service:
        if args.command == "photo":
            report = await service.recognize_food(args.path, user_hint=args.hint)
        else:
            report = await service.recognize_barcode(args.code)
    return report.to_dict()


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    try:
        payload = asyncio.run(_run(args))
    except (BarcodeError, ImageEncodingError) as exc:
        print(f"[ERROR] {exc}", file=sys.stderr)
        return 1
    finally:
        if args.metrics:
            print(json.dumps(metrics.snapshot(), indent=2), file=sys.stderr)

    print(json.dumps(payload, indent=2, ensure_ascii=False))
    return 0
