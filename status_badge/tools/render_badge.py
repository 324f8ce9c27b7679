"""Render a status badge SVG from command-line inputs."""
from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Iterable

import yaml

from ..config import LOG_LEVELS, SettingsLoader
from ..models import BadgeRequest
from ..renderer import render_badge
from ..resolver import BadgeResolutionError, BadgeResolver

logger = logging.getLogger(__name__)


def _parse_args(argv: Iterable[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Render a status badge as SVG.")
    parser.add_argument("--badge-type", default="", help="One of SUCCESS, FAILURE, PASSING, FAILING, DATESTAMP, INFORMATION, WARNING.")
    parser.add_argument("--label", default="", help="Left-hand text of the badge.")
    parser.add_argument("--message", default="", help="Right-hand text of the badge (ignored for DATESTAMP).")
    parser.add_argument(
        "--badge-style",
        default="",
        help=(
            "plastic, flat, flat-square, for-the-badge or social (default: for-the-badge). "
            "for-the-badge upper-cases the text and squares the corners, flat-square squares "
            "the corners; plastic and social are drawn like flat."
        ),
    )
    parser.add_argument("--datestamp-format", default="", help="Locale for DATESTAMP badges (default: en-US).")
    parser.add_argument("--datestamp-timezone", default="", help="Timezone for DATESTAMP badges (default: UTC).")
    parser.add_argument("--datestamp-datestyle", default="", help="medium, full, long or short (default: medium).")
    parser.add_argument("--datestamp-timestyle", default="", help="medium, full, long or short (default: long).")
    parser.add_argument(
        "--output",
        type=Path,
        default=None,
        help="Write the SVG to this path instead of stdout.",
    )
    parser.add_argument(
        "--settings",
        type=Path,
        default=None,
        help="Alternative settings YAML file.",
    )
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVELS,
        default=None,
        help="Logging level (default: from settings).",
    )
    return parser.parse_args(argv)


def main(argv: Iterable[str] | None = None) -> int:
    args = _parse_args(argv)
    try:
        settings = SettingsLoader(args.settings).load()
    except (OSError, ValueError, yaml.YAMLError) as exc:
        print(f"Error: could not load settings: {exc}", file=sys.stderr)
        return 1
    logging.basicConfig(
        level=args.log_level or settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    request = BadgeRequest(
        badge_type=args.badge_type,
        label=args.label,
        message=args.message,
        badge_style=args.badge_style,
        datestamp_format=args.datestamp_format,
        datestamp_timezone=args.datestamp_timezone,
        datestamp_datestyle=args.datestamp_datestyle,
        datestamp_timestyle=args.datestamp_timestyle,
    )
    try:
        svg = render_badge(request, resolver=BadgeResolver(settings))
    except BadgeResolutionError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    if args.output is not None:
        args.output.parent.mkdir(parents=True, exist_ok=True)
        args.output.write_text(svg, encoding="utf-8")
        logger.info("Wrote badge to %s", args.output)
    else:
        sys.stdout.write(svg)
        sys.stdout.write("\n")
    return 0


if __name__ == "__main__":  # pragma: no cover - CLI entry point
    raise SystemExit(main())
