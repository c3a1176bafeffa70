"""CLI entrypoint for adcheck."""

from __future__ import annotations

import argparse
import logging
from pathlib import Path

from adcheck import __version__
from adcheck.cli.handlers import handle_brief, handle_platforms, handle_score, handle_validate_config
from adcheck.constants.branding import CLI_DESCRIPTION


def build_parser() -> argparse.ArgumentParser:
    """Build top-level CLI parser."""
    parser = argparse.ArgumentParser(
        prog="adcheck",
        description=CLI_DESCRIPTION,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    subparsers = parser.add_subparsers(dest="command", required=True)

    score = subparsers.add_parser("score", help="Score detected violations for a platform and product category")
    score.add_argument(
        "-i",
        "--input",
        type=Path,
        required=True,
        help="JSON file with a violation list, or an object with violations/textViolations/imageViolations",
    )
    score.add_argument("-p", "--platform", default=None, help="Ad platform (meta, tiktok, google, youtube, ...)")
    score.add_argument("-k", "--category", default=None, help="Product category (e.g. 'weight loss')")
    score.add_argument("-r", "--root", type=Path, default=Path("."), help="Directory holding adcheck.yaml")
    score.add_argument("-c", "--config", type=Path, help="Explicit config file")
    score.add_argument("-o", "--output", type=Path, default=None, help="Write the JSON report to this path")
    score.add_argument("--json", action="store_true", help="Print the JSON report instead of the summary")
    score.add_argument("--no-color", action="store_true", help="Disable colored output")
    score.add_argument(
        "--fail-on-status",
        action="store_true",
        help="Exit with code 1 when the compliance status is fail",
    )
    score.add_argument("-v", "--verbose", action="store_true", help="Show debug logging")

    validate = subparsers.add_parser("validate-config", help="Validate configuration without scoring")
    validate.add_argument("-r", "--root", type=Path, default=Path("."), help="Directory holding adcheck.yaml")
    validate.add_argument("-c", "--config", type=Path, help="Explicit config file")

    platforms = subparsers.add_parser("platforms", help="List resolved platform profiles and category risks")
    platforms.add_argument("-r", "--root", type=Path, default=Path("."), help="Directory holding adcheck.yaml")
    platforms.add_argument("-c", "--config", type=Path, help="Explicit config file")

    brief = subparsers.add_parser("brief", help="Print the policy brief handed to the text detector")
    brief.add_argument("-p", "--platform", required=True, help="Ad platform")
    brief.add_argument("-k", "--category", required=True, help="Product category")
    brief.add_argument("-r", "--root", type=Path, default=Path("."), help="Directory holding adcheck.yaml")
    brief.add_argument("-c", "--config", type=Path, help="Explicit config file")
    brief.add_argument("--policy-db", type=Path, default=None, help="Policy database file (overrides config)")

    return parser


def main(argv: list[str] | None = None) -> int:
    """CLI entrypoint."""
    parser = build_parser()
    args = parser.parse_args(argv)

    level = logging.DEBUG if getattr(args, "verbose", False) else logging.INFO
    logging.basicConfig(level=level, format="%(levelname)s %(message)s")

    if args.command == "score":
        return handle_score(args)
    if args.command == "validate-config":
        return handle_validate_config(args)
    if args.command == "platforms":
        return handle_platforms(args)
    if args.command == "brief":
        return handle_brief(args)

    parser.error(f"Unsupported command: {args.command}")
    return 2


if __name__ == "__main__":
    raise SystemExit(main())
