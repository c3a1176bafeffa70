"""CLI subcommand handlers and exit-code evaluation."""

from __future__ import annotations

import argparse
import json
import logging
import sys

from adcheck.config import AdcheckConfig, load_config, validate_config_file
from adcheck.engine import merge_detector_violations, normalize_violations
from adcheck.exceptions import AdcheckError, ConfigError, PolicyDatabaseError, ViolationInputError
from adcheck.exceptions.validation import format_errors
from adcheck.io import load_json_file
from adcheck.model import ComplianceReport, Violation
from adcheck.policy_db import build_detector_brief, load_policy_db
from adcheck.reporting import StdoutReporter, build_report, write_report

logger = logging.getLogger(__name__)


def evaluate_exit_code(report: ComplianceReport, *, fail_on_status: bool) -> int:
    """Return 1 when gating on status and the report failed, 0 otherwise."""
    if fail_on_status and report.status == "fail":
        return 1
    return 0


def extract_violations(payload: object) -> tuple[list[Violation], dict[str, str]]:
    """Pull violations and request context out of a decoded input document.

    Accepts a bare list of records, or an object with ``violations`` or
    with separate ``textViolations``/``imageViolations`` detector outputs.
    The second element carries ``platform``/``productCategory`` when present.
    """
    if isinstance(payload, list):
        return normalize_violations(payload), {}
    if not isinstance(payload, dict):
        raise ViolationInputError(f"Expected a JSON list or object, got {type(payload).__name__}")

    context = {key: payload[key] for key in ("platform", "productCategory") if isinstance(payload.get(key), str)}

    if "textViolations" in payload or "imageViolations" in payload:
        text, image = payload.get("textViolations"), payload.get("imageViolations")
        for key, value in (("textViolations", text), ("imageViolations", image)):
            if value is not None and not isinstance(value, list):
                raise ViolationInputError(f"`{key}` must be a list")
        return merge_detector_violations(text, image), context

    records = payload.get("violations", [])
    if not isinstance(records, list):
        raise ViolationInputError("`violations` must be a list")
    return normalize_violations(records), context


def handle_score(args: argparse.Namespace) -> int:
    """Score an input file and render or write the report."""
    errors = validate_config_file(args.root, args.config, config_explicit=args.config is not None)
    if errors:
        print(format_errors(errors), file=sys.stderr)
        return 2

    try:
        config = load_config(args.root, args.config)
        violations, context = extract_violations(load_json_file(args.input))
    except (ConfigError, ViolationInputError) as exc:
        print(f"Configuration error: {exc}", file=sys.stderr)
        return 2

    platform = args.platform if args.platform is not None else context.get("platform", "")
    category = args.category if args.category is not None else context.get("productCategory", "")
    logger.debug("Scoring %d violation(s) for platform=%r category=%r", len(violations), platform, category)

    report = build_report(violations, platform, category, tables=config.policy_tables)

    if args.output is not None:
        try:
            write_report(args.output, report)
        except OSError as exc:
            print(f"Output error: {exc}", file=sys.stderr)
            return 1

    if args.json:
        print(json.dumps(report.to_dict(), indent=2, sort_keys=True))
    else:
        use_color = not args.no_color and sys.stdout.isatty()
        print(StdoutReporter(report, color=use_color).render())

    return evaluate_exit_code(report, fail_on_status=args.fail_on_status)


def handle_validate_config(args: argparse.Namespace) -> int:
    """Run config validation and report results."""
    errors = validate_config_file(args.root, args.config, config_explicit=args.config is not None)
    if errors:
        print(format_errors(errors), file=sys.stderr)
        return 2

    print("Configuration is valid.")
    return 0


def handle_platforms(args: argparse.Namespace) -> int:
    """Print the resolved platform profiles and category risk table."""
    config = _load_config_or_none(args)
    if config is None:
        return 2

    tables = config.policy_tables
    profiles = [("(default)", tables.default_profile), *sorted(tables.platforms.items())]
    for key, profile in profiles:
        multipliers = ", ".join(f"{sev}={value:g}" for sev, value in sorted(profile.severity_multipliers.items()))
        prohibited = ", ".join(profile.prohibited_categories) or "-"
        print(f"{key:<12} {profile.display_name} | strictness {profile.strictness:g} | {multipliers}")
        print(f"{'':<12} prohibited: {prohibited}")
    print()
    for category, risk in sorted(tables.category_risk.items()):
        print(f"{category:<28} risk {risk:g}")
    return 0


def handle_brief(args: argparse.Namespace) -> int:
    """Print the detector brief for a platform and product category as JSON."""
    config = _load_config_or_none(args)
    if config is None:
        return 2

    db_path = args.policy_db if args.policy_db is not None else config.policy_db
    try:
        database = load_policy_db(db_path)
    except PolicyDatabaseError as exc:
        print(f"Policy database error: {exc}", file=sys.stderr)
        return 2

    brief = build_detector_brief(database, args.platform, args.category)
    print(json.dumps(brief.to_dict(), indent=2, sort_keys=True))
    return 0


def _load_config_or_none(args: argparse.Namespace) -> AdcheckConfig | None:
    try:
        return load_config(args.root, args.config)
    except AdcheckError as exc:
        print(f"Configuration error: {exc}", file=sys.stderr)
        return None
