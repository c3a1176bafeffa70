"""Report assembly and JSON output."""

from __future__ import annotations

from collections.abc import Iterable
from datetime import UTC, datetime
from pathlib import Path

from adcheck.engine import DEFAULT_POLICY_TABLES, compute_score, normalize_violations
from adcheck.io import write_json_atomic
from adcheck.model import ComplianceReport
from adcheck.types import PolicyTables


def build_report(
    violations: Iterable[object] | None,
    platform: str,
    product_category: str,
    *,
    tables: PolicyTables = DEFAULT_POLICY_TABLES,
    timestamp: datetime | None = None,
) -> ComplianceReport:
    """Normalize violations, score them, and assemble the response report."""
    normalized = tuple(normalize_violations(violations))
    result = compute_score(normalized, platform, product_category, tables=tables)
    moment = timestamp if timestamp is not None else datetime.now(UTC)
    return ComplianceReport(
        compliance_score=result.score,
        status=result.status,
        violations=normalized,
        platform=platform,
        product_category=product_category,
        timestamp=moment.isoformat(),
        scoring=result.meta,
    )


def write_report(path: Path, report: ComplianceReport) -> None:
    write_json_atomic(path, report.to_dict())
