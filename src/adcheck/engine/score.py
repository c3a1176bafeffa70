"""Penalty accumulation and score/status decision.

Each violation's penalty is a product of independent factors: base
penalty by severity, detector confidence, the platform's severity
multiplier, the product category's risk, a prohibited-category bonus,
and the platform's global strictness. The score is what remains of 100
after subtracting the summed penalties.
"""

from __future__ import annotations

import math
import sys
from collections.abc import Iterable

from adcheck.constants.scoring import (
    BASE_PASS_THRESHOLD,
    BASE_PENALTIES,
    BASELINE_STRICTNESS,
    FALLBACK_SEVERITY,
    MAX_SCORE,
    MIN_SCORE,
    NEUTRAL_MULTIPLIER,
    PROHIBITED_CATEGORY_MULTIPLIER,
    STRICTNESS_THRESHOLD_STEP,
)
from adcheck.engine.normalize import normalize_violation
from adcheck.engine.policy import DEFAULT_POLICY_TABLES, resolve_category_risk, resolve_platform_profile
from adcheck.model import ScoreMeta, ScoreResult, Violation
from adcheck.types import PlatformProfile, PolicyTables, Status


def round_half_up(value: float) -> int:
    """Round to the nearest integer with ties going up (98.5 -> 99)."""
    return int(math.floor(value + 0.5))


def _saturate(value: float) -> float:
    """Clamp an overflowed value to the largest finite float so it can be rounded."""
    return max(-sys.float_info.max, min(sys.float_info.max, value))


def is_prohibited_category(category: str, profile: PlatformProfile) -> bool:
    """Case-insensitive substring match against the profile's prohibited categories."""
    lowered = category.lower()
    return any(prohibited in lowered for prohibited in profile.prohibited_categories)


def weighted_penalty(violation: Violation, profile: PlatformProfile, category_risk: float) -> float:
    """Return the fully weighted penalty for one normalized violation."""
    base = BASE_PENALTIES.get(violation.severity, BASE_PENALTIES[FALLBACK_SEVERITY])
    prohibited = (
        PROHIBITED_CATEGORY_MULTIPLIER if is_prohibited_category(violation.category, profile) else NEUTRAL_MULTIPLIER
    )
    penalty = (
        base
        * violation.confidence
        * profile.severity_multiplier(violation.severity)
        * category_risk
        * prohibited
        * profile.strictness
    )
    # A zero factor after an overflowed partial product is still zero.
    return 0.0 if math.isnan(penalty) else penalty


def accumulate_penalty(
    violations: Iterable[Violation | object],
    profile: PlatformProfile,
    category_risk: float,
) -> tuple[float, bool]:
    """Sum weighted penalties and report whether any violation is critical.

    Raw records are normalized first, so missing confidence counts as 1.
    """
    total = 0.0
    has_critical = False
    for index, raw in enumerate(violations):
        violation = normalize_violation(raw, index)
        total += weighted_penalty(violation, profile, category_risk)
        if violation.severity == "critical":
            has_critical = True
    return total, has_critical


def pass_threshold(strictness: float) -> float:
    """Minimum passing score for a platform strictness.

    Stricter platforms get a lower numeric bar here while their penalties
    are already scaled up by strictness; both halves are intentional.
    """
    return BASE_PASS_THRESHOLD - (strictness - BASELINE_STRICTNESS) * STRICTNESS_THRESHOLD_STEP


def compute_score(
    violations: Iterable[Violation | object] | None,
    platform_name: object,
    category_name: object,
    *,
    tables: PolicyTables = DEFAULT_POLICY_TABLES,
) -> ScoreResult:
    """Score a violation list for a platform and product category."""
    profile = resolve_platform_profile(platform_name, tables)
    category_risk = resolve_category_risk(category_name, tables)

    total_penalty, has_critical = accumulate_penalty(violations or (), profile, category_risk)

    raw_score = min(float(MAX_SCORE), max(float(MIN_SCORE), MAX_SCORE - total_penalty))
    threshold = pass_threshold(profile.strictness)
    status: Status = "fail" if has_critical or raw_score < threshold else "pass"

    return ScoreResult(
        score=round_half_up(raw_score),
        status=status,
        meta=ScoreMeta(
            platform=profile.display_name,
            platform_strictness=profile.strictness,
            category_risk=category_risk,
            pass_threshold=round_half_up(_saturate(threshold)),
            weighted_penalties=round_half_up(_saturate(total_penalty)),
        ),
    )
