"""Deterministic compliance scoring engine."""

from .normalize import (
    merge_detector_violations,
    normalize_confidence,
    normalize_severity,
    normalize_violation,
    normalize_violations,
)
from .policy import DEFAULT_POLICY_TABLES, build_default_tables, resolve_category_risk, resolve_platform_profile
from .score import accumulate_penalty, compute_score, pass_threshold, round_half_up, weighted_penalty

__all__ = [
    "DEFAULT_POLICY_TABLES",
    "accumulate_penalty",
    "build_default_tables",
    "compute_score",
    "merge_detector_violations",
    "normalize_confidence",
    "normalize_severity",
    "normalize_violation",
    "normalize_violations",
    "pass_threshold",
    "resolve_category_risk",
    "resolve_platform_profile",
    "round_half_up",
    "weighted_penalty",
]
