"""Static advertising policy database: rules, platform overrides, category metadata."""

from __future__ import annotations

from adcheck.policy_db.loader import bundled_policy_db_path, load_policy_db
from adcheck.policy_db.models import (
    DetectorBrief,
    PlatformOverride,
    PolicyDatabase,
    PolicyRule,
    PrescreenClaim,
    ProductCategory,
)
from adcheck.policy_db.queries import (
    apply_platform_overrides,
    build_detector_brief,
    get_category_info,
    get_platform_banned,
    get_prescreen_claims,
)

__all__ = [
    "DetectorBrief",
    "PlatformOverride",
    "PolicyDatabase",
    "PolicyRule",
    "PrescreenClaim",
    "ProductCategory",
    "apply_platform_overrides",
    "build_detector_brief",
    "bundled_policy_db_path",
    "get_category_info",
    "get_platform_banned",
    "get_prescreen_claims",
    "load_policy_db",
]
