"""Platform profile and category risk resolution."""

from __future__ import annotations

import logging
from collections.abc import Mapping

from adcheck.constants.categories import CATEGORY_RISK_WEIGHTS
from adcheck.constants.platforms import DEFAULT_PLATFORM_PROFILE, PLATFORM_PROFILES
from adcheck.types import PlatformProfile, PolicyTables

logger = logging.getLogger(__name__)


def profile_from_mapping(raw: Mapping[str, object]) -> PlatformProfile:
    """Build a ``PlatformProfile`` from a bundled or already-validated mapping."""
    multipliers = raw.get("severity_multipliers") or {}
    prohibited = raw.get("prohibited_categories") or ()
    return PlatformProfile(
        display_name=str(raw["display_name"]),
        strictness=float(raw.get("strictness", 1.0)),  # type: ignore[arg-type]
        severity_multipliers={str(k): float(v) for k, v in multipliers.items()},  # type: ignore[union-attr]
        prohibited_categories=tuple(str(category) for category in prohibited),  # type: ignore[union-attr]
    )


def build_default_tables() -> PolicyTables:
    """Build the bundled platform and category tables."""
    return PolicyTables(
        default_profile=profile_from_mapping(DEFAULT_PLATFORM_PROFILE),
        platforms={name: profile_from_mapping(raw) for name, raw in PLATFORM_PROFILES.items()},
        category_risk=CATEGORY_RISK_WEIGHTS,
    )


DEFAULT_POLICY_TABLES: PolicyTables = build_default_tables()


def normalize_key(name: object) -> str:
    """Trim and lower-case a lookup key; non-strings become the empty key."""
    return name.strip().lower() if isinstance(name, str) else ""


def resolve_platform_profile(
    platform_name: object,
    tables: PolicyTables = DEFAULT_POLICY_TABLES,
) -> PlatformProfile:
    """Return the profile for a platform name, falling back to the default profile."""
    key = normalize_key(platform_name)
    if key not in tables.platforms:
        logger.debug("Platform %r not in policy tables; using default profile", platform_name)
    return tables.platform(key)


def resolve_category_risk(
    category_name: object,
    tables: PolicyTables = DEFAULT_POLICY_TABLES,
) -> float:
    """Return the risk multiplier for a product category, neutral when unknown."""
    key = normalize_key(category_name)
    if key not in tables.category_risk:
        logger.debug("Product category %r not in risk table; using neutral risk", category_name)
    return tables.risk(key)
