"""Read-only lookups over a loaded ``PolicyDatabase``."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import replace

from adcheck.engine.policy import normalize_key
from adcheck.policy_db.models import (
    DetectorBrief,
    PlatformOverride,
    PolicyDatabase,
    PolicyRule,
    PrescreenClaim,
    ProductCategory,
)


def apply_platform_overrides(
    rules: Iterable[PolicyRule],
    platform: object,
    overrides: Mapping[str, PlatformOverride],
) -> tuple[PolicyRule, ...]:
    """Return rules with platform severity overrides applied; inputs are not modified."""
    override = overrides.get(normalize_key(platform))
    if override is None:
        return tuple(rules)
    return tuple(
        replace(rule, severity=override.rule_severities[rule.id]) if rule.id in override.rule_severities else rule
        for rule in rules
    )


def get_category_info(db: PolicyDatabase, product_category: object) -> ProductCategory | None:
    """Find a product category by case-insensitive exact name."""
    key = normalize_key(product_category)
    for category in db.product_categories:
        if category.name.strip().lower() == key:
            return category
    return None


def get_prescreen_claims(db: PolicyDatabase) -> tuple[PrescreenClaim, ...]:
    return db.claims_requiring_prescreen


def get_platform_banned(db: PolicyDatabase, platform: object) -> tuple[str, ...]:
    override = db.platform_overrides.get(normalize_key(platform))
    return override.additional_banned if override is not None else ()


def build_detector_brief(db: PolicyDatabase, platform: str, product_category: str) -> DetectorBrief:
    """Resolve the rule set and context handed to the text violation detector."""
    return DetectorBrief(
        platform=platform,
        product_category=product_category,
        rules=apply_platform_overrides(db.base_rules, platform, db.platform_overrides),
        category=get_category_info(db, product_category),
        prescreen_claims=get_prescreen_claims(db),
        banned_terms=get_platform_banned(db, platform),
        prohibited_phrases=db.prohibited_phrases,
        required_disclaimers=db.required_disclaimers,
    )
