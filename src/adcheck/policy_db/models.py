"""Frozen models for the policy database."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

from adcheck.types import JsonObject, Severity


@dataclass(frozen=True)
class PolicyRule:
    """A base advertising rule with its trigger phrases."""

    id: str
    severity: Severity
    title: str
    patterns: tuple[str, ...] = ()

    def to_dict(self) -> JsonObject:
        return {"id": self.id, "severity": self.severity, "title": self.title, "pattern": list(self.patterns)}


@dataclass(frozen=True)
class PlatformOverride:
    """Severity overrides and extra banned terms for one platform."""

    rule_severities: Mapping[str, Severity] = field(default_factory=lambda: MappingProxyType({}))
    additional_banned: tuple[str, ...] = ()


@dataclass(frozen=True)
class ProductCategory:
    name: str
    regulated: bool = False
    requires_prescreen: bool = False

    def to_dict(self) -> JsonObject:
        return {"name": self.name, "regulated": self.regulated, "requires_prescreen": self.requires_prescreen}


@dataclass(frozen=True)
class PrescreenClaim:
    """A claim type that must be reviewed before launch in regulated categories."""

    id: str
    slug: str
    description: str = ""
    examples: tuple[str, ...] = ()

    def to_dict(self) -> JsonObject:
        return {"id": self.id, "slug": self.slug, "description": self.description, "examples": list(self.examples)}


@dataclass(frozen=True)
class PolicyDatabase:
    """Static rule definitions, platform overrides, and category metadata."""

    base_rules: tuple[PolicyRule, ...]
    platform_overrides: Mapping[str, PlatformOverride] = field(default_factory=lambda: MappingProxyType({}))
    product_categories: tuple[ProductCategory, ...] = ()
    claims_requiring_prescreen: tuple[PrescreenClaim, ...] = ()
    prohibited_phrases: tuple[str, ...] = ()
    required_disclaimers: tuple[str, ...] = ()


@dataclass(frozen=True)
class DetectorBrief:
    """Everything the text detector needs for one platform and product category."""

    platform: str
    product_category: str
    rules: tuple[PolicyRule, ...]
    category: ProductCategory | None
    prescreen_claims: tuple[PrescreenClaim, ...]
    banned_terms: tuple[str, ...]
    prohibited_phrases: tuple[str, ...]
    required_disclaimers: tuple[str, ...]

    def to_dict(self) -> JsonObject:
        return {
            "platform": self.platform,
            "productCategory": self.product_category,
            "rules": [rule.to_dict() for rule in self.rules],
            "category": self.category.to_dict() if self.category is not None else None,
            "prescreenClaims": [claim.to_dict() for claim in self.prescreen_claims],
            "bannedTerms": list(self.banned_terms),
            "prohibitedPhrases": list(self.prohibited_phrases),
            "requiredDisclaimers": list(self.required_disclaimers),
        }
