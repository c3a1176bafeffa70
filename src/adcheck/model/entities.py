"""Frozen data models for violations, scores, and reports."""

from __future__ import annotations

from dataclasses import dataclass

from adcheck.types import JsonObject, Severity, Status


@dataclass(frozen=True)
class ImageRegion:
    """Percentage-based rectangle flagged on an image."""

    x: str
    y: str
    width: str
    height: str
    label: str = ""

    def to_dict(self) -> JsonObject:
        return {
            "x": self.x,
            "y": self.y,
            "width": self.width,
            "height": self.height,
            "label": self.label,
        }


@dataclass(frozen=True)
class Violation:
    """A single detected policy issue after normalization."""

    id: str
    severity: Severity
    category: str
    confidence: float
    offending_text: str | None = None
    offending_image_region: ImageRegion | None = None
    policy_reference: str = "POLICY"
    explanation: str = "No explanation provided."
    suggested_fix: str = "Provide a safer alternative."

    def to_dict(self) -> JsonObject:
        """Serialize using the camelCase wire field names."""
        region = self.offending_image_region
        return {
            "id": self.id,
            "severity": self.severity,
            "category": self.category,
            "offendingText": self.offending_text,
            "offendingImageRegion": region.to_dict() if region is not None else None,
            "policyReference": self.policy_reference,
            "explanation": self.explanation,
            "suggestedFix": self.suggested_fix,
            "confidence": self.confidence,
        }


@dataclass(frozen=True)
class ScoreMeta:
    """Diagnostic values behind a score, each reproducible from the inputs."""

    platform: str
    platform_strictness: float
    category_risk: float
    pass_threshold: int
    weighted_penalties: int

    def to_dict(self) -> JsonObject:
        return {
            "platform": self.platform,
            "platformStrictness": self.platform_strictness,
            "categoryRisk": self.category_risk,
            "passThreshold": self.pass_threshold,
            "weightedPenalties": self.weighted_penalties,
        }


@dataclass(frozen=True)
class ScoreResult:
    """Engine output for one evaluation."""

    score: int
    status: Status
    meta: ScoreMeta

    def to_dict(self) -> JsonObject:
        return {
            "score": self.score,
            "status": self.status,
            "meta": self.meta.to_dict(),
        }


@dataclass(frozen=True)
class ComplianceReport:
    """Engine output merged with the normalized violation list."""

    compliance_score: int
    status: Status
    violations: tuple[Violation, ...]
    platform: str
    product_category: str
    timestamp: str
    scoring: ScoreMeta

    def to_dict(self) -> JsonObject:
        return {
            "complianceScore": self.compliance_score,
            "status": self.status,
            "violations": [violation.to_dict() for violation in self.violations],
            "meta": {
                "platform": self.platform,
                "productCategory": self.product_category,
                "timestamp": self.timestamp,
                "scoring": self.scoring.to_dict(),
            },
        }
