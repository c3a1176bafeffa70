"""Core data models for adcheck."""

from .entities import (
    ComplianceReport,
    ImageRegion,
    ScoreMeta,
    ScoreResult,
    Violation,
)

__all__ = [
    "ComplianceReport",
    "ImageRegion",
    "ScoreMeta",
    "ScoreResult",
    "Violation",
]
