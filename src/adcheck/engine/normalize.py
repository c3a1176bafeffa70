"""Total normalization of raw detector records into ``Violation`` models.

Detector output arrives as loosely shaped mappings (camelCase from the
HTTP layer, snake_case from Python callers). Every helper here defaults
instead of raising, so the scoring engine always sees fully populated
records.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Iterable, Mapping
from dataclasses import replace

from adcheck.constants.scoring import (
    BASE_PENALTIES,
    DEFAULT_CONFIDENCE,
    FALLBACK_SEVERITY,
    MERGE_DEFAULT_CONFIDENCE,
)
from adcheck.model import ImageRegion, Violation
from adcheck.types import Severity

logger = logging.getLogger(__name__)

DEFAULT_CATEGORY: str = "General"
DEFAULT_POLICY_REFERENCE: str = "POLICY"
DEFAULT_EXPLANATION: str = "No explanation provided."
DEFAULT_SUGGESTED_FIX: str = "Provide a safer alternative."


def normalize_severity(value: object) -> Severity:
    """Map a raw severity onto ``critical|warning|info``; anything else is ``info``."""
    if isinstance(value, str):
        normalized = value.strip().lower()
        if normalized in BASE_PENALTIES:
            return normalized  # type: ignore[return-value]
    if value is not None:
        logger.debug("Unrecognized severity %r treated as %s", value, FALLBACK_SEVERITY)
    return FALLBACK_SEVERITY  # type: ignore[return-value]


def normalize_confidence(value: object, default: float = DEFAULT_CONFIDENCE) -> float:
    """Clamp a numeric confidence to ``[0, 1]``; non-numbers fall back to ``default``."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return default
    if isinstance(value, float) and math.isnan(value):
        return default
    # Compare before converting; ints beyond float range would overflow.
    return float(max(0.0, min(1.0, value)))


def normalize_region(value: object) -> ImageRegion | None:
    """Build an ``ImageRegion`` from a mapping, or ``None`` for anything else."""
    if not isinstance(value, Mapping):
        return None
    return ImageRegion(
        x=_as_text(value.get("x"), "0%"),
        y=_as_text(value.get("y"), "0%"),
        width=_as_text(value.get("width"), "0%"),
        height=_as_text(value.get("height"), "0%"),
        label=_as_text(value.get("label"), ""),
    )


def normalize_violation(
    raw: object,
    index: int,
    *,
    default_confidence: float = DEFAULT_CONFIDENCE,
) -> Violation:
    """Coerce one raw record into a ``Violation``. Never raises.

    ``index`` supplies the ``V-{index}`` id when the record has none.
    """
    if isinstance(raw, Violation):
        return replace(
            raw,
            severity=normalize_severity(raw.severity),
            confidence=normalize_confidence(raw.confidence, default_confidence),
        )

    if not isinstance(raw, Mapping):
        logger.warning("Violation record %d is not a mapping (%s); using defaults", index, type(raw).__name__)
        raw = {}

    offending_text = _pick(raw, "offendingText", "offending_text")
    return Violation(
        id=_as_text(raw.get("id"), f"V-{index}"),
        severity=normalize_severity(raw.get("severity")),
        category=_as_text(raw.get("category"), DEFAULT_CATEGORY),
        confidence=normalize_confidence(raw.get("confidence"), default_confidence),
        offending_text=offending_text if isinstance(offending_text, str) else None,
        offending_image_region=normalize_region(_pick(raw, "offendingImageRegion", "offending_image_region")),
        policy_reference=_as_text(_pick(raw, "policyReference", "policy_reference"), DEFAULT_POLICY_REFERENCE),
        explanation=_as_text(raw.get("explanation"), DEFAULT_EXPLANATION),
        suggested_fix=_as_text(_pick(raw, "suggestedFix", "suggested_fix"), DEFAULT_SUGGESTED_FIX),
    )


def normalize_violations(
    records: Iterable[object] | None,
    *,
    default_confidence: float = DEFAULT_CONFIDENCE,
) -> list[Violation]:
    """Normalize a sequence of raw records, numbering ids by position."""
    if records is None:
        return []
    return [
        normalize_violation(record, index, default_confidence=default_confidence)
        for index, record in enumerate(records)
    ]


def merge_detector_violations(*sources: Iterable[object] | None) -> list[Violation]:
    """Concatenate detector outputs (text first, then image) into one normalized list.

    Records without a confidence are weighted at the merge default rather
    than full confidence, and missing ids are numbered across the merged list.
    """
    merged: list[object] = []
    for source in sources:
        if source is not None:
            merged.extend(source)
    return normalize_violations(merged, default_confidence=MERGE_DEFAULT_CONFIDENCE)


def _pick(raw: Mapping[str, object], *keys: str) -> object:
    for key in keys:
        if key in raw:
            return raw[key]
    return None


def _as_text(value: object, default: str) -> str:
    if isinstance(value, str) and value.strip():
        return value
    if isinstance(value, int) and not isinstance(value, bool):
        return str(value)
    return default
