"""Constants for penalty weighting, thresholds, and severity ranking."""

from __future__ import annotations

MAX_SCORE: int = 100
MIN_SCORE: int = 0

BASE_PENALTIES: dict[str, int] = {"critical": 50, "warning": 20, "info": 5}
FALLBACK_SEVERITY: str = "info"

# Extra weight for violations whose category is on the platform's prohibited list.
PROHIBITED_CATEGORY_MULTIPLIER: float = 1.5
NEUTRAL_MULTIPLIER: float = 1.0

DEFAULT_CONFIDENCE: float = 1.0
# Detector output without a confidence is trusted half as much when merged.
MERGE_DEFAULT_CONFIDENCE: float = 0.5

BASE_PASS_THRESHOLD: float = 80.0
STRICTNESS_THRESHOLD_STEP: float = 10.0
BASELINE_STRICTNESS: float = 1.0

SEVERITY_RANK: dict[str, int] = {"info": 0, "warning": 1, "critical": 2}
