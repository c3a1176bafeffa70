"""Configuration defaults and filenames."""

from __future__ import annotations

CONFIG_FILENAME: str = "adcheck.yaml"

MIN_STRICTNESS: float = 1.0
MAX_STRICTNESS: float = 10.0
MIN_CATEGORY_RISK: float = 1.0
MAX_CATEGORY_RISK: float = 10.0
MAX_SEVERITY_MULTIPLIER: float = 10.0

PLATFORM_ALLOWED_KEYS: frozenset[str] = frozenset(
    {"display_name", "strictness", "severity_multipliers", "prohibited_categories"}
)
SEVERITY_KEYS: frozenset[str] = frozenset({"critical", "warning", "info"})
