"""Config loading and normalization for adcheck."""

from __future__ import annotations

import math
from pathlib import Path
from types import MappingProxyType
from typing import Any

import yaml

from adcheck.config.model import AdcheckConfig
from adcheck.constants.config import (
    CONFIG_FILENAME,
    MAX_CATEGORY_RISK,
    MAX_SEVERITY_MULTIPLIER,
    MAX_STRICTNESS,
    MIN_CATEGORY_RISK,
    MIN_STRICTNESS,
    PLATFORM_ALLOWED_KEYS,
    SEVERITY_KEYS,
)
from adcheck.constants.platforms import DEFAULT_PLATFORM_KEY
from adcheck.constants.validation import ALLOWED_CONFIG_KEYS
from adcheck.engine.policy import DEFAULT_POLICY_TABLES
from adcheck.exceptions import ConfigError
from adcheck.types import PlatformProfile


def load_config(root: Path, config_path: Path | None = None) -> AdcheckConfig:
    """Load and validate config from ``adcheck.yaml`` or an explicit path."""
    root = root.resolve()
    path = config_path.resolve() if config_path else (root / CONFIG_FILENAME)
    if not path.exists():
        if config_path is not None:
            raise ConfigError(f"Config file not found: {path}")
        return AdcheckConfig()

    try:
        raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML config file at {path}: {exc}") from exc

    if raw is None:
        raw = {}
    if not isinstance(raw, dict):
        raise ConfigError(f"Config file at {path} must be a YAML mapping")

    unknown = sorted(str(key) for key in raw if key not in ALLOWED_CONFIG_KEYS)
    if unknown:
        raise ConfigError(f"Unknown config key(s): {', '.join(unknown)}")

    ignore_default_tables = raw.get("ignore_default_tables", False)
    if not isinstance(ignore_default_tables, bool):
        raise ConfigError("ignore_default_tables must be a boolean")

    platforms_raw = _ensure_mapping(raw.get("platforms"), "platforms")
    platforms: dict[str, PlatformProfile] = {}
    for name, entry in platforms_raw.items():
        key = _ensure_name(name, "platforms")
        platforms[key] = _build_platform(
            key,
            _ensure_mapping(entry, f"platforms.{name}"),
            inherit_bundled=not ignore_default_tables,
        )

    category_risk: dict[str, float] = {}
    for name, value in _ensure_mapping(raw.get("category_risk"), "category_risk").items():
        key = _ensure_name(name, "category_risk")
        category_risk[key] = _ensure_number(
            value, f"category_risk.{name}", minimum=MIN_CATEGORY_RISK, maximum=MAX_CATEGORY_RISK
        )

    policy_db_raw = raw.get("policy_db")
    policy_db: Path | None = None
    if policy_db_raw is not None:
        if not isinstance(policy_db_raw, str) or not policy_db_raw.strip():
            raise ConfigError("policy_db must be a non-empty path string")
        policy_db = (path.parent / policy_db_raw).resolve()

    return AdcheckConfig(
        platforms=MappingProxyType(platforms),
        category_risk=MappingProxyType(category_risk),
        ignore_default_tables=ignore_default_tables,
        policy_db=policy_db,
    )


def _build_platform(name: str, raw: dict[str, Any], *, inherit_bundled: bool) -> PlatformProfile:
    """Build a profile, inheriting unset fields from the bundled profile of the same name."""
    bundled = DEFAULT_POLICY_TABLES.platforms.get(name) if inherit_bundled else None
    if name == DEFAULT_PLATFORM_KEY:
        bundled = DEFAULT_POLICY_TABLES.default_profile
    base = bundled or DEFAULT_POLICY_TABLES.default_profile

    unknown = sorted(str(key) for key in raw if key not in PLATFORM_ALLOWED_KEYS)
    if unknown:
        raise ConfigError(f"platforms.{name} has unknown key(s): {', '.join(unknown)}")

    display_name = raw.get("display_name", bundled.display_name if bundled else name)
    if not isinstance(display_name, str) or not display_name.strip():
        raise ConfigError(f"platforms.{name}.display_name must be a non-empty string")

    strictness = base.strictness
    if "strictness" in raw:
        strictness = _ensure_number(
            raw["strictness"], f"platforms.{name}.strictness", minimum=MIN_STRICTNESS, maximum=MAX_STRICTNESS
        )

    multipliers = dict(base.severity_multipliers)
    multipliers_raw = _ensure_mapping(raw.get("severity_multipliers"), f"platforms.{name}.severity_multipliers")
    for severity, value in multipliers_raw.items():
        if severity not in SEVERITY_KEYS:
            raise ConfigError(
                f"platforms.{name}.severity_multipliers has unknown severity {severity!r}; "
                f"expected one of {sorted(SEVERITY_KEYS)}"
            )
        multipliers[severity] = _ensure_number(
            value,
            f"platforms.{name}.severity_multipliers.{severity}",
            minimum=0.0,
            maximum=MAX_SEVERITY_MULTIPLIER,
            exclusive=True,
        )

    prohibited = base.prohibited_categories
    if "prohibited_categories" in raw:
        prohibited = tuple(
            _ensure_string_list(raw["prohibited_categories"], f"platforms.{name}.prohibited_categories")
        )

    return PlatformProfile(
        display_name=display_name,
        strictness=strictness,
        severity_multipliers=multipliers,
        prohibited_categories=prohibited,
    )


def _ensure_mapping(value: Any, key_name: str) -> dict[Any, Any]:
    if value is None:
        return {}
    if not isinstance(value, dict):
        raise ConfigError(f"{key_name} must be a mapping")
    return value


def _ensure_name(value: Any, key_name: str) -> str:
    if not isinstance(value, str) or not value.strip():
        raise ConfigError(f"{key_name} keys must be non-empty strings, got {value!r}")
    return value.strip().lower()


def _ensure_number(
    value: Any, key_name: str, *, minimum: float, maximum: float, exclusive: bool = False
) -> float:
    """Coerce a numeric config value, raising ConfigError when it is not finite or out of bounds."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ConfigError(f"{key_name} must be a number")
    if isinstance(value, float) and not math.isfinite(value):
        raise ConfigError(f"{key_name} must be a finite number, got {value}")
    if value < minimum or (exclusive and value == minimum) or value > maximum:
        lower = f"> {minimum}" if exclusive else f">= {minimum}"
        raise ConfigError(f"{key_name} must be {lower} and <= {maximum}, got {value}")
    return float(value)


def _ensure_string_list(value: Any, key_name: str) -> list[str]:
    """Coerce a value to a list of strings, raising ConfigError on type mismatch."""
    if value is None:
        return []
    if not isinstance(value, (list, tuple)) or not all(isinstance(item, str) for item in value):
        raise ConfigError(f"{key_name} must be a list of strings")
    return list(value)
