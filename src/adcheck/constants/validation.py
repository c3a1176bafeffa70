"""Stable validation error codes and allowed-key sets for config validation."""

from __future__ import annotations

CFG001: str = "CFG001"  # config file not found (explicit --config)
CFG002: str = "CFG002"  # invalid YAML parse
CFG003: str = "CFG003"  # top-level value is not a mapping
CFG004: str = "CFG004"  # unknown key
CFG005: str = "CFG005"  # invalid value type
CFG006: str = "CFG006"  # strictness out of range
CFG007: str = "CFG007"  # category risk out of range
CFG008: str = "CFG008"  # unknown severity key
CFG009: str = "CFG009"  # invalid nested mapping
CFG010: str = "CFG010"  # severity multiplier out of range


ALLOWED_CONFIG_KEYS: frozenset[str] = frozenset(
    {
        "platforms",
        "category_risk",
        "ignore_default_tables",
        "policy_db",
    }
)
