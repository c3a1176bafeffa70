"""Loader for YAML/JSON policy database files.

Files are parsed with ``yaml.safe_load`` (JSON parses as YAML) and
checked against ``POLICY_DB_SCHEMA`` before any model is built.
"""

from __future__ import annotations

import logging
from pathlib import Path
from types import MappingProxyType
from typing import Any

import jsonschema
import yaml

from adcheck.constants.policy_db import BUNDLED_POLICY_DB_FILENAME, POLICY_DB_SCHEMA
from adcheck.exceptions import PolicyDatabaseError
from adcheck.policy_db.models import (
    PlatformOverride,
    PolicyDatabase,
    PolicyRule,
    PrescreenClaim,
    ProductCategory,
)

logger = logging.getLogger(__name__)

BUNDLED_DATA_DIR: Path = Path(__file__).resolve().parent.parent / "data"

_VALIDATOR = jsonschema.Draft202012Validator(POLICY_DB_SCHEMA)


def bundled_policy_db_path() -> Path:
    return BUNDLED_DATA_DIR / BUNDLED_POLICY_DB_FILENAME


def load_policy_db(path: Path | None = None) -> PolicyDatabase:
    """Load, validate, and build a ``PolicyDatabase``.

    Uses the bundled database when ``path`` is omitted. Raises
    ``PolicyDatabaseError`` on unreadable files, invalid YAML, or schema
    violations.
    """
    source = path.resolve() if path is not None else bundled_policy_db_path()
    try:
        text = source.read_text(encoding="utf-8")
    except OSError as exc:
        raise PolicyDatabaseError(f"Cannot read policy database at {source}: {exc}") from exc

    try:
        raw = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise PolicyDatabaseError(f"Invalid YAML in policy database {source}: {exc}") from exc

    if not isinstance(raw, dict):
        raise PolicyDatabaseError(f"Policy database {source} must contain a mapping")

    problems = sorted(_VALIDATOR.iter_errors(raw), key=lambda error: [str(part) for part in error.absolute_path])
    if problems:
        details = "; ".join(f"{_error_location(error)}: {error.message}" for error in problems)
        raise PolicyDatabaseError(f"Policy database {source} failed validation: {details}")

    database = _build_database(raw)
    logger.debug("Loaded policy database %s (%d rules)", source, len(database.base_rules))
    return database


def _error_location(error: jsonschema.ValidationError) -> str:
    parts = [str(part) for part in error.absolute_path]
    return ".".join(parts) if parts else "<root>"


def _build_database(raw: dict[str, Any]) -> PolicyDatabase:
    return PolicyDatabase(
        base_rules=tuple(
            PolicyRule(
                id=rule["id"],
                severity=rule["severity"],
                title=rule["title"],
                patterns=tuple(rule.get("pattern") or ()),
            )
            for rule in raw["base_rules"]
        ),
        platform_overrides=MappingProxyType(
            {
                str(platform).strip().lower(): _build_override(entry or {})
                for platform, entry in (raw.get("platform_overrides") or {}).items()
            }
        ),
        product_categories=tuple(
            ProductCategory(
                name=entry["name"],
                regulated=bool(entry.get("regulated", False)),
                requires_prescreen=bool(entry.get("requires_prescreen", False)),
            )
            for entry in raw.get("product_categories") or ()
        ),
        claims_requiring_prescreen=tuple(
            PrescreenClaim(
                id=entry["id"],
                slug=entry["slug"],
                description=entry.get("description", ""),
                examples=tuple(entry.get("examples") or ()),
            )
            for entry in raw.get("claims_requiring_prescreen") or ()
        ),
        prohibited_phrases=tuple(raw.get("prohibited_phrases") or ()),
        required_disclaimers=tuple(raw.get("required_disclaimers") or ()),
    )


def _build_override(entry: dict[str, Any]) -> PlatformOverride:
    severities = {
        rule_id: value["severity"] for rule_id, value in entry.items() if rule_id != "additional_banned"
    }
    return PlatformOverride(
        rule_severities=MappingProxyType(severities),
        additional_banned=tuple(entry.get("additional_banned") or ()),
    )
