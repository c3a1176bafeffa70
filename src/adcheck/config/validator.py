"""Config file validation for adcheck."""

from __future__ import annotations

import difflib
import math
from pathlib import Path
from typing import Any

import yaml

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
from adcheck.constants.validation import (
    ALLOWED_CONFIG_KEYS,
    CFG001,
    CFG002,
    CFG003,
    CFG004,
    CFG005,
    CFG006,
    CFG007,
    CFG008,
    CFG009,
    CFG010,
)
from adcheck.exceptions.validation import ValidationError


def validate_config_file(
    root: Path,
    config_path: Path | None = None,
    *,
    config_explicit: bool = False,
) -> list[ValidationError]:
    """Validate an adcheck.yaml file and return all validation errors.

    This is the collect-all entry point used by ``adcheck validate-config``
    and the ``adcheck score`` preflight. It never raises; all problems are
    returned as :class:`ValidationError` instances.
    """
    errors: list[ValidationError] = []
    root = root.resolve()
    path = config_path.resolve() if config_path else (root / CONFIG_FILENAME)
    path_str = str(path)

    if not path.exists():
        if config_explicit:
            errors.append(
                ValidationError(
                    code=CFG001,
                    path=path_str,
                    field="",
                    message=f"config file not found: {path}",
                )
            )
        return errors

    try:
        raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        errors.append(
            ValidationError(
                code=CFG002,
                path=path_str,
                field="",
                message=f"invalid YAML: {exc}",
            )
        )
        return errors

    if raw is None:
        return errors

    if not isinstance(raw, dict):
        errors.append(
            ValidationError(
                code=CFG003,
                path=path_str,
                field="",
                message=f"config must be a YAML mapping, got {type(raw).__name__}",
            )
        )
        return errors

    for key in sorted(str(key) for key in raw):
        if key not in ALLOWED_CONFIG_KEYS:
            errors.append(
                ValidationError(
                    code=CFG004,
                    path=path_str,
                    field=key,
                    message=f"unknown key `{key}`",
                    hint=_suggest_key(key, ALLOWED_CONFIG_KEYS),
                )
            )

    if "ignore_default_tables" in raw and not isinstance(raw["ignore_default_tables"], bool):
        errors.append(
            ValidationError(
                code=CFG005,
                path=path_str,
                field="ignore_default_tables",
                message="invalid type for `ignore_default_tables`",
                hint="expected a boolean",
            )
        )

    if "policy_db" in raw:
        val = raw["policy_db"]
        if not isinstance(val, str) or not val.strip():
            errors.append(
                ValidationError(
                    code=CFG005,
                    path=path_str,
                    field="policy_db",
                    message="invalid type for `policy_db`",
                    hint="expected a path string",
                )
            )
        elif not (path.parent / val).exists():
            errors.append(
                ValidationError(
                    code=CFG001,
                    path=path_str,
                    field="policy_db",
                    message=f"policy database not found: {(path.parent / val).resolve()}",
                )
            )

    _validate_platforms_block(raw, path_str, errors)
    _validate_category_risk_block(raw, path_str, errors)

    return errors


def _validate_platforms_block(
    raw: dict[str, Any],
    path_str: str,
    errors: list[ValidationError],
) -> None:
    """Validate the ``platforms`` nested mapping in adcheck.yaml."""
    platforms = raw.get("platforms")
    if platforms is None:
        return
    if not isinstance(platforms, dict):
        errors.append(
            ValidationError(
                code=CFG009,
                path=path_str,
                field="platforms",
                message="`platforms` must be a mapping",
            )
        )
        return

    for name in sorted(platforms, key=str):
        entry = platforms[name]
        field_prefix = f"platforms.{name}"
        if not _is_name(name):
            errors.append(_name_type_error(path_str, field_prefix))
        if entry is None:
            continue
        if not isinstance(entry, dict):
            errors.append(
                ValidationError(
                    code=CFG009,
                    path=path_str,
                    field=field_prefix,
                    message=f"`{field_prefix}` must be a mapping",
                )
            )
            continue

        for key in sorted(str(key) for key in entry):
            if key not in PLATFORM_ALLOWED_KEYS:
                errors.append(
                    ValidationError(
                        code=CFG004,
                        path=path_str,
                        field=f"{field_prefix}.{key}",
                        message=f"unknown key `{key}` in `{field_prefix}`",
                        hint=_suggest_key(key, PLATFORM_ALLOWED_KEYS),
                    )
                )

        if "display_name" in entry and not _is_name(entry["display_name"]):
            errors.append(
                ValidationError(
                    code=CFG005,
                    path=path_str,
                    field=f"{field_prefix}.display_name",
                    message=f"invalid type for `{field_prefix}.display_name`",
                    hint="expected a non-empty string",
                )
            )

        if "strictness" in entry:
            val = entry["strictness"]
            if not _is_number(val):
                errors.append(_number_type_error(path_str, f"{field_prefix}.strictness"))
            elif not MIN_STRICTNESS <= val <= MAX_STRICTNESS:
                errors.append(
                    ValidationError(
                        code=CFG006,
                        path=path_str,
                        field=f"{field_prefix}.strictness",
                        message=f"`strictness` must be between {MIN_STRICTNESS} and {MAX_STRICTNESS}, got {val}",
                        hint="strictness scales penalties up; use a severity multiplier to soften",
                    )
                )

        _validate_severity_multipliers(entry, field_prefix, path_str, errors)

        prohibited = entry.get("prohibited_categories")
        if prohibited is not None and (
            not isinstance(prohibited, (list, tuple)) or not all(isinstance(i, str) for i in prohibited)
        ):
            errors.append(
                ValidationError(
                    code=CFG005,
                    path=path_str,
                    field=f"{field_prefix}.prohibited_categories",
                    message=f"invalid type for `{field_prefix}.prohibited_categories`",
                    hint="expected a list of strings",
                )
            )


def _validate_severity_multipliers(
    entry: dict[str, Any],
    field_prefix: str,
    path_str: str,
    errors: list[ValidationError],
) -> None:
    multipliers = entry.get("severity_multipliers")
    if multipliers is None:
        return
    if not isinstance(multipliers, dict):
        errors.append(
            ValidationError(
                code=CFG009,
                path=path_str,
                field=f"{field_prefix}.severity_multipliers",
                message=f"`{field_prefix}.severity_multipliers` must be a mapping",
            )
        )
        return

    for severity in sorted(multipliers, key=str):
        field_name = f"{field_prefix}.severity_multipliers.{severity}"
        if severity not in SEVERITY_KEYS:
            errors.append(
                ValidationError(
                    code=CFG008,
                    path=path_str,
                    field=field_name,
                    message=f"unknown severity `{severity}`",
                    hint=f"expected one of: {', '.join(sorted(SEVERITY_KEYS))}",
                )
            )
            continue
        val = multipliers[severity]
        if not _is_number(val):
            errors.append(_number_type_error(path_str, field_name))
        elif not 0 < val <= MAX_SEVERITY_MULTIPLIER:
            errors.append(
                ValidationError(
                    code=CFG010,
                    path=path_str,
                    field=field_name,
                    message=f"severity multiplier must be > 0 and <= {MAX_SEVERITY_MULTIPLIER}, got {val}",
                )
            )


def _validate_category_risk_block(
    raw: dict[str, Any],
    path_str: str,
    errors: list[ValidationError],
) -> None:
    """Validate the ``category_risk`` nested mapping in adcheck.yaml."""
    risks = raw.get("category_risk")
    if risks is None:
        return
    if not isinstance(risks, dict):
        errors.append(
            ValidationError(
                code=CFG009,
                path=path_str,
                field="category_risk",
                message="`category_risk` must be a mapping",
            )
        )
        return

    for name in sorted(risks, key=str):
        field_name = f"category_risk.{name}"
        val = risks[name]
        if not _is_name(name):
            errors.append(_name_type_error(path_str, field_name))
        if not _is_number(val):
            errors.append(_number_type_error(path_str, field_name))
        elif not MIN_CATEGORY_RISK <= val <= MAX_CATEGORY_RISK:
            errors.append(
                ValidationError(
                    code=CFG007,
                    path=path_str,
                    field=field_name,
                    message=f"category risk must be between {MIN_CATEGORY_RISK} and {MAX_CATEGORY_RISK}, got {val}",
                )
            )


def _is_name(value: Any) -> bool:
    return isinstance(value, str) and bool(value.strip())


def _is_number(value: Any) -> bool:
    """Real numbers only: booleans, NaN and infinities are rejected."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    return not isinstance(value, float) or math.isfinite(value)


def _name_type_error(path_str: str, field_name: str) -> ValidationError:
    return ValidationError(
        code=CFG005,
        path=path_str,
        field=field_name,
        message=f"invalid key type for `{field_name}`",
        hint="expected a non-empty string key",
    )


def _number_type_error(path_str: str, field_name: str) -> ValidationError:
    return ValidationError(
        code=CFG005,
        path=path_str,
        field=field_name,
        message=f"invalid type for `{field_name}`",
        hint="expected a finite number",
    )


def _suggest_key(unknown: str, allowed: frozenset[str]) -> str:
    """Return a 'did you mean ...' hint for a close key match, or empty string."""
    matches = difflib.get_close_matches(unknown, sorted(allowed), n=1, cutoff=0.6)
    if matches:
        return f"did you mean `{matches[0]}`?"
    return ""
