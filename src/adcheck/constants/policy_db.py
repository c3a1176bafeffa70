"""Policy database file names and JSON Schema."""

from __future__ import annotations

from typing import Any

BUNDLED_POLICY_DB_FILENAME: str = "policies.yaml"

_STRING_LIST: dict[str, Any] = {"type": "array", "items": {"type": "string"}}

POLICY_DB_SCHEMA: dict[str, Any] = {
    "$schema": "https://json-schema.org/draft/2020-12/schema",
    "type": "object",
    "required": ["base_rules"],
    "additionalProperties": False,
    "properties": {
        "base_rules": {
            "type": "array",
            "items": {
                "type": "object",
                "required": ["id", "severity", "title"],
                "additionalProperties": False,
                "properties": {
                    "id": {"type": "string", "minLength": 1},
                    "severity": {"enum": ["critical", "warning", "info"]},
                    "title": {"type": "string"},
                    "pattern": _STRING_LIST,
                },
            },
        },
        "platform_overrides": {
            "type": "object",
            "additionalProperties": {
                "type": "object",
                "properties": {"additional_banned": _STRING_LIST},
                "additionalProperties": {
                    "type": "object",
                    "required": ["severity"],
                    "properties": {"severity": {"enum": ["critical", "warning", "info"]}},
                },
            },
        },
        "product_categories": {
            "type": "array",
            "items": {
                "type": "object",
                "required": ["name"],
                "properties": {
                    "name": {"type": "string", "minLength": 1},
                    "regulated": {"type": "boolean"},
                    "requires_prescreen": {"type": "boolean"},
                },
            },
        },
        "claims_requiring_prescreen": {
            "type": "array",
            "items": {
                "type": "object",
                "required": ["id", "slug"],
                "properties": {
                    "id": {"type": "string"},
                    "slug": {"type": "string"},
                    "description": {"type": "string"},
                    "examples": _STRING_LIST,
                },
            },
        },
        "prohibited_phrases": _STRING_LIST,
        "required_disclaimers": _STRING_LIST,
    },
}
