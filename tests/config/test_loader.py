"""Tests for configuration loading and policy table assembly."""

from __future__ import annotations

from pathlib import Path

import pytest

from adcheck.config import AdcheckConfig, load_config
from adcheck.engine import DEFAULT_POLICY_TABLES, compute_score
from adcheck.exceptions import ConfigError


def _write_config(tmp_path: Path, content: str) -> Path:
    config_path = tmp_path / "adcheck.yaml"
    config_path.write_text(content, encoding="utf-8")
    return config_path


def test_load_config_defaults_when_missing(tmp_path: Path) -> None:
    loaded = load_config(tmp_path)

    assert loaded == AdcheckConfig()
    assert loaded.policy_tables == DEFAULT_POLICY_TABLES


def test_load_config_explicit_missing_file_raises(tmp_path: Path) -> None:
    with pytest.raises(ConfigError, match="not found"):
        load_config(tmp_path, tmp_path / "nope.yaml")


def test_load_config_empty_file_is_defaults(tmp_path: Path) -> None:
    _write_config(tmp_path, "")

    assert load_config(tmp_path) == AdcheckConfig()


def test_partial_platform_inherits_bundled_profile(tmp_path: Path) -> None:
    _write_config(tmp_path, "platforms:\n  Meta:\n    strictness: 2.0\n")

    tables = load_config(tmp_path).policy_tables
    meta = tables.platforms["meta"]

    assert meta.strictness == 2.0
    assert meta.display_name == "Meta (Facebook/Instagram)"
    assert meta.severity_multiplier("critical") == 1.8
    assert "nudity" in meta.prohibited_categories
    assert tables.platforms["tiktok"] == DEFAULT_POLICY_TABLES.platforms["tiktok"]


def test_new_platform_starts_from_default_profile(tmp_path: Path) -> None:
    _write_config(
        tmp_path,
        "platforms:\n"
        "  snapchat:\n"
        "    display_name: Snapchat Ads\n"
        "    strictness: 1.3\n"
        "    severity_multipliers:\n"
        "      critical: 1.5\n"
        "    prohibited_categories: [Nudity]\n",
    )

    tables = load_config(tmp_path).policy_tables
    snapchat = tables.platforms["snapchat"]

    assert snapchat.display_name == "Snapchat Ads"
    assert dict(snapchat.severity_multipliers) == {"critical": 1.5, "warning": 1.0, "info": 1.0}
    assert snapchat.prohibited_categories == ("nudity",)
    assert compute_score([], "snapchat", "", tables=tables).meta.pass_threshold == 77


def test_new_platform_without_display_name_uses_key(tmp_path: Path) -> None:
    _write_config(tmp_path, "platforms:\n  pinterest: {}\n")

    assert load_config(tmp_path).policy_tables.platforms["pinterest"].display_name == "pinterest"


def test_default_key_replaces_fallback_profile(tmp_path: Path) -> None:
    _write_config(tmp_path, "platforms:\n  default:\n    strictness: 1.2\n")

    tables = load_config(tmp_path).policy_tables

    assert "default" not in tables.platforms
    assert tables.default_profile.display_name == "General Platform"
    assert compute_score([], "snapchat", "", tables=tables).meta.platform_strictness == 1.2


def test_category_risk_merges_over_bundled(tmp_path: Path) -> None:
    _write_config(tmp_path, "category_risk:\n  Firearms Accessories: 1.8\n  cosmetics: 1.2\n")

    tables = load_config(tmp_path).policy_tables

    assert tables.category_risk["firearms accessories"] == 1.8
    assert tables.category_risk["cosmetics"] == 1.2
    assert tables.category_risk["weight loss"] == 1.5


def test_ignore_default_tables_starts_empty(tmp_path: Path) -> None:
    _write_config(
        tmp_path,
        "ignore_default_tables: true\nplatforms:\n  meta:\n    strictness: 1.5\ncategory_risk:\n  alcohol: 1.1\n",
    )

    tables = load_config(tmp_path).policy_tables

    assert set(tables.platforms) == {"meta"}
    assert tables.platforms["meta"].display_name == "meta"
    assert dict(tables.platforms["meta"].severity_multipliers) == {"critical": 1.0, "warning": 1.0, "info": 1.0}
    assert dict(tables.category_risk) == {"alcohol": 1.1}


def test_policy_db_path_resolves_relative_to_config(tmp_path: Path) -> None:
    nested = tmp_path / "conf"
    nested.mkdir()
    config_path = nested / "custom.yaml"
    config_path.write_text("policy_db: ../policies.yaml\n", encoding="utf-8")

    loaded = load_config(tmp_path, config_path)

    assert loaded.policy_db == (tmp_path / "policies.yaml").resolve()


@pytest.mark.parametrize(
    ("yaml_content", "expected_match"),
    [
        ("platforms: [meta]\n", "platforms"),
        ("platforms:\n  meta:\n    strictness: 0.5\n", "strictness"),
        ("platforms:\n  meta:\n    strictness: high\n", "strictness"),
        ("platforms:\n  meta:\n    strictness: true\n", "strictness"),
        ("platforms:\n  meta:\n    strictness: .nan\n", "strictness"),
        ("platforms:\n  meta:\n    strictness: .inf\n", "finite"),
        ("platforms:\n  meta:\n    strictness: 1.0e+308\n", "strictness"),
        ("platforms:\n  meta:\n    severity_multipliers:\n      info: .inf\n", "finite"),
        ("platforms:\n  meta:\n    severity_multipliers:\n      info: 50\n", "info"),
        ("category_risk:\n  alcohol: .inf\n", "finite"),
        ("category_risk:\n  alcohol: 11\n", "alcohol"),
        ("category_risk:\n  '': 1.2\n", "category_risk"),
        ("platforms:\n  ' ': {strictness: 1.2}\n", "platforms"),
        ("platforms:\n  meta:\n    severity_multipliers:\n      blocker: 2\n", "blocker"),
        ("platforms:\n  meta:\n    severity_multipliers:\n      critical: 0\n", "critical"),
        ("platforms:\n  meta:\n    prohibited_categories: nudity\n", "prohibited_categories"),
        ("platforms:\n  meta:\n    colour: blue\n", "colour"),
        ("platforms:\n  meta:\n    display_name: ''\n", "display_name"),
        ("category_risk:\n  alcohol: 0.9\n", "alcohol"),
        ("ignore_default_tables: maybe\n", "ignore_default_tables"),
        ("policy_db: 12\n", "policy_db"),
        ("strictness: 2\n", "strictness"),
        ("- a\n- b\n", "mapping"),
        ("platforms: {meta: [\n", "Invalid YAML"),
    ],
    ids=[
        "platforms_not_mapping",
        "strictness_below_one",
        "strictness_string",
        "strictness_bool",
        "strictness_nan",
        "strictness_inf",
        "strictness_huge",
        "multiplier_inf",
        "multiplier_above_max",
        "risk_inf",
        "risk_above_max",
        "risk_empty_key",
        "platform_blank_key",
        "unknown_severity",
        "zero_multiplier",
        "prohibited_not_list",
        "unknown_platform_key",
        "empty_display_name",
        "risk_below_one",
        "non_bool_ignore",
        "policy_db_not_string",
        "unknown_top_level_key",
        "top_level_list",
        "invalid_yaml",
    ],
)
def test_load_config_rejects_invalid_values(tmp_path: Path, yaml_content: str, expected_match: str) -> None:
    config_path = _write_config(tmp_path, yaml_content)

    with pytest.raises(ConfigError, match=expected_match):
        load_config(tmp_path, config_path)
