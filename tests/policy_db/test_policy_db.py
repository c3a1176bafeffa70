"""Tests for policy database loading and lookups."""

from __future__ import annotations

from pathlib import Path

import pytest

from adcheck.exceptions import PolicyDatabaseError
from adcheck.policy_db import (
    PlatformOverride,
    PolicyRule,
    apply_platform_overrides,
    build_detector_brief,
    bundled_policy_db_path,
    get_category_info,
    get_platform_banned,
    get_prescreen_claims,
    load_policy_db,
)


@pytest.fixture(scope="module")
def bundled_db():
    return load_policy_db()


def test_bundled_database_loads(bundled_db) -> None:
    assert bundled_policy_db_path().is_file()
    assert {rule.id for rule in bundled_db.base_rules} >= {"POL-1", "POL-4", "POL-5"}
    assert "Results may vary" in bundled_db.required_disclaimers
    assert "guaranteed results" in bundled_db.prohibited_phrases


def test_apply_platform_overrides_changes_severity_without_mutating(bundled_db) -> None:
    rules = bundled_db.base_rules
    before = {rule.id: rule.severity for rule in rules}

    overridden = {rule.id: rule for rule in apply_platform_overrides(rules, " META ", bundled_db.platform_overrides)}

    assert before["POL-4"] == "warning"
    assert overridden["POL-4"].severity == "critical"
    assert overridden["POL-1"].severity == before["POL-1"]
    assert {rule.id: rule.severity for rule in rules} == before


def test_apply_platform_overrides_unknown_platform_is_identity() -> None:
    rules = (PolicyRule(id="R-1", severity="info", title="t"),)
    overrides = {"meta": PlatformOverride(rule_severities={"R-1": "critical"})}

    assert apply_platform_overrides(rules, "snapchat", overrides) == rules
    assert apply_platform_overrides(rules, None, overrides) == rules


def test_get_category_info_is_case_insensitive(bundled_db) -> None:
    category = get_category_info(bundled_db, "WEIGHT LOSS")

    assert category is not None
    assert category.name == "Weight loss"
    assert category.regulated is True
    assert category.requires_prescreen is True
    assert get_category_info(bundled_db, "widgets") is None
    assert get_category_info(bundled_db, None) is None


def test_platform_banned_terms(bundled_db) -> None:
    assert "lose weight fast" in get_platform_banned(bundled_db, "Meta")
    assert get_platform_banned(bundled_db, "snapchat") == ()


def test_prescreen_claims(bundled_db) -> None:
    slugs = [claim.slug for claim in get_prescreen_claims(bundled_db)]

    assert "weight-loss-amount" in slugs


def test_detector_brief_combines_lookups(bundled_db) -> None:
    brief = build_detector_brief(bundled_db, "tiktok", "Alcohol")
    payload = brief.to_dict()

    assert payload["platform"] == "tiktok"
    assert payload["category"] == {"name": "Alcohol", "regulated": True, "requires_prescreen": False}
    assert payload["bannedTerms"] == ["detox tea cure"]
    severities = {rule["id"]: rule["severity"] for rule in payload["rules"]}
    assert severities["POL-5"] == "critical"
    assert payload["requiredDisclaimers"] == list(bundled_db.required_disclaimers)


def test_load_custom_json_database(tmp_path: Path) -> None:
    path = tmp_path / "db.json"
    path.write_text(
        '{"base_rules": [{"id": "R-1", "severity": "warning", "title": "Claims", "pattern": ["cure"]}],'
        ' "platform_overrides": {"Google": {"R-1": {"severity": "critical"}}}}',
        encoding="utf-8",
    )

    database = load_policy_db(path)

    assert database.base_rules == (PolicyRule(id="R-1", severity="warning", title="Claims", patterns=("cure",)),)
    assert database.platform_overrides["google"].rule_severities["R-1"] == "critical"
    assert database.product_categories == ()


@pytest.mark.parametrize(
    ("content", "expected_match"),
    [
        ("base_rules: [\n", "Invalid YAML"),
        ("- one\n", "mapping"),
        ("product_categories: []\n", "base_rules"),
        ("base_rules:\n  - {id: R-1, severity: blocker, title: t}\n", r"base_rules\.0\.severity"),
        ("base_rules: []\nextra: 1\n", "extra"),
        ("base_rules: []\nplatform_overrides:\n  meta:\n    R-1: {severity: high}\n", r"platform_overrides\.meta\.R-1"),
    ],
)
def test_invalid_database_raises(tmp_path: Path, content: str, expected_match: str) -> None:
    path = tmp_path / "db.yaml"
    path.write_text(content, encoding="utf-8")

    with pytest.raises(PolicyDatabaseError, match=expected_match):
        load_policy_db(path)


def test_missing_database_raises(tmp_path: Path) -> None:
    with pytest.raises(PolicyDatabaseError, match="Cannot read"):
        load_policy_db(tmp_path / "absent.yaml")
