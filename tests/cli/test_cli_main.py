"""Tests for CLI parser and subcommands."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import pytest

from adcheck.cli.handlers import evaluate_exit_code, extract_violations
from adcheck.cli.main import build_parser, main
from adcheck.exceptions import ViolationInputError
from adcheck.reporting import build_report


def _write_input(tmp_path: Path, payload: Any) -> Path:
    path = tmp_path / "violations.json"
    path.write_text(json.dumps(payload), encoding="utf-8")
    return path


def test_build_parser_accepts_score_flags(tmp_path: Path) -> None:
    parser = build_parser()

    args = parser.parse_args(
        ["score", "-i", str(tmp_path / "v.json"), "-p", "meta", "-k", "weight loss", "-o", str(tmp_path / "r.json")]
    )

    assert args.command == "score"
    assert args.input == tmp_path / "v.json"
    assert args.platform == "meta"
    assert args.category == "weight loss"
    assert args.output == tmp_path / "r.json"
    assert args.fail_on_status is False


def test_build_parser_requires_command() -> None:
    with pytest.raises(SystemExit):
        build_parser().parse_args([])


def test_score_prints_json_report(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    input_path = _write_input(tmp_path, [{"severity": "info", "confidence": 0.3}])

    exit_code = main(["score", "-i", str(input_path), "-r", str(tmp_path), "--json"])

    assert exit_code == 0
    payload = json.loads(capsys.readouterr().out)
    assert payload["complianceScore"] == 99
    assert payload["status"] == "pass"
    assert payload["meta"]["scoring"]["platform"] == "General Platform"


def test_score_accepts_oversized_integer_confidence(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    input_path = tmp_path / "huge.json"
    input_path.write_text('[{"severity": "info", "confidence": 1' + "0" * 400 + "}]", encoding="utf-8")

    exit_code = main(["score", "-i", str(input_path), "-r", str(tmp_path), "--json"])

    assert exit_code == 0
    assert json.loads(capsys.readouterr().out)["complianceScore"] == 95


def test_score_reads_context_from_input_object(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    input_path = _write_input(
        tmp_path,
        {
            "platform": "meta",
            "productCategory": "Weight loss",
            "violations": [{"severity": "critical", "category": "Prohibited claims", "confidence": 0.98}],
        },
    )

    exit_code = main(["score", "-i", str(input_path), "-r", str(tmp_path), "--json", "--fail-on-status"])

    assert exit_code == 1
    payload = json.loads(capsys.readouterr().out)
    assert payload["complianceScore"] == 0
    assert payload["meta"]["productCategory"] == "Weight loss"
    assert payload["meta"]["scoring"]["weightedPenalties"] == 198


def test_score_cli_flags_override_input_context(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    input_path = _write_input(tmp_path, {"platform": "meta", "violations": []})

    main(["score", "-i", str(input_path), "-r", str(tmp_path), "-p", "youtube", "--json"])

    payload = json.loads(capsys.readouterr().out)
    assert payload["meta"]["scoring"]["platform"] == "YouTube"


def test_score_writes_report_and_renders_summary(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    input_path = _write_input(tmp_path, {"textViolations": [{"severity": "warning"}], "imageViolations": []})
    out_path = tmp_path / "reports" / "report.json"

    exit_code = main(
        ["score", "-i", str(input_path), "-r", str(tmp_path), "-p", "tiktok", "-o", str(out_path), "--no-color"]
    )

    assert exit_code == 0
    written = json.loads(out_path.read_text(encoding="utf-8"))
    # 20 * 0.5 (merge default) * 1.3 * 1.0 * 1.0 * 1.4
    assert written["meta"]["scoring"]["weightedPenalties"] == 18
    assert written["status"] == "pass"
    assert "Compliance summary" in capsys.readouterr().out


def test_score_applies_config_tables(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    (tmp_path / "adcheck.yaml").write_text("category_risk:\n  widgets: 2.0\n", encoding="utf-8")
    input_path = _write_input(tmp_path, [{"severity": "warning"}])

    exit_code = main(
        ["score", "-i", str(input_path), "-r", str(tmp_path), "-k", "widgets", "--json", "--fail-on-status"]
    )

    assert exit_code == 1
    assert json.loads(capsys.readouterr().out)["complianceScore"] == 60


def test_score_invalid_config_exits_2(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    (tmp_path / "adcheck.yaml").write_text("platforms:\n  meta:\n    strictness: 0.1\n", encoding="utf-8")
    input_path = _write_input(tmp_path, [])

    assert main(["score", "-i", str(input_path), "-r", str(tmp_path)]) == 2
    assert "CFG006" in capsys.readouterr().err


@pytest.mark.parametrize("content", ["{not json", '"a string"', '{"violations": {}}', '{"textViolations": 3}'])
def test_score_bad_input_exits_2(tmp_path: Path, content: str, capsys: pytest.CaptureFixture[str]) -> None:
    input_path = tmp_path / "violations.json"
    input_path.write_text(content, encoding="utf-8")

    assert main(["score", "-i", str(input_path), "-r", str(tmp_path)]) == 2
    assert "Configuration error" in capsys.readouterr().err


def test_score_missing_input_exits_2(tmp_path: Path) -> None:
    assert main(["score", "-i", str(tmp_path / "missing.json"), "-r", str(tmp_path)]) == 2


def test_validate_config_reports_success(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["validate-config", "-r", str(tmp_path)]) == 0
    assert "Configuration is valid." in capsys.readouterr().out


def test_validate_config_reports_errors(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    (tmp_path / "adcheck.yaml").write_text("platfroms: {}\n", encoding="utf-8")

    assert main(["validate-config", "-r", str(tmp_path)]) == 2
    assert "did you mean `platforms`?" in capsys.readouterr().err


def test_platforms_lists_profiles(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["platforms", "-r", str(tmp_path)]) == 0

    output = capsys.readouterr().out
    assert "Meta (Facebook/Instagram) | strictness 1.5" in output
    assert "(default)" in output
    assert "weight loss" in output


def test_brief_prints_detector_context(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["brief", "-p", "meta", "-k", "weight loss", "-r", str(tmp_path)]) == 0

    payload = json.loads(capsys.readouterr().out)
    assert payload["category"]["requires_prescreen"] is True
    assert "lose weight fast" in payload["bannedTerms"]


def test_brief_invalid_policy_db_exits_2(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    db_path = tmp_path / "db.yaml"
    db_path.write_text("rules: []\n", encoding="utf-8")

    assert main(["brief", "-p", "meta", "-k", "x", "-r", str(tmp_path), "--policy-db", str(db_path)]) == 2
    assert "Policy database error" in capsys.readouterr().err


def test_extract_violations_shapes() -> None:
    bare, bare_context = extract_violations([{"id": "a"}])
    wrapped, context = extract_violations({"violations": [{"id": "b"}], "platform": "meta", "productCategory": 3})

    assert [v.id for v in bare] == ["a"]
    assert bare_context == {}
    assert [v.id for v in wrapped] == ["b"]
    assert context == {"platform": "meta"}
    with pytest.raises(ViolationInputError):
        extract_violations(5)


def test_evaluate_exit_code() -> None:
    failing = build_report([{"severity": "critical"}], "meta", "")
    passing = build_report([], "meta", "")

    assert evaluate_exit_code(failing, fail_on_status=True) == 1
    assert evaluate_exit_code(failing, fail_on_status=False) == 0
    assert evaluate_exit_code(passing, fail_on_status=True) == 0


def test_score_fixture_with_both_detectors(
    mock_check_path: Path,
    tmp_path: Path,
    capsys: pytest.CaptureFixture[str],
) -> None:
    exit_code = main(["score", "-i", str(mock_check_path), "-r", str(tmp_path), "--json", "--fail-on-status"])

    assert exit_code == 1
    payload = json.loads(capsys.readouterr().out)
    assert [v["id"] for v in payload["violations"]] == ["POL-1-001", "IMG-BA-1"]
    # 198.45 for the claim plus 20 * 0.65 * 1.3 * 1.5 * 1.5 * 1.5 = 57.04 for the prohibited imagery
    assert payload["meta"]["scoring"]["weightedPenalties"] == 255
    assert payload["complianceScore"] == 0
