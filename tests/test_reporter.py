import json
from datetime import datetime, timezone
from pathlib import Path

import pytest

from standards_checker.checker import ScanOutcome
from standards_checker.config import StandardsConfig
from standards_checker.project import ProjectInfo, Zone
from standards_checker.reporter import Reporter
from standards_checker.result import ScanResult, Violation, ZoneResult
from standards_checker.severity import Category, Severity

GENERATED = datetime(2024, 1, 2, 3, 4, 5, tzinfo=timezone.utc)


def _outcome(root, violations):
    result = ScanResult()
    result.add_zone(ZoneResult(zone=".", files_processed=2, violations=violations))
    project = ProjectInfo(root=root, type="react", is_monorepo=False, zones=[Zone(".", root, "react")])
    return ScanOutcome(
        result=result,
        project=project,
        config=StandardsConfig(),
        zone_errors=result.zone_violations(),
    )


def _text(root, violations):
    reporter = Reporter(root)
    outcome = _outcome(root, violations)
    return reporter.format_text(outcome, reporter.report_data(outcome), generated=GENERATED)


def test_text_report_sections(tmp_path):
    violations = [
        Violation("No var", "Use let or const instead of var", str(tmp_path / "src" / "a.ts"), line=3),
        Violation("No console.log", "Remove console statements", str(tmp_path / "src" / "a.ts"),
                  severity=Severity.WARNING, line=5),
        Violation("Should have TSDoc comments", "Add TSDoc", str(tmp_path / "src" / "b.ts"),
                  severity=Severity.INFO, category=Category.DOCUMENTATION),
    ]

    text = _text(tmp_path, violations)

    assert text.startswith("=" * 80 + "\nFRONTEND STANDARDS VALIDATION REPORT")
    assert "Generated: 2024-01-02T03:04:05+00:00" in text
    assert "Project Type: react" in text
    assert "SUMMARY: 1 violations found across 1 zones" in text
    assert "RESULTS BY ZONE:" in text
    assert "Status: ❌ FAILED" in text
    assert "📄 src/a.ts:3" in text
    assert "Severity: error" in text
    assert "TOP VIOLATION TYPES:" in text
    assert "  No var: 1 (100.0%)" in text
    assert "WARNINGS (1):" in text
    assert "INFO SUGGESTIONS (1):" in text
    assert "RECOMMENDATIONS:" in text


def test_text_report_when_everything_passes(tmp_path):
    warning = Violation("No console.log", "Remove console statements", "src/a.ts", severity=Severity.WARNING)

    text = _text(tmp_path, [warning])

    assert "✅ ALL VALIDATIONS PASSED!" in text
    assert "WARNINGS (1):" in text
    assert "RECOMMENDATIONS:" not in text
    assert "SUMMARY:" not in text


def test_json_report_combines_result_and_statistics(tmp_path):
    reporter = Reporter(tmp_path)
    outcome = _outcome(tmp_path, [Violation("No var", "Use let or const", "src/a.ts", line=1)])

    data = json.loads(reporter.format_json(outcome, reporter.report_data(outcome)))

    assert data["success"] is False
    assert data["totalErrors"] == 1
    assert data["zones"][0]["violations"][0] == {
        "rule": "No var",
        "message": "Use let or const",
        "filePath": "src/a.ts",
        "severity": "error",
        "category": "content",
        "line": 1,
    }
    assert data["statistics"]["summary"] == [{"rule": "No var", "count": 1, "percentage": "100.0"}]
    assert data["project"]["type"] == "react"
    assert data["rulesApplied"] == len(outcome.config.rules)


def test_report_paths(tmp_path):
    assert Reporter(tmp_path).text_path() == tmp_path / "frontend-standards.log"
    assert Reporter(tmp_path).json_path() == tmp_path / "frontend-standards.json"
    assert Reporter(tmp_path, Path("out/report.json")).text_path() == Path("out/report.log")


def test_write_both_formats(tmp_path, caplog):
    caplog.set_level("INFO")
    reporter = Reporter(tmp_path, tmp_path / "reports" / "standards.log")

    written = reporter.write(_outcome(tmp_path, []), "both")

    assert written == [tmp_path / "reports" / "standards.log", tmp_path / "reports" / "standards.json"]
    assert all(path.is_file() for path in written)
    assert "Report saved to:" in caplog.text


def test_write_rejects_unknown_format(tmp_path):
    with pytest.raises(ValueError):
        Reporter(tmp_path).write(_outcome(tmp_path, []), "xml")
