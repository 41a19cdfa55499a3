from standards_checker.aggregate import (
    SummaryItem,
    generate_summary,
    is_pass_message,
    is_test_file,
    process_zone_errors,
)
from standards_checker.result import Violation
from standards_checker.severity import Category, Severity


def _violation(rule, file_path="src/a.ts", severity=Severity.ERROR, message="Broken", category=Category.CONTENT):
    return Violation(rule=rule, message=message, file_path=file_path, severity=severity, category=category)


def test_generate_summary_with_no_total_is_empty():
    assert generate_summary({}, 0) == []
    assert generate_summary({"a": 1}, 0) == []


def test_generate_summary_ranks_and_formats_percentages():
    assert generate_summary({"b": 1, "a": 2}, 3) == [
        SummaryItem("a", 2, "66.7"),
        SummaryItem("b", 1, "33.3"),
    ]


def test_generate_summary_keeps_first_seen_order_for_ties_and_limits():
    summary = generate_summary({"x": 1, "y": 3, "z": 1}, 5, limit=2)

    assert [item.rule for item in summary] == ["y", "x"]
    assert summary[1].percentage == "20.0"


def test_test_files_and_pass_markers():
    assert is_test_file("src/a.test.ts")
    assert is_test_file("src\\__tests__\\a.ts")
    assert not is_test_file("src/attest.ts")
    assert is_pass_message("✅ Folder structure")
    assert is_pass_message("Present: index.tsx")
    assert not is_pass_message("Missing index.tsx")


def test_process_zone_errors_buckets_by_severity_rule_and_zone():
    zone_errors = {
        "apps/web": [
            _violation("No var"),
            _violation("No var", file_path="src/b.ts"),
            _violation("No console.log", severity=Severity.WARNING),
            _violation("Should have TSDoc comments", severity=Severity.INFO, category=Category.DOCUMENTATION),
        ],
        "apps/admin": [_violation("Component naming", category=Category.NAMING)],
    }

    data = process_zone_errors(zone_errors)

    assert (data.total_errors, data.total_warnings, data.total_infos) == (3, 1, 1)
    assert data.total_violations == 5
    assert data.errors_by_rule == {"No var": 2, "Component naming": 1}
    assert data.warnings_by_rule == {"No console.log": 1}
    assert data.infos_by_rule == {"Should have TSDoc comments": 1}
    assert data.errors_by_category == {"content": 2, "naming": 1}
    assert data.errors_by_zone == {"apps/web": 2, "apps/admin": 1}
    assert data.warnings_by_zone == {"apps/web": 1, "apps/admin": 0}
    assert data.total_checked_by_zone == {"apps/web": 4, "apps/admin": 1}
    assert data.summary[0] == SummaryItem("No var", 2, "66.7")


def test_test_files_are_excluded_but_pass_markers_are_kept():
    zone_errors = {
        ".": [
            _violation("No var", file_path="src/a.test.ts"),
            _violation("Structure", file_path="src/a.test.ts", message="✅ Folder structure"),
            _violation("Structure", message="Present: index.tsx"),
        ]
    }

    data = process_zone_errors(zone_errors)

    assert data.total_errors == 0
    assert data.errors_by_zone == {".": 0}
    assert data.oks_by_zone == {".": ["Folder structure", "index.tsx"]}


def test_summary_limit_applies_to_every_summary():
    zone_errors = {".": [_violation(f"Rule {index}") for index in range(20)]}

    data = process_zone_errors(zone_errors, summary_limit=15)

    assert len(data.summary) == 15
    assert data.to_dict()["summary"][0] == {"rule": "Rule 0", "count": 1, "percentage": "5.0"}
