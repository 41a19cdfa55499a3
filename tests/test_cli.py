import json

from standards_checker import cli

CLEAN_SOURCE = """/**
 * Format a date as an ISO day string.
 */
export function formatDate(date: Date): string {
  return date.toISOString().slice(0, 10);
}
"""


def _project(tmp_path, files):
    for relative, content in files.items():
        path = tmp_path / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
    return tmp_path


def test_cli_reports_var_declaration(tmp_path, capsys):
    root = _project(tmp_path, {"src/example.ts": "var x = 1;\n"})

    exit_code = cli.main(["--root", str(root)])

    captured = capsys.readouterr()
    assert "Scan Summary" in captured.out
    assert exit_code == 1
    report = (root / "frontend-standards.log").read_text(encoding="utf-8")
    assert "FRONTEND STANDARDS VALIDATION REPORT" in report
    assert "Rule: No var" in report
    assert "src/example.ts:1" in report


def test_cli_passes_on_clean_project(tmp_path, capsys):
    root = _project(tmp_path, {"src/utils/formatDate.ts": CLEAN_SOURCE})

    exit_code = cli.main(["--root", str(root)])

    captured = capsys.readouterr()
    assert exit_code == 0
    assert "Status    : PASS" in captured.out
    assert "ALL VALIDATIONS PASSED" in (root / "frontend-standards.log").read_text(encoding="utf-8")


def test_cli_generates_json_report(tmp_path, capsys):
    root = _project(tmp_path, {"src/example.ts": "var x = 1;\n"})
    output_path = tmp_path / "reports" / "scan.json"

    exit_code = cli.main(["--root", str(root), "--out", str(output_path), "--format", "json"])

    assert exit_code == 1
    data = json.loads(output_path.read_text(encoding="utf-8"))
    assert data["success"] is False
    assert data["statistics"]["errorsByRule"]["No var"] == 1
    assert data["project"]["zones"][0]["name"] == "."
    assert "Report written to" in capsys.readouterr().out


def test_cli_rule_can_be_disabled_by_config(tmp_path):
    root = _project(
        tmp_path,
        {
            "src/example.ts": "var x = 1;\n",
            "frontend-standards.yml": "rules:\n  No var: false\n",
        },
    )

    assert cli.main(["--root", str(root)]) == 0


def test_cli_invalid_config_exits_with_config_error(tmp_path, capsys):
    root = _project(tmp_path, {"src/example.ts": "const x = 1;\n", "broken.yml": "rules: [\n"})

    exit_code = cli.main(["--root", str(root), "--config", "broken.yml"])

    assert exit_code == cli.CONFIG_ERROR_EXIT_CODE
    assert "Configuration error" in capsys.readouterr().out
    assert not (root / "frontend-standards.log").exists()


def test_cli_skip_content(tmp_path):
    root = _project(tmp_path, {"src/example.ts": "var x = 1;\n"})

    assert cli.main(["--root", str(root), "--skip-content"]) == 0
