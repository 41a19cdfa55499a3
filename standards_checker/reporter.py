"""Render scan results as the text log and the JSON export."""

from __future__ import annotations

import json
import logging
from datetime import datetime, timezone
from pathlib import Path
from typing import Dict, List, Mapping, Optional, Sequence

from .aggregate import TOP_RULES_LIMIT, ReportData, SummaryItem, is_pass_message, process_zone_errors
from .checker import ScanOutcome
from .result import Violation

logger = logging.getLogger(__name__)

DEFAULT_REPORT_NAME = "frontend-standards.log"
REPORT_FORMATS = ("text", "json", "both")
RULE_WIDTH = 80
SECTION_WIDTH = 40

RECOMMENDATIONS = (
    "1. Focus on the most frequent violation types first",
    "2. Run validation in CI/CD to prevent regression",
    "3. Use pre-commit hooks for early detection",
    "4. Consider adding custom rules for project-specific needs",
)


def _relative(path: str, root: Path) -> str:
    try:
        return Path(path).relative_to(root).as_posix()
    except ValueError:
        return path


class Reporter:
    """Write the report files for one scan."""

    def __init__(self, root: Path, output_path: Optional[Path] = None) -> None:
        self.root = root
        self.output_path = output_path or root / DEFAULT_REPORT_NAME

    def report_data(self, outcome: ScanOutcome) -> ReportData:
        return process_zone_errors(outcome.zone_errors, summary_limit=TOP_RULES_LIMIT)

    # ------------------------------------------------------------------
    # Text
    # ------------------------------------------------------------------
    def format_text(self, outcome: ScanOutcome, data: ReportData, generated: Optional[datetime] = None) -> str:
        lines: List[str] = []
        self._header(lines, outcome, generated or datetime.now(timezone.utc))

        if data.total_errors == 0:
            lines.append("✅ ALL VALIDATIONS PASSED!")
            lines.append("")
            lines.append("Congratulations! Your project complies with all defined frontend standards.")
            if data.total_warnings or data.total_infos:
                self._secondary_summaries(lines, data)
            return "\n".join(lines)

        lines.append(
            f"SUMMARY: {data.total_errors} violations found across {len(data.errors_by_zone)} zones"
        )
        lines.append("")
        self._zone_results(lines, data)
        self._detailed_violations(lines, outcome.zone_errors)
        self._ranked(lines, "TOP VIOLATION TYPES:", data.summary)
        self._secondary_summaries(lines, data)
        lines.append("\n")
        lines.append("RECOMMENDATIONS:")
        lines.append("-" * SECTION_WIDTH)
        lines.extend(RECOMMENDATIONS)
        return "\n".join(lines)

    def _header(self, lines: List[str], outcome: ScanOutcome, generated: datetime) -> None:
        lines.append("=" * RULE_WIDTH)
        lines.append("FRONTEND STANDARDS VALIDATION REPORT")
        lines.append("=" * RULE_WIDTH)
        lines.append(f"Generated: {generated.isoformat()}")
        lines.append(f"Project: {self.root.name}")
        lines.append(f"Project Type: {outcome.project.type}")
        lines.append(f"Monorepo: {'Yes' if outcome.project.is_monorepo else 'No'}")
        lines.append("")

    def _zone_results(self, lines: List[str], data: ReportData) -> None:
        lines.append("RESULTS BY ZONE:")
        lines.append("-" * SECTION_WIDTH)
        for zone, errors in data.errors_by_zone.items():
            lines.append(f"\n📂 Zone: {zone}")
            lines.append(f"   Errors: {errors}")
            lines.append(f"   Warnings: {data.warnings_by_zone.get(zone, 0)}")
            lines.append(f"   Status: {'✅ PASSED' if errors == 0 else '❌ FAILED'}")
            oks = data.oks_by_zone.get(zone) or []
            if oks:
                lines.append(f"   OK: {', '.join(oks)}")

    def _detailed_violations(self, lines: List[str], zone_errors: Mapping[str, Sequence[Violation]]) -> None:
        lines.append("\n")
        lines.append("DETAILED VIOLATIONS:")
        lines.append("-" * SECTION_WIDTH)
        for zone, violations in zone_errors.items():
            actual = [violation for violation in violations if not is_pass_message(violation.message)]
            if not actual:
                continue
            lines.append(f"\n📂 Zone: {zone}")
            for violation in actual:
                location = _relative(violation.file_path, self.root)
                if violation.line is not None:
                    location = f"{location}:{violation.line}"
                lines.append(f"\n  📄 {location}")
                lines.append(f"     Rule: {violation.rule}")
                lines.append(f"     Severity: {violation.severity.value}")
                lines.append(f"     Issue: {violation.message}")
                lines.append("     " + "-" * 50)

    def _ranked(self, lines: List[str], title: str, items: Sequence[SummaryItem]) -> None:
        if not items:
            return
        lines.append("\n")
        lines.append(title)
        lines.append("-" * SECTION_WIDTH)
        for item in items:
            lines.append(f"  {item.rule}: {item.count} ({item.percentage}%)")

    def _secondary_summaries(self, lines: List[str], data: ReportData) -> None:
        self._ranked(lines, f"WARNINGS ({data.total_warnings}):", data.warning_summary)
        self._ranked(lines, f"INFO SUGGESTIONS ({data.total_infos}):", data.info_summary)

    # ------------------------------------------------------------------
    # JSON
    # ------------------------------------------------------------------
    def to_dict(self, outcome: ScanOutcome, data: ReportData) -> Dict[str, object]:
        payload = outcome.result.to_dict()
        payload["project"] = {
            "root": str(self.root),
            "type": outcome.project.type,
            "isMonorepo": outcome.project.is_monorepo,
            "zones": [zone.to_dict() for zone in outcome.project.zones],
        }
        payload["statistics"] = data.to_dict()
        payload["rulesApplied"] = len(outcome.config.rules)
        return payload

    def format_json(self, outcome: ScanOutcome, data: ReportData) -> str:
        return json.dumps(self.to_dict(outcome, data), indent=2, ensure_ascii=False)

    # ------------------------------------------------------------------
    # Output
    # ------------------------------------------------------------------
    def text_path(self) -> Path:
        if self.output_path.suffix == ".json":
            return self.output_path.with_suffix(".log")
        return self.output_path

    def json_path(self) -> Path:
        return self.output_path.with_suffix(".json")

    def write(self, outcome: ScanOutcome, report_format: str = "text") -> List[Path]:
        """Write the report files and return their paths."""

        if report_format not in REPORT_FORMATS:
            raise ValueError(f"Unknown report format {report_format!r}")
        data = self.report_data(outcome)
        written: List[Path] = []
        if report_format in ("text", "both"):
            written.append(self._save(self.text_path(), self.format_text(outcome, data)))
        if report_format in ("json", "both"):
            written.append(self._save(self.json_path(), self.format_json(outcome, data)))
        return written

    def _save(self, path: Path, content: str) -> Path:
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(content, encoding="utf-8")
        except OSError as exc:
            logger.error("Failed to save report: %s", exc)
            raise
        logger.info("Report saved to: %s", path)
        return path
