"""Core result data structures for the checker."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional, Tuple

from .severity import SEVERITY_ORDER, Category, Severity

FILE_VALIDATION_ERROR = "File validation error"


@dataclass
class Violation:
    """One reported instance of a rule failing for a file."""

    rule: str
    message: str
    file_path: str
    severity: Severity = Severity.ERROR
    category: Category = Category.CONTENT
    line: Optional[int] = None

    @property
    def location(self) -> str:
        if self.line is None:
            return self.file_path
        return f"{self.file_path}:{self.line}"

    @property
    def dedup_key(self) -> Tuple[str, str, Optional[int]]:
        return (self.file_path, self.rule, self.line)

    def to_dict(self) -> Dict[str, object]:
        data: Dict[str, object] = {
            "rule": self.rule,
            "message": self.message,
            "filePath": self.file_path,
            "severity": self.severity.value,
            "category": self.category.value,
        }
        if self.line is not None:
            data["line"] = self.line
        return data


def file_validation_error(file_path: str, detail: str) -> Violation:
    """Build the synthetic violation reported for a file that could not be validated."""

    return Violation(
        rule=FILE_VALIDATION_ERROR,
        message=f"Could not validate file: {detail}",
        file_path=file_path,
        severity=Severity.ERROR,
        category=Category.CONTENT,
    )


@dataclass
class ZoneResult:
    """Violations collected for one zone."""

    zone: str
    files_processed: int = 0
    violations: List[Violation] = field(default_factory=list)

    def count(self, severity: Severity) -> int:
        return sum(1 for violation in self.violations if violation.severity == severity)

    @property
    def errors_count(self) -> int:
        return self.count(Severity.ERROR)

    @property
    def warnings_count(self) -> int:
        return self.count(Severity.WARNING)

    def to_dict(self) -> Dict[str, object]:
        return {
            "zone": self.zone,
            "filesProcessed": self.files_processed,
            "errorsCount": self.errors_count,
            "warningsCount": self.warnings_count,
            "violations": [violation.to_dict() for violation in self.violations],
        }


@dataclass
class ScanResult:
    """Bundle per-zone results with the totals of a full scan."""

    zones: List[ZoneResult] = field(default_factory=list)
    processing_time_ms: float = 0.0

    def add_zone(self, zone_result: ZoneResult) -> None:
        self.zones.append(zone_result)

    def violations(self) -> Iterable[Violation]:
        for zone in self.zones:
            yield from zone.violations

    @property
    def total_files(self) -> int:
        return sum(zone.files_processed for zone in self.zones)

    @property
    def total_errors(self) -> int:
        return sum(zone.errors_count for zone in self.zones)

    @property
    def total_warnings(self) -> int:
        return sum(zone.warnings_count for zone in self.zones)

    @property
    def total_infos(self) -> int:
        return sum(zone.count(Severity.INFO) for zone in self.zones)

    @property
    def success(self) -> bool:
        return self.total_errors == 0

    def errors_by_rule(self) -> Dict[str, int]:
        counts: Dict[str, int] = {}
        for violation in self.violations():
            counts[violation.rule] = counts.get(violation.rule, 0) + 1
        return counts

    def errors_by_category(self) -> Dict[str, int]:
        counts: Dict[str, int] = {}
        for violation in self.violations():
            key = violation.category.value
            counts[key] = counts.get(key, 0) + 1
        return counts

    def zone_violations(self) -> Dict[str, List[Violation]]:
        return {zone.zone: list(zone.violations) for zone in self.zones}

    def exit_code(self) -> int:
        return max((violation.severity.exit_priority for violation in self.violations()), default=0)

    def to_dict(self) -> Dict[str, object]:
        return {
            "success": self.success,
            "totalFiles": self.total_files,
            "totalErrors": self.total_errors,
            "totalWarnings": self.total_warnings,
            "totalInfos": self.total_infos,
            "zones": [zone.to_dict() for zone in self.zones],
            "summary": {
                "errorsByCategory": self.errors_by_category(),
                "errorsByRule": self.errors_by_rule(),
                "processingTime": round(self.processing_time_ms, 2),
            },
        }


def format_summary_table(result: ScanResult, max_rules: int = 5) -> str:
    """Create a human-readable summary table for console output."""

    lines: List[str] = []
    lines.append("Scan Summary")
    lines.append("=" * 40)
    header = f"{'Severity':<10} | {'Count':>5}"
    lines.append(header)
    lines.append("-" * len(header))
    for severity in SEVERITY_ORDER:
        count = sum(zone.count(severity) for zone in result.zones)
        lines.append(f"{severity.value:<10} | {count:>5}")
    lines.append("-" * len(header))
    status = "PASS" if result.success else "FAIL"
    lines.append(f"Status    : {status}")
    lines.append(f"Files     : {result.total_files}")
    lines.append(f"Zones     : {len(result.zones)}")

    ranked = sorted(result.errors_by_rule().items(), key=lambda item: (-item[1], item[0]))
    if ranked:
        lines.append("")
        lines.append("Top Rules")
        lines.append("-" * 40)
        for rule, count in ranked[:max_rules]:
            lines.append(f"{count:>5}  {rule}")
    return "\n".join(lines)
