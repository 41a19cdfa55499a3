"""Fold per-zone violation lists into report statistics."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Mapping, Optional, Sequence

from .result import Violation
from .severity import Severity

PASS_MARKERS = ("✅", "Present:")
TEST_FILE_MARKERS = (".test.", ".spec.", "__tests__")
TOP_RULES_LIMIT = 15


def is_test_file(file_path: str) -> bool:
    path = file_path.replace("\\", "/")
    return any(marker in path for marker in TEST_FILE_MARKERS)


def is_pass_message(message: str) -> bool:
    return message.startswith(PASS_MARKERS)


def pass_text(message: str) -> str:
    for marker in PASS_MARKERS:
        if message.startswith(marker):
            return message[len(marker):].strip()
    return message


@dataclass(frozen=True)
class SummaryItem:
    rule: str
    count: int
    percentage: str

    def to_dict(self) -> Dict[str, object]:
        return {"rule": self.rule, "count": self.count, "percentage": self.percentage}


def generate_summary(
    by_rule: Mapping[str, int],
    total: int,
    limit: Optional[int] = None,
) -> List[SummaryItem]:
    """Rank rules by count with their share of ``total`` as a one-decimal string."""

    if total <= 0 or not by_rule:
        return []
    ranked = sorted(by_rule.items(), key=lambda item: -item[1])
    if limit is not None:
        ranked = ranked[:limit]
    return [
        SummaryItem(rule=rule, count=count, percentage=f"{count / total * 100:.1f}")
        for rule, count in ranked
    ]


@dataclass
class ReportData:
    """Statistics built once per scan from the zone violation lists."""

    total_errors: int = 0
    total_warnings: int = 0
    total_infos: int = 0
    errors_by_rule: Dict[str, int] = field(default_factory=dict)
    warnings_by_rule: Dict[str, int] = field(default_factory=dict)
    infos_by_rule: Dict[str, int] = field(default_factory=dict)
    errors_by_category: Dict[str, int] = field(default_factory=dict)
    errors_by_zone: Dict[str, int] = field(default_factory=dict)
    warnings_by_zone: Dict[str, int] = field(default_factory=dict)
    infos_by_zone: Dict[str, int] = field(default_factory=dict)
    oks_by_zone: Dict[str, List[str]] = field(default_factory=dict)
    total_checked_by_zone: Dict[str, int] = field(default_factory=dict)
    summary: List[SummaryItem] = field(default_factory=list)
    warning_summary: List[SummaryItem] = field(default_factory=list)
    info_summary: List[SummaryItem] = field(default_factory=list)

    @property
    def total_violations(self) -> int:
        return self.total_errors + self.total_warnings + self.total_infos

    def to_dict(self) -> Dict[str, object]:
        return {
            "totalErrors": self.total_errors,
            "totalWarnings": self.total_warnings,
            "totalInfos": self.total_infos,
            "errorsByRule": dict(self.errors_by_rule),
            "warningsByRule": dict(self.warnings_by_rule),
            "infosByRule": dict(self.infos_by_rule),
            "errorsByCategory": dict(self.errors_by_category),
            "errorsByZone": dict(self.errors_by_zone),
            "warningsByZone": dict(self.warnings_by_zone),
            "infosByZone": dict(self.infos_by_zone),
            "oksByZone": {zone: list(oks) for zone, oks in self.oks_by_zone.items()},
            "totalCheckedByZone": dict(self.total_checked_by_zone),
            "summary": [item.to_dict() for item in self.summary],
            "warningSummary": [item.to_dict() for item in self.warning_summary],
            "infoSummary": [item.to_dict() for item in self.info_summary],
        }


def _bump(counts: Dict[str, int], key: str) -> None:
    counts[key] = counts.get(key, 0) + 1


def process_zone_errors(
    zone_errors: Mapping[str, Sequence[Violation]],
    summary_limit: Optional[int] = None,
) -> ReportData:
    """Bucket violations by severity, rule, category and zone.

    Violations from test files only contribute their pass markers. Pass
    markers never count as failures.
    """

    data = ReportData()
    by_severity = {
        Severity.ERROR: (data.errors_by_rule, data.errors_by_zone),
        Severity.WARNING: (data.warnings_by_rule, data.warnings_by_zone),
        Severity.INFO: (data.infos_by_rule, data.infos_by_zone),
    }

    for zone, violations in zone_errors.items():
        data.errors_by_zone[zone] = 0
        data.warnings_by_zone[zone] = 0
        data.infos_by_zone[zone] = 0
        data.oks_by_zone[zone] = []
        data.total_checked_by_zone[zone] = 0

        for violation in violations:
            if is_pass_message(violation.message):
                data.oks_by_zone[zone].append(pass_text(violation.message))
                continue
            if is_test_file(violation.file_path):
                continue

            data.total_checked_by_zone[zone] += 1
            by_rule, by_zone = by_severity[violation.severity]
            _bump(by_rule, violation.rule)
            by_zone[zone] += 1
            if violation.severity is Severity.ERROR:
                data.total_errors += 1
                _bump(data.errors_by_category, violation.category.value)
            elif violation.severity is Severity.WARNING:
                data.total_warnings += 1
            else:
                data.total_infos += 1

    data.summary = generate_summary(data.errors_by_rule, data.total_errors, summary_limit)
    data.warning_summary = generate_summary(data.warnings_by_rule, data.total_warnings, summary_limit)
    data.info_summary = generate_summary(data.infos_by_rule, data.total_infos, summary_limit)
    return data
