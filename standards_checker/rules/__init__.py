"""Rule model and check-result types shared by the engine and rule modules."""

from __future__ import annotations

import re
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Iterable, List, Optional, Protocol, Tuple, Union

from standards_checker.severity import Category, Severity


class DetailKind(str, Enum):
    """How the engine should elaborate a single violation reported by a rule."""

    NONE = "none"
    SHADOWING = "shadowing"


@dataclass(frozen=True)
class ShadowingDetail:
    variable: str
    line: int


@dataclass(frozen=True)
class NoViolation:
    """The rule found nothing."""


@dataclass(frozen=True)
class SingleViolation:
    """The rule failed once for the file, without a line number unless a detail carries one."""

    detail: Optional[ShadowingDetail] = None


@dataclass(frozen=True)
class LineViolations:
    """The rule failed on each of the given 1-based lines."""

    lines: Tuple[int, ...]


CheckResult = Union[NoViolation, SingleViolation, LineViolations]

NO_VIOLATION = NoViolation()


def violation(detail: Optional[ShadowingDetail] = None) -> SingleViolation:
    return SingleViolation(detail=detail)


def when(condition: bool) -> CheckResult:
    return SingleViolation() if condition else NO_VIOLATION


def on_lines(lines: Iterable[int]) -> CheckResult:
    """Return a line result, or ``NO_VIOLATION`` when ``lines`` is empty."""

    collected = tuple(int(line) for line in lines)
    if not collected:
        return NO_VIOLATION
    return LineViolations(collected)


def normalize_result(raw: object) -> CheckResult:
    """Map whatever a check returned onto the tagged result type.

    Built-in rules return the tagged types directly. Rules written by users
    may still return ``True``/``False``/``None`` or a list of line numbers;
    those shapes are accepted here and nowhere else.
    """

    if isinstance(raw, (NoViolation, SingleViolation, LineViolations)):
        return raw
    if raw is None or raw is False:
        return NO_VIOLATION
    if raw is True:
        return SingleViolation()
    if isinstance(raw, (list, tuple)):
        return on_lines(raw)
    raise TypeError(f"Unsupported check result of type {type(raw).__name__}")


class RuleCheck(Protocol):
    """Callable implemented by every rule check."""

    def __call__(self, content: str, file_path: str) -> CheckResult:
        """Inspect raw file content and its path."""


@dataclass(frozen=True)
class Rule:
    """A named, categorized check plus its message."""

    name: str
    check: RuleCheck = field(compare=False)
    message: str
    category: Category = Category.CONTENT
    severity: Severity = Severity.ERROR
    detail_kind: DetailKind = DetailKind.NONE
    skip_in_basic_pass: bool = False

    def with_overrides(self, **changes: object) -> "Rule":
        return replace(self, **changes)


def regex_rule(
    name: str,
    pattern: str,
    message: str,
    *,
    category: Category = Category.CONTENT,
    severity: Severity = Severity.ERROR,
    per_line: bool = False,
    flags: int = 0,
) -> Rule:
    """Build a rule from a regular expression.

    With ``per_line`` each matching line is reported, otherwise a single
    match anywhere in the file produces one violation.
    """

    compiled = re.compile(pattern, flags)

    def check(content: str, file_path: str) -> CheckResult:
        if per_line:
            return on_lines(matching_lines(compiled, content))
        return violation() if compiled.search(content) else NO_VIOLATION

    return Rule(
        name=name,
        check=check,
        message=message,
        category=category,
        severity=severity,
    )


def matching_lines(pattern: "re.Pattern[str]", content: str) -> List[int]:
    return [index for index, line in enumerate(content.split("\n"), start=1) if pattern.search(line)]


def posix(file_path: str) -> str:
    """Normalise separators so path heuristics can use forward slashes."""

    return str(file_path).replace("\\", "/")


__all__ = [
    "CheckResult",
    "DetailKind",
    "LineViolations",
    "NO_VIOLATION",
    "NoViolation",
    "Rule",
    "RuleCheck",
    "ShadowingDetail",
    "SingleViolation",
    "matching_lines",
    "normalize_result",
    "on_lines",
    "posix",
    "regex_rule",
    "violation",
    "when",
]
