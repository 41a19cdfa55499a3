"""Content and style rules over raw file text."""

from __future__ import annotations

import re
from typing import Dict, List

from standards_checker.severity import Category, Severity
from standards_checker.validators import find_unused_variables

from . import (
    NO_VIOLATION,
    CheckResult,
    DetailKind,
    Rule,
    ShadowingDetail,
    matching_lines,
    on_lines,
    posix,
    regex_rule,
    violation,
    when,
)

URL_PATTERN = re.compile(r"https?://[^\s\"'`]+")
URL_EXEMPT_PATH = re.compile(
    r"(config|setup|mock|__tests__|\.test\.|\.spec\.|instrumentation|sentry|jest\.setup|jest\.config)"
)
ANY_TYPE = re.compile(r":\s*any\b|<any>|Array<any>|Promise<any>|\bas\s+any\b")
CONSOLE_CALL = re.compile(r"console\.(log|warn|error|info|debug)")
OUTER_DECLARATION = re.compile(r"^(?:export\s+)?(?:const|let|var|function)\s+([a-zA-Z_$][a-zA-Z0-9_$]*)")
INNER_DECLARATION = re.compile(r"^\s+(?:const|let|var)\s+([a-zA-Z_$][a-zA-Z0-9_$]*)\b")


def check_console(content: str, file_path: str) -> CheckResult:
    return on_lines(matching_lines(CONSOLE_CALL, content))


def check_any_type(content: str, file_path: str) -> CheckResult:
    if "declare" in content:
        return NO_VIOLATION
    for line in content.split("\n"):
        stripped = line.strip()
        if stripped.startswith(("//", "*")):
            continue
        if ANY_TYPE.search(line):
            return violation()
    return NO_VIOLATION


def check_next_image(content: str, file_path: str) -> CheckResult:
    if not file_path.endswith((".tsx", ".jsx")):
        return NO_VIOLATION
    has_img = re.search(r"<img\s", content, re.IGNORECASE)
    has_next_image = re.search(r"import.*Image.*from.*next/image", content)
    return when(bool(has_img) and not has_next_image)


def check_hardcoded_urls(content: str, file_path: str) -> CheckResult:
    if URL_EXEMPT_PATH.search(posix(file_path)):
        return NO_VIOLATION
    if not URL_PATTERN.search(content):
        return NO_VIOLATION
    for line in content.split("\n"):
        match = URL_PATTERN.search(line)
        if match and re.search(r"//|/\*", line[: match.start()]):
            return NO_VIOLATION
    return violation()


def check_promise_chains(content: str, file_path: str) -> CheckResult:
    return when(bool(re.search(r"\.then\s*\(", content)) and not re.search(r"async|await", content))


def check_shadowing(content: str, file_path: str) -> CheckResult:
    """Report the first block-level declaration reusing a top-level name."""

    outer: Dict[str, int] = {}
    for index, line in enumerate(content.split("\n"), start=1):
        match = OUTER_DECLARATION.match(line)
        if match:
            outer.setdefault(match.group(1), index)
            continue
        match = INNER_DECLARATION.match(line)
        if match and match.group(1) in outer:
            return violation(ShadowingDetail(variable=match.group(1), line=index))
    return NO_VIOLATION


def check_unused_variables(content: str, file_path: str) -> CheckResult:
    return on_lines(find_unused_variables(content, file_path))


def check_style_export(content: str, file_path: str) -> CheckResult:
    if ".style." not in file_path:
        return NO_VIOLATION
    return when(not re.search(r"export\s+const\s+\w+Styles\s*=", content))


def content_rules() -> List[Rule]:
    return [
        Rule(
            name="No console.log",
            check=check_console,
            message="Remove console statements before committing to production",
            category=Category.CONTENT,
            severity=Severity.WARNING,
        ),
        regex_rule(
            "No var",
            r"\bvar\s+",
            "Use let or const instead of var",
            category=Category.CONTENT,
            severity=Severity.ERROR,
            per_line=True,
        ),
        regex_rule(
            "No inline styles",
            r"style\s*=\s*\{",
            "Avoid inline styles, use CSS classes or styled components",
            category=Category.CONTENT,
            severity=Severity.WARNING,
        ),
        Rule(
            name="No any type",
            check=check_any_type,
            message='Avoid using "any" type. Use specific types or unknown instead',
            category=Category.TYPESCRIPT,
            severity=Severity.ERROR,
        ),
        Rule(
            name="Next.js Image optimization",
            check=check_next_image,
            message="Use Next.js Image component instead of <img> for better performance",
            category=Category.PERFORMANCE,
            severity=Severity.WARNING,
        ),
        regex_rule(
            "No alert",
            r"\balert\s*\(",
            "The use of alert() is not allowed. Use proper notifications or toast messages instead.",
            category=Category.CONTENT,
            severity=Severity.ERROR,
        ),
        Rule(
            name="No hardcoded URLs",
            check=check_hardcoded_urls,
            message="No hardcoded URLs allowed. Use environment variables or constants.",
            category=Category.CONTENT,
            severity=Severity.ERROR,
        ),
        Rule(
            name="Must use async/await",
            check=check_promise_chains,
            message="Prefer async/await over .then() for better readability and error handling.",
            category=Category.CONTENT,
            severity=Severity.WARNING,
        ),
        regex_rule(
            "No jQuery",
            r"\$\s*\(|jQuery",
            "jQuery is not allowed. Use modern JavaScript, React, or other framework methods instead.",
            category=Category.CONTENT,
            severity=Severity.ERROR,
        ),
        Rule(
            name="No variable shadowing",
            check=check_shadowing,
            message="Rename the inner variable to avoid confusion with the outer one.",
            category=Category.CONTENT,
            severity=Severity.WARNING,
            detail_kind=DetailKind.SHADOWING,
        ),
        Rule(
            name="No unused variables",
            check=check_unused_variables,
            message="Variable is declared but never used. (@typescript-eslint/no-unused-vars rule)",
            category=Category.CONTENT,
            severity=Severity.WARNING,
            skip_in_basic_pass=True,
        ),
    ]


def style_rules() -> List[Rule]:
    return [
        Rule(
            name="Style naming",
            check=check_style_export,
            message='Style objects should end with "Styles" suffix',
            category=Category.STYLE,
            severity=Severity.WARNING,
        ),
    ]
