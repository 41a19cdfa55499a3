"""Rendering and bundle size rules."""

from __future__ import annotations

import re
from typing import List

from standards_checker.severity import Category, Severity

from . import NO_VIOLATION, CheckResult, Rule, posix, when

INLINE_HANDLER = re.compile(r"(?:onClick|onChange|onSubmit|onFocus|onBlur)\s*=\s*\{[^}]*(?:=>|\bfunction\b)")
OBJECT_LITERAL_PROP = re.compile(r"(?:style|className|data-\w+)\s*=\s*\{[^}]*\{[^}]*\}[^}]*\}")
LARGE_LIBRARY_IMPORTS = tuple(
    re.compile(pattern)
    for pattern in (
        r"import\s+.*\s+from\s+['\"`]lodash['\"`]",
        r"import\s+.*\s+from\s+['\"`]moment['\"`]",
        r"import\s+.*\s+from\s+['\"`]@mui/icons-material['\"`]",
    )
)


def _is_jsx_file(file_path: str) -> bool:
    return file_path.endswith((".tsx", ".jsx"))


def check_inline_handlers(content: str, file_path: str) -> CheckResult:
    if not _is_jsx_file(file_path):
        return NO_VIOLATION
    return when(bool(INLINE_HANDLER.search(content)))


def check_missing_memo(content: str, file_path: str) -> CheckResult:
    if not file_path.endswith(".tsx") or "/components/" not in posix(file_path):
        return NO_VIOLATION
    takes_props = re.search(r"function\s+\w+\s*\([^)]+\)", content) or re.search(
        r"const\s+\w+\s*=\s*\([^)]+\)\s*=>", content
    )
    memoized = re.search(r"React\.memo|memo\(", content)
    stateful = re.search(r"(useState|useEffect|useRef|useContext)", content)
    return when(bool(takes_props) and not memoized and not stateful)


def check_large_imports(content: str, file_path: str) -> CheckResult:
    return when(any(pattern.search(content) for pattern in LARGE_LIBRARY_IMPORTS))


def check_object_literal_props(content: str, file_path: str) -> CheckResult:
    if not _is_jsx_file(file_path):
        return NO_VIOLATION
    return when(bool(OBJECT_LITERAL_PROP.search(content)))


def performance_rules() -> List[Rule]:
    return [
        Rule(
            name="Avoid inline functions in JSX",
            check=check_inline_handlers,
            message="Avoid inline functions in JSX props, use useCallback or move to a method",
            category=Category.PERFORMANCE,
            severity=Severity.WARNING,
        ),
        Rule(
            name="Missing React.memo for pure components",
            check=check_missing_memo,
            message="Consider wrapping pure components with React.memo for better performance",
            category=Category.PERFORMANCE,
            severity=Severity.INFO,
        ),
        Rule(
            name="Large bundle imports",
            check=check_large_imports,
            message="Consider using specific imports or lighter alternatives for large libraries",
            category=Category.PERFORMANCE,
            severity=Severity.WARNING,
        ),
        Rule(
            name="Avoid re-renders with object literals",
            check=check_object_literal_props,
            message="Avoid passing object literals as props, use useMemo or move to constants",
            category=Category.PERFORMANCE,
            severity=Severity.WARNING,
        ),
    ]
