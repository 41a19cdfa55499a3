"""TypeScript conventions."""

from __future__ import annotations

import re
from typing import List

from standards_checker.severity import Category, Severity

from . import NO_VIOLATION, CheckResult, Rule, regex_rule, violation, when

EXPORTED_FUNCTION_WITHOUT_TYPE = re.compile(r"export\s+(async\s+)?function\s+\w+\s*\([^)]*\)(?!\s*:)")
EXPORTED_ARROW_WITHOUT_TYPE = re.compile(r"export\s+const\s+\w+\s*=\s*(async\s*)?\([^)]*\)(?!\s*:)\s*=>")
GENERIC_LIST = re.compile(r"<([^>]+)>")
INTERFACE_NAME = re.compile(r"interface\s+(\w+)")
GENERIC_KEYWORDS = ("extends", "keyof")


def check_explicit_return_types(content: str, file_path: str) -> CheckResult:
    if not file_path.endswith((".ts", ".tsx")):
        return NO_VIOLATION
    return when(
        bool(EXPORTED_FUNCTION_WITHOUT_TYPE.search(content) or EXPORTED_ARROW_WITHOUT_TYPE.search(content))
    )


def is_invalid_generic(generic: str) -> bool:
    return (
        len(generic) > 1
        and not re.match(r"^[A-Z][A-Za-z]*$", generic)
        and not any(keyword in generic for keyword in GENERIC_KEYWORDS)
    )


def check_generic_naming(content: str, file_path: str) -> CheckResult:
    for group in GENERIC_LIST.findall(content):
        if any(is_invalid_generic(part.strip()) for part in group.split(",")):
            return violation()
    return NO_VIOLATION


def check_interface_naming(content: str, file_path: str) -> CheckResult:
    for name in INTERFACE_NAME.findall(content):
        if not name.endswith(("Props", "Type", "Config")) and not name.startswith("I"):
            return violation()
    return NO_VIOLATION


def typescript_rules() -> List[Rule]:
    return [
        regex_rule(
            "Prefer type over interface for unions",
            r"interface\s+\w+.*\{[\s\S]*?\|[\s\S]*?\}",
            'Use "type" instead of "interface" for union types',
            category=Category.TYPESCRIPT,
            severity=Severity.WARNING,
        ),
        Rule(
            name="Explicit return types for functions",
            check=check_explicit_return_types,
            message="Exported functions should have explicit return type annotations",
            category=Category.TYPESCRIPT,
            severity=Severity.WARNING,
        ),
        Rule(
            name="Proper generic naming",
            check=check_generic_naming,
            message="Generic type parameters should be single uppercase letters or PascalCase names",
            category=Category.TYPESCRIPT,
            severity=Severity.WARNING,
        ),
        Rule(
            name="Interface naming convention",
            check=check_interface_naming,
            message='Interfaces should be prefixed with "I" or suffixed with "Props", "Type", or "Config"',
            category=Category.TYPESCRIPT,
            severity=Severity.WARNING,
        ),
    ]
