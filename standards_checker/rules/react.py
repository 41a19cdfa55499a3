"""React component conventions."""

from __future__ import annotations

import re
from typing import List

from standards_checker.severity import Category, Severity

from . import NO_VIOLATION, CheckResult, Rule, posix, regex_rule, violation, when

CLIENT_FEATURES = (
    "useState",
    "useEffect",
    "useCallback",
    "useMemo",
    "useRef",
    "onClick",
    "onChange",
    "onSubmit",
    "addEventListener",
    "window",
    "document",
    "localStorage",
    "sessionStorage",
)
USE_CLIENT = re.compile(r"['\"]use client['\"]")
MAP_TO_ELEMENT = re.compile(r"\.map\s*\(\s*\([^)]*\)\s*=>\s*<[^>]*>")
STYLED_COMPONENT = re.compile(r"const\s+([a-zA-Z_$][a-zA-Z0-9_$]*)\s*=\s*styled\.")
HOOK_DEPENDENCIES = re.compile(r"(?:useEffect|useCallback|useMemo)\s*\(\s*[^,]+,\s*\[([^\]]*)\]")


def check_client_directive(content: str, file_path: str) -> CheckResult:
    if "/app/" not in posix(file_path) or not file_path.endswith(".tsx"):
        return NO_VIOLATION
    uses_client_features = any(feature in content for feature in CLIENT_FEATURES)
    return when(uses_client_features and not USE_CLIENT.search(content))


def check_props_interface(content: str, file_path: str) -> CheckResult:
    if not file_path.endswith(".tsx") or "/components/" not in posix(file_path):
        return NO_VIOLATION
    defines_component = re.search(r"function\s+\w+\s*\(|const\s+\w+\s*=\s*\(", content)
    has_props_type = re.search(r"interface\s+\w*Props|type\s+\w*Props", content)
    return when(bool(defines_component) and not has_props_type)


def check_list_keys(content: str, file_path: str) -> CheckResult:
    return when(any("key=" not in match.group(0) for match in MAP_TO_ELEMENT.finditer(content)))


def check_styled_component_naming(content: str, file_path: str) -> CheckResult:
    if not file_path.endswith((".style.ts", ".style.tsx")):
        return NO_VIOLATION
    return when(
        any(not re.match(r"^[A-Z][a-zA-Z0-9]*$", name) for name in STYLED_COMPONENT.findall(content))
    )


def check_hook_dependency_completeness(content: str, file_path: str) -> CheckResult:
    for match in HOOK_DEPENDENCIES.finditer(content):
        if match.group(1).strip() == "" and len(match.group(0)) > 50:
            return violation()
    return NO_VIOLATION


def react_rules() -> List[Rule]:
    return [
        Rule(
            name="Client component directive",
            check=check_client_directive,
            message='Components with client-side features must include "use client" directive',
            category=Category.REACT,
            severity=Severity.ERROR,
        ),
        regex_rule(
            "Proper hook dependencies",
            r"use(Effect|Callback|Memo)\s*\(\s*[^,]+,\s*\[\s*\]",
            "useEffect, useCallback, and useMemo should include all dependencies in the dependency array",
            category=Category.REACT,
            severity=Severity.WARNING,
        ),
        Rule(
            name="Component props interface",
            check=check_props_interface,
            message="React components should define their props with TypeScript interfaces or types",
            category=Category.REACT,
            severity=Severity.WARNING,
        ),
        regex_rule(
            "Avoid React.FC",
            r"React\.FC|React\.FunctionComponent",
            "Avoid using React.FC, use regular function declaration or arrow function with explicit props typing",
            category=Category.REACT,
            severity=Severity.WARNING,
        ),
        Rule(
            name="Proper key prop in lists",
            check=check_list_keys,
            message="Elements in arrays should have a key prop",
            category=Category.REACT,
            severity=Severity.ERROR,
        ),
        Rule(
            name="Styled components naming",
            check=check_styled_component_naming,
            message="Styled components should use PascalCase naming (e.g., StyledButton, Container)",
            category=Category.REACT,
            severity=Severity.WARNING,
        ),
        Rule(
            name="Hook dependency completeness",
            check=check_hook_dependency_completeness,
            message="Hook dependency array may be missing dependencies. Ensure all used variables are included.",
            category=Category.REACT,
            severity=Severity.WARNING,
        ),
    ]
