"""File naming rules."""

from __future__ import annotations

from pathlib import PurePosixPath
from typing import List

from standards_checker.severity import Category, Severity

from . import NO_VIOLATION, CheckResult, Rule, posix, when


def _starts_lowercase(name: str) -> bool:
    return bool(name) and name[0] != name[0].upper()


def check_component_naming(content: str, file_path: str) -> CheckResult:
    path = PurePosixPath(posix(file_path))
    if "/components/" not in path.as_posix() or path.suffix not in (".tsx", ".jsx"):
        return NO_VIOLATION
    if path.stem == "index":
        return when(_starts_lowercase(path.parent.name))
    return when(_starts_lowercase(path.stem))


def check_hook_naming(content: str, file_path: str) -> CheckResult:
    if ".hook." not in file_path:
        return NO_VIOLATION
    base = PurePosixPath(posix(file_path)).name.split(".")[0]
    if not base:
        return NO_VIOLATION
    return when(not base.startswith("use") or (len(base) > 3 and not base[3].isupper()))


def check_type_naming(content: str, file_path: str) -> CheckResult:
    path = posix(file_path)
    if "/types/" not in path or not path.endswith(".type.ts"):
        return NO_VIOLATION
    name = PurePosixPath(path).name[: -len(".type.ts")]
    return when(bool(name) and name[0].isupper())


def naming_rules() -> List[Rule]:
    return [
        Rule(
            name="Component naming",
            check=check_component_naming,
            message=(
                "Component files should start with uppercase letter (PascalCase). "
                "For index.tsx files, the parent directory should be PascalCase."
            ),
            category=Category.NAMING,
            severity=Severity.ERROR,
        ),
        Rule(
            name="Hook naming",
            check=check_hook_naming,
            message='Hook files should follow "useHookName.hook.ts" pattern',
            category=Category.NAMING,
            severity=Severity.ERROR,
        ),
        Rule(
            name="Type naming",
            check=check_type_naming,
            message="Type files should be camelCase and end with .type.ts",
            category=Category.NAMING,
            severity=Severity.ERROR,
        ),
    ]
