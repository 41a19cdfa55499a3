"""Project structure rules."""

from __future__ import annotations

import re
from pathlib import PurePosixPath
from typing import List

from standards_checker.severity import Category, Severity

from . import NO_VIOLATION, CheckResult, Rule, posix, violation, when

RELATIVE_IMPORT = re.compile(r"import.*from\s+['\"]([^'\"]+)['\"]")


def check_folder_structure(content: str, file_path: str) -> CheckResult:
    path = posix(file_path)
    parts = path.split("/")
    proper = "src" in parts and len(parts) > 2
    return when(not proper and "/components/" in path and "index." not in path)


def check_src_structure(content: str, file_path: str) -> CheckResult:
    path = posix(file_path)
    is_root_file = "/" not in path or len(path.split("/")) <= 2
    return when(is_root_file and any(folder in path for folder in ("components", "utils", "types")))


def check_component_size(content: str, file_path: str) -> CheckResult:
    if not file_path.endswith((".tsx", ".jsx")):
        return NO_VIOLATION
    return when(len(content.split("\n")) > 200)


def check_circular_dependencies(content: str, file_path: str) -> CheckResult:
    current_dir = PurePosixPath(posix(file_path)).parent.name
    if not current_dir:
        return NO_VIOLATION
    for target in RELATIVE_IMPORT.findall(content):
        if target.startswith(("./", "../")) and current_dir in target:
            return violation()
    return NO_VIOLATION


def structure_rules() -> List[Rule]:
    return [
        Rule(
            name="Folder structure",
            check=check_folder_structure,
            message="Components should follow proper folder structure within src/",
            category=Category.STRUCTURE,
            severity=Severity.WARNING,
        ),
        Rule(
            name="Src structure",
            check=check_src_structure,
            message="Files should be organized in proper src/ structure",
            category=Category.STRUCTURE,
            severity=Severity.WARNING,
        ),
        Rule(
            name="Component size limit",
            check=check_component_size,
            message="Component is too large (>200 lines). Consider breaking it into smaller components.",
            category=Category.STRUCTURE,
            severity=Severity.WARNING,
        ),
        Rule(
            name="No circular dependencies",
            check=check_circular_dependencies,
            message="Potential circular dependency detected. Review import structure.",
            category=Category.STRUCTURE,
            severity=Severity.WARNING,
        ),
    ]
