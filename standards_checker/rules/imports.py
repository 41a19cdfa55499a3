"""Import statement rules."""

from __future__ import annotations

import re
from typing import List

from standards_checker.severity import Category, Severity

from . import NO_VIOLATION, CheckResult, Rule, posix, regex_rule, violation, when

EXTERNAL, ALIASED, RELATIVE = 0, 1, 2


def import_kind(line: str) -> int:
    if "from './" in line or "from '../" in line:
        return RELATIVE
    if "from '@/" in line or "from '~/" in line:
        return ALIASED
    return EXTERNAL


def check_import_order(content: str, file_path: str) -> CheckResult:
    imports = [line for line in content.split("\n") if line.strip().startswith("import")]
    if len(imports) < 2:
        return NO_VIOLATION
    last = EXTERNAL
    for line in imports:
        current = import_kind(line)
        if current < last:
            return violation()
        last = current
    return NO_VIOLATION


def check_deep_relative_imports(content: str, file_path: str) -> CheckResult:
    deep = re.search(r"from\s+['\"`]\.\./\.\./", content)
    return when(bool(deep) and "/src/" in posix(file_path))


def import_rules() -> List[Rule]:
    return [
        Rule(
            name="Import order",
            check=check_import_order,
            message="Imports should be ordered: external packages, internal aliases, relative imports",
            category=Category.STRUCTURE,
            severity=Severity.WARNING,
        ),
        Rule(
            name="Use absolute imports",
            check=check_deep_relative_imports,
            message="Use absolute imports (@/ or ~/) instead of deep relative imports (../../)",
            category=Category.IMPORTS,
            severity=Severity.WARNING,
        ),
        regex_rule(
            "No default and named imports mixed",
            r"import\s+\w+\s*,\s*\{[^}]+\}\s+from",
            "Prefer separate import statements for default and named imports for better readability",
            category=Category.IMPORTS,
            severity=Severity.INFO,
        ),
    ]
