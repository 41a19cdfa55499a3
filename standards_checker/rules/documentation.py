"""Documentation rules."""

from __future__ import annotations

import re
from typing import List

from standards_checker.severity import Category, Severity

from . import NO_VIOLATION, CheckResult, Rule, violation, when

FUNCTION_BLOCK = re.compile(r"function\s+\w+\([^)]*\)\s*\{[\s\S]*?\}")
COMMENT = re.compile(r"/\*\*[\s\S]*?\*/|//")
EXPORTED_FUNCTION = re.compile(r"export\s+(function|const\s+\w+\s*=\s*(async\s+)?function)")
TSDOC_BLOCK = re.compile(r"/\*\*[\s\S]*?@(param|returns|example)[\s\S]*?\*/")


def check_long_uncommented_function(content: str, file_path: str) -> CheckResult:
    for block in FUNCTION_BLOCK.findall(content):
        if len(block.split("\n")) > 10 and not COMMENT.search(block):
            return violation()
    return NO_VIOLATION


def check_tsdoc(content: str, file_path: str) -> CheckResult:
    return when(bool(EXPORTED_FUNCTION.search(content)) and not TSDOC_BLOCK.search(content))


def documentation_rules() -> List[Rule]:
    return [
        Rule(
            name="Missing comment in complex function",
            check=check_long_uncommented_function,
            message="Complex functions should have comments explaining their purpose",
            category=Category.DOCUMENTATION,
            severity=Severity.WARNING,
        ),
        Rule(
            name="Should have TSDoc comments",
            check=check_tsdoc,
            message="Exported functions should have TSDoc comments with @param and @returns",
            category=Category.DOCUMENTATION,
            severity=Severity.INFO,
        ),
    ]
