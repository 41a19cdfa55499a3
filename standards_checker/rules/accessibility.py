"""Accessibility heuristics for JSX markup."""

from __future__ import annotations

import re
from typing import List, Optional

from standards_checker.severity import Category, Severity

from . import NO_VIOLATION, CheckResult, Rule, violation, when

BUTTON_TAG = re.compile(r"<button[^>]*>", re.IGNORECASE)
INPUT_TAG = re.compile(r"<input[^>]*type=['\"`](?!hidden)[^'\"`]*['\"`][^>]*>", re.IGNORECASE)
LINK_TAG = re.compile(r"<a[^>]*href[^>]*>", re.IGNORECASE)
IMG_TAG = re.compile(r"<img[^>]*>", re.IGNORECASE)
LOW_CONTRAST = (
    re.compile(r"#[a-fA-F0-9]{6}.*#[a-fA-F0-9]{6}.*background.*color"),
    re.compile(r"color.*#ccc|#ddd|#eee", re.IGNORECASE),
    re.compile(r"background.*#999|#aaa|#bbb", re.IGNORECASE),
)


def _has_aria_name(tag: str) -> bool:
    return "aria-label=" in tag or "aria-labelledby=" in tag


def _inner_text(content: str, match: "re.Match[str]", closing: str) -> Optional[str]:
    end = content.find(closing, match.start())
    if end == -1:
        return None
    return content[match.end():end].strip()


def check_button_names(content: str, file_path: str) -> CheckResult:
    for match in BUTTON_TAG.finditer(content):
        if _has_aria_name(match.group(0)):
            continue
        text = _inner_text(content, match, "</button>")
        if text is not None and not text:
            return violation()
    return NO_VIOLATION


def check_input_labels(content: str, file_path: str) -> CheckResult:
    for match in INPUT_TAG.finditer(content):
        tag = match.group(0)
        if not _has_aria_name(tag) and "id=" not in tag:
            return violation()
    return NO_VIOLATION


def check_link_names(content: str, file_path: str) -> CheckResult:
    for match in LINK_TAG.finditer(content):
        if _has_aria_name(match.group(0)):
            continue
        text = _inner_text(content, match, "</a>")
        if text is not None and len(text) < 3:
            return violation()
    return NO_VIOLATION


def check_image_alt(content: str, file_path: str) -> CheckResult:
    return when(any("alt=" not in match.group(0) for match in IMG_TAG.finditer(content)))


def check_focus_management(content: str, file_path: str) -> CheckResult:
    if not file_path.endswith((".tsx", ".jsx")):
        return NO_VIOLATION
    has_dialogs = re.search(r"modal|dialog|popup", content, re.IGNORECASE)
    manages_focus = re.search(r"focus\(\)|autoFocus|tabIndex", content)
    return when(bool(has_dialogs) and not manages_focus)


def check_color_contrast(content: str, file_path: str) -> CheckResult:
    return when(any(pattern.search(content) for pattern in LOW_CONTRAST))


def accessibility_rules() -> List[Rule]:
    return [
        Rule(
            name="Image alt text",
            check=check_image_alt,
            message="Images should have alt text for accessibility",
            category=Category.ACCESSIBILITY,
            severity=Severity.WARNING,
        ),
        Rule(
            name="Button missing accessible name",
            check=check_button_names,
            message="Buttons should have accessible names via text content, aria-label, or aria-labelledby",
            category=Category.ACCESSIBILITY,
            severity=Severity.ERROR,
        ),
        Rule(
            name="Form inputs missing labels",
            check=check_input_labels,
            message="Form inputs should have associated labels or aria-label attributes",
            category=Category.ACCESSIBILITY,
            severity=Severity.ERROR,
        ),
        Rule(
            name="Links missing accessible names",
            check=check_link_names,
            message="Links should have descriptive text content or aria-label attributes",
            category=Category.ACCESSIBILITY,
            severity=Severity.WARNING,
        ),
        Rule(
            name="Missing focus management",
            check=check_focus_management,
            message="Components with modals or dynamic content should manage focus for accessibility",
            category=Category.ACCESSIBILITY,
            severity=Severity.INFO,
        ),
        Rule(
            name="Color contrast considerations",
            check=check_color_contrast,
            message="Consider color contrast ratios for accessibility (WCAG AA: 4.5:1, AAA: 7:1)",
            category=Category.ACCESSIBILITY,
            severity=Severity.INFO,
        ),
    ]
