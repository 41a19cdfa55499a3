"""Severity and category definitions for rule violations."""

from __future__ import annotations

from enum import Enum


class Severity(str, Enum):
    """Enumerate the supported severity levels for violations."""

    ERROR = "error"
    WARNING = "warning"
    INFO = "info"

    @property
    def exit_priority(self) -> int:
        """Return an integer ranking to drive exit code decisions."""

        ordering = {
            Severity.ERROR: 1,
            Severity.WARNING: 0,
            Severity.INFO: 0,
        }
        return ordering[self]

    @classmethod
    def parse(cls, value: object) -> "Severity":
        """Accept either a member or its lowercase/uppercase string value."""

        if isinstance(value, Severity):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            choices = ", ".join(member.value for member in cls)
            raise ValueError(f"Unknown severity {value!r} (expected one of: {choices})") from None


SEVERITY_ORDER = (Severity.ERROR, Severity.WARNING, Severity.INFO)


class Category(str, Enum):
    """Rule categories; used for grouping statistics, never for ordering."""

    STRUCTURE = "structure"
    NAMING = "naming"
    CONTENT = "content"
    STYLE = "style"
    DOCUMENTATION = "documentation"
    TYPESCRIPT = "typescript"
    REACT = "react"
    IMPORTS = "imports"
    PERFORMANCE = "performance"
    ACCESSIBILITY = "accessibility"

    @classmethod
    def parse(cls, value: object) -> "Category":
        if isinstance(value, Category):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            choices = ", ".join(member.value for member in cls)
            raise ValueError(f"Unknown category {value!r} (expected one of: {choices})") from None
